"""Custom exception classes for deploy-details library."""


class DeploymentRecordError(Exception):
    """Base exception for deployment-record errors."""

    pass


class SourceUnavailableError(DeploymentRecordError):
    """Raised when the deployment record cannot be located or parsed."""

    pass


class RecordNotFoundError(SourceUnavailableError, FileNotFoundError):
    """Raised when the deployment record file does not exist."""

    pass


class MalformedRecordError(SourceUnavailableError, ValueError):
    """Raised when the deployment record is not a valid broadcast document."""

    pass


class ContractNotFoundError(DeploymentRecordError, ValueError):
    """Raised when no transaction in the record deployed the requested contract."""

    pass
