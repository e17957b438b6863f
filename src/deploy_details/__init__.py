"""
deploy-details: print contract addresses from Foundry deployment broadcast records
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ContractNotFoundError,
    DeploymentRecordError,
    MalformedRecordError,
    RecordNotFoundError,
    SourceUnavailableError,
)
from .extract import contract_addresses, contract_names, extract_address, resolve_address
from .parsers import load_deployment_record, parse_deployment_record
from .types import DeploymentRecord, TransactionEntry

try:
    __version__ = version("deploy-details")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "extract_address",
    "contract_addresses",
    "contract_names",
    "resolve_address",
    "load_deployment_record",
    "parse_deployment_record",
    "DeploymentRecord",
    "TransactionEntry",
    "DeploymentRecordError",
    "SourceUnavailableError",
    "RecordNotFoundError",
    "MalformedRecordError",
    "ContractNotFoundError",
]
