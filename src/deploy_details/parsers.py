"""Deployment record parsers for deploy-details library."""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .exceptions import MalformedRecordError, RecordNotFoundError, SourceUnavailableError
from .types import DeploymentRecord, TransactionEntry

logger = logging.getLogger(__name__)


def load_deployment_record(file_path: Union[Path, str]) -> DeploymentRecord:
    """
    Load a broadcast deployment record from disk.

    Args:
        file_path: Path to run-latest.json (or any run-<timestamp>.json)

    Returns:
        DeploymentRecord with transactions in document order

    Raises:
        RecordNotFoundError: If the file does not exist
        MalformedRecordError: If the file is not a valid deployment record
        SourceUnavailableError: If the file exists but cannot be read
    """
    file_path = Path(file_path)
    logger.debug("Loading deployment record from %s", file_path)

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise RecordNotFoundError(
            f"Deployment record not found at {file_path}. "
            "Run the deploy script with --broadcast to create it."
        ) from None
    except OSError as e:
        raise SourceUnavailableError(
            f"Cannot read deployment record at {file_path}: {e}"
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedRecordError(
            f"Deployment record at {file_path} is not valid JSON: {e}"
        ) from e

    return parse_deployment_record(data, source=file_path)


def parse_deployment_record(
    data: Any, source: Optional[Path] = None
) -> DeploymentRecord:
    """
    Build a DeploymentRecord from a decoded broadcast document.

    Args:
        data: Decoded JSON document
        source: File the document was read from, used in error messages

    Returns:
        DeploymentRecord

    Raises:
        MalformedRecordError: If the document has no transaction list
    """
    where = source if source is not None else "<memory>"

    if not isinstance(data, Mapping):
        raise MalformedRecordError(
            f"Deployment record {where} must be a JSON object, "
            f"got {type(data).__name__}"
        )

    raw_transactions = data.get("transactions")
    if not isinstance(raw_transactions, list):
        raise MalformedRecordError(
            f"Deployment record {where} has no 'transactions' list"
        )

    transactions = []
    for index, raw in enumerate(raw_transactions):
        if not isinstance(raw, Mapping):
            raise MalformedRecordError(
                f"Transaction {index} in deployment record {where} is not an object"
            )
        transactions.append(parse_transaction(raw))

    logger.debug("Parsed %d transactions from %s", len(transactions), where)

    return DeploymentRecord(
        transactions=transactions,
        chain=data.get("chain"),
        timestamp=data.get("timestamp"),
        commit=data.get("commit"),
        source=source,
    )


def parse_transaction(data: Mapping[str, Any]) -> TransactionEntry:
    """
    Convert a broadcast transaction object to a TransactionEntry.

    Unknown fields are ignored; missing fields become None.

    Raises:
        MalformedRecordError: If contractName or contractAddress is not a string
    """
    for key in ("contractName", "contractAddress"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise MalformedRecordError(
                f"Transaction field '{key}' must be a string, got {type(value).__name__}"
            )

    return TransactionEntry(
        contract_name=data.get("contractName"),
        contract_address=data.get("contractAddress"),
        transaction_type=data.get("transactionType"),
        hash=data.get("hash"),
    )

