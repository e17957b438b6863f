"""Main API for deploy-details library."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .constants import CONTRACT_SCRIPTS, SCRIPT_SUFFIX
from .exceptions import ContractNotFoundError
from .parsers import load_deployment_record
from .paths import get_record_path
from .types import DeploymentRecord, TransactionEntry

logger = logging.getLogger(__name__)


def _check_name(contract_name: str) -> None:
    if not isinstance(contract_name, str) or not contract_name:
        raise ValueError("contract_name must be a non-empty string")


def _matching(record: DeploymentRecord, contract_name: str) -> List[TransactionEntry]:
    matches = [tx for tx in record.transactions if tx.contract_name == contract_name]
    logger.debug(
        "Found %d transaction(s) for contract '%s'", len(matches), contract_name
    )
    return matches


def extract_address(record: DeploymentRecord, contract_name: str) -> str:
    """
    Get the address of a contract from a deployment record.

    When the record holds several transactions for the same contract
    (e.g. repeated local deployment runs), the first one in document
    order wins.

    Args:
        record: Loaded deployment record
        contract_name: Contract name as written by the deploy toolchain

    Returns:
        Contract address string

    Raises:
        ValueError: If contract_name is empty
        ContractNotFoundError: If no transaction matches, or the first
            match carries no contract address
    """
    _check_name(contract_name)

    matches = _matching(record, contract_name)
    if not matches:
        raise ContractNotFoundError(
            f"Contract '{contract_name}' not found in deployment record"
            f"{_describe_source(record)}"
        )

    address = matches[0].contract_address
    if not address:
        raise ContractNotFoundError(
            f"First transaction for contract '{contract_name}' has no contract "
            f"address{_describe_source(record)}"
        )

    return address


def contract_addresses(record: DeploymentRecord, contract_name: str) -> List[str]:
    """
    Get every address recorded for a contract, in document order.

    Transactions without a contract address are skipped.

    Raises:
        ValueError: If contract_name is empty
    """
    _check_name(contract_name)
    return [
        tx.contract_address
        for tx in _matching(record, contract_name)
        if tx.contract_address
    ]


def contract_names(record: DeploymentRecord) -> List[str]:
    """
    Get distinct contract names in order of first appearance.

    Args:
        record: Loaded deployment record

    Returns:
        List of contract names (e.g., ["KYCToken", "VerificationRegistry"])
    """
    seen: List[str] = []
    for tx in record.transactions:
        if tx.contract_name and tx.contract_name not in seen:
            seen.append(tx.contract_name)
    return seen


def script_for_contract(contract_name: str) -> str:
    """
    Get the deploy script that produces a contract.

    Known contracts map to their script; anything else is assumed to be
    deployed by "<contract_name>.s.sol".
    """
    return CONTRACT_SCRIPTS.get(contract_name, f"{contract_name}{SCRIPT_SUFFIX}")


def resolve_address(
    contract_name: str,
    script: Optional[str] = None,
    chain_id: Optional[int] = None,
    broadcast_dir: Optional[Union[Path, str]] = None,
) -> str:
    """
    Locate, load and query the deployment record for a contract.

    Args:
        contract_name: Contract to look up
        script: Deploy script (defaults to the script for contract_name)
        chain_id: Chain id (defaults to 31337)
        broadcast_dir: Broadcast directory (defaults to ./broadcast)

    Returns:
        Contract address string

    Raises:
        RecordNotFoundError: If the record file does not exist
        MalformedRecordError: If the record cannot be parsed
        ContractNotFoundError: If the contract is not in the record
    """
    _check_name(contract_name)

    if script is None:
        script = script_for_contract(contract_name)

    record_path = get_record_path(script, chain_id, broadcast_dir)
    record = load_deployment_record(record_path)
    return extract_address(record, contract_name)


def _describe_source(record: DeploymentRecord) -> str:
    if record.source is None:
        return ""
    return f" at {record.source}"
