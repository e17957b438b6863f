"""Data types and dataclasses for deploy-details library."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class TransactionEntry:
    """One transaction from a broadcast deployment record."""

    contract_name: Optional[str] = None  # e.g., "KYCToken"
    contract_address: Optional[str] = None  # None for non-deployment transactions
    transaction_type: Optional[str] = None  # "CREATE", "CALL", ...
    hash: Optional[str] = None


@dataclass(frozen=True)
class DeploymentRecord:
    """Transactions of a single deployment run, in document order."""

    transactions: List[TransactionEntry] = field(default_factory=list)

    # Optional metadata (from the broadcast document)
    chain: Optional[int] = None
    timestamp: Optional[int] = None
    commit: Optional[str] = None
    source: Optional[Path] = None  # File the record was loaded from
