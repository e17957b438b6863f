"""Shared pytest fixtures for deploy-details tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List

import pytest

from deploy_details.constants import BROADCAST_DIR_ENV, CHAIN_ID_ENV
from deploy_details.types import DeploymentRecord, TransactionEntry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    monkeypatch.delenv(BROADCAST_DIR_ENV, raising=False)
    monkeypatch.delenv(CHAIN_ID_ENV, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def kyctoken_record_path(fixtures_dir: Path) -> Path:
    """Return path to the sample KYCToken broadcast record."""
    return fixtures_dir / "broadcast" / "KYCToken.s.sol" / "31337" / "run-latest.json"


@pytest.fixture
def registry_record_path(fixtures_dir: Path) -> Path:
    """Return path to the sample VerificationRegistry broadcast record (redeployed)."""
    return (
        fixtures_dir
        / "broadcast"
        / "VerificationRegistry.s.sol"
        / "31337"
        / "run-latest.json"
    )


@pytest.fixture
def project_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Create a project directory containing a copy of the sample broadcast tree."""
    shutil.copytree(fixtures_dir / "broadcast", tmp_path / "broadcast")
    return tmp_path


@pytest.fixture
def write_record(tmp_path: Path):
    """Return a helper that writes a broadcast document and returns its path."""

    def _write(transactions: List[Dict[str, Any]], name: str = "run-latest.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"transactions": transactions, "chain": 31337}))
        return path

    return _write


@pytest.fixture
def make_record():
    """Return a helper that builds a record from (contract_name, contract_address) pairs."""

    def _make(*pairs) -> DeploymentRecord:
        return DeploymentRecord(
            transactions=[
                TransactionEntry(contract_name=name, contract_address=address)
                for name, address in pairs
            ]
        )

    return _make
