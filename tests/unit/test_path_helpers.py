"""Unit tests for path helper functions."""

from pathlib import Path

import pytest

from deploy_details.constants import BROADCAST_DIR_ENV, CHAIN_ID_ENV
from deploy_details.paths import (
    get_default_broadcast_dir,
    get_default_chain_id,
    get_record_path,
)


class TestGetDefaultBroadcastDir:
    """Test the get_default_broadcast_dir function."""

    def test_returns_broadcast_in_working_directory(self, tmp_path: Path, monkeypatch):
        """Test that the default is ./broadcast."""
        monkeypatch.chdir(tmp_path)
        broadcast_dir = get_default_broadcast_dir()

        assert isinstance(broadcast_dir, Path)
        assert broadcast_dir.name == "broadcast"
        assert broadcast_dir.parent == Path.cwd()

    def test_returns_absolute_path(self):
        """Test that returned path is absolute."""
        assert get_default_broadcast_dir().is_absolute()

    def test_environment_override(self, tmp_path: Path, monkeypatch):
        """Test that $DEPLOY_DETAILS_BROADCAST_DIR wins over the default."""
        monkeypatch.setenv(BROADCAST_DIR_ENV, str(tmp_path / "out"))
        assert get_default_broadcast_dir() == tmp_path / "out"


class TestGetDefaultChainId:
    """Test the get_default_chain_id function."""

    def test_defaults_to_local_chain(self):
        """Test that the local anvil chain id is the default."""
        assert get_default_chain_id() == 31337

    def test_environment_override(self, monkeypatch):
        """Test that $DEPLOY_DETAILS_CHAIN_ID wins over the default."""
        monkeypatch.setenv(CHAIN_ID_ENV, "11155111")
        assert get_default_chain_id() == 11155111

    def test_invalid_environment_override(self, monkeypatch):
        """Test that a non-integer override raises ValueError."""
        monkeypatch.setenv(CHAIN_ID_ENV, "sepolia")

        with pytest.raises(ValueError, match=CHAIN_ID_ENV):
            get_default_chain_id()


class TestGetRecordPath:
    """Test the get_record_path function."""

    def test_default_layout(self, tmp_path: Path, monkeypatch):
        """Test the broadcast/<script>/<chain>/run-latest.json layout."""
        monkeypatch.chdir(tmp_path)
        path = get_record_path("KYCToken.s.sol")

        assert path == Path.cwd() / "broadcast" / "KYCToken.s.sol" / "31337" / "run-latest.json"

    def test_custom_chain_id(self, tmp_path: Path):
        """Test using a different chain id."""
        path = get_record_path("KYCToken.s.sol", chain_id=1, broadcast_dir=tmp_path)
        assert path.parent.name == "1"

    def test_custom_broadcast_dir_as_string(self, tmp_path: Path):
        """Test that the broadcast directory can be provided as string."""
        path = get_record_path("KYCToken.s.sol", broadcast_dir=str(tmp_path))
        assert path.parents[2] == tmp_path

    def test_relative_broadcast_dir_converted_to_absolute(self, tmp_path: Path, monkeypatch):
        """Test that a relative broadcast directory is made absolute."""
        monkeypatch.chdir(tmp_path)
        path = get_record_path("KYCToken.s.sol", broadcast_dir="contracts/broadcast")

        assert path.is_absolute()
        assert path.parents[2] == Path.cwd() / "contracts" / "broadcast"
