"""Path management utilities for deploy-details library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import (
    BROADCAST_DIR_ENV,
    CHAIN_ID_ENV,
    DEFAULT_BROADCAST_DIRNAME,
    DEFAULT_CHAIN_ID,
    RECORD_FILENAME,
)


def get_default_broadcast_dir() -> Path:
    """
    Get default broadcast directory.

    Returns:
        $DEPLOY_DETAILS_BROADCAST_DIR if set, otherwise ./broadcast
    """
    override = os.environ.get(BROADCAST_DIR_ENV)
    if override:
        return Path(override).absolute()
    return Path.cwd() / DEFAULT_BROADCAST_DIRNAME


def get_default_chain_id() -> int:
    """
    Get default chain id.

    Returns:
        $DEPLOY_DETAILS_CHAIN_ID if set, otherwise 31337 (local node)

    Raises:
        ValueError: If the environment override is not an integer
    """
    override = os.environ.get(CHAIN_ID_ENV)
    if override:
        try:
            return int(override)
        except ValueError:
            raise ValueError(
                f"${CHAIN_ID_ENV} must be an integer chain id, got {override!r}"
            ) from None
    return DEFAULT_CHAIN_ID


def get_record_path(
    script: str,
    chain_id: Optional[int] = None,
    broadcast_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """
    Get the deployment record path for a deploy script.

    Args:
        script: Deploy script file name, e.g. "KYCToken.s.sol"
        chain_id: Chain the script was broadcast to (defaults to 31337)
        broadcast_dir: Custom broadcast directory (defaults to ./broadcast)

    Returns:
        Absolute path to <broadcast_dir>/<script>/<chain_id>/run-latest.json
    """
    if broadcast_dir is None:
        broadcast_dir = get_default_broadcast_dir()
    else:
        broadcast_dir = Path(broadcast_dir).absolute()

    if chain_id is None:
        chain_id = get_default_chain_id()

    return broadcast_dir / script / str(chain_id) / RECORD_FILENAME
