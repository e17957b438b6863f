"""
Command-line interface for deploy-details.

`deploy-details CONTRACT` prints the address of any contract in a broadcast
record. `kyctoken-deploy-details` and `registry-deploy-details` take no
arguments and print the KYCToken and VerificationRegistry addresses.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from .exceptions import ContractNotFoundError, DeploymentRecordError
from .extract import contract_addresses, extract_address, script_for_contract
from .log import setup_logging
from .parsers import load_deployment_record
from .paths import get_record_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="deploy-details",
    help="Print the address of a contract from a deployment broadcast record.",
    add_completion=False,
)
kyctoken_app = typer.Typer(name="kyctoken-deploy-details", add_completion=False)
registry_app = typer.Typer(name="registry-deploy-details", add_completion=False)


def _echo_addresses(
    contract_name: str,
    record_path: Path,
    all_addresses: bool = False,
) -> None:
    """Load the record and print the address(es), or exit 1 with a diagnostic."""
    try:
        record = load_deployment_record(record_path)
        if all_addresses:
            addresses = contract_addresses(record, contract_name)
            if not addresses:
                raise ContractNotFoundError(
                    f"Contract '{contract_name}' not found in deployment record at {record_path}"
                )
        else:
            addresses = [extract_address(record, contract_name)]
    except (DeploymentRecordError, ValueError) as e:
        logger.error("%s", e)
        raise typer.Exit(1)

    for address in addresses:
        typer.echo(address)


@app.command()
def main(
    contract: str = typer.Argument(..., help="Contract name, e.g. KYCToken"),
    script: Optional[str] = typer.Option(
        None,
        "--script",
        "-s",
        help="Deploy script directory name (defaults to <CONTRACT>.s.sol)",
    ),
    chain_id: Optional[int] = typer.Option(
        None,
        "--chain-id",
        "-c",
        help="Chain id the script was broadcast to (defaults to 31337)",
    ),
    broadcast_dir: Optional[Path] = typer.Option(
        None,
        "--broadcast-dir",
        "-b",
        help="Broadcast directory (defaults to ./broadcast)",
    ),
    record: Optional[Path] = typer.Option(
        None,
        "--record",
        "-r",
        help="Read this record file instead of locating it by convention "
        "(cannot be combined with --script, --chain-id or --broadcast-dir)",
    ),
    all_addresses: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Print every recorded address for the contract, oldest first",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Print the address of CONTRACT from its deployment record."""
    setup_logging(verbose)

    if record is not None and (
        script is not None or chain_id is not None or broadcast_dir is not None
    ):
        raise typer.BadParameter(
            "cannot be combined with --script, --chain-id or --broadcast-dir",
            param_hint="--record",
        )

    if record is None:
        try:
            record = get_record_path(
                script or script_for_contract(contract), chain_id, broadcast_dir
            )
        except ValueError as e:
            logger.error("%s", e)
            raise typer.Exit(1)

    _echo_addresses(contract, record, all_addresses)


@kyctoken_app.command()
def kyctoken():
    """Print the KYCToken address from the local deployment record."""
    setup_logging()
    _print_known("KYCToken")


@registry_app.command()
def registry():
    """Print the VerificationRegistry address from the local deployment record."""
    setup_logging()
    _print_known("VerificationRegistry")


def _print_known(contract_name: str) -> None:
    try:
        record_path = get_record_path(script_for_contract(contract_name))
    except ValueError as e:
        logger.error("%s", e)
        raise typer.Exit(1)
    _echo_addresses(contract_name, record_path)


if __name__ == "__main__":
    app()
