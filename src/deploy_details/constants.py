"""Configuration constants for deploy-details library."""

# Local anvil/hardhat node
DEFAULT_CHAIN_ID = 31337

# Layout written by `forge script --broadcast`:
#   broadcast/<Script>.s.sol/<chainId>/run-latest.json
DEFAULT_BROADCAST_DIRNAME = "broadcast"
RECORD_FILENAME = "run-latest.json"
SCRIPT_SUFFIX = ".s.sol"

# Deploy script that produces each contract of interest
CONTRACT_SCRIPTS = {
    "KYCToken": "KYCToken.s.sol",
    "VerificationRegistry": "VerificationRegistry.s.sol",
}

# Environment overrides
BROADCAST_DIR_ENV = "DEPLOY_DETAILS_BROADCAST_DIR"
CHAIN_ID_ENV = "DEPLOY_DETAILS_CHAIN_ID"
