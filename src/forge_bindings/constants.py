"""Configuration constants for forge-bindings library."""

# Local development chain (anvil / hardhat)
DEFAULT_CHAIN_ID = "31337"

# Foundry broadcast layout: broadcast/<script>/<chain_id>/run-latest.json
DEFAULT_DEPLOY_SCRIPT = "Deploy.s.sol"
BROADCAST_DIR_NAME = "broadcast"
RUN_FILE_NAME = "run-latest.json"

# Foundry build output: out/<Name>.sol/<Name>.json
ARTIFACTS_DIR_NAME = "out"

# Transaction kind tag for contract creation
CREATE_TRANSACTION_TYPE = "CREATE"

# Commit tag used when the broadcast file carries none
UNKNOWN_COMMIT = "unknown"

# Generated output layout
ABI_DIR_NAME = "abi"
BINDING_EXTENSION = ".ts"
ABI_EXTENSION = ".json"

# Environment variables read by load_config()
ENV_CONTRACT_ROOT = "FORGE_BINDINGS_CONTRACT_ROOT"
ENV_OUTPUT_DIR = "FORGE_BINDINGS_OUTPUT_DIR"
ENV_DEPLOY_SCRIPT = "FORGE_BINDINGS_DEPLOY_SCRIPT"
ENV_LOG_LEVEL = "FORGE_BINDINGS_LOG_LEVEL"
