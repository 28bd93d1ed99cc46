"""Configuration constants for inheritx-deploy."""

# Soroban RPC endpoints and passphrases for each deployable network.
# futurenet has no deployable profile; it only appears in FUNDING_NETWORKS.
NETWORK_CONFIG = {
    "testnet": {
        "rpc_url": "https://soroban-testnet.stellar.org:443",
        "passphrase": "Test SDF Network ; September 2015",
    },
    "mainnet": {
        "rpc_url": "https://soroban-rpc.mainnet.stellar.org:443",
        "passphrase": "Public Global Stellar Network ; September 2015",
    },
}

# Networks where friendbot funding may be requested
FUNDING_NETWORKS = frozenset({"testnet", "futurenet"})

DEFAULT_NETWORK = "testnet"

# Deploy order matters: the inheritance contract is initialized afterwards.
# Logical names double as the keys written to the state file.
CONTRACT_ARTIFACTS = [
    {
        "logical_name": "EXAMPLE_CONTRACT_ID",
        "package_name": "example-contract",
        "wasm_path": "target/wasm32v1-none/release/example_contract.wasm",
    },
    {
        "logical_name": "INHERITANCE_CONTRACT_ID",
        "package_name": "inheritance-contract",
        "wasm_path": "target/wasm32v1-none/release/inheritance_contract.wasm",
    },
]

INHERITANCE_CONTRACT_KEY = "INHERITANCE_CONTRACT_ID"
INITIALIZE_FUNCTION = "initialize_admin"

CONTRACTS_DIR_NAME = "contracts"
STATE_FILE_NAME = ".env"

DEFAULT_STELLAR_BIN = "stellar"
STELLAR_BIN_ENV = "STELLAR_BIN"
