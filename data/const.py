from models.network import Network

anvil = Network(
    name="anvil",
    rpc_url="http://127.0.0.1:8545",
    explorer="",
    native_token="ETH",
    key_env="PRIVATE_KEY_ANVIL",
    required_env=("PRIVATE_KEY_ANVIL",),
    contract_address="0x5FbDB2315678afecb367f032d93F642f64180aa3",
)

sepolia = Network(
    name="sepolia",
    rpc_url="https://sepolia.infura.io/v3/{api_key}",
    explorer="https://sepolia.etherscan.io",
    native_token="ETH",
    key_env="PRIVATE_KEY",
    required_env=("PRIVATE_KEY", "API_KEY_INFURA"),
)

# Public mainnet endpoint for the connectivity check
ethereum = Network(
    name="ethereum",
    rpc_url="https://ethereum-rpc.publicnode.com",
    explorer="https://etherscan.io",
    native_token="ETH",
)

CHAIN_MAPPING = {
    "anvil": anvil,
    "sepolia": sepolia,
}
