import os
from collections.abc import Mapping

from web3 import Web3

from data.const import CHAIN_MAPPING
from models.network import NetworkConfig


class ConfigError(Exception):
    pass


def resolve_config(network_name: str, env: Mapping[str, str] = None) -> NetworkConfig:
    """
    Resolve RPC url, signing key and contract address for a network.

    Raises ConfigError before anything touches the network if the network
    is unknown or any of its required variables is missing.
    """
    if env is None:
        env = os.environ

    chain = CHAIN_MAPPING.get(network_name)
    if chain is None:
        choices = ", ".join(CHAIN_MAPPING)
        raise ConfigError(f"Unsupported network '{network_name}', choose one of: {choices}")

    missing = [name for name in chain.required_env if not env.get(name)]
    if missing:
        raise ConfigError(f"Please set your {' and '.join(missing)} in the .env file")

    address_env = f"DISTRIBUTOR_ADDRESS_{chain.name.upper()}"
    contract_address = env.get(address_env) or chain.contract_address
    if not contract_address:
        raise ConfigError(f"No distributor contract for {chain.name}, set {address_env}")
    if not Web3.is_address(contract_address):
        raise ConfigError(f"Invalid distributor address for {chain.name}: {contract_address}")

    return NetworkConfig(
        network=chain,
        rpc_url=chain.rpc_url.format(api_key=env.get("API_KEY_INFURA", "")),
        private_key=env[chain.key_env],
        contract_address=Web3.to_checksum_address(contract_address),
    )
