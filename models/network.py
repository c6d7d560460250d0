from dataclasses import dataclass, field


@dataclass
class Network:
    name: str
    rpc_url: str
    explorer: str
    native_token: str
    key_env: str = ""
    required_env: tuple[str, ...] = field(default_factory=tuple)
    contract_address: str | None = None


@dataclass
class NetworkConfig:
    network: Network
    rpc_url: str
    private_key: str = field(repr=False)
    contract_address: str
