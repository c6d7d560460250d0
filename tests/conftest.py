import pytest

from data.const import anvil
from models.network import NetworkConfig
from modules.logger import logger

# Anvil's first pre-funded dev account
ANVIL_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


@pytest.fixture
def anvil_config():
    return NetworkConfig(
        network=anvil,
        rpc_url=anvil.rpc_url,
        private_key=ANVIL_KEY,
        contract_address=anvil.contract_address,
    )


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    logger.remove(handler_id)
