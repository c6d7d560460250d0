import json
from decimal import Decimal
from pathlib import Path

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import HTTPProvider, Web3
from web3.contract import Contract
from web3.middleware import ExtraDataToPOAMiddleware

import settings
from models.network import NetworkConfig
from models.step import StepResult
from modules.logger import logger
from modules.utils import format_eth, to_wei, truncate

ABI_PATH = Path(__file__).resolve().parent.parent / "data" / "abi" / "BatchSepoliaDistributor.json"

with open(ABI_PATH) as file:
    DISTRIBUTOR_ABI = json.load(file)


class TransactionFailed(Exception):
    pass


class Distributor:
    def __init__(self, config: NetworkConfig, w3: Web3 = None):
        self.account: LocalAccount = Account.from_key(config.private_key)
        self.address = self.account.address
        self.chain = config.network
        self.contract_address = config.contract_address

        if w3 is None:
            w3 = Web3(HTTPProvider(config.rpc_url))
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        self.w3 = w3

        self.contract = self.get_contract(self.contract_address)

    def __str__(self):
        return f"Distributor(contract={self.contract_address}, sender={self.address})"

    def get_contract(self, address: str, abi: list[dict] = None) -> Contract:
        contract_address = Web3.to_checksum_address(address)
        if not abi:
            abi = DISTRIBUTOR_ABI

        return self.w3.eth.contract(address=contract_address, abi=abi)

    def get_tx_data(self, value: int = 0, **kwargs):
        """
        Build a transaction dict.
        """
        return {
            "chainId": self.w3.eth.chain_id,
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address),
            "value": value,
            **kwargs,
        }

    def get_gas(self, tx: dict, gwei_multiplier: float = settings.GWEI_MULTIPLIER) -> dict:
        """
        Populate tx with EIP-1559 gas parameters and estimate gas.
        """
        gas_price_legacy = self.w3.eth.gas_price
        max_priority_fee = self.w3.eth.max_priority_fee
        latest_block = self.w3.eth.get_block("latest")
        base_fee = int(
            max(gas_price_legacy, latest_block["baseFeePerGas"]) * gwei_multiplier
        )

        tx.pop("gasPrice", None)
        tx["maxFeePerGas"] = max_priority_fee + base_fee
        tx["maxPriorityFeePerGas"] = max_priority_fee

        if not tx.get("gas"):
            tx["gas"] = self.w3.eth.estimate_gas(tx)

        return tx

    def sign_tx(self, tx: dict):
        return self.w3.eth.account.sign_transaction(tx, private_key=self.account.key)

    def send_tx(self, tx: dict, tx_label: str = ""):
        """
        Sign, broadcast and block until the receipt arrives.

        Raises TransactionFailed if the transaction reverted.
        """
        if not tx.get("maxFeePerGas"):
            tx = self.get_gas(tx)

        signed_tx = self.sign_tx(tx)
        tx_hash = Web3.to_hex(self.w3.eth.send_raw_transaction(signed_tx.raw_transaction))

        if self.chain.explorer:
            logger.info(f"{tx_label} | {self.chain.explorer}/tx/{tx_hash}")
        else:
            logger.info(f"{tx_label} | {tx_hash}")

        tx_receipt = self.w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=settings.TX_TIMEOUT
        )

        if tx_receipt["status"] != 1:
            raise TransactionFailed(f"{tx_label} | Tx {tx_hash} reverted")

        logger.success(f"{tx_label} | Tx confirmed")
        return tx_receipt

    def build_call(self, function_name: str, *args) -> dict:
        function = getattr(self.contract.functions, function_name)
        return function(*args).build_transaction(self.get_tx_data())

    def set_distribution_amount(self, amount: int | float | Decimal) -> StepResult:
        try:
            tx = self.build_call("setDistributionAmount", to_wei(amount))
            self.send_tx(tx, tx_label=f"Set distribution amount to {amount} {self.chain.native_token}")
            logger.info(f"Distribution amount set to {amount} {self.chain.native_token}")
            return StepResult("set_distribution_amount", True)
        except Exception as err:
            logger.error(f"Failed to set distribution amount: {err}")
            return StepResult("set_distribution_amount", False, error=str(err))

    def submit_addresses(self, addresses: list[str]) -> StepResult:
        try:
            # Any-case hex is accepted, anything else goes to the contract as is
            recipients = [
                Web3.to_checksum_address(a) if Web3.is_address(a) else a for a in addresses
            ]
            tx = self.build_call("submitAddresses", recipients)
            self.send_tx(tx, tx_label=f"Submit {len(addresses)} addresses")
            logger.info(f"Submitted addresses: {', '.join(truncate(a) for a in addresses)}")
            return StepResult("submit_addresses", True)
        except Exception as err:
            logger.error(f"Failed to submit addresses: {err}")
            return StepResult("submit_addresses", False, error=str(err))

    def fund_contract(self, amount: int | float | Decimal) -> StepResult:
        try:
            tx = self.get_tx_data(value=to_wei(amount), to=self.contract_address)
            self.send_tx(
                tx,
                tx_label=f"Fund {truncate(self.contract_address)} with {amount} {self.chain.native_token}",
            )
            logger.info(f"Funded contract with {amount} {self.chain.native_token}")
        except Exception as err:
            logger.error(f"Failed to fund contract: {err}")
            return StepResult("fund_contract", False, error=str(err))

        self.check_contract_balance()
        return StepResult("fund_contract", True)

    def distribute_batch(self) -> StepResult:
        try:
            tx = self.build_call("distributeBatch")
            self.send_tx(tx, tx_label="Distribute batch")
            logger.info(f"Distributed {self.chain.native_token} to all submitted addresses")
            return StepResult("distribute_batch", True)
        except Exception as err:
            logger.error(f"Failed to distribute {self.chain.native_token}: {err}")
            return StepResult("distribute_batch", False, error=str(err))

    def check_contract_balance(self) -> StepResult:
        try:
            balance = self.w3.eth.get_balance(self.contract_address)
            logger.info(f"Contract balance is {format_eth(balance)} {self.chain.native_token}")
            return StepResult("check_contract_balance", True, value=balance)
        except Exception as err:
            logger.error(f"Failed to check contract balance: {err}")
            return StepResult("check_contract_balance", False, error=str(err))

    def withdraw(self) -> StepResult:
        # Not wrapped: a failed withdraw aborts the run
        tx = self.build_call("withdraw")
        self.send_tx(tx, tx_label="Withdraw contract balance")
        logger.info("Contract balance withdrawn back to the owner")
        return StepResult("withdraw", True)
