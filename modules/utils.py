from decimal import Decimal

from web3 import Web3


def truncate(address: str) -> str:
    """
    Truncates an Ethereum address to the format 0x1234...abcd12.
    """
    return f"{address[:6]}...{address[-6:]}"


def read_addresses(file_path: str) -> list[str]:
    """
    Read a comma separated list of addresses.

    Elements are only stripped: a trailing comma leaves an empty last element.
    """
    with open(file_path, encoding="utf-8") as file:
        content = file.read()

    return [address.strip() for address in content.split(",")]


def to_wei(amount: int | float | str | Decimal) -> int:
    return Web3.to_wei(Decimal(str(amount)), "ether")


def format_eth(value_wei: int) -> str:
    return str(Web3.from_wei(value_wei, "ether"))
