import argparse
import sys

from web3 import HTTPProvider, Web3

from data.const import ethereum
from modules.logger import logger


def check_connection(rpc_url: str = ethereum.rpc_url) -> int | None:
    """
    Fetch the latest block number once to check the RPC is reachable.
    """
    try:
        w3 = Web3(HTTPProvider(rpc_url))
        block_number = w3.eth.block_number
        logger.success(f"Current block number: {block_number}")
        return block_number
    except Exception as err:
        logger.error(f"Error accessing the Ethereum network: {err}")
        return None


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Check that web3 can reach the network")
    parser.add_argument("--rpc", default=ethereum.rpc_url, help="RPC URL")
    args = parser.parse_args(argv)

    return 0 if check_connection(args.rpc) is not None else 1


if __name__ == "__main__":
    sys.exit(main())
