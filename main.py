import argparse
import sys
from decimal import Decimal

from dotenv import find_dotenv, load_dotenv

import settings
from data.const import CHAIN_MAPPING
from modules.config import ConfigError, resolve_config
from modules.distribution import build_report, run_distribution
from modules.distributor import Distributor
from modules.logger import logger
from modules.questionary import confirm_distribution
from modules.utils import read_addresses


def parse_args(argv: list[str] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Distribute ETH to a list of addresses through the batch distributor contract"
    )
    parser.add_argument(
        "--network",
        choices=list(CHAIN_MAPPING),
        default=settings.NETWORK,
        help="Specify the network to use (anvil or sepolia)",
    )
    parser.add_argument(
        "--addressFile",
        dest="address_file",
        required=True,
        help="Path to the file containing comma separated addresses",
    )
    parser.add_argument(
        "--amount",
        type=Decimal,
        default=Decimal(settings.DISTRIBUTION_AMOUNT),
        help=f"ETH per address (default: {settings.DISTRIBUTION_AMOUNT})",
    )
    parser.add_argument(
        "--fund",
        type=Decimal,
        default=Decimal(settings.FUND_AMOUNT),
        help=f"ETH sent to the contract before distributing (default: {settings.FUND_AMOUNT})",
    )
    parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    return parser.parse_args(argv)


def main(argv: list[str] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)

    try:
        config = resolve_config(args.network)
    except ConfigError as err:
        logger.error(err)
        return 1

    try:
        addresses = read_addresses(args.address_file)
        distributor = Distributor(config)

        if args.network != "anvil" and not args.yes:
            if not confirm_distribution(
                config, distributor.address, addresses, args.amount, args.fund
            ):
                logger.warning("Distribution cancelled")
                return 0

        results = run_distribution(distributor, addresses, args.amount, args.fund)
    except Exception as err:
        logger.error(f"Error in main execution: {err}")
        return 1

    print()  # line break
    print(build_report(results))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.warning("Cancelled by the user")
        sys.exit(0)
