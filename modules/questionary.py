import questionary
from questionary import Style
from tabulate import tabulate

from models.network import NetworkConfig
from modules.utils import truncate

"""
Confirmation prompt shown before sending transactions to a public network.
"""

# ANSI color codes
BRIGHT_GREEN = "\033[92m"  # Bright green
RESET = "\033[0m"  # Reset color

style = Style(
    [
        ("qmark", "fg:#2196f3 bold"),
        ("question", "bold"),
        ("answer", "fg:#2196f3 bold"),
        ("instruction", "fg:#8c8c8c italic"),
    ]
)


def build_confirmation_message(
    config: NetworkConfig, sender: str, addresses: list[str], amount, fund_amount
) -> str:
    """
    Builds a user-friendly table with the distribution data using tabulate.
    """
    symbol = config.network.native_token

    table_data = [
        ["Chain", f"{BRIGHT_GREEN}{config.network.name.upper()}{RESET}"],
        ["Contract", truncate(config.contract_address)],
        ["From", truncate(sender)],
        ["Recipients", len(addresses)],
        ["Amount per address", f"{amount} {symbol}"],
        ["Fund", f"{fund_amount} {symbol}"],
    ]

    return tabulate(table_data, tablefmt="double_grid")


def confirm_distribution(
    config: NetworkConfig, sender: str, addresses: list[str], amount, fund_amount
) -> bool:
    print()  # line break
    print(build_confirmation_message(config, sender, addresses, amount, fund_amount))

    confirmation = questionary.confirm(
        "Proceed with the distribution? \n", style=style
    ).ask()

    return bool(confirmation)
