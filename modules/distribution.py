from decimal import Decimal

from tabulate import tabulate

from models.step import StepResult
from modules.distributor import Distributor
from modules.logger import logger
from modules.utils import format_eth


def run_distribution(
    distributor: Distributor,
    addresses: list[str],
    amount: int | float | Decimal,
    fund_amount: int | float | Decimal,
) -> list[StepResult]:
    """
    Run the seven contract steps in order, one at a time.

    A failed step is logged and recorded but never stops the steps after it,
    except withdraw(), whose exception propagates to the caller.
    """
    results = []

    results.append(distributor.set_distribution_amount(amount))
    results.append(distributor.submit_addresses(addresses))
    results.append(distributor.fund_contract(fund_amount))
    results.append(distributor.distribute_batch())
    results.append(distributor.check_contract_balance())

    logger.info("Withdrawing the contract balance back to the owner")
    results.append(distributor.withdraw())

    results.append(distributor.check_contract_balance())

    failed = [result.step for result in results if not result.ok]
    if failed:
        logger.warning(f"Steps failed but the run continued: {', '.join(failed)}")

    return results


def build_report(results: list[StepResult]) -> str:
    table_data = []
    for index, result in enumerate(results, start=1):
        status = "ok" if result.ok else "FAILED"
        detail = result.error or ""
        if result.value is not None:
            detail = f"{format_eth(result.value)} ETH"
        table_data.append([index, result.step, status, detail])

    return tabulate(table_data, headers=["#", "Step", "Status", "Detail"], tablefmt="double_grid")
