import pytest

from models.step import StepResult
from modules.distribution import build_report, run_distribution
from modules.distributor import TransactionFailed

STEP_ORDER = [
    "set_distribution_amount",
    "submit_addresses",
    "fund_contract",
    "distribute_batch",
    "check_contract_balance",
    "withdraw",
    "check_contract_balance",
]


class FakeDistributor:
    """Records calls and checks no step starts while another is running."""

    def __init__(self, failing=(), raising=()):
        self.calls = []
        self.failing = set(failing)
        self.raising = set(raising)
        self.in_flight = None

    def _step(self, name, *args):
        assert self.in_flight is None, f"{name} started before {self.in_flight} finished"
        self.in_flight = name
        self.calls.append((name, args))
        try:
            if name in self.raising:
                raise TransactionFailed(f"{name} reverted")
            if name in self.failing:
                return StepResult(name, False, error=f"{name} failed")
            value = 0 if name == "check_contract_balance" else None
            return StepResult(name, True, value=value)
        finally:
            self.in_flight = None

    def set_distribution_amount(self, amount):
        return self._step("set_distribution_amount", amount)

    def submit_addresses(self, addresses):
        return self._step("submit_addresses", addresses)

    def fund_contract(self, amount):
        return self._step("fund_contract", amount)

    def distribute_batch(self):
        return self._step("distribute_batch")

    def check_contract_balance(self):
        return self._step("check_contract_balance")

    def withdraw(self):
        return self._step("withdraw")


def test_steps_run_in_order():
    distributor = FakeDistributor()
    addresses = ["0xAAA", "0xBBB"]

    results = run_distribution(distributor, addresses, 100, 1000)

    assert [name for name, _ in distributor.calls] == STEP_ORDER
    assert distributor.calls[0] == ("set_distribution_amount", (100,))
    assert distributor.calls[1] == ("submit_addresses", (addresses,))
    assert distributor.calls[2] == ("fund_contract", (1000,))
    assert [result.step for result in results] == STEP_ORDER
    assert all(result.ok for result in results)


def test_failed_submit_does_not_stop_later_steps(log_messages):
    # No step checks the outcome of an earlier one: distribution still runs
    # against whatever the contract had registered before.
    distributor = FakeDistributor(failing={"submit_addresses"})

    results = run_distribution(distributor, ["0xAAA"], 100, 1000)

    assert [name for name, _ in distributor.calls] == STEP_ORDER
    assert [result.step for result in results if not result.ok] == ["submit_addresses"]
    assert "Steps failed but the run continued: submit_addresses" in log_messages


def test_failed_withdraw_aborts_remaining_steps():
    distributor = FakeDistributor(raising={"withdraw"})

    with pytest.raises(TransactionFailed):
        run_distribution(distributor, ["0xAAA"], 100, 1000)

    assert [name for name, _ in distributor.calls] == STEP_ORDER[:-1]


def test_build_report():
    results = [
        StepResult("submit_addresses", False, error="bad address"),
        StepResult("check_contract_balance", True, value=10**16),
    ]

    report = build_report(results)

    assert "submit_addresses" in report
    assert "FAILED" in report
    assert "bad address" in report
    assert "0.01 ETH" in report
