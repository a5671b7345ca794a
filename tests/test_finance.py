from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from recordkeeper.domain.entities import Account, Transaction
from recordkeeper.domain.services.finance import FinanceApp, get_processor
from recordkeeper.domain.value_objects import BalancePolicy, PaymentChannel, format_money


def _tx(tx_id: int, amount: str) -> Transaction:
    return Transaction(id=tx_id, amount=Decimal(amount), category="Groceries")


def test_standard_account_always_deducts():
    account = Account(account_number="AC-1", balance=Decimal("100"))
    outcome = account.apply_transaction(_tx(1, "150"))

    assert outcome.applied is True
    assert account.balance == Decimal("-50")


def test_guarded_account_declines_amount_above_balance():
    account = Account.savings("SB-1", Decimal("100"))
    assert account.policy is BalancePolicy.GUARDED

    outcome = account.apply_transaction(_tx(1, "100.01"))
    assert outcome.applied is False
    assert account.balance == Decimal("100")

    outcome = account.apply_transaction(_tx(2, "100"))
    assert outcome.applied is True
    assert account.balance == Decimal("0")


def test_account_number_and_policy_are_frozen():
    account = Account.savings("SB-1", Decimal("10"))
    with pytest.raises(ValidationError):
        account.policy = BalancePolicy.STANDARD
    with pytest.raises(ValidationError):
        account.account_number = "OTHER"


def test_transaction_amount_must_be_positive():
    with pytest.raises(ValidationError):
        _tx(1, "0")


@pytest.mark.parametrize(
    "channel, label",
    [
        (PaymentChannel.BANK_TRANSFER, "BankTransfer"),
        (PaymentChannel.MOBILE_MONEY, "MobileMoney"),
        ("CryptoWallet", "CryptoWallet"),
    ],
)
def test_processor_labels(channel, label):
    message = get_processor(channel).process(_tx(7, "12.5"))
    assert message == f"[{label}] Processing $12.50 for Groceries"


def test_format_money():
    assert format_money(Decimal("1550")) == "$1,550.00"
    assert format_money(Decimal("-5"), "€") == "-€5.00"


def test_declined_transaction_message():
    app = FinanceApp()
    account = Account.savings("SB-1", Decimal("10"))
    assert app.apply_transaction(account, _tx(1, "20")) == "Transaction declined: Insufficient funds."


def test_run_sample_sequence():
    app = FinanceApp()
    lines = app.run()

    assert lines == [
        "[MobileMoney] Processing $450.00 for Electronics Purchase",
        "[BankTransfer] Processing $275.00 for Restaurant Bill",
        "[CryptoWallet] Processing $900.00 for Flight Booking",
        "[Account] $450.00 deducted. New Balance: $1,550.00",
        "[Account] $275.00 deducted. New Balance: $1,275.00",
        "[Account] $900.00 deducted. New Balance: $375.00",
    ]
    assert app.account.balance == Decimal("375")
    assert [t.id for t in app.transactions.get_all()] == [101, 102, 103]


def test_outcome_reports_amount_and_balance():
    account = Account.savings("SB-1", Decimal("500"))
    outcome = account.apply_transaction(_tx(1, "120"))
    assert (outcome.applied, outcome.amount, outcome.balance) == (True, Decimal("120"), Decimal("380"))

    declined = account.apply_transaction(_tx(2, "900"))
    assert (declined.applied, declined.amount, declined.balance) == (False, Decimal("900"), Decimal("380"))
