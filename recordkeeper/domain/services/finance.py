"""
Finance Service
===============

Routes transactions through payment channel processors and applies them
to an account. The account's balance policy decides whether a transaction
larger than the balance is declined.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ..entities import Account, Transaction
from ..repository import KeyedRepository
from ..value_objects import PaymentChannel, format_money

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """Processes transactions for a single payment channel"""

    def __init__(self, channel: PaymentChannel, currency_symbol: str = "$"):
        self.channel = channel
        self.currency_symbol = currency_symbol

    def process(self, transaction: Transaction) -> str:
        message = (
            f"[{self.channel.label}] Processing "
            f"{format_money(transaction.amount, self.currency_symbol)} for {transaction.category}"
        )
        logger.info(f"Transaction {transaction.id} processed via {self.channel.label}")
        return message


def get_processor(channel: PaymentChannel, currency_symbol: str = "$") -> PaymentProcessor:
    """Select the processor for a channel"""
    if not isinstance(channel, PaymentChannel):
        channel = PaymentChannel(channel)
    return PaymentProcessor(channel, currency_symbol)


class FinanceApp:
    """Finance management demo"""

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol
        self.transactions: KeyedRepository[Transaction] = KeyedRepository(entity_name="Transaction")
        self.account: Optional[Account] = None

    def apply_transaction(self, account: Account, transaction: Transaction) -> str:
        """Apply a transaction and describe the outcome"""
        outcome = account.apply_transaction(transaction)
        if not outcome.applied:
            logger.warning(
                f"Transaction {transaction.id} declined for {account.account_number}: "
                f"{outcome.amount} exceeds balance {outcome.balance}"
            )
            return "Transaction declined: Insufficient funds."

        return (
            f"[Account] {format_money(outcome.amount, self.currency_symbol)} deducted. "
            f"New Balance: {format_money(outcome.balance, self.currency_symbol)}"
        )

    def run(self) -> List[str]:
        """Process and apply the sample transactions, returning the output lines"""
        account = Account.savings("SB20250815001", Decimal("2000"))
        self.account = account

        now = datetime.now()
        routed = [
            (Transaction(id=101, date=now, amount=Decimal("450"), category="Electronics Purchase"),
             PaymentChannel.MOBILE_MONEY),
            (Transaction(id=102, date=now, amount=Decimal("275"), category="Restaurant Bill"),
             PaymentChannel.BANK_TRANSFER),
            (Transaction(id=103, date=now, amount=Decimal("900"), category="Flight Booking"),
             PaymentChannel.CRYPTO_WALLET),
        ]

        lines = []
        for transaction, channel in routed:
            lines.append(get_processor(channel, self.currency_symbol).process(transaction))

        for transaction, _channel in routed:
            lines.append(self.apply_transaction(account, transaction))

        for transaction, _channel in routed:
            self.transactions.add(transaction)

        return lines
