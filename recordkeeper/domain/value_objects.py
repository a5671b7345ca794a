"""
Value Objects
=============

Immutable objects that represent concepts with no identity.
They are defined by their attributes rather than identity.
"""

from enum import Enum
from decimal import Decimal


class ErrorKind(str, Enum):
    """Closed set of failure kinds reported by the domain"""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    IO = "io"


class PaymentChannel(str, Enum):
    """Channels a transaction can be processed through"""
    BANK_TRANSFER = "BankTransfer"
    MOBILE_MONEY = "MobileMoney"
    CRYPTO_WALLET = "CryptoWallet"

    @property
    def label(self) -> str:
        return self.value


class BalancePolicy(str, Enum):
    """How an account treats transactions larger than its balance"""
    STANDARD = "standard"
    GUARDED = "guarded"

    def allows(self, amount: Decimal, balance: Decimal) -> bool:
        """Check if a deduction of ``amount`` may be applied to ``balance``"""
        if self is BalancePolicy.GUARDED:
            return amount <= balance
        return True


class Grade(str, Enum):
    """Letter grades derived from a numeric score"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def from_score(cls, score: int) -> "Grade":
        """Map a score to its grade using fixed thresholds"""
        for threshold, grade in GRADE_THRESHOLDS:
            if score >= threshold:
                return grade
        return cls.F


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    """Format an amount as currency, e.g. ``$1,250.00`` or ``-$5.00``"""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol}{abs(amount):,.2f}"


# Highest threshold first
GRADE_THRESHOLDS = (
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)
