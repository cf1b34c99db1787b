# budget_tracker/core/models.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from budget_tracker.utils import non_negative_amount


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction(ABC):
    """
    A dated, described amount. `amount` is always the non-negative magnitude;
    the direction lives in `kind`, which each variant fixes.
    """

    date: date
    amount: Decimal
    description: str = ""

    kind: ClassVar[TransactionKind]

    def __post_init__(self):
        object.__setattr__(self, "amount", non_negative_amount(self.amount))
        object.__setattr__(self, "description", self.description or "")

    @abstractmethod
    def apply(self, account):
        """Move the account balance in this transaction's direction."""

    def details(self):
        return f"Date: {self.date.isoformat()}, Amount: {self.amount}, Description: {self.description}"

    @staticmethod
    def create(kind, date, amount, description=""):
        cls = _VARIANTS[TransactionKind(str(getattr(kind, "value", kind)).lower())]
        return cls(date=date, amount=amount, description=description)


@dataclass(frozen=True)
class IncomeTransaction(Transaction):
    kind: ClassVar[TransactionKind] = TransactionKind.INCOME

    def apply(self, account):
        account.deposit(self.amount)


@dataclass(frozen=True)
class ExpenseTransaction(Transaction):
    kind: ClassVar[TransactionKind] = TransactionKind.EXPENSE

    def apply(self, account):
        account.withdraw(self.amount)


_VARIANTS = {
    TransactionKind.INCOME: IncomeTransaction,
    TransactionKind.EXPENSE: ExpenseTransaction,
}
