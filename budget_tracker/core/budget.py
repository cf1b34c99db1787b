# budget_tracker/core/budget.py
from decimal import Decimal
from typing import NamedTuple

from budget_tracker.core.models import TransactionKind
from budget_tracker.utils import to_decimal


class BudgetSummary(NamedTuple):
    income: Decimal
    total_expenses: Decimal
    balance: Decimal

    def __str__(self):
        return (
            f"Income: {self.income}, Total Expenses: {self.total_expenses}, "
            f"Balance: {self.balance}"
        )


class Budget:
    """
    One budget period and its ledger.

    `income` is a target figure kept apart from the ledger: recording an
    income transaction does not raise it, the caller has to call
    set_income() as well. Only expense entries count towards totals.
    """

    def __init__(self, start_date, end_date, income):
        self.start_date = start_date
        self.end_date = end_date
        self._income = to_decimal(income)
        self._transactions = []

    @property
    def income(self):
        return self._income

    def set_income(self, income):
        self._income = to_decimal(income)

    @property
    def transactions(self):
        return tuple(self._transactions)

    def __len__(self):
        return len(self._transactions)

    def add_transaction(self, transaction, account):
        # apply first: a transaction that fails to apply is never recorded
        transaction.apply(account)
        self._transactions.append(transaction)

    def remove_transaction(self, transaction):
        """
        Drop `transaction` (matched by identity) from the ledger.
        The account balance it changed is left as is.
        """
        for i, tx in enumerate(self._transactions):
            if tx is transaction:
                del self._transactions[i]
                return True
        return False

    def total_expenses(self):
        return sum(
            (tx.amount for tx in self._transactions if tx.kind is TransactionKind.EXPENSE),
            Decimal(0),
        )

    def get_summary(self):
        total = self.total_expenses()
        return BudgetSummary(self._income, total, self._income - total)

    def is_exceeded(self):
        return self.total_expenses() > self._income

    def __repr__(self):
        return (
            f"Budget(start_date={self.start_date!r}, end_date={self.end_date!r}, "
            f"income={self._income!r}, transactions={len(self._transactions)})"
        )
