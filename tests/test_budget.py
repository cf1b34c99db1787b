from datetime import date
from decimal import Decimal

import pytest

from budget_tracker.core.accounts import CheckingAccount, SavingsAccount
from budget_tracker.core.budget import Budget, BudgetSummary
from budget_tracker.core.errors import InvalidAmount
from budget_tracker.core.models import ExpenseTransaction, IncomeTransaction

START = date(2024, 1, 1)
END = date(2024, 1, 31)


def make_budget(income=1000):
    return Budget(START, END, income)


def test_empty_ledger():
    budget = make_budget()
    assert budget.get_summary() == (1000, 0, 1000)
    assert budget.is_exceeded() is False
    assert len(budget) == 0


def test_expense_within_budget():
    budget = make_budget()
    acct = CheckingAccount("C-1", 500, 0)
    budget.add_transaction(ExpenseTransaction(START, 300, "Rent"), acct)

    assert budget.get_summary() == (1000, 300, 700)
    assert budget.is_exceeded() is False
    assert acct.balance == 200


def test_expense_over_budget():
    budget = make_budget()
    acct = CheckingAccount("C-1", 500, 0)
    budget.add_transaction(ExpenseTransaction(START, 1200, "Car"), acct)

    summary = budget.get_summary()
    assert summary == (1000, 1200, -200)
    assert isinstance(summary, BudgetSummary)
    assert summary.balance == Decimal(-200)
    assert budget.is_exceeded() is True


def test_expenses_equal_to_income_do_not_exceed():
    budget = make_budget(100)
    acct = SavingsAccount("S-1", 0, 0)
    budget.add_transaction(ExpenseTransaction(START, 60, "a"), acct)
    budget.add_transaction(ExpenseTransaction(START, 40, "b"), acct)
    assert budget.total_expenses() == 100
    assert budget.is_exceeded() is False


def test_income_entries_in_ledger_are_ignored_for_totals():
    budget = make_budget(100)
    acct = SavingsAccount("S-1", 0, 0)
    budget.add_transaction(IncomeTransaction(START, 500, "Bonus"), acct)
    budget.add_transaction(ExpenseTransaction(START, 150, "TV"), acct)

    # the income entry moved the account but not the totals
    assert acct.balance == 350
    assert budget.get_summary() == (100, 150, -50)
    assert budget.is_exceeded() is True


def test_add_then_remove_restores_ledger_but_not_balance():
    budget = make_budget()
    acct = CheckingAccount("C-1", 100, 0)
    first = ExpenseTransaction(START, 10, "first")
    budget.add_transaction(first, acct)
    before = budget.transactions

    tx = ExpenseTransaction(START, 40, "Dinner")
    budget.add_transaction(tx, acct)
    assert budget.remove_transaction(tx) is True

    assert budget.transactions == before
    assert acct.balance == 50


def test_remove_matches_by_identity():
    budget = make_budget()
    acct = CheckingAccount("C-1", 100, 0)
    a = ExpenseTransaction(START, 10, "same")
    b = ExpenseTransaction(START, 10, "same")
    assert a == b
    budget.add_transaction(a, acct)
    budget.add_transaction(b, acct)

    assert budget.remove_transaction(b) is True
    assert budget.transactions[0] is a
    assert len(budget) == 1
    assert budget.remove_transaction(b) is False


def test_failed_apply_does_not_record_transaction():
    class BrokenAccount:
        def withdraw(self, amount):
            raise RuntimeError("account closed")

    budget = make_budget()
    with pytest.raises(RuntimeError):
        budget.add_transaction(ExpenseTransaction(START, 10, "x"), BrokenAccount())
    assert budget.transactions == ()


def test_add_fails_atomically_on_invalid_amount():
    class ZeroAccount:
        def withdraw(self, amount):
            raise InvalidAmount("no")

    budget = make_budget()
    with pytest.raises(InvalidAmount):
        budget.add_transaction(ExpenseTransaction(START, 1, "x"), ZeroAccount())
    assert len(budget) == 0


def test_income_transaction_apply_leaves_budget_income_alone():
    # Known inconsistency: income is tracked apart from the ledger and has to
    # be raised by a separate set_income() call.
    budget = make_budget()
    acct = SavingsAccount("S-1", 0, 0)
    IncomeTransaction(START, 200, "Freelance").apply(acct)

    assert acct.balance == 200
    assert budget.income == 1000

    budget.set_income(budget.income + 200)
    assert budget.income == 1200
    assert budget.transactions == ()


def test_set_income_is_not_validated():
    budget = make_budget()
    budget.set_income(-50)
    assert budget.get_summary() == (-50, 0, -50)
    assert budget.is_exceeded() is True


def test_summary_str():
    budget = Budget(START, END, "1000.00")
    acct = CheckingAccount("C-1", 0, 0)
    budget.add_transaction(ExpenseTransaction(START, "250.50", "x"), acct)
    assert str(budget.get_summary()) == "Income: 1000.00, Total Expenses: 250.50, Balance: 749.50"


def test_transactions_view_is_read_only():
    budget = make_budget()
    acct = CheckingAccount("C-1", 0, 0)
    budget.add_transaction(ExpenseTransaction(START, 1, "x"), acct)
    view = budget.transactions
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view.append(None)
