# budget_tracker/tracker.py
import logging

from budget_tracker.core.accounts import create_account
from budget_tracker.core.budget import Budget
from budget_tracker.core.errors import NoActiveAccount, NoActiveBudget
from budget_tracker.core.models import ExpenseTransaction, IncomeTransaction
from budget_tracker.core.user import User
from budget_tracker.utils import non_negative_amount

logger = logging.getLogger(__name__)


class BudgetTracker:
    """
    Session state for one run: at most one active Budget and one active
    Account. Every operation that needs either raises NoActiveBudget or
    NoActiveAccount instead of failing later on a None.
    """

    def __init__(self, config=None, user=None):
        self.config = config or {}
        self.user = user or User("default", "")
        self.budget = None
        self.account = None

    def _require_budget(self):
        if self.budget is None:
            raise NoActiveBudget("Please set the budget first.")
        return self.budget

    def _require_account(self):
        if self.account is None:
            raise NoActiveAccount("Please create an account first.")
        return self.account

    def set_budget(self, start_date, end_date, income):
        if end_date < start_date:
            raise ValueError("start_date must be on or before end_date")
        income = non_negative_amount(income, "income")
        if self.budget is not None:
            logger.info(
                "Replacing budget %s..%s, discarding %d transaction(s)",
                self.budget.start_date, self.budget.end_date, len(self.budget),
            )
        self.budget = Budget(start_date, end_date, income)
        logger.info("Budget set for %s..%s with income %s", start_date, end_date, income)
        return self.budget

    def create_account(self, account_type, account_number, initial_balance, attribute=0):
        account = create_account(
            account_type, account_number, initial_balance, attribute, config=self.config
        )
        self.user.add_account(account)
        self.account = account
        logger.info("Created %s account %s", account.display_info().account_type, account.account_number)
        return account

    def select_account(self, account_number):
        account = self.user.get_account(account_number)
        if account is None:
            raise NoActiveAccount(f"No account with number '{account_number}'.")
        self.account = account
        return account

    def add_income(self, date, amount, description=""):
        """
        Deposit an income transaction and raise the budget's income target
        by the same amount. The transaction is not added to the ledger.
        """
        budget = self._require_budget()
        account = self._require_account()
        tx = IncomeTransaction(date=date, amount=amount, description=description)
        tx.apply(account)
        budget.set_income(budget.income + tx.amount)
        logger.debug("Income %s", tx.details())
        return tx

    def add_expense(self, date, amount, description=""):
        budget = self._require_budget()
        account = self._require_account()
        tx = ExpenseTransaction(date=date, amount=amount, description=description)
        budget.add_transaction(tx, account)
        logger.debug("Expense %s", tx.details())
        if budget.is_exceeded():
            logger.info("Budget exceeded: %s", budget.get_summary())
        return tx

    def summary(self):
        return self._require_budget().get_summary()

    def account_info(self):
        return self._require_account().display_info()
