# budget_tracker/core/accounts.py
import logging
from abc import ABC, abstractmethod
from enum import Enum
from importlib import import_module
from typing import NamedTuple

from budget_tracker.core.errors import UnknownAccountVariant
from budget_tracker.utils import non_negative_amount, to_decimal

logger = logging.getLogger(__name__)


class AccountType(str, Enum):
    SAVINGS = "Savings"
    CHECKING = "Checking"


class AccountInfo(NamedTuple):
    """What an account reports about itself; the caller decides how to show it."""

    account_number: str
    account_type: str
    balance: object
    attribute_name: str
    attribute_value: object

    def __str__(self):
        label = self.attribute_name.replace("_", " ").title()
        return (
            f"{self.account_type} Account - Account Number: {self.account_number}, "
            f"Balance: {self.balance}, {label}: {self.attribute_value}"
        )


class Account(ABC):
    """
    A balance that moves only through deposit() and withdraw().

    Subclasses fix account_type and carry one variant-specific attribute,
    named by attribute_name. Neither withdraw() nor any subclass checks the
    balance against zero or an overdraft limit.
    """

    account_type = None
    attribute_name = None

    def __init__(self, account_number, initial_balance=0):
        self._account_number = str(account_number)
        self._balance = to_decimal(initial_balance)

    @property
    def account_number(self):
        return self._account_number

    @property
    def balance(self):
        return self._balance

    def deposit(self, amount):
        self._balance += non_negative_amount(amount)

    def withdraw(self, amount):
        self._balance -= non_negative_amount(amount)

    @property
    @abstractmethod
    def attribute_value(self):
        """The variant-specific figure reported by display_info()."""

    def display_info(self):
        return AccountInfo(
            account_number=self.account_number,
            account_type=str(getattr(self.account_type, "value", self.account_type)),
            balance=self.balance,
            attribute_name=self.attribute_name,
            attribute_value=self.attribute_value,
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(account_number={self.account_number!r}, "
            f"balance={self.balance!r})"
        )


class SavingsAccount(Account):
    account_type = AccountType.SAVINGS
    attribute_name = "interest_rate"

    def __init__(self, account_number, initial_balance=0, interest_rate=0):
        super().__init__(account_number, initial_balance)
        self.interest_rate = to_decimal(interest_rate)

    @property
    def attribute_value(self):
        return self.interest_rate


class CheckingAccount(Account):
    account_type = AccountType.CHECKING
    attribute_name = "overdraft_limit"

    def __init__(self, account_number, initial_balance=0, overdraft_limit=0):
        super().__init__(account_number, initial_balance)
        # stored and reported only; withdraw() never consults it
        self.overdraft_limit = to_decimal(overdraft_limit)

    @property
    def attribute_value(self):
        return self.overdraft_limit


DEFAULT_ACCOUNT_TYPES = {
    "savings": "budget_tracker.core.accounts.SavingsAccount",
    "checking": "budget_tracker.core.accounts.CheckingAccount",
}


def get_account_class(name, config=None):
    """Resolve an account type name to its class via config['account_types']."""
    types = (config or {}).get("account_types") or DEFAULT_ACCOUNT_TYPES
    key = str(getattr(name, "value", name)).strip().lower()
    path = {k.lower(): v for k, v in types.items()}.get(key)
    if path is None:
        raise UnknownAccountVariant(
            f"Unknown account type '{name}'. Known types: {', '.join(sorted(types))}"
        )
    try:
        module_name, cls_name = path.rsplit(".", 1)
        return getattr(import_module(module_name), cls_name)
    except (ValueError, ImportError, AttributeError) as e:
        raise UnknownAccountVariant(
            f"Account type '{name}' points at '{path}', which cannot be loaded: {e}"
        ) from e


def create_account(account_type, account_number, initial_balance, attribute=0, config=None):
    cls = get_account_class(account_type, config)
    account = cls(account_number, initial_balance, attribute)
    logger.debug("Created %r", account)
    return account
