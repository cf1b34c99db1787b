# budget_tracker/core/errors.py
"""Failure conditions the core signals to its caller."""


class BudgetTrackerError(Exception):
    """Base class for every error raised by the bookkeeping core."""


class InvalidAmount(BudgetTrackerError, ValueError):
    """Raised when a negative amount is given where a magnitude is required."""


class NoActiveBudget(BudgetTrackerError, RuntimeError):
    """Raised when a budget operation is attempted before a budget is set."""


class NoActiveAccount(BudgetTrackerError, RuntimeError):
    """Raised when a transaction needs an account and none is selected."""


class UnknownAccountVariant(BudgetTrackerError, ValueError):
    """Raised when an account is requested for an unregistered account type."""
