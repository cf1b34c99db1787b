# budget_tracker/core/category.py


class Category:
    """A named bucket of transactions. Budget never looks at it."""

    def __init__(self, name):
        self.name = name
        self._expenses = []

    @property
    def expenses(self):
        return tuple(self._expenses)

    def add_expense(self, transaction):
        self._expenses.append(transaction)

    def remove_expense(self, transaction):
        for i, tx in enumerate(self._expenses):
            if tx is transaction:
                del self._expenses[i]
                return True
        return False

    def __repr__(self):
        return f"Category(name={self.name!r}, expenses={len(self._expenses)})"
