# budget_tracker/core/user.py


class User:
    def __init__(self, username, password):
        self.username = username
        self.password = password
        self._accounts = []

    @property
    def accounts(self):
        return tuple(self._accounts)

    def add_account(self, account):
        self._accounts.append(account)

    def remove_account(self, account):
        for i, acct in enumerate(self._accounts):
            if acct is account:
                del self._accounts[i]
                return True
        return False

    def get_account(self, account_number):
        """Return the first account with this number, or None."""
        return next(
            (acct for acct in self._accounts if acct.account_number == account_number),
            None,
        )

    def __repr__(self):
        return f"User(username={self.username!r}, accounts={len(self._accounts)})"
