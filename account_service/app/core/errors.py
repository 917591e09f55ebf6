"""
Failure conditions raised by the account lookups.

The service operation converts these into response status codes; none
of them is allowed to reach the HTTP layer.
"""


class AccountServiceError(Exception):
    """Base class for expected failures of the account service."""


class BadInputError(AccountServiceError):
    """The caller supplied a request that failed validation."""


class NotFoundError(AccountServiceError):
    """A well formed key had no matching record."""


class AccountNotFoundError(NotFoundError):
    """No account exists with the requested account number."""

    def __init__(self, account_number: str) -> None:
        super().__init__(f"Account not found: {account_number}")
        self.account_number = account_number
