"""Lookups of accounts by account number."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from account_service.app.core.errors import AccountNotFoundError
from account_service.app.core.store import AccountStore
from account_service.app.schemas.account import Account


class AccountService:
    """Fetch accounts by their business key."""

    def __init__(self, store: Optional[AccountStore] = None) -> None:
        self.store = store or AccountStore()

    def find_by_keys(self, keys: Iterable[str]) -> Dict[str, Account]:
        """Return the accounts matching ``keys`` keyed by account number.

        Keys without a matching account are simply absent from the
        result.
        """
        return {account.account_number: account for account in self.store.fetch_by_key_set(keys)}

    def find_by_key(self, key: str) -> Account:
        """Return the account with account number ``key``.

        Raises
        ------
        AccountNotFoundError
            If no account has that account number.
        """
        accounts = self.find_by_keys({key})
        if key not in accounts:
            raise AccountNotFoundError(key)
        return accounts[key]
