"""Lookups of the contacts that belong to an account."""

from __future__ import annotations

from typing import List, Optional

from account_service.app.core.store import AccountStore
from account_service.app.schemas.account import Account
from account_service.app.schemas.contact import Contact


class ContactService:
    """Fetch contacts by owning account."""

    def __init__(self, store: Optional[AccountStore] = None) -> None:
        self.store = store or AccountStore()

    def find_for_account(self, account: Account) -> List[Contact]:
        """Return the contacts of ``account``; empty if it has none."""
        return list(self.store.fetch_by_foreign_key(account.id))
