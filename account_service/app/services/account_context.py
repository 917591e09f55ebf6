"""
Per-request context for the ``get_account`` operation.

The context carries the requested account number and resolves the
account and its contacts on demand.  Each lookup runs at most once per
context; creating a context does not touch the store.  Contexts are
built for a single call and are not meant to be shared between threads.
"""

from __future__ import annotations

from typing import List, Optional

from account_service.app.core.store import AccountStore
from account_service.app.schemas.account import Account, AccountContextIn
from account_service.app.schemas.contact import Contact
from account_service.app.services.account_service import AccountService
from account_service.app.services.contact_service import ContactService


class AccountContext:
    """Lazily resolved account and contacts for one account number."""

    def __init__(self, account_number: Optional[str], store: Optional[AccountStore] = None) -> None:
        self.account_number = account_number
        store = store or AccountStore()
        self._accounts = AccountService(store)
        self._contacts_service = ContactService(store)
        self._account: Optional[Account] = None
        self._contacts: Optional[List[Contact]] = None

    @classmethod
    def from_request(
        cls, payload: Optional[AccountContextIn], store: Optional[AccountStore] = None
    ) -> Optional["AccountContext"]:
        """Build a context from a request body; ``None`` stays ``None``."""
        if payload is None:
            return None
        return cls(payload.account_number, store=store)

    def get_account(self) -> Account:
        """Return the requested account, fetching it on first use.

        Raises ``AccountNotFoundError`` if the account does not exist.
        A failed lookup is not remembered.
        """
        if self._account is None:
            self._account = self._accounts.find_by_key(self.account_number)
        return self._account

    def get_contacts(self) -> List[Contact]:
        """Return the account's contacts, resolving the account first if needed."""
        if self._contacts is None:
            self._contacts = self._contacts_service.find_for_account(self.get_account())
        return self._contacts
