"""Shared fixtures for the account service tests."""

from typing import Dict, Iterable, List

import pytest

from account_service.app.core import db
from account_service.app.core.config import settings
from account_service.app.schemas.account import Account
from account_service.app.schemas.contact import Contact
from seed_accounts import DEMO_ACCOUNTS, load_accounts


class FakeStore:
    """In-memory store that records every query it receives."""

    def __init__(self, accounts: List[Account], contacts: List[Contact]):
        self.accounts = {a.account_number: a for a in accounts}
        self.contacts = contacts
        self.key_set_calls: List[set] = []
        self.foreign_key_calls: List[int] = []

    def fetch_by_key_set(self, keys: Iterable[str]) -> List[Account]:
        keys = set(keys)
        self.key_set_calls.append(keys)
        return [a for k, a in self.accounts.items() if k in keys]

    def fetch_by_foreign_key(self, account_id: int) -> List[Contact]:
        self.foreign_key_calls.append(account_id)
        return [c for c in self.contacts if c.account_id == account_id]

    @property
    def query_count(self) -> int:
        return len(self.key_set_calls) + len(self.foreign_key_calls)


@pytest.fixture
def acme() -> Account:
    return Account(id=1, account_number="A100", name="Acme Corporation", my_field="gold")


@pytest.fixture
def store(acme: Account) -> FakeStore:
    globex = Account(id=2, account_number="B200", name="Globex", my_field="silver")
    contacts = [
        Contact(id=10, account_id=1, name="Bob", is_active=True),
        Contact(id=11, account_id=1, name="Ann", is_active=False),
    ]
    return FakeStore([acme, globex], contacts)


@pytest.fixture
def database(tmp_path, monkeypatch) -> str:
    """Point the settings at a fresh SQLite file loaded with demo data."""
    path = str(tmp_path / "accounts.db")
    monkeypatch.setattr(settings, "database_url", path)
    db.init_db()
    load_accounts(DEMO_ACCOUNTS)
    return path


@pytest.fixture
def demo_rows() -> Dict[str, dict]:
    return {item["accountNumber"]: item for item in DEMO_ACCOUNTS}
