"""Tests for the account and contact lookups and the request context."""

import pytest

from account_service.app.core.errors import AccountNotFoundError, NotFoundError
from account_service.app.services.account_context import AccountContext
from account_service.app.services.account_service import AccountService
from account_service.app.services.contact_service import ContactService
from account_service.app.schemas.account import AccountContextIn


def test_find_by_key_returns_account(store, acme):
    assert AccountService(store).find_by_key("A100") == acme


def test_find_by_key_unknown_raises_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        AccountService(store).find_by_key("ZZZ")
    assert isinstance(excinfo.value, AccountNotFoundError)
    assert excinfo.value.account_number == "ZZZ"
    assert "ZZZ" in str(excinfo.value)


def test_find_by_keys_omits_partial_misses(store):
    result = AccountService(store).find_by_keys({"A100", "ZZZ"})
    assert list(result) == ["A100"]


def test_find_by_keys_empty(store):
    assert AccountService(store).find_by_keys(set()) == {}


def test_find_for_account_returns_contacts_in_order(store, acme):
    contacts = ContactService(store).find_for_account(acme)
    assert [(c.name, c.is_active) for c in contacts] == [("Bob", True), ("Ann", False)]


def test_find_for_account_without_contacts(store):
    globex = AccountService(store).find_by_key("B200")
    assert ContactService(store).find_for_account(globex) == []


def test_context_construction_does_not_query(store):
    AccountContext("A100", store=store)
    assert store.query_count == 0


def test_context_memoizes_account(store, acme):
    context = AccountContext("A100", store=store)
    assert context.get_account() == acme
    assert context.get_account() == acme
    assert len(store.key_set_calls) == 1


def test_context_contacts_resolve_account_first(store):
    context = AccountContext("A100", store=store)
    contacts = context.get_contacts()
    context.get_contacts()
    context.get_account()
    assert len(contacts) == 2
    assert len(store.key_set_calls) == 1
    assert store.foreign_key_calls == [1]


def test_context_missing_account_raises(store):
    context = AccountContext("ZZZ", store=store)
    with pytest.raises(AccountNotFoundError):
        context.get_contacts()
    assert store.foreign_key_calls == []


def test_context_from_request(store):
    context = AccountContext.from_request(AccountContextIn(accountNumber="A100"), store=store)
    assert context.account_number == "A100"
    assert AccountContext.from_request(None, store=store) is None
