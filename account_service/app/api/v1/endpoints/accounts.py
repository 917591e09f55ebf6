"""
Account endpoints for API v1.

``POST /accounts/get-account`` is the remote-callable ``get_account``
operation: it takes an ``AccountContextIn`` body and returns an
``AccountResponse`` envelope.  ``GET /accounts/{account_number}`` is a
convenience wrapper around the same operation.

Both routes always answer with HTTP 200.  Whether the lookup worked is
reported by ``returnCode`` in the body, so clients must inspect it
rather than the transport status.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from account_service.app.core.store import AccountStore
from account_service.app.schemas.account import AccountContextIn, AccountResponse
from account_service.app.services.account_context import AccountContext
from account_service.app.services.account_web_service import get_account

router = APIRouter()


def get_store() -> AccountStore:
    """Dependency returning the store used by account routes."""
    return AccountStore()


@router.post(
    "/get-account",
    response_model=AccountResponse,
    response_model_exclude_none=True,
)
async def get_account_endpoint(
    payload: Optional[AccountContextIn] = Body(None),
    store: AccountStore = Depends(get_store),
) -> AccountResponse:
    """Return an account and its contacts for the given account number.

    A missing body or a blank ``accountNumber`` yields ``returnCode``
    400, an unknown account number 404 and any other failure 500.
    """
    return get_account(AccountContext.from_request(payload, store=store))


@router.get(
    "/{account_number}",
    response_model=AccountResponse,
    response_model_exclude_none=True,
)
async def read_account(
    account_number: str,
    store: AccountStore = Depends(get_store),
) -> AccountResponse:
    """Same as ``get-account`` with the account number in the path."""
    return get_account(AccountContext(account_number, store=store))
