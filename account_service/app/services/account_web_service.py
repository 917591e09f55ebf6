"""
The ``get_account`` service operation.

``get_account`` validates a request context, resolves the account and
its contacts and returns an ``AccountResponse``.  It never raises: each
failure is reported through the envelope's ``return_code`` and
``message``.

The work happens in two steps.  ``resolve`` runs validation and the
lookups and returns one of the outcome variants below (``Success``,
``BadInput``, ``NotFound`` or ``Unexpected``).  ``get_account`` then
turns the outcome into an envelope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from account_service.app.core.config import settings
from account_service.app.core.errors import BadInputError, NotFoundError
from account_service.app.core.status import ReturnCode
from account_service.app.core.validation import is_blank
from account_service.app.schemas.account import Account, AccountResponse
from account_service.app.schemas.contact import Contact
from account_service.app.services.account_context import AccountContext

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Success:
    account: Account
    contacts: List[Contact]


@dataclass(frozen=True)
class BadInput:
    message: str


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Unexpected:
    message: str


Outcome = Union[Success, BadInput, NotFound, Unexpected]


def ensure_valid(context: Optional[AccountContext]) -> None:
    """Raise ``BadInputError`` unless ``context`` carries an account number."""
    if context is None:
        raise BadInputError("Context is required")
    if is_blank(context.account_number):
        raise BadInputError("Account number is required")


def _unexpected(exc: Exception) -> Unexpected:
    logger.exception("Unexpected failure while resolving account")
    if settings.expose_internal_errors:
        return Unexpected(str(exc) or exc.__class__.__name__)
    return Unexpected(GENERIC_ERROR_MESSAGE)


def resolve(context: Optional[AccountContext]) -> Outcome:
    """Validate ``context`` and resolve its account and contacts."""
    try:
        ensure_valid(context)
    except BadInputError as exc:
        return BadInput(str(exc))
    except Exception as exc:
        return _unexpected(exc)

    try:
        account = context.get_account()
    except NotFoundError as exc:
        return NotFound(str(exc))
    except Exception as exc:
        return _unexpected(exc)

    try:
        contacts = context.get_contacts()
    except Exception as exc:
        return _unexpected(exc)
    return Success(account, contacts)


def to_response(outcome: Outcome) -> AccountResponse:
    """Convert an outcome into the response envelope."""
    if isinstance(outcome, Success):
        response = AccountResponse.from_account(outcome.account)
        response.add_contacts(outcome.contacts)
        response.return_code = ReturnCode.OK
        return response
    if isinstance(outcome, BadInput):
        logger.info("Rejected account request: %s", outcome.message)
        return AccountResponse.failure(ReturnCode.BAD, outcome.message)
    if isinstance(outcome, NotFound):
        logger.info("Account lookup missed: %s", outcome.message)
        return AccountResponse.failure(ReturnCode.NOTFOUND, outcome.message)
    return AccountResponse.failure(ReturnCode.ISE, outcome.message)


def get_account(context: Optional[AccountContext]) -> AccountResponse:
    """Return the account envelope for ``context``.

    Return codes: ``OK`` on success, ``BAD`` for a missing or blank
    account number, ``NOTFOUND`` for an unknown account number and
    ``ISE`` for anything else.
    """
    try:
        return to_response(resolve(context))
    except Exception as exc:
        return to_response(_unexpected(exc))
