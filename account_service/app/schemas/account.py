"""
Pydantic schemas for accounts.

``Account`` is the record read from the store; its identity is the
``account_number`` business key.  ``AccountContextIn`` is the request
body of the ``get_account`` operation and ``AccountResponse`` is the
envelope it returns.  The envelope carries either the account payload
or a ``return_code``/``message`` pair describing why it could not be
produced.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from ..core.status import ReturnCode
from .contact import Contact, ContactResponse


class Account(BaseModel):
    """An account row as read from the store."""

    id: int
    account_number: str
    name: str
    my_field: Optional[str] = None

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }


class AccountContextIn(BaseModel):
    """Request body identifying the account to fetch."""

    account_number: Optional[str] = Field(None, alias="accountNumber", examples=["A100"])

    model_config = {
        "populate_by_name": True,
    }


class AccountResponse(BaseModel):
    """Response envelope for the ``get_account`` operation.

    On success the payload fields are populated and ``return_code`` is
    ``ReturnCode.OK``.  On failure only ``return_code`` and ``message``
    are set.  Unset fields are left out of the serialized response.
    """

    return_code: Optional[ReturnCode] = Field(None, alias="returnCode")
    message: Optional[str] = None
    name: Optional[str] = None
    account_number: Optional[str] = Field(None, alias="accountNumber")
    my_field: Optional[str] = Field(None, alias="myField")
    is_awesome: Optional[bool] = Field(None, alias="isAwesome")
    contacts: Optional[List[ContactResponse]] = None

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_account(cls, account: Account, is_awesome: bool = True) -> "AccountResponse":
        """Build a success envelope from an account record."""
        return cls(
            name=account.name,
            account_number=account.account_number,
            my_field=account.my_field,
            is_awesome=is_awesome,
        )

    @classmethod
    def failure(cls, return_code: ReturnCode, message: str) -> "AccountResponse":
        return cls(return_code=return_code, message=message)

    def add_contacts(self, contacts: Iterable[Contact]) -> None:
        """Append converted contacts, creating the list on first use."""
        if self.contacts is None:
            self.contacts = []
        self.contacts.extend(ContactResponse.from_contact(c) for c in contacts)
