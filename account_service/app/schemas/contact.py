"""
Pydantic schemas for contacts.

A contact belongs to exactly one account through ``account_id``.  The
service only ever reads contacts by account; there is no navigation
from a contact back to its account.
"""

from pydantic import BaseModel, Field


class Contact(BaseModel):
    """A contact row as read from the store."""

    id: int
    account_id: int
    name: str
    is_active: bool = True

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }


class ContactResponse(BaseModel):
    """External shape of a contact inside an account response."""

    name: str = Field(..., examples=["Bob"])
    is_active: bool = Field(..., alias="isActive", examples=[True])

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        return cls(name=contact.name, is_active=contact.is_active)
