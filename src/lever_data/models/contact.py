"""Contacts: the person behind one or more opportunities."""

from typing import Optional

from pydantic import Field

from lever_data.models.base import LeverModel
from lever_data.models.common import Phone


class ContactLocation(LeverModel):
    """Free-form contact location."""

    name: Optional[str] = None


class Contact(LeverModel):
    """
    A contact. Several opportunities can share one contact.
    Personal fields are blank once the contact is anonymized.
    """

    id: str = ""
    name: Optional[str] = None
    headline: Optional[str] = None
    location: Optional[ContactLocation] = None
    emails: list[str] = Field(default_factory=list)
    is_anonymized: bool = False
    phones: list[Phone] = Field(default_factory=list)
