"""Small value types shared by several Lever records."""

from typing import Optional

from pydantic import Field

from lever_data.models.base import LeverModel


class Phone(LeverModel):
    """Phone number with an optional type (mobile, home, work, skype, other)."""

    type: Optional[str] = None
    value: Optional[str] = None


class Archived(LeverModel):
    """Archived status of an opportunity or application."""

    archived_at: Optional[int] = Field(default=None, description="Epoch milliseconds")
    reason_id: Optional[str] = Field(default=None, alias="reason")
