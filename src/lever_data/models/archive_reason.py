"""Archive reasons."""

from typing import Optional

from lever_data.models.base import LeverModel


class ArchiveReason(LeverModel):
    """Why an opportunity was archived. Type is 'hired' or 'non-hired'."""

    id: str = ""
    text: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
