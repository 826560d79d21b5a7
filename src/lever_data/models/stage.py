"""Pipeline stages and stage-change history."""

from typing import Optional

from lever_data.models.base import LeverModel


class Stage(LeverModel):
    """A pipeline stage, e.g. 'Phone Interview'."""

    id: str = ""
    text: Optional[str] = None


class StageChange(LeverModel):
    """One historical stage move of an opportunity."""

    to_stage_id: Optional[str] = None
    to_stage_index: Optional[int] = None
    updated_at: Optional[int] = None
    user_id: Optional[str] = None
