"""Completed feedback forms."""

from typing import Any, Optional

from pydantic import Field

from lever_data.models.base import LeverModel
from lever_data.models.user import User


class FeedbackForm(LeverModel):
    """
    A feedback form submitted by an interviewer.
    user is populated only when the submitting user was expanded.
    """

    id: str = ""
    type: Optional[str] = None
    text: Optional[str] = None
    instructions: Optional[str] = None
    base_template_id: Optional[str] = Field(default=None, alias="baseTemplate")
    # code, date, dropdown, multiple choice, multiple select, score system,
    # score, scorecard, text, textarea, yes/no
    forms: list[Any] = Field(default_factory=list)
    panel_id: Optional[str] = Field(default=None, alias="panel")
    interview_id: Optional[str] = Field(default=None, alias="interview")
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    completed_at: Optional[int] = None
    deleted_at: Optional[int] = None

    user_id: str = ""
    user: Optional[User] = None
