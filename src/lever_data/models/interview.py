"""Scheduled interviews."""

from typing import Optional

from pydantic import Field

from lever_data.models.base import LeverModel
from lever_data.models.feedback import FeedbackForm
from lever_data.models.posting import Posting
from lever_data.models.stage import Stage
from lever_data.models.user import User


class Interviewer(LeverModel):
    """A member of an interview panel."""

    id: str = ""
    name: Optional[str] = None
    email: Optional[str] = None


class Interview(LeverModel):
    """An interview on an opportunity."""

    id: str = ""
    panel_id: Optional[str] = Field(default=None, alias="panel")
    subject: Optional[str] = None
    note: Optional[str] = None
    interviewers: list[Interviewer] = Field(default_factory=list)
    timezone: Optional[str] = None
    created_at: Optional[int] = None
    date: Optional[int] = None
    duration: Optional[int] = Field(default=None, description="Minutes")
    location: Optional[str] = None
    feedback_template_id: Optional[str] = Field(default=None, alias="feedbackTemplate")
    feedback_reminder: Optional[str] = Field(
        default=None,
        description="once | daily | frequently | none",
    )
    canceled_at: Optional[int] = None

    feedback_form_ids: list[str] = Field(default_factory=list)
    feedback_forms: list[FeedbackForm] = Field(default_factory=list)
    user_id: str = ""
    user: Optional[User] = None
    stage_id: str = ""
    stage: Optional[Stage] = None
    posting_ids: list[str] = Field(default_factory=list)
    postings: list[Posting] = Field(default_factory=list)
