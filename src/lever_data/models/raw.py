"""Raw record shapes decoded from responses before expandable fields are resolved."""

from typing import Any, Optional

from pydantic import Field

from lever_data.models.application import RequisitionForHire
from lever_data.models.base import LeverModel
from lever_data.models.common import Archived, Phone
from lever_data.models.interview import Interviewer
from lever_data.models.opportunity import DataProtection, OpportunityURLs
from lever_data.models.posting import PostingCategories, PostingContent, PostingURLs
from lever_data.models.stage import StageChange

# Fields typed Any below are expandable: Lever sends either an ID string or the
# embedded record (or a list of either), depending on expand=. They are held
# as decoded JSON and interpreted by lever_data.expansion.


class RawFeedbackForm(LeverModel):
    """Feedback form with `user` left unresolved."""

    id: str = ""
    type: Optional[str] = None
    text: Optional[str] = None
    instructions: Optional[str] = None
    base_template_id: Optional[str] = Field(default=None, alias="baseTemplate")
    forms: list[Any] = Field(default_factory=list)
    panel_id: Optional[str] = Field(default=None, alias="panel")
    interview_id: Optional[str] = Field(default=None, alias="interview")
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    completed_at: Optional[int] = None
    deleted_at: Optional[int] = None

    user: Any = None


class RawPosting(LeverModel):
    """Posting with user, owner, hiringManager and followers left unresolved."""

    id: str = ""
    text: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    state: Optional[str] = None
    distribution_channels: list[str] = Field(default_factory=list)
    confidentiality: Optional[str] = None
    categories: Optional[PostingCategories] = None
    tags: list[str] = Field(default_factory=list)
    content: Optional[PostingContent] = None
    country: Optional[str] = None
    requisition_code: Optional[str] = None
    requisition_codes: list[str] = Field(default_factory=list)
    urls: Optional[PostingURLs] = None
    workplace_type: Optional[str] = None

    user: Any = None
    owner: Any = None
    hiring_manager: Any = None
    followers: Any = None


class RawApplication(LeverModel):
    """Application with posting, postingOwner, postingHiringManager and user left unresolved."""

    id: str = ""
    opportunity_id: Optional[str] = None
    candidate_id: Optional[str] = None
    created_at: Optional[int] = None
    type: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[Phone] = None
    company: Optional[str] = None
    links: list[str] = Field(default_factory=list)
    comments: Optional[str] = None
    custom_questions: list[Any] = Field(default_factory=list)
    archived: Optional[Archived] = None
    requisition_for_hire: Optional[RequisitionForHire] = None

    posting: Any = None
    posting_owner: Any = None
    posting_hiring_manager: Any = None
    user: Any = None


class RawInterview(LeverModel):
    """Interview with feedbackForms, user, stage and postings left unresolved."""

    id: str = ""
    panel_id: Optional[str] = Field(default=None, alias="panel")
    subject: Optional[str] = None
    note: Optional[str] = None
    interviewers: list[Interviewer] = Field(default_factory=list)
    timezone: Optional[str] = None
    created_at: Optional[int] = None
    date: Optional[int] = None
    duration: Optional[int] = None
    location: Optional[str] = None
    feedback_template_id: Optional[str] = Field(default=None, alias="feedbackTemplate")
    feedback_reminder: Optional[str] = None
    canceled_at: Optional[int] = None

    feedback_forms: Any = None
    user: Any = None
    stage: Any = None
    postings: Any = None


class RawOpportunity(LeverModel):
    """
    Opportunity as it comes off the wire.
    contact, stage, sourcedBy, owner, followers and applications stay unresolved.
    """

    id: str = ""
    name: Optional[str] = None
    headline: Optional[str] = None
    stage_changes: list[StageChange] = Field(default_factory=list)
    confidentiality: Optional[str] = None
    location: Optional[str] = None
    phones: list[Phone] = Field(default_factory=list)
    emails: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    archived: Optional[Archived] = None
    tags: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    origin: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    last_interaction_at: Optional[int] = None
    last_advanced_at: Optional[int] = None
    snoozed_until: Optional[int] = None
    urls: Optional[OpportunityURLs] = None
    data_protection: Optional[DataProtection] = None
    is_anonymized: bool = False
    deleted_by_id: Optional[str] = Field(default=None, alias="deletedBy")
    deleted_at: Optional[int] = None
    opportunity_location: Optional[str] = Field(default=None, alias="oppoLocation")

    contact: Any = None
    stage: Any = None
    sourced_by: Any = None
    owner: Any = None
    followers: Any = None
    applications: Any = None
