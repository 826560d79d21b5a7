"""Opportunity model: a candidate's path through the pipeline for one job."""

from typing import Optional

from pydantic import Field

from lever_data.models.application import Application
from lever_data.models.base import LeverModel
from lever_data.models.common import Archived, Phone
from lever_data.models.contact import Contact
from lever_data.models.stage import Stage, StageChange
from lever_data.models.user import User


class OpportunityURLs(LeverModel):
    """Links to the opportunity in the Lever UI."""

    list: Optional[str] = None
    show: Optional[str] = None


class DataProtectionConsent(LeverModel):
    """One consent grant (contact or store)."""

    allowed: bool = False
    expires_at: Optional[int] = None


class DataProtection(LeverModel):
    """Candidate-provided consent. Absent when no policy applies."""

    contact: Optional[DataProtectionConsent] = None
    store: Optional[DataProtectionConsent] = None


class Opportunity(LeverModel):
    """
    Resolved opportunity record.

    Every relationship that Lever can expand is exposed twice: the *_id / *_ids
    attribute is always populated, the object attribute only when the response
    embedded the full record (see the expand= request option).
    """

    id: str = Field(default="", description="Opportunity UID")
    name: Optional[str] = None
    headline: Optional[str] = None
    stage_changes: list[StageChange] = Field(default_factory=list)
    confidentiality: Optional[str] = Field(
        default=None,
        description="non-confidential | confidential",
    )
    location: Optional[str] = None
    phones: list[Phone] = Field(default_factory=list)
    emails: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    archived: Optional[Archived] = None
    tags: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    origin: Optional[str] = Field(
        default=None,
        description="agency | applied | internal | referred | sourced | university",
    )
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

    contact_id: str = ""
    contact: Optional[Contact] = None
    stage_id: str = ""
    stage: Optional[Stage] = None
    sourced_by_id: str = ""
    sourced_by: Optional[User] = None
    owner_id: str = ""
    owner: Optional[User] = None
    follower_ids: list[str] = Field(default_factory=list)
    followers: list[User] = Field(default_factory=list)
    application_ids: list[str] = Field(default_factory=list)
    applications: list[Application] = Field(default_factory=list)
