"""Project raw records into final models by resolving their expandable fields."""

from typing import Any

from pydantic import BaseModel

from lever_data.expansion.references import resolve_reference, resolve_references
from lever_data.models.application import Application
from lever_data.models.contact import Contact
from lever_data.models.feedback import FeedbackForm
from lever_data.models.interview import Interview
from lever_data.models.opportunity import Opportunity
from lever_data.models.posting import Posting
from lever_data.models.raw import (
    RawApplication,
    RawFeedbackForm,
    RawInterview,
    RawOpportunity,
    RawPosting,
)
from lever_data.models.stage import Stage
from lever_data.models.user import User


def _plain_fields(raw: BaseModel, expandable: tuple[str, ...]) -> dict[str, Any]:
    """Non-expandable attributes of raw, keyed by attribute name, copied as-is."""
    return {
        name: getattr(raw, name)
        for name in type(raw).model_fields
        if name not in expandable
    }


def project_feedback_form(raw: RawFeedbackForm) -> FeedbackForm:
    """Resolve `user` on a feedback form."""
    fields = _plain_fields(raw, ("user",))
    fields["user_id"], fields["user"] = resolve_reference(raw.user, User, field="user")
    return FeedbackForm(**fields)


def project_posting(raw: RawPosting) -> Posting:
    """Resolve user, owner, hiringManager and followers on a posting."""
    fields = _plain_fields(raw, ("user", "owner", "hiring_manager", "followers"))
    fields["user_id"], fields["user"] = resolve_reference(raw.user, User, field="user")
    fields["owner_id"], fields["owner"] = resolve_reference(raw.owner, User, field="owner")
    fields["hiring_manager_id"], fields["hiring_manager"] = resolve_reference(
        raw.hiring_manager, User, field="hiringManager"
    )
    fields["follower_ids"], fields["followers"] = resolve_references(
        raw.followers, User, field="followers"
    )
    return Posting(**fields)


def project_application(raw: RawApplication) -> Application:
    """Resolve posting (a nested posting record), postingOwner, postingHiringManager and user."""
    fields = _plain_fields(raw, ("posting", "posting_owner", "posting_hiring_manager", "user"))
    fields["posting_id"], fields["posting"] = resolve_reference(
        raw.posting, RawPosting, field="posting", project=project_posting
    )
    fields["posting_owner_id"], fields["posting_owner"] = resolve_reference(
        raw.posting_owner, User, field="postingOwner"
    )
    fields["posting_hiring_manager_id"], fields["posting_hiring_manager"] = resolve_reference(
        raw.posting_hiring_manager, User, field="postingHiringManager"
    )
    fields["user_id"], fields["user"] = resolve_reference(raw.user, User, field="user")
    return Application(**fields)


def project_interview(raw: RawInterview) -> Interview:
    """Resolve feedbackForms, user, stage and postings on an interview."""
    fields = _plain_fields(raw, ("feedback_forms", "user", "stage", "postings"))
    fields["feedback_form_ids"], fields["feedback_forms"] = resolve_references(
        raw.feedback_forms, RawFeedbackForm, field="feedbackForms", project=project_feedback_form
    )
    fields["user_id"], fields["user"] = resolve_reference(raw.user, User, field="user")
    fields["stage_id"], fields["stage"] = resolve_reference(raw.stage, Stage, field="stage")
    fields["posting_ids"], fields["postings"] = resolve_references(
        raw.postings, RawPosting, field="postings", project=project_posting
    )
    return Interview(**fields)


def project_opportunity(raw: RawOpportunity) -> Opportunity:
    """
    Resolve every expandable field of an opportunity.

    applications is projected recursively, so an expanded application that in
    turn embeds its posting comes back fully resolved. The first field that
    cannot be resolved raises ExpansionError and nothing is returned.
    """
    fields = _plain_fields(
        raw, ("contact", "stage", "sourced_by", "owner", "followers", "applications")
    )
    fields["contact_id"], fields["contact"] = resolve_reference(
        raw.contact, Contact, field="contact"
    )
    fields["stage_id"], fields["stage"] = resolve_reference(raw.stage, Stage, field="stage")
    fields["sourced_by_id"], fields["sourced_by"] = resolve_reference(
        raw.sourced_by, User, field="sourcedBy"
    )
    fields["owner_id"], fields["owner"] = resolve_reference(raw.owner, User, field="owner")
    fields["follower_ids"], fields["followers"] = resolve_references(
        raw.followers, User, field="followers"
    )
    fields["application_ids"], fields["applications"] = resolve_references(
        raw.applications, RawApplication, field="applications", project=project_application
    )
    return Opportunity(**fields)
