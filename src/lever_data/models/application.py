"""Applications: an opportunity applied to a posting."""

from typing import Any, Optional

from pydantic import Field

from lever_data.models.base import LeverModel
from lever_data.models.common import Archived, Phone
from lever_data.models.posting import Posting
from lever_data.models.user import User


class RequisitionForHire(LeverModel):
    """Requisition an application was hired against."""

    id: Optional[str] = None
    requisition_code: Optional[str] = None
    hiring_manager_on_hire: Optional[str] = None


class Application(LeverModel):
    """
    An application. Each opportunity has at most one.
    type is 'posting', 'user' or 'referral'.
    """

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

    posting_id: str = ""
    posting: Optional[Posting] = None
    posting_owner_id: str = ""
    posting_owner: Optional[User] = None
    posting_hiring_manager_id: str = ""
    posting_hiring_manager: Optional[User] = None
    user_id: str = ""
    user: Optional[User] = None
