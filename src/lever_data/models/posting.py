"""Job postings."""

from typing import Optional

from pydantic import Field

from lever_data.models.base import LeverModel
from lever_data.models.user import User


class PostingCategories(LeverModel):
    """Categories a posting is filed under."""

    team: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    all_locations: list[str] = Field(default_factory=list)
    commitment: Optional[str] = None
    level: Optional[str] = None


class PostingContentList(LeverModel):
    """A titled list in the posting body (e.g. 'Requirements')."""

    text: Optional[str] = None
    content: Optional[str] = None


class PostingContent(LeverModel):
    """Posting body, in plain text and HTML."""

    description: Optional[str] = None
    description_html: Optional[str] = None
    lists: list[PostingContentList] = Field(default_factory=list)
    closing: Optional[str] = None
    closing_html: Optional[str] = None


class PostingURLs(LeverModel):
    """Public URLs of a posting."""

    list: Optional[str] = None
    show: Optional[str] = None
    apply: Optional[str] = None


class Posting(LeverModel):
    """
    A job posting.
    user, owner, hiring_manager and followers are populated only when the
    response embedded them; the *_id(s) fields are always populated.
    """

    id: str = ""
    text: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    state: Optional[str] = Field(
        default=None,
        description="published | internal | closed | draft | pending | rejected",
    )
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

    user_id: str = ""
    user: Optional[User] = None
    owner_id: str = ""
    owner: Optional[User] = None
    hiring_manager_id: str = ""
    hiring_manager: Optional[User] = None
    follower_ids: list[str] = Field(default_factory=list)
    followers: list[User] = Field(default_factory=list)
