"""Lever user (a member of the hiring team)."""

from typing import Optional

from pydantic import Field

from lever_data.models.base import LeverModel


class User(LeverModel):
    """A Lever user. Embedded in other records when expanded."""

    id: str = ""
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[int] = None
    deactivated_at: Optional[int] = None
    access_role: Optional[str] = Field(
        default=None,
        description="super admin | admin | team member | limited team member | interviewer",
    )
    photo: Optional[str] = None
    external_directory_id: Optional[str] = None
    linked_contact_ids: list[str] = Field(default_factory=list)
    job_title: Optional[str] = None
    manager_id: Optional[str] = Field(default=None, alias="manager")
