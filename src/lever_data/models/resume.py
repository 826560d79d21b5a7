"""Resumes attached to opportunities."""

from typing import Any, Optional

from pydantic import Field

from lever_data.models.base import LeverModel


class ResumeFile(LeverModel):
    """Metadata of the uploaded resume file."""

    download_url: Optional[str] = None
    ext: Optional[str] = None
    name: Optional[str] = None
    uploaded_at: Optional[int] = None
    status: Optional[str] = None
    size: Optional[int] = None


class ResumeParsedData(LeverModel):
    """Positions and schools extracted from the resume by Lever."""

    positions: list[dict[str, Any]] = Field(default_factory=list)
    schools: list[dict[str, Any]] = Field(default_factory=list, alias="school")


class Resume(LeverModel):
    """A resume attached to an opportunity."""

    id: str = ""
    created_at: Optional[int] = None
    file: Optional[ResumeFile] = None
    parsed_data: ResumeParsedData = Field(default_factory=ResumeParsedData)
