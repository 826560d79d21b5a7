"""Data models for Lever records and their raw (unresolved) wire shapes."""

from lever_data.models.application import Application, RequisitionForHire
from lever_data.models.archive_reason import ArchiveReason
from lever_data.models.common import Archived, Phone
from lever_data.models.contact import Contact, ContactLocation
from lever_data.models.feedback import FeedbackForm
from lever_data.models.file import FileUpload
from lever_data.models.interview import Interview, Interviewer
from lever_data.models.opportunity import (
    DataProtection,
    DataProtectionConsent,
    Opportunity,
    OpportunityURLs,
)
from lever_data.models.posting import (
    Posting,
    PostingCategories,
    PostingContent,
    PostingContentList,
    PostingURLs,
)
from lever_data.models.raw import (
    RawApplication,
    RawFeedbackForm,
    RawInterview,
    RawOpportunity,
    RawPosting,
)
from lever_data.models.resume import Resume, ResumeFile, ResumeParsedData
from lever_data.models.stage import Stage, StageChange
from lever_data.models.tag import Source, Tag
from lever_data.models.user import User

__all__ = [
    "Application",
    "ArchiveReason",
    "Archived",
    "Contact",
    "ContactLocation",
    "DataProtection",
    "DataProtectionConsent",
    "FeedbackForm",
    "FileUpload",
    "Interview",
    "Interviewer",
    "Opportunity",
    "OpportunityURLs",
    "Phone",
    "Posting",
    "PostingCategories",
    "PostingContent",
    "PostingContentList",
    "PostingURLs",
    "RawApplication",
    "RawFeedbackForm",
    "RawInterview",
    "RawOpportunity",
    "RawPosting",
    "RequisitionForHire",
    "Resume",
    "ResumeFile",
    "ResumeParsedData",
    "Source",
    "Stage",
    "StageChange",
    "Tag",
    "User",
]
