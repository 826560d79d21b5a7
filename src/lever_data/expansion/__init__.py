"""Resolution of fields Lever returns either as IDs or as embedded records."""

from lever_data.expansion.projector import (
    project_application,
    project_feedback_form,
    project_interview,
    project_opportunity,
    project_posting,
)
from lever_data.expansion.references import resolve_reference, resolve_references

__all__ = [
    "project_application",
    "project_feedback_form",
    "project_interview",
    "project_opportunity",
    "project_posting",
    "resolve_reference",
    "resolve_references",
]
