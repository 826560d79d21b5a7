"""Lever API defaults and query parameter names."""

DEFAULT_BASE_URL = "https://api.lever.co/v1"
DEFAULT_TIMEOUT = 30.0

# Environment variables read by ClientConfig.from_env
ENV_API_KEY = "LEVER_API_KEY"
ENV_BASE_URL = "LEVER_BASE_URL"
ENV_USER_AGENT = "LEVER_USER_AGENT"
ENV_TIMEOUT = "LEVER_TIMEOUT"

# Expansion and paging
INCLUDE = "include"
EXPAND = "expand"
LIMIT = "limit"
OFFSET = "offset"

# Opportunity filters
TAG = "tag"
EMAIL = "email"
ORIGIN = "origin"
SOURCE = "source"
CONFIDENTIALITY = "confidentiality"
STAGE_ID = "stage_id"
POSTING_ID = "posting_id"
ARCHIVED_POSTING_ID = "archived_posting_id"
CREATED_AT_START = "created_at_start"
CREATED_AT_END = "created_at_end"
UPDATED_AT_START = "updated_at_start"
UPDATED_AT_END = "updated_at_end"
ADVANCED_AT_START = "advanced_at_start"
ADVANCED_AT_END = "advanced_at_end"
ARCHIVED_AT_START = "archived_at_start"
ARCHIVED_AT_END = "archived_at_end"
ARCHIVED = "archived"
ARCHIVE_REASON_ID = "archive_reason_id"
SNOOZED = "snoozed"
CONTACT_ID = "contact_id"
LOCATION = "location"
DELETED_AT_START = "deleted_at_start"
DELETED_AT_END = "deleted_at_end"

# Opportunity writes
PERFORM_AS = "perform_as"
PARSE = "parse"
PERFORM_AS_POSTING_OWNER = "perform_as_posting_owner"

# User filters
ACCESS_ROLE = "accessRole"
INCLUDE_DEACTIVATED = "includeDeactivated"
EXTERNAL_DIRECTORY_ID = "external_directory_id"

# Resume filters
UPLOADED_AT_START = "uploadedAtStart"
UPLOADED_AT_END = "uploadedAtEnd"

# Values accepted by expand= on opportunity endpoints
EXPANDABLE_OPPORTUNITY_FIELDS = (
    "applications",
    "contact",
    "stage",
    "owner",
    "followers",
    "sourcedBy",
)
