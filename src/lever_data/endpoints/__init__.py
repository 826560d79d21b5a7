"""Request and response types for each Lever resource."""

from lever_data.endpoints.applications import (
    ApplicationsEndpoint,
    GetApplicationRequest,
    ListApplicationsRequest,
)
from lever_data.endpoints.archive_reasons import (
    ArchiveReasonsEndpoint,
    GetArchiveReasonRequest,
    ListArchiveReasonsRequest,
)
from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Expansion,
    ListResponse,
    Pagination,
    RequestBody,
    Response,
)
from lever_data.endpoints.contacts import ContactsEndpoint, GetContactRequest, UpdateContactRequest
from lever_data.endpoints.feedback import FeedbackEndpoint, GetFeedbackRequest, ListFeedbackRequest
from lever_data.endpoints.interviews import (
    GetInterviewRequest,
    InterviewsEndpoint,
    ListInterviewsRequest,
)
from lever_data.endpoints.opportunities import (
    AddOpportunityLinksRequest,
    AddOpportunitySourcesRequest,
    AddOpportunityTagsRequest,
    CreateOpportunityRequest,
    CreateOpportunityResponse,
    GetOpportunityRequest,
    ListDeletedOpportunitiesRequest,
    ListOpportunitiesRequest,
    OpportunitiesEndpoint,
    RemoveOpportunityLinksRequest,
    RemoveOpportunitySourcesRequest,
    RemoveOpportunityTagsRequest,
    UpdateOpportunityArchivedStateRequest,
    UpdateOpportunityStageRequest,
)
from lever_data.endpoints.resumes import (
    DownloadResumeRequest,
    GetResumeRequest,
    ListResumesRequest,
    ResumesEndpoint,
)
from lever_data.endpoints.stages import GetStageRequest, ListStagesRequest, StagesEndpoint
from lever_data.endpoints.tags import ListSourcesRequest, ListTagsRequest, SourcesEndpoint, TagsEndpoint
from lever_data.endpoints.users import (
    CreateUserRequest,
    DeactivateUserRequest,
    GetUserRequest,
    ListUsersRequest,
    ReactivateUserRequest,
    UpdateUserRequest,
    UsersEndpoint,
)

__all__ = [
    "AddOpportunityLinksRequest",
    "AddOpportunitySourcesRequest",
    "AddOpportunityTagsRequest",
    "ApplicationsEndpoint",
    "ArchiveReasonsEndpoint",
    "BaseListRequest",
    "BaseRequest",
    "ContactsEndpoint",
    "CreateOpportunityRequest",
    "CreateOpportunityResponse",
    "CreateUserRequest",
    "DeactivateUserRequest",
    "DownloadResumeRequest",
    "Expansion",
    "FeedbackEndpoint",
    "GetApplicationRequest",
    "GetArchiveReasonRequest",
    "GetContactRequest",
    "GetFeedbackRequest",
    "GetInterviewRequest",
    "GetOpportunityRequest",
    "GetResumeRequest",
    "GetStageRequest",
    "GetUserRequest",
    "InterviewsEndpoint",
    "ListApplicationsRequest",
    "ListArchiveReasonsRequest",
    "ListDeletedOpportunitiesRequest",
    "ListFeedbackRequest",
    "ListInterviewsRequest",
    "ListOpportunitiesRequest",
    "ListResponse",
    "ListResumesRequest",
    "ListSourcesRequest",
    "ListStagesRequest",
    "ListTagsRequest",
    "ListUsersRequest",
    "OpportunitiesEndpoint",
    "Pagination",
    "ReactivateUserRequest",
    "RemoveOpportunityLinksRequest",
    "RemoveOpportunitySourcesRequest",
    "RemoveOpportunityTagsRequest",
    "RequestBody",
    "Response",
    "ResumesEndpoint",
    "SourcesEndpoint",
    "StagesEndpoint",
    "TagsEndpoint",
    "UpdateContactRequest",
    "UpdateOpportunityArchivedStateRequest",
    "UpdateOpportunityStageRequest",
    "UpdateUserRequest",
    "UsersEndpoint",
]
