"""Opportunities: candidates' paths through the hiring pipeline."""

from dataclasses import dataclass, field
from typing import Any, Optional

from lever_data import constants as C
from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Endpoint,
    ListResponse,
    QueryParams,
    RequestBody,
    Response,
    add_param,
    add_params,
    path_segment,
)
from lever_data.endpoints.multipart import MultipartBuilder
from lever_data.expansion import project_opportunity
from lever_data.models.common import Archived, Phone
from lever_data.models.file import FileUpload
from lever_data.models.opportunity import Opportunity
from lever_data.models.raw import RawOpportunity


@dataclass
class GetOpportunityRequest(BaseRequest):
    opportunity_id: str

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}"


@dataclass
class ListOpportunitiesRequest(BaseListRequest):
    """
    Filters for listing opportunities. List filters (tags, emails, ...) are ORed
    by Lever; timestamps are epoch milliseconds.
    """

    tags: list[str] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)
    origins: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    confidentiality: Optional[str] = None
    stage_ids: list[str] = field(default_factory=list)
    posting_ids: list[str] = field(default_factory=list)
    archived_posting_ids: list[str] = field(default_factory=list)
    created_at_start: Optional[int] = None
    created_at_end: Optional[int] = None
    updated_at_start: Optional[int] = None
    updated_at_end: Optional[int] = None
    advanced_at_start: Optional[int] = None
    advanced_at_end: Optional[int] = None
    archived_at_start: Optional[int] = None
    archived_at_end: Optional[int] = None
    archived: Optional[bool] = None
    archive_reason_ids: list[str] = field(default_factory=list)
    snoozed: Optional[bool] = None
    contact_ids: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)

    @property
    def path(self) -> str:
        return "opportunities"

    def add_params(self, params: QueryParams) -> None:
        add_params(params, C.TAG, self.tags)
        add_params(params, C.EMAIL, self.emails)
        add_params(params, C.ORIGIN, self.origins)
        add_params(params, C.SOURCE, self.sources)
        add_param(params, C.CONFIDENTIALITY, self.confidentiality)
        add_params(params, C.STAGE_ID, self.stage_ids)
        add_params(params, C.POSTING_ID, self.posting_ids)
        add_params(params, C.ARCHIVED_POSTING_ID, self.archived_posting_ids)
        add_param(params, C.CREATED_AT_START, self.created_at_start)
        add_param(params, C.CREATED_AT_END, self.created_at_end)
        add_param(params, C.UPDATED_AT_START, self.updated_at_start)
        add_param(params, C.UPDATED_AT_END, self.updated_at_end)
        add_param(params, C.ADVANCED_AT_START, self.advanced_at_start)
        add_param(params, C.ADVANCED_AT_END, self.advanced_at_end)
        add_param(params, C.ARCHIVED_AT_START, self.archived_at_start)
        add_param(params, C.ARCHIVED_AT_END, self.archived_at_end)
        add_param(params, C.ARCHIVED, self.archived)
        add_params(params, C.ARCHIVE_REASON_ID, self.archive_reason_ids)
        add_param(params, C.SNOOZED, self.snoozed)
        add_params(params, C.CONTACT_ID, self.contact_ids)
        add_params(params, C.LOCATION, self.locations)


@dataclass
class ListDeletedOpportunitiesRequest(BaseListRequest):
    """Deleted opportunities, optionally bounded by deletion time (epoch ms, inclusive)."""

    deleted_at_start: Optional[int] = None
    deleted_at_end: Optional[int] = None

    @property
    def path(self) -> str:
        return "opportunities/deleted"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.DELETED_AT_START, self.deleted_at_start)
        add_param(params, C.DELETED_AT_END, self.deleted_at_end)


@dataclass
class CreateOpportunityRequest(BaseRequest):
    """
    Create a candidate and opportunity, sent as multipart/form-data.

    perform_as is required by Lever: the user the opportunity is created on behalf of.
    With parse=True and a resume, fields missing from the request are filled from
    the parsed resume. Providing an email or contact_id dedupes against existing contacts.
    """

    method = "POST"

    perform_as: str
    parse: bool = False
    perform_as_posting_owner: bool = False

    name: Optional[str] = None
    headline: Optional[str] = None
    stage_id: Optional[str] = None
    location: Optional[str] = None
    phones: list[Phone] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    origin: Optional[str] = None
    owner_id: Optional[str] = None
    follower_ids: list[str] = field(default_factory=list)
    posting_id: Optional[str] = None
    created_at: Optional[int] = None
    archived: Optional[Archived] = None
    contact_id: Optional[str] = None
    resume: Optional[FileUpload] = None
    files: list[FileUpload] = field(default_factory=list)

    @property
    def path(self) -> str:
        return "opportunities"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.PERFORM_AS, self.perform_as)
        if self.parse:
            add_param(params, C.PARSE, True)
        if self.perform_as_posting_owner:
            add_param(params, C.PERFORM_AS_POSTING_OWNER, True)

    def body(self) -> RequestBody:
        form = MultipartBuilder()
        form.field("name", self.name)
        form.field("headline", self.headline)
        form.field("stage", self.stage_id)
        form.field("location", self.location)
        for i, phone in enumerate(self.phones):
            form.field(f"phones[{i}][type]", phone.type)
            form.field(f"phones[{i}][value]", phone.value)
        form.fields("emails", self.emails)
        form.fields("links", self.links)
        form.fields("tags", self.tags)
        form.fields("sources", self.sources)
        form.field("origin", self.origin)
        form.field("owner", self.owner_id)
        form.fields("followers", self.follower_ids)
        form.field("posting", self.posting_id)
        form.field("createdAt", self.created_at)
        if self.archived is not None:
            form.field("archived[archivedAt]", self.archived.archived_at)
            form.field("archived[reason]", self.archived.reason_id)
        form.field("contact", self.contact_id)
        form.file("resume", self.resume)
        for i, upload in enumerate(self.files):
            form.file(f"files[{i}]", upload)
        return RequestBody(parts=form.parts)


@dataclass
class UpdateOpportunityStageRequest(BaseRequest):
    method = "PUT"

    opportunity_id: str
    stage_id: str
    perform_as: Optional[str] = None

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/stage"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.PERFORM_AS, self.perform_as)

    def body(self) -> RequestBody:
        return RequestBody(json={"stage": self.stage_id})


@dataclass
class UpdateOpportunityArchivedStateRequest(BaseRequest):
    """
    Archive an opportunity with reason_id, change its archive reason, or
    unarchive it when reason_id is None. A requisition_id together with a
    'Hired' reason marks the candidate hired against that requisition.
    """

    method = "PUT"

    opportunity_id: str
    reason_id: Optional[str]
    clean_interviews: bool = False
    requisition_id: Optional[str] = None
    perform_as: Optional[str] = None

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/archived"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.PERFORM_AS, self.perform_as)

    def body(self) -> RequestBody:
        doc: dict[str, Any] = {
            "reason": self.reason_id,
            "cleanInterviews": self.clean_interviews,
        }
        if self.requisition_id:
            doc["requisitionId"] = self.requisition_id
        return RequestBody(json=doc)


@dataclass
class _OpportunityValuesRequest(BaseRequest):
    """POST opportunities/{id}/<action> with {"<key>": values}."""

    method = "POST"
    action = ""
    key = ""

    opportunity_id: str
    values: list[str] = field(default_factory=list)
    perform_as: Optional[str] = None

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/{self.action}"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.PERFORM_AS, self.perform_as)

    def body(self) -> RequestBody:
        return RequestBody(json={self.key: list(self.values)})


@dataclass
class AddOpportunityLinksRequest(_OpportunityValuesRequest):
    action = "addLinks"
    key = "links"


@dataclass
class RemoveOpportunityLinksRequest(_OpportunityValuesRequest):
    action = "removeLinks"
    key = "links"


@dataclass
class AddOpportunityTagsRequest(_OpportunityValuesRequest):
    action = "addTags"
    key = "tags"


@dataclass
class RemoveOpportunityTagsRequest(_OpportunityValuesRequest):
    action = "removeTags"
    key = "tags"


@dataclass
class AddOpportunitySourcesRequest(_OpportunityValuesRequest):
    action = "addSources"
    key = "sources"


@dataclass
class RemoveOpportunitySourcesRequest(_OpportunityValuesRequest):
    action = "removeSources"
    key = "sources"


@dataclass
class CreateOpportunityResponse(Response[Opportunity]):
    """deduped is True when Lever linked the new opportunity to an existing contact."""

    deduped: bool = False


class OpportunitiesEndpoint(Endpoint[Opportunity]):
    """Opportunity operations. Every returned opportunity has its expandable fields resolved."""

    def normalize(self, item: dict[str, Any]) -> Opportunity:
        return project_opportunity(RawOpportunity.model_validate(item))

    def get(self, request: GetOpportunityRequest) -> Response[Opportunity]:
        return self._fetch_one(request)

    def list(self, request: Optional[ListOpportunitiesRequest] = None) -> ListResponse[Opportunity]:
        return self._fetch_list(request or ListOpportunitiesRequest())

    def list_deleted(
        self, request: Optional[ListDeletedOpportunitiesRequest] = None
    ) -> ListResponse[Opportunity]:
        return self._fetch_list(request or ListDeletedOpportunitiesRequest())

    def create(self, request: CreateOpportunityRequest) -> CreateOpportunityResponse:
        payload, resp = self._transport.execute(request)
        return CreateOpportunityResponse(
            data=self.normalize(payload.get("data") or {}),
            http_response=resp,
            deduped=bool(payload.get("deduped")),
        )

    def update_stage(self, request: UpdateOpportunityStageRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def update_archived_state(
        self, request: UpdateOpportunityArchivedStateRequest
    ) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def add_links(self, request: AddOpportunityLinksRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def remove_links(self, request: RemoveOpportunityLinksRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def add_tags(self, request: AddOpportunityTagsRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def remove_tags(self, request: RemoveOpportunityTagsRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def add_sources(self, request: AddOpportunitySourcesRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)

    def remove_sources(self, request: RemoveOpportunitySourcesRequest) -> Response[Optional[Opportunity]]:
        return self._fetch_optional(request)
