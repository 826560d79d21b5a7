"""Applications of an opportunity to postings."""

from dataclasses import dataclass
from typing import Any

from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Endpoint,
    ListResponse,
    Response,
    path_segment,
)
from lever_data.expansion import project_application
from lever_data.models.application import Application
from lever_data.models.raw import RawApplication


@dataclass
class GetApplicationRequest(BaseRequest):
    opportunity_id: str
    application_id: str

    @property
    def path(self) -> str:
        return (
            f"opportunities/{path_segment(self.opportunity_id)}"
            f"/applications/{path_segment(self.application_id)}"
        )


@dataclass
class ListApplicationsRequest(BaseListRequest):
    opportunity_id: str

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/applications"


class ApplicationsEndpoint(Endpoint[Application]):
    """Applications, with posting, postingOwner, postingHiringManager and user resolved."""

    def normalize(self, item: dict[str, Any]) -> Application:
        return project_application(RawApplication.model_validate(item))

    def get(self, request: GetApplicationRequest) -> Response[Application]:
        return self._fetch_one(request)

    def list(self, request: ListApplicationsRequest) -> ListResponse[Application]:
        return self._fetch_list(request)
