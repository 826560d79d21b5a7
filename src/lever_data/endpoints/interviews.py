"""Interviews scheduled for an opportunity."""

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
from lever_data.expansion import project_interview
from lever_data.models.interview import Interview
from lever_data.models.raw import RawInterview


@dataclass
class GetInterviewRequest(BaseRequest):
    opportunity_id: str
    interview_id: str

    @property
    def path(self) -> str:
        return (
            f"opportunities/{path_segment(self.opportunity_id)}"
            f"/interviews/{path_segment(self.interview_id)}"
        )


@dataclass
class ListInterviewsRequest(BaseListRequest):
    opportunity_id: str

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/interviews"


class InterviewsEndpoint(Endpoint[Interview]):
    """Interviews, with feedbackForms, user, stage and postings resolved."""

    def normalize(self, item: dict[str, Any]) -> Interview:
        return project_interview(RawInterview.model_validate(item))

    def get(self, request: GetInterviewRequest) -> Response[Interview]:
        return self._fetch_one(request)

    def list(self, request: ListInterviewsRequest) -> ListResponse[Interview]:
        return self._fetch_list(request)
