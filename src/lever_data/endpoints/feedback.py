"""Completed feedback forms for an opportunity."""

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
from lever_data.expansion import project_feedback_form
from lever_data.models.feedback import FeedbackForm
from lever_data.models.raw import RawFeedbackForm


@dataclass
class GetFeedbackRequest(BaseRequest):
    opportunity_id: str
    feedback_id: str

    @property
    def path(self) -> str:
        return (
            f"opportunities/{path_segment(self.opportunity_id)}"
            f"/feedback/{path_segment(self.feedback_id)}"
        )


@dataclass
class ListFeedbackRequest(BaseListRequest):
    opportunity_id: str

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/feedback"


class FeedbackEndpoint(Endpoint[FeedbackForm]):
    def normalize(self, item: dict[str, Any]) -> FeedbackForm:
        return project_feedback_form(RawFeedbackForm.model_validate(item))

    def get(self, request: GetFeedbackRequest) -> Response[FeedbackForm]:
        return self._fetch_one(request)

    def list(self, request: ListFeedbackRequest) -> ListResponse[FeedbackForm]:
        return self._fetch_list(request)
