"""Pipeline stages."""

from dataclasses import dataclass
from typing import Any, Optional

from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Endpoint,
    ListResponse,
    Response,
    path_segment,
)
from lever_data.models.stage import Stage


@dataclass
class GetStageRequest(BaseRequest):
    stage_id: str

    @property
    def path(self) -> str:
        return f"stages/{path_segment(self.stage_id)}"


@dataclass
class ListStagesRequest(BaseListRequest):
    @property
    def path(self) -> str:
        return "stages"


class StagesEndpoint(Endpoint[Stage]):
    def normalize(self, item: dict[str, Any]) -> Stage:
        return Stage.model_validate(item)

    def get(self, request: GetStageRequest) -> Response[Stage]:
        return self._fetch_one(request)

    def list(self, request: Optional[ListStagesRequest] = None) -> ListResponse[Stage]:
        return self._fetch_list(request or ListStagesRequest())
