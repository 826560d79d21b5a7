"""Reasons an opportunity can be archived with (hired, withdrew, ...)."""

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
from lever_data.models.archive_reason import ArchiveReason


@dataclass
class GetArchiveReasonRequest(BaseRequest):
    archive_reason_id: str

    @property
    def path(self) -> str:
        return f"archive_reasons/{path_segment(self.archive_reason_id)}"


@dataclass
class ListArchiveReasonsRequest(BaseListRequest):
    @property
    def path(self) -> str:
        return "archive_reasons"


class ArchiveReasonsEndpoint(Endpoint[ArchiveReason]):
    def normalize(self, item: dict[str, Any]) -> ArchiveReason:
        return ArchiveReason.model_validate(item)

    def get(self, request: GetArchiveReasonRequest) -> Response[ArchiveReason]:
        return self._fetch_one(request)

    def list(self, request: Optional[ListArchiveReasonsRequest] = None) -> ListResponse[ArchiveReason]:
        return self._fetch_list(request or ListArchiveReasonsRequest())
