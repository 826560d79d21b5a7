"""Resumes attached to an opportunity, and their file contents."""

from dataclasses import dataclass
from typing import Any, Optional

from lever_data import constants as C
from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Endpoint,
    ListResponse,
    QueryParams,
    Response,
    add_param,
    path_segment,
)
from lever_data.models.resume import Resume


@dataclass
class GetResumeRequest(BaseRequest):
    opportunity_id: str
    resume_id: str

    @property
    def path(self) -> str:
        return (
            f"opportunities/{path_segment(self.opportunity_id)}"
            f"/resumes/{path_segment(self.resume_id)}"
        )


@dataclass
class DownloadResumeRequest(GetResumeRequest):
    @property
    def path(self) -> str:
        return super().path + "/download"


@dataclass
class ListResumesRequest(BaseListRequest):
    """
    uploaded_at_start / uploaded_at_end bound the upload time (epoch ms).
    Resumes parsed from online profiles use their creation time instead.
    """

    opportunity_id: str
    uploaded_at_start: Optional[int] = None
    uploaded_at_end: Optional[int] = None

    @property
    def path(self) -> str:
        return f"opportunities/{path_segment(self.opportunity_id)}/resumes"

    def add_params(self, params: QueryParams) -> None:
        add_param(params, C.UPLOADED_AT_START, self.uploaded_at_start)
        add_param(params, C.UPLOADED_AT_END, self.uploaded_at_end)


class ResumesEndpoint(Endpoint[Resume]):
    def normalize(self, item: dict[str, Any]) -> Resume:
        return Resume.model_validate(item)

    def get(self, request: GetResumeRequest) -> Response[Resume]:
        return self._fetch_one(request)

    def list(self, request: ListResumesRequest) -> ListResponse[Resume]:
        return self._fetch_list(request)

    def download(self, request: DownloadResumeRequest) -> Response[bytes]:
        """
        Download the resume file. data holds the raw file bytes; the
        Content-Type and Content-Disposition headers are on http_response.
        """
        resp = self._transport.send(request)
        self._transport.raise_for_status(resp)
        return Response(data=resp.content, http_response=resp)
