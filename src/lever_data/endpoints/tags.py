"""Tags and sources in use across the account, with usage counts."""

from dataclasses import dataclass
from typing import Any, Optional

from lever_data.endpoints.base import BaseListRequest, Endpoint, ListResponse
from lever_data.models.tag import Source, Tag


@dataclass
class ListTagsRequest(BaseListRequest):
    @property
    def path(self) -> str:
        return "tags"


@dataclass
class ListSourcesRequest(BaseListRequest):
    @property
    def path(self) -> str:
        return "sources"


class TagsEndpoint(Endpoint[Tag]):
    def normalize(self, item: dict[str, Any]) -> Tag:
        return Tag.model_validate(item)

    def list(self, request: Optional[ListTagsRequest] = None) -> ListResponse[Tag]:
        return self._fetch_list(request or ListTagsRequest())


class SourcesEndpoint(Endpoint[Source]):
    def normalize(self, item: dict[str, Any]) -> Source:
        return Source.model_validate(item)

    def list(self, request: Optional[ListSourcesRequest] = None) -> ListResponse[Source]:
        return self._fetch_list(request or ListSourcesRequest())
