"""Shared request and response shapes for all Lever endpoints."""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar
from urllib.parse import quote

import httpx

from lever_data.constants import EXPAND, INCLUDE, LIMIT, OFFSET

if TYPE_CHECKING:
    from lever_data.transport import Transport

T = TypeVar("T")

QueryParams = list[tuple[str, str]]


def path_segment(value: str) -> str:
    """Escape a value for use as one URL path segment."""
    return quote(value, safe="")


def add_param(params: QueryParams, key: str, value: Any) -> None:
    """Append key=value when value is set. Booleans are sent as 'true'/'false'."""
    if value is None or value == "":
        return
    if isinstance(value, bool):
        params.append((key, "true" if value else "false"))
    else:
        params.append((key, str(value)))


def add_params(params: QueryParams, key: str, values: list[Any]) -> None:
    """Append key=value once per value, in order."""
    for value in values:
        add_param(params, key, value)


@dataclass
class Expansion:
    """
    Fields to include or expand in the response.
    include= adds optional fields; expand= embeds related records in place of their IDs.
    """

    include: list[str] = field(default_factory=list)
    expand: list[str] = field(default_factory=list)

    def apply(self, params: QueryParams) -> None:
        add_params(params, INCLUDE, self.include)
        add_params(params, EXPAND, self.expand)


@dataclass
class Pagination:
    """Page size and the opaque offset token from a previous page's `next`."""

    limit: Optional[int] = None
    offset: Optional[str] = None

    def apply(self, params: QueryParams) -> None:
        if self.limit is not None and self.limit > 0:
            params.append((LIMIT, str(self.limit)))
        add_param(params, OFFSET, self.offset)


@dataclass
class RequestBody:
    """
    Body of a write request: a JSON document, or multipart parts.
    Each part is (field name, (filename, content, content type)); plain form
    fields have no filename and no content type.
    """

    json: Optional[Any] = None
    parts: Optional[list[tuple[str, tuple[Optional[str], Any, Optional[str]]]]] = None


@dataclass(kw_only=True)
class BaseRequest(ABC):
    """
    Standard interface for Lever API requests.
    Subclasses set method and implement path; filters go in add_params.
    """

    method = "GET"

    expansion: Expansion = field(default_factory=Expansion)

    @property
    @abstractmethod
    def path(self) -> str:
        """Path relative to the API base URL, without a leading slash."""
        pass

    def add_params(self, params: QueryParams) -> None:
        """Append endpoint-specific query parameters."""

    def query_params(self) -> QueryParams:
        params: QueryParams = []
        self.expansion.apply(params)
        self.add_params(params)
        return params

    def body(self) -> Optional[RequestBody]:
        return None


@dataclass(kw_only=True)
class BaseListRequest(BaseRequest):
    """Request for a paginated list endpoint."""

    page: Pagination = field(default_factory=Pagination)

    def query_params(self) -> QueryParams:
        params = super().query_params()
        self.page.apply(params)
        return params

    def with_offset(self, offset: Optional[str]):
        """Copy of this request asking for the page starting at offset."""
        return dataclasses.replace(
            self, page=Pagination(limit=self.page.limit, offset=offset)
        )


@dataclass
class Response(Generic[T]):
    """A single record and the HTTP response it came from."""

    data: T
    http_response: Optional[httpx.Response] = None


@dataclass
class ListResponse(Generic[T]):
    """
    One page of records.
    next is the offset token for the following page; has_next says whether there is one.
    """

    data: list[T] = field(default_factory=list)
    has_next: bool = False
    next: Optional[str] = None
    http_response: Optional[httpx.Response] = None


class Endpoint(ABC, Generic[T]):
    """
    One Lever resource (opportunities, users, ...).
    Subclasses implement normalize to turn one decoded JSON record into a model.
    """

    def __init__(self, transport: "Transport"):
        self._transport = transport

    @abstractmethod
    def normalize(self, item: dict[str, Any]) -> T:
        """Convert one record from a response's data into its model."""
        pass

    def _fetch_one(self, request: BaseRequest) -> Response[T]:
        payload, resp = self._transport.execute(request)
        return Response(data=self.normalize(payload.get("data") or {}), http_response=resp)

    def _fetch_optional(self, request: BaseRequest) -> Response[Optional[T]]:
        """For writes whose response may carry no record."""
        payload, resp = self._transport.execute(request)
        item = payload.get("data")
        return Response(data=self.normalize(item) if item else None, http_response=resp)

    def _fetch_list(self, request: BaseListRequest) -> ListResponse[T]:
        payload, resp = self._transport.execute(request)
        return ListResponse(
            data=[self.normalize(item) for item in payload.get("data") or []],
            has_next=bool(payload.get("hasNext")),
            next=payload.get("next") or None,
            http_response=resp,
        )
