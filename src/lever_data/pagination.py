"""Iterate over every page of a list endpoint."""

from typing import Callable, Iterator, TypeVar

from lever_data.endpoints.base import BaseListRequest, ListResponse

T = TypeVar("T")
R = TypeVar("R", bound=BaseListRequest)


def iter_pages(fetch: Callable[[R], ListResponse[T]], request: R) -> Iterator[ListResponse[T]]:
    """
    Yield pages from fetch, starting with request and following `next` offsets.

        for page in iter_pages(lever.opportunities.list, ListOpportunitiesRequest()):
            ...

    Stops after the first page whose has_next is false or whose next is empty.
    """
    while True:
        page = fetch(request)
        yield page
        if not page.has_next or not page.next:
            return
        request = request.with_offset(page.next)


def iter_items(fetch: Callable[[R], ListResponse[T]], request: R) -> Iterator[T]:
    """Yield every record across all pages."""
    for page in iter_pages(fetch, request):
        yield from page.data
