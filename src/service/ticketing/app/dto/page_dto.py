"""Paged result DTOs shared by the list queries."""

from typing import Generic, List, Sequence, TypeVar

import attrs

from src.service.ticketing.app.dto.ticket_dto import TicketView
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.ticketing_error import (
    InvalidPageError,
    InvalidPageSizeError,
    PageOutOfRangeError,
)


T = TypeVar('T')


@attrs.define(frozen=True)
class Page(Generic[T]):
    items: List[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int


TicketPage = Page[TicketView]
EventPage = Page[EventEntity]


def paginate(items: Sequence[T], *, page: int, page_size: int, max_page_size: int) -> Page[T]:
    """
    Slice an already filtered and ordered sequence into one page.

    An empty sequence yields an empty page for any valid page number; otherwise
    asking past the last page is an error.
    """
    if page_size <= 0 or page_size > max_page_size:
        raise InvalidPageSizeError(page_size, max_page_size)
    if page <= 0:
        raise InvalidPageError(page)

    total_items = len(items)
    total_pages = (total_items + page_size - 1) // page_size
    if total_items > 0 and page > total_pages:
        raise PageOutOfRangeError(page, total_pages)

    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )
