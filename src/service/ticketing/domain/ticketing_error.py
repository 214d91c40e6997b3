"""
Ticketing domain errors

Every failure raised by the ticketing service maps onto one ErrorKind so the
HTTP layer and callers can branch on the category instead of the message.
"""

from decimal import Decimal
from typing import Iterable
from uuid import UUID

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    OutOfRangeError,
)
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


# ------------------------------------------------------------------ not found


class TicketNotFoundError(NotFoundError):
    def __init__(self, ticket_id: UUID) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} not found')


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f'Event {event_id} not found')


class VenueNotFoundError(NotFoundError):
    def __init__(self, venue_id: UUID) -> None:
        self.venue_id = venue_id
        super().__init__(f'Venue {venue_id} not found')


class TicketTypeNotFoundError(NotFoundError):
    def __init__(self, ticket_type_id: UUID) -> None:
        self.ticket_type_id = ticket_type_id
        super().__init__(f'Ticket type {ticket_type_id} not found')


class ReservationNotFoundError(NotFoundError):
    def __init__(self, ticket_id: UUID, user_id: str) -> None:
        self.ticket_id = ticket_id
        self.user_id = user_id
        super().__init__(f'Reservation for user {user_id} on ticket {ticket_id} not found')


class PurchaseNotFoundError(NotFoundError):
    def __init__(self, ticket_id: UUID) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Purchase for ticket {ticket_id} not found')


# ----------------------------------------------------------- invalid argument


class InvalidArgumentError(DomainError):
    pass


class InvalidPageError(DomainError):
    def __init__(self, page: int) -> None:
        self.page = page
        super().__init__(f'Page must be at least 1, got {page}')


class InvalidPageSizeError(DomainError):
    def __init__(self, page_size: int, max_page_size: int) -> None:
        self.page_size = page_size
        self.max_page_size = max_page_size
        super().__init__(f'Page size must be between 1 and {max_page_size}, got {page_size}')


class InvalidEventScheduleError(DomainError):
    pass


# ------------------------------------------------------------------- conflict


class TicketUnavailableError(ConflictError):
    def __init__(self, ticket_id: UUID, status: TicketStatus) -> None:
        self.ticket_id = ticket_id
        self.status = status
        super().__init__(f'Ticket {ticket_id} is not available (status: {status.value})')


class ReservedByOtherError(ConflictError):
    def __init__(self, ticket_id: UUID) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} is reserved by another user')


class AlreadySoldError(ConflictError):
    def __init__(self, ticket_id: UUID) -> None:
        self.ticket_id = ticket_id
        super().__init__(f'Ticket {ticket_id} is already sold')


class PriceMismatchError(ConflictError):
    def __init__(self, ticket_id: UUID, *, offered: Decimal, expected: Decimal) -> None:
        self.ticket_id = ticket_id
        self.offered = offered
        self.expected = expected
        super().__init__(
            f'Purchase price {offered} does not match ticket price {expected} for ticket {ticket_id}'
        )


class SeatInUseError(ConflictError):
    def __init__(self, seat: str, status: TicketStatus) -> None:
        self.seat = seat
        self.status = status
        super().__init__(f'Seat {seat} cannot be removed while {status.value}')


class SeatNotInVenueError(ConflictError):
    def __init__(self, seats: Iterable[str]) -> None:
        self.seats = list(seats)
        super().__init__(f'Seats not in venue: {", ".join(self.seats)}')


class SeatClaimedError(ConflictError):
    def __init__(self, seats: Iterable[str]) -> None:
        self.seats = list(seats)
        super().__init__(f'Seats already belong to another ticket type: {", ".join(self.seats)}')


class VenueChangeNotAllowedError(ConflictError):
    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f'Event {event_id} already has ticket types; its venue cannot change')


# --------------------------------------------------------------- out of range


class PageOutOfRangeError(OutOfRangeError):
    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        super().__init__(f'Page {page} is out of range (total pages: {total_pages})')
