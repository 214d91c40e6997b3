from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class TicketView:
    """Read projection of a ticket with its status resolved at one instant. The purchase token stays private."""

    id: UUID
    event_id: UUID
    ticket_type_id: UUID
    seat: str
    status: TicketStatus
    owner: Optional[str] = None
    reserved_until: Optional[datetime] = None
    purchase_price: Optional[Decimal] = None

    @classmethod
    def from_ticket(cls, ticket: Ticket, *, now: datetime) -> 'TicketView':
        status = ticket.status_at(now)
        return cls(
            id=ticket.id,
            event_id=ticket.event_id,
            ticket_type_id=ticket.ticket_type_id,
            seat=ticket.seat,
            status=status,
            owner=ticket.owner,
            reserved_until=ticket.reserved_until if status is TicketStatus.RESERVED else None,
            purchase_price=ticket.purchase_price,
        )
