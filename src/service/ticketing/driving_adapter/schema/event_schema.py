from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from src.service.ticketing.app.dto.page_dto import EventPage
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity


class EventRequest(BaseModel):
    venue_id: UUID
    name: str
    description: str = ''
    event_start: datetime
    event_end: datetime
    for_sale_start: datetime
    for_sale_end: datetime

    class Config:
        json_schema_extra = {
            'example': {
                'venue_id': '01928f5e-7c4a-7b1e-9d0f-3a2b1c4d5e6f',
                'name': 'Concert Event',
                'description': 'Amazing live music performance',
                'event_start': '2026-12-24T19:00:00Z',
                'event_end': '2026-12-24T22:00:00Z',
                'for_sale_start': '2026-11-01T00:00:00Z',
                'for_sale_end': '2026-12-24T18:00:00Z',
            }
        }


class EventResponse(BaseModel):
    id: UUID
    venue_id: UUID
    name: str
    description: str
    event_start: datetime
    event_end: datetime
    for_sale_start: datetime
    for_sale_end: datetime

    @classmethod
    def from_entity(cls, event: EventEntity) -> 'EventResponse':
        return cls(
            id=event.id,
            venue_id=event.venue_id,
            name=event.name,
            description=event.description,
            event_start=event.event_start,
            event_end=event.event_end,
            for_sale_start=event.for_sale_start,
            for_sale_end=event.for_sale_end,
        )


class EventPageResponse(BaseModel):
    items: List[EventResponse]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def from_page(cls, result: EventPage) -> 'EventPageResponse':
        return cls(
            items=[EventResponse.from_entity(event) for event in result.items],
            page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
            total_pages=result.total_pages,
        )


class TicketTypeRequest(BaseModel):
    name: str
    price: Decimal = Field(ge=0)
    seats: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            'example': {'name': 'Floor', 'price': '2000.00', 'seats': ['A-1', 'A-2']}
        }


class TicketTypeResponse(BaseModel):
    id: UUID
    event_id: UUID
    name: str
    price: Decimal
    seats: List[str]

    @classmethod
    def from_entity(cls, ticket_type: TicketTypeEntity) -> 'TicketTypeResponse':
        return cls(
            id=ticket_type.id,
            event_id=ticket_type.event_id,
            name=ticket_type.name,
            price=ticket_type.price,
            seats=list(ticket_type.seats),
        )
