from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.service.ticketing.app.dto.page_dto import TicketPage
from src.service.ticketing.app.dto.ticket_dto import TicketView
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation


class TicketResponse(BaseModel):
    id: UUID
    event_id: UUID
    ticket_type_id: UUID
    seat: str
    status: TicketStatus
    owner: Optional[str] = None
    reserved_until: Optional[datetime] = None
    purchase_price: Optional[Decimal] = None

    @classmethod
    def from_view(cls, view: TicketView) -> 'TicketResponse':
        return cls(
            id=view.id,
            event_id=view.event_id,
            ticket_type_id=view.ticket_type_id,
            seat=view.seat,
            status=view.status,
            owner=view.owner,
            reserved_until=view.reserved_until,
            purchase_price=view.purchase_price,
        )


class TicketPageResponse(BaseModel):
    items: List[TicketResponse]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def from_page(cls, result: TicketPage) -> 'TicketPageResponse':
        return cls(
            items=[TicketResponse.from_view(view) for view in result.items],
            page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
            total_pages=result.total_pages,
        )


class ReservationRequest(BaseModel):
    user_id: str


class ReservationResponse(BaseModel):
    ticket_id: UUID
    user_id: str
    reserved_until: datetime

    @classmethod
    def from_value(cls, reservation: TicketReservation) -> 'ReservationResponse':
        return cls(
            ticket_id=reservation.ticket_id,
            user_id=reservation.user_id,
            reserved_until=reservation.reserved_until,
        )


class PurchaseRequest(BaseModel):
    purchaser_id: str
    purchase_token: str
    purchase_price: Decimal

    class Config:
        json_schema_extra = {
            'example': {
                'purchaser_id': 'user-42',
                'purchase_token': 'tok_3f9a1c',
                'purchase_price': '2000.00',
            }
        }


class PurchaseResponse(BaseModel):
    ticket_id: UUID
    purchaser_id: str
    purchase_token: str
    purchase_price: Decimal

    @classmethod
    def from_value(cls, purchase: TicketPurchase) -> 'PurchaseResponse':
        return cls(
            ticket_id=purchase.ticket_id,
            purchaser_id=purchase.purchaser_id,
            purchase_token=purchase.purchase_token,
            purchase_price=purchase.purchase_price,
        )
