from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.create_ticket_type_use_case import (
    CreateTicketTypeUseCase,
)
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.command.update_ticket_type_use_case import (
    UpdateTicketTypeUseCase,
)
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_event_tickets_use_case import ListEventTicketsUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.app.query.list_ticket_types_use_case import ListTicketTypesUseCase
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.driving_adapter.schema.event_schema import (
    EventPageResponse,
    EventRequest,
    EventResponse,
    TicketTypeRequest,
    TicketTypeResponse,
)
from src.service.ticketing.driving_adapter.schema.ticket_schema import TicketPageResponse


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
def create_event(
    request: EventRequest,
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event = use_case.create(
        venue_id=request.venue_id,
        name=request.name,
        description=request.description,
        event_start=request.event_start,
        event_end=request.event_end,
        for_sale_start=request.for_sale_start,
        for_sale_end=request.for_sale_end,
    )
    return EventResponse.from_entity(event)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
def list_events(
    page: int = 1,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventPageResponse:
    return EventPageResponse.from_page(use_case.list_events(page=page, page_size=page_size))


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
def get_event(
    event_id: UUID,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    return EventResponse.from_entity(use_case.get_by_id(event_id=event_id))


@router.put('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
def update_event(
    event_id: UUID,
    request: EventRequest,
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = use_case.update(
        event_id=event_id,
        venue_id=request.venue_id,
        name=request.name,
        description=request.description,
        event_start=request.event_start,
        event_end=request.event_end,
        for_sale_start=request.for_sale_start,
        for_sale_end=request.for_sale_end,
    )
    return EventResponse.from_entity(event)


# ============================ Ticket Type Endpoints ============================


@router.post('/{event_id}/ticket-types', status_code=status.HTTP_201_CREATED)
@Logger.io
def create_ticket_type(
    event_id: UUID,
    request: TicketTypeRequest,
    use_case: CreateTicketTypeUseCase = Depends(CreateTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    ticket_type = use_case.create(
        event_id=event_id, name=request.name, price=request.price, seats=request.seats
    )
    return TicketTypeResponse.from_entity(ticket_type)


@router.get('/{event_id}/ticket-types', status_code=status.HTTP_200_OK)
@Logger.io
def list_ticket_types(
    event_id: UUID,
    use_case: ListTicketTypesUseCase = Depends(ListTicketTypesUseCase.depends),
) -> List[TicketTypeResponse]:
    return [
        TicketTypeResponse.from_entity(ticket_type)
        for ticket_type in use_case.list_by_event(event_id=event_id)
    ]


@router.get('/{event_id}/ticket-types/{ticket_type_id}', status_code=status.HTTP_200_OK)
@Logger.io
def get_ticket_type(
    event_id: UUID,
    ticket_type_id: UUID,
    use_case: ListTicketTypesUseCase = Depends(ListTicketTypesUseCase.depends),
) -> TicketTypeResponse:
    ticket_type = use_case.get_by_id(event_id=event_id, ticket_type_id=ticket_type_id)
    return TicketTypeResponse.from_entity(ticket_type)


@router.put('/{event_id}/ticket-types/{ticket_type_id}', status_code=status.HTTP_200_OK)
@Logger.io
def update_ticket_type(
    event_id: UUID,
    ticket_type_id: UUID,
    request: TicketTypeRequest,
    use_case: UpdateTicketTypeUseCase = Depends(UpdateTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    ticket_type = use_case.update(
        event_id=event_id,
        ticket_type_id=ticket_type_id,
        name=request.name,
        price=request.price,
        seats=request.seats,
    )
    return TicketTypeResponse.from_entity(ticket_type)


# ============================== Ticket Endpoints ===============================


@router.get('/{event_id}/tickets', status_code=status.HTTP_200_OK)
@Logger.io
def list_event_tickets(
    event_id: UUID,
    ticket_status: Optional[TicketStatus] = Query(default=None, alias='status'),
    page: int = 1,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    use_case: ListEventTicketsUseCase = Depends(ListEventTicketsUseCase.depends),
) -> TicketPageResponse:
    result = use_case.list_event_tickets(
        event_id=event_id, status=ticket_status, page=page, page_size=page_size
    )
    return TicketPageResponse.from_page(result)
