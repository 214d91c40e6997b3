"""
Create Ticket Type Use Case

A new ticket type is a reconciliation against an empty seat list: every seat
becomes a fresh available ticket in the event's inventory.
"""

from decimal import Decimal
from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.ticket_type_reconciler import TicketTypeReconciler
from src.service.ticketing.domain.ticketing_error import EventNotFoundError, VenueNotFoundError


class CreateTicketTypeUseCase:
    def __init__(
        self,
        *,
        event_repo: IEventRepo,
        venue_repo: IVenueRepo,
        ticket_inventory_repo: ITicketInventoryRepo,
        reconciler: TicketTypeReconciler,
    ) -> None:
        self.event_repo = event_repo
        self.venue_repo = venue_repo
        self.ticket_inventory_repo = ticket_inventory_repo
        self.reconciler = reconciler

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
        ticket_inventory_repo: ITicketInventoryRepo = Depends(
            Provide[Container.ticket_inventory_repo]
        ),
        reconciler: TicketTypeReconciler = Depends(Provide[Container.ticket_type_reconciler]),
    ) -> Self:
        return cls(
            event_repo=event_repo,
            venue_repo=venue_repo,
            ticket_inventory_repo=ticket_inventory_repo,
            reconciler=reconciler,
        )

    @Logger.io
    def create(
        self, *, event_id: UUID, name: str, price: Decimal, seats: List[str]
    ) -> TicketTypeEntity:
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)

        ticket_type = TicketTypeEntity(event_id=event_id, name=name, price=price, seats=seats)
        inventory = self.ticket_inventory_repo.get_or_create(event_id=event_id)
        # tickets and the stored ticket type appear together under the event lock
        with inventory.exclusive():
            event = self.event_repo.get_by_id(event_id=event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            venue = self.venue_repo.get_by_id(venue_id=event.venue_id)
            if venue is None:
                raise VenueNotFoundError(event.venue_id)

            created = self.reconciler.reconcile(
                inventory=inventory,
                ticket_type_id=ticket_type.id,
                new_seats=ticket_type.seats,
                seat_catalog=venue.catalog,
            )
            self.event_repo.add_ticket_type(ticket_type=ticket_type)

        Logger.base.info(
            f'🎟️ [CREATE_TICKET_TYPE] {ticket_type.id} for event {event_id}: {len(created)} tickets'
        )
        return ticket_type
