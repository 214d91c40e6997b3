"""
Update Ticket Type Use Case

The seat list is reconciled first. Name and price are stored only once the
reconciliation went through, so a rejected edit leaves the ticket type as it was.
Both steps run under the inventory's event lock, so concurrent edits of one
ticket type are stored in the order they were reconciled.
"""

from decimal import Decimal
from typing import List, Self
from uuid import UUID

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.ticket_type_reconciler import TicketTypeReconciler
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    TicketTypeNotFoundError,
    VenueNotFoundError,
)


class UpdateTicketTypeUseCase:
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
    def update(
        self,
        *,
        event_id: UUID,
        ticket_type_id: UUID,
        name: str,
        price: Decimal,
        seats: List[str],
    ) -> TicketTypeEntity:
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)

        inventory = self.ticket_inventory_repo.get_or_create(event_id=event_id)
        with inventory.exclusive():
            event = self.event_repo.get_by_id(event_id=event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            current = self.event_repo.get_ticket_type(
                event_id=event_id, ticket_type_id=ticket_type_id
            )
            if current is None:
                raise TicketTypeNotFoundError(ticket_type_id)
            venue = self.venue_repo.get_by_id(venue_id=event.venue_id)
            if venue is None:
                raise VenueNotFoundError(event.venue_id)

            updated = attrs.evolve(current, name=name, price=price, seats=seats)
            self.reconciler.reconcile(
                inventory=inventory,
                ticket_type_id=ticket_type_id,
                new_seats=updated.seats,
                seat_catalog=venue.catalog,
            )
            return self.event_repo.update_ticket_type(ticket_type=updated)
