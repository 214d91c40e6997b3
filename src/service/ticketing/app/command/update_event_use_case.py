"""
Update Event Use Case

The whole update runs under the event's inventory lock, the same lock ticket
type changes hold, so a venue move never interleaves with a ticket type that
is being created.
"""

from datetime import datetime
from typing import Self
from uuid import UUID

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    VenueChangeNotAllowedError,
    VenueNotFoundError,
)


class UpdateEventUseCase:
    def __init__(
        self,
        event_repo: IEventRepo,
        venue_repo: IVenueRepo,
        ticket_inventory_repo: ITicketInventoryRepo,
    ) -> None:
        self.event_repo = event_repo
        self.venue_repo = venue_repo
        self.ticket_inventory_repo = ticket_inventory_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
        ticket_inventory_repo: ITicketInventoryRepo = Depends(
            Provide[Container.ticket_inventory_repo]
        ),
    ) -> Self:
        return cls(
            event_repo=event_repo,
            venue_repo=venue_repo,
            ticket_inventory_repo=ticket_inventory_repo,
        )

    @Logger.io
    def update(
        self,
        *,
        event_id: UUID,
        venue_id: UUID,
        name: str,
        event_start: datetime,
        event_end: datetime,
        for_sale_start: datetime,
        for_sale_end: datetime,
        description: str = '',
    ) -> EventEntity:
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)

        inventory = self.ticket_inventory_repo.get_or_create(event_id=event_id)
        with inventory.exclusive():
            current = self.event_repo.get_by_id(event_id=event_id)
            if current is None:
                raise EventNotFoundError(event_id)

            updated = attrs.evolve(
                current,
                venue_id=venue_id,
                name=name,
                description=description,
                event_start=event_start,
                event_end=event_end,
                for_sale_start=for_sale_start,
                for_sale_end=for_sale_end,
            )
            if self.venue_repo.get_by_id(venue_id=venue_id) is None:
                raise VenueNotFoundError(venue_id)
            # ticket types own seats of the current venue
            if venue_id != current.venue_id and self.event_repo.list_ticket_types(
                event_id=event_id
            ):
                raise VenueChangeNotAllowedError(event_id)

            return self.event_repo.update(event=updated)
