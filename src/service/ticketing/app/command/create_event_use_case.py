from datetime import datetime
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.ticketing_error import VenueNotFoundError


class CreateEventUseCase:
    def __init__(self, event_repo: IEventRepo, venue_repo: IVenueRepo) -> None:
        self.event_repo = event_repo
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
    ) -> Self:
        return cls(event_repo=event_repo, venue_repo=venue_repo)

    @Logger.io
    def create(
        self,
        *,
        venue_id: UUID,
        name: str,
        event_start: datetime,
        event_end: datetime,
        for_sale_start: datetime,
        for_sale_end: datetime,
        description: str = '',
    ) -> EventEntity:
        event = EventEntity(
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

        self.event_repo.add(event=event)
        Logger.base.info(f'🎫 [CREATE_EVENT] Event {event.id} created at venue {venue_id}')
        return event
