from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.venue_entity import VenueEntity
from src.service.ticketing.domain.ticketing_error import VenueNotFoundError


class UpdateVenueUseCase:
    """
    Replace a venue's name and seat catalog.

    Tickets that already exist are left alone; the new catalog only applies to
    ticket types created or edited afterwards.
    """

    def __init__(self, venue_repo: IVenueRepo) -> None:
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(cls, venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo])) -> Self:
        return cls(venue_repo=venue_repo)

    @Logger.io
    def update(self, *, venue_id: UUID, name: str, seats: List[str]) -> VenueEntity:
        if self.venue_repo.get_by_id(venue_id=venue_id) is None:
            raise VenueNotFoundError(venue_id)

        venue = VenueEntity(id=venue_id, name=name, seats=list(seats))
        return self.venue_repo.update(venue=venue)
