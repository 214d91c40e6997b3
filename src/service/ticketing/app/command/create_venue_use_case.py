from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.venue_entity import VenueEntity


class CreateVenueUseCase:
    def __init__(self, venue_repo: IVenueRepo) -> None:
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(cls, venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo])) -> Self:
        return cls(venue_repo=venue_repo)

    @Logger.io
    def create(self, *, name: str, seats: List[str]) -> VenueEntity:
        venue = VenueEntity(name=name, seats=list(seats))
        self.venue_repo.add(venue=venue)
        Logger.base.info(f'🏟️ [CREATE_VENUE] Venue {venue.id} created with {len(venue.seats)} seats')
        return venue
