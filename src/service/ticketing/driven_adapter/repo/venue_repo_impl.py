import threading
from typing import Dict, Optional
from uuid import UUID

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.venue_entity import VenueEntity
from src.service.ticketing.domain.ticketing_error import VenueNotFoundError


class VenueRepoImpl(IVenueRepo):
    """In-memory venue store. Entities are copied in and out so callers never share state."""

    def __init__(self) -> None:
        self._venues: Dict[UUID, VenueEntity] = {}
        self._lock = threading.Lock()

    @Logger.io
    def add(self, *, venue: VenueEntity) -> VenueEntity:
        with self._lock:
            self._venues[venue.id] = attrs.evolve(venue)
        return venue

    @Logger.io
    def get_by_id(self, *, venue_id: UUID) -> Optional[VenueEntity]:
        with self._lock:
            venue = self._venues.get(venue_id)
        return attrs.evolve(venue) if venue else None

    @Logger.io
    def update(self, *, venue: VenueEntity) -> VenueEntity:
        with self._lock:
            if venue.id not in self._venues:
                raise VenueNotFoundError(venue.id)
            self._venues[venue.id] = attrs.evolve(venue)
        return venue
