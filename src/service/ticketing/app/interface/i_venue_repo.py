"""Venue Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.ticketing.domain.entity.venue_entity import VenueEntity


class IVenueRepo(ABC):
    @abstractmethod
    def add(self, *, venue: VenueEntity) -> VenueEntity:
        pass

    @abstractmethod
    def get_by_id(self, *, venue_id: UUID) -> Optional[VenueEntity]:
        pass

    @abstractmethod
    def update(self, *, venue: VenueEntity) -> VenueEntity:
        """Replace a stored venue; the venue must already exist."""
        pass
