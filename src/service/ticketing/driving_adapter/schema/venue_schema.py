from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from src.service.ticketing.domain.entity.venue_entity import VenueEntity


class VenueRequest(BaseModel):
    name: str
    seats: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Taipei Arena',
                'seats': ['A-1', 'A-2', 'A-3', 'B-1', 'B-2'],
            }
        }


class VenueResponse(BaseModel):
    id: UUID
    name: str
    seats: List[str]

    @classmethod
    def from_entity(cls, venue: VenueEntity) -> 'VenueResponse':
        return cls(id=venue.id, name=venue.name, seats=list(venue.seats))
