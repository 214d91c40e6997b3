from typing import List
from uuid import UUID

import attrs

from src.platform.types.uuid7_types import new_uuid7
from src.service.ticketing.domain.ticketing_error import InvalidArgumentError
from src.service.ticketing.domain.value_object.seat_catalog import SeatCatalog


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(f'Venue {attribute.name} cannot be empty')


def _validate_seats(instance: object, attribute: attrs.Attribute, value: List[str]) -> None:
    seen = set()
    for seat in value:
        if not isinstance(seat, str) or not seat.strip():
            raise InvalidArgumentError('Seat labels cannot be empty')
        if seat in seen:
            raise InvalidArgumentError(f'Duplicate seat label: {seat}')
        seen.add(seat)


@attrs.define
class VenueEntity:
    name: str = attrs.field(validator=_validate_name)
    seats: List[str] = attrs.field(factory=list, validator=_validate_seats)
    id: UUID = attrs.field(factory=new_uuid7)

    @property
    def catalog(self) -> SeatCatalog:
        return SeatCatalog.of(self.seats)
