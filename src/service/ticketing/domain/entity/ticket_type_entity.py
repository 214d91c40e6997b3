from decimal import Decimal
from typing import List
from uuid import UUID

import attrs

from src.platform.types.uuid7_types import new_uuid7
from src.service.ticketing.domain.ticketing_error import InvalidArgumentError
from src.service.ticketing.domain.value_object.money import to_money
from src.service.ticketing.domain.value_object.seat_catalog import normalize_seat_labels


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(f'Ticket type {attribute.name} cannot be empty')


@attrs.define
class TicketTypeEntity:
    """A priced group of seats within one event. Seats map one-to-one onto tickets."""

    event_id: UUID
    name: str = attrs.field(validator=_validate_name)
    price: Decimal = attrs.field(converter=to_money)
    seats: List[str] = attrs.field(factory=list, converter=normalize_seat_labels)
    id: UUID = attrs.field(factory=new_uuid7)
