from datetime import datetime, timezone
from uuid import UUID

import attrs

from src.platform.types.uuid7_types import new_uuid7
from src.service.ticketing.domain.ticketing_error import (
    InvalidArgumentError,
    InvalidEventScheduleError,
)


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(f'Event {attribute.name} cannot be empty')


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC so they compare against the clock
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@attrs.define
class EventEntity:
    venue_id: UUID
    name: str = attrs.field(validator=_validate_name)
    event_start: datetime = attrs.field(converter=_as_utc)
    event_end: datetime = attrs.field(converter=_as_utc)
    for_sale_start: datetime = attrs.field(converter=_as_utc)
    for_sale_end: datetime = attrs.field(converter=_as_utc)
    description: str = ''
    id: UUID = attrs.field(factory=new_uuid7)

    def __attrs_post_init__(self) -> None:
        if self.event_start >= self.event_end:
            raise InvalidEventScheduleError('Event start must be before event end')
        if self.for_sale_start >= self.for_sale_end:
            raise InvalidEventScheduleError('Sale start must be before sale end')
