"""
Reservation Policy - how long a hold lasts and what time it is

Expiry is lazy: nothing sweeps stale holds. A hold simply stops counting once
the clock passes reserved_until, because ticket status is derived on every read.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import attrs


DEFAULT_HOLD_DURATION = timedelta(minutes=10)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.define(frozen=True)
class ReservationPolicy:
    hold_duration: timedelta = DEFAULT_HOLD_DURATION
    clock: Callable[[], datetime] = utc_now

    @classmethod
    def from_minutes(
        cls, minutes: int, *, clock: Optional[Callable[[], datetime]] = None
    ) -> 'ReservationPolicy':
        return cls(hold_duration=timedelta(minutes=minutes), clock=clock or utc_now)

    def now(self) -> datetime:
        return self.clock()

    def hold_until(self, now: datetime) -> datetime:
        return now + self.hold_duration
