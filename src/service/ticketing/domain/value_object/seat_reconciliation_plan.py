from typing import Tuple

import attrs


@attrs.define(frozen=True)
class SeatReconciliationPlan:
    """Seat-level difference between a ticket type's current and requested seats, each side sorted."""

    additions: Tuple[str, ...] = ()
    removals: Tuple[str, ...] = ()
    unchanged: Tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.additions and not self.removals
