from typing import Iterable, List, Tuple

import attrs

from src.service.ticketing.domain.ticketing_error import InvalidArgumentError


def normalize_seat_labels(seats: Iterable[str]) -> List[str]:
    """Validate seat labels and drop duplicates, keeping first-seen order."""
    result: List[str] = []
    seen = set()
    for seat in seats:
        if not isinstance(seat, str) or not seat.strip():
            raise InvalidArgumentError('Seat labels cannot be empty')
        if seat in seen:
            continue
        seen.add(seat)
        result.append(seat)
    return result


@attrs.define(frozen=True)
class SeatCatalog:
    """Immutable snapshot of the seats a venue offers"""

    seats: Tuple[str, ...]
    _lookup: frozenset = attrs.field(init=False, repr=False, eq=False)

    def __attrs_post_init__(self) -> None:
        object.__setattr__(self, '_lookup', frozenset(self.seats))

    @classmethod
    def of(cls, seats: Iterable[str]) -> 'SeatCatalog':
        return cls(seats=tuple(seats))

    def contains(self, seat: str) -> bool:
        return seat in self._lookup

    def missing(self, seats: Iterable[str]) -> List[str]:
        return [seat for seat in seats if seat not in self._lookup]

    def __len__(self) -> int:
        return len(self.seats)
