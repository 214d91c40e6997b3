"""
Ticket Inventory Aggregate - owns every ticket of one event

[DDD Design Principles]
- TicketInventory is the Aggregate Root for the tickets of a single event
- It is the only code that mutates ticket state
- Callers receive copies of tickets, never the stored instances

[Business Invariants]
- One ticket per (event, seat) at any time
- Status is derived on read from purchase_token and reserved_until
- A hold expires by itself once the clock passes reserved_until

[Locking]
- The event lock (re-entrant) guards the ticket map, the seat index, the
  ticket lock table, and whole seat reconciliations
- Each ticket has its own lock; reserve/release/purchase hold only that lock
  while they check and write
- Lock order is always event lock first, then ticket locks by ticket id
"""

from contextlib import ExitStack, contextmanager
from datetime import datetime
from decimal import Decimal
import threading
from typing import Dict, Iterable, Iterator, List, Optional
from uuid import UUID

import attrs

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_types import new_uuid7
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.reservation_policy import ReservationPolicy
from src.service.ticketing.domain.ticketing_error import (
    InvalidArgumentError,
    SeatClaimedError,
    SeatInUseError,
    SeatNotInVenueError,
    TicketNotFoundError,
)
from src.service.ticketing.domain.value_object.seat_catalog import SeatCatalog
from src.service.ticketing.domain.value_object.seat_reconciliation_plan import (
    SeatReconciliationPlan,
)
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation


@attrs.define(eq=False)
class TicketInventory:
    event_id: UUID
    policy: ReservationPolicy = attrs.field(factory=ReservationPolicy, repr=False)

    _tickets: Dict[UUID, Ticket] = attrs.field(init=False, factory=dict, repr=False)
    _seat_index: Dict[str, UUID] = attrs.field(init=False, factory=dict, repr=False)
    _ticket_locks: Dict[UUID, threading.Lock] = attrs.field(init=False, factory=dict, repr=False)
    _event_lock: threading.RLock = attrs.field(init=False, factory=threading.RLock, repr=False)

    # ------------------------------------------------------------------ seats

    @contextmanager
    def exclusive(self) -> Iterator['TicketInventory']:
        """Hold the event lock so a read-plan-apply sequence sees a stable seat set."""
        with self._event_lock:
            yield self

    @Logger.io
    def create_tickets_for_seats(
        self, *, ticket_type_id: UUID, seats: Iterable[str], seat_catalog: SeatCatalog
    ) -> List[Ticket]:
        """
        Create one available ticket per seat.

        All-or-nothing: an unknown or already claimed seat fails the whole call.
        """
        seats = list(dict.fromkeys(seats))
        with self._event_lock:
            self._validate_additions(seats, seat_catalog)
            return [attrs.evolve(self._add_ticket(ticket_type_id, seat)) for seat in seats]

    @Logger.io
    def apply_seat_plan(
        self, *, ticket_type_id: UUID, plan: SeatReconciliationPlan, seat_catalog: SeatCatalog
    ) -> List[Ticket]:
        """
        Apply a reconciliation plan for one ticket type: validate everything, then mutate.

        Removal tickets stay locked from the availability check until they are
        deleted, so nobody can reserve them in between.
        """
        with self._event_lock, ExitStack() as stack:
            removals = self._tickets_for_removal(ticket_type_id, plan.removals)
            for ticket in sorted(removals, key=lambda t: t.id):
                stack.enter_context(self._ticket_locks[ticket.id])

            now = self.policy.now()
            for ticket in removals:
                status = ticket.status_at(now)
                if status is not TicketStatus.AVAILABLE:
                    raise SeatInUseError(ticket.seat, status)
            self._validate_additions(plan.additions, seat_catalog)

            created = [self._add_ticket(ticket_type_id, seat) for seat in plan.additions]
            for ticket in removals:
                self._drop_ticket(ticket)

            Logger.base.info(
                f'🎟️  [INVENTORY] event={self.event_id} ticket_type={ticket_type_id} '
                f'+{len(plan.additions)} -{len(plan.removals)} ={len(plan.unchanged)}'
            )
            return [attrs.evolve(ticket) for ticket in created]

    def seats_of(self, ticket_type_id: UUID) -> List[str]:
        with self._event_lock:
            return [t.seat for t in self._tickets.values() if t.ticket_type_id == ticket_type_id]

    # ------------------------------------------------------------------ sales

    @Logger.io
    def reserve(self, *, ticket_id: UUID, user_id: str) -> TicketReservation:
        with self._locked_ticket(ticket_id) as ticket:
            return ticket.reserve(user_id=user_id, policy=self.policy)

    @Logger.io
    def release_reservation(self, *, ticket_id: UUID, user_id: str) -> None:
        try:
            with self._locked_ticket(ticket_id) as ticket:
                ticket.release_reservation(user_id=user_id, now=self.policy.now())
        except TicketNotFoundError:
            # releasing is idempotent, an unknown ticket has nothing to release
            return

    def get_reservation(self, *, ticket_id: UUID, user_id: str) -> Optional[TicketReservation]:
        with self._locked_ticket(ticket_id) as ticket:
            return ticket.reservation_for(user_id=user_id, now=self.policy.now())

    @Logger.io
    def purchase(
        self,
        *,
        ticket_id: UUID,
        purchaser_id: str,
        purchase_token: str,
        purchase_price: Decimal,
        expected_price: Decimal,
    ) -> TicketPurchase:
        with self._locked_ticket(ticket_id) as ticket:
            return ticket.purchase(
                purchaser_id=purchaser_id,
                purchase_token=purchase_token,
                purchase_price=purchase_price,
                expected_price=expected_price,
                now=self.policy.now(),
            )

    def get_purchase(self, *, ticket_id: UUID) -> Optional[TicketPurchase]:
        with self._locked_ticket(ticket_id) as ticket:
            return ticket.to_purchase()

    # ------------------------------------------------------------------ reads

    def has_ticket(self, ticket_id: UUID) -> bool:
        with self._event_lock:
            return ticket_id in self._tickets

    def get_ticket(self, ticket_id: UUID) -> Optional[Ticket]:
        try:
            with self._locked_ticket(ticket_id) as ticket:
                return attrs.evolve(ticket)
        except TicketNotFoundError:
            return None

    def list_tickets(
        self, *, status: Optional[TicketStatus] = None, now: Optional[datetime] = None
    ) -> List[Ticket]:
        """Copies of the tickets in insertion order, filtered by status at a single instant."""
        with self._event_lock:
            now = now or self.policy.now()
            snapshot: List[Ticket] = []
            for ticket_id, ticket in self._tickets.items():
                with self._ticket_locks[ticket_id]:
                    if status is None or ticket.status_at(now) is status:
                        snapshot.append(attrs.evolve(ticket))
            return snapshot

    # --------------------------------------------------------------- internals

    @contextmanager
    def _locked_ticket(self, ticket_id: UUID) -> Iterator[Ticket]:
        with self._event_lock:
            ticket = self._tickets.get(ticket_id)
            lock = self._ticket_locks.get(ticket_id)
        if ticket is None or lock is None:
            raise TicketNotFoundError(ticket_id)
        with lock:
            # a reconciliation may have removed the ticket while we waited
            if self._tickets.get(ticket_id) is not ticket:
                raise TicketNotFoundError(ticket_id)
            yield ticket

    def _validate_additions(self, seats: Iterable[str], seat_catalog: SeatCatalog) -> None:
        seats = list(seats)
        missing = seat_catalog.missing(seats)
        if missing:
            raise SeatNotInVenueError(missing)
        claimed = [seat for seat in seats if seat in self._seat_index]
        if claimed:
            raise SeatClaimedError(claimed)

    def _tickets_for_removal(self, ticket_type_id: UUID, seats: Iterable[str]) -> List[Ticket]:
        removals = []
        for seat in seats:
            ticket_id = self._seat_index.get(seat)
            ticket = self._tickets.get(ticket_id) if ticket_id is not None else None
            if ticket is None or ticket.ticket_type_id != ticket_type_id:
                raise InvalidArgumentError(
                    f'Seat {seat} is not held by ticket type {ticket_type_id}'
                )
            removals.append(ticket)
        return removals

    def _add_ticket(self, ticket_type_id: UUID, seat: str) -> Ticket:
        ticket = Ticket(
            id=new_uuid7(), event_id=self.event_id, ticket_type_id=ticket_type_id, seat=seat
        )
        self._tickets[ticket.id] = ticket
        self._seat_index[seat] = ticket.id
        self._ticket_locks[ticket.id] = threading.Lock()
        return ticket

    def _drop_ticket(self, ticket: Ticket) -> None:
        del self._tickets[ticket.id]
        del self._seat_index[ticket.seat]
        # the lock object stays alive for any waiter that already fetched it
        del self._ticket_locks[ticket.id]
