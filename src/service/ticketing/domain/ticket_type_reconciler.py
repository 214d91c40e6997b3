"""
Ticket Type Reconciler - keeps a ticket type's tickets in step with its seat list

Planning is a pure sort-then-merge diff. Applying the plan is delegated to the
event's TicketInventory, which validates every removal and addition before it
changes anything.
"""

from typing import Iterable, List
from uuid import UUID

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.value_object.seat_catalog import SeatCatalog
from src.service.ticketing.domain.value_object.seat_reconciliation_plan import (
    SeatReconciliationPlan,
)


class TicketTypeReconciler:
    @staticmethod
    def plan(old_seats: Iterable[str], new_seats: Iterable[str]) -> SeatReconciliationPlan:
        old = sorted(set(old_seats))
        new = sorted(set(new_seats))
        additions: List[str] = []
        removals: List[str] = []
        unchanged: List[str] = []

        i = j = 0
        while i < len(old) and j < len(new):
            if old[i] == new[j]:
                unchanged.append(old[i])
                i += 1
                j += 1
            elif old[i] < new[j]:
                removals.append(old[i])
                i += 1
            else:
                additions.append(new[j])
                j += 1
        removals.extend(old[i:])
        additions.extend(new[j:])

        return SeatReconciliationPlan(
            additions=tuple(additions), removals=tuple(removals), unchanged=tuple(unchanged)
        )

    @Logger.io
    def reconcile(
        self,
        *,
        inventory: TicketInventory,
        ticket_type_id: UUID,
        new_seats: Iterable[str],
        seat_catalog: SeatCatalog,
    ) -> List[Ticket]:
        """Bring the ticket type's tickets in line with new_seats; returns the tickets created."""
        with inventory.exclusive():
            plan = self.plan(inventory.seats_of(ticket_type_id), new_seats)
            if plan.is_noop:
                return []
            return inventory.apply_seat_plan(
                ticket_type_id=ticket_type_id, plan=plan, seat_catalog=seat_catalog
            )
