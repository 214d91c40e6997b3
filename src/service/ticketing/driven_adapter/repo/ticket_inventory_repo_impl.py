import threading
from typing import Dict, Optional
from uuid import UUID

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory
from src.service.ticketing.domain.reservation_policy import ReservationPolicy


class TicketInventoryRepoImpl(ITicketInventoryRepo):
    """Keeps one live TicketInventory per event, all sharing the same reservation policy."""

    def __init__(self, reservation_policy: ReservationPolicy) -> None:
        self.reservation_policy = reservation_policy
        self._inventories: Dict[UUID, TicketInventory] = {}
        self._lock = threading.Lock()

    @Logger.io
    def get_or_create(self, *, event_id: UUID) -> TicketInventory:
        with self._lock:
            inventory = self._inventories.get(event_id)
            if inventory is None:
                inventory = TicketInventory(event_id=event_id, policy=self.reservation_policy)
                self._inventories[event_id] = inventory
            return inventory

    def get_by_event_id(self, *, event_id: UUID) -> Optional[TicketInventory]:
        with self._lock:
            return self._inventories.get(event_id)

    def find_by_ticket_id(self, *, ticket_id: UUID) -> Optional[TicketInventory]:
        with self._lock:
            inventories = list(self._inventories.values())
        for inventory in inventories:
            if inventory.has_ticket(ticket_id):
                return inventory
        return None
