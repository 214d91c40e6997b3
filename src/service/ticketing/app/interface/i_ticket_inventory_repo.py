"""
Ticket Inventory Repository Interface

One TicketInventory per event. Inventories are live objects: callers mutate
tickets through the inventory's own methods, never by saving them back.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory


class ITicketInventoryRepo(ABC):
    @abstractmethod
    def get_or_create(self, *, event_id: UUID) -> TicketInventory:
        pass

    @abstractmethod
    def get_by_event_id(self, *, event_id: UUID) -> Optional[TicketInventory]:
        pass

    @abstractmethod
    def find_by_ticket_id(self, *, ticket_id: UUID) -> Optional[TicketInventory]:
        """The inventory currently holding the ticket, if any."""
        pass
