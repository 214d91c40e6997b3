"""
Event Repository Interface

Stores events together with the ticket types they own.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity


class IEventRepo(ABC):
    @abstractmethod
    def add(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    def get_by_id(self, *, event_id: UUID) -> Optional[EventEntity]:
        pass

    @abstractmethod
    def update(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    def list_all(self) -> List[EventEntity]:
        """All events in creation order."""
        pass

    @abstractmethod
    def add_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        pass

    @abstractmethod
    def get_ticket_type(
        self, *, event_id: UUID, ticket_type_id: UUID
    ) -> Optional[TicketTypeEntity]:
        pass

    @abstractmethod
    def update_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        pass

    @abstractmethod
    def list_ticket_types(self, *, event_id: UUID) -> List[TicketTypeEntity]:
        """Ticket types of one event in creation order."""
        pass
