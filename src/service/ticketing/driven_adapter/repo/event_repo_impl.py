import threading
from typing import Dict, List, Optional
from uuid import UUID

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    TicketTypeNotFoundError,
)


class EventRepoImpl(IEventRepo):
    """In-memory store for events and their ticket types, kept in creation order."""

    def __init__(self) -> None:
        self._events: Dict[UUID, EventEntity] = {}
        self._ticket_types: Dict[UUID, Dict[UUID, TicketTypeEntity]] = {}
        self._lock = threading.Lock()

    @Logger.io
    def add(self, *, event: EventEntity) -> EventEntity:
        with self._lock:
            self._events[event.id] = attrs.evolve(event)
            self._ticket_types.setdefault(event.id, {})
        return event

    @Logger.io
    def get_by_id(self, *, event_id: UUID) -> Optional[EventEntity]:
        with self._lock:
            event = self._events.get(event_id)
        return attrs.evolve(event) if event else None

    @Logger.io
    def update(self, *, event: EventEntity) -> EventEntity:
        with self._lock:
            if event.id not in self._events:
                raise EventNotFoundError(event.id)
            self._events[event.id] = attrs.evolve(event)
        return event

    @Logger.io
    def list_all(self) -> List[EventEntity]:
        with self._lock:
            return [attrs.evolve(event) for event in self._events.values()]

    @Logger.io
    def add_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        with self._lock:
            if ticket_type.event_id not in self._events:
                raise EventNotFoundError(ticket_type.event_id)
            self._ticket_types[ticket_type.event_id][ticket_type.id] = attrs.evolve(ticket_type)
        return ticket_type

    @Logger.io
    def get_ticket_type(
        self, *, event_id: UUID, ticket_type_id: UUID
    ) -> Optional[TicketTypeEntity]:
        with self._lock:
            ticket_type = self._ticket_types.get(event_id, {}).get(ticket_type_id)
        return attrs.evolve(ticket_type) if ticket_type else None

    @Logger.io
    def update_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        with self._lock:
            ticket_types = self._ticket_types.get(ticket_type.event_id, {})
            if ticket_type.id not in ticket_types:
                raise TicketTypeNotFoundError(ticket_type.id)
            ticket_types[ticket_type.id] = attrs.evolve(ticket_type)
        return ticket_type

    @Logger.io
    def list_ticket_types(self, *, event_id: UUID) -> List[TicketTypeEntity]:
        with self._lock:
            return [attrs.evolve(t) for t in self._ticket_types.get(event_id, {}).values()]
