"""
Use case fixtures: repositories are MagicMocks speced on the app interfaces,
the inventory and reconciler are the real domain objects.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.entity.venue_entity import VenueEntity


@pytest.fixture
def venue() -> VenueEntity:
    return VenueEntity(name='Main Hall', seats=['A-1', 'A-2', 'A-3', 'A-4', 'B-1', 'B-2'])


@pytest.fixture
def event(venue: VenueEntity, event_id: UUID) -> EventEntity:
    start = datetime(2026, 6, 1, 19, 0, tzinfo=timezone.utc)
    return EventEntity(
        id=event_id,
        venue_id=venue.id,
        name='Spring Concert',
        event_start=start,
        event_end=start + timedelta(hours=3),
        for_sale_start=start - timedelta(days=30),
        for_sale_end=start,
    )


@pytest.fixture
def standard_type(event: EventEntity, standard_type_id: UUID) -> TicketTypeEntity:
    return TicketTypeEntity(
        id=standard_type_id,
        event_id=event.id,
        name='Standard',
        price=Decimal('50.00'),
        seats=['A-1', 'A-2', 'A-3'],
    )


@pytest.fixture
def venue_repo(venue: VenueEntity) -> MagicMock:
    repo = MagicMock(spec=IVenueRepo)
    repo.get_by_id.return_value = venue
    return repo


@pytest.fixture
def event_repo(event: EventEntity) -> MagicMock:
    repo = MagicMock(spec=IEventRepo)
    repo.get_by_id.return_value = event
    repo.add_ticket_type.side_effect = lambda *, ticket_type: ticket_type
    repo.update_ticket_type.side_effect = lambda *, ticket_type: ticket_type
    repo.update.side_effect = lambda *, event: event
    return repo


@pytest.fixture
def ticket_inventory_repo(inventory) -> MagicMock:
    repo = MagicMock(spec=ITicketInventoryRepo)
    repo.get_or_create.return_value = inventory
    repo.get_by_event_id.return_value = inventory
    repo.find_by_ticket_id.return_value = inventory
    return repo


@pytest.fixture
def page_config() -> MagicMock:
    config = MagicMock()
    config.DEFAULT_PAGE_SIZE = 2
    config.MAX_PAGE_SIZE = 5
    return config
