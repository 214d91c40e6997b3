"""
Unit test configuration for ticketing service.

Domain objects are built directly against a fake clock; nothing here starts
the FastAPI app or touches the DI container.
"""

from datetime import timedelta
from typing import List
from uuid import UUID

import pytest

from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.reservation_policy import ReservationPolicy
from src.service.ticketing.domain.value_object.seat_catalog import SeatCatalog


VENUE_SEATS = ['A-1', 'A-2', 'A-3', 'A-4', 'B-1', 'B-2', 'B-3', 'B-4']


@pytest.fixture
def event_id() -> UUID:
    return UUID('01900000-0000-7000-8000-000000000001')


@pytest.fixture
def standard_type_id() -> UUID:
    return UUID('01900000-0000-7000-8000-0000000000a1')


@pytest.fixture
def vip_type_id() -> UUID:
    return UUID('01900000-0000-7000-8000-0000000000a2')


@pytest.fixture
def policy(fake_clock) -> ReservationPolicy:
    return ReservationPolicy(hold_duration=timedelta(minutes=10), clock=fake_clock)


@pytest.fixture
def seat_catalog() -> SeatCatalog:
    return SeatCatalog.of(VENUE_SEATS)


@pytest.fixture
def inventory(event_id: UUID, policy: ReservationPolicy) -> TicketInventory:
    return TicketInventory(event_id=event_id, policy=policy)


@pytest.fixture
def standard_tickets(
    inventory: TicketInventory, seat_catalog: SeatCatalog, standard_type_id: UUID
) -> List[Ticket]:
    """Three available tickets for seats A-1..A-3."""
    return inventory.create_tickets_for_seats(
        ticket_type_id=standard_type_id, seats=['A-1', 'A-2', 'A-3'], seat_catalog=seat_catalog
    )
