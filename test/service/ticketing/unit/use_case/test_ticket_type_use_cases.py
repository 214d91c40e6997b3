from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.service.ticketing.app.command.create_ticket_type_use_case import CreateTicketTypeUseCase
from src.service.ticketing.app.command.update_ticket_type_use_case import UpdateTicketTypeUseCase
from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.ticket_type_reconciler import TicketTypeReconciler
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    InvalidArgumentError,
    SeatInUseError,
    SeatNotInVenueError,
    TicketTypeNotFoundError,
)


@pytest.fixture
def create_use_case(event_repo, venue_repo, ticket_inventory_repo) -> CreateTicketTypeUseCase:
    return CreateTicketTypeUseCase(
        event_repo=event_repo,
        venue_repo=venue_repo,
        ticket_inventory_repo=ticket_inventory_repo,
        reconciler=TicketTypeReconciler(),
    )


@pytest.fixture
def update_use_case(event_repo, venue_repo, ticket_inventory_repo) -> UpdateTicketTypeUseCase:
    return UpdateTicketTypeUseCase(
        event_repo=event_repo,
        venue_repo=venue_repo,
        ticket_inventory_repo=ticket_inventory_repo,
        reconciler=TicketTypeReconciler(),
    )


@pytest.fixture
def seeded_standard_type(
    standard_type: TicketTypeEntity, inventory: TicketInventory, venue, event_repo: MagicMock
) -> TicketTypeEntity:
    inventory.create_tickets_for_seats(
        ticket_type_id=standard_type.id, seats=standard_type.seats, seat_catalog=venue.catalog
    )
    event_repo.get_ticket_type.return_value = standard_type
    return standard_type


@pytest.mark.unit
class TestCreateTicketType:
    def test_creates_tickets_and_saves_type(
        self,
        create_use_case: CreateTicketTypeUseCase,
        event_repo: MagicMock,
        inventory: TicketInventory,
        event,
    ) -> None:
        ticket_type = create_use_case.create(
            event_id=event.id, name='VIP', price=Decimal('120'), seats=['B-1', 'B-2']
        )

        assert ticket_type.price == Decimal('120')
        assert sorted(inventory.seats_of(ticket_type.id)) == ['B-1', 'B-2']
        event_repo.add_ticket_type.assert_called_once_with(ticket_type=ticket_type)

    def test_unknown_event(
        self, create_use_case: CreateTicketTypeUseCase, event_repo: MagicMock
    ) -> None:
        event_repo.get_by_id.return_value = None

        with pytest.raises(EventNotFoundError):
            create_use_case.create(event_id=uuid4(), name='VIP', price=Decimal('1'), seats=[])

        event_repo.add_ticket_type.assert_not_called()

    def test_failed_reconcile_saves_nothing(
        self,
        create_use_case: CreateTicketTypeUseCase,
        event_repo: MagicMock,
        inventory: TicketInventory,
        event,
    ) -> None:
        with pytest.raises(SeatNotInVenueError):
            create_use_case.create(
                event_id=event.id, name='VIP', price=Decimal('1'), seats=['B-1', 'Z-9']
            )

        event_repo.add_ticket_type.assert_not_called()
        assert inventory.list_tickets() == []

    def test_invalid_price_is_rejected_before_any_ticket_exists(
        self, create_use_case: CreateTicketTypeUseCase, inventory: TicketInventory, event
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            create_use_case.create(
                event_id=event.id, name='VIP', price=Decimal('-5'), seats=['B-1']
            )

        assert inventory.list_tickets() == []


@pytest.mark.unit
class TestUpdateTicketType:
    def test_updates_fields_and_reconciles_seats(
        self,
        update_use_case: UpdateTicketTypeUseCase,
        seeded_standard_type: TicketTypeEntity,
        event_repo: MagicMock,
        inventory: TicketInventory,
        event,
    ) -> None:
        updated = update_use_case.update(
            event_id=event.id,
            ticket_type_id=seeded_standard_type.id,
            name='Standard Plus',
            price=Decimal('55'),
            seats=['A-1', 'A-4'],
        )

        assert updated.name == 'Standard Plus'
        assert updated.price == Decimal('55')
        assert sorted(inventory.seats_of(seeded_standard_type.id)) == ['A-1', 'A-4']
        event_repo.update_ticket_type.assert_called_once_with(ticket_type=updated)

    def test_rejected_reconcile_keeps_stored_type(
        self,
        update_use_case: UpdateTicketTypeUseCase,
        seeded_standard_type: TicketTypeEntity,
        event_repo: MagicMock,
        inventory: TicketInventory,
        event,
    ) -> None:
        held = inventory.list_tickets()[0]
        inventory.reserve(ticket_id=held.id, user_id='alice')

        with pytest.raises(SeatInUseError):
            update_use_case.update(
                event_id=event.id,
                ticket_type_id=seeded_standard_type.id,
                name='Renamed',
                price=Decimal('1'),
                seats=[s for s in seeded_standard_type.seats if s != held.seat],
            )

        event_repo.update_ticket_type.assert_not_called()
        assert sorted(inventory.seats_of(seeded_standard_type.id)) == ['A-1', 'A-2', 'A-3']

    def test_unknown_ticket_type(
        self, update_use_case: UpdateTicketTypeUseCase, event_repo: MagicMock, event
    ) -> None:
        event_repo.get_ticket_type.return_value = None

        with pytest.raises(TicketTypeNotFoundError):
            update_use_case.update(
                event_id=event.id,
                ticket_type_id=uuid4(),
                name='Standard',
                price=Decimal('1'),
                seats=[],
            )
