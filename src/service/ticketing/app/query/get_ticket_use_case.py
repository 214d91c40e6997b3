from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.ticket_dto import TicketView
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.domain.aggregate.ticket_inventory_aggregate import TicketInventory
from src.service.ticketing.domain.ticketing_error import (
    PurchaseNotFoundError,
    ReservationNotFoundError,
    TicketNotFoundError,
)
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation


class GetTicketUseCase:
    """Single-ticket reads: the ticket itself, a user's hold on it, and its purchase."""

    def __init__(self, ticket_inventory_repo: ITicketInventoryRepo) -> None:
        self.ticket_inventory_repo = ticket_inventory_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_inventory_repo: ITicketInventoryRepo = Depends(
            Provide[Container.ticket_inventory_repo]
        ),
    ) -> Self:
        return cls(ticket_inventory_repo=ticket_inventory_repo)

    @Logger.io
    def get_by_id(self, *, ticket_id: UUID) -> TicketView:
        inventory = self._inventory_of(ticket_id)
        now = inventory.policy.now()
        ticket = inventory.get_ticket(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return TicketView.from_ticket(ticket, now=now)

    @Logger.io
    def get_reservation(self, *, ticket_id: UUID, user_id: str) -> TicketReservation:
        inventory = self._inventory_of(ticket_id)
        reservation: Optional[TicketReservation] = inventory.get_reservation(
            ticket_id=ticket_id, user_id=user_id
        )
        if reservation is None:
            raise ReservationNotFoundError(ticket_id, user_id)
        return reservation

    @Logger.io
    def get_purchase(self, *, ticket_id: UUID) -> TicketPurchase:
        inventory = self._inventory_of(ticket_id)
        purchase = inventory.get_purchase(ticket_id=ticket_id)
        if purchase is None:
            raise PurchaseNotFoundError(ticket_id)
        return purchase

    def _inventory_of(self, ticket_id: UUID) -> TicketInventory:
        inventory = self.ticket_inventory_repo.find_by_ticket_id(ticket_id=ticket_id)
        if inventory is None:
            raise TicketNotFoundError(ticket_id)
        return inventory
