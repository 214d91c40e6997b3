"""
Purchase Ticket Use Case

The expected price is always the ticket type's current price, looked up here
and handed to the inventory, which checks it inside the ticket's lock.
"""

from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.domain.ticketing_error import (
    TicketNotFoundError,
    TicketTypeNotFoundError,
)
from src.service.ticketing.domain.value_object.money import to_money
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase


class PurchaseTicketUseCase:
    def __init__(
        self, *, ticket_inventory_repo: ITicketInventoryRepo, event_repo: IEventRepo
    ) -> None:
        self.ticket_inventory_repo = ticket_inventory_repo
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_inventory_repo: ITicketInventoryRepo = Depends(
            Provide[Container.ticket_inventory_repo]
        ),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(ticket_inventory_repo=ticket_inventory_repo, event_repo=event_repo)

    @Logger.io
    def purchase(
        self,
        *,
        ticket_id: UUID,
        purchaser_id: str,
        purchase_token: str,
        purchase_price: Decimal,
    ) -> TicketPurchase:
        inventory = self.ticket_inventory_repo.find_by_ticket_id(ticket_id=ticket_id)
        ticket = inventory.get_ticket(ticket_id) if inventory else None
        if inventory is None or ticket is None:
            raise TicketNotFoundError(ticket_id)

        ticket_type = self.event_repo.get_ticket_type(
            event_id=ticket.event_id, ticket_type_id=ticket.ticket_type_id
        )
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket.ticket_type_id)

        purchase = inventory.purchase(
            ticket_id=ticket_id,
            purchaser_id=purchaser_id,
            purchase_token=purchase_token,
            purchase_price=to_money(purchase_price),
            expected_price=ticket_type.price,
        )
        Logger.base.info(f'💳 [PURCHASE] Ticket {ticket_id} sold to {purchase.purchaser_id}')
        return purchase
