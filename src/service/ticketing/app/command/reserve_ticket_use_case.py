from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.domain.ticketing_error import TicketNotFoundError
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation


class ReserveTicketUseCase:
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
    def reserve(self, *, ticket_id: UUID, user_id: str) -> TicketReservation:
        inventory = self.ticket_inventory_repo.find_by_ticket_id(ticket_id=ticket_id)
        if inventory is None:
            raise TicketNotFoundError(ticket_id)

        reservation = inventory.reserve(ticket_id=ticket_id, user_id=user_id)
        Logger.base.info(
            f'🔒 [RESERVE] Ticket {ticket_id} held for {user_id} until {reservation.reserved_until}'
        )
        return reservation
