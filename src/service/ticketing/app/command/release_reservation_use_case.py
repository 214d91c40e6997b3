from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo


class ReleaseReservationUseCase:
    """Cancelling a hold never fails: unknown tickets and foreign or expired holds are no-ops."""

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
    def release(self, *, ticket_id: UUID, user_id: str) -> None:
        inventory = self.ticket_inventory_repo.find_by_ticket_id(ticket_id=ticket_id)
        if inventory is None:
            return
        inventory.release_reservation(ticket_id=ticket_id, user_id=user_id)
