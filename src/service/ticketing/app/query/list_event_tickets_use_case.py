from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.page_dto import TicketPage, paginate
from src.service.ticketing.app.dto.ticket_dto import TicketView
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.ticketing_error import EventNotFoundError


class ListEventTicketsUseCase:
    def __init__(
        self,
        *,
        event_repo: IEventRepo,
        ticket_inventory_repo: ITicketInventoryRepo,
        config: Settings,
    ) -> None:
        self.event_repo = event_repo
        self.ticket_inventory_repo = ticket_inventory_repo
        self.config = config

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        ticket_inventory_repo: ITicketInventoryRepo = Depends(
            Provide[Container.ticket_inventory_repo]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            event_repo=event_repo, ticket_inventory_repo=ticket_inventory_repo, config=config
        )

    @Logger.io
    def list_event_tickets(
        self,
        *,
        event_id: UUID,
        status: Optional[TicketStatus] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> TicketPage:
        """Filter by status first, then page; order is the order tickets were created in."""
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)
        if page_size is None:
            page_size = self.config.DEFAULT_PAGE_SIZE

        inventory = self.ticket_inventory_repo.get_by_event_id(event_id=event_id)
        views = []
        if inventory is not None:
            now = inventory.policy.now()
            views = [
                TicketView.from_ticket(ticket, now=now)
                for ticket in inventory.list_tickets(status=status, now=now)
            ]

        return paginate(
            views, page=page, page_size=page_size, max_page_size=self.config.MAX_PAGE_SIZE
        )
