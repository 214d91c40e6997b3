from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    TicketTypeNotFoundError,
)


class ListTicketTypesUseCase:
    def __init__(self, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(cls, event_repo: IEventRepo = Depends(Provide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    def list_by_event(self, *, event_id: UUID) -> List[TicketTypeEntity]:
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)
        return self.event_repo.list_ticket_types(event_id=event_id)

    @Logger.io
    def get_by_id(self, *, event_id: UUID, ticket_type_id: UUID) -> TicketTypeEntity:
        if self.event_repo.get_by_id(event_id=event_id) is None:
            raise EventNotFoundError(event_id)
        ticket_type = self.event_repo.get_ticket_type(
            event_id=event_id, ticket_type_id=ticket_type_id
        )
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket_type_id)
        return ticket_type
