from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.ticketing_error import EventNotFoundError


class GetEventUseCase:
    def __init__(self, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(cls, event_repo: IEventRepo = Depends(Provide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    def get_by_id(self, *, event_id: UUID) -> EventEntity:
        """Get event by ID."""
        Logger.base.info(f'🎫 [GET_EVENT] Loading event {event_id}')

        event = self.event_repo.get_by_id(event_id=event_id)
        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
            raise EventNotFoundError(event_id)

        return event
