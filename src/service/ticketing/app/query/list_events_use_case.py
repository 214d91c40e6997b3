from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.page_dto import EventPage, paginate
from src.service.ticketing.app.interface.i_event_repo import IEventRepo


class ListEventsUseCase:
    def __init__(self, event_repo: IEventRepo, config: Settings) -> None:
        self.event_repo = event_repo
        self.config = config

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(event_repo=event_repo, config=config)

    @Logger.io
    def list_events(self, *, page: int, page_size: int) -> EventPage:
        events = self.event_repo.list_all()
        result = paginate(
            events, page=page, page_size=page_size, max_page_size=self.config.MAX_PAGE_SIZE
        )
        Logger.base.info(f'📋 [LIST_EVENTS] page {page}: {len(result.items)}/{result.total_items}')
        return result
