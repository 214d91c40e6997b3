"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.domain.reservation_policy import ReservationPolicy
from src.service.ticketing.domain.ticket_type_reconciler import TicketTypeReconciler
from src.service.ticketing.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_inventory_repo_impl import (
    TicketInventoryRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.venue_repo_impl import VenueRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Domain services
    reservation_policy = providers.Singleton(
        ReservationPolicy.from_minutes,
        minutes=config_service.provided.RESERVATION_HOLD_MINUTES,
    )
    ticket_type_reconciler = providers.Singleton(TicketTypeReconciler)

    # Repositories (in-memory, process lifetime)
    venue_repo = providers.Singleton(VenueRepoImpl)
    event_repo = providers.Singleton(EventRepoImpl)
    ticket_inventory_repo = providers.Singleton(
        TicketInventoryRepoImpl, reservation_policy=reservation_policy
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
