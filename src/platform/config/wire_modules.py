"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    create_event_use_case,
    create_ticket_type_use_case,
    create_venue_use_case,
    purchase_ticket_use_case,
    release_reservation_use_case,
    reserve_ticket_use_case,
    update_event_use_case,
    update_ticket_type_use_case,
    update_venue_use_case,
)
from src.service.ticketing.app.query import (
    get_event_use_case,
    get_ticket_use_case,
    get_venue_use_case,
    list_event_tickets_use_case,
    list_events_use_case,
    list_ticket_types_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_venue_use_case,
    update_venue_use_case,
    get_venue_use_case,
    create_event_use_case,
    update_event_use_case,
    get_event_use_case,
    list_events_use_case,
    create_ticket_type_use_case,
    update_ticket_type_use_case,
    list_ticket_types_use_case,
    reserve_ticket_use_case,
    release_reservation_use_case,
    purchase_ticket_use_case,
    get_ticket_use_case,
    list_event_tickets_use_case,
]
