"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ticket_inventory_repo import ITicketInventoryRepo
from src.service.ticketing.app.interface.i_venue_repo import IVenueRepo

__all__ = ['IEventRepo', 'ITicketInventoryRepo', 'IVenueRepo']
