"""Application layer DTOs"""

from src.service.ticketing.app.dto.page_dto import EventPage, Page, TicketPage, paginate
from src.service.ticketing.app.dto.ticket_dto import TicketView

__all__ = ['EventPage', 'Page', 'TicketPage', 'TicketView', 'paginate']
