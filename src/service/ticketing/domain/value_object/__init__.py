"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.money import to_money
from src.service.ticketing.domain.value_object.seat_catalog import SeatCatalog
from src.service.ticketing.domain.value_object.seat_reconciliation_plan import (
    SeatReconciliationPlan,
)
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation

__all__ = [
    'SeatCatalog',
    'SeatReconciliationPlan',
    'TicketPurchase',
    'TicketReservation',
    'to_money',
]
