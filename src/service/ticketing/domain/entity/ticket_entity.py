from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.reservation_policy import ReservationPolicy
from src.service.ticketing.domain.ticketing_error import (
    AlreadySoldError,
    InvalidArgumentError,
    PriceMismatchError,
    ReservedByOtherError,
    TicketUnavailableError,
)
from src.service.ticketing.domain.value_object.ticket_purchase import TicketPurchase
from src.service.ticketing.domain.value_object.ticket_reservation import TicketReservation


def derive_ticket_status(
    purchase_token: Optional[str], reserved_until: Optional[datetime], now: datetime
) -> TicketStatus:
    """Sold wins over a hold; a hold counts only while strictly in the future."""
    if purchase_token is not None:
        return TicketStatus.SOLD
    if reserved_until is not None and reserved_until > now:
        return TicketStatus.RESERVED
    return TicketStatus.AVAILABLE


def _require_identifier(name: str, value: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(f'{name} is required')


@attrs.define
class Ticket:
    """
    One seat of one event.

    Status is never stored; it is derived from purchase_token and reserved_until.
    State-changing methods are not thread-safe on their own: TicketInventory
    calls them while holding the ticket's lock.
    """

    id: UUID
    event_id: UUID
    ticket_type_id: UUID
    seat: str
    owner: Optional[str] = None
    reserved_until: Optional[datetime] = None
    purchase_token: Optional[str] = None
    purchase_price: Optional[Decimal] = None

    def status_at(self, now: datetime) -> TicketStatus:
        return derive_ticket_status(self.purchase_token, self.reserved_until, now)

    def reserve(self, *, user_id: str, policy: ReservationPolicy) -> TicketReservation:
        _require_identifier('user_id', user_id)
        now = policy.now()
        status = self.status_at(now)
        if status is not TicketStatus.AVAILABLE:
            raise TicketUnavailableError(self.id, status)

        self.owner = user_id
        self.reserved_until = policy.hold_until(now)
        return TicketReservation(
            ticket_id=self.id, user_id=user_id, reserved_until=self.reserved_until
        )

    def release_reservation(self, *, user_id: str, now: datetime) -> bool:
        # owner survives the release so a purchase racing the cancel still resolves
        if self.status_at(now) is TicketStatus.RESERVED and self.owner == user_id:
            self.reserved_until = None
            return True
        return False

    def reservation_for(self, *, user_id: str, now: datetime) -> Optional[TicketReservation]:
        reserved_until = self.reserved_until
        if (
            reserved_until is None
            or self.owner != user_id
            or self.status_at(now) is not TicketStatus.RESERVED
        ):
            return None
        return TicketReservation(ticket_id=self.id, user_id=user_id, reserved_until=reserved_until)

    def purchase(
        self,
        *,
        purchaser_id: str,
        purchase_token: str,
        purchase_price: Decimal,
        expected_price: Decimal,
        now: datetime,
    ) -> TicketPurchase:
        _require_identifier('purchaser_id', purchaser_id)
        _require_identifier('purchase_token', purchase_token)
        status = self.status_at(now)

        if status is TicketStatus.SOLD:
            existing = self.to_purchase()
            if existing is not None and existing.purchaser_id == purchaser_id:
                return existing
            raise AlreadySoldError(self.id)

        if status is TicketStatus.RESERVED and self.owner != purchaser_id:
            raise ReservedByOtherError(self.id)

        if purchase_price != expected_price:
            raise PriceMismatchError(self.id, offered=purchase_price, expected=expected_price)

        # reserved_until is left as is; SOLD takes precedence when deriving status
        self.owner = purchaser_id
        self.purchase_token = purchase_token
        self.purchase_price = purchase_price
        return TicketPurchase(
            ticket_id=self.id,
            purchaser_id=purchaser_id,
            purchase_token=purchase_token,
            purchase_price=purchase_price,
        )

    def to_purchase(self) -> Optional[TicketPurchase]:
        if self.purchase_token is None or self.owner is None or self.purchase_price is None:
            return None
        return TicketPurchase(
            ticket_id=self.id,
            purchaser_id=self.owner,
            purchase_token=self.purchase_token,
            purchase_price=self.purchase_price,
        )
