from decimal import Decimal
from uuid import UUID

import attrs


@attrs.define(frozen=True)
class TicketPurchase:
    ticket_id: UUID
    purchaser_id: str
    purchase_token: str
    purchase_price: Decimal
