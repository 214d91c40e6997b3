from datetime import datetime
from uuid import UUID

import attrs


@attrs.define(frozen=True)
class TicketReservation:
    ticket_id: UUID
    user_id: str
    reserved_until: datetime
