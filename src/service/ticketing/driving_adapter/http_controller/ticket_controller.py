from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from src.service.ticketing.app.command.release_reservation_use_case import (
    ReleaseReservationUseCase,
)
from src.service.ticketing.app.command.reserve_ticket_use_case import ReserveTicketUseCase
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.driving_adapter.schema.ticket_schema import (
    PurchaseRequest,
    PurchaseResponse,
    ReservationRequest,
    ReservationResponse,
    TicketResponse,
)


router = APIRouter()


@router.get('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
def get_ticket(
    ticket_id: UUID,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    return TicketResponse.from_view(use_case.get_by_id(ticket_id=ticket_id))


# ============================ Reservation Endpoints ============================


@router.post('/{ticket_id}/reservations', status_code=status.HTTP_201_CREATED)
@Logger.io
def reserve_ticket(
    ticket_id: UUID,
    request: ReservationRequest,
    use_case: ReserveTicketUseCase = Depends(ReserveTicketUseCase.depends),
) -> ReservationResponse:
    reservation = use_case.reserve(ticket_id=ticket_id, user_id=request.user_id)
    return ReservationResponse.from_value(reservation)


@router.get('/{ticket_id}/reservations/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
def get_reservation(
    ticket_id: UUID,
    user_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> ReservationResponse:
    reservation = use_case.get_reservation(ticket_id=ticket_id, user_id=user_id)
    return ReservationResponse.from_value(reservation)


@router.delete('/{ticket_id}/reservations/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
def release_reservation(
    ticket_id: UUID,
    user_id: str,
    use_case: ReleaseReservationUseCase = Depends(ReleaseReservationUseCase.depends),
) -> Response:
    use_case.release(ticket_id=ticket_id, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================== Purchase Endpoints =============================


@router.post('/{ticket_id}/purchase', status_code=status.HTTP_201_CREATED)
@Logger.io
def purchase_ticket(
    ticket_id: UUID,
    request: PurchaseRequest,
    use_case: PurchaseTicketUseCase = Depends(PurchaseTicketUseCase.depends),
) -> PurchaseResponse:
    purchase = use_case.purchase(
        ticket_id=ticket_id,
        purchaser_id=request.purchaser_id,
        purchase_token=request.purchase_token,
        purchase_price=request.purchase_price,
    )
    return PurchaseResponse.from_value(purchase)


@router.get('/{ticket_id}/purchase', status_code=status.HTTP_200_OK)
@Logger.io
def get_purchase(
    ticket_id: UUID,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> PurchaseResponse:
    return PurchaseResponse.from_value(use_case.get_purchase(ticket_id=ticket_id))
