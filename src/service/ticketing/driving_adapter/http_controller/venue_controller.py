from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_venue_use_case import CreateVenueUseCase
from src.service.ticketing.app.command.update_venue_use_case import UpdateVenueUseCase
from src.service.ticketing.app.query.get_venue_use_case import GetVenueUseCase
from src.service.ticketing.driving_adapter.schema.venue_schema import (
    VenueRequest,
    VenueResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
def create_venue(
    request: VenueRequest,
    use_case: CreateVenueUseCase = Depends(CreateVenueUseCase.depends),
) -> VenueResponse:
    venue = use_case.create(name=request.name, seats=request.seats)
    return VenueResponse.from_entity(venue)


@router.get('/{venue_id}', status_code=status.HTTP_200_OK)
@Logger.io
def get_venue(
    venue_id: UUID,
    use_case: GetVenueUseCase = Depends(GetVenueUseCase.depends),
) -> VenueResponse:
    return VenueResponse.from_entity(use_case.get_by_id(venue_id=venue_id))


@router.put('/{venue_id}', status_code=status.HTTP_200_OK)
@Logger.io
def update_venue(
    venue_id: UUID,
    request: VenueRequest,
    use_case: UpdateVenueUseCase = Depends(UpdateVenueUseCase.depends),
) -> VenueResponse:
    venue = use_case.update(venue_id=venue_id, name=request.name, seats=request.seats)
    return VenueResponse.from_entity(venue)
