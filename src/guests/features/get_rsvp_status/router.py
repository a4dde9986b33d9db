from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.guests.dtos import InvalidGuestNameError, RSVPResponse
from src.guests.features.list_guests.router import get_guest_read_model
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import RSVP_STATUS_URL

router = APIRouter()


class RSVPStatusResponse(BaseModel):
    """Current RSVP of a guest. Empty when the name is not on the list."""

    name: str | None = None
    response: RSVPResponse | None = None
    plus_ones: list[str] = []
    responded_at: datetime | None = None


@router.get(RSVP_STATUS_URL, response_model=RSVPStatusResponse)
async def get_rsvp_status(
    event_id: UUID,
    name: str,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> RSVPStatusResponse:
    """Look up what a guest answered before, so the RSVP form can be prefilled."""
    try:
        guest = await read_model.get_rsvp_status(event_id, name)
    except InvalidGuestNameError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if guest is None:
        return RSVPStatusResponse()

    return RSVPStatusResponse(
        name=guest.name,
        response=None if guest.response == RSVPResponse.PENDING else guest.response,
        plus_ones=guest.plus_ones,
        responded_at=guest.responded_at,
    )
