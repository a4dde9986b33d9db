from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.events.dtos import EventNotFoundError
from src.events.features.list_events.router import get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.events.schemas import PublicEventResponse
from src.guests.urls import PUBLIC_EVENT_URL

router = APIRouter()


@router.get(PUBLIC_EVENT_URL, response_model=PublicEventResponse)
async def get_public_event(
    event_id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> PublicEventResponse:
    """
    Get event details for the guest RSVP page.
    No authentication; only the guest-facing fields are returned.
    """
    try:
        event = await read_model.get_public_event(event_id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return PublicEventResponse.from_dto(event)
