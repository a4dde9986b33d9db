from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.guests.aggregation import filter_guests, summarize_guests
from src.guests.dtos import GuestFilter
from src.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from src.guests.schemas import GuestResponse, GuestSummaryResponse
from src.guests.urls import EVENT_GUESTS_URL

router = APIRouter()


class GuestListResponse(BaseModel):
    guests: list[GuestResponse]
    summary: GuestSummaryResponse


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(EVENT_GUESTS_URL, response_model=GuestListResponse)
async def list_guests(
    event_id: UUID,
    response: GuestFilter = Query(GuestFilter.ALL, description="Filter by RSVP response"),
    host: HostDTO = Depends(get_current_host),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestListResponse:
    """
    List an event's guests in the order they were added.
    The summary always covers the whole list, regardless of the filter.
    """
    try:
        guests = await read_model.list_guests(event_id, host.id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return GuestListResponse(
        guests=[GuestResponse.from_dto(guest) for guest in filter_guests(guests, response)],
        summary=GuestSummaryResponse.from_dto(summarize_guests(guests)),
    )
