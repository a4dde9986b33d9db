from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.guests.aggregation import filter_guests
from src.guests.dtos import GuestFilter
from src.guests.export import guests_to_csv
from src.guests.features.list_guests.router import get_guest_read_model
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import EXPORT_GUESTS_URL

router = APIRouter()


@router.get(EXPORT_GUESTS_URL)
async def export_guests(
    event_id: UUID,
    response: GuestFilter = Query(GuestFilter.ALL, description="Filter by RSVP response"),
    host: HostDTO = Depends(get_current_host),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> Response:
    """Download the guest list as CSV."""
    try:
        guests = await read_model.list_guests(event_id, host.id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    content = guests_to_csv(filter_guests(guests, response))
    filename = f"guests-{event_id}-{response.value}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
