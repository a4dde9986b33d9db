from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.events.features.create_event.router import get_event_write_model
from src.events.repository.write_models import EventWriteModel
from src.events.schemas import EventMutationResponse, EventRequest, EventResponse
from src.events.urls import EVENT_URL

router = APIRouter()


@router.put(EVENT_URL, response_model=EventMutationResponse)
async def update_event(
    event_id: UUID,
    request: EventRequest,
    host: HostDTO = Depends(get_current_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventMutationResponse:
    """Replace the details of one of the current host's events."""
    try:
        event = await write_model.update_event(event_id, host.id, request.to_dto())
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return EventMutationResponse(
        message="Event updated successfully",
        event=EventResponse.from_dto(event),
    )
