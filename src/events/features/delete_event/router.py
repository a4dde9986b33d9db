from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.events.features.create_event.router import get_event_write_model
from src.events.repository.write_models import EventWriteModel
from src.events.schemas import MessageResponse
from src.events.urls import EVENT_URL

router = APIRouter()


@router.delete(EVENT_URL, response_model=MessageResponse)
async def delete_event(
    event_id: UUID,
    host: HostDTO = Depends(get_current_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> MessageResponse:
    """Delete one of the current host's events and its guest list."""
    try:
        await write_model.delete_event(event_id, host.id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MessageResponse(message="Event deleted successfully")
