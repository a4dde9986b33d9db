from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.schemas import EventResponse
from src.events.urls import EVENT_URL, EVENTS_URL

router = APIRouter()


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(EVENTS_URL, response_model=list[EventResponse])
async def list_events(
    host: HostDTO = Depends(get_current_host),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """List the current host's events, newest first."""
    events = await read_model.list_host_events(host.id)
    return [EventResponse.from_dto(event) for event in events]


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    host: HostDTO = Depends(get_current_host),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    """Get one of the current host's events."""
    try:
        event = await read_model.get_host_event(event_id, host.id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return EventResponse.from_dto(event)
