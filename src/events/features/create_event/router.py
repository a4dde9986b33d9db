from fastapi import APIRouter, Depends

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.repository.write_models import EventWriteModel, SqlEventWriteModel
from src.events.schemas import EventMutationResponse, EventRequest, EventResponse
from src.events.urls import EVENTS_URL

router = APIRouter()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


@router.post(EVENTS_URL, response_model=EventMutationResponse, status_code=201)
async def create_event(
    request: EventRequest,
    host: HostDTO = Depends(get_current_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventMutationResponse:
    """Create an event owned by the current host."""
    event = await write_model.create_event(host.id, request.to_dto())
    return EventMutationResponse(
        message="Event created successfully",
        event=EventResponse.from_dto(event),
    )
