from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from src.auth.dependencies import get_current_host
from src.auth.dtos import HostDTO
from src.events.dtos import EventNotFoundError
from src.guests.dtos import GuestAlreadyExistsError
from src.guests.features.add_guest.write_model import (
    GuestCreateWriteModel,
    SqlGuestCreateWriteModel,
)
from src.guests.schemas import GuestResponse
from src.guests.urls import EVENT_GUESTS_URL

router = APIRouter()


class GuestCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


class GuestCreateResponse(BaseModel):
    message: str
    guest: GuestResponse


def get_guest_create_write_model() -> GuestCreateWriteModel:
    """Dependency to get guest create write model instance."""
    return SqlGuestCreateWriteModel()


@router.post(EVENT_GUESTS_URL, response_model=GuestCreateResponse, status_code=201)
async def add_guest(
    event_id: UUID,
    guest_data: GuestCreate,
    host: HostDTO = Depends(get_current_host),
    write_model: GuestCreateWriteModel = Depends(get_guest_create_write_model),
) -> GuestCreateResponse:
    """Add a guest to one of the current host's events."""
    try:
        guest = await write_model.create_guest(event_id, host.id, guest_data.name)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GuestAlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GuestCreateResponse(
        message="Guest added successfully",
        guest=GuestResponse.from_dto(guest),
    )
