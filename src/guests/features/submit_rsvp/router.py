from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from src.events.dtos import EventNotFoundError
from src.guests.dtos import InvalidGuestNameError, InvalidRSVPError, RSVPResponse
from src.guests.reconcile import RSVPWriteModel, SqlRSVPWriteModel
from src.guests.urls import SUBMIT_RSVP_URL

router = APIRouter()


class RSVPSubmit(BaseModel):
    name: str
    response: RSVPResponse
    plus_ones: list[str] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()

    @field_validator("response")
    @classmethod
    def response_given(cls, value: RSVPResponse) -> RSVPResponse:
        if value == RSVPResponse.PENDING:
            raise ValueError("response must be 'yes' or 'no'")
        return value


class RSVPGuest(BaseModel):
    name: str
    response: RSVPResponse
    plus_ones: list[str]
    responded_at: datetime | None = None


class RSVPSubmitResponse(BaseModel):
    message: str
    guest: RSVPGuest


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(SUBMIT_RSVP_URL, response_model=RSVPSubmitResponse)
async def submit_rsvp(
    event_id: UUID,
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPSubmitResponse:
    """
    Submit a guest's RSVP. No authentication.
    The guest is matched by name, so answering again updates the earlier response.
    Plus-ones are only kept when the guest is coming.
    """
    try:
        guest = await write_model.submit_rsvp(
            event_id=event_id,
            name=rsvp_data.name,
            response=rsvp_data.response,
            plus_ones=rsvp_data.plus_ones,
        )
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidGuestNameError, InvalidRSVPError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RSVPSubmitResponse(
        message="RSVP recorded successfully",
        guest=RSVPGuest(
            name=guest.name,
            response=guest.response,
            plus_ones=guest.plus_ones,
            responded_at=guest.responded_at,
        ),
    )
