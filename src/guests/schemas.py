from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.guests.dtos import GuestDTO, GuestSummaryDTO, RSVPResponse


class GuestResponse(BaseModel):
    id: UUID
    event_id: UUID
    name: str
    email: str
    response: RSVPResponse
    plus_ones: list[str] = []
    responded_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(
            id=guest.id,
            event_id=guest.event_id,
            name=guest.name,
            email=guest.email,
            response=guest.response,
            plus_ones=guest.plus_ones,
            responded_at=guest.responded_at,
            created_at=guest.created_at,
        )


class GuestSummaryResponse(BaseModel):
    total: int
    confirmed: int
    confirmed_attendees: int
    declined: int
    pending: int

    @classmethod
    def from_dto(cls, summary: GuestSummaryDTO) -> "GuestSummaryResponse":
        return cls(
            total=summary.total,
            confirmed=summary.confirmed,
            confirmed_attendees=summary.confirmed_attendees,
            declined=summary.declined,
            pending=summary.pending,
        )
