from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.events.dtos import EventDataDTO, EventDTO, PublicEventDTO


class EventRequest(BaseModel):
    """Body for creating or updating an event."""

    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str | None = None
    image_url: str | None = None

    @field_validator("name", "host_name", "location", "event_type")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    def to_dto(self) -> EventDataDTO:
        return EventDataDTO(
            name=self.name,
            host_name=self.host_name,
            date_time=self.date_time,
            location=self.location,
            event_type=self.event_type,
            dress_code=(self.dress_code or "").strip(),
            image_url=self.image_url or None,
        )


class EventResponse(BaseModel):
    id: UUID
    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, event: EventDTO) -> "EventResponse":
        return cls(
            id=event.id,
            name=event.name,
            host_name=event.host_name,
            date_time=event.date_time,
            location=event.location,
            event_type=event.event_type,
            dress_code=event.dress_code,
            image_url=event.image_url,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class PublicEventResponse(BaseModel):
    """Event details shown on the guest RSVP page."""

    id: UUID
    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str
    image_url: str | None = None

    @classmethod
    def from_dto(cls, event: PublicEventDTO) -> "PublicEventResponse":
        return cls(
            id=event.id,
            name=event.name,
            host_name=event.host_name,
            date_time=event.date_time,
            location=event.location,
            event_type=event.event_type,
            dress_code=event.dress_code,
            image_url=event.image_url,
        )


class EventMutationResponse(BaseModel):
    message: str
    event: EventResponse


class MessageResponse(BaseModel):
    message: str
