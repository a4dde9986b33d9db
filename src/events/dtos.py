from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


class EventNotFoundError(Exception):
    """Raised when an event does not exist or is not visible to the caller."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__("Event not found")


@dataclass(frozen=True)
class EventDataDTO:
    """Editable event fields, used for both create and update."""

    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class EventDTO:
    """DTO for an event as seen by its host."""

    id: UUID
    host_id: UUID
    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PublicEventDTO:
    """Guest-facing projection of an event. Carries no host or internal fields."""

    id: UUID
    name: str
    host_name: str
    date_time: datetime
    location: str
    event_type: str
    dress_code: str
    image_url: str | None
