from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class InvalidGuestNameError(ValueError):
    """Raised when a guest name is empty or whitespace-only."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Guest name must not be blank")


class InvalidRSVPError(ValueError):
    """Raised when an RSVP submission is malformed."""


class GuestAlreadyExistsError(Exception):
    """Raised when a host adds a guest that is already on the event's list."""

    def __init__(self, event_id: UUID, email: str) -> None:
        self.event_id = event_id
        self.email = email
        super().__init__("Guest already exists for this event")


class GuestConflictError(Exception):
    """Raised by a guest store when an insert hits the (event, email) unique constraint."""

    def __init__(self, event_id: UUID, email: str) -> None:
        self.event_id = event_id
        self.email = email
        super().__init__(f"Guest '{email}' already exists for event {event_id}")


class RSVPResponse(str, Enum):
    PENDING = "pending"
    YES = "yes"
    NO = "no"


class GuestFilter(str, Enum):
    ALL = "all"
    YES = "yes"
    NO = "no"
    PENDING = "pending"


@dataclass(frozen=True)
class GuestDTO:
    """DTO for a guest record."""

    id: UUID
    event_id: UUID
    name: str
    email: str
    response: RSVPResponse
    plus_ones: list[str] = field(default_factory=list)
    responded_at: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class GuestSummaryDTO:
    """Aggregated counts over an event's guest list."""

    total: int
    confirmed: int
    confirmed_attendees: int
    declined: int
    pending: int
