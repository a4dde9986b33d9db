"""RSVP reconciliation.

A guest submission is an upsert keyed by (event, derived email): the first
submission creates the guest record, every later one overwrites the response
in place. Storage and event lookup are passed in, so the same logic runs
against SQL or in-memory collaborators.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from src.events.dtos import EventNotFoundError
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.guests.dtos import GuestConflictError, GuestDTO, InvalidRSVPError, RSVPResponse
from src.guests.identity import derive_guest_email
from src.guests.repository.write_models import GuestStore, SqlGuestStore

logger = logging.getLogger(__name__)


def normalize_plus_ones(response: RSVPResponse, plus_ones: Sequence[str] | None) -> list[str]:
    """Strip plus-one names and drop them entirely unless the guest is coming.

    Duplicates are kept as given.
    """
    if response != RSVPResponse.YES:
        return []
    names = [name.strip() for name in plus_ones or []]
    if any(not name for name in names):
        raise InvalidRSVPError("Plus-one names must not be blank")
    return names


async def submit_rsvp(
    store: GuestStore,
    events: EventReadModel,
    event_id: UUID,
    name: str,
    response: RSVPResponse,
    plus_ones: Sequence[str] | None = None,
) -> GuestDTO:
    """Record a guest's RSVP for an event and return the resulting record.

    Raises:
        InvalidGuestNameError: name is blank.
        InvalidRSVPError: response is not yes/no, or a plus-one name is blank.
        EventNotFoundError: the event does not exist. Nothing is written.
    """
    try:
        response = RSVPResponse(response)
    except ValueError:
        raise InvalidRSVPError("Response must be 'yes' or 'no'") from None
    if response == RSVPResponse.PENDING:
        raise InvalidRSVPError("Response must be 'yes' or 'no'")
    name = name.strip()
    email = derive_guest_email(name)
    names = normalize_plus_ones(response, plus_ones)

    if not await events.event_exists(event_id):
        raise EventNotFoundError(event_id)

    now = datetime.now(UTC)
    existing = await store.find_guest(event_id, email)
    if existing is None:
        try:
            guest = await store.insert_guest(
                event_id=event_id,
                name=name,
                email=email,
                response=response,
                plus_ones=names,
                responded_at=now,
            )
            logger.info(f"Recorded new RSVP '{response.value}' from {email} for event {event_id}")
            return guest
        except GuestConflictError:
            # Lost the create race; the winner's row is updated below.
            existing = await store.find_guest(event_id, email)
            if existing is None:
                raise EventNotFoundError(event_id)

    guest = await store.update_guest(
        guest_id=existing.id,
        name=name,
        response=response,
        plus_ones=names,
        responded_at=now,
    )
    logger.info(f"Updated RSVP to '{response.value}' for {email} on event {event_id}")
    return guest


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(
        self,
        event_id: UUID,
        name: str,
        response: RSVPResponse,
        plus_ones: Sequence[str] | None = None,
    ) -> GuestDTO:
        """Create or update the guest's RSVP. Returns DTO."""
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """Runs reconciliation against the SQL guest store and event lookup."""

    def __init__(
        self,
        store: GuestStore | None = None,
        events: EventReadModel | None = None,
    ) -> None:
        self.store = store or SqlGuestStore()
        self.events = events or SqlEventReadModel()

    async def submit_rsvp(
        self,
        event_id: UUID,
        name: str,
        response: RSVPResponse,
        plus_ones: Sequence[str] | None = None,
    ) -> GuestDTO:
        return await submit_rsvp(
            self.store,
            self.events,
            event_id=event_id,
            name=name,
            response=response,
            plus_ones=plus_ones,
        )
