"""Write model for hosts adding guests to their events.

A host-added guest starts with no response. The guest's identifier is derived
from the name the same way an RSVP derives it, so when the guest later answers
under that name the host's entry is updated rather than duplicated.
"""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.guests.dtos import GuestAlreadyExistsError, GuestConflictError, GuestDTO
from src.guests.identity import derive_guest_email
from src.guests.repository.write_models import GuestStore, SqlGuestStore

logger = logging.getLogger(__name__)


class GuestCreateWriteModel(ABC):
    """Abstract base class for guest creation write operations."""

    @abstractmethod
    async def create_guest(self, event_id: UUID, host_id: UUID, name: str) -> GuestDTO:
        """Add a guest to an event owned by host_id. Returns DTO.

        Raises:
            EventNotFoundError: the host does not own the event.
            GuestAlreadyExistsError: a guest with the same derived identifier exists.
        """
        raise NotImplementedError


class SqlGuestCreateWriteModel(GuestCreateWriteModel):
    """SQL implementation of guest creation write operations."""

    def __init__(
        self,
        store: GuestStore | None = None,
        events: EventReadModel | None = None,
    ) -> None:
        self.store = store or SqlGuestStore()
        self.events = events or SqlEventReadModel()

    async def create_guest(self, event_id: UUID, host_id: UUID, name: str) -> GuestDTO:
        name = name.strip()
        email = derive_guest_email(name)
        # ownership check, raises EventNotFoundError
        await self.events.get_host_event(event_id, host_id)

        try:
            guest = await self.store.insert_guest(event_id=event_id, name=name, email=email)
        except GuestConflictError as e:
            raise GuestAlreadyExistsError(event_id, email) from e

        logger.info(f"Host {host_id} added guest {email} to event {event_id}")
        return guest
