"""Guest store - the storage collaborator behind RSVP reconciliation.

Each operation runs in its own transaction and returns DTOs, never ORM
models. The (event_id, email) unique constraint lives in the database, so an
insert that loses a race surfaces as GuestConflictError instead of a second row.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.config.database import async_session_manager
from src.guests.dtos import GuestConflictError, GuestDTO, RSVPResponse
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class GuestStore(ABC):
    @abstractmethod
    async def find_guest(self, event_id: UUID, email: str) -> GuestDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def insert_guest(
        self,
        event_id: UUID,
        name: str,
        email: str,
        response: RSVPResponse = RSVPResponse.PENDING,
        plus_ones: list[str] | None = None,
        responded_at: datetime | None = None,
    ) -> GuestDTO:
        """
        Insert a new guest record.
        Raises GuestConflictError when (event_id, email) is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_guest(
        self,
        guest_id: UUID,
        name: str,
        response: RSVPResponse,
        plus_ones: list[str],
        responded_at: datetime | None,
    ) -> GuestDTO:
        """Overwrite the response fields of an existing guest record."""
        raise NotImplementedError


class SqlGuestStore(GuestStore):
    """SQL implementation of the guest store."""

    async_session_manager = staticmethod(partial(async_session_manager))

    async def find_guest(self, event_id: UUID, email: str) -> GuestDTO | None:
        async with self.async_session_manager() as session:
            stmt = select(Guest).where(Guest.event_id == event_id, Guest.email == email)
            result = await session.execute(stmt)
            guest = result.scalar_one_or_none()
            return guest.to_dto() if guest else None

    async def insert_guest(
        self,
        event_id: UUID,
        name: str,
        email: str,
        response: RSVPResponse = RSVPResponse.PENDING,
        plus_ones: list[str] | None = None,
        responded_at: datetime | None = None,
    ) -> GuestDTO:
        try:
            async with self.async_session_manager() as session:
                guest = Guest(
                    event_id=event_id,
                    name=name,
                    email=email,
                    response=response,
                    plus_ones=list(plus_ones or []),
                    responded_at=responded_at,
                )
                session.add(guest)
                await session.flush()
                return guest.to_dto()
        except IntegrityError as e:
            logger.warning(f"Insert of guest {email} for event {event_id} conflicted")
            raise GuestConflictError(event_id, email) from e

    async def update_guest(
        self,
        guest_id: UUID,
        name: str,
        response: RSVPResponse,
        plus_ones: list[str],
        responded_at: datetime | None,
    ) -> GuestDTO:
        async with self.async_session_manager() as session:
            result = await session.execute(select(Guest).where(Guest.uuid == guest_id))
            guest = result.scalar_one()
            guest.name = name
            guest.response = response
            guest.plus_ones = list(plus_ones)
            guest.responded_at = responded_at
            await session.flush()
            return guest.to_dto()
