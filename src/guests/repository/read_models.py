import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.events.dtos import EventNotFoundError
from src.events.repository.orm_models import Event
from src.guests.dtos import GuestDTO
from src.guests.identity import derive_guest_email
from src.guests.repository.orm_models import Guest


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_guests(self, event_id: UUID, host_id: UUID) -> list[GuestDTO]:
        """
        List the guests of an event owned by host_id, oldest first.
        Raises EventNotFoundError when the host does not own the event.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_status(self, event_id: UUID, name: str) -> GuestDTO | None:
        """Find the record a guest typing `name` would update, if any."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of guest read model."""

    async def list_guests(self, event_id: UUID, host_id: UUID) -> list[GuestDTO]:
        async with async_session_manager() as session:
            owned = await session.execute(
                select(Event.uuid).where(Event.uuid == event_id, Event.host_id == host_id)
            )
            if owned.scalar_one_or_none() is None:
                raise EventNotFoundError(event_id)

            stmt = (
                select(Guest)
                .where(Guest.event_id == event_id)
                .order_by(Guest.created_at.asc())
            )
            result = await session.execute(stmt)
            return [guest.to_dto() for guest in result.scalars().all()]

    async def get_rsvp_status(self, event_id: UUID, name: str) -> GuestDTO | None:
        email = derive_guest_email(name)
        async with async_session_manager() as session:
            stmt = select(Guest).where(Guest.event_id == event_id, Guest.email == email)
            result = await session.execute(stmt)
            guest = result.scalar_one_or_none()
            return guest.to_dto() if guest else None
