import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.events.dtos import EventDTO, EventNotFoundError, PublicEventDTO
from src.events.repository.orm_models import Event


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_host_events(self, host_id: UUID) -> list[EventDTO]:
        """List the events owned by a host, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_host_event(self, event_id: UUID, host_id: UUID) -> EventDTO:
        """
        Get an event owned by the given host.
        Raises EventNotFoundError when the event is missing or owned by someone else.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_public_event(self, event_id: UUID) -> PublicEventDTO:
        """Get the guest-facing projection of any event."""
        raise NotImplementedError

    @abc.abstractmethod
    async def event_exists(self, event_id: UUID) -> bool:
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of event read model."""

    async def list_host_events(self, host_id: UUID) -> list[EventDTO]:
        async with async_session_manager() as session:
            stmt = (
                select(Event)
                .where(Event.host_id == host_id)
                .order_by(Event.created_at.desc())
            )
            result = await session.execute(stmt)
            return [event.to_dto() for event in result.scalars().all()]

    async def get_host_event(self, event_id: UUID, host_id: UUID) -> EventDTO:
        async with async_session_manager() as session:
            stmt = select(Event).where(Event.uuid == event_id, Event.host_id == host_id)
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()
            if event is None:
                raise EventNotFoundError(event_id)
            return event.to_dto()

    async def get_public_event(self, event_id: UUID) -> PublicEventDTO:
        async with async_session_manager() as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            if event is None:
                raise EventNotFoundError(event_id)
            return event.to_public_dto()

    async def event_exists(self, event_id: UUID) -> bool:
        async with async_session_manager() as session:
            result = await session.execute(select(Event.uuid).where(Event.uuid == event_id))
            return result.scalar_one_or_none() is not None
