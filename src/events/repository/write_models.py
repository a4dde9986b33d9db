"""Event write models - return DTOs, never ORM models.

Every write is scoped by the owning host: an event that belongs to someone
else behaves exactly like one that does not exist.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventDataDTO, EventDTO, EventNotFoundError
from src.events.repository.orm_models import Event
from src.guests.repository.orm_models import Guest
from src.models.base import as_utc

logger = logging.getLogger(__name__)


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(self, host_id: UUID, data: EventDataDTO) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_event(self, event_id: UUID, host_id: UUID, data: EventDataDTO) -> EventDTO:
        """Replace the editable fields of an owned event."""
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: UUID, host_id: UUID) -> None:
        """Delete an owned event together with its guest list."""
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    """SQL implementation of event write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(self, host_id: UUID, data: EventDataDTO) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = Event(
                host_id=host_id,
                name=data.name,
                host_name=data.host_name,
                date_time=as_utc(data.date_time),
                location=data.location,
                dress_code=data.dress_code or "",
                event_type=data.event_type,
                image_url=data.image_url or None,
            )
            session.add(event)
            await session.flush()
            await session.refresh(event)
            logger.info(f"Created event {event.uuid} for host {host_id}")
            return event.to_dto()

    async def update_event(self, event_id: UUID, host_id: UUID, data: EventDataDTO) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_owned_event(session, event_id, host_id)
            event.name = data.name
            event.host_name = data.host_name
            event.date_time = as_utc(data.date_time)
            event.location = data.location
            event.dress_code = data.dress_code or ""
            event.event_type = data.event_type
            event.image_url = data.image_url or None
            await session.flush()
            await session.refresh(event)
            logger.info(f"Updated event {event_id}")
            return event.to_dto()

    async def delete_event(self, event_id: UUID, host_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_owned_event(session, event_id, host_id)
            await session.execute(delete(Guest).where(Guest.event_id == event.uuid))
            await session.delete(event)
            await session.flush()
            logger.info(f"Deleted event {event_id} and its guests")

    async def _get_owned_event(self, session, event_id: UUID, host_id: UUID) -> Event:
        stmt = select(Event).where(Event.uuid == event_id, Event.host_id == host_id)
        result = await session.execute(stmt)
        event = result.scalar_one_or_none()
        if event is None:
            raise EventNotFoundError(event_id)
        return event
