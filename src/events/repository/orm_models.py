from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.events.dtos import EventDTO, PublicEventDTO
from src.models.base import Base, TimeStamp, as_utc


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    host_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)
    dress_code: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_dto(self) -> EventDTO:
        return EventDTO(
            id=self.uuid,
            host_id=self.host_id,
            name=self.name,
            host_name=self.host_name,
            date_time=as_utc(self.date_time),
            location=self.location,
            event_type=self.event_type,
            dress_code=self.dress_code or "",
            image_url=self.image_url,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )

    def to_public_dto(self) -> PublicEventDTO:
        return PublicEventDTO(
            id=self.uuid,
            name=self.name,
            host_name=self.host_name,
            date_time=as_utc(self.date_time),
            location=self.location,
            event_type=self.event_type,
            dress_code=self.dress_code or "",
            image_url=self.image_url,
        )

    def __repr__(self) -> str:
        return f"<Event {self.name} on {self.date_time}>"
