from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.guests.dtos import GuestDTO, RSVPResponse
from src.models.base import Base, TimeStamp, as_utc


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value
    # One record per (event, derived email); concurrent first RSVPs race on this.
    __table_args__ = (UniqueConstraint("event_id", "email", name="uq_guests_event_id_email"),)

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    response: Mapped[RSVPResponse] = mapped_column(
        Enum(
            RSVPResponse,
            name="rsvp_response_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=RSVPResponse.PENDING,
        nullable=False,
    )
    plus_ones: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    responded_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    def to_dto(self) -> GuestDTO:
        return GuestDTO(
            id=self.uuid,
            event_id=self.event_id,
            name=self.name,
            email=self.email,
            response=RSVPResponse(self.response),
            plus_ones=list(self.plus_ones or []),
            responded_at=as_utc(self.responded_at),
            created_at=as_utc(self.created_at),
        )

    def __repr__(self) -> str:
        return f"<Guest {self.email} - {self.response}>"
