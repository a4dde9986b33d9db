"""Create hosts, events and guests tables.

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create hosts, events and guests tables."""
    op.create_table(
        "hosts",
        sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_hosts_email", "hosts", ["email"], unique=True)

    op.create_table(
        "events",
        sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        sa.Column(
            "host_id",
            sqlalchemy_utils.UUIDType(binary=False),
            sa.ForeignKey("hosts.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("host_name", sa.String(255), nullable=False),
        sa.Column("date_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(500), nullable=False),
        sa.Column("dress_code", sa.String(255), nullable=False, server_default=""),
        sa.Column("event_type", sa.String(100), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_events_host_id", "events", ["host_id"])

    op.create_table(
        "guests",
        sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        sa.Column(
            "event_id",
            sqlalchemy_utils.UUIDType(binary=False),
            sa.ForeignKey("events.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "response",
            sa.Enum("pending", "yes", "no", name="rsvp_response_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("plus_ones", sa.JSON(), nullable=False),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("event_id", "email", name="uq_guests_event_id_email"),
    )
    op.create_index("ix_guests_event_id", "guests", ["event_id"])
    op.create_index("ix_guests_email", "guests", ["email"])


def downgrade() -> None:
    """Drop guests, events and hosts tables."""
    op.drop_index("ix_guests_email", table_name="guests")
    op.drop_index("ix_guests_event_id", table_name="guests")
    op.drop_table("guests")
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS rsvp_response_enum")
    op.drop_index("ix_events_host_id", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_hosts_email", table_name="hosts")
    op.drop_table("hosts")
