import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import uuid4

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./rsvp.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.auth.dtos import HostDTO  # noqa: E402
from src.config.database import async_session_manager, engine  # noqa: E402
from src.events.dtos import EventDataDTO, EventDTO  # noqa: E402
from src.events.repository import orm_models as event_orm_models  # noqa: E402, F401
from src.events.repository.write_models import SqlEventWriteModel  # noqa: E402
from src.guests.repository import orm_models as guest_orm_models  # noqa: E402, F401
from src.main import app  # noqa: E402
from src.models.base import BaseModel  # noqa: E402
from src.models.host import Host  # noqa: E402


@pytest.fixture(autouse=True)
async def test_db():
    """Create a fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
def client_factory():
    """Build a test client with FastAPI dependency overrides applied."""

    @asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac


@pytest.fixture
def host() -> HostDTO:
    return HostDTO(id=uuid4(), email="host@example.com", name="Host")


@pytest.fixture
async def db_host() -> HostDTO:
    """A host row in the test database."""
    async with async_session_manager() as session:
        host = Host(email="host@example.com", hashed_password="not-a-real-hash", name="Host")
        session.add(host)
        await session.flush()
        return HostDTO(id=host.uuid, email=host.email, name=host.name)


@pytest.fixture
async def db_event(db_host: HostDTO) -> EventDTO:
    """An event owned by db_host in the test database."""
    return await SqlEventWriteModel().create_event(
        db_host.id,
        EventDataDTO(
            name="Summer Party",
            host_name="Host",
            date_time=datetime(2026, 7, 1, 18, 0, tzinfo=UTC),
            location="Rooftop",
            event_type="party",
        ),
    )
