from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.events.features.list_events.router import get_event_read_model
from src.guests.tests.inmemory_models import InMemoryEventReadModel
from src.guests.urls import PUBLIC_EVENT_URL


class UnavailableEventReadModel(InMemoryEventReadModel):
    async def get_public_event(self, event_id):
        raise OperationalError("SELECT events", {}, ConnectionRefusedError("db is down"))


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the Event RSVP API"}


@pytest.mark.asyncio
async def test_storage_failure_is_generic_500(client_factory):
    overrides = {get_event_read_model: lambda: UnavailableEventReadModel()}

    async with client_factory(overrides) as client:
        response = await client.get(PUBLIC_EVENT_URL.format(event_id=uuid4()))

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
