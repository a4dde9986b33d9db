from uuid import uuid4

import pytest

from src.events.features.list_events.router import get_event_read_model
from src.guests.tests.inmemory_models import InMemoryEventReadModel, create_test_event
from src.guests.urls import PUBLIC_EVENT_URL


@pytest.mark.asyncio
async def test_get_public_event_hides_host_fields(client_factory):
    event = create_test_event(name="Garden Wedding")
    overrides = {get_event_read_model: lambda: InMemoryEventReadModel(events=[event])}

    async with client_factory(overrides) as client:
        response = await client.get(PUBLIC_EVENT_URL.format(event_id=event.id))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(event.id)
    assert data["name"] == "Garden Wedding"
    assert data["host_name"] == "Host"
    assert data["location"] == "Rooftop"
    assert "host_id" not in data
    assert "created_at" not in data
    assert "updated_at" not in data


@pytest.mark.asyncio
async def test_get_public_event_not_found(client_factory):
    overrides = {get_event_read_model: lambda: InMemoryEventReadModel()}

    async with client_factory(overrides) as client:
        response = await client.get(PUBLIC_EVENT_URL.format(event_id=uuid4()))

    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found"
