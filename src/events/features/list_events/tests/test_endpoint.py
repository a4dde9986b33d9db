from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from src.auth.dependencies import get_current_host
from src.events.features.list_events.router import get_event_read_model
from src.events.urls import EVENT_URL, EVENTS_URL
from src.guests.tests.inmemory_models import InMemoryEventReadModel, create_test_event


@pytest.fixture
def events(host):
    older = create_test_event(host_id=host.id, name="Older")
    older = replace(older, created_at=datetime.now(UTC) - timedelta(days=1))
    newer = create_test_event(host_id=host.id, name="Newer")
    someone_elses = create_test_event(name="Not mine")
    return [older, newer, someone_elses]


@pytest.fixture
def overrides(host, events):
    read_model = InMemoryEventReadModel(events=events)
    return {
        get_current_host: lambda: host,
        get_event_read_model: lambda: read_model,
    }


@pytest.mark.asyncio
async def test_list_events_newest_first(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(EVENTS_URL)

    assert response.status_code == 200
    assert [event["name"] for event in response.json()] == ["Newer", "Older"]


@pytest.mark.asyncio
async def test_get_own_event(client_factory, overrides, events):
    async with client_factory(overrides) as client:
        response = await client.get(EVENT_URL.format(event_id=events[0].id))

    assert response.status_code == 200
    assert response.json()["name"] == "Older"


@pytest.mark.asyncio
async def test_get_other_hosts_event_is_not_found(client_factory, overrides, events):
    async with client_factory(overrides) as client:
        response = await client.get(EVENT_URL.format(event_id=events[2].id))
        missing = await client.get(EVENT_URL.format(event_id=uuid4()))

    assert response.status_code == 404
    assert missing.status_code == 404
    assert response.json() == missing.json() == {"detail": "Event not found"}


@pytest.mark.asyncio
async def test_get_event_malformed_id(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(EVENT_URL.format(event_id="not-a-uuid"))

    assert response.status_code == 422
