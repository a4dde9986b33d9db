import pytest

from src.auth.dependencies import get_current_host
from src.events.features.create_event.router import get_event_write_model
from src.events.tests.inmemory_models import InMemoryEventWriteModel
from src.events.urls import EVENT_URL
from src.guests.tests.inmemory_models import InMemoryEventReadModel, create_test_event

UPDATED_BODY = {
    "name": "Winter Party",
    "host_name": "Alex",
    "date_time": "2026-12-20T19:30:00+00:00",
    "location": "Lodge",
    "event_type": "party",
    "dress_code": "Warm",
}


@pytest.fixture
def event(host):
    return create_test_event(host_id=host.id)


@pytest.fixture
def read_model(event):
    return InMemoryEventReadModel(events=[event])


@pytest.fixture
def overrides(host, read_model):
    write_model = InMemoryEventWriteModel(read_model)
    return {
        get_current_host: lambda: host,
        get_event_write_model: lambda: write_model,
    }


@pytest.mark.asyncio
async def test_update_event(client_factory, overrides, read_model, event, host):
    async with client_factory(overrides) as client:
        response = await client.put(EVENT_URL.format(event_id=event.id), json=UPDATED_BODY)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Event updated successfully"
    assert data["event"]["id"] == str(event.id)
    assert data["event"]["name"] == "Winter Party"
    assert data["event"]["location"] == "Lodge"

    stored = await read_model.get_host_event(event.id, host.id)
    assert stored.dress_code == "Warm"


@pytest.mark.asyncio
async def test_update_other_hosts_event(client_factory, read_model, host):
    foreign = create_test_event()
    read_model._events[foreign.id] = foreign
    overrides = {
        get_current_host: lambda: host,
        get_event_write_model: lambda: InMemoryEventWriteModel(read_model),
    }

    async with client_factory(overrides) as client:
        response = await client.put(EVENT_URL.format(event_id=foreign.id), json=UPDATED_BODY)

    assert response.status_code == 404
    assert read_model._events[foreign.id].name == "Summer Party"


@pytest.mark.asyncio
async def test_update_event_blank_name(client_factory, overrides, event):
    async with client_factory(overrides) as client:
        response = await client.put(
            EVENT_URL.format(event_id=event.id), json={**UPDATED_BODY, "name": " "}
        )

    assert response.status_code == 422
