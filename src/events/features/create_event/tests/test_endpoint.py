import pytest

from src.auth.dependencies import get_current_host
from src.events.features.create_event.router import get_event_write_model
from src.events.tests.inmemory_models import InMemoryEventWriteModel
from src.events.urls import EVENTS_URL
from src.guests.tests.inmemory_models import InMemoryEventReadModel

EVENT_BODY = {
    "name": "Summer Party",
    "host_name": "Alex",
    "date_time": "2026-07-01T18:00:00Z",
    "location": "Rooftop",
    "event_type": "party",
}


@pytest.fixture
def read_model():
    return InMemoryEventReadModel()


@pytest.fixture
def overrides(host, read_model):
    write_model = InMemoryEventWriteModel(read_model)
    return {
        get_current_host: lambda: host,
        get_event_write_model: lambda: write_model,
    }


@pytest.mark.asyncio
async def test_create_event(client_factory, overrides, read_model, host):
    async with client_factory(overrides) as client:
        response = await client.post(EVENTS_URL, json={**EVENT_BODY, "dress_code": "Casual"})

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Event created successfully"
    assert data["event"]["name"] == "Summer Party"
    assert data["event"]["dress_code"] == "Casual"
    assert data["event"]["image_url"] is None
    assert "host_id" not in data["event"]

    events = await read_model.list_host_events(host.id)
    assert [str(event.id) for event in events] == [data["event"]["id"]]


@pytest.mark.asyncio
async def test_create_event_defaults_dress_code(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(EVENTS_URL, json=EVENT_BODY)

    assert response.status_code == 201
    assert response.json()["event"]["dress_code"] == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {**EVENT_BODY, "name": "   "},
        {**EVENT_BODY, "location": ""},
        {**EVENT_BODY, "date_time": "next friday"},
        {key: value for key, value in EVENT_BODY.items() if key != "event_type"},
    ],
)
async def test_create_event_invalid_body(client_factory, overrides, body):
    async with client_factory(overrides) as client:
        response = await client.post(EVENTS_URL, json=body)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_event_requires_token(client_factory):
    async with client_factory() as client:
        response = await client.post(EVENTS_URL, json=EVENT_BODY)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_event_rejects_bad_token(client_factory):
    async with client_factory() as client:
        response = await client.post(
            EVENTS_URL, json=EVENT_BODY, headers={"Authorization": "Bearer not-a-token"}
        )

    assert response.status_code == 403
