from uuid import uuid4

import pytest

from src.auth.dtos import (
    AuthTokenDTO,
    HostAlreadyExistsError,
    HostDTO,
    InvalidCredentialsError,
)
from src.auth.router import LOGIN_URL, REGISTER_URL, get_host_auth_write_model
from src.auth.security import create_access_token
from src.auth.write_model import HostAuthWriteModel
from src.events.features.list_events.router import get_event_read_model
from src.events.urls import EVENTS_URL
from src.guests.tests.inmemory_models import InMemoryEventReadModel


class InMemoryHostAuthWriteModel(HostAuthWriteModel):
    def __init__(self):
        self.hosts: dict[str, tuple[HostDTO, str]] = {}

    async def register(self, email: str, password: str, name: str) -> AuthTokenDTO:
        email = email.lower()
        if email in self.hosts:
            raise HostAlreadyExistsError(email)
        host = HostDTO(id=uuid4(), email=email, name=name)
        self.hosts[email] = (host, password)
        return AuthTokenDTO(token=create_access_token(host), host=host)

    async def authenticate(self, email: str, password: str) -> AuthTokenDTO:
        host, stored_password = self.hosts.get(email.lower(), (None, None))
        if host is None or stored_password != password:
            raise InvalidCredentialsError()
        return AuthTokenDTO(token=create_access_token(host), host=host)


@pytest.fixture
def overrides():
    write_model = InMemoryHostAuthWriteModel()
    return {get_host_auth_write_model: lambda: write_model}


REGISTER_BODY = {"email": "host@example.com", "password": "secret123", "name": "Alex"}


@pytest.mark.asyncio
async def test_register(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(REGISTER_URL, json=REGISTER_BODY)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created successfully"
    assert data["token"]
    assert data["user"]["email"] == "host@example.com"
    assert "password" not in data["user"]
    assert "hashed_password" not in data["user"]


@pytest.mark.asyncio
async def test_register_duplicate(client_factory, overrides):
    async with client_factory(overrides) as client:
        await client.post(REGISTER_URL, json=REGISTER_BODY)
        response = await client.post(REGISTER_URL, json=REGISTER_BODY)

    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {**REGISTER_BODY, "password": "12345"},
        {**REGISTER_BODY, "email": "not-an-email"},
        {**REGISTER_BODY, "name": "  "},
    ],
)
async def test_register_invalid_body(client_factory, overrides, body):
    async with client_factory(overrides) as client:
        response = await client.post(REGISTER_URL, json=body)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login(client_factory, overrides):
    async with client_factory(overrides) as client:
        await client.post(REGISTER_URL, json=REGISTER_BODY)
        response = await client.post(
            LOGIN_URL, json={"email": "host@example.com", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.json()["message"] == "Login successful"


@pytest.mark.asyncio
async def test_login_wrong_password(client_factory, overrides):
    async with client_factory(overrides) as client:
        await client.post(REGISTER_URL, json=REGISTER_BODY)
        response = await client.post(
            LOGIN_URL, json={"email": "host@example.com", "password": "wrong-one"}
        )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_token_from_login_authorizes_host_routes(client_factory, overrides):
    overrides[get_event_read_model] = lambda: InMemoryEventReadModel()

    async with client_factory(overrides) as client:
        registered = await client.post(REGISTER_URL, json=REGISTER_BODY)
        token = registered.json()["token"]
        response = await client.get(EVENTS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == []
