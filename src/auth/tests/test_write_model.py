import pytest

from src.auth.dtos import HostAlreadyExistsError, InvalidCredentialsError
from src.auth.security import decode_access_token
from src.auth.write_model import SqlHostAuthWriteModel


async def test_register_and_authenticate():
    write_model = SqlHostAuthWriteModel()

    registered = await write_model.register("Host@Example.com", "secret123", " Alex ")
    logged_in = await write_model.authenticate("host@example.com", "secret123")

    assert registered.host.email == "host@example.com"
    assert registered.host.name == "Alex"
    assert logged_in.host == registered.host
    assert decode_access_token(logged_in.token) == registered.host


async def test_register_duplicate_email():
    write_model = SqlHostAuthWriteModel()
    await write_model.register("host@example.com", "secret123", "Alex")

    with pytest.raises(HostAlreadyExistsError):
        await write_model.register("HOST@example.com", "another1", "Sam")


@pytest.mark.parametrize(
    "email, password",
    [("host@example.com", "wrong-password"), ("nobody@example.com", "secret123")],
)
async def test_authenticate_invalid_credentials(email, password):
    await SqlHostAuthWriteModel().register("host@example.com", "secret123", "Alex")

    with pytest.raises(InvalidCredentialsError):
        await SqlHostAuthWriteModel().authenticate(email, password)
