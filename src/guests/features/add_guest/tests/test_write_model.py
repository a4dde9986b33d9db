from uuid import uuid4

import pytest

from src.events.dtos import EventNotFoundError
from src.guests.dtos import GuestAlreadyExistsError, RSVPResponse
from src.guests.features.add_guest.write_model import SqlGuestCreateWriteModel
from src.guests.reconcile import SqlRSVPWriteModel
from src.guests.repository.read_models import SqlGuestReadModel


async def test_create_guest(db_event, db_host):
    guest = await SqlGuestCreateWriteModel().create_guest(db_event.id, db_host.id, "Jane Smith")

    assert guest.event_id == db_event.id
    assert guest.email == "jane.smith@guest.local"
    assert guest.response == RSVPResponse.PENDING


async def test_create_guest_requires_ownership(db_event):
    with pytest.raises(EventNotFoundError):
        await SqlGuestCreateWriteModel().create_guest(db_event.id, uuid4(), "Jane")


async def test_create_duplicate_guest(db_event, db_host):
    write_model = SqlGuestCreateWriteModel()
    await write_model.create_guest(db_event.id, db_host.id, "Jane  Smith")

    with pytest.raises(GuestAlreadyExistsError):
        await write_model.create_guest(db_event.id, db_host.id, "jane smith")


async def test_guest_rsvp_updates_host_added_entry(db_event, db_host):
    added = await SqlGuestCreateWriteModel().create_guest(db_event.id, db_host.id, "Jane Smith")

    answered = await SqlRSVPWriteModel().submit_rsvp(
        db_event.id, "jane smith", RSVPResponse.YES, ["Bob"]
    )

    assert answered.id == added.id
    guests = await SqlGuestReadModel().list_guests(db_event.id, db_host.id)
    assert len(guests) == 1
    assert guests[0].name == "jane smith"
    assert guests[0].plus_ones == ["Bob"]
