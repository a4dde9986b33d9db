"""CLI commands for event and RSVP management."""

import asyncio
from datetime import datetime
from uuid import UUID

import typer
from sqlalchemy import select

from src.auth.dtos import HostAlreadyExistsError
from src.auth.write_model import SqlHostAuthWriteModel
from src.config.database import async_session_manager, init_db
from src.events.dtos import EventDataDTO, EventNotFoundError
from src.events.repository.write_models import SqlEventWriteModel
from src.guests.aggregation import summarize_guests
from src.guests.dtos import InvalidGuestNameError, InvalidRSVPError, RSVPResponse
from src.guests.reconcile import SqlRSVPWriteModel
from src.guests.repository.read_models import SqlGuestReadModel
from src.models.host import Host

app = typer.Typer(help="CLI commands for event and RSVP management")


@app.command()
def migrate():
    """Apply database migrations up to head."""
    asyncio.run(init_db())
    typer.secho("Database is up to date.", fg=typer.colors.GREEN)


@app.command()
def create_host(
    email: str = typer.Argument(..., help="Login email of the host"),
    name: str = typer.Option(..., "--name", "-n", help="Display name of the host"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (at least 6 characters)",
    ),
):
    """Create a host account and print its access token."""
    if len(password) < 6:
        typer.secho("Password must be at least 6 characters.", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        auth = asyncio.run(SqlHostAuthWriteModel().register(email, password, name))
    except HostAlreadyExistsError as e:
        typer.secho(f"{e}: {e.email}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Host created!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {auth.host.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Email: {auth.host.email}", fg=typer.colors.BLUE)
    typer.secho(f"  Token: {auth.token}", fg=typer.colors.CYAN)


async def _get_host_id(email: str) -> UUID | None:
    async with async_session_manager() as session:
        result = await session.execute(select(Host.uuid).where(Host.email == email.lower()))
        return result.scalar_one_or_none()


@app.command()
def create_event(
    host_email: str = typer.Argument(..., help="Email of the owning host"),
    name: str = typer.Option(..., "--name", "-n", help="Event name"),
    date_time: datetime = typer.Option(
        ...,
        "--date",
        "-d",
        formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"],
        help="Start of the event",
    ),
    location: str = typer.Option(..., "--location", "-l", help="Where it takes place"),
    event_type: str = typer.Option("party", "--type", "-t", help="Kind of event"),
    dress_code: str = typer.Option("", "--dress-code", help="Optional dress code"),
    host_name: str = typer.Option(
        None, "--host-name", help="Name shown to guests (defaults to the host's name)"
    ),
):
    """Create an event for an existing host."""

    async def _create_event():
        host_id = await _get_host_id(host_email)
        if host_id is None:
            raise ValueError(f"Host not found: {host_email}")
        data = EventDataDTO(
            name=name,
            host_name=host_name or host_email.split("@")[0],
            date_time=date_time,
            location=location,
            event_type=event_type,
            dress_code=dress_code,
        )
        return await SqlEventWriteModel().create_event(host_id, data)

    try:
        event = asyncio.run(_create_event())
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  {event.name} at {event.location} on {event.date_time}", fg=typer.colors.BLUE)


@app.command()
def rsvp(
    event_id: str = typer.Argument(..., help="Event UUID"),
    name: str = typer.Argument(..., help="Guest name as they would type it"),
    response: RSVPResponse = typer.Option(RSVPResponse.YES, "--response", "-r"),
    plus_ones: list[str] = typer.Option([], "--plus-one", "-p", help="Plus-one name"),
):
    """Record an RSVP on behalf of a guest."""
    try:
        guest = asyncio.run(
            SqlRSVPWriteModel().submit_rsvp(UUID(event_id), name, response, plus_ones)
        )
    except EventNotFoundError as e:
        typer.secho(f"{e}: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)
    except (InvalidGuestNameError, InvalidRSVPError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("RSVP recorded!", fg=typer.colors.GREEN)
    typer.secho(f"  Guest: {guest.name} <{guest.email}>", fg=typer.colors.BLUE)
    typer.secho(f"  Response: {guest.response.value}", fg=typer.colors.CYAN)
    if guest.plus_ones:
        typer.secho(f"  Plus-ones: {', '.join(guest.plus_ones)}", fg=typer.colors.CYAN)


@app.command()
def guest_summary(
    event_id: str = typer.Argument(..., help="Event UUID"),
    host_email: str = typer.Argument(..., help="Email of the owning host"),
):
    """Show the guest list and head count of an event."""

    async def _list_guests():
        host_id = await _get_host_id(host_email)
        if host_id is None:
            raise EventNotFoundError(UUID(event_id))
        return await SqlGuestReadModel().list_guests(UUID(event_id), host_id)

    try:
        guests = asyncio.run(_list_guests())
    except EventNotFoundError as e:
        typer.secho(f"{e}: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    summary = summarize_guests(guests)
    typer.secho("Guests", fg=typer.colors.GREEN)
    for guest in guests:
        extra = f" (+{len(guest.plus_ones)})" if guest.plus_ones else ""
        typer.secho(f"  - {guest.name}: {guest.response.value}{extra}", fg=typer.colors.BLUE)

    typer.echo()
    typer.secho(f"Total: {summary.total}", fg=typer.colors.CYAN)
    typer.secho(
        f"Confirmed: {summary.confirmed} ({summary.confirmed_attendees} attending)",
        fg=typer.colors.GREEN,
    )
    typer.secho(f"Declined: {summary.declined}", fg=typer.colors.RED)
    typer.secho(f"Pending: {summary.pending}", fg=typer.colors.YELLOW)


if __name__ == "__main__":
    app()
