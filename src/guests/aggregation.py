from collections.abc import Iterable

from src.guests.dtos import GuestDTO, GuestFilter, GuestSummaryDTO, RSVPResponse


def summarize_guests(guests: Iterable[GuestDTO]) -> GuestSummaryDTO:
    """Count responses over a guest list.

    Every confirmed guest brings themselves plus each named plus-one, so
    confirmed_attendees is the head count to plan for.
    """
    total = confirmed = attendees = declined = pending = 0
    for guest in guests:
        total += 1
        if guest.response == RSVPResponse.YES:
            confirmed += 1
            attendees += 1 + len(guest.plus_ones)
        elif guest.response == RSVPResponse.NO:
            declined += 1
        else:
            pending += 1
    return GuestSummaryDTO(
        total=total,
        confirmed=confirmed,
        confirmed_attendees=attendees,
        declined=declined,
        pending=pending,
    )


def filter_guests(guests: Iterable[GuestDTO], guest_filter: GuestFilter) -> list[GuestDTO]:
    if guest_filter == GuestFilter.ALL:
        return list(guests)
    wanted = RSVPResponse(guest_filter.value)
    return [guest for guest in guests if guest.response == wanted]
