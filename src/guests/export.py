import csv
import io
from collections.abc import Iterable

from src.guests.dtos import GuestDTO, RSVPResponse

CSV_HEADER = ["Name", "Response", "Plus-ones", "Responded at"]

RESPONSE_LABELS = {
    RSVPResponse.YES: "Confirmed",
    RSVPResponse.NO: "Declined",
    RSVPResponse.PENDING: "Pending",
}


def guests_to_csv(guests: Iterable[GuestDTO]) -> str:
    """Render a guest list as CSV for download from the dashboard."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for guest in guests:
        writer.writerow(
            [
                guest.name,
                RESPONSE_LABELS[guest.response],
                ", ".join(guest.plus_ones) or "None",
                guest.responded_at.isoformat() if guest.responded_at else "Not responded",
            ]
        )
    return buffer.getvalue()
