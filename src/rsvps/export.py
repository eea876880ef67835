"""CSV export of stored RSVPs."""

import csv
import io
from collections.abc import Iterable

from src.rsvps.dtos import RSVPDTO

CSV_HEADERS = [
    "Name",
    "Email",
    "Attending",
    "Guests",
    "Dietary Restrictions",
    "Message",
    "Date",
]
CSV_FILENAME = "rsvps.csv"


def rsvp_to_row(rsvp: RSVPDTO) -> list[str]:
    return [
        rsvp.name,
        rsvp.email,
        "Yes" if rsvp.attending else "No",
        str(rsvp.guests),
        rsvp.dietary_restrictions or "",
        rsvp.message or "",
        rsvp.created_at.isoformat(),
    ]


def rsvps_to_csv(rsvps: Iterable[RSVPDTO]) -> str:
    """
    Serialize RSVPs to a CSV document, one row per RSVP in the given order.

    Every field is quoted and embedded quotes are doubled (RFC 4180), so
    names and messages containing commas, quotes or newlines survive intact.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    writer.writerow(CSV_HEADERS)
    for rsvp in rsvps:
        writer.writerow(rsvp_to_row(rsvp))
    return buffer.getvalue()
