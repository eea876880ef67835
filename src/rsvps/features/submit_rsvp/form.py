"""Turns raw form fields into a validated RSVP submission."""

from src.config.settings import settings
from src.rsvps.dtos import NewRSVPDTO, RSVPValidationError

MISSING_REQUIRED_MESSAGE = "Name and email are required"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_guests(value: str | None, max_guests: int) -> int:
    value = _clean(value)
    if value is None:
        return 1
    try:
        guests = int(value)
    except ValueError:
        guests = 0
    if not 1 <= guests <= max_guests:
        raise RSVPValidationError(f"Number of guests must be between 1 and {max_guests}")
    return guests


def parse_submission(
    name: str | None,
    email: str | None,
    attending: str | None,
    guests: str | None,
    dietary_restrictions: str | None = None,
    message: str | None = None,
    max_guests: int | None = None,
) -> NewRSVPDTO:
    """
    Validate a posted RSVP form.

    Raises RSVPValidationError with a user-facing message when name or email
    is missing or an attending guest count is out of range. Declines never
    fail on the guest count; an unusable one falls back to 1.
    """
    name = _clean(name)
    email = _clean(email)
    if not name or not email:
        raise RSVPValidationError(MISSING_REQUIRED_MESSAGE)

    is_attending = attending == "true"
    max_guests = max_guests or settings.max_guests_per_rsvp
    try:
        guest_count = parse_guests(guests, max_guests)
    except RSVPValidationError:
        if is_attending:
            raise
        guest_count = 1

    return NewRSVPDTO(
        name=name,
        email=email,
        attending=is_attending,
        guests=guest_count,
        dietary_restrictions=_clean(dietary_restrictions),
        message=_clean(message),
    )
