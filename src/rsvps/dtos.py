from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.rsvps.repository.orm_models import RSVP


class RSVPValidationError(Exception):
    """Raised when a submitted RSVP form cannot be stored as given."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class NewRSVPDTO:
    """DTO for a validated RSVP submission, ready to be inserted."""

    name: str
    email: str
    attending: bool
    guests: int = 1
    dietary_restrictions: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class RSVPDTO:
    """DTO for a stored RSVP."""

    id: int
    name: str
    email: str
    attending: bool
    guests: int
    created_at: datetime
    dietary_restrictions: str | None = None
    message: str | None = None

    @classmethod
    def from_orm(cls, rsvp: "RSVP") -> "RSVPDTO":
        """Create RSVPDTO from RSVP ORM model."""
        return cls(
            id=rsvp.id,
            name=rsvp.name,
            email=rsvp.email,
            attending=rsvp.attending,
            guests=rsvp.guests,
            created_at=rsvp.created_at,
            dietary_restrictions=rsvp.dietary_restrictions,
            message=rsvp.message,
        )


@dataclass(frozen=True)
class RSVPStatsDTO:
    """Aggregate figures for the admin dashboard."""

    total: int = 0
    attending: int = 0
    total_guests: int = 0
