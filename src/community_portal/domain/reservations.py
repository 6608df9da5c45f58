"""Domain models for SoCraTes reservations and registrations."""

from dataclasses import dataclass
from datetime import datetime

SESSION_KEY_PREFIX = "SessionID:"


@dataclass(frozen=True)
class ReservationRecord:
    """A seat held for a session key or registered to a member id."""

    member_id: str
    duration: int | None = None
    expires_at: datetime | None = None


def session_key(session_id: str) -> str:
    """Return the ledger key used for a not-yet-registered session."""
    return f"{SESSION_KEY_PREFIX}{session_id}"
