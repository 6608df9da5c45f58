"""SoCraTes reservation and registration workflow."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from community_portal.domain.reservations import ReservationRecord
from community_portal.services.clock import Clock, utc_now
from community_portal.services.reservations import (
    DEFAULT_RESERVATION_TTL,
    ReservationLedger,
)

_logger = logging.getLogger(__name__)


class ReservationRepository(Protocol):
    """Persistence interface for reservation ledger state."""

    def load_state(self, resource_name: str) -> dict[str, object] | None:
        """Return the stored state for a resource, if present."""

    def save_state(self, resource_name: str, state: dict[str, object]) -> None:
        """Store the state for a resource."""


@dataclass
class RegistrationService:
    """Applies reservation operations to persisted ledgers."""

    repository: ReservationRepository
    clock: Clock = utc_now
    reservation_ttl: timedelta = DEFAULT_RESERVATION_TTL

    def reserve(self, resource_name: str, session_id: str, duration: int) -> bool:
        """Reserve a seat for a session and persist it on success."""
        ledger = self._load(resource_name)
        if not ledger.reserve(session_id, duration):
            _logger.info(
                "Reservation rejected: resource=%s session already holds a seat",
                resource_name,
            )
            return False
        self.repository.save_state(resource_name, ledger.to_state())
        _logger.info("Reservation created: resource=%s", resource_name)
        return True

    def register(
        self, resource_name: str, member_id: str, session_id: str, duration: int
    ) -> bool:
        """Register a member, consuming the session's reservation."""
        ledger = self._load(resource_name)
        registered = ledger.register(member_id, session_id, duration)
        # The session's reservation is gone either way.
        self.repository.save_state(resource_name, ledger.to_state())
        if registered:
            _logger.info(
                "Registration stored: resource=%s member=%s", resource_name, member_id
            )
        else:
            _logger.info(
                "Registration rejected: resource=%s member=%s already registered",
                resource_name,
                member_id,
            )
        return registered

    def has_valid_reservation(self, resource_name: str, session_id: str) -> bool:
        return self._load(resource_name).has_valid_reservation_for(session_id)

    def registration_for(
        self, resource_name: str, member_id: str
    ) -> ReservationRecord | None:
        return self._load(resource_name).record_for(member_id)

    def _load(self, resource_name: str) -> ReservationLedger:
        return ReservationLedger.load(
            self.repository.load_state(resource_name),
            resource_name=resource_name,
            clock=self.clock,
            reservation_ttl=self.reservation_ttl,
        )
