"""Seat reservations and registrations for a SoCraTes resource."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta

from community_portal.domain.reservations import ReservationRecord, session_key
from community_portal.services.clock import Clock, as_utc, utc_now

DEFAULT_RESERVATION_TTL = timedelta(minutes=30)

_RECORDS_KEY = "_registeredMembers"


@dataclass
class ReservationLedger:
    """Records keyed by member id or session key.

    Reservations expire after ``reservation_ttl``; registrations never do.
    Expired reservations are only swept when the ledger is loaded.
    """

    resource_name: str | None = None
    clock: Clock = utc_now
    reservation_ttl: timedelta = DEFAULT_RESERVATION_TTL
    _records: dict[str, ReservationRecord] = field(default_factory=dict, init=False)
    _extra_state: dict[str, object] = field(default_factory=dict, init=False)

    @classmethod
    def load(
        cls,
        raw_state: Mapping[str, object] | None,
        resource_name: str | None = None,
        clock: Clock = utc_now,
        reservation_ttl: timedelta = DEFAULT_RESERVATION_TTL,
    ) -> "ReservationLedger":
        """Build a ledger from persisted state and drop expired reservations."""
        state = dict(raw_state or {})
        raw_records = state.pop(_RECORDS_KEY, None) or []
        if not isinstance(raw_records, list):
            raise ValueError(f"{_RECORDS_KEY} must be a list")
        ledger = cls(
            resource_name=resource_name,
            clock=clock,
            reservation_ttl=reservation_ttl,
        )
        ledger._extra_state = state
        now = clock()
        for raw in raw_records:
            record = _record_from_state(raw)
            if record.expires_at is not None and record.expires_at < now:
                continue
            ledger._records.setdefault(record.member_id, record)
        return ledger

    def to_state(self) -> dict[str, object]:
        """Return the persisted representation of the ledger."""
        state = dict(self._extra_state)
        state[_RECORDS_KEY] = [
            _record_to_state(record) for record in self._records.values()
        ]
        return state

    def record_for(self, key: str) -> ReservationRecord | None:
        return self._records.get(key)

    def registered_member_ids(self) -> list[str]:
        """Return all keys, reservations included, in insertion order."""
        return list(self._records)

    def is_registered(self, member_id: str) -> bool:
        return member_id in self._records

    def add_member_id(self, key: str) -> bool:
        """Insert an empty record unless the key is already present."""
        if key in self._records:
            return False
        self._records[key] = ReservationRecord(member_id=key)
        return True

    def reserve(self, session_id: str, duration: int | None) -> bool:
        """Hold a seat for a session until the reservation TTL elapses."""
        key = session_key(session_id)
        if not self.add_member_id(key):
            return False
        self._records[key] = replace(
            self._records[key],
            duration=duration,
            expires_at=self.clock() + self.reservation_ttl,
        )
        return True

    def register(self, member_id: str, session_id: str, duration: int | None) -> bool:
        """Turn a session's reservation into a registration for a member.

        The session's reservation is dropped even when the member turns out
        to be registered already.
        """
        self._records.pop(session_key(session_id), None)
        if not self.add_member_id(member_id):
            return False
        self._records[member_id] = replace(self._records[member_id], duration=duration)
        return True

    def has_valid_reservation_for(self, session_id: str) -> bool:
        record = self.record_for(session_key(session_id))
        return bool(
            record and record.expires_at and record.expires_at > self.clock()
        )


def _record_from_state(raw: object) -> ReservationRecord:
    if not isinstance(raw, Mapping) or not raw.get("memberId"):
        raise ValueError(f"Invalid reservation record: {raw!r}")
    expires_at = raw.get("expiresAt")
    return ReservationRecord(
        member_id=str(raw["memberId"]),
        duration=raw.get("duration"),
        expires_at=_parse_timestamp(expires_at) if expires_at else None,
    )


def _record_to_state(record: ReservationRecord) -> dict[str, object]:
    payload: dict[str, object] = {"memberId": record.member_id}
    if record.duration is not None:
        payload["duration"] = record.duration
    if record.expires_at is not None:
        payload["expiresAt"] = record.expires_at.isoformat()
    return payload


def _parse_timestamp(value: object) -> datetime:
    if isinstance(value, datetime):
        return as_utc(value)
    return as_utc(datetime.fromisoformat(str(value)))
