"""Tests for the SoCraTes reservation ledger."""

from datetime import UTC, datetime, timedelta

import pytest

from community_portal.services.reservations import ReservationLedger
from tests.conftest import FakeClock


def test_reservation_is_valid_until_it_expires(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)

    assert ledger.reserve("abc", 2) is True
    assert ledger.has_valid_reservation_for("abc") is True
    record = ledger.record_for("SessionID:abc")
    assert record is not None
    assert record.duration == 2
    assert record.expires_at == clock.now + timedelta(minutes=30)

    clock.advance(timedelta(minutes=31))
    assert ledger.has_valid_reservation_for("abc") is False

    reloaded = ReservationLedger.load(ledger.to_state(), clock=clock)
    assert reloaded.record_for("SessionID:abc") is None


def test_reserve_rejects_duplicate_session(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    ledger.reserve("abc", 2)
    clock.advance(timedelta(minutes=5))

    assert ledger.reserve("abc", 4) is False
    record = ledger.record_for("SessionID:abc")
    assert record is not None
    assert record.duration == 2


def test_register_migrates_reservation_to_member(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    ledger.reserve("abc", 2)

    assert ledger.register("member1", "abc", 3) is True

    record = ledger.record_for("member1")
    assert record is not None
    assert record.duration == 3
    assert record.expires_at is None
    assert ledger.record_for("SessionID:abc") is None
    assert ledger.registered_member_ids() == ["member1"]


def test_register_without_reservation(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    assert ledger.register("member1", "abc", 3) is True
    assert ledger.is_registered("member1") is True


def test_duplicate_registration_still_drops_reservation(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    assert ledger.register("member1", "abc", 2) is True
    ledger.reserve("xyz", 4)

    assert ledger.register("member1", "xyz", 5) is False

    assert ledger.record_for("SessionID:xyz") is None
    record = ledger.record_for("member1")
    assert record is not None
    assert record.duration == 2


def test_registrations_never_expire(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    ledger.register("member1", "abc", 2)
    clock.advance(timedelta(days=365))

    reloaded = ReservationLedger.load(ledger.to_state(), clock=clock)
    assert reloaded.is_registered("member1") is True


def test_load_sweeps_only_expired_reservations(clock: FakeClock) -> None:
    state = {
        "_registeredMembers": [
            {
                "memberId": "SessionID:old",
                "duration": 1,
                "expiresAt": "2026-10-19T11:00:00+00:00",
            },
            {
                "memberId": "SessionID:new",
                "duration": 2,
                "expiresAt": "2026-10-19T12:10:00+00:00",
            },
            {"memberId": "member1", "duration": 3},
        ],
        "limit": 120,
    }

    ledger = ReservationLedger.load(state, resource_name="single", clock=clock)

    assert ledger.resource_name == "single"
    assert ledger.registered_member_ids() == ["SessionID:new", "member1"]
    assert ledger.has_valid_reservation_for("new") is True
    assert ledger.to_state()["limit"] == 120


def test_naive_timestamps_are_read_as_utc(clock: FakeClock) -> None:
    state = {
        "_registeredMembers": [
            {"memberId": "SessionID:abc", "expiresAt": "2026-10-19T12:20:00"},
        ]
    }
    ledger = ReservationLedger.load(state, clock=clock)
    record = ledger.record_for("SessionID:abc")
    assert record is not None
    assert record.expires_at == datetime(2026, 10, 19, 12, 20, tzinfo=UTC)


def test_state_round_trip_keeps_order(clock: FakeClock) -> None:
    ledger = ReservationLedger.load({"_registeredMembers": None}, clock=clock)
    ledger.register("member2", "s1", 1)
    ledger.reserve("s2", 2)
    ledger.register("member1", "s3", 3)

    state = ledger.to_state()

    assert [record["memberId"] for record in state["_registeredMembers"]] == [
        "member2",
        "SessionID:s2",
        "member1",
    ]
    assert ReservationLedger.load(state, clock=clock).to_state() == state


def test_add_member_id_guards_duplicates(clock: FakeClock) -> None:
    ledger = ReservationLedger.load(None, clock=clock)
    assert ledger.add_member_id("member1") is True
    assert ledger.add_member_id("member1") is False


def test_missing_reservation_is_not_valid(clock: FakeClock) -> None:
    ledger = ReservationLedger.load({}, clock=clock)
    assert ledger.has_valid_reservation_for("abc") is False
    assert ledger.record_for("SessionID:abc") is None


def test_malformed_state_is_rejected(clock: FakeClock) -> None:
    with pytest.raises(ValueError):
        ReservationLedger.load({"_registeredMembers": {"memberId": "x"}}, clock=clock)
    with pytest.raises(ValueError):
        ReservationLedger.load({"_registeredMembers": [{"duration": 1}]}, clock=clock)


def test_records_are_not_constructor_arguments(clock: FakeClock) -> None:
    with pytest.raises(TypeError):
        ReservationLedger(_records={})  # type: ignore[call-arg]
    ledger = ReservationLedger(resource_name="single", clock=clock)
    assert ledger.registered_member_ids() == []
    assert ledger.to_state() == {"_registeredMembers": []}
