"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from community_portal.config import Settings
from community_portal.containers import AppContainer
from community_portal.services.registrations import (
    RegistrationService,
    ReservationRepository,
)

SUPERUSER_ID = "superuserID"


@dataclass
class FakeClock:
    """Controllable clock for time-dependent behavior."""

    now: datetime = field(
        default_factory=lambda: datetime(2026, 10, 19, 12, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@dataclass
class InMemoryReservationRepository(ReservationRepository):
    """In-memory reservation state repository for tests."""

    states: dict[str, dict[str, object]] = field(default_factory=dict)
    saves: list[str] = field(default_factory=list)

    def load_state(self, resource_name: str) -> dict[str, object] | None:
        return self.states.get(resource_name)

    def save_state(self, resource_name: str, state: dict[str, object]) -> None:
        self.saves.append(resource_name)
        self.states[resource_name] = state


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        superuser_ids=SUPERUSER_ID,
    )


@pytest.fixture
def reservation_repository() -> InMemoryReservationRepository:
    return InMemoryReservationRepository()


@pytest.fixture
def registration_service(
    reservation_repository: InMemoryReservationRepository, clock: FakeClock
) -> RegistrationService:
    return RegistrationService(repository=reservation_repository, clock=clock)


@pytest.fixture
def container(
    settings: Settings, registration_service: RegistrationService
) -> AppContainer:
    return AppContainer(
        settings=settings,
        superuser_ids=frozenset({SUPERUSER_ID}),
        registration_service=registration_service,
    )
