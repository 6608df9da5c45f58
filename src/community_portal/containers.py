"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from community_portal.adapters.supabase_reservation_repository import (
    SupabaseReservationRepository,
)
from community_portal.config import Settings, parse_superuser_ids
from community_portal.services.registrations import RegistrationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    superuser_ids: frozenset[str]
    registration_service: RegistrationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    registration_service = RegistrationService(
        repository=SupabaseReservationRepository(supabase_client),
        reservation_ttl=timedelta(minutes=resolved_settings.reservation_ttl_minutes),
    )
    return AppContainer(
        settings=resolved_settings,
        superuser_ids=parse_superuser_ids(resolved_settings.superuser_ids),
        registration_service=registration_service,
    )
