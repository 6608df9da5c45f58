"""Supabase-backed reservation state repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from community_portal.services.registrations import ReservationRepository


@dataclass
class SupabaseReservationRepository(ReservationRepository):
    """Supabase implementation storing one state blob per SoCraTes resource."""

    client: Client

    def load_state(self, resource_name: str) -> dict[str, object] | None:
        """Return the stored state for a resource, if present."""
        response = (
            self.client.table("socrates_resources")
            .select("state_json")
            .eq("resource_name", resource_name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("state_json")

    def save_state(self, resource_name: str, state: dict[str, object]) -> None:
        """Insert or replace the state for a resource."""
        self.client.table("socrates_resources").upsert(
            {
                "resource_name": resource_name,
                "state_json": state,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="resource_name",
        ).execute()
