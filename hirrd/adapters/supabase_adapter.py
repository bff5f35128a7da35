"""
Concrete implementation of DatabasePort using the Supabase Python client.
"""

from typing import Any

from supabase import Client

from hirrd.domain.models import FilterState
from hirrd.ports.database_port import DatabasePort

# Job rows carry the saved-job relation (for the card's save toggle)
# and the company name/logo for display.
_JOB_SELECT = "*, saved: saved_jobs(id), company: companies(name, logo_url)"


class SupabaseAdapter(DatabasePort):
    """All database I/O goes through the Supabase REST client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    # ── Users ─────────────────────────────────────────────────

    async def get_user(self, user_id: str) -> dict[str, Any] | None:
        result = (
            self._client.table("users")
            .select("*")
            .eq("id", user_id)
            .maybe_single()
            .execute()
        )
        return result.data if result else None

    # ── Jobs ──────────────────────────────────────────────────

    async def list_jobs(self, filters: FilterState) -> list[dict[str, Any]]:
        query = self._client.table("jobs").select(_JOB_SELECT)

        # Empty string = filter not applied
        if filters.location:
            query = query.eq("location", filters.location)
        if filters.company_id:
            query = query.eq("company_id", filters.company_id)
        if filters.search_query:
            query = query.ilike("title", f"%{filters.search_query}%")

        result = query.execute()
        return result.data or []

    # ── Companies ─────────────────────────────────────────────

    async def list_companies(self) -> list[dict[str, Any]]:
        result = self._client.table("companies").select("*").execute()
        return result.data or []
