"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap the data store,
change the adapter instantiation here; nothing else in the codebase changes.
"""

from functools import lru_cache

from fastapi import Depends
from supabase import Client, create_client

from hirrd.adapters.supabase_adapter import SupabaseAdapter
from hirrd.config import settings
from hirrd.ports.database_port import DatabasePort


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_supabase_client() -> Client:
    # Use service role key — bypasses RLS for server-side operations
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


@lru_cache(maxsize=1)
def _get_supabase_adapter() -> SupabaseAdapter:
    return SupabaseAdapter(client=_get_supabase_client())


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_db() -> DatabasePort:
    """Inject the database adapter."""
    return _get_supabase_adapter()


# ── Domain Services ───────────────────────────────────────────

from hirrd.services.job_service import JobService  # noqa: E402
from hirrd.services.landing_service import LandingService  # noqa: E402


def get_job_service(db: DatabasePort = Depends(get_db)) -> JobService:
    """Injects the DB adapter into the job service."""
    return JobService(db=db)


def get_landing_service(db: DatabasePort = Depends(get_db)) -> LandingService:
    """Injects the DB adapter into the landing service."""
    return LandingService(db=db)
