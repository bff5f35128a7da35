from __future__ import annotations

import asyncio
import os
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Callable

import jwt
import pytest

# Settings are read at import time; provide what the app needs before any
# hirrd module is imported by a test.
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("LISTING_DEBOUNCE_MS", "50")

from hirrd.domain.models import FilterState, Job  # noqa: E402


def job_rows(count: int, start: int = 1) -> list[dict[str, Any]]:
    return [
        {
            "id": i,
            "title": f"Engineer {i}",
            "location": "Karnataka",
            "company_id": 1,
            "company": {"name": "Acme", "logo_url": None},
            "saved": [{"id": 99}] if i % 2 == 0 else [],
        }
        for i in range(start, start + count)
    ]


def make_jobs(count: int) -> list[Job]:
    return [Job(**row) for row in job_rows(count)]


class FakeJobSource:
    """
    Async job-fetch collaborator.

    `respond(filters)` decides the result; `gates` lets a test hold a specific
    call (by 1-based call number) until its event is set.
    """

    def __init__(
        self,
        jobs: list[Job] | None = None,
        respond: Callable[[FilterState], list[Job]] | None = None,
    ) -> None:
        self.jobs = list(jobs or [])
        self.respond = respond
        self.error: Exception | None = None
        self.calls: list[FilterState] = []
        self.gates: dict[int, asyncio.Event] = {}

    async def __call__(self, filters: FilterState) -> list[Job]:
        self.calls.append(filters)
        call_no = len(self.calls)
        error = self.error
        result = self.respond(filters) if self.respond else list(self.jobs)
        gate = self.gates.get(call_no)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)
        if error is not None:
            raise error
        return result


class FakeCompanySource:
    def __init__(self, companies: list[dict[str, Any]] | None = None) -> None:
        self.companies = companies if companies is not None else [
            {"id": 1, "name": "Acme"},
            {"id": 2, "name": "Globex"},
        ]
        self.calls = 0

    async def __call__(self) -> list[dict[str, Any]]:
        self.calls += 1
        await asyncio.sleep(0)
        return list(self.companies)


class FakeDB:
    """In-memory stand-in for the Supabase adapter."""

    def __init__(
        self,
        jobs: list[dict[str, Any]] | None = None,
        companies: list[dict[str, Any]] | None = None,
        users: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.jobs = jobs if jobs is not None else job_rows(14)
        self.companies = companies if companies is not None else [
            {"id": 1, "name": "Acme", "logo_url": "https://cdn.example/acme.svg"},
        ]
        self.users = users if users is not None else {
            "user-1": {"id": "user-1", "email": "cand@example.com", "role": "candidate"},
        }
        self.job_queries: list[FilterState] = []

    async def get_user(self, user_id: str) -> dict[str, Any] | None:
        return self.users.get(user_id)

    async def list_jobs(self, filters: FilterState) -> list[dict[str, Any]]:
        self.job_queries.append(filters)
        return list(self.jobs)

    async def list_companies(self) -> list[dict[str, Any]]:
        return list(self.companies)


def make_token(sub: str | None = "user-1", expires_in: timedelta = timedelta(hours=1)) -> str:
    payload: dict[str, Any] = {"exp": datetime.now(timezone.utc) + expires_in}
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, "test-secret", algorithm="HS256")


async def settle(ticks: int = 10) -> None:
    """Let pending fetch tasks and call_soon callbacks run."""
    for _ in range(ticks):
        await asyncio.sleep(0)


@pytest.fixture
def fakes() -> SimpleNamespace:
    return SimpleNamespace(
        JobSource=FakeJobSource,
        CompanySource=FakeCompanySource,
        DB=FakeDB,
        job_rows=job_rows,
        make_jobs=make_jobs,
        make_token=make_token,
        settle=settle,
    )
