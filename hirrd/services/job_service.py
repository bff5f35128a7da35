"""
Job service — read access to job listings and company options.
Single Responsibility: only handles job data operations.

`list_jobs` and `list_companies` are the fetch collaborators handed to the
listing controller.
"""

import logging

from hirrd.domain.models import Company, FilterState, Job, JobPage
from hirrd.listing.pagination import clamp_page, page_slice, total_pages
from hirrd.ports.database_port import DatabasePort

logger = logging.getLogger(__name__)


class JobService:
    """Handles job and company reads."""

    def __init__(self, db: DatabasePort) -> None:
        self._db = db

    async def list_jobs(self, filters: FilterState) -> list[Job]:
        """All jobs matching the filters."""
        rows = await self._db.list_jobs(filters)
        logger.info("Fetched %d jobs for %s", len(rows), filters)
        return [Job(**row) for row in rows]

    async def list_companies(self) -> list[Company]:
        """All companies, for the company filter options."""
        rows = await self._db.list_companies()
        return [Company(**row) for row in rows]

    async def get_page(
        self, filters: FilterState, page: int, items_per_page: int
    ) -> JobPage:
        """One page of the filtered result set; out-of-range pages are clamped."""
        jobs = await self.list_jobs(filters)
        pages = total_pages(len(jobs), items_per_page)
        current = clamp_page(page, pages)
        return JobPage(
            items=page_slice(jobs, current, items_per_page),
            total=len(jobs),
            current_page=current,
            total_pages=pages,
            items_per_page=items_per_page,
        )
