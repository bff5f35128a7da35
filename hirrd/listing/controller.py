"""
Job-listing controller — search, filters and pagination for one page session.

Flow:
  UI events → debounced search / filter mutators → FilterStore
  → one jobs fetch per published change (only while the session is ready)
  → page count derived from the result → page slice rendered.

Page changes never touch the filters and never refetch: pagination is done
client-side over the full result set.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Generic, Iterable, Sequence, TypeVar

from hirrd.domain.enums import FetchStatus
from hirrd.domain.models import FilterState, ListingView, PageState
from hirrd.listing.debounce import Debouncer
from hirrd.listing.errors import ListingClosedError, NotReadyError
from hirrd.listing.fetch import AsyncFetch, FetchState
from hirrd.listing.filters import FilterStore
from hirrd.listing.pagination import build_pagination, page_slice, total_pages
from hirrd.listing.readiness import ReadinessGate

logger = logging.getLogger(__name__)

JobT = TypeVar("JobT")
CompanyT = TypeVar("CompanyT")

JOBS_ERROR_MESSAGE = "Error loading jobs. Please try again."


class ListingController(Generic[JobT, CompanyT]):
    """
    Owns FilterState and PageState for one listing session and observes the
    jobs and companies fetch states.

    Args:
        fetch_jobs: `(FilterState) -> awaitable list of jobs`.
        fetch_companies: `() -> awaitable list of companies`, called once.
        readiness: gate that must hold before any fetch is issued.
        on_change: called with a fresh ListingView whenever state changes.
        on_scroll: scroll-to-top side effect for successful page changes.
            May be sync or async; never awaited by the caller, and its
            failures are ignored.
    """

    def __init__(
        self,
        fetch_jobs: Callable[[FilterState], Awaitable[Sequence[JobT]]],
        fetch_companies: Callable[[], Awaitable[Sequence[CompanyT]]],
        readiness: ReadinessGate,
        *,
        items_per_page: int = 6,
        debounce_seconds: float = 0.5,
        locations: Iterable[str] = (),
        on_change: Callable[[ListingView], None] | None = None,
        on_scroll: Callable[[], Any] | None = None,
    ) -> None:
        self._page = PageState(items_per_page=items_per_page)
        self._filters = FilterStore(on_mutate=self._reset_page)
        self._jobs: AsyncFetch[JobT] = AsyncFetch(
            fetch_jobs, name="jobs", on_settle=self._on_jobs_settled
        )
        self._companies: AsyncFetch[CompanyT] = AsyncFetch(
            fetch_companies, name="companies", on_settle=self._on_companies_settled
        )
        self._readiness = readiness
        self._locations = list(locations)
        self._on_change = on_change
        self._on_scroll = on_scroll

        self._started = False
        self._closed = False
        self._companies_requested = False
        self._page_change_pending = False

        # Built once for the controller's lifetime so bursts coalesce.
        self.search = Debouncer(self.set_search, debounce_seconds)

        self._unsubscribe_filters = self._filters.subscribe(self._on_filters_changed)
        self._unsubscribe_ready = self._readiness.subscribe(self._on_readiness_changed)

    # ── Read-only state ───────────────────────────────────────

    @property
    def filters(self) -> FilterState:
        return self._filters.state

    @property
    def current_page(self) -> int:
        return self._page.current_page

    @property
    def total_pages(self) -> int:
        return self._page.total_pages

    @property
    def items_per_page(self) -> int:
        return self._page.items_per_page

    @property
    def jobs_state(self) -> FetchState[JobT]:
        return self._jobs.state

    @property
    def companies_state(self) -> FetchState[CompanyT]:
        return self._companies.state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def page_items(self) -> list[JobT]:
        data = self._jobs.state.data or []
        return page_slice(data, self._page.current_page, self._page.items_per_page)

    @property
    def display_loading(self) -> bool:
        """True while a page change waits for the jobs fetch to settle."""
        return self._page_change_pending and self._jobs.state.loading

    # ── Lifecycle ─────────────────────────────────────────────

    def start(self) -> None:
        """Mount the controller; fetches immediately if already ready."""
        self._ensure_open()
        if self._started:
            return
        self._started = True
        if self._readiness.is_ready:
            self._on_ready()
        self._notify()

    async def close(self) -> None:
        """Tear down: no timer fires and no state changes afterwards."""
        if self._closed:
            return
        self._closed = True
        self.search.close()
        self._unsubscribe_filters()
        self._unsubscribe_ready()
        # Both sources stop accepting results before anything is awaited
        pending = self._jobs.cancel() + self._companies.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        logger.debug("Listing controller closed")

    # ── Filters ───────────────────────────────────────────────

    def set_search(self, text: str) -> None:
        self._ensure_open()
        self._filters.set_search(text)
        self._notify()

    def submit_search(self, text: str) -> None:
        """Apply the search text now, dropping any pending debounced value."""
        self._ensure_open()
        self.search.cancel()
        self.set_search(text)

    def set_location(self, value: str) -> None:
        self._ensure_open()
        self._filters.set_location(value)
        self._notify()

    def set_company(self, company_id: str) -> None:
        self._ensure_open()
        self._filters.set_company(company_id)
        self._notify()

    def clear_all(self) -> None:
        self._ensure_open()
        self.search.cancel()
        self._filters.clear_all()
        self._notify()

    def retry(self) -> None:
        """Re-issue the jobs fetch with the current filters."""
        self._ensure_open()
        if not self._readiness.is_ready:
            raise NotReadyError("Session is not ready; jobs cannot be fetched yet")
        self._fetch_jobs()
        self._notify()

    # ── Pagination ────────────────────────────────────────────

    def go_to_page(self, page: int) -> bool:
        """Move to `page`; returns False (no-op) when it is out of range."""
        self._ensure_open()
        if page < 1 or page > self._page.total_pages:
            logger.debug(
                "Ignoring page %d (valid range 1..%d)", page, self._page.total_pages
            )
            return False

        self._page_change_pending = True
        self._page.current_page = page
        self._notify()
        self._scroll_to_top()
        return True

    # ── Rendering ─────────────────────────────────────────────

    def view(self) -> ListingView:
        """Build a snapshot for rendering; settles the page-change loader."""
        jobs = self._jobs.state
        companies = self._companies.state

        display_loading = self.display_loading
        if self._page_change_pending and not jobs.loading:
            self._page_change_pending = False

        data = jobs.data or []
        return ListingView(
            ready=self._readiness.is_ready,
            filters=self._filters.state,
            jobs_status=jobs.status,
            loading_jobs=jobs.loading,
            loading_companies=companies.loading,
            display_loading=display_loading,
            error=JOBS_ERROR_MESSAGE if jobs.status is FetchStatus.FAILURE else None,
            empty=jobs.status is FetchStatus.SUCCESS and not data,
            total_results=len(data),
            jobs=self.page_items,
            companies=companies.data or [],
            locations=self._locations,
            pagination=build_pagination(
                self._page.current_page, self._page.total_pages
            ),
        )

    # ── Internals ─────────────────────────────────────────────

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListingClosedError("Listing controller has been closed")

    def _reset_page(self) -> None:
        self._page.current_page = 1

    def _fetch_jobs(self) -> None:
        self._jobs.trigger(self._filters.state)

    def _on_ready(self) -> None:
        self._fetch_jobs()
        if not self._companies_requested:
            self._companies_requested = True
            self._companies.trigger()

    def _on_filters_changed(self, filters: FilterState) -> None:
        if self._started and self._readiness.is_ready:
            self._fetch_jobs()

    def _on_readiness_changed(self, ready: bool) -> None:
        if self._closed or not self._started:
            return
        if ready:
            self._on_ready()
        self._notify()

    def _on_jobs_settled(self, state: FetchState[JobT]) -> None:
        if state.status is FetchStatus.SUCCESS:
            pages = total_pages(len(state.data or []), self._page.items_per_page)
            self._page.total_pages = pages
            # A narrower filter can leave the current page past the end.
            if self._page.current_page > pages:
                logger.debug(
                    "Clamping page %d to %d", self._page.current_page, pages
                )
                self._page.current_page = pages
        self._notify()

    def _on_companies_settled(self, state: FetchState[CompanyT]) -> None:
        self._notify()

    def _notify(self) -> None:
        if self._closed or not self._started or self._on_change is None:
            return
        try:
            self._on_change(self.view())
        except Exception:
            logger.exception("Listing view listener failed")

    def _scroll_to_top(self) -> None:
        if self._on_scroll is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, skipping scroll to top")
            return
        loop.call_soon(self._run_scroll)

    def _run_scroll(self) -> None:
        if self._closed or self._on_scroll is None:
            return
        try:
            result = self._on_scroll()
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                task.add_done_callback(_ignore_scroll_failure)
        except Exception as exc:
            logger.debug("Scroll to top failed: %s", exc)


def _ignore_scroll_failure(task: "asyncio.Future[Any]") -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.debug("Scroll to top failed: %s", task.exception())
