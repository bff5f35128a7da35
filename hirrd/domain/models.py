"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from hirrd.domain.enums import FetchStatus, UserRole


# ── User ──────────────────────────────────────────────────────


class UserProfile(BaseModel):
    """Row from the users table, as resolved from a session token."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email: str | None = None
    full_name: str | None = None
    role: str | None = None


class NavLink(BaseModel):
    label: str
    href: str
    icon: str | None = None


class HeaderView(BaseModel):
    """Response for GET /users/me/header."""

    role: UserRole | None = None
    actions: list[NavLink] = Field(default_factory=list)
    menu: list[NavLink] = Field(default_factory=list)


# ── Company ───────────────────────────────────────────────────


class Company(BaseModel):
    """Company option for the company filter."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str
    logo_url: str | None = None


class CompanyRef(BaseModel):
    """Company fields embedded in a job row by the Supabase join."""

    model_config = ConfigDict(extra="ignore")

    name: str
    logo_url: str | None = None


# ── Job ───────────────────────────────────────────────────────


class Job(BaseModel):
    """A job listing as returned by the job-fetch collaborator."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str
    title: str
    description: str | None = None
    location: str | None = None
    requirements: str | None = None
    company_id: int | str | None = None
    recruiter_id: str | None = None
    is_open: bool = Field(True, alias="isOpen")
    company: CompanyRef | None = None
    saved: list[dict[str, Any]] = Field(default_factory=list, exclude=True)
    created_at: datetime | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_saved(self) -> bool:
        """Initial state of the job card's save toggle."""
        return len(self.saved) > 0


class JobPage(BaseModel):
    """Response for GET /jobs — one page of a filtered result set."""

    items: list[Job]
    total: int
    current_page: int
    total_pages: int
    items_per_page: int


# ── Landing ───────────────────────────────────────────────────


class AudienceCard(BaseModel):
    title: str
    description: str


class FaqEntry(BaseModel):
    question: str
    answer: str


class LandingView(BaseModel):
    """Response for GET /landing."""

    headline: str
    tagline: str
    actions: list[NavLink]
    companies: list[Company] = Field(default_factory=list)
    cards: list[AudienceCard] = Field(default_factory=list)
    faq: list[FaqEntry] = Field(default_factory=list)


# ── Listing state ─────────────────────────────────────────────


class FilterState(BaseModel):
    """
    Current search text and categorical filters.
    An empty string means the filter is not applied.
    """

    model_config = ConfigDict(frozen=True)

    search_query: str = ""
    location: str = ""
    company_id: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.search_query or self.location or self.company_id)


class PageState(BaseModel):
    """Client-side pagination over an already fetched result set."""

    model_config = ConfigDict(validate_assignment=True)

    current_page: int = Field(1, ge=1)
    total_pages: int = Field(1, ge=1)
    items_per_page: int = Field(6, ge=1)


class PaginationView(BaseModel):
    """Numbered page controls plus previous/next."""

    current_page: int
    total_pages: int
    pages: list[int]
    has_previous: bool
    has_next: bool
    visible: bool


class ListingView(BaseModel):
    """Everything the job-listing page needs to paint itself."""

    ready: bool
    filters: FilterState
    jobs_status: FetchStatus
    loading_jobs: bool
    loading_companies: bool
    display_loading: bool
    error: str | None = None
    empty: bool = False
    total_results: int = 0
    jobs: list[Job] = Field(default_factory=list)
    companies: list[Company] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    pagination: PaginationView


# ── Listing WebSocket protocol ────────────────────────────────


class AuthEvent(BaseModel):
    type: Literal["auth"]
    token: str


class SearchEvent(BaseModel):
    type: Literal["search"]
    query: str = ""


class SubmitSearchEvent(BaseModel):
    type: Literal["submit_search"]
    query: str = ""


class LocationEvent(BaseModel):
    type: Literal["location"]
    value: str = ""


class CompanyEvent(BaseModel):
    type: Literal["company"]
    value: str = ""


class ClearEvent(BaseModel):
    type: Literal["clear"]


class PageEvent(BaseModel):
    type: Literal["page"]
    page: int


class RetryEvent(BaseModel):
    type: Literal["retry"]


ListingEvent = Annotated[
    Union[
        AuthEvent,
        SearchEvent,
        SubmitSearchEvent,
        LocationEvent,
        CompanyEvent,
        ClearEvent,
        PageEvent,
        RetryEvent,
    ],
    Field(discriminator="type"),
]


class ViewMessage(BaseModel):
    type: Literal["view"] = "view"
    view: ListingView


class ScrollMessage(BaseModel):
    type: Literal["scroll"] = "scroll"
    behavior: str = "smooth"
    block: str = "start"


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    detail: str
