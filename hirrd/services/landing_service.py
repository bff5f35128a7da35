"""
Landing page content: hero, call-to-action links, the company carousel,
audience cards and the FAQ.
"""

import logging

from hirrd.domain.models import AudienceCard, Company, FaqEntry, LandingView, NavLink
from hirrd.ports.company_port import CompanyPort

logger = logging.getLogger(__name__)

HEADLINE = "Find Your Dream Job and get Hirrd"
TAGLINE = "Explore thousands of job listings or find the perfect candidate"

ACTIONS = (
    NavLink(label="Find Jobs", href="/jobs"),
    NavLink(label="Post a job", href="/post-job"),
)

CARDS = (
    AudienceCard(
        title="For Job Seekers",
        description="Search and apply for jobs, track applications, and more.",
    ),
    AudienceCard(
        title="For Employers",
        description="Post jobs, manage applications, and find the best candidates.",
    ),
)

FAQ = (
    FaqEntry(
        question="What is Hirrd?",
        answer=(
            "Hirrd is a job portal that connects job seekers with employers. "
            "Candidates search and apply for jobs; recruiters post openings "
            "and review applicants."
        ),
    ),
    FaqEntry(
        question="How do I search for jobs?",
        answer=(
            "Open the job listing page and filter by title, location or "
            "company. Results update as you type."
        ),
    ),
    FaqEntry(
        question="Can I save jobs to apply later?",
        answer="Yes. Saved jobs appear under Saved Jobs in the header menu.",
    ),
    FaqEntry(
        question="How do I post a job?",
        answer=(
            "Sign in as a recruiter and use Post a Job. Your listing shows up "
            "on the job listing page once it is created."
        ),
    ),
    FaqEntry(
        question="How do I track my applications?",
        answer="Candidates see every application and its status under My Applications.",
    ),
)


class LandingService:
    """Builds the public landing page."""

    def __init__(self, db: CompanyPort) -> None:
        self._db = db

    async def get_landing(self) -> LandingView:
        """Carousel companies are those with a logo to show."""
        rows = await self._db.list_companies()
        companies = [Company(**row) for row in rows if row.get("logo_url")]
        logger.debug("Landing carousel: %d of %d companies", len(companies), len(rows))
        return LandingView(
            headline=HEADLINE,
            tagline=TAGLINE,
            actions=list(ACTIONS),
            companies=companies,
            cards=list(CARDS),
            faq=list(FAQ),
        )
