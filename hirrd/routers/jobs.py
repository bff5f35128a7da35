"""
Job endpoints — filtered listing, company options and location options.
All logic delegated to JobService.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hirrd.config import settings
from hirrd.dependencies import get_job_service
from hirrd.domain.locations import get_locations
from hirrd.domain.models import Company, FilterState, JobPage, UserProfile
from hirrd.services.auth_service import get_current_user
from hirrd.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=JobPage)
async def list_jobs(
    search_query: str = Query("", max_length=200),
    location: str = Query(""),
    company_id: str = Query(""),
    page: int = Query(1, ge=1),
    current_user: UserProfile = Depends(get_current_user),
    job_svc: JobService = Depends(get_job_service),
):
    """One page of jobs matching the filters. Empty filters are not applied."""
    filters = FilterState(
        search_query=search_query, location=location, company_id=company_id
    )
    return await job_svc.get_page(
        filters, page=page, items_per_page=settings.listing_items_per_page
    )


@router.get("/companies", response_model=list[Company])
async def list_companies(
    current_user: UserProfile = Depends(get_current_user),
    job_svc: JobService = Depends(get_job_service),
):
    """Company options for the company filter."""
    return await job_svc.list_companies()


@router.get("/locations", response_model=list[str])
async def list_locations():
    """Location options for the location filter."""
    try:
        return get_locations(settings.location_country)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
