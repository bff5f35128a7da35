"""
Landing page endpoint. Public, no authentication.
"""

from fastapi import APIRouter, Depends

from hirrd.dependencies import get_landing_service
from hirrd.domain.models import LandingView
from hirrd.services.landing_service import LandingService

router = APIRouter(prefix="/landing", tags=["Landing"])


@router.get("", response_model=LandingView)
async def get_landing(
    landing_svc: LandingService = Depends(get_landing_service),
):
    """Hero, call-to-action links, company carousel, audience cards and FAQ."""
    return await landing_svc.get_landing()
