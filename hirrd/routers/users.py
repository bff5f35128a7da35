"""
User endpoints — thin HTTP layer, delegates all logic to services.
"""

from fastapi import APIRouter, Depends

from hirrd.domain.models import HeaderView, UserProfile
from hirrd.services.auth_service import get_current_user
from hirrd.services.navigation_service import build_header

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me/header", response_model=HeaderView)
async def get_my_header(
    current_user: UserProfile = Depends(get_current_user),
):
    """Header actions and menu links for the authenticated user."""
    return build_header(current_user)
