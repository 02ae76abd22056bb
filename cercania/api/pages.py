"""Page data endpoints, one per site page."""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import pages
from ..database import get_session_factory
from ..schemas import ClosenessTestPage, PositionsPage, ProfilePage, ProfilesPage

router = APIRouter()


@router.get("/closeness-test", response_model=ClosenessTestPage)
async def closeness_test_page(
    test_type: Optional[int] = Query(
        default=None, description="Test tier: 1 (short) or 2 (long)"
    ),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    return await pages.load_closeness_test_page(session_factory, test_type)


@router.get("/profiles", response_model=ProfilesPage)
async def profiles_page(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    return await pages.load_profiles_page(session_factory)


@router.get("/profiles/{party_key}", response_model=ProfilePage)
async def profile_page(
    party_key: str,
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    return await pages.load_profile_page(session_factory, party_key)


@router.get("/positions", response_model=PositionsPage)
async def positions_page(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    return await pages.load_positions_page(session_factory)
