"""Affirmations API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from .. import affirmations
from ..schemas import (
    AffirmationCreate,
    AffirmationFilters,
    AffirmationPatch,
    AffirmationResponse,
    CreatedResponse,
)
from ..store import Store
from .dependencies import get_store

router = APIRouter()


@router.get("", response_model=List[AffirmationResponse])
async def list_affirmations(
    test_type: Optional[int] = Query(
        default=None, description="Test tier: 1 (short) or 2 (long)"
    ),
    axis: Optional[str] = Query(default=None, description="Ideological axis"),
    criterion: Optional[str] = Query(default=None, description="Criterion"),
    store: Store = Depends(get_store),
):
    """
    List affirmations matching every supplied filter.

    Ordered by test type, criterion and question text.
    """
    filters = AffirmationFilters(test_type=test_type, axis=axis, criterion=criterion)
    return affirmations.list_affirmations(store, filters)


@router.get("/{affirmation_id}", response_model=AffirmationResponse)
async def get_affirmation(affirmation_id: UUID, store: Store = Depends(get_store)):
    return affirmations.get_affirmation(store, affirmation_id)


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_affirmation(
    fields: AffirmationCreate, store: Store = Depends(get_store)
):
    affirmation_id = affirmations.create_affirmation(store, fields)
    return CreatedResponse(id=affirmation_id)


@router.patch("/{affirmation_id}", response_model=AffirmationResponse)
async def update_affirmation(
    affirmation_id: UUID,
    patch: AffirmationPatch,
    store: Store = Depends(get_store),
):
    """Update the supplied fields; unchanged values are not written."""
    return affirmations.update_affirmation(store, affirmation_id, patch)


@router.delete("/{affirmation_id}", response_model=AffirmationResponse)
async def remove_affirmation(affirmation_id: UUID, store: Store = Depends(get_store)):
    """Delete an affirmation and return what it held."""
    return affirmations.remove_affirmation(store, affirmation_id)
