"""Party, party profile and party position API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from .. import parties
from ..pages import PROFILE_NOT_FOUND_MESSAGE
from ..schemas import PartyPositionResponse, PartyProfileResponse, PartyResponse
from ..store import Store
from .dependencies import get_store

router = APIRouter()


@router.get("/parties", response_model=List[PartyResponse])
async def list_parties(store: Store = Depends(get_store)):
    return parties.list_parties(store)


@router.get("/party-profiles", response_model=List[PartyProfileResponse])
async def list_party_profiles(store: Store = Depends(get_store)):
    return parties.list_party_profiles(store)


@router.get("/party-profiles/{party_key}", response_model=PartyProfileResponse)
async def get_party_profile(party_key: str, store: Store = Depends(get_store)):
    profile = parties.get_party_profile(store, party_key)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND_MESSAGE
        )
    return profile


@router.get("/party-positions", response_model=List[PartyPositionResponse])
async def list_party_positions(store: Store = Depends(get_store)):
    return parties.list_party_positions(store)
