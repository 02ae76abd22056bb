"""Read handlers for parties, party profiles and party positions."""

import logging
from typing import List, Optional

from .models import Party, PartyPosition, PartyProfile
from .schemas import PartyPositionResponse, PartyProfileResponse, PartyResponse
from .store import Store
from .text import collation_key

logger = logging.getLogger(__name__)


def _with_logo_url(store: Store, profile: PartyProfile) -> PartyProfileResponse:
    response = PartyProfileResponse.model_validate(profile)
    response.logo_url = store.resolve_file_url(profile.logo)
    return response


def list_parties(store: Store) -> List[PartyResponse]:
    """All parties, sorted by name."""
    rows = sorted(store.query_all(Party), key=lambda row: collation_key(row.name))
    return [PartyResponse.model_validate(row) for row in rows]


def list_party_profiles(store: Store) -> List[PartyProfileResponse]:
    """All party profiles sorted by display name, with logo URLs resolved."""
    rows = sorted(
        store.query_all(PartyProfile), key=lambda row: collation_key(row.display_name)
    )
    return [_with_logo_url(store, row) for row in rows]


def get_party_profile(store: Store, party_key: str) -> Optional[PartyProfileResponse]:
    """Look up a profile by its exact party key.

    Returns None when there is no such profile; callers decide how to
    report it.
    """
    rows = store.query_by_index(PartyProfile, "party_key", party_key)
    if not rows:
        logger.debug(f"No profile for party key {party_key!r}")
        return None
    return _with_logo_url(store, rows[0])


def list_party_positions(store: Store) -> List[PartyPositionResponse]:
    """All party positions, sorted by topic."""
    rows = sorted(
        store.query_all(PartyPosition), key=lambda row: collation_key(row.topic)
    )
    return [PartyPositionResponse.model_validate(row) for row in rows]
