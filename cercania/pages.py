"""Page loaders: the data each site page needs, read concurrently.

Each loader issues its independent, read-only queries at the same time,
one session per query on a worker thread, and waits for all of them before
joining the results.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from sqlalchemy.orm import Session

from .affirmations import list_affirmations, validate_test_type
from .aggregation import group_positions_by_topic
from .errors import NotFound
from .matching import match_party
from .parties import (
    get_party_profile,
    list_parties,
    list_party_positions,
    list_party_profiles,
)
from .schemas import (
    AffirmationFilters,
    ClosenessTestPage,
    PositionsPage,
    ProfilePage,
    ProfilesPage,
)
from .store import Store

logger = logging.getLogger(__name__)

PROFILE_NOT_FOUND_MESSAGE = "No encontramos el perfil solicitado."

T = TypeVar("T")

# Thread pool shared by all page loaders
_page_executor = ThreadPoolExecutor(max_workers=8, thread_name_prefix="page-loader")


def _read(session_factory: Callable[[], Session], handler: Callable[[Store], T]) -> T:
    with session_factory() as session:
        return handler(Store(session))


async def _run(session_factory: Callable[[], Session], handler: Callable[[Store], T]) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_page_executor, _read, session_factory, handler)


async def load_closeness_test_page(
    session_factory: Callable[[], Session], test_type: Optional[int] = None
) -> ClosenessTestPage:
    """Affirmations of the requested test, plus every party to plot."""
    validate_test_type(test_type)
    filters = AffirmationFilters(test_type=test_type)

    affirmations, parties = await asyncio.gather(
        _run(session_factory, lambda store: list_affirmations(store, filters)),
        _run(session_factory, list_parties),
    )
    return ClosenessTestPage(affirmations=affirmations, parties=parties)


async def load_profiles_page(session_factory: Callable[[], Session]) -> ProfilesPage:
    """Every party profile."""
    profiles = await _run(session_factory, list_party_profiles)
    return ProfilesPage(profiles=profiles)


async def load_profile_page(
    session_factory: Callable[[], Session], party_key: str
) -> ProfilePage:
    """One profile plus its party's coordinates, when the party is plotted.

    Raises:
        NotFound: If there is no profile for party_key
    """
    profile, parties = await asyncio.gather(
        _run(session_factory, lambda store: get_party_profile(store, party_key)),
        _run(session_factory, list_parties),
    )
    if profile is None:
        raise NotFound(PROFILE_NOT_FOUND_MESSAGE)

    coordinates = match_party(profile, parties, lookup_key=party_key)
    return ProfilePage(profile=profile, coordinates=coordinates)


async def load_positions_page(session_factory: Callable[[], Session]) -> PositionsPage:
    """Party positions grouped by topic, labelled with profile display names."""
    positions, profiles = await asyncio.gather(
        _run(session_factory, list_party_positions),
        _run(session_factory, list_party_profiles),
    )

    display_names = {profile.party_key: profile.display_name for profile in profiles}
    topics = group_positions_by_topic(positions, display_names)
    logger.debug(f"Positions page: {len(positions)} positions in {len(topics)} topics")
    return PositionsPage(topics=topics)
