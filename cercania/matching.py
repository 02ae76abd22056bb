"""Match a party profile to the party that carries its plotted coordinates.

Profiles and parties are maintained separately and may spell the same
party differently (accents, case, surrounding whitespace), so the join runs
on normalized names instead of exact strings.
"""

import logging
import math
from numbers import Real
from typing import Any, Iterable, Optional

from .schemas import Coordinates
from .text import normalize

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def to_coordinates(raw: Any) -> Optional[Coordinates]:
    """Convert a stored [x, y] value, or None unless both are finite numbers."""
    if not isinstance(raw, (list, tuple)) or len(raw) < 2:
        return None
    x, y = raw[0], raw[1]
    if not (_is_number(x) and _is_number(y)):
        return None
    return Coordinates(x=x, y=y)


def match_party(
    profile: Any, parties: Iterable[Any], lookup_key: Optional[str] = None
) -> Optional[Coordinates]:
    """Find the coordinates of the party a profile describes.

    Args:
        profile: Object with ``display_name`` and ``party_key``
        parties: Objects with ``name`` and ``coordinates``, in priority order
        lookup_key: Raw key the caller used to find the profile, if any

    Returns:
        Coordinates of the first party whose normalized name matches, or None
        when nothing matches or the match has no usable coordinates
    """
    candidates = (profile.display_name, profile.party_key, lookup_key)
    keys = {normalize(value) for value in candidates if value}
    keys.discard("")

    for party in parties:
        if party.name and normalize(party.name) in keys:
            coordinates = to_coordinates(party.coordinates)
            if coordinates is None:
                logger.debug(f"Party {party.name!r} has no usable coordinates")
            return coordinates

    logger.debug(f"No party matches profile {profile.party_key!r}")
    return None
