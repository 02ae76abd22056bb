"""Group party positions by topic for the positions page."""

from typing import Any, Dict, Iterable, List, Mapping

from .schemas import PartyStance, TopicGroup
from .text import collation_key


def _base_key(value: str) -> tuple:
    return collation_key(value, strength="base")


def group_positions_by_topic(
    positions: Iterable[Any], display_names: Mapping[str, str]
) -> List[TopicGroup]:
    """Group positions by topic and attach each party's display name.

    Parties inside a group are ordered by display name and groups by topic,
    both with a case- and accent-insensitive Spanish comparison. Sorting is
    stable, so ties keep their input order.

    Args:
        positions: Objects with ``party_key``, ``topic`` and ``stance``
        display_names: party_key -> display name; missing keys fall back to
            the party_key itself

    Returns:
        One TopicGroup per distinct topic
    """
    grouped: Dict[str, List[PartyStance]] = {}
    for position in positions:
        display_name = display_names.get(position.party_key)
        if display_name is None:
            display_name = position.party_key

        grouped.setdefault(position.topic, []).append(
            PartyStance(
                party_key=position.party_key,
                display_name=display_name,
                stance=position.stance,
            )
        )

    topics = [
        TopicGroup(
            topic=topic,
            parties=sorted(parties, key=lambda entry: _base_key(entry.display_name)),
        )
        for topic, parties in grouped.items()
    ]
    topics.sort(key=lambda group: _base_key(group.topic))
    return topics
