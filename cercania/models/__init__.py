"""Cercanía models package - organized by domain."""

from .base import Base, TimestampMixin, UUIDMixin
from .affirmation import VALID_TEST_TYPES, Affirmation
from .party import Party, PartyPosition, PartyProfile

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Closeness test
    "Affirmation",
    "VALID_TEST_TYPES",
    # Parties
    "Party",
    "PartyPosition",
    "PartyProfile",
]
