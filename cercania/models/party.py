"""Party domain models: Party, PartyProfile, PartyPosition.

The three tables reference a party by a name string only. Party names and
profile keys are edited independently, so joins between them go through
``cercania.matching`` rather than a foreign key.
"""

from sqlalchemy import JSON, Column, String, Text

from .base import Base, TimestampMixin, UUIDMixin


class Party(Base, UUIDMixin, TimestampMixin):
    """A party plotted on the ideological plane."""

    __tablename__ = "parties"

    name = Column(String, nullable=False, index=True)
    # Expected to be [x, y]; parties without a plotted position keep None
    coordinates = Column(JSON, nullable=True)


class PartyProfile(Base, UUIDMixin, TimestampMixin):
    """Descriptive record about a party."""

    __tablename__ = "party_profiles"

    party_key = Column(String, nullable=False, unique=True, index=True)
    display_name = Column(String, nullable=False)

    founded = Column(String)
    ideology = Column(String)
    political_position = Column(String)
    leader = Column(String)
    description = Column(Text)
    legal_history = Column(Text)
    website = Column(String)
    email = Column(String)
    phone = Column(String)
    address = Column(String)

    # Opaque storage reference, resolved to a URL on read
    logo = Column(String)


class PartyPosition(Base, UUIDMixin, TimestampMixin):
    """A party's stance on a topic."""

    __tablename__ = "party_positions"

    party_key = Column(String, nullable=False, index=True)
    topic = Column(String, nullable=False, index=True)
    stance = Column(Text, nullable=True)
