"""Pydantic schemas shared by the handlers and the API."""

from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_serializer


class UUIDBaseModel(BaseModel):
    """Base model with automatic UUID to string serialization."""

    @field_serializer("id", when_used="always", check_fields=False)
    def serialize_uuid(self, value: UUID) -> str:
        return str(value) if value else None

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Affirmations
# =============================================================================


class AffirmationResponse(UUIDBaseModel):
    """A closeness test statement."""

    id: UUID
    test_type: int
    axis: str
    criterion: str
    question_text: str


class AffirmationFilters(BaseModel):
    """Optional, conjunctive filters for listing affirmations."""

    test_type: Optional[int] = None
    axis: Optional[str] = None
    criterion: Optional[str] = None


class AffirmationCreate(BaseModel):
    """Fields of a new affirmation."""

    test_type: int
    axis: str
    criterion: str
    question_text: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "test_type": 1,
                "axis": "x",
                "criterion": "Mercado",
                "question_text": "El Estado debería fijar el precio de los medicamentos.",
            }
        }
    )


class AffirmationPatch(BaseModel):
    """Partial update of an affirmation. Fields left as None are not changed."""

    test_type: Optional[int] = None
    axis: Optional[str] = None
    criterion: Optional[str] = None
    question_text: Optional[str] = None

    def changes_from(self, existing: Any) -> Dict[str, Any]:
        """Return only the supplied fields whose value differs from ``existing``."""
        changes = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None and value != getattr(existing, name):
                changes[name] = value
        return changes


class CreatedResponse(UUIDBaseModel):
    """Identity of a newly created record."""

    id: UUID


# =============================================================================
# Parties
# =============================================================================


class Coordinates(BaseModel):
    """A party's position on the ideological plane."""

    x: float
    y: float


class PartyResponse(UUIDBaseModel):
    """A party and its raw plotted coordinates."""

    id: UUID
    name: str
    coordinates: Optional[Any] = None


class PartyProfileResponse(UUIDBaseModel):
    """A party profile with its logo resolved to a URL."""

    id: UUID
    party_key: str
    display_name: str
    founded: Optional[str] = None
    ideology: Optional[str] = None
    political_position: Optional[str] = None
    leader: Optional[str] = None
    description: Optional[str] = None
    legal_history: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    logo: Optional[str] = None
    logo_url: Optional[str] = None


class PartyPositionResponse(UUIDBaseModel):
    """A party's stance on a topic."""

    id: UUID
    party_key: str
    topic: str
    stance: Optional[str] = None


class PartyStance(BaseModel):
    """One party's entry inside a topic group."""

    party_key: str
    display_name: str
    stance: Optional[str] = None


class TopicGroup(BaseModel):
    """All party stances on one topic."""

    topic: str
    parties: List[PartyStance]


# =============================================================================
# Pages
# =============================================================================


class ClosenessTestPage(BaseModel):
    affirmations: List[AffirmationResponse]
    parties: List[PartyResponse]


class ProfilesPage(BaseModel):
    profiles: List[PartyProfileResponse]


class ProfilePage(BaseModel):
    profile: PartyProfileResponse
    coordinates: Optional[Coordinates] = None


class PositionsPage(BaseModel):
    topics: List[TopicGroup]
