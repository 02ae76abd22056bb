"""Query and mutation handlers for closeness test affirmations."""

import logging
from typing import List, Optional
from uuid import UUID

from .errors import InvalidArgument, NotFound
from .models import VALID_TEST_TYPES, Affirmation
from .schemas import (
    AffirmationCreate,
    AffirmationFilters,
    AffirmationPatch,
    AffirmationResponse,
)
from .store import Store

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "La afirmación solicitada no existe"


def validate_test_type(test_type: Optional[int]) -> None:
    """Raise InvalidArgument unless test_type is None or a supported test."""
    if test_type is not None and test_type not in VALID_TEST_TYPES:
        logger.warning(f"Rejected unsupported test type: {test_type}")
        raise InvalidArgument(f"Tipo de test no soportado: {test_type}")


def sort_affirmations(items: List[Affirmation]) -> List[Affirmation]:
    """Order by test type, then criterion, then question text (codepoint order)."""
    return sorted(
        items, key=lambda item: (item.test_type, item.criterion, item.question_text)
    )


def filter_affirmations(
    items: List[Affirmation], filters: AffirmationFilters
) -> List[Affirmation]:
    """Keep the affirmations matching every supplied filter."""
    return [
        item
        for item in items
        if (filters.test_type is None or item.test_type == filters.test_type)
        and (not filters.axis or item.axis == filters.axis)
        and (not filters.criterion or item.criterion == filters.criterion)
    ]


def _fetch_candidates(store: Store, filters: AffirmationFilters) -> List[Affirmation]:
    # Most selective index first; the remaining filters run in memory
    if filters.criterion:
        return store.query_by_index(Affirmation, "criterion", filters.criterion)
    if filters.axis:
        return store.query_by_index(Affirmation, "axis", filters.axis)
    if filters.test_type is not None:
        return store.query_by_index(Affirmation, "test_type", filters.test_type)
    return store.query_all(Affirmation)


def list_affirmations(
    store: Store, filters: Optional[AffirmationFilters] = None
) -> List[AffirmationResponse]:
    """List affirmations matching all supplied filters, in a deterministic order.

    Raises:
        InvalidArgument: If filters.test_type is not a supported test
    """
    filters = filters or AffirmationFilters()
    validate_test_type(filters.test_type)

    rows = filter_affirmations(_fetch_candidates(store, filters), filters)
    return [AffirmationResponse.model_validate(row) for row in sort_affirmations(rows)]


def _get_existing(store: Store, affirmation_id: UUID) -> Affirmation:
    affirmation = store.get_by_id(Affirmation, affirmation_id)
    if affirmation is None:
        logger.debug(f"Affirmation {affirmation_id} not found")
        raise NotFound(NOT_FOUND_MESSAGE)
    return affirmation


def get_affirmation(store: Store, affirmation_id: UUID) -> AffirmationResponse:
    """Return one affirmation or raise NotFound."""
    return AffirmationResponse.model_validate(_get_existing(store, affirmation_id))


def create_affirmation(store: Store, fields: AffirmationCreate) -> UUID:
    """Validate and insert a new affirmation, returning its id."""
    validate_test_type(fields.test_type)
    return store.insert(Affirmation, fields.model_dump())


def update_affirmation(
    store: Store, affirmation_id: UUID, patch: AffirmationPatch
) -> AffirmationResponse:
    """Apply the fields of ``patch`` that differ from the stored record.

    Nothing is written when no field changes.

    Raises:
        NotFound: If there is no affirmation with this id
        InvalidArgument: If patch.test_type is not a supported test
    """
    existing = _get_existing(store, affirmation_id)
    validate_test_type(patch.test_type)

    changes = patch.changes_from(existing)
    if not changes:
        return AffirmationResponse.model_validate(existing)

    store.patch(Affirmation, affirmation_id, changes)
    return AffirmationResponse.model_validate(existing).model_copy(update=changes)


def remove_affirmation(store: Store, affirmation_id: UUID) -> AffirmationResponse:
    """Delete an affirmation and return its prior value."""
    existing = _get_existing(store, affirmation_id)
    prior = AffirmationResponse.model_validate(existing)

    store.delete(Affirmation, affirmation_id)
    return prior
