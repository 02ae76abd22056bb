"""Closeness test models: Affirmation."""

from sqlalchemy import Column, Integer, String, Text

from .base import Base, TimestampMixin, UUIDMixin

# 1 = short test, 2 = long test
VALID_TEST_TYPES = frozenset({1, 2})


class Affirmation(Base, UUIDMixin, TimestampMixin):
    """A statement of the closeness test, tagged with its axis and criterion.

    The long test (2) is expected to contain every statement of the short
    test (1); nothing here enforces it.
    """

    __tablename__ = "affirmations"

    test_type = Column(Integer, nullable=False, index=True)
    axis = Column(String, nullable=False, index=True)
    criterion = Column(String, nullable=False, index=True)
    question_text = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Affirmation {self.id} n={self.test_type} {self.criterion!r}>"
