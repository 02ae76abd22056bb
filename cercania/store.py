"""Record store used by the query and mutation handlers.

Wraps a SQLAlchemy session behind the small set of capabilities the
handlers need: full scans, equality lookups on an indexed column, lookups by
id, single-record insert/patch/delete and file URL resolution.
"""

import logging
from typing import Any, Dict, List, Optional, Type
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Base
from .storage import resolve_file_url

logger = logging.getLogger(__name__)


class Store:
    """Single-record operations against the database.

    Every write commits immediately; there are no multi-record transactions.
    """

    def __init__(self, session: Session):
        self.session = session

    def query_all(self, model: Type[Base]) -> List[Base]:
        return list(self.session.scalars(select(model)).all())

    def query_by_index(self, model: Type[Base], column: str, value: Any) -> List[Base]:
        """Equality lookup on an indexed column."""
        table_column = model.__table__.c[column]
        if not (table_column.index or table_column.unique):
            raise ValueError(f"{model.__tablename__}.{column} is not indexed")
        query = select(model).where(table_column == value)
        return list(self.session.scalars(query).all())

    def get_by_id(self, model: Type[Base], record_id: UUID) -> Optional[Base]:
        return self.session.get(model, record_id)

    def insert(self, model: Type[Base], fields: Dict[str, Any]) -> UUID:
        record = model(**fields)
        self.session.add(record)
        self.session.commit()
        logger.info(f"Inserted {model.__tablename__} {record.id}")
        return record.id

    def patch(self, model: Type[Base], record_id: UUID, fields: Dict[str, Any]) -> None:
        record = self.session.get(model, record_id)
        if record is None:
            raise LookupError(f"{model.__tablename__} {record_id} does not exist")
        for name, value in fields.items():
            setattr(record, name, value)
        self.session.commit()
        logger.info(f"Patched {model.__tablename__} {record_id}: {sorted(fields)}")

    def delete(self, model: Type[Base], record_id: UUID) -> None:
        record = self.session.get(model, record_id)
        if record is None:
            raise LookupError(f"{model.__tablename__} {record_id} does not exist")
        self.session.delete(record)
        self.session.commit()
        logger.info(f"Deleted {model.__tablename__} {record_id}")

    def resolve_file_url(self, file_ref: Optional[str]) -> Optional[str]:
        return resolve_file_url(file_ref)
