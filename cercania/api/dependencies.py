"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db_session
from ..store import Store


def get_store(db: Session = Depends(get_db_session)) -> Store:
    return Store(db)
