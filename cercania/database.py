"""Database configuration and session management."""

import logging
import os
from typing import Callable, Iterator, Optional

import pg8000
import sqlalchemy
from dotenv import load_dotenv
from google.cloud.sql.connector import Connector
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

load_dotenv()

logger = logging.getLogger(__name__)

# Global variable for lazy initialization
_engine: Optional[Engine] = None


def _get_local_connection():
    """Create a direct pg8000 connection for local development."""
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = int(os.getenv("DB_PORT", "5432"))
    db_name = os.getenv("DB_NAME", "cercania")
    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "postgres")

    return pg8000.connect(
        host=db_host,
        port=db_port,
        database=db_name,
        user=db_user,
        password=db_password,
    )


def create_engine(pool_size: int = 5, max_overflow: int = 10) -> Engine:
    """Create a new database engine.

    DATABASE_URL takes precedence when set; otherwise connects to Cloud SQL
    when INSTANCE_CONNECTION_NAME is set, or to a local Postgres.

    Args:
        pool_size: Number of connections to maintain in the pool
        max_overflow: Maximum overflow connections allowed

    Returns:
        A new SQLAlchemy Engine instance
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        logger.info("Creating engine from DATABASE_URL")
        if database_url.startswith("sqlite"):
            return sqlalchemy.create_engine(
                database_url, connect_args={"check_same_thread": False}
            )
        return sqlalchemy.create_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )

    use_cloud_sql = bool(os.getenv("INSTANCE_CONNECTION_NAME"))

    if use_cloud_sql:
        # One connector per engine
        connector = Connector(refresh_strategy="lazy")

        instance_connection_name = os.getenv("INSTANCE_CONNECTION_NAME")
        db_iam_user = os.getenv("DB_IAM_USER")
        db_name = os.getenv("DB_NAME")

        if not all([instance_connection_name, db_iam_user, db_name]):
            raise ValueError(
                "Cloud SQL configuration incomplete. Required: "
                "INSTANCE_CONNECTION_NAME, DB_IAM_USER, DB_NAME"
            )

        def get_cloud_sql_connection():
            return connector.connect(
                instance_connection_name,
                "pg8000",
                user=db_iam_user,
                db=db_name,
                enable_iam_auth=True,
            )

        creator = get_cloud_sql_connection
        logger.info(f"Creating Cloud SQL engine for {instance_connection_name}")
    else:
        creator = _get_local_connection

    return sqlalchemy.create_engine(
        "postgresql+pg8000://",
        creator=creator,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=30,
        pool_recycle=3600,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """Get or create the database engine with lazy initialization."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_db_session() -> Iterator[Session]:
    """FastAPI dependency yielding a session that is closed after the request."""
    with Session(get_engine()) as session:
        yield session


def get_session_factory() -> Callable[[], Session]:
    """FastAPI dependency returning a factory for independent sessions.

    Page loaders open one session per concurrent read.
    """
    return sessionmaker(bind=get_engine())
