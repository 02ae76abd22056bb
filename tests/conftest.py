"""Test configuration and fixtures for Cercanía tests.

Each test gets its own SQLite database file, so commits made by a test are
visible to the independent sessions the page loaders open and never leak
into another test.
"""

import pytest
import sqlalchemy
from sqlalchemy.orm import Session, sessionmaker

from cercania.models import Affirmation, Base, Party, PartyPosition, PartyProfile
from cercania.storage import StorageFactory
from cercania.store import Store


@pytest.fixture(autouse=True)
def storage_root(tmp_path, monkeypatch):
    """Point logo storage at a temporary directory for every test."""
    media_root = tmp_path / "media"
    media_root.mkdir()
    monkeypatch.setenv("CERCANIA_STORAGE_ROOT", str(media_root))
    monkeypatch.setenv("CERCANIA_MEDIA_URL", "https://cdn.example.org/media")

    # Backends are cached on the factory
    StorageFactory._local_storage = None
    StorageFactory._gcs_storage = None

    yield media_root

    StorageFactory._local_storage = None
    StorageFactory._gcs_storage = None


@pytest.fixture
def engine(tmp_path):
    """Create a fresh database with all tables."""
    engine = sqlalchemy.create_engine(
        f"sqlite:///{tmp_path / 'cercania.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Provide a database session bound to the test database."""
    session = Session(bind=engine)

    yield session

    session.close()


@pytest.fixture
def store(db_session):
    return Store(db_session)


@pytest.fixture
def session_factory(engine):
    """Factory for the independent sessions used by page loaders."""
    return sessionmaker(bind=engine)


# =============================================================================
# API TEST FIXTURES
# =============================================================================


@pytest.fixture
def client(db_session, session_factory):
    """Create a FastAPI test client with overridden database dependencies."""
    from fastapi.testclient import TestClient
    from cercania.api import app
    from cercania.database import get_db_session, get_session_factory

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    yield TestClient(app)

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA
# =============================================================================


@pytest.fixture
def sample_affirmations(db_session):
    """A small mix of short (1) and long (2) test affirmations."""
    affirmations = [
        Affirmation(
            test_type=2,
            axis="y",
            criterion="Familia",
            question_text="El matrimonio debe estar abierto a parejas del mismo sexo.",
        ),
        Affirmation(
            test_type=1,
            axis="x",
            criterion="Mercado",
            question_text="Las pensiones deben administrarse por privados.",
        ),
        Affirmation(
            test_type=1,
            axis="x",
            criterion="Mercado",
            question_text="El Estado debería fijar el precio de los medicamentos.",
        ),
        Affirmation(
            test_type=1,
            axis="y",
            criterion="Familia",
            question_text="El aborto debe ser legal en todas las causales.",
        ),
        Affirmation(
            test_type=2,
            axis="x",
            criterion="Impuestos",
            question_text="Los impuestos a la renta deben subir.",
        ),
    ]
    db_session.add_all(affirmations)
    db_session.commit()
    return affirmations


@pytest.fixture
def sample_party(db_session):
    """A plotted party whose name is spelled differently from its profile."""
    party = Party(name="partido democrata", coordinates=[1, 2])
    db_session.add(party)
    db_session.commit()
    return party


@pytest.fixture
def sample_profile(db_session):
    """Profile of the party in sample_party, with accents in its display name."""
    profile = PartyProfile(
        party_key="PD",
        display_name="Partido Demócrata",
        founded="1990",
        ideology="Centroizquierda",
        logo="logos/pd.png",
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def create_position(db_session):
    """Factory fixture for party positions."""

    def _create(party_key, topic, stance=None):
        position = PartyPosition(party_key=party_key, topic=topic, stance=stance)
        db_session.add(position)
        db_session.commit()
        return position

    return _create
