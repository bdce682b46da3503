"""
Test configuration and fixtures for pytest.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from songskip.db.base import Base
from songskip.db.models import Song
from songskip.db.session import build_session_factory
from songskip.main import create_app

# In-memory database shared by every connection of a test
DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine():
    """Create an engine with a fresh schema for a single test."""
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine):
    """Create a new database session for a test."""
    session = build_session_factory(test_engine)()

    yield session

    session.close()


@pytest.fixture
def app(test_engine):
    """Create an application bound to the test engine."""
    application = create_app(engine=test_engine)

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the application lifespan."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def test_song(db_session):
    """Create a test song."""
    song = Song(song_id="s1", title="Intro Heavy", artist="The Skippers")
    db_session.add(song)
    db_session.commit()
    db_session.refresh(song)
    return song


# Alias for compatibility
@pytest.fixture
def db(db_session):
    """Alias for db_session."""
    return db_session
