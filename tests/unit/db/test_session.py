"""Unit tests for database session management."""

import logging
from unittest.mock import patch, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from songskip.db.session import (
    build_engine,
    build_session_factory,
    check_connection,
    get_db,
)


class TestEngineCreation:
    """Tests for SQLAlchemy engine creation."""

    def test_engine_creation_uses_pool_settings(self):
        """Test engine is created with pooling and pre-ping enabled."""
        with patch("songskip.db.session.create_engine") as mock_create_engine:
            build_engine("postgresql+psycopg2://user:pass@db:5432/songskip")

            mock_create_engine.assert_called_once()
            kwargs = mock_create_engine.call_args.kwargs
            assert kwargs["pool_pre_ping"] is True
            assert "pool_size" in kwargs
            assert "pool_timeout" in kwargs

    def test_postgres_statement_timeout(self):
        """Test PostgreSQL connections are bounded by a statement timeout."""
        with (
            patch("songskip.db.session.create_engine") as mock_create_engine,
            patch("songskip.db.session.config.DB_STATEMENT_TIMEOUT_MS", 1234),
        ):
            build_engine("postgresql+psycopg2://user:pass@db:5432/songskip")

            connect_args = mock_create_engine.call_args.kwargs["connect_args"]
            assert connect_args == {"options": "-c statement_timeout=1234"}

    def test_non_postgres_has_no_statement_timeout(self):
        """Test other backends get no driver-specific connect options."""
        with patch("songskip.db.session.create_engine") as mock_create_engine:
            build_engine("sqlite:///songskip.db")

            assert mock_create_engine.call_args.kwargs["connect_args"] == {}

    def test_engine_defaults_to_configured_url(self):
        """Test the configured DATABASE_URL is used when none is given."""
        with (
            patch("songskip.db.session.create_engine") as mock_create_engine,
            patch(
                "songskip.db.session.config.DATABASE_URL",
                "postgresql+psycopg2://u:p@configured:5432/songs",
            ),
        ):
            build_engine()

            url = mock_create_engine.call_args[0][0]
            assert url.host == "configured"
            assert url.database == "songs"


class TestSessionFactory:
    """Tests for SQLAlchemy session factory configuration."""

    def test_session_factory_configuration(self):
        """Test session factory is configured with correct parameters."""
        mock_engine = MagicMock()

        with patch("songskip.db.session.sessionmaker") as mock_sessionmaker:
            build_session_factory(mock_engine)

            mock_sessionmaker.assert_called_once()
            args = mock_sessionmaker.call_args.kwargs
            assert args["autocommit"] is False
            assert args["autoflush"] is False
            assert args["bind"] is mock_engine


class TestCheckConnection:
    """Tests for the startup connectivity check."""

    def test_check_connection_success(self, test_engine):
        """Test a reachable database passes the check."""
        check_connection(test_engine)

    def test_check_connection_failure(self, caplog):
        """Test an unreachable database raises and logs a critical error."""
        mock_engine = MagicMock()
        mock_engine.connect.side_effect = SQLAlchemyError("connection refused")

        with caplog.at_level(logging.CRITICAL, logger="songskip.db.session"):
            with pytest.raises(SQLAlchemyError):
                check_connection(mock_engine)

        assert "Unable to connect to database" in caplog.text


def _request_with_session(session):
    request = MagicMock()
    request.app.state.session_factory.return_value = session
    return request


class TestGetDBFunction:
    """Tests for the get_db dependency injection function."""

    def test_get_db_yields_session(self):
        """Test get_db yields a session from the application's factory."""
        mock_session = MagicMock()

        db_generator = get_db(_request_with_session(mock_session))
        session = next(db_generator)

        assert session is mock_session

    def test_session_cleanup_after_yield(self):
        """Test session is closed after yielding."""
        mock_session = MagicMock()

        db_generator = get_db(_request_with_session(mock_session))
        next(db_generator)

        # Simulate end of request context
        with pytest.raises(StopIteration):
            next(db_generator)

        mock_session.close.assert_called_once()

    def test_session_cleanup_after_exception(self):
        """Test session is closed even when an exception occurs."""
        mock_session = MagicMock()

        db_generator = get_db(_request_with_session(mock_session))
        next(db_generator)

        # Simulate an exception during request handling
        with pytest.raises(RuntimeError):
            db_generator.throw(RuntimeError("Test exception"))

        mock_session.close.assert_called_once()
