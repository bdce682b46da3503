"""
Database engine and per-request session management.
"""

import logging
from typing import Generator, Optional, Union

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from songskip.core import config

logger = logging.getLogger(__name__)


def build_engine(url: Optional[Union[str, URL]] = None) -> Engine:
    """
    Create the pooled engine shared by all requests.

    On PostgreSQL every connection gets a ``statement_timeout`` so that no
    store call can block a request indefinitely.
    """
    url = make_url(url or config.DATABASE_URL)

    connect_args = {}
    if url.get_backend_name() == "postgresql":
        connect_args["options"] = f"-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}"

    logger.info(f"Using database {url.render_as_string(hide_password=True)}")

    return create_engine(
        url,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> None:
    """Run a trivial query; raises if the store is unreachable."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.critical(f"Unable to connect to database: {e}")
        raise
    logger.info("Connected to database successfully")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield a session bound to the application's engine.

    The session is closed once the request finishes, even on error.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
