"""
Main application initialization and configuration.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from songskip.api.routes import songs
from songskip.core import config
from songskip.core.errors import register_exception_handlers
from songskip.core.logging_config import setup_logging
from songskip.db.session import build_engine, build_session_factory, check_connection

logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    When no engine is given, one is created from the configuration at
    startup and disposed at shutdown. An unreachable database aborts startup.
    Logging is configured at startup, not when the app is built.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.LOG_LEVEL, config.LOG_FILE)
        db_engine = engine or build_engine()
        check_connection(db_engine)
        app.state.session_factory = build_session_factory(db_engine)
        try:
            yield
        finally:
            if engine is None:
                db_engine.dispose()
                logger.info("Database connections closed")

    app = FastAPI(title="SongSkip API", lifespan=lifespan)

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/ping")
    def ping():
        """Liveness check."""
        return {"message": "Pong!"}

    app.include_router(songs.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info(f"Server running on port {config.PORT}")
    uvicorn.run("songskip.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
