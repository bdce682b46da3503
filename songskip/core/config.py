"""
Application configuration loaded from environment variables.

Values from a local ``.env`` file are loaded first; variables already set in
the environment take precedence.
"""

import os
from typing import List

from dotenv import load_dotenv
from sqlalchemy.engine import URL

_ = load_dotenv()


def build_database_url(
    user: str, password: str, host: str, port: str, name: str
) -> URL:
    """Assemble a PostgreSQL URL from its parts, escaping credentials."""
    return URL.create(
        "postgresql+psycopg2",
        username=user,
        password=password,
        host=host,
        port=int(port) if port else None,
        database=name,
    )


def parse_origins(value: str) -> List[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# Database connection parts
DBUSER = os.getenv("DBUSER", "postgres")
DBPASSWORD = os.getenv("DBPASSWORD", "postgres")
DBNAME = os.getenv("DBNAME", "songskip")
DBHOST = os.getenv("DBHOST", "localhost")
DBPORT = os.getenv("DBPORT", "5432")

# A full URL wins over the individual parts
DATABASE_URL = os.getenv("DATABASE_URL") or build_database_url(
    DBUSER, DBPASSWORD, DBHOST, DBPORT, DBNAME
)

# Pool sizing and store call bounds
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_STATEMENT_TIMEOUT_MS = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "5000"))

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
CORS_ORIGINS = parse_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
