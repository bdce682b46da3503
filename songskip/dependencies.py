"""
Dependency injection functions for the API.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from songskip.db.session import get_db
from songskip.services.catalog import SongRepository


# Database dependency
db_dependency = get_db


def get_song_repository(db: Session = Depends(db_dependency)) -> SongRepository:
    """Build a repository over the request's database session."""
    return SongRepository(db)
