"""
Song catalog services package initialization.
"""

from songskip.services.catalog.song_repository import SongRepository

__all__ = [
    "SongRepository",
]
