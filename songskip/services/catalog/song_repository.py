"""
Repository for songs and their skipped sections.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from songskip.core.errors import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from songskip.db.models import Song, SkippedSection
from songskip.schemas.song import SkippedSectionCreate, SongCreate

logger = logging.getLogger(__name__)


def _require(**fields: str) -> None:
    for name, value in fields.items():
        if value is None or not value.strip():
            raise ValidationError(f"Invalid request: {name} must not be empty")


def _check_time_range(index: int, section: SkippedSectionCreate) -> None:
    if section.start_time < 0:
        raise ValidationError(
            f"Invalid request: skipped_sections[{index}].start_time must be >= 0"
        )
    if section.end_time < section.start_time:
        raise ValidationError(
            f"Invalid request: skipped_sections[{index}].end_time must be >= start_time"
        )


class SongRepository:
    """
    Create, read, update and delete songs and their skipped sections.

    Each method runs as one short transaction on the given session. Store
    failures are rolled back and surfaced as StoreError.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store_operation(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StoreError(f"Failed to {action}") from e

    def _find(self, song_id: str) -> Song:
        song = self.db.get(Song, song_id)
        if song is None:
            raise NotFoundError("Song not found")
        return song

    def create(self, song: SongCreate) -> Song:
        """
        Insert a new song.

        Raises:
            ValidationError: a field is empty
            ConflictError: the song_id is already taken
        """
        _require(song_id=song.song_id, title=song.title, artist=song.artist)

        with self._store_operation("insert song"):
            if self.db.get(Song, song.song_id) is not None:
                raise ConflictError(f"Song {song.song_id} already exists")

            db_song = Song(song_id=song.song_id, title=song.title, artist=song.artist)
            self.db.add(db_song)
            try:
                self.db.commit()
            except IntegrityError:
                # Lost a race with a concurrent insert of the same id
                self.db.rollback()
                raise ConflictError(f"Song {song.song_id} already exists")
            self.db.refresh(db_song)

        logger.info(f"Added song {db_song.song_id}")
        return db_song

    def get_by_id(self, song_id: str) -> Song:
        _require(song_id=song_id)
        with self._store_operation("retrieve song"):
            return self._find(song_id)

    def get_with_sections(self, song_id: str) -> Tuple[Song, List[SkippedSection]]:
        """
        Return a song together with its skipped sections, oldest id first.

        A song without sections yields an empty list.
        """
        _require(song_id=song_id)
        with self._store_operation("retrieve skipped sections"):
            song = self._find(song_id)
            sections = (
                self.db.query(SkippedSection)
                .filter(SkippedSection.song_id == song_id)
                .order_by(SkippedSection.id)
                .all()
            )
        return song, sections

    def list_all(self) -> List[Song]:
        with self._store_operation("retrieve songs"):
            return self.db.query(Song).all()

    def update(self, song_id: str, title: str, artist: str) -> Song:
        """Replace title and artist; song_id itself never changes."""
        _require(song_id=song_id, title=title, artist=artist)

        with self._store_operation("update song"):
            song = self._find(song_id)
            song.title = title
            song.artist = artist
            self.db.commit()
            self.db.refresh(song)

        logger.info(f"Updated song {song_id}")
        return song

    def delete(self, song_id: str) -> None:
        """
        Delete a song and its skipped sections.

        Deleting an unknown song_id is a no-op.
        """
        _require(song_id=song_id)

        with self._store_operation("delete song"):
            self.db.query(SkippedSection).filter(
                SkippedSection.song_id == song_id
            ).delete(synchronize_session=False)
            deleted = self.db.query(Song).filter(Song.song_id == song_id).delete(
                synchronize_session=False
            )
            self.db.commit()

        if deleted:
            logger.info(f"Deleted song {song_id}")

    def add_skipped_sections(
        self, song_id: str, sections: Sequence[SkippedSectionCreate]
    ) -> List[SkippedSection]:
        """
        Insert a batch of skipped sections for an existing song.

        The batch is committed as a whole: either every section is stored or
        none is.

        Raises:
            NotFoundError: the song does not exist
            ValidationError: a section has a negative start or ends before it starts
        """
        _require(song_id=song_id)

        with self._store_operation("insert skipped sections"):
            self._find(song_id)

            for index, section in enumerate(sections):
                _check_time_range(index, section)

            rows = [
                SkippedSection(
                    song_id=song_id,
                    start_time=section.start_time,
                    end_time=section.end_time,
                )
                for section in sections
            ]
            self.db.add_all(rows)
            self.db.commit()
            for row in rows:
                self.db.refresh(row)

        logger.info(f"Added {len(rows)} skipped sections to song {song_id}")
        return rows
