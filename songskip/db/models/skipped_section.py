from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from songskip.db.base import Base, CreatedAtMixin


class SkippedSection(Base, CreatedAtMixin):
    """Time range within a song's playback that should be skipped."""

    __table_args__ = (
        CheckConstraint("start_time >= 0", name="ck_skipped_sections_start_time"),
        CheckConstraint(
            "end_time >= start_time", name="ck_skipped_sections_time_range"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    song_id = Column(
        String(255), ForeignKey("songs.song_id"), index=True, nullable=False
    )

    # Offsets within the song
    start_time = Column(Integer, nullable=False)
    end_time = Column(Integer, nullable=False)

    # Relationships
    song = relationship("Song", back_populates="skipped_sections")
