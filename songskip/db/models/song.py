from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from songskip.db.base import Base


class Song(Base):
    """Catalog entry identified by a caller-chosen song_id."""

    song_id = Column(String(255), primary_key=True)
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)

    # Relationships
    skipped_sections = relationship(
        "SkippedSection", back_populates="song", order_by="SkippedSection.id"
    )
