from songskip.db.models.song import Song
from songskip.db.models.skipped_section import SkippedSection

__all__ = [
    "Song",
    "SkippedSection",
]
