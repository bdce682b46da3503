"""
Pydantic models for song and skipped-section payloads.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

# Bounds of the songs/skipped_sections columns
MAX_TEXT_LENGTH = 255
MAX_OFFSET = 2**31 - 1


class SongUpdate(BaseModel):
    """Schema for updating a song's mutable fields."""

    title: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    artist: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)


class SongCreate(SongUpdate):
    """Schema for adding a new song."""

    song_id: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)


class SongResponse(BaseModel):
    """Schema for a song as stored in the catalog."""

    song_id: str
    title: str
    artist: str

    class Config:
        from_attributes = True


class SkippedSectionCreate(BaseModel):
    """Schema for one section in an add request.

    A client-supplied ``id`` is accepted but ignored; ids are assigned by
    the store.
    """

    id: Optional[int] = None
    start_time: int = Field(ge=0, le=MAX_OFFSET)
    end_time: int = Field(ge=0, le=MAX_OFFSET)


class SkippedSectionsCreate(BaseModel):
    """Schema for adding a batch of skipped sections to a song."""

    song_id: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    skipped_sections: List[SkippedSectionCreate] = Field(default_factory=list)


class SkippedSectionResponse(BaseModel):
    """Schema for a stored skipped section."""

    id: int
    start_time: int
    end_time: int

    class Config:
        from_attributes = True


class SongDetailsResponse(SongResponse):
    """Schema for a song with its skipped sections."""

    skipped_sections: List[SkippedSectionResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str


class SongMessageResponse(MessageResponse):
    song: SongResponse


class SongListResponse(MessageResponse):
    songs: List[SongResponse] = Field(default_factory=list)
