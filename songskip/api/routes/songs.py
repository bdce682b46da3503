"""
REST API endpoints for songs and their skipped sections.

Errors raised by the repository are rendered by the handlers registered in
``songskip.core.errors``.
"""

from fastapi import APIRouter, Depends

from songskip.core.errors import ValidationError
from songskip.dependencies import get_song_repository
from songskip.schemas.song import (
    MessageResponse,
    SkippedSectionResponse,
    SkippedSectionsCreate,
    SongCreate,
    SongDetailsResponse,
    SongListResponse,
    SongMessageResponse,
    SongResponse,
    SongUpdate,
)
from songskip.services.catalog import SongRepository

router = APIRouter(tags=["songs"])


@router.post("/addSong", response_model=MessageResponse)
def add_song(
    song: SongCreate, repository: SongRepository = Depends(get_song_repository)
):
    """Add a new song to the catalog."""
    repository.create(song)
    return MessageResponse(message="Song added successfully!")


@router.post("/addSkippedSections", response_model=MessageResponse)
def add_skipped_sections(
    payload: SkippedSectionsCreate,
    repository: SongRepository = Depends(get_song_repository),
):
    """Add a batch of skipped sections to an existing song."""
    repository.add_skipped_sections(payload.song_id, payload.skipped_sections)
    return MessageResponse(message="Skipped sections added successfully!")


@router.get("/getSong/{song_id}", response_model=SongMessageResponse)
@router.get("/getSong/", response_model=SongMessageResponse, include_in_schema=False)
def get_song(
    song_id: str = "", repository: SongRepository = Depends(get_song_repository)
):
    """Retrieve one song by id."""
    if not song_id.strip():
        raise ValidationError("Invalid song ID")

    song = repository.get_by_id(song_id)
    return SongMessageResponse(
        message="Song retrieved successfully!",
        song=SongResponse.model_validate(song),
    )


@router.get("/getSongDetails/{song_id}", response_model=SongDetailsResponse)
def get_song_details(
    song_id: str, repository: SongRepository = Depends(get_song_repository)
):
    """Retrieve a song together with its skipped sections."""
    song, sections = repository.get_with_sections(song_id)
    return SongDetailsResponse(
        song_id=song.song_id,
        title=song.title,
        artist=song.artist,
        skipped_sections=[
            SkippedSectionResponse.model_validate(section) for section in sections
        ],
    )


@router.get("/getSongs", response_model=SongListResponse)
def get_songs(repository: SongRepository = Depends(get_song_repository)):
    """Retrieve every song in the catalog."""
    songs = repository.list_all()
    return SongListResponse(
        message="Songs retrieved successfully!",
        songs=[SongResponse.model_validate(song) for song in songs],
    )


@router.put("/updateSong/{song_id}", response_model=MessageResponse)
def update_song(
    song_id: str,
    song: SongUpdate,
    repository: SongRepository = Depends(get_song_repository),
):
    """Update a song's title and artist."""
    repository.update(song_id, song.title, song.artist)
    return MessageResponse(message="Song updated successfully!")


@router.delete("/deleteSong/{song_id}", response_model=MessageResponse)
def delete_song(
    song_id: str, repository: SongRepository = Depends(get_song_repository)
):
    """Delete a song and its skipped sections."""
    repository.delete(song_id)
    return MessageResponse(message="Song deleted successfully!")
