"""
Music-related Pydantic models for the Media Catalog API.

A Music album owns its songs; songs are persisted only inside their album.
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Movable


class Song(Movable):
    """Song of a music album."""

    name: Optional[str] = Field(None, description="Song name")
    length: int = Field(default=0, description="Length in seconds")
    note: str = Field(default="", description="Note")


class Music(Movable):
    """Music album as exposed to clients (without songs)."""

    name: Optional[str] = Field(None, description="Album name")
    wiki_en: str = Field(default="", description="URL to English Wikipedia page")
    wiki_cz: str = Field(default="", description="URL to Czech Wikipedia page")
    media_count: int = Field(default=0, description="Count of media")
    note: str = Field(default="", description="Note")


class StoredMusic(Music):
    """Persisted music album including its songs."""

    children_field: ClassVar[Optional[str]] = "songs"

    songs: List[Song] = Field(default_factory=list, description="Songs of the album")
