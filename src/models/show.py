"""
Show-related Pydantic models for the Media Catalog API.

A Show owns seasons and every season owns episodes. The whole show is the
unit of persistence; seasons and episodes are never stored on their own.
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Language, Movable
from .genre import Genre


class Episode(Movable):
    """Episode of a season."""

    number: int = Field(default=0, description="Number of the episode")
    name: Optional[str] = Field(None, description="Episode name")
    length: int = Field(default=0, description="Length in seconds")
    note: str = Field(default="", description="Note")


class Season(Movable):
    """Season as exposed to clients (without episodes)."""

    number: int = Field(default=0, description="Number of the season")
    start_year: int = Field(default=0, description="Year the season started")
    end_year: int = Field(default=0, description="Year the season ended")
    language: Language = Field(default=Language.EN, description="Audio language")
    subtitles: List[Language] = Field(default_factory=list, description="Subtitle languages")
    note: str = Field(default="", description="Note")


class StoredSeason(Season):
    """Persisted season including its episodes."""

    children_field: ClassVar[Optional[str]] = "episodes"

    episodes: List[Episode] = Field(default_factory=list, description="Episodes of the season")


class Show(Movable):
    """Show as exposed to clients (without seasons)."""

    czech_name: Optional[str] = Field(None, description="Czech name")
    original_name: Optional[str] = Field(None, description="Original name")
    csfd: str = Field(default="", description="URL to CSFD page about show")
    imdb_code: int = Field(default=-1, description="IMDB code, -1 if unknown")
    wiki_en: str = Field(default="", description="URL to English Wikipedia page")
    wiki_cz: str = Field(default="", description="URL to Czech Wikipedia page")
    picture: Optional[int] = Field(None, description="ID of the picture")
    note: str = Field(default="", description="Note")
    genres: List[Genre] = Field(default_factory=list, description="Genres of the show")


class StoredShow(Show):
    """Persisted show including its seasons and their episodes."""

    children_field: ClassVar[Optional[str]] = "seasons"

    seasons: List[StoredSeason] = Field(default_factory=list, description="Seasons of the show")
