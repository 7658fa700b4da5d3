"""
Movie-related Pydantic models for the Media Catalog API.

A Movie is stored on one or more media and belongs to genres.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .base import Language, Movable
from .genre import Genre


class Medium(BaseModel):
    """Single medium (disc) of a movie."""

    length: int = Field(description="Length of the medium in seconds")


class Movie(Movable):
    """Complete movie model with all fields."""

    czech_name: Optional[str] = Field(None, description="Czech name")
    original_name: Optional[str] = Field(None, description="Original name")
    year: int = Field(default=0, description="Year of release")
    language: Language = Field(default=Language.EN, description="Audio language")
    subtitles: List[Language] = Field(default_factory=list, description="Subtitle languages")
    media: List[Medium] = Field(default_factory=list, description="Media the movie is stored on")
    csfd: str = Field(default="", description="URL to CSFD page about movie")
    imdb_code: int = Field(default=-1, description="IMDB code, -1 if unknown")
    wiki_en: str = Field(default="", description="URL to English Wikipedia page")
    wiki_cz: str = Field(default="", description="URL to Czech Wikipedia page")
    picture: Optional[int] = Field(None, description="ID of the picture")
    note: str = Field(default="", description="Note")
    genres: List[Genre] = Field(default_factory=list, description="Genres of the movie")

    class Config:
        """Pydantic configuration."""

        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "czech_name": "Pelisky",
                "original_name": "Pelisky",
                "year": 1999,
                "language": "CZ",
                "subtitles": ["EN"],
                "media": [{"length": 6900}],
                "csfd": "https://www.csfd.cz/film/5954",
                "imdb_code": 167331,
                "wiki_en": "",
                "wiki_cz": "",
                "picture": None,
                "note": "",
                "position": 0,
                "genres": [{"id": 1, "name": "Comedy", "position": 0}]
            }
        }
