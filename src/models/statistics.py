"""
Statistics models for the Media Catalog API.
"""

from pydantic import BaseModel, Field

from .time import Time


class MovieStatistics(BaseModel):
    """Statistics about movies."""

    count: int = Field(default=0, description="Count of movies")
    media_count: int = Field(default=0, description="Count of media of all movies")
    total_length: Time = Field(default_factory=Time, description="Total length of all movies")


class ShowStatistics(BaseModel):
    """Statistics about shows."""

    count: int = Field(default=0, description="Count of shows")
    seasons_count: int = Field(default=0, description="Count of seasons of all shows")
    episodes_count: int = Field(default=0, description="Count of episodes of all shows")
    total_length: Time = Field(default_factory=Time, description="Total length of all episodes")


class MusicStatistics(BaseModel):
    """Statistics about music."""

    count: int = Field(default=0, description="Count of music albums")
    media_count: int = Field(default=0, description="Count of media of all albums")
    songs_count: int = Field(default=0, description="Count of songs of all albums")
    total_length: Time = Field(default_factory=Time, description="Total length of all songs")


class MediaStatistics(BaseModel):
    """Statistics about games or programs."""

    count: int = Field(default=0, description="Count of items")
    media_count: int = Field(default=0, description="Count of media of all items")


class BookStatistics(BaseModel):
    """Statistics about books."""

    categories_count: int = Field(default=0, description="Count of book categories")
    books_count: int = Field(default=0, description="Count of books in all categories")


class CatalogStatistics(BaseModel):
    """Statistics of the whole catalog."""

    movies: MovieStatistics = Field(default_factory=MovieStatistics)
    shows: ShowStatistics = Field(default_factory=ShowStatistics)
    music: MusicStatistics = Field(default_factory=MusicStatistics)
    games: MediaStatistics = Field(default_factory=MediaStatistics)
    programs: MediaStatistics = Field(default_factory=MediaStatistics)
    books: BookStatistics = Field(default_factory=BookStatistics)
    genres_count: int = Field(default=0, description="Count of genres")
    pictures_count: int = Field(default=0, description="Count of pictures")

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "movies": {"count": 2, "media_count": 3, "total_length": {"length": 14400, "formatted": "4:00:00"}},
                "shows": {"count": 1, "seasons_count": 2, "episodes_count": 20, "total_length": {"length": 54000, "formatted": "15:00:00"}},
                "music": {"count": 1, "media_count": 1, "songs_count": 12, "total_length": {"length": 2700, "formatted": "0:45:00"}},
                "games": {"count": 3, "media_count": 5},
                "programs": {"count": 1, "media_count": 1},
                "books": {"categories_count": 2, "books_count": 7},
                "genres_count": 10,
                "pictures_count": 4
            }
        }
