"""
Media Catalog API - Pydantic Models

This module contains the data models used throughout the catalog API.
"""

from .base import Language, Movable
from .book import Book, BookCategory, StoredBookCategory
from .game import Game
from .genre import Genre
from .movie import Medium, Movie
from .music import Music, Song, StoredMusic
from .picture import Picture
from .program import Program
from .result import Event, Result, Severity, Status
from .statistics import (
    BookStatistics,
    CatalogStatistics,
    MediaStatistics,
    MovieStatistics,
    MusicStatistics,
    ShowStatistics,
)
from .show import Episode, Season, Show, StoredSeason, StoredShow
from .time import Time

__all__ = [
    "Language",
    "Movable",
    "Book",
    "BookCategory",
    "StoredBookCategory",
    "Game",
    "Genre",
    "Medium",
    "Movie",
    "Music",
    "Song",
    "StoredMusic",
    "Picture",
    "Program",
    "Event",
    "Result",
    "Severity",
    "Status",
    "BookStatistics",
    "CatalogStatistics",
    "MediaStatistics",
    "MovieStatistics",
    "MusicStatistics",
    "ShowStatistics",
    "Episode",
    "Season",
    "Show",
    "StoredSeason",
    "StoredShow",
    "Time",
]
