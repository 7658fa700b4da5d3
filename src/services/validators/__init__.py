"""
Validators of catalog entities.
"""

from .base import (
    CatalogValidator,
    ChildSource,
    MovableSource,
    RepositorySource,
    ValidationType,
)
from .catalog_validators import (
    BookCategoryValidator,
    BookValidator,
    EpisodeValidator,
    GameValidator,
    GenreValidator,
    MovieValidator,
    MusicValidator,
    PictureValidator,
    ProgramValidator,
    SeasonValidator,
    ShowValidator,
    SongValidator,
)

__all__ = [
    "CatalogValidator",
    "ChildSource",
    "MovableSource",
    "RepositorySource",
    "ValidationType",
    "BookCategoryValidator",
    "BookValidator",
    "EpisodeValidator",
    "GameValidator",
    "GenreValidator",
    "MovieValidator",
    "MusicValidator",
    "PictureValidator",
    "ProgramValidator",
    "SeasonValidator",
    "ShowValidator",
    "SongValidator",
]
