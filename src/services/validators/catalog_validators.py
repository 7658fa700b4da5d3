"""
Field rules of every catalog kind.

Each validator only adds the DEEP phase on top of CatalogValidator.
"""

from typing import List

from core.constants import CURRENT_YEAR, MAX_IMDB_CODE, MIN_YEAR, NO_IMDB_CODE
from models.book import Book, BookCategory
from models.game import Game
from models.genre import Genre
from models.movie import Movie
from models.music import Music, Song
from models.picture import Picture
from models.program import Program
from models.result import Result
from models.show import Episode, Season, Show
from .base import CatalogValidator, MovableSource, ValidationType

YEAR_RANGE_MESSAGE = f"must be between {MIN_YEAR} and {CURRENT_YEAR}."


def _valid_year(year: int) -> bool:
    return MIN_YEAR <= year <= CURRENT_YEAR


class GenreValidator(CatalogValidator[Genre]):
    """Validator for genres."""

    def __init__(self, source: MovableSource):
        super().__init__("Genre", source)

    async def validate_deep(self, data: Genre, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")


class PictureValidator(CatalogValidator[Picture]):
    """Validator for pictures."""

    def __init__(self, source: MovableSource):
        super().__init__("Picture", source)

    async def validate_deep(self, data: Picture, result: Result) -> None:
        self.check_text(data.content, result, "CONTENT", "Content")


class _GenresMixin:
    """Validation of referenced genres shared by movies and shows."""

    genre_validator: GenreValidator

    async def validate_genres(self, genres: List[Genre], result: Result) -> None:
        for genre in genres:
            genre_result = await self.genre_validator.validate(
                genre, ValidationType.EXISTS, ValidationType.DEEP
            )
            result.add_events(genre_result.events)

    def validate_imdb_code(self, imdb_code: int, result: Result) -> None:
        if imdb_code != NO_IMDB_CODE and not 1 <= imdb_code <= MAX_IMDB_CODE:
            result.add_error(
                f"{self.prefix}_IMDB_CODE_NOT_VALID",
                f"IMDB code must be between 1 and {MAX_IMDB_CODE} or -1.",
            )


class MovieValidator(_GenresMixin, CatalogValidator[Movie]):
    """Validator for movies."""

    def __init__(self, source: MovableSource, genre_validator: GenreValidator):
        super().__init__("Movie", source)
        self.genre_validator = genre_validator

    async def validate_deep(self, data: Movie, result: Result) -> None:
        self.check_text(data.czech_name, result, "CZECH_NAME", "Czech name")
        self.check_text(data.original_name, result, "ORIGINAL_NAME", "Original name")
        if not _valid_year(data.year):
            result.add_error(f"{self.prefix}_YEAR_NOT_VALID", f"Year {YEAR_RANGE_MESSAGE}")
        if not data.media:
            result.add_error(f"{self.prefix}_MEDIA_EMPTY", "Media mustn't be empty.")
        if any(medium.length <= 0 for medium in data.media):
            result.add_error(
                f"{self.prefix}_MEDIUM_NOT_POSITIVE", "Length of medium must be positive number."
            )
        self.validate_imdb_code(data.imdb_code, result)
        await self.validate_genres(data.genres, result)


class ShowValidator(_GenresMixin, CatalogValidator[Show]):
    """Validator for shows."""

    def __init__(self, source: MovableSource, genre_validator: GenreValidator):
        super().__init__("Show", source)
        self.genre_validator = genre_validator

    async def validate_deep(self, data: Show, result: Result) -> None:
        self.check_text(data.czech_name, result, "CZECH_NAME", "Czech name")
        self.check_text(data.original_name, result, "ORIGINAL_NAME", "Original name")
        self.validate_imdb_code(data.imdb_code, result)
        await self.validate_genres(data.genres, result)


class SeasonValidator(CatalogValidator[Season]):
    """Validator for seasons."""

    def __init__(self, source: MovableSource):
        super().__init__("Season", source)

    async def validate_deep(self, data: Season, result: Result) -> None:
        self.check_positive(data.number, result, "NUMBER", "Number of season")
        if not _valid_year(data.start_year):
            result.add_error(f"{self.prefix}_START_YEAR_NOT_VALID", f"Starting year {YEAR_RANGE_MESSAGE}")
        if not _valid_year(data.end_year):
            result.add_error(f"{self.prefix}_END_YEAR_NOT_VALID", f"Ending year {YEAR_RANGE_MESSAGE}")
        if data.start_year > data.end_year:
            result.add_error(
                f"{self.prefix}_YEARS_NOT_VALID", "Starting year mustn't be greater than ending year."
            )


class EpisodeValidator(CatalogValidator[Episode]):
    """Validator for episodes."""

    def __init__(self, source: MovableSource):
        super().__init__("Episode", source)

    async def validate_deep(self, data: Episode, result: Result) -> None:
        self.check_positive(data.number, result, "NUMBER", "Number of episode")
        self.check_text(data.name, result, "NAME", "Name")
        self.check_not_negative(data.length, result, "LENGTH", "Length of episode")


class GameValidator(CatalogValidator[Game]):
    """Validator for games."""

    def __init__(self, source: MovableSource):
        super().__init__("Game", source)

    async def validate_deep(self, data: Game, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")
        self.check_positive(data.media_count, result, "MEDIA_COUNT", "Count of media")


class ProgramValidator(CatalogValidator[Program]):
    """Validator for programs."""

    def __init__(self, source: MovableSource):
        super().__init__("Program", source)

    async def validate_deep(self, data: Program, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")
        self.check_positive(data.media_count, result, "MEDIA_COUNT", "Count of media")


class MusicValidator(CatalogValidator[Music]):
    """Validator for music."""

    def __init__(self, source: MovableSource):
        super().__init__("Music", source)

    async def validate_deep(self, data: Music, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")
        self.check_positive(data.media_count, result, "MEDIA_COUNT", "Count of media")


class SongValidator(CatalogValidator[Song]):
    """Validator for songs."""

    def __init__(self, source: MovableSource):
        super().__init__("Song", source)

    async def validate_deep(self, data: Song, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")
        self.check_not_negative(data.length, result, "LENGTH", "Length of song")


class BookCategoryValidator(CatalogValidator[BookCategory]):
    """Validator for book categories."""

    def __init__(self, source: MovableSource):
        super().__init__("Book category", source)

    async def validate_deep(self, data: BookCategory, result: Result) -> None:
        self.check_text(data.name, result, "NAME", "Name")


class BookValidator(CatalogValidator[Book]):
    """Validator for books."""

    def __init__(self, source: MovableSource):
        super().__init__("Book", source)

    async def validate_deep(self, data: Book, result: Result) -> None:
        self.check_text(data.author, result, "AUTHOR", "Author")
        self.check_text(data.title, result, "TITLE", "Title")
        if not data.languages:
            result.add_error(f"{self.prefix}_LANGUAGES_EMPTY", "Languages mustn't be empty.")
