"""
Unit tests for validators.

Tests common validation phases and field rules of catalog kinds.
"""

import pytest
import pytest_asyncio

# Import test dependencies
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from core.constants import CURRENT_YEAR
from models import (
    Book,
    Episode,
    Game,
    Genre,
    Medium,
    Movie,
    Season,
    StoredSeason,
    StoredShow,
    Status,
)
from repository import InMemoryCatalogRepository
from services.kinds import EPISODE_KIND, SEASON_KIND
from services.validators import (
    BookValidator,
    ChildSource,
    EpisodeValidator,
    GameValidator,
    GenreValidator,
    MovieValidator,
    RepositorySource,
    SeasonValidator,
    ValidationType,
)


def keys(result):
    return [event.key for event in result.events]


@pytest_asyncio.fixture
async def genre_validator():
    """Create genre validator with two stored genres."""
    repo = InMemoryCatalogRepository(Genre)
    await repo.add(Genre(name="Drama", position=0))
    await repo.add(Genre(name="Comedy", position=1))
    return GenreValidator(RepositorySource(repo))


@pytest_asyncio.fixture
async def show_repo():
    """Create show repository with one show holding three seasons."""
    repo = InMemoryCatalogRepository(StoredShow)
    await repo.load([
        StoredShow(
            id=1,
            czech_name="Show",
            original_name="Show",
            seasons=[
                StoredSeason(id=10, position=0, number=1, start_year=2000, end_year=2001,
                             episodes=[Episode(id=1, position=0, number=1, name="Pilot")]),
                StoredSeason(id=11, position=1, number=2, start_year=2001, end_year=2002),
                StoredSeason(id=12, position=2, number=3, start_year=2002, end_year=2003),
            ],
        ),
    ])
    return repo


def valid_movie(**fields):
    data = dict(
        czech_name="Pelisky",
        original_name="Pelisky",
        year=1999,
        media=[Medium(length=6900)],
    )
    data.update(fields)
    return Movie(**data)


class TestCommonPhases:
    """Test phases shared by every kind."""

    @pytest.mark.asyncio
    async def test_null_data(self, genre_validator):
        """Test missing argument short-circuits every phase."""
        result = await genre_validator.validate(None, ValidationType.EXISTS, ValidationType.DEEP)

        assert keys(result) == ["GENRE_NULL"]
        assert result.events[0].message == "Genre mustn't be null."
        assert result.status == Status.ERROR

    @pytest.mark.asyncio
    async def test_new_with_id(self, genre_validator):
        """Test new entity mustn't have ID."""
        result = await genre_validator.validate(Genre(id=1, name="Drama"), ValidationType.NEW)

        assert keys(result) == ["GENRE_ID_NOT_NULL"]
        assert result.events[0].message == "ID must be null."

    @pytest.mark.asyncio
    async def test_exists_without_id(self, genre_validator):
        """Test existing entity must have ID."""
        result = await genre_validator.validate(Genre(name="Drama"), ValidationType.EXISTS)

        assert keys(result) == ["GENRE_ID_NULL"]

    @pytest.mark.asyncio
    async def test_exists_unknown(self, genre_validator):
        """Test existing entity must be stored."""
        result = await genre_validator.validate(Genre(id=99, name="Drama"), ValidationType.EXISTS)

        assert keys(result) == ["GENRE_NOT_EXIST"]
        assert result.events[0].message == "Genre doesn't exist."

    @pytest.mark.asyncio
    async def test_errors_accumulate(self, genre_validator):
        """Test every failed phase is reported."""
        result = await genre_validator.validate(Genre(id=1, name=""), ValidationType.NEW, ValidationType.DEEP)

        assert keys(result) == ["GENRE_ID_NOT_NULL", "GENRE_NAME_EMPTY"]

    @pytest.mark.asyncio
    async def test_move_boundaries(self, genre_validator):
        """Test first can't move up and last can't move down."""
        up = await genre_validator.validate(Genre(id=1), ValidationType.EXISTS, ValidationType.UP)
        down = await genre_validator.validate(Genre(id=2), ValidationType.EXISTS, ValidationType.DOWN)
        allowed = await genre_validator.validate(Genre(id=2), ValidationType.EXISTS, ValidationType.UP)

        assert keys(up) == ["GENRE_NOT_MOVABLE"]
        assert up.events[0].message == "Genre can't be moved up."
        assert keys(down) == ["GENRE_NOT_MOVABLE"]
        assert down.events[0].message == "Genre can't be moved down."
        assert allowed.is_ok

    @pytest.mark.asyncio
    async def test_move_unknown_reports_only_existence(self, genre_validator):
        """Test move check is skipped for unknown entity."""
        result = await genre_validator.validate(Genre(id=99), ValidationType.EXISTS, ValidationType.UP)

        assert keys(result) == ["GENRE_NOT_EXIST"]


class TestChildSource:
    """Test validation of children nested in aggregate roots."""

    @pytest.mark.asyncio
    async def test_season_exists(self, show_repo):
        """Test season is found inside its show."""
        validator = SeasonValidator(ChildSource(show_repo, SEASON_KIND))

        assert (await validator.validate(Season(id=11), ValidationType.EXISTS)).is_ok
        assert keys(await validator.validate(Season(id=13), ValidationType.EXISTS)) == ["SEASON_NOT_EXIST"]

    @pytest.mark.asyncio
    async def test_season_siblings_are_seasons_of_same_show(self, show_repo):
        """Test move boundaries use the owning show's seasons."""
        validator = SeasonValidator(ChildSource(show_repo, SEASON_KIND))

        assert keys(await validator.validate(Season(id=10), ValidationType.UP)) == ["SEASON_NOT_MOVABLE"]
        assert (await validator.validate(Season(id=11), ValidationType.UP)).is_ok
        assert keys(await validator.validate(Season(id=12), ValidationType.DOWN)) == ["SEASON_NOT_MOVABLE"]

    @pytest.mark.asyncio
    async def test_episode_exists(self, show_repo):
        """Test episode is found inside a season of a show."""
        validator = EpisodeValidator(ChildSource(show_repo, EPISODE_KIND))

        assert (await validator.validate(Episode(id=1), ValidationType.EXISTS)).is_ok
        assert keys(await validator.validate(Episode(id=2), ValidationType.EXISTS)) == ["EPISODE_NOT_EXIST"]


class TestDeepRules:
    """Test field rules of catalog kinds."""

    @pytest.mark.asyncio
    async def test_valid_movie(self, genre_validator):
        """Test valid movie passes."""
        validator = MovieValidator(RepositorySource(InMemoryCatalogRepository(Movie)), genre_validator)

        result = await validator.validate(
            valid_movie(genres=[Genre(id=1, name="Drama")]), ValidationType.NEW, ValidationType.DEEP
        )

        assert result.is_ok
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_invalid_movie(self, genre_validator):
        """Test every broken movie field is reported."""
        validator = MovieValidator(RepositorySource(InMemoryCatalogRepository(Movie)), genre_validator)
        movie = valid_movie(
            czech_name=None,
            original_name=" ",
            year=CURRENT_YEAR + 1,
            media=[Medium(length=0)],
            imdb_code=0,
            genres=[Genre(id=99, name="Unknown")],
        )

        result = await validator.validate(movie, ValidationType.DEEP)

        assert keys(result) == [
            "MOVIE_CZECH_NAME_NULL",
            "MOVIE_ORIGINAL_NAME_EMPTY",
            "MOVIE_YEAR_NOT_VALID",
            "MOVIE_MEDIUM_NOT_POSITIVE",
            "MOVIE_IMDB_CODE_NOT_VALID",
            "GENRE_NOT_EXIST",
        ]

    @pytest.mark.asyncio
    async def test_movie_without_media(self, genre_validator):
        """Test movie must have media."""
        validator = MovieValidator(RepositorySource(InMemoryCatalogRepository(Movie)), genre_validator)

        result = await validator.validate(valid_movie(media=[]), ValidationType.DEEP)

        assert keys(result) == ["MOVIE_MEDIA_EMPTY"]

    @pytest.mark.asyncio
    async def test_season_years(self, show_repo):
        """Test season years must be ordered and in range."""
        validator = SeasonValidator(ChildSource(show_repo, SEASON_KIND))

        result = await validator.validate(Season(number=0, start_year=2005, end_year=2004), ValidationType.DEEP)

        assert keys(result) == ["SEASON_NUMBER_NOT_POSITIVE", "SEASON_YEARS_NOT_VALID"]

    @pytest.mark.asyncio
    async def test_game_rules(self):
        """Test game needs name and media."""
        validator = GameValidator(RepositorySource(InMemoryCatalogRepository(Game)))

        result = await validator.validate(Game(), ValidationType.DEEP)

        assert keys(result) == ["GAME_NAME_NULL", "GAME_MEDIA_COUNT_NOT_POSITIVE"]

    @pytest.mark.asyncio
    async def test_book_rules(self):
        """Test book needs author, title and languages."""
        validator = BookValidator(RepositorySource(InMemoryCatalogRepository(Book)))

        result = await validator.validate(Book(author="", title="Title"), ValidationType.DEEP)

        assert keys(result) == ["BOOK_AUTHOR_EMPTY", "BOOK_LANGUAGES_EMPTY"]
