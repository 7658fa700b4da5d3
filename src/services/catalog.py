"""
Catalog wiring.

Creates one repository per aggregate root kind and builds validators and
facades of every catalog kind on top of them.
"""

import logging
from typing import Any, Dict

from models import (
    Book,
    BookCategory,
    Game,
    Genre,
    Movie,
    Music,
    Picture,
    Program,
    Show,
    StoredBookCategory,
    StoredMusic,
    StoredShow,
)
from repository import InMemoryCatalogRepository
from .child_facade import ChildFacade
from .converter import Converter
from .kinds import BOOK_KIND, EPISODE_KIND, SEASON_KIND, SONG_KIND
from .parent_facade import ParentFacade
from .statistics import StatisticsService
from .validators import (
    BookCategoryValidator,
    BookValidator,
    ChildSource,
    EpisodeValidator,
    GameValidator,
    GenreValidator,
    MovieValidator,
    MusicValidator,
    PictureValidator,
    ProgramValidator,
    RepositorySource,
    SeasonValidator,
    ShowValidator,
    SongValidator,
)

logger = logging.getLogger(__name__)


class Catalog:
    """
    Whole media catalog: repositories, validators and facades.

    The repositories are keyed by the names used in snapshots.
    """

    def __init__(self):
        """Initialize empty in-memory catalog."""
        self.repositories = {
            "movies": InMemoryCatalogRepository(Movie),
            "shows": InMemoryCatalogRepository(StoredShow),
            "games": InMemoryCatalogRepository(Game),
            "programs": InMemoryCatalogRepository(Program),
            "music": InMemoryCatalogRepository(StoredMusic),
            "genres": InMemoryCatalogRepository(Genre),
            "pictures": InMemoryCatalogRepository(Picture),
            "book_categories": InMemoryCatalogRepository(StoredBookCategory),
        }
        repos = self.repositories
        converter = Converter()

        # Validators
        genre_validator = GenreValidator(RepositorySource(repos["genres"]))
        show_validator = ShowValidator(RepositorySource(repos["shows"]), genre_validator)
        season_validator = SeasonValidator(ChildSource(repos["shows"], SEASON_KIND))
        music_validator = MusicValidator(RepositorySource(repos["music"]))
        book_category_validator = BookCategoryValidator(RepositorySource(repos["book_categories"]))

        # Aggregate root facades
        self.movies = ParentFacade(
            repos["movies"], converter,
            MovieValidator(RepositorySource(repos["movies"]), genre_validator), Movie, Movie,
        )
        self.shows = ParentFacade(repos["shows"], converter, show_validator, Show, StoredShow)
        self.games = ParentFacade(
            repos["games"], converter, GameValidator(RepositorySource(repos["games"])), Game, Game,
        )
        self.programs = ParentFacade(
            repos["programs"], converter,
            ProgramValidator(RepositorySource(repos["programs"])), Program, Program,
        )
        self.music = ParentFacade(repos["music"], converter, music_validator, Music, StoredMusic)
        self.genres = ParentFacade(repos["genres"], converter, genre_validator, Genre, Genre)
        self.pictures = ParentFacade(
            repos["pictures"], converter,
            PictureValidator(RepositorySource(repos["pictures"])), Picture, Picture,
        )
        self.book_categories = ParentFacade(
            repos["book_categories"], converter, book_category_validator, BookCategory, StoredBookCategory,
        )

        # Nested facades
        self.seasons = ChildFacade(repos["shows"], converter, show_validator, season_validator, SEASON_KIND)
        self.episodes = ChildFacade(
            repos["shows"], converter, season_validator,
            EpisodeValidator(ChildSource(repos["shows"], EPISODE_KIND)), EPISODE_KIND,
        )
        self.songs = ChildFacade(
            repos["music"], converter, music_validator,
            SongValidator(ChildSource(repos["music"], SONG_KIND)), SONG_KIND,
        )
        self.books = ChildFacade(
            repos["book_categories"], converter, book_category_validator,
            BookValidator(ChildSource(repos["book_categories"], BOOK_KIND)), BOOK_KIND,
        )

        self.statistics = StatisticsService(
            movie_repo=repos["movies"],
            show_repo=repos["shows"],
            music_repo=repos["music"],
            game_repo=repos["games"],
            program_repo=repos["programs"],
            book_category_repo=repos["book_categories"],
            genre_repo=repos["genres"],
            picture_repo=repos["pictures"],
        )

    async def new_data(self) -> None:
        """Remove everything from the catalog."""
        for facade in (
            self.movies, self.shows, self.games, self.programs,
            self.music, self.genres, self.pictures, self.book_categories,
        ):
            await facade.new_data()

    async def export_state(self) -> Dict[str, Any]:
        """
        Export content of every repository.

        Returns:
            Mapping of repository name to list of stored roots as dicts
        """
        state = {}
        for name, repository in self.repositories.items():
            state[name] = [item.model_dump(mode="json") for item in await repository.get_all()]
        return state

    async def restore_state(self, state: Dict[str, Any]) -> None:
        """
        Replace content of every repository found in state.

        Args:
            state: Mapping produced by export_state
        """
        for name, repository in self.repositories.items():
            items = [repository.entity_class.model_validate(item) for item in state.get(name, [])]
            await repository.load(items)
            logger.info(f"Restored {len(items)} {name}")
