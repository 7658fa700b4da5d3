"""
Routers of every catalog kind.
"""

from models import (
    Book,
    BookCategory,
    Episode,
    Game,
    Genre,
    Movie,
    Music,
    Picture,
    Program,
    Season,
    Show,
    Song,
)
from .catalog_router import create_child_router, create_parent_router

movie_router = create_parent_router("/movies", "movies", "movies", Movie)
show_router = create_parent_router("/shows", "shows", "shows", Show)
game_router = create_parent_router("/games", "games", "games", Game)
program_router = create_parent_router("/programs", "programs", "programs", Program)
music_router = create_parent_router("/music", "music", "music", Music)
genre_router = create_parent_router("/genres", "genres", "genres", Genre)
picture_router = create_parent_router("/pictures", "pictures", "pictures", Picture)
book_category_router = create_parent_router(
    "/book-categories", "book categories", "book_categories", BookCategory
)

season_router = create_child_router("/seasons", "/shows", "seasons", "seasons", Season, Show)
episode_router = create_child_router("/episodes", "/seasons", "episodes", "episodes", Episode, Season)
song_router = create_child_router("/songs", "/music", "songs", "songs", Song, Music)
book_router = create_child_router("/books", "/book-categories", "books", "books", Book, BookCategory)

ALL_ROUTERS = [
    movie_router,
    show_router,
    season_router,
    episode_router,
    game_router,
    program_router,
    music_router,
    song_router,
    genre_router,
    picture_router,
    book_category_router,
    book_router,
]
