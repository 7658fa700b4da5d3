"""
Statistics service.

Aggregates counts and total lengths across every catalog repository.
"""

from models.statistics import (
    BookStatistics,
    CatalogStatistics,
    MediaStatistics,
    MovieStatistics,
    MusicStatistics,
    ShowStatistics,
)
from models.time import Time
from repository.base import CatalogRepository


class StatisticsService:
    """Computes catalog statistics from the stored aggregate roots."""

    def __init__(
        self,
        movie_repo: CatalogRepository,
        show_repo: CatalogRepository,
        music_repo: CatalogRepository,
        game_repo: CatalogRepository,
        program_repo: CatalogRepository,
        book_category_repo: CatalogRepository,
        genre_repo: CatalogRepository,
        picture_repo: CatalogRepository,
    ):
        self.movie_repo = movie_repo
        self.show_repo = show_repo
        self.music_repo = music_repo
        self.game_repo = game_repo
        self.program_repo = program_repo
        self.book_category_repo = book_category_repo
        self.genre_repo = genre_repo
        self.picture_repo = picture_repo

    async def get_statistics(self) -> CatalogStatistics:
        """
        Compute statistics of the whole catalog.

        Returns:
            Statistics with counts and total lengths
        """
        return CatalogStatistics(
            movies=await self.movie_statistics(),
            shows=await self.show_statistics(),
            music=await self.music_statistics(),
            games=await self._media_statistics(self.game_repo),
            programs=await self._media_statistics(self.program_repo),
            books=await self.book_statistics(),
            genres_count=await self.genre_repo.count(),
            pictures_count=await self.picture_repo.count(),
        )

    async def movie_statistics(self) -> MovieStatistics:
        movies = await self.movie_repo.get_all()
        media = [medium for movie in movies for medium in movie.media]
        return MovieStatistics(
            count=len(movies),
            media_count=len(media),
            total_length=Time(length=sum(medium.length for medium in media)),
        )

    async def show_statistics(self) -> ShowStatistics:
        shows = await self.show_repo.get_all()
        seasons = [season for show in shows for season in show.seasons]
        episodes = [episode for season in seasons for episode in season.episodes]
        return ShowStatistics(
            count=len(shows),
            seasons_count=len(seasons),
            episodes_count=len(episodes),
            total_length=Time(length=sum(episode.length for episode in episodes)),
        )

    async def music_statistics(self) -> MusicStatistics:
        albums = await self.music_repo.get_all()
        songs = [song for album in albums for song in album.songs]
        return MusicStatistics(
            count=len(albums),
            media_count=sum(album.media_count for album in albums),
            songs_count=len(songs),
            total_length=Time(length=sum(song.length for song in songs)),
        )

    async def book_statistics(self) -> BookStatistics:
        categories = await self.book_category_repo.get_all()
        return BookStatistics(
            categories_count=len(categories),
            books_count=sum(len(category.books) for category in categories),
        )

    async def _media_statistics(self, repository: CatalogRepository) -> MediaStatistics:
        items = await repository.get_all()
        return MediaStatistics(count=len(items), media_count=sum(item.media_count for item in items))
