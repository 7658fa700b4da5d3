"""
Unit tests for the ordering engine.

Tests position assignment, reindexing, moves and cloning on in-memory
sibling sets.
"""

import pytest

# Import test dependencies
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Episode, Genre, StoredSeason, StoredShow
from services import ordering
from services.ordering import Direction


def make_seasons():
    return [
        StoredSeason(id=10, position=0, number=1),
        StoredSeason(id=11, position=1, number=2),
        StoredSeason(id=12, position=2, number=3),
    ]


def positions_by_id(items):
    return {item.id: item.position for item in items}


class TestPositionAssignment:
    """Test position derived from generated ID."""

    def test_assign_position_from_id(self):
        """Test position equals ID minus one."""
        genre = Genre(id=5, name="Drama")

        ordering.assign_position(genre)

        assert genre.position == 4

    def test_assign_position_without_id(self):
        """Test unsaved entity can't get position."""
        with pytest.raises(ValueError):
            ordering.assign_position(Genre(name="Drama"))


class TestReindex:
    """Test compacting of positions."""

    def test_reindex_compacts_positions(self):
        """Test positions become 0..n-1 in current order."""
        genres = [
            Genre(id=1, position=8, name="A"),
            Genre(id=2, position=3, name="B"),
            Genre(id=3, position=20, name="C"),
        ]

        ordered = ordering.reindex(genres)

        assert [genre.id for genre in ordered] == [2, 1, 3]
        assert positions_by_id(genres) == {2: 0, 1: 1, 3: 2}

    def test_reindex_breaks_ties_by_id(self):
        """Test equal positions are ordered by ID."""
        genres = [
            Genre(id=7, position=1, name="A"),
            Genre(id=3, position=1, name="B"),
            Genre(id=5, position=0, name="C"),
        ]

        ordered = ordering.reindex(genres)

        assert [genre.id for genre in ordered] == [5, 3, 7]
        assert [genre.position for genre in ordered] == [0, 1, 2]

    def test_reindex_is_idempotent(self):
        """Test reindexing twice gives the same result as once."""
        genres = [Genre(id=i, position=p, name=str(i)) for i, p in [(1, 9), (2, 4), (3, 4), (4, 0)]]

        ordering.reindex(genres)
        first = positions_by_id(genres)
        ordering.reindex(genres)

        assert positions_by_id(genres) == first
        assert sorted(first.values()) == [0, 1, 2, 3]

    def test_reindex_empty(self):
        """Test reindexing no siblings."""
        assert ordering.reindex([]) == []

    def test_reindex_tree_cascades_to_children(self):
        """Test nested seasons and episodes are compacted too."""
        season = StoredSeason(
            id=1,
            position=5,
            episodes=[Episode(id=1, position=9), Episode(id=2, position=2)],
        )
        show = StoredShow(id=1, position=3, seasons=[season, StoredSeason(id=2, position=1)])

        ordering.reindex_tree([show])

        assert show.position == 0
        assert positions_by_id(show.seasons) == {1: 1, 2: 0}
        assert positions_by_id(season.episodes) == {1: 1, 2: 0}


class TestMove:
    """Test move engine."""

    def test_move_up_swaps_with_predecessor(self):
        """Test moving up exchanges positions with previous sibling only."""
        seasons = make_seasons()

        current, other = ordering.move(seasons[1], Direction.UP, seasons)

        assert (current.id, other.id) == (11, 10)
        assert positions_by_id(seasons) == {10: 1, 11: 0, 12: 2}

    def test_move_down_swaps_with_successor(self):
        """Test moving down exchanges positions with next sibling only."""
        seasons = make_seasons()

        ordering.move(seasons[0], Direction.DOWN, seasons)

        assert positions_by_id(seasons) == {10: 1, 11: 0, 12: 2}

    def test_move_is_transposition(self):
        """Test multiset of positions is unchanged by a move."""
        genres = [Genre(id=i, position=p, name=str(i)) for i, p in [(1, 4), (2, 0), (3, 9), (4, 6)]]
        before = sorted(genre.position for genre in genres)

        current, other = ordering.move(genres[3], Direction.UP, genres)

        assert sorted(genre.position for genre in genres) == before
        assert (current.position, other.position) == (4, 6)
        assert positions_by_id(genres) == {1: 6, 2: 0, 3: 9, 4: 4}

    def test_move_matches_entity_by_id(self):
        """Test entity outside the sibling list is matched by its ID."""
        seasons = make_seasons()

        ordering.move(StoredSeason(id=12), Direction.UP, seasons)

        assert positions_by_id(seasons) == {10: 0, 11: 2, 12: 1}

    def test_move_past_boundary(self):
        """Test first can't move up and last can't move down."""
        seasons = make_seasons()

        with pytest.raises(ValueError):
            ordering.move(seasons[0], Direction.UP, seasons)
        with pytest.raises(ValueError):
            ordering.move(seasons[2], Direction.DOWN, seasons)

        assert positions_by_id(seasons) == {10: 0, 11: 1, 12: 2}

    def test_can_move(self):
        """Test boundary detection."""
        seasons = make_seasons()

        assert not ordering.can_move(seasons[0], Direction.UP, seasons)
        assert ordering.can_move(seasons[0], Direction.DOWN, seasons)
        assert ordering.can_move(seasons[2], Direction.UP, seasons)
        assert not ordering.can_move(seasons[2], Direction.DOWN, seasons)

    def test_single_sibling_can_not_move(self):
        """Test lone sibling has no neighbour."""
        genre = Genre(id=1, name="Drama")

        assert not ordering.can_move(genre, Direction.UP, [genre])
        assert not ordering.can_move(genre, Direction.DOWN, [genre])


class TestClone:
    """Test cloning for duplicates."""

    def test_clone_clears_identities(self):
        """Test clone keeps fields and positions but has no IDs."""
        season = StoredSeason(
            id=4,
            position=3,
            number=2,
            start_year=2001,
            end_year=2002,
            note="note",
            episodes=[Episode(id=7, position=1, number=1, name="Pilot", length=1800)],
        )

        copy = ordering.clone(season)

        assert copy.id is None
        assert copy.position == 3
        assert copy.episodes[0].id is None
        assert copy.episodes[0].position == 1
        assert copy.model_dump(exclude={"id", "episodes"}) == season.model_dump(exclude={"id", "episodes"})
        assert copy.episodes[0].name == "Pilot"

    def test_clone_leaves_source_untouched(self):
        """Test clone doesn't share nested objects with source."""
        season = StoredSeason(id=4, episodes=[Episode(id=7, name="Pilot")])

        copy = ordering.clone(season)
        copy.episodes[0].name = "Changed"

        assert season.id == 4
        assert season.episodes[0].id == 7
        assert season.episodes[0].name == "Pilot"
