"""
Unit tests for snapshot persistence.

Tests saving and loading catalog state through the persistence manager.
"""

import json

import pytest

# Import test dependencies
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Genre
from persistence import PersistenceManager
from services.catalog import Catalog


class TestPersistenceManager:
    """Test PersistenceManager functionality."""

    def test_load_without_snapshot(self, tmp_path):
        """Test empty state is returned when nothing was saved."""
        manager = PersistenceManager(str(tmp_path))

        assert manager.load_state() == {}
        assert manager.get_statistics()["num_snapshots"] == 0

    def test_save_and_load_latest(self, tmp_path):
        """Test latest snapshot is loaded."""
        manager = PersistenceManager(str(tmp_path))

        manager.save_state({"genres": [{"id": 1, "position": 0, "name": "Old"}]})
        path = manager.save_state({"genres": [{"id": 1, "position": 0, "name": "New"}]})

        assert manager.load_state() == {"genres": [{"id": 1, "position": 0, "name": "New"}]}
        assert manager.get_statistics()["latest_snapshot"] == path
        assert manager.get_statistics()["num_snapshots"] == 2

        with open(path, encoding="utf-8") as f:
            assert json.load(f)["version"] == "1.0"

    def test_save_leaves_no_temporary_files(self, tmp_path):
        """Test only the final snapshot remains after saving."""
        manager = PersistenceManager(str(tmp_path))

        path = manager.save_state({})

        assert [str(p) for p in manager.snapshots_dir.iterdir()] == [path]

    def test_load_missing_snapshot(self, tmp_path):
        """Test loading explicit unknown snapshot fails."""
        manager = PersistenceManager(str(tmp_path))

        with pytest.raises(ValueError):
            manager.load_state(str(tmp_path / "missing.json"))

    @pytest.mark.asyncio
    async def test_catalog_round_trip(self, tmp_path):
        """Test catalog survives save and restore."""
        manager = PersistenceManager(str(tmp_path))
        catalog = Catalog()
        await catalog.genres.add(Genre(name="Drama"))
        await catalog.genres.add(Genre(name="Comedy"))

        manager.save_state(await catalog.export_state())
        restored = Catalog()
        await restored.restore_state(manager.load_state())

        names = [genre.name for genre in (await restored.genres.get_all()).data]
        assert names == ["Drama", "Comedy"]
