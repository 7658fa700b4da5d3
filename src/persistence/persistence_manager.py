"""
Persistence manager for saving and loading catalog state to disk.

Provides durability of the in-memory catalog between application runs.
Design choices:
- JSON format (human-readable, debuggable)
- One file per snapshot, named by UTC timestamp
- Atomic writes with temporary files
"""

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from core.constants import SNAPSHOT_PREFIX, SNAPSHOT_SUFFIX, SNAPSHOT_VERSION

logger = logging.getLogger(__name__)


class PersistenceManager:
    """
    Manages persistence of catalog state to disk.

    Features:
    - Atomic writes with temporary files
    - Recovery from the latest snapshot
    """

    def __init__(self, data_dir: str = "./data"):
        """
        Initialize persistence manager.

        Args:
            data_dir: Directory for persisted data
        """
        self.data_dir = Path(data_dir)
        self.snapshots_dir = self.data_dir / "snapshots"
        self.snapshots_dir.mkdir(parents=True, exist_ok=True)

    def save_state(self, state: Dict[str, Any]) -> str:
        """
        Save complete catalog state to disk.

        Args:
            state: Mapping of repository name to list of stored roots

        Returns:
            Path to saved snapshot
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        snapshot_path = self.snapshots_dir / f"{SNAPSHOT_PREFIX}{timestamp}{SNAPSHOT_SUFFIX}"
        document = {"timestamp": timestamp, "version": SNAPSHOT_VERSION, "catalog": state}

        fd, temp_name = tempfile.mkstemp(prefix=f"{SNAPSHOT_PREFIX}{timestamp}.", dir=str(self.snapshots_dir))
        try:
            # Write and fsync to ensure durability
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, default=str)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_name, snapshot_path)
            logger.info(f"Saved snapshot to {snapshot_path}")
            return str(snapshot_path)

        except Exception as e:
            logger.error(f"Failed to save state: {e}")
            if os.path.exists(temp_name):
                os.remove(temp_name)
            raise

    def load_state(self, snapshot_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load catalog state from disk.

        Args:
            snapshot_path: Specific snapshot to load (latest if None)

        Returns:
            Loaded state, empty if no snapshot exists
        """
        if snapshot_path is None:
            snapshot_path = self._get_latest_snapshot()
            if snapshot_path is None:
                logger.warning("No snapshots found")
                return {}

        snapshot_path = Path(snapshot_path)
        if not snapshot_path.exists():
            raise ValueError(f"Snapshot not found: {snapshot_path}")

        try:
            with open(snapshot_path, "r", encoding="utf-8") as f:
                document = json.load(f)

            logger.info(f"Loaded snapshot from {snapshot_path}")
            return document.get("catalog", {})

        except Exception as e:
            logger.error(f"Failed to load state: {e}")
            raise

    def _get_latest_snapshot(self) -> Optional[Path]:
        """Get path to latest snapshot."""
        snapshots = sorted(self.snapshots_dir.glob(f"{SNAPSHOT_PREFIX}*{SNAPSHOT_SUFFIX}"))
        return snapshots[-1] if snapshots else None

    def get_statistics(self) -> Dict[str, Any]:
        """Get persistence statistics."""
        snapshots = list(self.snapshots_dir.glob(f"{SNAPSHOT_PREFIX}*{SNAPSHOT_SUFFIX}"))

        return {
            "num_snapshots": len(snapshots),
            "latest_snapshot": str(self._get_latest_snapshot()) if snapshots else None,
            "total_size_bytes": sum(f.stat().st_size for f in snapshots),
        }
