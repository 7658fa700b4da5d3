"""
In-memory repository for catalog aggregate roots.

Handles data access for every catalog kind following the repository pattern.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Optional, Type

from models.base import Movable
from .base import AlreadyExistsError, CatalogRepository, NotFoundError, T

logger = logging.getLogger(__name__)


class InMemoryCatalogRepository(CatalogRepository[T]):
    """
    In-memory implementation of a catalog repository.

    Thread-safe implementation using asyncio.Lock. Values are deep-copied
    on the way in and out, and IDs come from one sequence per model class
    (seasons and episodes of a show are numbered independently).
    """

    def __init__(self, entity_class: Type[T]):
        """
        Initialize empty repository with lock for thread safety.

        Args:
            entity_class: Model class of the stored aggregate roots
        """
        self.entity_class = entity_class
        self.entity_type = entity_class.__name__
        self._items: Dict[int, T] = {}
        self._sequences: Dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def get_all(self) -> List[T]:
        """Get copies of all aggregate roots."""
        async with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    async def get(self, entity_id: int) -> Optional[T]:
        """Get a copy of an aggregate root by ID."""
        async with self._lock:
            item = self._items.get(entity_id)
            return item.model_copy(deep=True) if item is not None else None

    async def add(self, entity: T) -> T:
        """Insert an aggregate root, generating missing IDs."""
        async with self._lock:
            if entity.id is not None and entity.id in self._items:
                raise AlreadyExistsError(self.entity_type, entity.id)

            stored = entity.model_copy(deep=True)
            self._assign_identities(stored)
            self._items[stored.id] = stored
            logger.debug(f"Added {self.entity_type} {stored.id}")

            return stored.model_copy(deep=True)

    async def update(self, entity: T) -> T:
        """Replace an aggregate root, generating missing nested IDs."""
        async with self._lock:
            if entity.id not in self._items:
                raise NotFoundError(self.entity_type, entity.id)

            stored = entity.model_copy(deep=True)
            self._assign_identities(stored)
            self._items[stored.id] = stored
            logger.debug(f"Updated {self.entity_type} {stored.id}")

            return stored.model_copy(deep=True)

    async def remove(self, entity: T) -> None:
        """Remove an aggregate root."""
        async with self._lock:
            if entity.id not in self._items:
                raise NotFoundError(self.entity_type, entity.id)

            del self._items[entity.id]
            logger.debug(f"Removed {self.entity_type} {entity.id}")

    async def save_all(self, entities: List[T]) -> List[T]:
        """Replace several aggregate roots in one step."""
        async with self._lock:
            # Check every ID first so a failure leaves storage untouched
            for entity in entities:
                if entity.id not in self._items:
                    raise NotFoundError(self.entity_type, entity.id)

            saved = []
            for entity in entities:
                stored = entity.model_copy(deep=True)
                self._assign_identities(stored)
                self._items[stored.id] = stored
                saved.append(stored.model_copy(deep=True))

            return saved

    async def remove_all(self) -> None:
        """Remove every aggregate root and reset ID sequences."""
        async with self._lock:
            self._items.clear()
            self._sequences.clear()

    async def count(self) -> int:
        """Get total count of aggregate roots."""
        async with self._lock:
            return len(self._items)

    async def load(self, entities: Iterable[T]) -> None:
        """
        Replace the whole content with already identified aggregate roots.

        ID sequences continue after the highest loaded ID of every class.

        Args:
            entities: Aggregate roots with IDs, e.g. from a snapshot
        """
        async with self._lock:
            self._items.clear()
            self._sequences.clear()
            for entity in entities:
                stored = entity.model_copy(deep=True)
                self._register_identities(stored)
                self._items[stored.id] = stored

    def _next_id(self, sequence: str) -> int:
        """Generate next ID of a sequence."""
        value = self._sequences.get(sequence, 0) + 1
        self._sequences[sequence] = value
        return value

    def _assign_identities(self, entity: Movable) -> None:
        """Generate IDs for the entity and its owned children lacking one."""
        if entity.id is None:
            entity.id = self._next_id(self._sequence_name(entity))
        for child in entity.owned_children():
            self._assign_identities(child)

    def _register_identities(self, entity: Movable) -> None:
        """Move sequences past the IDs of a loaded entity tree."""
        sequence = self._sequence_name(entity)
        if entity.id is not None:
            self._sequences[sequence] = max(self._sequences.get(sequence, 0), entity.id)
        for child in entity.owned_children():
            self._register_identities(child)

    @staticmethod
    def _sequence_name(entity: Movable) -> str:
        """Stored and exposed shapes of a kind share one sequence."""
        name = type(entity).__name__
        return name[len("Stored"):] if name.startswith("Stored") else name
