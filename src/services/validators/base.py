"""
Phase-based validation of catalog entities.

A validator checks an entity in the requested phases and collects every
problem as an event. Lookups of stored data go through a MovableSource so
the same validator logic serves aggregate roots and nested children.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from core.constants import (
    SUFFIX_ID_NOT_NULL,
    SUFFIX_ID_NULL,
    SUFFIX_NOT_EXIST,
    SUFFIX_NOT_MOVABLE,
    SUFFIX_NULL,
)
from models.base import Movable
from models.result import Result
from repository.base import CatalogRepository
from .. import ordering
from ..kinds import AggregateIndex, ChildKind

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Movable)


class ValidationType(str, Enum):
    """Validation phases."""

    NEW = "NEW"
    EXISTS = "EXISTS"
    UP = "UP"
    DOWN = "DOWN"
    DEEP = "DEEP"


class MovableSource(ABC):
    """Read access to stored entities of one kind."""

    @abstractmethod
    async def get(self, entity_id: int) -> Optional[Movable]:
        """Get stored entity or None."""
        pass

    @abstractmethod
    async def siblings(self, entity_id: int) -> List[Movable]:
        """Get the full sibling set of a stored entity, including it."""
        pass


class RepositorySource(MovableSource):
    """Source for aggregate roots stored directly in a repository."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    async def get(self, entity_id: int) -> Optional[Movable]:
        return await self.repository.get(entity_id)

    async def siblings(self, entity_id: int) -> List[Movable]:
        return await self.repository.get_all()


class ChildSource(MovableSource):
    """Source for children nested inside aggregate roots of a repository."""

    def __init__(self, repository: CatalogRepository, kind: ChildKind):
        self.repository = repository
        self.kind = kind

    async def get(self, entity_id: int) -> Optional[Movable]:
        index = await AggregateIndex.load(self.repository, self.kind)
        found = index.find_child(entity_id)
        return found[2] if found is not None else None

    async def siblings(self, entity_id: int) -> List[Movable]:
        index = await AggregateIndex.load(self.repository, self.kind)
        found = index.find_child(entity_id)
        return list(found[1].owned_children()) if found is not None else []


class CatalogValidator(Generic[E]):
    """
    Validator of one catalog kind.

    NEW, EXISTS, UP and DOWN are common to every kind; DEEP delegates to
    validate_deep, which kinds override with their field rules.
    """

    def __init__(self, name: str, source: MovableSource):
        """
        Initialize validator.

        Args:
            name: Human readable kind name, e.g. "Book category"
            source: Lookup of stored entities of the kind
        """
        self.name = name
        self.prefix = name.upper().replace(" ", "_")
        self.source = source

    async def validate(self, data: Optional[E], *validation_types: ValidationType) -> Result:
        """
        Validate data in the given phases.

        Args:
            data: Entity to validate
            validation_types: Phases to run

        Returns:
            Result with every collected event
        """
        result = Result()
        if data is None:
            result.add_error(self.prefix + SUFFIX_NULL, f"{self.name} mustn't be null.")
            return result

        types = set(validation_types)
        if ValidationType.NEW in types:
            self._validate_new(data, result)
        if ValidationType.EXISTS in types:
            await self._validate_exists(data, result)
        if ValidationType.DEEP in types:
            await self.validate_deep(data, result)
        if ValidationType.UP in types:
            await self._validate_moving(data, ordering.Direction.UP, result)
        if ValidationType.DOWN in types:
            await self._validate_moving(data, ordering.Direction.DOWN, result)

        if not result.is_ok:
            logger.debug(f"{self.name} rejected: {[event.key for event in result.events]}")
        return result

    async def validate_deep(self, data: E, result: Result) -> None:
        """Check field rules of the kind; override in subclasses."""
        pass

    def _validate_new(self, data: E, result: Result) -> None:
        if data.id is not None:
            result.add_error(self.prefix + SUFFIX_ID_NOT_NULL, "ID must be null.")

    async def _validate_exists(self, data: E, result: Result) -> None:
        if data.id is None:
            result.add_error(self.prefix + SUFFIX_ID_NULL, "ID mustn't be null.")
        elif await self.source.get(data.id) is None:
            result.add_error(self.prefix + SUFFIX_NOT_EXIST, f"{self.name} doesn't exist.")

    async def _validate_moving(self, data: E, direction: ordering.Direction, result: Result) -> None:
        # Missing or unknown IDs are reported by the EXISTS phase
        if data.id is None:
            return
        stored = await self.source.get(data.id)
        if stored is None:
            return

        siblings = await self.source.siblings(data.id)
        if not ordering.can_move(stored, direction, siblings):
            result.add_error(
                self.prefix + SUFFIX_NOT_MOVABLE,
                f"{self.name} can't be moved {direction.value.lower()}.",
            )

    def check_text(self, value: Optional[str], result: Result, key: str, label: str) -> None:
        """Report null or blank text field."""
        if value is None:
            result.add_error(f"{self.prefix}_{key}_NULL", f"{label} mustn't be null.")
        elif not value.strip():
            result.add_error(f"{self.prefix}_{key}_EMPTY", f"{label} mustn't be empty string.")

    def check_positive(self, value: int, result: Result, key: str, label: str) -> None:
        """Report non-positive number."""
        if value <= 0:
            result.add_error(f"{self.prefix}_{key}_NOT_POSITIVE", f"{label} must be positive number.")

    def check_not_negative(self, value: int, result: Result, key: str, label: str) -> None:
        """Report negative number."""
        if value < 0:
            result.add_error(f"{self.prefix}_{key}_NEGATIVE", f"{label} mustn't be negative number.")
