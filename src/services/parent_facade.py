"""
Facade for catalog kinds stored as aggregate roots.

Every mutating operation validates fully first and touches the repository
only when validation produced no error.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from core.constants import ERROR_ID_NULL, ERROR_UNKNOWN_CHILD, MESSAGE_ID_NULL
from models.base import Movable
from models.result import Result
from repository.base import CatalogRepository
from . import ordering
from .converter import Converter
from .exceptions import CatalogConsistencyError
from .validators import CatalogValidator, ValidationType

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Movable)
D = TypeVar("D", bound=Movable)


class ParentFacade(Generic[E, D]):
    """
    Facade for one kind of aggregate roots.

    Clients exchange entities of entity_class; the repository stores
    domain_class, which may additionally carry nested children.
    """

    def __init__(
        self,
        repository: CatalogRepository[D],
        converter: Converter,
        validator: CatalogValidator,
        entity_class: Type[E],
        domain_class: Type[D],
    ):
        """
        Initialize parent facade.

        Args:
            repository: Repository of the aggregate roots
            converter: Converter between entities and domain data
            validator: Validator of the kind
            entity_class: Client-facing model class
            domain_class: Stored model class
        """
        self.repository = repository
        self.converter = converter
        self.validator = validator
        self.entity_class = entity_class
        self.domain_class = domain_class
        self.name = validator.name

    async def new_data(self) -> Result:
        """Remove every aggregate root of the kind."""
        await self.repository.remove_all()
        logger.info(f"Cleared all data of {self.name}")
        return Result()

    async def get_all(self) -> Result:
        """Return all entities in presentation order."""
        roots = ordering.sort_by_position(await self.repository.get_all())
        return Result.of(self.converter.convert_collection(roots, self.entity_class))

    async def get(self, entity_id: Optional[int]) -> Result:
        """
        Return entity by ID.

        Absence isn't an error: the result then holds no data.
        """
        if entity_id is None:
            return Result.error(ERROR_ID_NULL, MESSAGE_ID_NULL)

        stored = await self.repository.get(entity_id)
        if stored is None:
            return Result.of(None)
        return Result.of(self.converter.to_external(stored, self.entity_class))

    async def add(self, data: Optional[E]) -> Result:
        """
        Add a new entity.

        The repository generates the ID, the position is then derived from
        it. Generated ID and position are written back to data.
        """
        result = await self.validator.validate(data, ValidationType.NEW, ValidationType.DEEP)
        if not result.is_ok:
            return result

        saved = await self._insert(self.converter.to_domain(data, self.domain_class))
        data.id = saved.id
        data.position = saved.position
        logger.info(f"Added {self.name} {saved.id}")

        result.data = self.converter.to_external(saved, self.entity_class)
        return result

    async def update(self, data: Optional[E]) -> Result:
        """
        Replace every field of an existing entity.

        The stored position and nested children are kept.
        """
        result = await self.validator.validate(data, ValidationType.EXISTS, ValidationType.DEEP)
        if not result.is_ok:
            return result

        stored = await self._stored(data.id)
        await self.repository.update(self.converter.to_domain(data, self.domain_class, base=stored))
        logger.info(f"Updated {self.name} {data.id}")

        return result

    async def remove(self, data: Optional[E]) -> Result:
        """Remove an existing entity with all its nested children."""
        result = await self.validator.validate(data, ValidationType.EXISTS)
        if not result.is_ok:
            return result

        await self.repository.remove(await self._stored(data.id))
        logger.info(f"Removed {self.name} {data.id}")

        return result

    async def duplicate(self, data: Optional[E]) -> Result:
        """
        Add a copy of an existing entity including its nested children.

        The copy lands at the end of the insertion order, not next to
        the source.
        """
        result = await self.validator.validate(data, ValidationType.EXISTS)
        if not result.is_ok:
            return result

        saved = await self._insert(ordering.clone(await self._stored(data.id)))
        logger.info(f"Duplicated {self.name} {data.id} as {saved.id}")

        result.data = self.converter.to_external(saved, self.entity_class)
        return result

    async def move_up(self, data: Optional[E]) -> Result:
        """Swap position of entity with its predecessor."""
        return await self._move(data, ordering.Direction.UP)

    async def move_down(self, data: Optional[E]) -> Result:
        """Swap position of entity with its successor."""
        return await self._move(data, ordering.Direction.DOWN)

    async def update_positions(self) -> Result:
        """Compact positions of all entities and of their nested children."""
        roots = await self.repository.get_all()
        ordering.reindex_tree(roots)
        await self.repository.save_all(roots)
        logger.info(f"Updated positions of {len(roots)} {self.name} entities")
        return Result()

    async def _move(self, data: Optional[E], direction: ordering.Direction) -> Result:
        result = await self.validator.validate(data, ValidationType.EXISTS, ValidationType(direction.value))
        if not result.is_ok:
            return result

        roots: List[D] = await self.repository.get_all()
        stored = next((root for root in roots if root.id == data.id), None)
        if stored is None:
            raise CatalogConsistencyError(ERROR_UNKNOWN_CHILD.format(kind=self.name.lower(), entity_id=data.id))

        current, other = ordering.move(stored, direction, roots)
        await self.repository.update(current)
        await self.repository.update(other)
        logger.info(f"Moved {self.name} {current.id} {direction.value.lower()} (swapped with {other.id})")

        return result

    async def _insert(self, domain: D) -> D:
        """Insert, then persist the position derived from the generated ID."""
        saved = await self.repository.add(domain)
        ordering.assign_position(saved)
        return await self.repository.update(saved)

    async def _stored(self, entity_id: int) -> D:
        stored = await self.repository.get(entity_id)
        if stored is None:
            raise CatalogConsistencyError(ERROR_UNKNOWN_CHILD.format(kind=self.name.lower(), entity_id=entity_id))
        return stored
