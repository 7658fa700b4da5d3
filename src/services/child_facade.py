"""
Facade for catalog kinds nested inside aggregate roots.

Children are never persisted on their own: every mutation locates the
owning aggregate root, changes it locally and writes the whole root back.
"""

import logging
from typing import List, Optional, Set

from core.constants import ERROR_ID_NOT_GENERATED, ERROR_ID_NULL, MESSAGE_ID_NULL
from models.base import Movable
from models.result import Result
from repository.base import CatalogRepository
from . import ordering
from .converter import Converter
from .exceptions import CatalogConsistencyError
from .kinds import AggregateIndex, ChildKind
from .validators import CatalogValidator, ValidationType

logger = logging.getLogger(__name__)


class ChildFacade:
    """
    Facade for one nested kind, configured by a ChildKind.

    Args:
        repository: Repository of the aggregate roots holding the children
        converter: Converter between entities and domain data
        parent_validator: Validator of the direct parent kind
        validator: Validator of the child kind
        kind: Where the children live inside a root
    """

    def __init__(
        self,
        repository: CatalogRepository,
        converter: Converter,
        parent_validator: CatalogValidator,
        validator: CatalogValidator,
        kind: ChildKind,
    ):
        self.repository = repository
        self.converter = converter
        self.parent_validator = parent_validator
        self.validator = validator
        self.kind = kind
        self.name = validator.name

    async def get(self, entity_id: Optional[int]) -> Result:
        """Return child by ID; absence is a valid outcome."""
        if entity_id is None:
            return Result.error(ERROR_ID_NULL, MESSAGE_ID_NULL)

        child = await self.get_domain_data(entity_id)
        if child is None:
            return Result.of(None)
        return Result.of(self.converter.to_external(child, self.kind.entity_class))

    async def get_domain_data(self, entity_id: int) -> Optional[Movable]:
        """Scan every aggregate root for the stored child with the ID."""
        index = await AggregateIndex.load(self.repository, self.kind)
        found = index.find_child(entity_id)
        return found[2] if found is not None else None

    async def find(self, parent: Optional[Movable]) -> Result:
        """Return children of parent in presentation order."""
        result = await self.parent_validator.validate(parent, ValidationType.EXISTS)
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        _, owner = index.owner(parent.id)
        children = ordering.sort_by_position(owner.owned_children())
        result.data = self.converter.convert_collection(children, self.kind.entity_class)
        return result

    async def add(self, parent: Optional[Movable], data: Optional[Movable]) -> Result:
        """
        Append a new child to parent.

        Generated ID and position are written back to data.
        """
        result = await self.parent_validator.validate(parent, ValidationType.EXISTS)
        result.add_events((await self.validator.validate(data, ValidationType.NEW, ValidationType.DEEP)).events)
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        root, owner = index.owner(parent.id)
        added = await self._append(root, owner, self.converter.to_domain(data, self.kind.domain_class))
        data.id = added.id
        data.position = added.position
        logger.info(f"Added {self.name} {added.id} to parent {parent.id}")

        result.data = self.converter.to_external(added, self.kind.entity_class)
        return result

    async def update(self, data: Optional[Movable]) -> Result:
        """Replace fields of a child, keeping its position and nested children."""
        result = await self.validator.validate(data, ValidationType.EXISTS, ValidationType.DEEP)
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        root, owner, stored = index.child(data.id)
        replacement = self.converter.to_domain(data, self.kind.domain_class, base=stored)
        owner.set_owned_children(
            [replacement if child.id == data.id else child for child in owner.owned_children()]
        )
        await self.repository.update(root)
        logger.info(f"Updated {self.name} {data.id}")

        return result

    async def remove(self, data: Optional[Movable]) -> Result:
        """Remove a child from its parent."""
        result = await self.validator.validate(data, ValidationType.EXISTS)
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        root, owner, _ = index.child(data.id)
        owner.set_owned_children([child for child in owner.owned_children() if child.id != data.id])
        await self.repository.update(root)
        logger.info(f"Removed {self.name} {data.id}")

        return result

    async def duplicate(self, data: Optional[Movable]) -> Result:
        """Append a copy of a child to the same parent."""
        result = await self.validator.validate(data, ValidationType.EXISTS)
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        root, owner, stored = index.child(data.id)
        added = await self._append(root, owner, ordering.clone(stored))
        logger.info(f"Duplicated {self.name} {data.id} as {added.id}")

        result.data = self.converter.to_external(added, self.kind.entity_class)
        return result

    async def move_up(self, data: Optional[Movable]) -> Result:
        """Swap position of child with its predecessor among the parent's children."""
        return await self._move(data, ordering.Direction.UP)

    async def move_down(self, data: Optional[Movable]) -> Result:
        """Swap position of child with its successor among the parent's children."""
        return await self._move(data, ordering.Direction.DOWN)

    async def _move(self, data: Optional[Movable], direction: ordering.Direction) -> Result:
        result = await self.validator.validate(data, ValidationType.EXISTS, ValidationType(direction.value))
        if not result.is_ok:
            return result

        index = await AggregateIndex.load(self.repository, self.kind)
        root, owner, stored = index.child(data.id)
        current, other = ordering.move(stored, direction, owner.owned_children())
        await self.repository.update(root)
        logger.info(f"Moved {self.name} {current.id} {direction.value.lower()} (swapped with {other.id})")

        return result

    async def _append(self, root: Movable, owner: Movable, child: Movable) -> Movable:
        """
        Append child to owner and persist the root twice: once to generate
        the ID, once more with the position derived from it.
        """
        known_ids: Set[int] = {sibling.id for sibling in owner.owned_children()}
        owner.owned_children().append(child)
        saved_root = await self.repository.update(root)

        _, saved_owner = AggregateIndex([saved_root], self.kind).owner(owner.id)
        added = self._new_child(saved_owner.owned_children(), known_ids)
        ordering.assign_position(added)
        await self.repository.update(saved_root)

        return added

    def _new_child(self, children: List[Movable], known_ids: Set[int]) -> Movable:
        for child in children:
            if child.id not in known_ids:
                return child
        raise CatalogConsistencyError(ERROR_ID_NOT_GENERATED.format(kind=self.name.lower()))
