"""
Ordering engine for movable entities.

Implements position assignment on add, reindexing of sibling sets,
the up/down swap used by move operations and cloning for duplicates.
All functions work on in-memory sibling lists and never touch storage.
"""

import sys
from enum import Enum
from typing import List, Sequence, Tuple, TypeVar

from models.base import Movable

M = TypeVar("M", bound=Movable)


class Direction(str, Enum):
    """Direction of a move operation."""

    UP = "UP"
    DOWN = "DOWN"


def position_key(item: Movable) -> Tuple[int, int]:
    """Sort key: position first, ID breaks ties, unsaved items last."""
    return item.position, item.id if item.id is not None else sys.maxsize


def sort_by_position(items: Sequence[M]) -> List[M]:
    """Return siblings in presentation order."""
    return sorted(items, key=position_key)


def assign_position(entity: Movable) -> None:
    """
    Derive the position of a freshly persisted entity from its ID.

    Insertion order equals positional order without a max-position query.

    Raises:
        ValueError: If the entity has no generated ID yet
    """
    if entity.id is None:
        raise ValueError("Position can be assigned only to persisted entity")
    entity.position = entity.id - 1


def reindex(items: Sequence[M]) -> List[M]:
    """
    Reassign compact positions 0..n-1 following the current order.

    Items are mutated in place; the sorted list is returned.
    """
    ordered = sort_by_position(items)
    for index, item in enumerate(ordered):
        item.position = index
    return ordered


def reindex_tree(items: Sequence[M]) -> List[M]:
    """Reindex siblings and, recursively, the children each of them owns."""
    ordered = reindex(items)
    for item in ordered:
        children = item.owned_children()
        if children:
            reindex_tree(children)
    return ordered


def index_of(entity: Movable, siblings: Sequence[M]) -> int:
    """
    Find index of entity (matched by ID) in presentation order.

    Raises:
        ValueError: If the entity isn't among the siblings
    """
    for index, item in enumerate(sort_by_position(siblings)):
        if item.id == entity.id:
            return index
    raise ValueError(f"{type(entity).__name__} with ID {entity.id} isn't among siblings")


def can_move(entity: Movable, direction: Direction, siblings: Sequence[M]) -> bool:
    """Whether entity has a neighbour in the given direction."""
    index = index_of(entity, siblings)
    if direction == Direction.UP:
        return index > 0
    return index < len(siblings) - 1


def move(entity: Movable, direction: Direction, siblings: Sequence[M]) -> Tuple[M, M]:
    """
    Swap positions of entity and its neighbour in the given direction.

    Only the two returned siblings change; the multiset of positions in
    the sibling set stays the same.

    Args:
        entity: Entity to move, matched by ID
        direction: UP or DOWN
        siblings: Full sibling set including the entity

    Returns:
        Tuple of (moved sibling, swapped neighbour)

    Raises:
        ValueError: If entity is at the boundary; validation must reject
            such moves before calling this function
    """
    ordered = sort_by_position(siblings)
    index = index_of(entity, ordered)
    other_index = index - 1 if direction == Direction.UP else index + 1
    if other_index < 0 or other_index >= len(ordered):
        raise ValueError(f"{type(entity).__name__} with ID {entity.id} can't be moved {direction.value.lower()}")

    current = ordered[index]
    other = ordered[other_index]
    current.position, other.position = other.position, current.position

    return current, other


def clone(entity: M) -> M:
    """
    Copy entity with all its owned children, clearing every identity.

    Positions are copied unchanged; the caller decides the position of
    the clone itself.
    """
    copy = entity.model_copy(deep=True)
    _clear_identities(copy)
    return copy


def _clear_identities(entity: Movable) -> None:
    entity.id = None
    for child in entity.owned_children():
        _clear_identities(child)
