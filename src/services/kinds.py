"""
Configuration of catalog kinds nested inside aggregate roots.

A ChildKind says where children of one kind live inside a root: which
entities inside the root own such children. The AggregateIndex built from
one fetched set of roots answers "who owns child X" without rescanning.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type

from core.constants import ERROR_UNKNOWN_CHILD, ERROR_UNKNOWN_PARENT
from models.base import Movable
from models.book import Book
from models.music import Song
from models.show import Episode, Season, StoredSeason
from repository.base import CatalogRepository
from .exceptions import CatalogConsistencyError


@dataclass(frozen=True)
class ChildKind:
    """
    Nested kind configuration.

    Attributes:
        name: Human readable kind name used in messages
        entity_class: Client-facing model class
        domain_class: Stored model class
        owners: Returns the entities inside a root that own children of
            this kind (the root itself for seasons, its seasons for episodes)
    """

    name: str
    entity_class: Type[Movable]
    domain_class: Type[Movable]
    owners: Callable[[Movable], Iterable[Movable]]


def _root_itself(root: Movable) -> Iterable[Movable]:
    return [root]


def _seasons_of_show(show: Movable) -> Iterable[Movable]:
    return show.owned_children()


SEASON_KIND = ChildKind("Season", Season, StoredSeason, _root_itself)
EPISODE_KIND = ChildKind("Episode", Episode, Episode, _seasons_of_show)
SONG_KIND = ChildKind("Song", Song, Song, _root_itself)
BOOK_KIND = ChildKind("Book", Book, Book, _root_itself)


class AggregateIndex:
    """
    Lookup of owners and children over one fetched set of aggregate roots.

    Built once per operation; values point into the fetched roots, so
    mutating a found child mutates the root that will be written back.
    """

    def __init__(self, roots: List[Movable], kind: ChildKind):
        self.roots = roots
        self.kind = kind
        self._owners: Dict[int, Tuple[Movable, Movable]] = {}
        self._children: Dict[int, Tuple[Movable, Movable, Movable]] = {}

        for root in roots:
            for owner in kind.owners(root):
                self._owners[owner.id] = (root, owner)
                for child in owner.owned_children():
                    self._children[child.id] = (root, owner, child)

    @classmethod
    async def load(cls, repository: CatalogRepository, kind: ChildKind) -> "AggregateIndex":
        """Fetch every root from repository and index it."""
        return cls(await repository.get_all(), kind)

    def find_child(self, child_id: int) -> Optional[Tuple[Movable, Movable, Movable]]:
        """Return (root, owner, child) or None when no owner holds the child."""
        return self._children.get(child_id)

    def find_owner(self, owner_id: int) -> Optional[Tuple[Movable, Movable]]:
        """Return (root, owner) or None."""
        return self._owners.get(owner_id)

    def child(self, child_id: int) -> Tuple[Movable, Movable, Movable]:
        """
        Return (root, owner, child) of a child confirmed to exist.

        Raises:
            CatalogConsistencyError: If no owner holds the child
        """
        found = self.find_child(child_id)
        if found is None:
            raise CatalogConsistencyError(
                ERROR_UNKNOWN_CHILD.format(kind=self.kind.name.lower(), entity_id=child_id)
            )
        return found

    def owner(self, owner_id: int) -> Tuple[Movable, Movable]:
        """
        Return (root, owner) of an owner confirmed to exist.

        Raises:
            CatalogConsistencyError: If the owner isn't found
        """
        found = self.find_owner(owner_id)
        if found is None:
            raise CatalogConsistencyError(
                ERROR_UNKNOWN_PARENT.format(kind=self.kind.name.lower(), entity_id=owner_id)
            )
        return found

    def children(self) -> List[Movable]:
        """All indexed children."""
        return [child for _, _, child in self._children.values()]
