"""
Base repository interface and exceptions.

Defines the abstract interface for all catalog repositories. A repository
persists whole aggregate roots; nested children are persisted by writing
back their root.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


# Generic type for aggregate roots
T = TypeVar("T")


class RepositoryException(Exception):
    """Base exception for repository operations."""
    pass


class NotFoundError(RepositoryException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Optional[int]):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class AlreadyExistsError(RepositoryException):
    """Raised when attempting to add an entity that already exists."""

    def __init__(self, entity_type: str, entity_id: Optional[int]):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} already exists")


class CatalogRepository(ABC, Generic[T]):
    """
    Abstract repository for one kind of aggregate root.

    Returned values are owned by the caller; mutating them never changes
    stored data until they are written back.
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """
        Get all aggregate roots.

        Returns:
            List of aggregate roots in insertion order
        """
        pass

    @abstractmethod
    async def get(self, entity_id: int) -> Optional[T]:
        """
        Get an aggregate root by ID.

        Args:
            entity_id: The ID of the aggregate root

        Returns:
            The aggregate root if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Insert a new aggregate root.

        Generates IDs for the root and every nested child without one.

        Args:
            entity: The aggregate root to insert

        Returns:
            The stored aggregate root with generated IDs

        Raises:
            AlreadyExistsError: If the root ID is already stored
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Replace an existing aggregate root.

        Generates IDs for nested children without one.

        Args:
            entity: The aggregate root to store

        Returns:
            The stored aggregate root with generated IDs

        Raises:
            NotFoundError: If the aggregate root does not exist
        """
        pass

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """
        Remove an aggregate root with all its nested children.

        Raises:
            NotFoundError: If the aggregate root does not exist
        """
        pass

    @abstractmethod
    async def save_all(self, entities: List[T]) -> List[T]:
        """
        Replace several existing aggregate roots at once.

        Raises:
            NotFoundError: If any aggregate root does not exist
        """
        pass

    @abstractmethod
    async def remove_all(self) -> None:
        """Remove every aggregate root."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Get the total count of aggregate roots.

        Returns:
            Total number of aggregate roots
        """
        pass
