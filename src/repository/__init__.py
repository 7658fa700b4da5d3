"""
Repository layer for Media Catalog API.

This module implements the repository pattern for data access,
following Domain-Driven Design principles.
"""

from .base import CatalogRepository, RepositoryException, NotFoundError, AlreadyExistsError
from .catalog_repository import InMemoryCatalogRepository

__all__ = [
    "CatalogRepository",
    "RepositoryException",
    "NotFoundError",
    "AlreadyExistsError",
    "InMemoryCatalogRepository",
]
