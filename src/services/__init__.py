"""
Service layer for the Media Catalog API.

This module implements the ordering engine, validation and the facades
through which every catalog kind is managed.
"""

from .catalog import Catalog
from .child_facade import ChildFacade
from .converter import Converter
from .exceptions import CatalogConsistencyError
from .parent_facade import ParentFacade
from .statistics import StatisticsService

__all__ = [
    "Catalog",
    "ChildFacade",
    "Converter",
    "CatalogConsistencyError",
    "ParentFacade",
    "StatisticsService",
]
