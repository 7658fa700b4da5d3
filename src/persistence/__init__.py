"""
Persistence module for the media catalog.

Provides durability and recovery capabilities.
"""

from .persistence_manager import PersistenceManager

__all__ = ["PersistenceManager"]
