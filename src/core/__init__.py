"""
Core utilities and constants for the Media Catalog API.

Contains shared constants, configurations, and utility functions.
"""

from .constants import *

__all__ = [
    # Export all constants for easy import
    "API_TITLE",
    "API_VERSION",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "MIN_YEAR",
    "CURRENT_YEAR",
    "MAX_IMDB_CODE",
    "STARTUP_MESSAGE",
    "SHUTDOWN_MESSAGE",
    # ... other constants available for import
]
