"""
FastAPI dependencies for dependency injection.

Provides the catalog instance shared by every router.
"""

from services.catalog import Catalog

# Create catalog instance (singleton for in-memory storage)
_catalog = Catalog()


def get_catalog() -> Catalog:
    """Get catalog instance."""
    return _catalog
