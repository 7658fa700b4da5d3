"""
Genre-related Pydantic models for the Media Catalog API.

Genres are referenced by movies and shows.
"""

from typing import Optional

from pydantic import Field

from .base import Movable


class Genre(Movable):
    """Genre of movies and shows."""

    name: Optional[str] = Field(None, description="Genre name")

    class Config:
        """Pydantic configuration."""

        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Drama",
                "position": 0
            }
        }
