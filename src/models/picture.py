"""
Picture-related Pydantic models for the Media Catalog API.

Pictures are referenced by movies and shows through their ID.
"""

from typing import Optional

from pydantic import Field

from .base import Movable


class Picture(Movable):
    """Picture with base64 encoded content."""

    content: Optional[str] = Field(None, description="Base64 encoded picture content")
