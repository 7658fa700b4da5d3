"""
Program-related Pydantic models for the Media Catalog API.
"""

from typing import Optional

from pydantic import Field

from .base import Movable


class Program(Movable):
    """Software program."""

    name: Optional[str] = Field(None, description="Program name")
    wiki_en: str = Field(default="", description="URL to English Wikipedia page")
    wiki_cz: str = Field(default="", description="URL to Czech Wikipedia page")
    media_count: int = Field(default=0, description="Count of media")
    crack: bool = Field(default=False, description="Whether program has crack")
    serial_key: bool = Field(default=False, description="Whether program has serial key")
    other_data: str = Field(default="", description="Other data")
    note: str = Field(default="", description="Note")
