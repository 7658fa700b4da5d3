"""
Game-related Pydantic models for the Media Catalog API.
"""

from typing import Optional

from pydantic import Field

from .base import Movable


class Game(Movable):
    """Game with its extras."""

    name: Optional[str] = Field(None, description="Game name")
    wiki_en: str = Field(default="", description="URL to English Wikipedia page")
    wiki_cz: str = Field(default="", description="URL to Czech Wikipedia page")
    media_count: int = Field(default=0, description="Count of media")
    crack: bool = Field(default=False, description="Whether game has crack")
    serial_key: bool = Field(default=False, description="Whether game has serial key")
    patch: bool = Field(default=False, description="Whether game has patch")
    trainer: bool = Field(default=False, description="Whether game has trainer")
    trainer_data: bool = Field(default=False, description="Whether game has data for trainer")
    editor: bool = Field(default=False, description="Whether game has editor")
    saves: bool = Field(default=False, description="Whether game has saves")
    other_data: str = Field(default="", description="Other data")
    note: str = Field(default="", description="Note")
