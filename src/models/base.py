"""
Base models shared by every catalog entity.

A Movable is anything with an identity and an ordering position.
"""

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field


class Language(str, Enum):
    """Languages of audio tracks, subtitles and books."""

    CZ = "CZ"
    EN = "EN"
    FR = "FR"
    JP = "JP"
    SK = "SK"


class Movable(BaseModel):
    """
    Entity with a numeric identity and a numeric ordering position.

    Siblings are presented in ascending position order. The ID is assigned
    by the repository and never changes afterwards.
    """

    # Name of the field holding owned children, None for leaf entities
    children_field: ClassVar[Optional[str]] = None

    id: Optional[int] = Field(None, description="Identifier assigned by the repository")
    position: int = Field(default=0, description="Ordering key among siblings")

    def owned_children(self) -> List["Movable"]:
        """Return the nested children owned by this entity."""
        if self.children_field is None:
            return []
        return getattr(self, self.children_field)

    def set_owned_children(self, children: List["Movable"]) -> None:
        """Replace the nested children owned by this entity."""
        if self.children_field is None:
            raise TypeError(f"{type(self).__name__} doesn't own children")
        setattr(self, self.children_field, children)
