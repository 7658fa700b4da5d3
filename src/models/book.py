"""
Book-related Pydantic models for the Media Catalog API.

A BookCategory owns its books.
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Language, Movable


class Book(Movable):
    """Book inside a category."""

    author: Optional[str] = Field(None, description="Author")
    title: Optional[str] = Field(None, description="Title")
    languages: List[Language] = Field(default_factory=list, description="Languages of the book")
    note: str = Field(default="", description="Note")


class BookCategory(Movable):
    """Book category as exposed to clients (without books)."""

    name: Optional[str] = Field(None, description="Category name")
    note: str = Field(default="", description="Note")


class StoredBookCategory(BookCategory):
    """Persisted book category including its books."""

    children_field: ClassVar[Optional[str]] = "books"

    books: List[Book] = Field(default_factory=list, description="Books in the category")
