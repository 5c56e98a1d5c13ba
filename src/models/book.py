"""
Book-related Pydantic models for the Books API.

A Book is created once through the API and never changes afterwards.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Page counts are 32-bit signed integers on the wire
PAGES_MIN = -(2**31)
PAGES_MAX = 2**31 - 1


class BookCreate(BaseModel):
    """
    Model for creating a new book.

    Every field may be missing or null on the wire; presence is checked by
    the service, not here. Types are strict so that ``"412"`` is rejected
    instead of being coerced into a page count, and page counts outside
    the 32-bit range are rejected as undecodable.
    """

    title: Optional[StrictStr] = Field(None, description="Book title, unique")
    author: Optional[StrictStr] = Field(None, description="Book author")
    pages: Optional[StrictInt] = Field(
        None, description="Number of pages", ge=PAGES_MIN, le=PAGES_MAX
    )

    def has_all_fields(self) -> bool:
        return self.title is not None and self.author is not None and self.pages is not None


class Book(BaseModel):
    """Complete book model as stored in the repository."""

    id: UUID = Field(description="Unique identifier for the book")
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    pages: int = Field(description="Number of pages")
    created_at: datetime = Field(alias="createdAt", description="Creation instant")
    updated_at: datetime = Field(alias="updatedAt", description="Last update instant")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "5f0c7d4e-8a51-4a0e-9a39-7f6a3a0f3b11",
                "title": "Dune",
                "author": "Herbert",
                "pages": 412,
                "createdAt": "2023-01-01T00:00:00+00:00",
                "updatedAt": "2023-01-01T00:00:00+00:00",
            }
        },
    )
