"""
Repository layer for the Books API.

This module implements the repository pattern for data access,
following Domain-Driven Design principles.
"""

from .base import (
    BaseRepository,
    CollectionHandle,
    RepositoryException,
    AlreadyExistsError,
    HandleClosedError,
    RepositoryPoisonedError,
)
from .book_repository import BookCollectionHandle, InMemoryBookRepository

__all__ = [
    "BaseRepository",
    "CollectionHandle",
    "RepositoryException",
    "AlreadyExistsError",
    "HandleClosedError",
    "RepositoryPoisonedError",
    "BookCollectionHandle",
    "InMemoryBookRepository",
]
