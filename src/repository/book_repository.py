"""
Repository for Book entities.

Holds every book in an append-only list guarded by a single lock.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterator, List, Optional, Tuple

from models.book import Book
from .base import (
    BaseRepository,
    CollectionHandle,
    HandleClosedError,
    RepositoryException,
    RepositoryPoisonedError,
)

logger = logging.getLogger(__name__)


class BookCollectionHandle(CollectionHandle[Book]):
    """Access to the book list for the duration of one ``acquire`` window."""

    def __init__(self, books: List[Book]):
        self._books = books
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise HandleClosedError("Book collection handle used after release")

    def __iter__(self) -> Iterator[Book]:
        self._ensure_open()
        return iter(self._books)

    def __len__(self) -> int:
        self._ensure_open()
        return len(self._books)

    def find_by_title(self, title: str) -> Optional[Book]:
        """
        Find a book by exact, case-sensitive title.

        Args:
            title: The title to look for

        Returns:
            The first matching book, None if there is none
        """
        self._ensure_open()
        for book in self._books:
            if book.title == title:
                return book
        return None

    def append(self, entity: Book) -> Book:
        self._ensure_open()
        self._books.append(entity)
        return entity

    def close(self) -> None:
        self._closed = True


class InMemoryBookRepository(BaseRepository[Book]):
    """
    In-memory implementation of Book repository.

    Thread-safe implementation using asyncio.Lock. Any exception other than
    a RepositoryException escaping an access window poisons the repository,
    after which every access fails instead of exposing suspect data.
    """

    def __init__(self):
        """Initialize empty repository with lock for thread safety."""
        self._books: List[Book] = []
        self._lock = asyncio.Lock()
        self._poisoned = False

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[BookCollectionHandle]:
        """Wait for exclusive access and yield a handle on the book list."""
        async with self._lock:
            if self._poisoned:
                raise RepositoryPoisonedError("BookRepository")

            handle = BookCollectionHandle(self._books)
            try:
                yield handle
            except RepositoryException:
                raise
            except Exception:
                self._poisoned = True
                logger.exception("Book repository poisoned by a failed holder")
                raise
            finally:
                handle.close()

    async def count(self) -> int:
        """Get total count of books."""
        async with self.acquire() as books:
            return len(books)

    async def snapshot(self) -> Tuple[Book, ...]:
        """Copy all books in insertion order."""
        async with self.acquire() as books:
            return tuple(books)
