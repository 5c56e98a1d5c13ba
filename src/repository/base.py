"""
Base repository interface and exceptions.

Defines the abstract interface for append-only, lock-guarded repositories.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Generic, Iterator, Tuple, TypeVar


# Generic type for domain models
T = TypeVar("T")


class RepositoryException(Exception):
    """
    Base exception for repository operations.

    Raising one of these inside an access window is an expected outcome and
    leaves the store usable.
    """
    pass


class AlreadyExistsError(RepositoryException):
    """Raised when an entity collides with one already stored."""

    def __init__(self, entity_type: str, field: str, value: object):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field} '{value}' already exists")


class RepositoryPoisonedError(RepositoryException):
    """Raised when a previous holder failed mid-operation and the data is suspect."""

    def __init__(self, repository_name: str):
        self.repository_name = repository_name
        super().__init__(f"{repository_name} is poisoned by an earlier failure")


class HandleClosedError(RepositoryException):
    """Raised when a collection handle is used after its access window ended."""
    pass


class CollectionHandle(ABC, Generic[T]):
    """
    Scoped view of a repository's collection.

    Only valid between acquisition and release of exclusive access.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate all entities in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def append(self, entity: T) -> T:
        """
        Append one entity to the end of the collection.

        Args:
            entity: The entity to store

        Returns:
            The stored entity
        """
        pass


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository interface.

    All access goes through ``acquire``, which serializes callers.
    """

    @abstractmethod
    def acquire(self) -> AsyncContextManager[CollectionHandle[T]]:
        """
        Wait for exclusive access to the collection.

        Returns:
            Async context manager yielding a handle; access is released on
            every exit path

        Raises:
            RepositoryPoisonedError: If an earlier holder failed mid-operation
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Get the total count of entities.

        Returns:
            Total number of entities
        """
        pass

    @abstractmethod
    async def snapshot(self) -> Tuple[T, ...]:
        """
        Copy all entities in insertion order.

        Returns:
            Immutable tuple of entities
        """
        pass

    @property
    @abstractmethod
    def is_poisoned(self) -> bool:
        pass
