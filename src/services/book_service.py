"""
Book service for business logic.

Handles validation, title uniqueness and construction of new books.
"""

import logging
from datetime import datetime
from uuid import uuid4

from models.book import Book, BookCreate
from repository import AlreadyExistsError, InMemoryBookRepository

logger = logging.getLogger(__name__)


class BookServiceError(Exception):
    """Base exception for book workflow failures."""
    pass


class InvalidBookParamsError(BookServiceError):
    """Raised when a required field of a creation request is missing."""

    def __init__(self, missing_fields):
        self.missing_fields = tuple(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class BookAlreadyExistsError(BookServiceError, AlreadyExistsError):
    """Raised when a book with the same title is already stored."""

    def __init__(self, title: str):
        self.title = title
        AlreadyExistsError.__init__(self, "Book", "title", title)


REQUIRED_FIELDS = ("title", "author", "pages")


class BookService:
    """
    Service for book operations.

    Orchestrates the validate, check and insert steps of book creation.
    """

    def __init__(self, book_repo: InMemoryBookRepository):
        """
        Initialize book service.

        Args:
            book_repo: Book repository instance
        """
        self.book_repo = book_repo

    @staticmethod
    def validate_create_request(book_data: BookCreate) -> None:
        """
        Reject requests that miss any of title, author or pages.

        Raises:
            InvalidBookParamsError: If a field is absent or null
        """
        if book_data.has_all_fields():
            return

        missing = [name for name in REQUIRED_FIELDS if getattr(book_data, name) is None]
        logger.debug(f"Rejected book creation, missing fields: {missing}")
        raise InvalidBookParamsError(missing)

    async def create_book(self, book_data: BookCreate) -> Book:
        """
        Create a new book.

        The duplicate check and the insert share one access window so two
        concurrent requests for the same title cannot both succeed.

        Args:
            book_data: Book creation data

        Returns:
            Created book

        Raises:
            InvalidBookParamsError: If a required field is missing
            BookAlreadyExistsError: If the title is already taken
            RepositoryPoisonedError: If the repository is unusable
        """
        self.validate_create_request(book_data)

        async with self.book_repo.acquire() as books:
            existing = books.find_by_title(book_data.title)
            if existing is not None:
                logger.warning(f"Book with title {existing.title} already exists")
                raise BookAlreadyExistsError(existing.title)

            # One instant for both timestamps
            now = datetime.now().astimezone()
            book = Book(
                id=uuid4(),
                title=book_data.title,
                author=book_data.author,
                pages=book_data.pages,
                created_at=now,
                updated_at=now,
            )
            books.append(book)

        logger.info(f"Created book {book.id} with title {book.title}")
        return book
