"""
Service layer for the Books API.

This module implements business logic and orchestration,
following Domain-Driven Design principles.
"""

from .book_service import (
    BookService,
    BookServiceError,
    InvalidBookParamsError,
    BookAlreadyExistsError,
)

__all__ = [
    "BookService",
    "BookServiceError",
    "InvalidBookParamsError",
    "BookAlreadyExistsError",
]
