"""
Books API - Pydantic Models

This module contains the data models used throughout the books API.
"""

from .book import Book, BookCreate
from .error import ErrorResponse

__all__ = [
    "Book",
    "BookCreate",
    "ErrorResponse",
]
