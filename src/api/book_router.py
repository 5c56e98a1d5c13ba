"""
Book API endpoints following Clean Code principles.

Only creation is exposed. Domain errors propagate to the handlers
registered in core.error_handlers.
"""

from fastapi import APIRouter, Depends, status

from models.book import Book, BookCreate
from models.error import ErrorResponse
from services.book_service import BookService
from core.constants import API_PREFIX, ENDPOINT_BOOKS, HTTP_422_BOOK_CONFLICT
from .dependencies import get_book_service

router = APIRouter(prefix=API_PREFIX, tags=["books"])


@router.post(
    ENDPOINT_BOOKS,
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        HTTP_422_BOOK_CONFLICT: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_book_endpoint(
    book_creation_data: BookCreate,
    book_service: BookService = Depends(get_book_service),
) -> Book:
    """
    Create a new book from title, author and pages.

    Returns the created book with generated ID and timestamps.
    """
    return await book_service.create_book(book_creation_data)
