"""
FastAPI dependencies for dependency injection.

Services are built once by the application factory and stored on
``app.state``; these helpers hand them to the endpoints.
"""

from fastapi import Request

from services import BookService


def get_book_service(request: Request) -> BookService:
    """Get book service instance."""
    return request.app.state.book_service
