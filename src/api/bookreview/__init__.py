"""
Book Review Client Package - async client for the book review REST API.

This package provides:
- BookReviewService: Core service with the single GET operation and error normalization
- Models: Pydantic models for books and call results
- Wrappers: callback, future and async/await adapters over the service
"""

from api.bookreview.core import BookReviewService, describe_error
from api.bookreview.models import Book, CallResult
from api.bookreview.wrappers import (
    BookLookupError,
    BookNotFoundError,
    BookRequestError,
    BookReviewWrapper,
    bookreview_wrapper,
)

fetch_all_books_callback = bookreview_wrapper.fetch_all_books_callback
fetch_by_isbn_promise = bookreview_wrapper.fetch_by_isbn_promise
fetch_by_author_async = bookreview_wrapper.fetch_by_author_async
fetch_by_title_async = bookreview_wrapper.fetch_by_title_async

__all__ = [
    # Service
    "BookReviewService",
    "describe_error",
    # Models
    "Book",
    "CallResult",
    # Wrappers
    "BookReviewWrapper",
    "bookreview_wrapper",
    "BookLookupError",
    "BookNotFoundError",
    "BookRequestError",
    "fetch_all_books_callback",
    "fetch_by_isbn_promise",
    "fetch_by_author_async",
    "fetch_by_title_async",
]
