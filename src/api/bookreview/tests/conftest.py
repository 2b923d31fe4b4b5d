"""
Shared fixtures and utilities for book review client tests.
"""

import os
from unittest.mock import AsyncMock, patch

import pytest


def pytest_configure(config):
    """Pytest hook to configure test environment before any tests run."""
    os.environ["ENVIRONMENT"] = "test"
    os.environ.pop("BOOK_API_URL", None)
    os.environ.pop("BOOK_API_TIMEOUT", None)


@pytest.fixture
def sample_books() -> list[dict]:
    return [
        {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "isbn": "978-0743273565"},
        {"title": "Gatsby's Girl", "author": "Caroline Preston", "isbn": "978-0618419265"},
    ]


@pytest.fixture
def sample_book() -> dict:
    return {
        "title": "Clean Architecture",
        "author": "Robert C. Martin",
        "isbn": "978-0321765723",
    }


@pytest.fixture
def mock_request():
    """Patch BookReviewService._core_async_request for the duration of a test."""
    from api.bookreview.core import BookReviewService

    with patch.object(BookReviewService, "_core_async_request", new_callable=AsyncMock) as mock:
        yield mock
