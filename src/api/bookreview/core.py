"""
Book Review Core Service - Base service for book review API operations
Handles core API communication and error normalization.
"""

import asyncio
from urllib.parse import quote

import aiohttp

from adapters.config import get_book_api_settings
from api.bookreview.models import CallResult
from utils.base_api_client import BaseAPIClient
from utils.get_logger import get_logger

logger = get_logger(__name__)


def describe_error(exc: BaseException) -> str:
    """
    Normalize a request failure into a single descriptive string.

    Args:
        exc: Exception raised while requesting or decoding a response

    Returns:
        Human-readable error message
    """
    # InvalidURL is also a ValueError, so aiohttp classes are checked first
    if isinstance(exc, aiohttp.InvalidURL):
        return f"Invalid URL: {exc.url}"
    if isinstance(exc, aiohttp.ClientResponseError):
        return f"Request failed with status code {exc.status}"
    # ServerTimeoutError is both a TimeoutError and a ClientConnectionError
    if isinstance(exc, TimeoutError):
        return "Request timed out"
    if isinstance(exc, aiohttp.ClientConnectionError):
        return f"Connection failed: {exc}" if str(exc) else "Connection failed"
    if isinstance(exc, aiohttp.ClientError):
        return str(exc) or type(exc).__name__
    # JSONDecodeError is a ValueError; both mean the body could not be decoded
    if isinstance(exc, ValueError):
        return f"Invalid JSON payload: {exc}"
    return f"Unknown error ({type(exc).__name__})"


def encode_segment(value: str) -> str:
    """Percent-encode a value so it occupies exactly one URL path segment."""
    return quote(value, safe="")


class BookReviewService(BaseAPIClient):
    """
    Core book review service for API communication.
    All routes are plain GETs; each call is independent.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """Initialize service. Unset arguments fall back to BOOK_API_URL / BOOK_API_TIMEOUT."""
        settings = get_book_api_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.books_url = f"{self.base_url}/books"

    def all_books_url(self) -> str:
        return self.books_url

    def isbn_url(self, isbn: str) -> str:
        return f"{self.books_url}/isbn/{encode_segment(isbn)}"

    def author_url(self, author: str) -> str:
        return f"{self.books_url}/author/{encode_segment(author)}"

    def title_url(self, title: str) -> str:
        return f"{self.books_url}/title/{encode_segment(title)}"

    async def fetch(self, url: str) -> CallResult:
        """
        Make an async GET request to the book review API.
        Every calling-convention adapter goes through this one operation.

        Args:
            url: URL to request

        Returns:
            CallResult with the parsed payload on success or an error message on failure
        """
        headers = {"Accept": "application/json"}
        try:
            data = await self._core_async_request(url=url, headers=headers, timeout=self.timeout)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            message = describe_error(e)
            logger.warning(f"Request to {url} failed: {message}")
            return CallResult.failure(url, message)

        return CallResult.success(url, data)
