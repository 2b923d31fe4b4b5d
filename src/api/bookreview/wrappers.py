"""
Book Review Wrappers - calling-convention adapters over BookReviewService.fetch.

- fetch_all_books_callback: callback(error, result) style
- fetch_by_isbn_promise: returns an asyncio.Future that is resolved or rejected
- fetch_by_author_async / fetch_by_title_async: async/await with an empty-list fallback
"""

import asyncio
from collections.abc import Callable, Coroutine
from typing import Any

from api.bookreview.core import BookReviewService
from utils.get_logger import get_logger

logger = get_logger(__name__)

BookCallback = Callable[[str | None, Any], None]


class BookLookupError(Exception):
    """Base class for rejections of fetch_by_isbn_promise. str(exc) is the message."""

    def __init__(self, message: str, isbn: str):
        super().__init__(message)
        self.message = message
        self.isbn = isbn


class BookNotFoundError(BookLookupError):
    """The request succeeded but returned an empty payload."""


class BookRequestError(BookLookupError):
    """The request itself failed."""


class BookReviewWrapper:
    def __init__(self, service: BookReviewService | None = None):
        self.service = service or BookReviewService()
        # Strong references to scheduled tasks so they are not garbage collected mid-flight
        self._background_tasks: set[asyncio.Task] = set()

    def _schedule(
        self, loop: asyncio.AbstractEventLoop, coro: Coroutine[Any, Any, None]
    ) -> asyncio.Task:
        task = loop.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background request failed: {exc!r}")

    async def wait_pending(self) -> None:
        """Wait for every callback/future request scheduled by this wrapper to settle."""
        while self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)

    def fetch_all_books_callback(self, callback: BookCallback) -> asyncio.Task:
        """
        Get all books, reporting through callback(error, result).

        The callback is invoked exactly once, and never before this function returns.
        Must be called while an event loop is running.

        Args:
            callback: Receives (None, payload) on success or (error_message, None) on failure

        Returns:
            The scheduled task, for callers that want to wait on completion
        """
        loop = asyncio.get_running_loop()
        logger.info("Get all books (callback style)")

        async def _run() -> None:
            result = await self.service.fetch(self.service.all_books_url())
            if result.ok:
                callback(None, result.data)
            else:
                callback(result.error, None)

        return self._schedule(loop, _run())

    def fetch_by_isbn_promise(self, isbn: str) -> asyncio.Future:
        """
        Search by ISBN, returning a future.

        The future resolves with the book payload, or is rejected with
        BookNotFoundError (empty payload) or BookRequestError (request failed).
        Must be called while an event loop is running.

        Args:
            isbn: ISBN string, used as given (no format validation)

        Returns:
            asyncio.Future resolving to the book payload

        Raises:
            TypeError: if isbn cannot be encoded into the URL (raised before scheduling)
        """
        loop = asyncio.get_running_loop()
        # Built before scheduling so bad arguments raise here rather than in the task
        url = self.service.isbn_url(isbn)
        logger.info(f"Search by ISBN ({isbn}) (future style)")
        future: asyncio.Future = loop.create_future()

        async def _run() -> None:
            try:
                result = await self.service.fetch(url)
            except asyncio.CancelledError:
                future.cancel()
                raise
            except Exception as e:
                if not future.done():
                    future.set_exception(e)
                return
            if future.done():
                # cancelled by the caller
                return
            if not result.ok:
                future.set_exception(
                    BookRequestError(f"Error during ISBN search: {result.error}", isbn)
                )
            elif not result.data:
                future.set_exception(BookNotFoundError(f"Book with ISBN {isbn} not found.", isbn))
            else:
                future.set_result(result.data)

        self._schedule(loop, _run())
        return future

    async def _search(self, url: str, label: str) -> Any:
        result = await self.service.fetch(url)
        if not result.ok:
            logger.error(f"Error during {label} search: {result.error}")
            return []
        if result.data is None:
            return []
        return result.data

    async def fetch_by_author_async(self, author: str) -> Any:
        """
        Search books by author.

        Returns:
            The matching books in server order, or [] on any failure
        """
        logger.info(f"Search by author ({author}) (async/await)")
        return await self._search(self.service.author_url(author), "Author")

    async def fetch_by_title_async(self, title: str) -> Any:
        """
        Search books by title.

        Returns:
            The matching books in server order, or [] on any failure
        """
        logger.info(f"Search by title ({title}) (async/await)")
        return await self._search(self.service.title_url(title), "Title")


bookreview_wrapper = BookReviewWrapper()
