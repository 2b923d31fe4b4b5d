#!/usr/bin/env python3
"""Demonstration driver: exercises each calling convention against a running book review API."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

from api.bookreview.core import BookReviewService
from api.bookreview.models import Book
from api.bookreview.wrappers import BookLookupError, BookReviewWrapper
from utils.get_logger import get_logger

logger = get_logger(__name__)

DEMO_ISBN = "978-0321765723"
DEMO_AUTHOR = "Austen"
DEMO_TITLE = "Gatsby"


def _titles(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        return []
    return [Book.from_payload(item).title for item in payload]


async def run_demo(wrapper: BookReviewWrapper) -> None:
    """Issue every call in order; callback and future results may arrive out of order."""

    def on_all_books(err: str | None, data: Any) -> None:
        if err:
            logger.error(f"All books error: {err}")
        else:
            logger.info(f"All books result (partial list): {_titles(data)[:2]}")

    wrapper.fetch_all_books_callback(on_all_books)

    def on_isbn(future: asyncio.Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if isinstance(exc, BookLookupError):
            logger.error(f"ISBN search error: {exc}")
        elif exc is not None:
            logger.error(f"ISBN search failed unexpectedly: {exc!r}")
        else:
            logger.info(f"ISBN search result: {Book.from_payload(future.result()).label()}")

    wrapper.fetch_by_isbn_promise(DEMO_ISBN).add_done_callback(on_isbn)

    author_results = await wrapper.fetch_by_author_async(DEMO_AUTHOR)
    logger.info(f"Author search result: {_titles(author_results)}")

    title_results = await wrapper.fetch_by_title_async(DEMO_TITLE)
    logger.info(f"Title search result: {_titles(title_results)}")

    await wrapper.wait_pending()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Exercise the book review API with callback, future and async/await calls.",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Actually issue the demo requests (requires a running backend).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Base address of the book review API (default: BOOK_API_URL or http://localhost:3000).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    service = BookReviewService(base_url=args.base_url)

    if not args.run:
        print(
            "To run the book review client demo, start a backend server at "
            f"{service.base_url} and run this module again with --run."
        )
        return 0

    asyncio.run(run_demo(BookReviewWrapper(service)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
