"""
Base API Client - Shared async GET handling for JSON APIs.
API services inherit from this and call _core_async_request.

Each call is a single request/response cycle (no retry, rate limiting or caching);
failures propagate to the caller.
"""

from typing import Any

import aiohttp

from utils.get_logger import get_logger

logger = get_logger(__name__)


class BaseAPIClient:
    """
    Base class for API clients with shared request handling.
    """

    async def _core_async_request(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Core async HTTP GET request.

        Args:
            url: Full URL to request
            params: Optional query parameters
            headers: Optional HTTP headers
            timeout: Total request timeout in seconds (None waits indefinitely)

        Returns:
            Parsed JSON response (dict, list, other JSON type), or None for an empty body

        Raises:
            aiohttp.ClientResponseError: for non-2xx statuses
            aiohttp.ClientError: for connection-level failures
            TimeoutError: when the timeout expires
            ValueError: when the body is not valid JSON
        """
        request_timeout = aiohttp.ClientTimeout(total=timeout)

        async with (
            aiohttp.ClientSession() as session,
            session.get(url, params=params, headers=headers, timeout=request_timeout) as response,
        ):
            if response.status == 404:
                # 404s are expected (resource doesn't exist)
                logger.debug(f"API returned status 404 for {url} (resource not found)")
            elif response.status >= 400:
                logger.warning(f"API returned status {response.status} for {url}")
            response.raise_for_status()

            # content_type=None accepts servers that omit the JSON content type;
            # an empty body parses to None
            return await response.json(content_type=None)
