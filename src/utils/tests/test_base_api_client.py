"""
Tests for BaseAPIClient._core_async_request with a mocked aiohttp session.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from utils.base_api_client import BaseAPIClient

pytestmark = pytest.mark.unit


class MockContext:
    """Async context manager returning a fixed value."""

    def __init__(self, value):
        self.value = value

    async def __aenter__(self):
        return self.value

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


def _mock_response(status: int = 200, payload=None, error: Exception | None = None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.raise_for_status = MagicMock(side_effect=error)
    response.json = AsyncMock(return_value=payload)
    return response


def _patch_session(response: MagicMock):
    session = MagicMock()
    # get() must return the context manager synchronously (not a coroutine)
    session.get = MagicMock(return_value=MockContext(response))
    return session, patch("aiohttp.ClientSession", return_value=MockContext(session))


class TestCoreAsyncRequest:
    @pytest.mark.asyncio
    async def test_returns_parsed_json(self):
        payload = [{"title": "Emma"}]
        session, session_patch = _patch_session(_mock_response(payload=payload))

        with session_patch:
            result = await BaseAPIClient()._core_async_request(
                "http://api.test/books", headers={"Accept": "application/json"}
            )

        assert result == payload
        call = session.get.call_args
        assert call.args == ("http://api.test/books",)
        assert call.kwargs["headers"] == {"Accept": "application/json"}
        assert call.kwargs["timeout"] == aiohttp.ClientTimeout(total=None)

    @pytest.mark.asyncio
    async def test_accepts_any_content_type(self):
        response = _mock_response(payload={"title": "Emma"})
        _, session_patch = _patch_session(response)

        with session_patch:
            await BaseAPIClient()._core_async_request("http://api.test/books/isbn/1")

        response.json.assert_awaited_once_with(content_type=None)

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self):
        _, session_patch = _patch_session(_mock_response(payload=None))

        with session_patch:
            result = await BaseAPIClient()._core_async_request("http://api.test/books/isbn/1")

        assert result is None

    @pytest.mark.asyncio
    async def test_timeout_is_applied(self):
        session, session_patch = _patch_session(_mock_response(payload=[]))

        with session_patch:
            await BaseAPIClient()._core_async_request("http://api.test/books", timeout=5)

        assert session.get.call_args.kwargs["timeout"] == aiohttp.ClientTimeout(total=5)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 500])
    async def test_error_status_raises(self, status):
        error = aiohttp.ClientResponseError(request_info=MagicMock(), history=(), status=status)
        response = _mock_response(status=status, error=error)
        _, session_patch = _patch_session(response)

        with session_patch, pytest.raises(aiohttp.ClientResponseError) as exc_info:
            await BaseAPIClient()._core_async_request("http://api.test/books")

        assert exc_info.value.status == status
        response.json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self):
        session = MagicMock()
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with (
            patch("aiohttp.ClientSession", return_value=MockContext(session)),
            pytest.raises(aiohttp.ClientConnectionError),
        ):
            await BaseAPIClient()._core_async_request("http://api.test/books")
