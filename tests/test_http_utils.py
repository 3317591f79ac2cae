"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from headingcheck.config import HEADINGCHECK_USER_AGENT
from headingcheck.exceptions import FetchError
from headingcheck.http_utils import RETRY_STATUS_CODES, fetch_with_retries


def _mock_client_class(mock_client_class: MagicMock, **get_kwargs) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(**get_kwargs)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client_class.return_value = mock_client
    return mock_client


def _ok_response(text: str = "success") -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.text = text
    response.raise_for_status = MagicMock()
    return response


def _error_response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError(
            f"HTTP {status_code}", request=MagicMock(), response=response
        )
    )
    return response


class TestRetryStatusCodes:
    """Tests for RETRY_STATUS_CODES constant."""

    def test_contains_expected_codes(self) -> None:
        """Should contain all expected retryable status codes."""
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})

    def test_is_immutable(self) -> None:
        """Should be a frozenset (immutable)."""
        assert isinstance(RETRY_STATUS_CODES, frozenset)


class TestFetchWithRetries:
    """Tests for fetch_with_retries function."""

    @pytest.mark.asyncio
    async def test_returns_text(self) -> None:
        """Returns the decoded body on success."""
        with patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class:
            _mock_client_class(mock_client_class, return_value=_ok_response("<html>test content</html>"))

            result = await fetch_with_retries("https://example.com")

        assert result == "<html>test content</html>"

    @pytest.mark.asyncio
    async def test_raises_on_404_without_retry(self) -> None:
        """Client errors fail immediately with the status in the message."""
        with (
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_MAX_RETRIES", 2),
            patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class,
        ):
            mock_client = _mock_client_class(mock_client_class, return_value=_error_response(404))

            with pytest.raises(FetchError, match=r"Failed to fetch URL: https://example.com/missing - HTTP 404"):
                await fetch_with_retries("https://example.com/missing")

        assert mock_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_503(self) -> None:
        """Retries on 503 status code."""
        fail_response = MagicMock()
        fail_response.status_code = 503

        with (
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_MAX_RETRIES", 2),
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_BACKOFF_S", 0.01),
            patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class,
        ):
            mock_client = _mock_client_class(mock_client_class, side_effect=[fail_response, _ok_response()])

            result = await fetch_with_retries("https://example.com")

        assert result == "success"
        assert mock_client.get.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_max_retries(self) -> None:
        """Raises FetchError after exhausting retries."""
        fail_response = MagicMock()
        fail_response.status_code = 503

        with (
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_MAX_RETRIES", 2),
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_BACKOFF_S", 0.01),
            patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class,
        ):
            mock_client = _mock_client_class(mock_client_class, return_value=fail_response)

            with pytest.raises(FetchError, match="Failed to fetch URL: https://example.com - HTTP 503"):
                await fetch_with_retries("https://example.com")

            # Initial attempt + 2 retries = 3 total
            assert mock_client.get.call_count == 3

    @pytest.mark.asyncio
    async def test_retries_on_request_error(self) -> None:
        """Retries on network request errors."""
        with (
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_MAX_RETRIES", 2),
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_BACKOFF_S", 0.01),
            patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class,
        ):
            _mock_client_class(
                mock_client_class,
                side_effect=[httpx.RequestError("Connection failed"), _ok_response()],
            )

            result = await fetch_with_retries("https://example.com")

        assert result == "success"

    @pytest.mark.asyncio
    async def test_timeout_reported_as_fetch_error(self) -> None:
        with (
            patch("headingcheck.http_utils.HEADINGCHECK_FETCH_MAX_RETRIES", 0),
            patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class,
        ):
            _mock_client_class(mock_client_class, side_effect=httpx.ReadTimeout("timed out"))

            with pytest.raises(FetchError, match="timed out"):
                await fetch_with_retries("https://example.com")

    @pytest.mark.asyncio
    async def test_uses_provided_client(self) -> None:
        """Uses provided httpx.AsyncClient if passed."""
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=_ok_response())

        with patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class:
            result = await fetch_with_retries("https://example.com", client=mock_client)

        assert result == "success"
        mock_client.get.assert_called_once_with("https://example.com")
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_has_correct_settings(self) -> None:
        """Creates client with correct timeout, headers and redirect settings."""
        with patch("headingcheck.http_utils.httpx.AsyncClient") as mock_client_class:
            _mock_client_class(mock_client_class, return_value=_ok_response())

            await fetch_with_retries("https://example.com")

            call_kwargs = mock_client_class.call_args[1]
            assert call_kwargs["follow_redirects"] is True
            assert call_kwargs["max_redirects"] == 5
            assert "timeout" in call_kwargs
            assert call_kwargs["headers"] == {"User-Agent": HEADINGCHECK_USER_AGENT}
