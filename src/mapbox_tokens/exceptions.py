r"""Define the exceptions raised by the Mapbox API client.

All the exceptions derive from ``MapboxError`` so callers can catch
every failure of a call with a single ``except`` clause, and branch on
``ApiError`` when they need to inspect the HTTP status of a rejected
request.
"""

from __future__ import annotations

__all__ = ["ApiError", "MapboxError", "NoResponseError", "TransportError"]

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class MapboxError(Exception):
    r"""Base class of the exceptions raised by the Mapbox API client."""


class TransportError(MapboxError):
    r"""Raised when a request cannot be created or executed.

    This covers malformed URLs, DNS and connection failures, and failures
    while reading the body of an error response. The underlying httpx
    exception is chained as ``__cause__``.

    Args:
        stage: A short label naming the step that failed
            (e.g. ``"execute request"``).
        method: The HTTP method of the request.
        url: The request URL with the access token redacted.
        cause: The original exception.

    Example:
        ```pycon
        >>> from mapbox_tokens.exceptions import TransportError
        >>> error = TransportError(
        ...     stage="execute request",
        ...     method="GET",
        ...     url="https://api.mapbox.com/tokens/v2",
        ...     cause=OSError("boom"),
        ... )
        >>> str(error)
        'execute request: GET https://api.mapbox.com/tokens/v2: boom'

        ```
    """

    def __init__(self, stage: str, method: str, url: str, cause: Exception) -> None:
        super().__init__(f"{stage}: {method} {url}: {cause}")
        self.stage = stage
        self.method = method
        self.url = url
        self.cause = cause


class NoResponseError(MapboxError):
    r"""Raised when the transport returns neither a response nor an
    error.

    Args:
        method: The HTTP method of the request.
        url: The request URL with the access token redacted.
    """

    def __init__(self, method: str, url: str) -> None:
        super().__init__(f"no response returned from API for {method} {url}")
        self.method = method
        self.url = url


class ApiError(MapboxError):
    r"""Raised when the Mapbox API answers with a status outside
    [200, 399].

    The message and type are decoded from the error envelope
    ``{"error": {"message": ...}, "type": ...}`` when the body is JSON.
    Otherwise the raw body text is used as the message.

    Args:
        status_code: The HTTP status code of the response.
        endpoint: The endpoint path that was requested, relative to the
            base URL.
        message: The decoded error message.
        type: The decoded error type, if any.
        response: The response that triggered the error. Its body has
            already been read and closed.

    Example:
        ```pycon
        >>> from mapbox_tokens.exceptions import ApiError
        >>> error = ApiError(status_code=404, endpoint="tokens/v2/me/abc", message="Not Found")
        >>> str(error)
        'API Error: 404 tokens/v2/me/abc Not Found'
        >>> error.is_not_found
        True

        ```
    """

    def __init__(
        self,
        status_code: int,
        endpoint: str,
        message: str = "",
        type: str | None = None,  # noqa: A002
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(f"API Error: {status_code} {endpoint} {message}")
        self.status_code = status_code
        self.endpoint = endpoint
        self.message = message
        self.type = type
        self.response = response

    @property
    def is_not_found(self) -> bool:
        r"""Indicate if the API reported that the resource does not
        exist."""
        return self.status_code == HTTPStatus.NOT_FOUND
