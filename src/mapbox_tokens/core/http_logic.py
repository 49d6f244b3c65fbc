r"""Request building and response classification for the Mapbox API.

This module contains the pieces of a single API round trip that do not
depend on the transport: building the absolute URL with the access
token, choosing the request headers, deciding whether a status code is a
success, and decoding the error envelope of a failed response.
"""

from __future__ import annotations

__all__ = [
    "build_headers",
    "build_url",
    "decode_api_error",
    "is_success_status",
    "redact_url",
]

import json
from typing import TYPE_CHECKING, Any

import httpx

from mapbox_tokens.core.config import ACCESS_TOKEN_PARAM, MAPBOX_ENDPOINT
from mapbox_tokens.exceptions import ApiError

if TYPE_CHECKING:
    from collections.abc import Mapping

REDACTED = "REDACTED"


def build_url(endpoint: str, access_token: str | None = None) -> httpx.URL:
    r"""Build the absolute URL of an endpoint.

    The endpoint is appended to ``MAPBOX_ENDPOINT`` as is. Slashes are
    not normalized, so the endpoint must not start with ``/``.

    Args:
        endpoint: The path relative to the base URL. It may carry its
            own query string.
        access_token: The access token to add as the ``access_token``
            query parameter, if any. Existing parameters are kept.

    Returns:
        The absolute URL.

    Raises:
        httpx.InvalidURL: If the resulting URL is malformed.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.http_logic import build_url
        >>> str(build_url("tokens/v2/me?limit=5", access_token="tok"))
        'https://api.mapbox.com/tokens/v2/me?limit=5&access_token=tok'

        ```
    """
    url = httpx.URL(MAPBOX_ENDPOINT + endpoint)
    if access_token is not None:
        url = url.copy_add_param(ACCESS_TOKEN_PARAM, access_token)
    return url


def redact_url(url: httpx.URL) -> str:
    r"""Return the URL as a string with the access token hidden.

    Example:
        ```pycon
        >>> import httpx
        >>> from mapbox_tokens.core.http_logic import redact_url
        >>> redact_url(httpx.URL("https://api.mapbox.com/tokens/v2?access_token=secret"))
        'https://api.mapbox.com/tokens/v2?access_token=REDACTED'

        ```
    """
    if ACCESS_TOKEN_PARAM in url.params:
        url = url.copy_set_param(ACCESS_TOKEN_PARAM, REDACTED)
    return str(url)


def build_headers(body: bytes | None, content_type: str | None) -> dict[str, str]:
    r"""Build the headers of a request.

    Every request asks the server to close the connection after the
    response. ``Content-Type`` is only sent along with a body.

    Args:
        body: The request body, if any.
        content_type: The content type of the body, if any.

    Returns:
        The request headers.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.http_logic import build_headers
        >>> build_headers(b"{}", "application/json")
        {'Connection': 'close', 'Content-Type': 'application/json'}
        >>> build_headers(None, "application/json")
        {'Connection': 'close'}

        ```
    """
    headers = {"Connection": "close"}
    if body is not None and content_type:
        headers["Content-Type"] = content_type
    return headers


def is_success_status(status_code: int) -> bool:
    r"""Indicate if a status code is handed back to the caller.

    Redirects that were not followed count as a success.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.http_logic import is_success_status
        >>> is_success_status(204), is_success_status(399), is_success_status(404)
        (True, True, False)

        ```
    """
    return 200 <= status_code < 400


def decode_api_error(
    content: bytes,
    status_code: int,
    endpoint: str,
    response: httpx.Response | None = None,
) -> ApiError:
    r"""Decode the body of a failed response into an ``ApiError``.

    The expected envelope is
    ``{"error": {"message": "..."}, "type": "..."}``. When the body is
    not JSON, or does not have that shape, the raw body text becomes the
    message.

    Args:
        content: The raw body of the response.
        status_code: The HTTP status code of the response.
        endpoint: The endpoint that was requested.
        response: The response, attached to the error.

    Returns:
        The decoded error. It is returned, not raised.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.http_logic import decode_api_error
        >>> error = decode_api_error(
        ...     b'{"error": {"message": "bad scope"}, "type": "invalid_request"}',
        ...     status_code=422,
        ...     endpoint="tokens/v2/me",
        ... )
        >>> error.message, error.type
        ('bad scope', 'invalid_request')
        >>> decode_api_error(b"oops", status_code=500, endpoint="tokens/v2/me").message
        'oops'

        ```
    """
    message, type_ = content.decode("utf-8", errors="replace"), None
    try:
        payload = json.loads(content)
    except (ValueError, RecursionError):
        pass
    else:
        # JSON null is an empty envelope
        decoded = _decode_envelope({} if payload is None else payload)
        if decoded is not None:
            message, type_ = decoded

    return ApiError(
        status_code=status_code,
        endpoint=endpoint,
        message=message,
        type=type_,
        response=response,
    )


def _decode_envelope(payload: Mapping[str, Any] | Any) -> tuple[str, str | None] | None:
    r"""Extract the message and type of an error envelope.

    Returns ``None`` if the payload is not an object or if a field has
    an unexpected type.
    """
    if not isinstance(payload, dict):
        return None
    type_ = payload.get("type")
    if type_ is not None and not isinstance(type_, str):
        return None

    error = payload.get("error")
    if error is None:
        return "", type_
    if not isinstance(error, dict):
        return None

    message = error.get("message")
    if message is None:
        return "", type_
    if not isinstance(message, str):
        return None
    return message, type_
