r"""Synchronous client for the Mapbox REST API.

This module provides ``MapboxClient``, a thin wrapper around an
``httpx.Client`` that appends endpoint paths to the Mapbox origin,
authenticates every request with the ``access_token`` query parameter,
and turns responses outside the [200, 399] range into ``ApiError``.
"""

from __future__ import annotations

__all__ = ["MapboxClient"]

import logging
from typing import TYPE_CHECKING

import httpx

from mapbox_tokens.core.config import JSON_CONTENT_TYPE, MAPBOX_ENDPOINT, ClientConfig
from mapbox_tokens.core.http_logic import (
    build_headers,
    build_url,
    decode_api_error,
    is_success_status,
    redact_url,
)
from mapbox_tokens.exceptions import NoResponseError, TransportError

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)


class MapboxClient:
    r"""Client to call the Mapbox REST API.

    Each call performs exactly one HTTP round trip. There is no retry,
    no backoff and no pagination.

    When a response has a status in [200, 399] it is returned with its
    body unread, and the caller must close it (for example with
    ``response.read()`` or ``response.close()``). Any other status is
    read and closed here, then raised as ``ApiError``.

    Args:
        config: Optional ClientConfig holding the access token.
            If ``None``, requests are sent without an access token.
        client: Optional httpx.Client used as transport. If ``None``, a
            new client owned by this instance is created with the
            configured timeout, and closed by ``close()``. An injected
            client is never closed by this instance.

    Example:
        ```pycon
        >>> from mapbox_tokens import MapboxClient
        >>> from mapbox_tokens.core import ClientConfig
        >>> with MapboxClient(config=ClientConfig(access_token="pk.abc")) as client:  # doctest: +SKIP
        ...     response = client.get("tokens/v2/my-user")
        ...     response.read()
        ...     tokens = response.json()
        ...

        ```
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=self._config.timeout)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        r"""Close the underlying httpx.Client if this instance created
        it."""
        if self._owns_client:
            self._client.close()

    def do(
        self,
        method: str,
        endpoint: str,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> httpx.Response:
        r"""Send a request to the Mapbox API.

        Args:
            method: The HTTP method (GET, POST, PUT, PATCH, DELETE, ...).
            endpoint: The path relative to ``MAPBOX_ENDPOINT``, without a
                leading slash. It may carry query parameters.
            body: Optional request body.
            content_type: Content type sent along with ``body``. Ignored
                when there is no body.

        Returns:
            The response, with its body unread. The caller must close it.

        Raises:
            TransportError: If the request cannot be created or executed,
                or if the body of an error response cannot be read.
            NoResponseError: If the transport returned no response.
            ApiError: If the response status is outside [200, 399].

        Example:
            ```pycon
            >>> from mapbox_tokens import MapboxClient
            >>> with MapboxClient() as client:  # doctest: +SKIP
            ...     response = client.do("PUT", "styles/v1/me/abc", b"{}", "application/json")
            ...

            ```
        """
        try:
            url = build_url(endpoint, self._config.access_token)
            request = self._client.build_request(
                method, url, content=body, headers=build_headers(body, content_type)
            )
        except httpx.InvalidURL as exc:
            raise TransportError(
                stage="create request",
                method=method,
                url=MAPBOX_ENDPOINT + endpoint,
                cause=exc,
            ) from exc

        safe_url = redact_url(url)
        logger.debug(f"Sending {method} request to {safe_url}")
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            logger.debug(f"{method} request to {safe_url} encountered {type(exc).__name__}: {exc}")
            raise TransportError(
                stage="execute request", method=method, url=safe_url, cause=exc
            ) from exc

        if response is None:
            raise NoResponseError(method=method, url=safe_url)

        if is_success_status(response.status_code):
            logger.debug(f"{method} request to {safe_url} returned status {response.status_code}")
            return response

        logger.debug(f"{method} request to {safe_url} failed with status {response.status_code}")
        try:
            content = response.read()
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise TransportError(
                stage="read error response", method=method, url=safe_url, cause=exc
            ) from exc
        finally:
            response.close()
        raise decode_api_error(
            content,
            status_code=response.status_code,
            endpoint=endpoint,
            response=response,
        )

    def get(self, endpoint: str) -> httpx.Response:
        r"""Send a GET request (see ``do``)."""
        return self.do("GET", endpoint, None, JSON_CONTENT_TYPE)

    def post(self, endpoint: str, body: bytes | None) -> httpx.Response:
        r"""Send a POST request with a JSON body (see ``do``)."""
        return self.do("POST", endpoint, body, JSON_CONTENT_TYPE)

    def patch(self, endpoint: str, body: bytes | None) -> httpx.Response:
        r"""Send a PATCH request with a JSON body (see ``do``)."""
        return self.do("PATCH", endpoint, body, JSON_CONTENT_TYPE)

    def put(self, endpoint: str, body: bytes | None) -> httpx.Response:
        r"""Send a PUT request with a JSON body (see ``do``)."""
        return self.do("PUT", endpoint, body, JSON_CONTENT_TYPE)

    def put_only(self, endpoint: str) -> httpx.Response:
        r"""Send a PUT request without a body (see ``do``)."""
        return self.do("PUT", endpoint, None, JSON_CONTENT_TYPE)

    def delete(self, endpoint: str) -> httpx.Response:
        r"""Send a DELETE request (see ``do``)."""
        return self.do("DELETE", endpoint, None, JSON_CONTENT_TYPE)
