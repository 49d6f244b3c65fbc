r"""mapbox_tokens - HTTP client for the Mapbox Tokens API.

This package provides a small synchronous client for the Mapbox REST
API, built on top of the httpx library, and a resource layer to manage
the access tokens of a Mapbox account.

Key Features:
    - Single round trip per call, no hidden retries
    - Access token sent as the ``access_token`` query parameter
    - Non-2xx/3xx responses raised as ``ApiError`` with the decoded
      message, type, status code and endpoint
    - Injectable ``httpx.Client`` transport
    - ``TokenApi`` to create, list, update and delete tokens

Example:
    ```pycon
    >>> from mapbox_tokens import ApiError, MapboxClient, TokenApi
    >>> from mapbox_tokens.core import ClientConfig
    >>> with MapboxClient(config=ClientConfig.from_env()) as client:  # doctest: +SKIP
    ...     api = TokenApi(client, username="my-user")
    ...     try:
    ...         token = api.update("ck123", note="renamed")
    ...     except ApiError as error:
    ...         if not error.is_not_found:
    ...             raise
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "ApiError",
    "ClientConfig",
    "MapboxClient",
    "MapboxError",
    "NoResponseError",
    "Token",
    "TokenApi",
    "TransportError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from mapbox_tokens.client import MapboxClient
from mapbox_tokens.core.config import ClientConfig
from mapbox_tokens.exceptions import ApiError, MapboxError, NoResponseError, TransportError
from mapbox_tokens.tokens import Token, TokenApi

try:
    __version__ = version("mapbox-tokens")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
