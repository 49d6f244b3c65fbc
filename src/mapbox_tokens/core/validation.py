r"""Parameter validation utilities for the Mapbox API client.

This module provides validation functions to ensure the client
configuration meets the required constraints before any request is
sent.
"""

from __future__ import annotations

__all__ = ["validate_access_token", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_access_token(access_token: str | None) -> None:
    """Validate the access token.

    ``None`` means that requests are sent without credentials, but an
    empty or blank string is always a configuration mistake.

    Args:
        access_token: The Mapbox access token, or ``None``.

    Raises:
        ValueError: If the token is an empty or whitespace-only string.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.validation import validate_access_token
        >>> validate_access_token("pk.abc")
        >>> validate_access_token(None)

        ```
    """
    if access_token is not None and not access_token.strip():
        msg = "access_token must be a non-empty string or None"
        raise ValueError(msg)
