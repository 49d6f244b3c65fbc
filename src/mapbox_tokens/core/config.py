r"""Configuration dataclass and defaults for MapboxClient.

This module provides the constants describing the Mapbox API and a
dataclass-based configuration object for the ``MapboxClient`` class.
"""

from __future__ import annotations

__all__ = [
    "ACCESS_TOKEN_ENV_VAR",
    "ACCESS_TOKEN_PARAM",
    "DEFAULT_TIMEOUT",
    "JSON_CONTENT_TYPE",
    "MAPBOX_ENDPOINT",
    "ClientConfig",
]

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from mapbox_tokens.core.validation import validate_access_token, validate_timeout

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

# Origin every endpoint path is appended to
# Endpoint paths must not start with a slash
MAPBOX_ENDPOINT = "https://api.mapbox.com/"

# Query parameter carrying the access token
ACCESS_TOKEN_PARAM = "access_token"

# Environment variable read by ClientConfig.from_env
ACCESS_TOKEN_ENV_VAR = "MAPBOX_ACCESS_TOKEN"

JSON_CONTENT_TYPE = "application/json"

# Default timeout in seconds, only applied to the httpx.Client created
# by MapboxClient when none is injected
DEFAULT_TIMEOUT = 10.0


@dataclass
class ClientConfig:
    """Configuration for MapboxClient.

    Args:
        access_token: Optional Mapbox access token. When set, it is added
            to every request as the ``access_token`` query parameter.
        timeout: Timeout of the httpx.Client created by MapboxClient when
            no client is injected. Must be > 0 if numeric.

    Example:
        ```pycon
        >>> from mapbox_tokens.core.config import ClientConfig
        >>> config = ClientConfig(access_token="pk.abc")
        >>> config.access_token
        'pk.abc'
        >>> config.timeout
        10.0
        >>> config.merge(timeout=30.0).timeout
        30.0

        ```
    """

    access_token: str | None = None
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_access_token(self.access_token)
        validate_timeout(self.timeout)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> ClientConfig:
        """Create a config whose access token is read from the
        environment.

        An empty ``MAPBOX_ACCESS_TOKEN`` variable is treated as unset.

        Args:
            environ: The mapping to read from. Defaults to ``os.environ``.
            **kwargs: Other ClientConfig fields. A non-None
                ``access_token`` takes precedence over the environment.

        Returns:
            The configuration.

        Example:
            ```pycon
            >>> from mapbox_tokens.core.config import ClientConfig
            >>> ClientConfig.from_env({"MAPBOX_ACCESS_TOKEN": "pk.abc"}).access_token
            'pk.abc'
            >>> ClientConfig.from_env({}).access_token is None
            True

            ```
        """
        if environ is None:
            environ = os.environ
        access_token = kwargs.pop("access_token", None)
        if access_token is None:
            access_token = environ.get(ACCESS_TOKEN_ENV_VAR) or None
        return cls(access_token=access_token, **kwargs)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {"access_token": self.access_token, "timeout": self.timeout}
