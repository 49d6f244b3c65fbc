r"""Core logic of the Mapbox API client.

This module contains the configuration, the validation helpers and the
transport-independent request and response handling.
"""

from __future__ import annotations

__all__ = [
    "ACCESS_TOKEN_ENV_VAR",
    "ACCESS_TOKEN_PARAM",
    "DEFAULT_TIMEOUT",
    "JSON_CONTENT_TYPE",
    "MAPBOX_ENDPOINT",
    "ClientConfig",
    "build_headers",
    "build_url",
    "decode_api_error",
    "is_success_status",
    "redact_url",
    "validate_access_token",
    "validate_timeout",
]

from mapbox_tokens.core.config import (
    ACCESS_TOKEN_ENV_VAR,
    ACCESS_TOKEN_PARAM,
    DEFAULT_TIMEOUT,
    JSON_CONTENT_TYPE,
    MAPBOX_ENDPOINT,
    ClientConfig,
)
from mapbox_tokens.core.http_logic import (
    build_headers,
    build_url,
    decode_api_error,
    is_success_status,
    redact_url,
)
from mapbox_tokens.core.validation import validate_access_token, validate_timeout
