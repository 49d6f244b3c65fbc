r"""Shared test helpers for the Mapbox client tests.

This module contains the fake transports used across the test files to
inspect outgoing requests without touching the network.
"""

from __future__ import annotations

__all__ = [
    "TEST_TOKEN",
    "TEST_USERNAME",
    "RecordingHandler",
    "create_client",
    "create_mapbox_client",
]

from typing import TYPE_CHECKING, Any

import httpx

from mapbox_tokens import MapboxClient
from mapbox_tokens.core import ClientConfig

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_TOKEN = "tok"
TEST_USERNAME = "test-user"


class RecordingHandler:
    r"""MockTransport handler returning a fixed response and recording
    the requests it receives.

    Args:
        status_code: The status code of every response.
        **response_kwargs: Keyword arguments passed to ``httpx.Response``
            (e.g. ``json=...`` or ``content=...``).
    """

    def __init__(self, status_code: int = 200, **response_kwargs: Any) -> None:
        self.status_code = status_code
        self.response_kwargs = response_kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, **self.response_kwargs)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def create_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    r"""Create an httpx.Client whose requests are answered by
    ``handler``."""
    return httpx.Client(transport=httpx.MockTransport(handler))


def create_mapbox_client(
    handler: Callable[[httpx.Request], httpx.Response],
    access_token: str | None = TEST_TOKEN,
) -> MapboxClient:
    r"""Create a MapboxClient whose requests are answered by
    ``handler``."""
    return MapboxClient(
        config=ClientConfig(access_token=access_token), client=create_client(handler)
    )
