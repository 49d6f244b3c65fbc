from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from tests.helpers import RecordingHandler


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def ok_handler() -> RecordingHandler:
    """Create a handler answering every request with an empty JSON
    list."""
    return RecordingHandler(status_code=200, json=[])
