from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from mapbox_tokens.exceptions import ApiError, MapboxError, NoResponseError, TransportError

TEST_URL = "https://api.mapbox.com/tokens/v2/test-user?access_token=REDACTED"


##############################
#     Tests for ApiError     #
##############################


def test_api_error_str() -> None:
    error = ApiError(status_code=422, endpoint="tokens/v2/me", message="bad scope")
    assert str(error) == "API Error: 422 tokens/v2/me bad scope"


def test_api_error_fields() -> None:
    response = Mock(spec=httpx.Response, status_code=401)
    error = ApiError(
        status_code=401,
        endpoint="tokens/v2/me",
        message="Not Authorized - Invalid Token",
        type="unauthorized",
        response=response,
    )
    assert error.status_code == 401
    assert error.endpoint == "tokens/v2/me"
    assert error.message == "Not Authorized - Invalid Token"
    assert error.type == "unauthorized"
    assert error.response is response


def test_api_error_defaults() -> None:
    error = ApiError(status_code=500, endpoint="tokens/v2/me")
    assert error.message == ""
    assert error.type is None
    assert error.response is None


@pytest.mark.parametrize(("status_code", "expected"), [(404, True), (400, False), (410, False)])
def test_api_error_is_not_found(status_code: int, expected: bool) -> None:
    assert ApiError(status_code=status_code, endpoint="x").is_not_found is expected


####################################
#     Tests for TransportError     #
####################################


def test_transport_error() -> None:
    cause = httpx.ConnectError("connection refused")
    error = TransportError(stage="execute request", method="GET", url=TEST_URL, cause=cause)
    assert str(error) == f"execute request: GET {TEST_URL}: connection refused"
    assert error.stage == "execute request"
    assert error.method == "GET"
    assert error.url == TEST_URL
    assert error.cause is cause


#####################################
#     Tests for NoResponseError     #
#####################################


def test_no_response_error() -> None:
    error = NoResponseError(method="POST", url=TEST_URL)
    assert str(error) == f"no response returned from API for POST {TEST_URL}"
    assert error.method == "POST"
    assert error.url == TEST_URL


@pytest.mark.parametrize(
    "error",
    [
        ApiError(status_code=500, endpoint="x"),
        NoResponseError(method="GET", url=TEST_URL),
        TransportError(stage="s", method="GET", url=TEST_URL, cause=OSError()),
    ],
)
def test_errors_share_base_class(error: Exception) -> None:
    assert isinstance(error, MapboxError)
