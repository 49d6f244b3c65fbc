r"""Unit tests for ClientConfig dataclass and the validation helpers.

This file contains tests for core/config.py and core/validation.py.
"""

from __future__ import annotations

import httpx
import pytest
from coola.equality import objects_are_equal

from mapbox_tokens.core import (
    ACCESS_TOKEN_ENV_VAR,
    DEFAULT_TIMEOUT,
    ClientConfig,
    validate_access_token,
    validate_timeout,
)

##################################
#     Tests for ClientConfig     #
##################################


def test_client_config_defaults() -> None:
    """Test that ClientConfig uses correct default values."""
    config = ClientConfig()
    assert config.access_token is None
    assert config.timeout == DEFAULT_TIMEOUT


def test_client_config_custom() -> None:
    """Test that ClientConfig accepts custom values."""
    timeout = httpx.Timeout(5.0, connect=1.0)
    config = ClientConfig(access_token="pk.abc", timeout=timeout)
    assert config.access_token == "pk.abc"
    assert config.timeout is timeout


@pytest.mark.parametrize("access_token", ["", "   "])
def test_client_config_invalid_access_token(access_token: str) -> None:
    """Test that a blank access token is rejected."""
    with pytest.raises(ValueError, match=r"access_token must be a non-empty string or None"):
        ClientConfig(access_token=access_token)


@pytest.mark.parametrize("timeout", [0, -1, -0.5])
def test_client_config_invalid_timeout(timeout: float) -> None:
    """Test that a non-positive timeout is rejected."""
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        ClientConfig(timeout=timeout)


def test_client_config_from_env() -> None:
    """Test that the access token is read from the environment."""
    config = ClientConfig.from_env({ACCESS_TOKEN_ENV_VAR: "pk.env"})
    assert config.access_token == "pk.env"


@pytest.mark.parametrize("environ", [{}, {ACCESS_TOKEN_ENV_VAR: ""}])
def test_client_config_from_env_unset(environ: dict[str, str]) -> None:
    """Test that a missing or empty variable gives no access token."""
    assert ClientConfig.from_env(environ).access_token is None


def test_client_config_from_env_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that os.environ is read by default."""
    monkeypatch.setenv(ACCESS_TOKEN_ENV_VAR, "pk.os")
    config = ClientConfig.from_env(timeout=3.0)
    assert config.access_token == "pk.os"
    assert config.timeout == 3.0


def test_client_config_from_env_explicit_access_token() -> None:
    """Test that an explicit access token takes precedence over the
    environment."""
    config = ClientConfig.from_env({ACCESS_TOKEN_ENV_VAR: "pk.env"}, access_token="pk.arg")
    assert config.access_token == "pk.arg"


def test_client_config_from_env_none_access_token() -> None:
    """Test that an explicit None falls back to the environment."""
    config = ClientConfig.from_env({ACCESS_TOKEN_ENV_VAR: "pk.env"}, access_token=None)
    assert config.access_token == "pk.env"


def test_client_config_merge() -> None:
    """Test that merge overrides the non-None values only."""
    config = ClientConfig(access_token="pk.abc")
    merged = config.merge(access_token=None, timeout=20.0)
    assert merged.access_token == "pk.abc"
    assert merged.timeout == 20.0
    assert config.timeout == DEFAULT_TIMEOUT


def test_client_config_to_dict() -> None:
    """Test conversion to a dictionary."""
    assert objects_are_equal(
        ClientConfig(access_token="pk.abc").to_dict(),
        {"access_token": "pk.abc", "timeout": DEFAULT_TIMEOUT},
    )


######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 10, 30.0, httpx.Timeout(5.0)])
def test_validate_timeout_valid(timeout: float | httpx.Timeout) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_access_token     #
###########################################


@pytest.mark.parametrize("access_token", [None, "pk.abc", "sk.abc"])
def test_validate_access_token_valid(access_token: str | None) -> None:
    validate_access_token(access_token)


@pytest.mark.parametrize("access_token", ["", "\t"])
def test_validate_access_token_invalid(access_token: str) -> None:
    with pytest.raises(ValueError, match=r"access_token must be a non-empty string"):
        validate_access_token(access_token)
