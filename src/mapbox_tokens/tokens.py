r"""Manage access tokens with the Mapbox Tokens API.

This module provides ``TokenApi``, the resource layer on top of
``MapboxClient`` that creates, lists, updates and deletes the tokens of
a Mapbox account (``tokens/v2/<username>``).
"""

from __future__ import annotations

__all__ = ["Token", "TokenApi"]

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from mapbox_tokens.client import MapboxClient

logger: logging.Logger = logging.getLogger(__name__)


@dataclass
class Token:
    r"""A token record returned by the Tokens API.

    Args:
        id: The unique identifier of the token.
        token: The token value itself.
        note: The human-readable description of the token.
        scopes: The scopes granted to the token.
        allowed_urls: The URLs the token is restricted to. Empty means
            no restriction.
        usage: The token kind reported by the API (e.g. ``"pk"``).
        created: The creation date, as returned by the API.
        modified: The last modification date, as returned by the API.
        default: Whether this is the default public token.

    Example:
        ```pycon
        >>> from mapbox_tokens.tokens import Token
        >>> token = Token.from_dict(
        ...     {"id": "ck1", "token": "pk.abc", "note": "ci", "allowedUrls": ["https://a.b"]}
        ... )
        >>> token.allowed_urls
        ['https://a.b']

        ```
    """

    id: str
    token: str = ""
    note: str = ""
    scopes: list[str] = field(default_factory=list)
    allowed_urls: list[str] = field(default_factory=list)
    usage: str | None = None
    created: str | None = None
    modified: str | None = None
    default: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        r"""Create a token from its JSON representation."""
        return cls(
            id=data["id"],
            token=data.get("token") or "",
            note=data.get("note") or "",
            scopes=list(data.get("scopes") or []),
            allowed_urls=list(data.get("allowedUrls") or []),
            usage=data.get("usage"),
            created=data.get("created"),
            modified=data.get("modified"),
            default=bool(data.get("default", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        r"""Return the JSON representation of the token."""
        return {
            "id": self.id,
            "token": self.token,
            "note": self.note,
            "scopes": list(self.scopes),
            "allowedUrls": list(self.allowed_urls),
            "usage": self.usage,
            "created": self.created,
            "modified": self.modified,
            "default": self.default,
        }


class TokenApi:
    r"""Create, read, update and delete the tokens of a Mapbox account.

    Every method performs one call through ``MapboxClient`` and reads and
    closes the response. Errors raised by the client propagate
    unchanged; a missing token surfaces as ``ApiError`` with
    ``is_not_found`` set, except for ``get`` which returns ``None``.

    Args:
        client: The client used to send the requests. Its access token
            needs the ``tokens:read`` and ``tokens:write`` scopes.
        username: The Mapbox account owning the tokens.

    Raises:
        ValueError: If ``username`` is empty.

    Example:
        ```pycon
        >>> from mapbox_tokens import MapboxClient, TokenApi
        >>> from mapbox_tokens.core import ClientConfig
        >>> with MapboxClient(config=ClientConfig.from_env()) as client:  # doctest: +SKIP
        ...     api = TokenApi(client, username="my-user")
        ...     token = api.create(note="ci", scopes=["styles:read"])
        ...     api.delete(token.id)
        ...

        ```
    """

    def __init__(self, client: MapboxClient, username: str) -> None:
        if not username:
            msg = "username must be a non-empty string"
            raise ValueError(msg)
        self._client = client
        self._username = username

    @property
    def endpoint(self) -> str:
        r"""The collection endpoint of the account tokens."""
        return f"tokens/v2/{self._username}"

    def token_endpoint(self, token_id: str) -> str:
        r"""Return the endpoint of a single token."""
        return f"{self.endpoint}/{token_id}"

    def create(
        self,
        note: str,
        scopes: Sequence[str],
        allowed_urls: Sequence[str] | None = None,
    ) -> Token:
        r"""Create a token.

        Args:
            note: The description of the token.
            scopes: The scopes to grant.
            allowed_urls: Optional URL restrictions. Not sent if ``None``.

        Returns:
            The created token, including its value.

        Raises:
            TypeError: If ``scopes`` or ``allowed_urls`` is a string.
        """
        payload: dict[str, Any] = {"note": note, "scopes": _as_list("scopes", scopes)}
        if allowed_urls is not None:
            payload["allowedUrls"] = _as_list("allowed_urls", allowed_urls)
        response = self._client.post(self.endpoint, _encode(payload))
        token = Token.from_dict(_read_json(response))
        logger.debug(f"Created token {token.id} for {self._username}")
        return token

    def list(self) -> list[Token]:
        r"""Return the tokens of the account."""
        response = self._client.get(self.endpoint)
        return [Token.from_dict(item) for item in _read_json(response)]

    def get(self, token_id: str) -> Token | None:
        r"""Return the token with the given id, or ``None`` if the
        account has no such token."""
        for token in self.list():
            if token.id == token_id:
                return token
        logger.debug(f"Token {token_id} not found for {self._username}")
        return None

    def update(
        self,
        token_id: str,
        note: str | None = None,
        scopes: Sequence[str] | None = None,
        allowed_urls: Sequence[str] | None = None,
    ) -> Token:
        r"""Update a token.

        Only the arguments that are not ``None`` are sent.

        Args:
            token_id: The id of the token to update.
            note: The new description.
            scopes: The new scopes.
            allowed_urls: The new URL restrictions. An empty sequence
                removes all restrictions.

        Returns:
            The updated token.

        Raises:
            TypeError: If ``scopes`` or ``allowed_urls`` is a string.
        """
        payload: dict[str, Any] = {}
        if note is not None:
            payload["note"] = note
        if scopes is not None:
            payload["scopes"] = _as_list("scopes", scopes)
        if allowed_urls is not None:
            payload["allowedUrls"] = _as_list("allowed_urls", allowed_urls)
        response = self._client.patch(self.token_endpoint(token_id), _encode(payload))
        return Token.from_dict(_read_json(response))

    def delete(self, token_id: str) -> None:
        r"""Delete a token."""
        response = self._client.delete(self.token_endpoint(token_id))
        response.close()
        logger.debug(f"Deleted token {token_id} for {self._username}")


def _as_list(name: str, values: Sequence[str]) -> list[str]:
    if isinstance(values, str):
        msg = f"{name} must be a sequence of strings, not a string: {values!r}"
        raise TypeError(msg)
    return list(values)


def _encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload).encode("utf-8")


def _read_json(response: httpx.Response) -> Any:
    try:
        response.read()
        return response.json()
    finally:
        response.close()
