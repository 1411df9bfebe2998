"""HTTP method enum used by request declarations."""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """
    HTTP verbs a request can be sent with.

    Members are ``str`` subclasses, so they can be handed to httpx anywhere a
    method string is expected.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value
