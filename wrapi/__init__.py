"""wrapi.

Helpers for wrapping HTTP APIs with ``httpx`` and ``pydantic``.

A request is declared once as a `Request` subclass: its fields are the JSON
body, and a handful of overridable hooks describe the method, endpoint,
headers, query and form parameters. The response is validated into the
request's ``response_type``.

Requests are not tied to a client instance; bring your own::

    client = httpx.Client()
    user = CreateUserRequest(name="John Doe").send(client, "https://api.example.com")

Core modules
------------

- ``wrapi.request``: the `Request` base model.
- ``wrapi.parameters``: the `Parameters` value object.
- ``wrapi.errors``: `WrapiError` and its subclasses.
- ``wrapi.client``: factories for httpx clients with configured defaults.
"""

import httpx

from wrapi._version import __version__
from wrapi.client import build_async_client, build_client
from wrapi.config import WrapiSettings, get_settings
from wrapi.errors import ClientDecodeError, ClientError, ResponseError, WrapiError
from wrapi.methods import Method
from wrapi.parameters import Parameters
from wrapi.request import Request

__all__ = [
    "__version__",
    "httpx",
    "Request",
    "Method",
    "Parameters",
    "WrapiError",
    "ResponseError",
    "ClientError",
    "ClientDecodeError",
    "WrapiSettings",
    "get_settings",
    "build_client",
    "build_async_client",
]
