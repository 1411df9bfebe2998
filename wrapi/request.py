"""Declarative HTTP API requests.

A request type is a pydantic model whose fields form the JSON body. The
subclass declares where and how it is sent by overriding a few hooks
(`endpoint`, `method`, `headers`, `query`, `form`, `body`) and which type a
successful response decodes into (`response_type`).

Requests are not bound to a client: the caller hands an ``httpx.Client`` or
``httpx.AsyncClient`` plus a base URL to `Request.send` / `Request.asend`.

Examples:
    >>> class CreateUserResponse(BaseModel):
    ...     id: int
    >>> class CreateUserRequest(Request):
    ...     response_type = CreateUserResponse
    ...     name: str
    ...     def endpoint(self) -> str:
    ...         return "user"
    ...     def method(self) -> Method:
    ...         return Method.POST
    >>> CreateUserRequest(name="John Doe").url("https://api.example.com/")
    'https://api.example.com/user'
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar, Dict, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from wrapi.errors import ClientDecodeError, ClientError, ResponseError
from wrapi.methods import Method
from wrapi.parameters import Parameters

logger = logging.getLogger(__name__)

# Keyword arguments that already carry a request body in httpx.
_BODY_KWARGS = frozenset({"content", "data", "files", "json"})

# Methods a request field must not shadow.
_RESERVED_NAMES = frozenset(
    {
        "endpoint",
        "method",
        "headers",
        "query",
        "form",
        "body",
        "parameters",
        "url",
        "body_payload",
        "build_request",
        "send",
        "asend",
        "execute",
        "aexecute",
        "from_response",
        "afrom_response",
    }
)


@lru_cache(maxsize=None)
def _type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _json_or_none(response: httpx.Response) -> Optional[Any]:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class Request(BaseModel):
    """Base class for API request declarations.

    Subclasses must implement `endpoint`. Everything else has a default:
    ``GET``, no headers, no query, no form, and the model itself as JSON body.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Type a 2xx response body is validated into.
    response_type: ClassVar[Any] = Any

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        clashes = sorted(_RESERVED_NAMES.intersection(cls.model_fields))
        if clashes:
            name = clashes[0]
            raise TypeError(
                f"{cls.__name__} declares field(s) {', '.join(clashes)} that shadow Request methods; "
                f"rename and alias them instead, e.g. `{name}_: str = Field(alias=\"{name}\")`"
            )

    # ------------------------------------------------------------------
    # Declaration hooks
    # ------------------------------------------------------------------

    def endpoint(self) -> str:
        """Endpoint to perform the request for, relative to the base URL (e.g. ``auth``)."""
        raise NotImplementedError(f"{type(self).__name__} must implement endpoint()")

    def method(self) -> Method:
        """HTTP method to use. Defaults to ``GET``."""
        return Method.GET

    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def query(self) -> Optional[Dict[str, str]]:
        return None

    def form(self) -> Optional[Dict[str, str]]:
        return None

    def body(self) -> Optional[BaseModel]:
        """The model serialized as JSON body. Return None to send no body."""
        return self

    def parameters(self) -> Parameters:
        return Parameters(headers=self.headers(), query=self.query(), form=self.form())

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def url(self, base_url: str) -> str:
        endpoint = self.endpoint().lstrip("/")
        return f"{base_url.rstrip('/')}/{endpoint}"

    def body_payload(self) -> Optional[Any]:
        body = self.body()
        if body is None:
            return None
        return body.model_dump(mode="json", by_alias=True)

    def build_request(self, client: Union[httpx.Client, httpx.AsyncClient], base_url: str) -> httpx.Request:
        """Build the ``httpx.Request`` that `send` would issue.

        Headers, query and form parameters are applied when present. A form
        is sent url-encoded and takes the place of the JSON body.
        """
        params = self.parameters()
        kwargs: Dict[str, Any] = {}
        if params.headers is not None:
            kwargs["headers"] = params.headers
        if params.query is not None:
            kwargs["params"] = params.query
        payload = self.body_payload()
        if params.form is not None:
            kwargs["data"] = params.form
            if payload is not None:
                logger.debug("%s.build_request: form present, JSON body not sent", type(self).__name__)
        elif payload is not None:
            kwargs["json"] = payload
        try:
            return client.build_request(str(self.method()), self.url(base_url), **kwargs)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise ClientError(str(e)) from e

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def send(self, client: httpx.Client, base_url: str) -> Any:
        """Send the request with ``client`` and decode the response.

        Raises:
            ClientError: the client failed to produce a response.
            ResponseError: the API answered with a non-2xx status.
            ClientDecodeError: the body does not fit `response_type`.
        """
        request = self.build_request(client, base_url)
        logger.debug("%s.send: %s %s", type(self).__name__, request.method, request.url)
        try:
            response = client.send(request)
        except httpx.HTTPError as e:
            logger.warning("%s.send: %s %s failed: %s", type(self).__name__, request.method, request.url, e)
            raise ClientError(str(e)) from e
        return self.from_response(response)

    async def asend(self, client: httpx.AsyncClient, base_url: str) -> Any:
        """Async counterpart of `send`."""
        request = self.build_request(client, base_url)
        logger.debug("%s.asend: %s %s", type(self).__name__, request.method, request.url)
        try:
            response = await client.send(request)
        except httpx.HTTPError as e:
            logger.warning("%s.asend: %s %s failed: %s", type(self).__name__, request.method, request.url, e)
            raise ClientError(str(e)) from e
        return await self.afrom_response(response)

    def execute(self, client: httpx.Client, method: Union[Method, str], url: str, **kwargs: Any) -> Any:
        """Send a caller-built request, keeping the built-in body and decoding.

        ``kwargs`` go to ``client.request`` unchanged. The model is attached as
        JSON body unless `body` returns None or ``kwargs`` already carry one.
        """
        self._attach_body(kwargs)
        logger.debug("%s.execute: %s %s", type(self).__name__, method, url)
        try:
            response = client.request(str(method), url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning("%s.execute: %s %s failed: %s", type(self).__name__, method, url, e)
            raise ClientError(str(e)) from e
        return self.from_response(response)

    async def aexecute(self, client: httpx.AsyncClient, method: Union[Method, str], url: str, **kwargs: Any) -> Any:
        """Async counterpart of `execute`."""
        self._attach_body(kwargs)
        logger.debug("%s.aexecute: %s %s", type(self).__name__, method, url)
        try:
            response = await client.request(str(method), url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning("%s.aexecute: %s %s failed: %s", type(self).__name__, method, url, e)
            raise ClientError(str(e)) from e
        return await self.afrom_response(response)

    def _attach_body(self, kwargs: Dict[str, Any]) -> None:
        if _BODY_KWARGS.intersection(kwargs):
            return
        payload = self.body_payload()
        if payload is not None:
            kwargs["json"] = payload

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def from_response(self, response: httpx.Response) -> Any:
        """Decode ``response`` into `response_type`.

        Non-2xx responses raise `ResponseError` carrying the JSON body when the
        body is JSON and None otherwise. An empty 2xx body decodes as ``None``.
        """
        logger.debug("%s.from_response: status=%s", type(self).__name__, response.status_code)
        if not response.is_success:
            body = _json_or_none(response)
            logger.warning("%s: API responded %s", type(self).__name__, response.status_code)
            raise ResponseError(response.status_code, body)

        adapter = _type_adapter(self.response_type)
        try:
            if not response.content:
                return adapter.validate_python(None)
            return adapter.validate_json(response.content)
        except ValidationError as e:
            logger.warning("%s: could not decode response: %s", type(self).__name__, e)
            raise ClientDecodeError(str(e), status_code=response.status_code) from e

    async def afrom_response(self, response: httpx.Response) -> Any:
        await response.aread()
        return self.from_response(response)
