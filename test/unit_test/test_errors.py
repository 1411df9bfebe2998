from __future__ import annotations

import pytest

from wrapi import ClientDecodeError, ClientError, ResponseError, WrapiError


@pytest.mark.parametrize(
    "error",
    [ResponseError(500), ClientError(), ClientDecodeError()],
)
def test_all_errors_share_base(error: Exception) -> None:
    assert isinstance(error, WrapiError)


def test_response_error_message_and_fields() -> None:
    err = ResponseError(404, {"error": "missing"})
    assert str(err) == "API response error with status 404 and body {'error': 'missing'}"
    assert err.status_code == 404
    assert err.body == {"error": "missing"}
    assert err.details == {"error": "missing"}


def test_response_error_without_body() -> None:
    err = ResponseError(502)
    assert err.body is None
    assert str(err) == "API response error with status 502 and body None"


def test_client_error_messages() -> None:
    assert str(ClientError()) == "HTTP client error"
    assert str(ClientError("connection refused")) == "HTTP client error: connection refused"
    assert ClientError().status_code is None


def test_client_decode_error_messages() -> None:
    assert str(ClientDecodeError()) == "HTTP client failed to decode response"
    err = ClientDecodeError("bad json", status_code=200)
    assert str(err) == "HTTP client failed to decode response: bad json"
    assert err.status_code == 200
