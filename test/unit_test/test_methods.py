from __future__ import annotations

import httpx

from wrapi import Method


def test_methods_are_plain_verb_strings() -> None:
    assert Method.GET == "GET"
    assert str(Method.DELETE) == "DELETE"
    assert [m.value for m in Method] == ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def test_method_accepted_by_httpx() -> None:
    request = httpx.Request(Method.OPTIONS, "http://mock/")
    assert request.method == "OPTIONS"
