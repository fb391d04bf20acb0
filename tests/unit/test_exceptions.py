r"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from ezrest.exceptions import (
    BodyReadError,
    DeserializationError,
    EzRestError,
    HttpStatusError,
    SerializationError,
    TransportError,
)

TEST_URL = "https://api.example.com/data"


@pytest.mark.parametrize(
    "error_cls",
    [BodyReadError, DeserializationError, HttpStatusError, SerializationError, TransportError],
)
def test_errors_derive_from_ezrest_error(error_cls: type[EzRestError]) -> None:
    assert issubclass(error_cls, EzRestError)
    assert issubclass(error_cls, Exception)


def test_ezrest_error_attributes() -> None:
    cause = ValueError("bad")
    error = EzRestError(method="GET", url=TEST_URL, message="boom", status_code=418, cause=cause)

    assert str(error) == "boom"
    assert error.method == "GET"
    assert error.url == TEST_URL
    assert error.message == "boom"
    assert error.status_code == 418
    assert error.cause is cause


def test_ezrest_error_defaults() -> None:
    error = TransportError(method="POST", url=TEST_URL, message="refused")
    assert error.status_code == 0
    assert error.cause is None


def test_http_status_error_body() -> None:
    error = HttpStatusError(
        method="GET", url=TEST_URL, message="failed", status_code=404, body="not found"
    )
    assert error.status_code == 404
    assert error.body == "not found"
    assert error.cause is None


def test_deserialization_error_body() -> None:
    cause = ValueError("invalid json")
    error = DeserializationError(
        method="PUT", url=TEST_URL, message="failed", status_code=200, body="<html>", cause=cause
    )
    assert error.body == "<html>"
    assert error.cause is cause
    assert error.status_code == 200
