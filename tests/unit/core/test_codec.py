r"""Unit tests for the JSON codec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx
import pytest
from pydantic import BaseModel, Field

from ezrest import post
from ezrest.core.codec import decode_body, encode_body
from ezrest.exceptions import DeserializationError, SerializationError

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_URL = "https://api.example.com/data"


@dataclass
class Employee:
    name: str
    salary: str
    age: str


class Item(BaseModel):
    item_id: int = Field(alias="id")
    label: str = ""


#################################
#     Tests for encode_body     #
#################################


def test_encode_body_dict() -> None:
    assert encode_body({"name": "Joe Plum"}, method="POST", url=TEST_URL) == b'{"name":"Joe Plum"}'


def test_encode_body_none() -> None:
    assert encode_body(None, method="POST", url=TEST_URL) == b"null"


def test_encode_body_dataclass() -> None:
    body = Employee(name="Joe Plum", salary="123", age="25")
    assert (
        encode_body(body, method="POST", url=TEST_URL)
        == b'{"name":"Joe Plum","salary":"123","age":"25"}'
    )


def test_encode_body_pydantic_model_uses_alias() -> None:
    assert encode_body(Item(id=7), method="PUT", url=TEST_URL) == b'{"id":7,"label":""}'


def test_encode_body_unserializable() -> None:
    with pytest.raises(SerializationError, match=r"POST request to .* failed to encode body") as exc_info:
        encode_body({"value": object()}, method="POST", url=TEST_URL)

    error = exc_info.value
    assert error.status_code == 0
    assert error.method == "POST"
    assert error.url == TEST_URL
    assert error.__cause__ is error.cause
    assert error.cause is not None


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_encode_body_non_finite_float(value: float) -> None:
    with pytest.raises(SerializationError, match=r"failed to encode body") as exc_info:
        encode_body({"salary": value}, method="POST", url=TEST_URL)

    assert exc_info.value.status_code == 0
    assert isinstance(exc_info.value.cause, ValueError)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_post_non_finite_float_is_not_sent(
    make_client: Callable[..., httpx.Client], sent_requests: list[httpx.Request], value: float
) -> None:
    with pytest.raises(SerializationError):
        post(TEST_URL, body={"salary": value}, client=make_client(json={}))
    assert sent_requests == []

#################################
#     Tests for decode_body     #
#################################


def test_decode_body_any() -> None:
    data = decode_body(
        b'{"status":"success"}', Any, method="GET", url=TEST_URL, status_code=200, text=""
    )
    assert data == {"status": "success"}


def test_decode_body_dataclass() -> None:
    data = decode_body(
        b'{"name":"Joe Plum","salary":"123","age":"25","extra":1}',
        Employee,
        method="GET",
        url=TEST_URL,
        status_code=200,
        text="",
    )
    assert data == Employee(name="Joe Plum", salary="123", age="25")


def test_decode_body_pydantic_model_alias() -> None:
    data = decode_body(
        b'[{"id":1},{"id":2,"label":"b"}]',
        list[Item],
        method="GET",
        url=TEST_URL,
        status_code=200,
        text="",
    )
    assert [item.item_id for item in data] == [1, 2]
    assert data[1].label == "b"


def test_decode_body_invalid_json() -> None:
    with pytest.raises(DeserializationError, match=r"failed to decode response") as exc_info:
        decode_body(
            b"<html>oops</html>",
            Any,
            method="GET",
            url=TEST_URL,
            status_code=200,
            text="<html>oops</html>",
        )

    error = exc_info.value
    assert error.status_code == 200
    assert error.body == "<html>oops</html>"


def test_decode_body_shape_mismatch_includes_body() -> None:
    with pytest.raises(DeserializationError, match=r"response body: \{\"name\":1\}") as exc_info:
        decode_body(
            b'{"name":1}',
            Employee,
            method="POST",
            url=TEST_URL,
            status_code=201,
            text='{"name":1}',
            include_body=True,
        )

    assert exc_info.value.status_code == 201
    assert exc_info.value.method == "POST"
