r"""JSON encoding of request bodies and decoding of response bodies.

Encoding and decoding go through pydantic, so bodies and response
types can be plain JSON values, dataclasses, TypedDicts or pydantic
models. Field names follow the aliases declared on those types.
"""

from __future__ import annotations

__all__ = ["decode_body", "encode_body"]

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, from_json, to_json

from ezrest.exceptions import DeserializationError, SerializationError

logger: logging.Logger = logging.getLogger(__name__)


def encode_body(body: Any, *, method: str, url: str) -> bytes:
    r"""Encode a request body to JSON.

    Args:
        body: The value to encode. ``None`` is encoded as ``null``.
        method: The HTTP method, used in error messages.
        url: The URL, used in error messages.

    Returns:
        The JSON document as bytes.

    Raises:
        SerializationError: If the value cannot be encoded, including
            when it contains NaN or an infinite float.

    Example:
        ```pycon
        >>> from ezrest.core.codec import encode_body
        >>> encode_body({"name": "Joe Plum"}, method="POST", url="https://api.example.com")
        b'{"name":"Joe Plum"}'

        ```
    """
    try:
        content = to_json(body, by_alias=True)
        # NaN and Infinity are written as bare tokens, which are not JSON
        from_json(content, allow_inf_nan=False)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.debug(f"{method} request to {url} has a body that cannot be encoded: {exc}")
        raise SerializationError(
            method=method,
            url=url,
            message=f"{method} request to {url} failed to encode body: {exc}",
            cause=exc,
        ) from exc
    return content


def decode_body(
    content: bytes,
    response_type: Any,
    *,
    method: str,
    url: str,
    status_code: int,
    text: str,
    include_body: bool = False,
) -> Any:
    r"""Decode a JSON response body into ``response_type``.

    Args:
        content: The raw response body.
        response_type: The type to validate the document against.
            ``typing.Any`` returns the parsed JSON unchanged.
        method: The HTTP method, used in error messages.
        url: The URL, used in error messages.
        status_code: The status code of the response.
        text: The response body as text, attached to the error.
        include_body: If ``True``, the raw body text is also embedded in
            the error message.

    Returns:
        The decoded value.

    Raises:
        DeserializationError: If the body is not valid JSON or does not
            match ``response_type``.

    Example:
        ```pycon
        >>> from ezrest.core.codec import decode_body
        >>> decode_body(
        ...     b'[1, 2]', list[int], method="GET", url="https://api.example.com",
        ...     status_code=200, text="[1, 2]",
        ... )
        [1, 2]

        ```
    """
    try:
        return TypeAdapter(response_type).validate_json(content)
    except ValidationError as exc:
        message = f"{method} request to {url} failed to decode response: {exc}"
        if include_body:
            message = f"{message}, response body: {text}"
        raise DeserializationError(
            method=method,
            url=url,
            message=message,
            status_code=status_code,
            body=text,
            cause=exc,
        ) from exc
