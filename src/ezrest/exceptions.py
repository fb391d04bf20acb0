r"""Define the exceptions raised by ezrest requests.

Every exception carries the status code of the response when one was
received, or 0 when the request failed before a response arrived.
"""

from __future__ import annotations

__all__ = [
    "BodyReadError",
    "DeserializationError",
    "EzRestError",
    "HttpStatusError",
    "SerializationError",
    "TransportError",
]


class EzRestError(Exception):
    r"""Base exception for ezrest request failures.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A human-readable description of the failure.
        status_code: The HTTP status code of the response, or 0 if no
            response was received.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from ezrest.exceptions import EzRestError
        >>> error = EzRestError(method="GET", url="https://api.example.com", message="boom")
        >>> error.status_code
        0
        >>> str(error)
        'boom'

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int = 0,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.cause = cause


class SerializationError(EzRestError):
    r"""Raised when the request body cannot be encoded to JSON.

    No network I/O happens before this error is raised, so the status
    code is always 0.
    """


class TransportError(EzRestError):
    r"""Raised when the request cannot be built or executed.

    Covers malformed URLs, connection failures and timeouts.
    """


class BodyReadError(EzRestError):
    r"""Raised when a response was received but its body could not be
    read."""


class HttpStatusError(EzRestError):
    r"""Raised by ``get`` when the response status is >= 300.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A human-readable description of the failure.
        status_code: The HTTP status code of the response.
        body: The raw response body text.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int,
        body: str,
    ) -> None:
        super().__init__(method=method, url=url, message=message, status_code=status_code)
        self.body = body


class DeserializationError(EzRestError):
    r"""Raised when the response body does not match the requested type.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A human-readable description of the failure.
        status_code: The HTTP status code of the response.
        body: The raw response body text.
        cause: The underlying parse or validation error.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int,
        body: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            method=method, url=url, message=message, status_code=status_code, cause=cause
        )
        self.body = body
