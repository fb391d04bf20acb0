r"""Define the result returned by successful ezrest requests."""

from __future__ import annotations

__all__ = ["RestResponse"]

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RestResponse(Generic[T]):
    """Result of a request that completed without error.

    Attributes:
        status_code: The HTTP status code of the response.
        data: The decoded response body, the raw text for
            ``post_accept_raw``, or ``None`` when nothing was decoded.

    Example:
        ```pycon
        >>> from ezrest.response import RestResponse
        >>> response = RestResponse(status_code=200, data={"status": "success"})
        >>> response.data["status"]
        'success'

        ```
    """

    status_code: int
    data: T | None = None
