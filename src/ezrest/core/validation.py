r"""Parameter validation utilities for ezrest requests.

This module provides validation functions that run before any network
I/O takes place.
"""

from __future__ import annotations

__all__ = ["SUPPORTED_BODY_METHODS", "validate_headers", "validate_method", "validate_timeout"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

# Methods accepted by post_or_put
SUPPORTED_BODY_METHODS = ("POST", "PUT")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from ezrest.core.validation import validate_timeout
        >>> validate_timeout(30.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_method(method: str) -> str:
    """Validate and normalize the method of a request with a body.

    Args:
        method: The HTTP method, in any case.

    Returns:
        The upper-cased method.

    Raises:
        ValueError: If the method is not POST or PUT.

    Example:
        ```pycon
        >>> from ezrest.core.validation import validate_method
        >>> validate_method("put")
        'PUT'

        ```
    """
    normalized = method.upper()
    if normalized not in SUPPORTED_BODY_METHODS:
        msg = f"method must be one of {SUPPORTED_BODY_METHODS}, got {method!r}"
        raise ValueError(msg)
    return normalized


def validate_headers(headers: Any) -> None:
    """Validate a header set.

    Args:
        headers: The header set to check.

    Raises:
        TypeError: If headers is not a mapping of str to str.
    """
    if not isinstance(headers, dict):
        msg = f"headers must be a dict, got {type(headers).__name__}"
        raise TypeError(msg)
    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            msg = f"header names and values must be str, got {name!r}: {value!r}"
            raise TypeError(msg)
