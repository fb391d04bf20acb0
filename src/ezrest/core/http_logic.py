r"""Shared request execution logic.

This module builds a request, applies the header set, executes it and
reads the full response body. The response stream is closed on every
exit path.
"""

from __future__ import annotations

__all__ = ["send_request"]

import logging

import httpx

from ezrest.core.config import DEFAULT_TIMEOUT
from ezrest.core.validation import validate_timeout
from ezrest.exceptions import BodyReadError, TransportError

logger: logging.Logger = logging.getLogger(__name__)


def send_request(
    method: str,
    url: str,
    *,
    headers: dict[str, str],
    content: bytes | None = None,
    client: httpx.Client | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> httpx.Response:
    """Execute a request and read the full response body.

    Args:
        method: The HTTP method (GET, POST, PUT).
        url: The URL to send the request to.
        headers: The header set applied to the request. Every entry is
            set on the outbound request.
        content: The encoded request body, if any.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The closed httpx.Response whose content has been read.

    Raises:
        TransportError: If the request cannot be built or executed, for
            example when a header value is not ASCII.
        BodyReadError: If the response body cannot be read.
        ValueError: If timeout is non-positive.
    """
    validate_timeout(timeout)

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        try:
            request = client.build_request(method, url, content=content, headers=headers)
            response = client.send(request, stream=True)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            logger.debug(f"{method} request to {url} encountered {type(exc).__name__}: {exc}")
            raise TransportError(
                method=method,
                url=url,
                message=f"{method} request to {url} failed: {exc}",
                cause=exc,
            ) from exc

        try:
            response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            logger.debug(
                f"{method} request to {url} failed to read body "
                f"(status {response.status_code}): {exc}"
            )
            raise BodyReadError(
                method=method,
                url=url,
                message=f"{method} request to {url} failed to read response body: {exc}",
                status_code=response.status_code,
                cause=exc,
            ) from exc
        finally:
            response.close()
        return response
    finally:
        if owns_client:
            client.close()
