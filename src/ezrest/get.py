r"""Contains the HTTP GET request that decodes a JSON response."""

from __future__ import annotations

__all__ = ["get"]

import logging
from typing import TYPE_CHECKING, Any

from ezrest.core.codec import decode_body
from ezrest.core.http_logic import send_request
from ezrest.core.validation import validate_headers
from ezrest.defaults import resolve_config
from ezrest.exceptions import DeserializationError, HttpStatusError
from ezrest.response import RestResponse

if TYPE_CHECKING:
    import httpx

    from ezrest.core.config import ClientConfig

logger: logging.Logger = logging.getLogger(__name__)


def get(
    url: str,
    headers: dict[str, str] | None = None,
    response_type: Any = Any,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[Any]:
    r"""Send an HTTP GET request and decode the JSON response.

    The request is sent without a body. A response with a status code
    >= 300 is never decoded: it raises ``HttpStatusError`` with the raw
    body text instead.

    Args:
        url: The URL to send the GET request to.
        headers: The header set applied to the request. If None, the
            header set of the config is used.
        response_type: The type the response body is decoded into, for
            example a dataclass, a pydantic model or ``list[int]``. The
            default ``typing.Any`` returns the parsed JSON.
        config: An optional ClientConfig. If None, the process-wide
            default config is used.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.

    Returns:
        A RestResponse with the status code and the decoded body.

    Raises:
        TransportError: If the request cannot be built or executed.
        BodyReadError: If the response body cannot be read.
        HttpStatusError: If the status code is >= 300.
        DeserializationError: If the body does not match response_type.

    Example:
        ```pycon
        >>> from ezrest import get
        >>> response = get("https://api.example.com/employees")  # doctest: +SKIP
        >>> response.status_code  # doctest: +SKIP
        200

        ```
    """
    config = resolve_config(config)
    if headers is None:
        headers = config.headers
    validate_headers(headers)

    if config.verbose:
        logger.info(f"ezrest.get({url})")

    response = send_request("GET", url, headers=headers, client=client, timeout=config.timeout)
    if response.status_code >= 300:
        logger.debug(f"GET request to {url} failed with status {response.status_code}")
        raise HttpStatusError(
            method="GET",
            url=url,
            message=f"GET request to {url} failed with status {response.status_code}: "
            f"{response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        data = decode_body(
            response.content,
            response_type,
            method="GET",
            url=url,
            status_code=response.status_code,
            text=response.text,
        )
    except DeserializationError:
        if config.verbose:
            logger.info(f"Response: {response.text}")
        raise
    return RestResponse(status_code=response.status_code, data=data)
