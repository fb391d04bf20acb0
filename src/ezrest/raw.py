r"""Contains the HTTP POST request that returns the raw response text."""

from __future__ import annotations

__all__ = ["post_accept_raw"]

import logging
from typing import TYPE_CHECKING, Any

from ezrest.core.codec import encode_body
from ezrest.core.http_logic import send_request
from ezrest.core.validation import validate_headers
from ezrest.defaults import resolve_config
from ezrest.response import RestResponse

if TYPE_CHECKING:
    import httpx

    from ezrest.core.config import ClientConfig

logger: logging.Logger = logging.getLogger(__name__)


def post_accept_raw(
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[str]:
    r"""Send an HTTP POST request with a JSON body and return the raw
    response text.

    The response is never decoded and its status code is never checked,
    which makes this function suitable for octet-stream or plain-text
    endpoints.

    Args:
        url: The URL to send the POST request to.
        headers: The header set applied to the request. If None, the
            header set of the config is used.
        body: The value sent as the JSON request body.
        config: An optional ClientConfig. If None, the process-wide
            default config is used.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.

    Returns:
        A RestResponse with the status code and the full response text.

    Raises:
        SerializationError: If the body cannot be encoded to JSON.
        TransportError: If the request cannot be built or executed.
        BodyReadError: If the response body cannot be read.

    Example:
        ```pycon
        >>> from ezrest import post_accept_raw
        >>> response = post_accept_raw(
        ...     "https://api.example.com/export", body={"format": "csv"}
        ... )  # doctest: +SKIP
        >>> response.data  # doctest: +SKIP
        'id,name\n1,Joe Plum\n'

        ```
    """
    config = resolve_config(config)
    if headers is None:
        headers = config.headers
    validate_headers(headers)

    if config.verbose:
        logger.info(f"ezrest.post_accept_raw({url})")

    content = encode_body(body, method="POST", url=url)
    response = send_request(
        "POST", url, headers=headers, content=content, client=client, timeout=config.timeout
    )
    return RestResponse(status_code=response.status_code, data=response.text)
