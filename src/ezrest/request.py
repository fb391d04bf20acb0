r"""Contains the HTTP POST/PUT request shared by post and put."""

from __future__ import annotations

__all__ = ["post_or_put"]

import logging
from typing import TYPE_CHECKING, Any

from ezrest.core.codec import decode_body, encode_body
from ezrest.core.http_logic import send_request
from ezrest.core.validation import validate_headers, validate_method
from ezrest.defaults import resolve_config
from ezrest.response import RestResponse

if TYPE_CHECKING:
    import httpx

    from ezrest.core.config import ClientConfig

logger: logging.Logger = logging.getLogger(__name__)


def post_or_put(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
    response_type: Any = Any,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[Any]:
    r"""Send an HTTP POST or PUT request with a JSON body.

    The body is encoded before any network I/O. The response body is
    decoded whenever it is non-empty and ``response_type`` is not None,
    whatever the status code.

    Args:
        method: ``"POST"`` or ``"PUT"``, in any case.
        url: The URL to send the request to.
        headers: The header set applied to the request. If None, the
            header set of the config is used.
        body: The value sent as the JSON request body.
        response_type: The type the response body is decoded into. Pass
            None to skip decoding. The default ``typing.Any`` returns the
            parsed JSON.
        config: An optional ClientConfig. If None, the process-wide
            default config is used.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.

    Returns:
        A RestResponse with the status code and the decoded body, or
        ``data=None`` when nothing was decoded.

    Raises:
        SerializationError: If the body cannot be encoded to JSON.
        TransportError: If the request cannot be built or executed.
        BodyReadError: If the response body cannot be read.
        DeserializationError: If the body does not match response_type.
            Its message embeds the raw body text.
        ValueError: If method is not POST or PUT.

    Example:
        ```pycon
        >>> from ezrest import post_or_put
        >>> response = post_or_put(
        ...     "PUT", "https://api.example.com/employees/1", body={"name": "Joe Plum"}
        ... )  # doctest: +SKIP

        ```
    """
    method = validate_method(method)
    config = resolve_config(config)
    if headers is None:
        headers = config.headers
    validate_headers(headers)

    if config.verbose:
        logger.info(f"ezrest.{method.lower()}({url})")

    content = encode_body(body, method=method, url=url)
    response = send_request(
        method, url, headers=headers, content=content, client=client, timeout=config.timeout
    )

    data = None
    if response.content and response_type is not None:
        data = decode_body(
            response.content,
            response_type,
            method=method,
            url=url,
            status_code=response.status_code,
            text=response.text,
            include_body=True,
        )
    return RestResponse(status_code=response.status_code, data=data)
