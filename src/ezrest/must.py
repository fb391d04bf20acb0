r"""Contains the fail-fast POST and PUT requests.

``must_post`` and ``must_put`` terminate the process when the request
fails. They are meant for scripts and start-up code where there is no
sensible way to recover. Everywhere else, use ``post`` and ``put`` and
handle ``EzRestError``.
"""

from __future__ import annotations

__all__ = ["must_post", "must_put"]

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from ezrest.defaults import resolve_config
from ezrest.exceptions import EzRestError
from ezrest.post import post
from ezrest.put import put

if TYPE_CHECKING:
    import httpx

    from ezrest.core.config import ClientConfig
    from ezrest.response import RestResponse

logger: logging.Logger = logging.getLogger(__name__)


def abort(
    func_name: str, url: str, headers: dict[str, str] | None, body: Any, exc: EzRestError
) -> NoReturn:
    r"""Log a critical diagnostic and terminate the process.

    Args:
        func_name: The name of the failed function, used in the log line.
        url: The URL of the failed request.
        headers: The header set sent with the failed request.
        body: The body of the failed request.
        exc: The error returned by the request.

    Raises:
        SystemExit: Always, with exit code 1 and ``exc`` as its cause.
    """
    logger.critical(
        f"ezrest.{func_name}(url={url}, headers={headers}, body={body!r}) failed: {exc}"
    )
    raise SystemExit(1) from exc


def must_post(
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
    response_type: Any = Any,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[Any]:
    r"""Send an HTTP POST request and terminate the process on failure.

    Args:
        url: The URL to send the POST request to.
        headers: The header set applied to the request. If None, the
            header set of the config is used.
        body: The value sent as the JSON request body.
        response_type: The type the response body is decoded into.
        config: An optional ClientConfig. If None, the process-wide
            default config is used.
        client: An optional httpx.Client object to use for making requests.

    Returns:
        A RestResponse with the status code and the decoded body.

    Raises:
        SystemExit: If ``post`` raises any EzRestError.
    """
    try:
        return post(
            url,
            headers=headers,
            body=body,
            response_type=response_type,
            config=config,
            client=client,
        )
    except EzRestError as exc:
        if headers is None:
            headers = resolve_config(config).headers
        abort("must_post", url, headers, body, exc)


def must_put(
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
    response_type: Any = Any,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[Any]:
    r"""Send an HTTP PUT request and terminate the process on failure.

    See ``must_post`` for the description of the arguments.

    Raises:
        SystemExit: If ``put`` raises any EzRestError.
    """
    try:
        return put(
            url,
            headers=headers,
            body=body,
            response_type=response_type,
            config=config,
            client=client,
        )
    except EzRestError as exc:
        if headers is None:
            headers = resolve_config(config).headers
        abort("must_put", url, headers, body, exc)
