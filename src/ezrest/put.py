r"""Contains the HTTP PUT request with a JSON body."""

from __future__ import annotations

__all__ = ["put"]

from typing import TYPE_CHECKING, Any

from ezrest.request import post_or_put

if TYPE_CHECKING:
    import httpx

    from ezrest.core.config import ClientConfig
    from ezrest.response import RestResponse


def put(
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
    response_type: Any = Any,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> RestResponse[Any]:
    r"""Send an HTTP PUT request with a JSON body.

    See ``post_or_put`` for the description of the arguments and the
    raised exceptions.

    Example:
        ```pycon
        >>> from ezrest import put
        >>> response = put(
        ...     "https://api.example.com/update/1",
        ...     body={"name": "Joe Plum", "salary": "123", "age": "25"},
        ... )  # doctest: +SKIP

        ```
    """
    return post_or_put(
        "PUT",
        url,
        headers=headers,
        body=body,
        response_type=response_type,
        config=config,
        client=client,
    )
