r"""Synchronous context manager client for JSON REST calls.

This module provides a context manager-based client for making multiple
requests with a shared configuration. The RestClient manages the
underlying httpx.Client lifecycle and exposes the same operations as the
module-level functions.
"""

from __future__ import annotations

__all__ = ["RestClient"]

from typing import TYPE_CHECKING, Any

import httpx

from ezrest.core.config import ClientConfig
from ezrest.get import get
from ezrest.must import must_post, must_put
from ezrest.raw import post_accept_raw
from ezrest.request import post_or_put

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from ezrest.response import RestResponse


class RestClient:
    r"""Synchronous context manager for JSON REST calls.

    The config passed to the constructor replaces the process-wide
    default config for every call made through this client. Its header
    set is applied unless a call passes its own ``headers``.

    Two usage patterns are supported:

    **Two context managers (external lifecycle management)**: the
    ``httpx.Client`` is managed by an outer ``with`` block and passed in.
    ``RestClient`` never closes a client it did not create.

    .. code-block:: python

        import httpx
        from ezrest import RestClient

        with httpx.Client(timeout=5.0) as http_client:
            with RestClient(client=http_client) as client:
                response = client.get("https://api.example.com/employees")

    **Single context manager**: ``RestClient`` creates the ``httpx.Client``
    and closes it when the ``with`` block exits. The client can be entered
    again afterwards.

    .. code-block:: python

        from ezrest import ClientConfig, RestClient

        with RestClient(config=ClientConfig(verbose=True)) as client:
            response = client.post("https://api.example.com/create", body={"name": "Joe"})

    Args:
        config: Optional ClientConfig. If ``None``, a default ClientConfig
            is used.
        client: Optional httpx.Client instance to use for requests.
            If ``None``, a new client is created with the config timeout.
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._client: httpx.Client | None = client
        self._owns_client = client is None
        self._entered = False

    @property
    def config(self) -> ClientConfig:
        r"""The configuration applied to every call."""
        return self._config

    def __enter__(self) -> Self:
        """Enter the context manager.

        A new ``httpx.Client`` is created here unless one was passed to
        the constructor.

        Returns:
            The RestClient instance for making requests.
        """
        if self._owns_client:
            self._client = httpx.Client(timeout=self._config.timeout)
        self._entered = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the underlying httpx
        client if this RestClient created it."""
        self._entered = False
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def _check_entered(self) -> None:
        if not self._entered:
            msg = "RestClient must be used within a context manager (with statement)"
            raise RuntimeError(msg)

    def get(
        self, url: str, headers: dict[str, str] | None = None, response_type: Any = Any
    ) -> RestResponse[Any]:
        r"""Send an HTTP GET request and decode the JSON response.

        See ``ezrest.get`` for details.
        """
        self._check_entered()
        return get(
            url,
            headers=headers,
            response_type=response_type,
            config=self._config,
            client=self._client,
        )

    def post_or_put(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        response_type: Any = Any,
    ) -> RestResponse[Any]:
        r"""Send an HTTP POST or PUT request with a JSON body.

        See ``ezrest.post_or_put`` for details.
        """
        self._check_entered()
        return post_or_put(
            method,
            url,
            headers=headers,
            body=body,
            response_type=response_type,
            config=self._config,
            client=self._client,
        )

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        response_type: Any = Any,
    ) -> RestResponse[Any]:
        r"""Send an HTTP POST request with a JSON body."""
        return self.post_or_put(
            "POST", url, headers=headers, body=body, response_type=response_type
        )

    def put(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        response_type: Any = Any,
    ) -> RestResponse[Any]:
        r"""Send an HTTP PUT request with a JSON body."""
        return self.post_or_put(
            "PUT", url, headers=headers, body=body, response_type=response_type
        )

    def must_post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        response_type: Any = Any,
    ) -> RestResponse[Any]:
        r"""Send an HTTP POST request and terminate the process on failure."""
        self._check_entered()
        return must_post(
            url,
            headers=headers,
            body=body,
            response_type=response_type,
            config=self._config,
            client=self._client,
        )

    def must_put(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        response_type: Any = Any,
    ) -> RestResponse[Any]:
        r"""Send an HTTP PUT request and terminate the process on failure."""
        self._check_entered()
        return must_put(
            url,
            headers=headers,
            body=body,
            response_type=response_type,
            config=self._config,
            client=self._client,
        )

    def post_accept_raw(
        self, url: str, headers: dict[str, str] | None = None, body: Any = None
    ) -> RestResponse[str]:
        r"""Send an HTTP POST request and return the raw response text."""
        self._check_entered()
        return post_accept_raw(
            url, headers=headers, body=body, config=self._config, client=self._client
        )
