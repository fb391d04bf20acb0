r"""ezrest - Minimal JSON REST calls on top of httpx.

This package reduces the boilerplate around making a JSON-based HTTP
call and reading back the structured result. Request bodies are encoded
to JSON and response bodies are decoded into a caller-chosen type with
pydantic.

Key Features:
    - GET, POST and PUT requests with a default JSON header set
    - Decoding into dataclasses, pydantic models or plain JSON values
    - A raw-text POST variant for non-JSON responses
    - Fail-fast ``must_post`` and ``must_put`` for scripts
    - Process-wide defaults or an explicit ``ClientConfig`` per call
    - Context manager API for sharing one connection pool

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from ezrest import get, post
    >>> @dataclass
    ... class Employee:
    ...     id: str
    ...
    >>> @dataclass
    ... class Employees:
    ...     status: str
    ...     data: list[Employee]
    ...
    >>> response = get(
    ...     "https://api.example.com/employees", response_type=Employees
    ... )  # doctest: +SKIP
    >>> response.data.data[0].id  # doctest: +SKIP
    '1'
    >>> response = post(
    ...     "https://api.example.com/create", body={"name": "Joe Plum"}
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TIMEOUT",
    "BodyReadError",
    "ClientConfig",
    "DeserializationError",
    "EzRestError",
    "HttpStatusError",
    "RestClient",
    "RestResponse",
    "SerializationError",
    "TransportError",
    "__version__",
    "default_headers",
    "get",
    "get_default_config",
    "must_post",
    "must_put",
    "post",
    "post_accept_raw",
    "post_or_put",
    "put",
    "reset_default_config",
    "set_default_config",
    "set_default_headers",
    "set_verbose",
]

from importlib.metadata import PackageNotFoundError, version

from ezrest.client import RestClient
from ezrest.core.config import DEFAULT_TIMEOUT, ClientConfig, default_headers
from ezrest.defaults import (
    get_default_config,
    reset_default_config,
    set_default_config,
    set_default_headers,
    set_verbose,
)
from ezrest.exceptions import (
    BodyReadError,
    DeserializationError,
    EzRestError,
    HttpStatusError,
    SerializationError,
    TransportError,
)
from ezrest.get import get
from ezrest.must import must_post, must_put
from ezrest.post import post
from ezrest.put import put
from ezrest.raw import post_accept_raw
from ezrest.request import post_or_put
from ezrest.response import RestResponse

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
