r"""Configuration dataclass and defaults for ezrest requests.

This module provides configuration constants and a dataclass-based
configuration object shared by the module-level request functions and
the RestClient context manager.
"""

from __future__ import annotations

__all__ = [
    "ClientConfig",
    "DEFAULT_CONNECTION",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
    "default_headers",
]

from dataclasses import dataclass, field, replace
from typing import Any

from ezrest.core.validation import validate_headers, validate_timeout

# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 30.0

# Media type sent with every request unless the header set overrides it
DEFAULT_CONTENT_TYPE = "application/json"

# Connections are not kept alive between calls
DEFAULT_CONNECTION = "close"


def default_headers() -> dict[str, str]:
    r"""Return a new dict with the default request headers.

    The returned dict is never shared, so callers can add entries to it
    and use the result as a per-call or replacement default header set.

    Returns:
        A dict with the ``Content-Type`` and ``Connection`` entries.

    Example:
        ```pycon
        >>> from ezrest.core.config import default_headers
        >>> default_headers()
        {'Content-Type': 'application/json', 'Connection': 'close'}
        >>> headers = default_headers()
        >>> headers["X-Api-Key"] = "secret"
        >>> len(default_headers())
        2

        ```
    """
    return {"Content-Type": DEFAULT_CONTENT_TYPE, "Connection": DEFAULT_CONNECTION}


@dataclass(frozen=True)
class ClientConfig:
    """Configuration shared by ezrest requests.

    Args:
        headers: Header set applied to every request made with this
            config, unless a call passes its own header set.
        verbose: If ``True``, log the attempted URL before each request
            and the raw response body when decoding fails.
        timeout: httpx timeout in seconds. Only used when ezrest creates
            the underlying ``httpx.Client``. Must be > 0. httpx applies it
            to each phase of the call separately (connect, read, write and
            pool acquisition), so it bounds every single network wait, not
            the whole call. A server that keeps sending a slow body can make
            a call last longer than ``timeout``.

    Example:
        ```pycon
        >>> from ezrest.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.timeout
        30.0
        >>> config.merge(verbose=True).verbose
        True
        >>> config.verbose  # Original unchanged
        False

        ```
    """

    headers: dict[str, str] = field(default_factory=default_headers)
    verbose: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_headers(self.headers)
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from ezrest.core.config import ClientConfig
            >>> config = ClientConfig(timeout=5.0)
            >>> config.merge(timeout=None, verbose=True)
            ClientConfig(headers={'Content-Type': 'application/json', 'Connection': 'close'}, verbose=True, timeout=5.0)

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        if "headers" in filtered_overrides:
            filtered_overrides["headers"] = dict(filtered_overrides["headers"])
        return replace(self, **filtered_overrides)

    def with_header(self, name: str, value: str) -> ClientConfig:
        """Create a new config whose header set has one more entry.

        Args:
            name: The header name.
            value: The header value.

        Returns:
            A new ClientConfig instance. An existing entry with the same
            name is replaced.

        Example:
            ```pycon
            >>> from ezrest.core.config import ClientConfig
            >>> config = ClientConfig().with_header("Authorization", "Bearer token")
            >>> config.headers["Authorization"]
            'Bearer token'

            ```
        """
        return self.merge(headers={**self.headers, name: value})
