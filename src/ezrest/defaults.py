r"""Process-wide default configuration.

Request functions called without ``config=`` use the config held here.
It is set once at startup and applied everywhere. Passing an explicit
``config`` or ``headers`` to a call always takes precedence.

Reads are not synchronized. Mutate the default config before issuing
concurrent requests.

Example:
    ```pycon
    >>> import ezrest
    >>> headers = ezrest.default_headers()
    >>> headers["X-Api-Key"] = "secret"
    >>> ezrest.set_default_headers(headers)
    >>> ezrest.get_default_config().headers["X-Api-Key"]
    'secret'
    >>> ezrest.reset_default_config()

    ```
"""

from __future__ import annotations

__all__ = [
    "get_default_config",
    "reset_default_config",
    "resolve_config",
    "set_default_config",
    "set_default_headers",
    "set_verbose",
]

from ezrest.core.config import ClientConfig

_default_config: ClientConfig = ClientConfig()


def get_default_config() -> ClientConfig:
    r"""Return the process-wide default config."""
    return _default_config


def set_default_config(config: ClientConfig) -> None:
    r"""Replace the process-wide default config.

    Args:
        config: The new default config.

    Raises:
        TypeError: If config is not a ClientConfig.
    """
    global _default_config  # noqa: PLW0603
    if not isinstance(config, ClientConfig):
        msg = f"config must be a ClientConfig, got {type(config).__name__}"
        raise TypeError(msg)
    _default_config = config


def set_default_headers(headers: dict[str, str]) -> None:
    r"""Replace the default header set wholesale.

    A copy of ``headers`` is stored, so later changes to the caller's
    dict do not leak into the default config.

    Args:
        headers: The new default header set.
    """
    set_default_config(_default_config.merge(headers=headers))


def set_verbose(verbose: bool) -> None:
    r"""Turn diagnostic logging on or off for the default config.

    Args:
        verbose: Whether to log attempted URLs and undecodable bodies.
    """
    set_default_config(_default_config.merge(verbose=bool(verbose)))


def reset_default_config() -> None:
    r"""Restore the default config created at import time."""
    set_default_config(ClientConfig())


def resolve_config(config: ClientConfig | None) -> ClientConfig:
    r"""Return ``config``, or the process-wide default when it is None."""
    return config if config is not None else _default_config
