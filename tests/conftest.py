from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

import ezrest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


class FailingStream(httpx.SyncByteStream):
    """Response stream that fails while the body is being read."""

    def __iter__(self) -> Generator[bytes, None, None]:
        yield b'{"status":'
        msg = "connection reset by peer"
        raise httpx.ReadError(msg)


@pytest.fixture(autouse=True)
def _reset_default_config() -> Generator[None, None, None]:
    """Restore the process-wide default config after each test."""
    yield
    ezrest.reset_default_config()


@pytest.fixture
def failing_stream() -> httpx.SyncByteStream:
    """Create a response stream that fails while being read."""
    return FailingStream()


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Collect the requests received by the mock transport."""
    return []


@pytest.fixture
def make_client(
    sent_requests: list[httpx.Request],
) -> Generator[Callable[..., httpx.Client], None, None]:
    """Create httpx.Client objects backed by an httpx.MockTransport.

    The returned factory accepts either a handler or the arguments of an
    ``httpx.Response``. Every request is appended to ``sent_requests``.
    """
    clients = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        status_code: int = 200,
        **response_kwargs,
    ) -> httpx.Client:
        def record(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, **response_kwargs)

        client = httpx.Client(transport=httpx.MockTransport(record))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
