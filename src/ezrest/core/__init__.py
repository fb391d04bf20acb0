r"""Core shared logic for ezrest requests.

This module contains the configuration, validation, JSON codec and
request execution logic shared by every request function.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "decode_body",
    "default_headers",
    "encode_body",
    "send_request",
    "validate_method",
    "validate_timeout",
]

from ezrest.core.codec import decode_body, encode_body
from ezrest.core.config import DEFAULT_TIMEOUT, ClientConfig, default_headers
from ezrest.core.http_logic import send_request
from ezrest.core.validation import validate_method, validate_timeout
