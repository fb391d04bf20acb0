r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import ezrest


def test_package_version_is_string() -> None:
    assert isinstance(ezrest.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in ezrest.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in ezrest.__all__:
        assert hasattr(ezrest, name), f"{name} is in __all__ but not defined in module"


def test_default_timeout() -> None:
    assert ezrest.DEFAULT_TIMEOUT == 30.0


@pytest.mark.parametrize(
    "func_name",
    [
        "default_headers",
        "get",
        "must_post",
        "must_put",
        "post",
        "post_accept_raw",
        "post_or_put",
        "put",
    ],
)
def test_request_functions_are_callable(func_name: str) -> None:
    assert callable(getattr(ezrest, func_name))
