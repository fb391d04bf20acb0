r"""Unit tests for RestResponse."""

from __future__ import annotations

import dataclasses

import pytest

from ezrest import RestResponse


def test_rest_response_fields() -> None:
    response = RestResponse(status_code=200, data={"status": "success"})
    assert response.status_code == 200
    assert response.data == {"status": "success"}


def test_rest_response_default_data() -> None:
    assert RestResponse(status_code=204).data is None


def test_rest_response_equality() -> None:
    assert RestResponse(status_code=200, data=[1]) == RestResponse(status_code=200, data=[1])
    assert RestResponse(status_code=200, data=[1]) != RestResponse(status_code=201, data=[1])


def test_rest_response_is_frozen() -> None:
    response = RestResponse(status_code=200)
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.status_code = 500
