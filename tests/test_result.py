"""Tests for the Ok / Err result container and attempt()."""

import asyncio

import pytest

from core.client import MusicServiceError
from core.result import Err, Ok, UnwrapError, attempt, describe_error


async def _returns(value):
    return value


async def _raises(exc):
    raise exc


class TestOk:
    def test_variant_queries(self):
        result = Ok(3)
        assert result.is_ok()
        assert not result.is_err()

    def test_map_transforms_value(self):
        assert Ok(3).map(lambda value: value * 2) == Ok(6)

    def test_unwrap(self):
        assert Ok("x").unwrap() == "x"

    def test_unwrap_err_raises(self):
        with pytest.raises(UnwrapError):
            Ok("x").unwrap_err()

    def test_is_immutable(self):
        result = Ok(1)
        with pytest.raises(Exception):
            result.value = 2


class TestErr:
    def test_variant_queries(self):
        result = Err("boom")
        assert result.is_err()
        assert not result.is_ok()

    def test_map_passes_error_through(self):
        result = Err("boom")
        assert result.map(lambda value: value * 2) is result

    def test_unwrap_raises_assertion_error(self):
        with pytest.raises(AssertionError, match="boom"):
            Err("boom").unwrap()

    def test_unwrap_err(self):
        assert Err("boom").unwrap_err() == "boom"

    def test_match_statement(self):
        match Err("boom"):
            case Ok():
                pytest.fail("matched the wrong variant")
            case Err(error=message):
                assert message == "boom"


class TestDescribeError:
    def test_exception_message(self):
        assert describe_error(ValueError("bad value")) == "bad value"

    def test_exception_without_message_uses_class_name(self):
        assert describe_error(TimeoutError()) == "TimeoutError"

    def test_non_exception_is_stringified(self):
        assert describe_error("raw string") == "raw string"
        assert describe_error(404) == "404"


class TestAttempt:
    def test_success_without_shape(self):
        assert asyncio.run(attempt("get album", _returns({"id": "a"}))) == Ok({"id": "a"})

    def test_success_with_shape(self):
        result = asyncio.run(attempt("get album", _returns({"id": "a"}), lambda body: body["id"]))
        assert result == Ok("a")

    def test_failure_is_prefixed_with_verb(self):
        result = asyncio.run(attempt("save albums", _raises(MusicServiceError("Rate limited", 429))))
        assert result == Err("Failed to save albums: Rate limited")

    def test_shape_failure_is_reported_like_a_failed_call(self):
        result = asyncio.run(attempt("get album", _returns({}), lambda body: body["id"]))
        assert result == Err("Failed to get album: 'id'")
