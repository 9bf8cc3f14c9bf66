"""Tests for the Result sum type and its adapters."""

import asyncio

import pytest

from viewstate.shared.core.result import Err, Ok, capture, err, ok, result_from_record


class TestResultFold:
    def test_ok_runs_only_success_handler(self):
        calls = []
        outcome = Ok(value="John Doe").fold(
            on_success=lambda v: calls.append(("ok", v)) or "ok",
            on_error=lambda e: calls.append(("err", e)) or "err",
        )
        assert outcome == "ok"
        assert calls == [("ok", "John Doe")]

    def test_err_runs_only_error_handler(self):
        calls = []
        failure = ValueError("boom")
        outcome = Err(error=failure).fold(
            on_success=lambda v: calls.append(("ok", v)) or "ok",
            on_error=lambda e: calls.append(("err", e)) or "err",
        )
        assert outcome == "err"
        assert calls == [("err", failure)]

    def test_fold_requires_both_handlers(self):
        with pytest.raises(TypeError):
            Ok(value=1).fold(on_success=lambda v: v)

    def test_is_ok_flag(self):
        assert ok(1).is_ok
        assert not err("x").is_ok

    def test_structural_equality(self):
        assert Ok(value=1) == Ok(value=1)
        assert Err(error="x") == Err(error="x")
        assert Ok(value="x") != Err(error="x")


class TestResultFromRecord:
    def test_value_without_exception_is_ok(self):
        assert result_from_record(("John Doe", None)) == Ok(value="John Doe")

    def test_exception_is_err(self):
        failure = Exception("An error occurred.")
        result = result_from_record((None, failure))
        assert not result.is_ok
        assert result.error is failure

    def test_exception_wins_over_value(self):
        failure = Exception("both")
        assert result_from_record(("x", failure)).error is failure

    def test_empty_record_is_ok_none(self):
        assert result_from_record((None, None)) == Ok(value=None)


class TestCapture:
    @pytest.mark.asyncio
    async def test_returned_value_becomes_ok(self):
        async def fetch():
            return 42

        assert await capture(fetch) == Ok(value=42)

    @pytest.mark.asyncio
    async def test_raised_exception_becomes_err(self):
        async def fetch():
            raise RuntimeError("boom")

        result = await capture(fetch)
        assert isinstance(result, Err)
        assert str(result.error) == "boom"

    @pytest.mark.asyncio
    async def test_cancellation_is_not_captured(self):
        async def fetch():
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await capture(fetch)
