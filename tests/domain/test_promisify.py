"""Tests for promisify."""

import asyncio

import pytest

from fnkit import DeferredState, DeferredStateError, promisify


def answer(callback):
    callback(None, 42)


class TestPromisify:
    """Callback-to-deferred adaptation."""

    def test_success_resolves_with_result(self):
        assert promisify(answer)().result() == 42

    def test_error_fails_with_same_object(self):
        error = OSError("disk")

        def failing(callback):
            callback(error, None)

        deferred = promisify(failing)()
        assert deferred.state is DeferredState.FAILED
        assert deferred.reason is error

    def test_arguments_forwarded_before_callback(self):
        received = []

        def record(a, b, callback, *, flag=False):
            received.append((a, b, flag))
            callback(None, a + b)

        deferred = promisify(record)(1, 2, flag=True)

        assert received == [(1, 2, True)]
        assert deferred.result() == 3

    def test_callback_without_arguments_resolves_none(self):
        def done(callback):
            callback()

        assert promisify(done)().result() is None

    def test_pending_until_callback_fires(self):
        saved = []

        deferred = promisify(saved.append)()
        assert deferred.is_pending

        saved[0](None, "late")
        assert deferred.result() == "late"

    def test_synchronous_raise_becomes_failure(self):
        def broken(callback):
            raise TypeError("bad call")

        deferred = promisify(broken)()
        assert isinstance(deferred.reason, TypeError)

    def test_raise_after_callback_keeps_first_outcome(self):
        def sloppy(callback):
            callback(None, "ok")
            raise RuntimeError("after the fact")

        assert promisify(sloppy)().result() == "ok"

    def test_double_callback_ignored(self):
        def twice(callback):
            callback(None, 1)
            callback(None, 2)

        assert promisify(twice)().result() == 1

    def test_double_callback_raises_in_strict_mode(self, strict_settlement):
        def twice(callback):
            callback(None, 1)
            callback(None, 2)

        with pytest.raises(DeferredStateError):
            promisify(twice)()

    def test_late_double_callback_raises_in_strict_mode(self, strict_settlement):
        saved = []
        promisify(saved.append)()
        saved[0](None, "first")
        with pytest.raises(DeferredStateError):
            saved[0](None, "second")

    def test_preserves_metadata(self):
        assert promisify(answer).__name__ == "answer"

    @pytest.mark.asyncio
    async def test_await_timer_based_function(self):
        loop = asyncio.get_running_loop()

        def delayed(value, callback):
            loop.call_later(0.01, callback, None, value)

        assert await promisify(delayed)("hi") == "hi"
