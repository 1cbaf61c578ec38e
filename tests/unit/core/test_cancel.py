"""Unit tests for cancellation and interrupt handling."""

import signal
import threading

import pytest
from sysclean.core.cancel import CancelToken, handle_interrupts


class TestCancelToken:
    """Tests for CancelToken."""

    def test_starts_uncancelled(self) -> None:
        """A new token is not cancelled."""
        token = CancelToken()
        assert token.is_cancelled() is False
        assert token.wait(0) is False

    def test_cancel_is_sticky(self) -> None:
        """Cancelling twice keeps the token cancelled."""
        token = CancelToken()
        token.cancel()
        token.cancel()

        assert token.is_cancelled() is True
        assert token.wait(0) is True

    def test_visible_across_threads(self) -> None:
        """A waiter on another thread wakes up on cancel."""
        token = CancelToken()
        woke: list[bool] = []
        waiter = threading.Thread(target=lambda: woke.append(token.wait(5)))
        waiter.start()

        token.cancel()
        waiter.join(5)

        assert woke == [True]


class TestHandleInterrupts:
    """Tests for the handle_interrupts context manager."""

    def test_first_signal_cancels(self) -> None:
        """The first SIGINT cancels the token and runs the callback."""
        token = CancelToken()
        calls: list[str] = []

        with handle_interrupts(token, lambda: calls.append("interrupted")):
            handler = signal.getsignal(signal.SIGINT)
            assert callable(handler)
            handler(signal.SIGINT, None)

        assert token.is_cancelled() is True
        assert calls == ["interrupted"]

    def test_sigterm_cancels(self) -> None:
        """SIGTERM is routed to the token as well."""
        token = CancelToken()

        with handle_interrupts(token):
            handler = signal.getsignal(signal.SIGTERM)
            assert callable(handler)
            handler(signal.SIGTERM, None)

        assert token.is_cancelled() is True

    def test_second_signal_raises(self) -> None:
        """A second SIGINT escapes with KeyboardInterrupt."""
        token = CancelToken()

        with handle_interrupts(token):
            handler = signal.getsignal(signal.SIGINT)
            assert callable(handler)
            handler(signal.SIGINT, None)
            with pytest.raises(KeyboardInterrupt):
                handler(signal.SIGINT, None)

    def test_restores_previous_handlers(self) -> None:
        """The original handlers are back after the block."""
        before = signal.getsignal(signal.SIGINT)

        with handle_interrupts(CancelToken()):
            assert signal.getsignal(signal.SIGINT) is not before

        assert signal.getsignal(signal.SIGINT) is before

    def test_noop_outside_main_thread(self) -> None:
        """Off the main thread the block runs without hooking signals."""
        token = CancelToken()
        results: list[bool] = []

        def _worker() -> None:
            with handle_interrupts(token) as yielded:
                results.append(yielded is token)

        worker = threading.Thread(target=_worker)
        worker.start()
        worker.join(5)

        assert results == [True]
