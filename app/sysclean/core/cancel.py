"""Process-wide cooperative cancellation.

A single CancelToken is created per run and handed to every loop that
must stop on a user interrupt. Loops poll it (or wait on it) once per
iteration; nothing is ever forcibly killed.
"""

import logging
import signal
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import FrameType

logger = logging.getLogger(__name__)

_HANDLED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class CancelToken:
    """One-shot, thread-safe stop signal.

    Set once by the interrupt handler (single writer), read by any number
    of background loops. Setting it twice has no further effect.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Trigger cancellation."""
        self._event.set()

    def is_cancelled(self) -> bool:
        """Check whether cancellation has been triggered."""
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or until ``timeout`` seconds elapsed.

        Returns:
            True if the token is cancelled.
        """
        return self._event.wait(timeout)


@contextmanager
def handle_interrupts(
    token: CancelToken,
    on_interrupt: Callable[[], None] | None = None,
) -> Iterator[CancelToken]:
    """Route SIGINT/SIGTERM to ``token`` for the duration of the block.

    The first signal cancels the token and calls ``on_interrupt``. A second
    signal raises KeyboardInterrupt so a blocking console read can still be
    escaped. Previous handlers are restored on exit. Outside the main
    thread signals cannot be hooked and the block runs unchanged.

    Args:
        token: Token to cancel on interrupt.
        on_interrupt: Optional callback run once on the first interrupt.

    Yields:
        The same token, for ``with handle_interrupts(CancelToken()) as token``.
    """
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handler(signum: int, _frame: FrameType | None) -> None:
        if token.is_cancelled():
            raise KeyboardInterrupt
        logger.warning("Received signal %s, cancelling", signal.Signals(signum).name)
        token.cancel()
        if on_interrupt is not None:
            on_interrupt()

    previous = {sig: signal.getsignal(sig) for sig in _HANDLED_SIGNALS}
    for sig in _HANDLED_SIGNALS:
        signal.signal(sig, _handler)
    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
