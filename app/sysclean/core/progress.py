"""Spinner-style progress indicator.

The indicator renders a rotating frame on a background thread while the
owner does blocking work. It has two ways out: the owner's explicit
done() signal, or the process-wide CancelToken. The background thread is
the only writer of the final state, so a run ends through exactly one of
them. The owner always waits for the final frame before printing again.
"""

import logging
import threading
from enum import Enum
from types import TracebackType

from rich.console import Console
from rich.markup import escape

from sysclean.core.cancel import CancelToken
from sysclean.core.tasks import BackgroundTasks

logger = logging.getLogger(__name__)

SPINNER_FRAMES: tuple[str, ...] = ("⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
DEFAULT_INTERVAL = 0.1


class IndicatorState(str, Enum):
    """Lifecycle states of a ProgressIndicator.

    Attributes:
        PENDING: Created but not started.
        RUNNING: Rendering frames.
        STOPPED_OK: Ended by the owner's done() signal.
        STOPPED_INTERRUPTED: Ended by process-wide cancellation.
    """

    PENDING = "pending"
    RUNNING = "running"
    STOPPED_OK = "stopped_ok"
    STOPPED_INTERRUPTED = "stopped_interrupted"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition can happen."""
        return self in (IndicatorState.STOPPED_OK, IndicatorState.STOPPED_INTERRUPTED)


class ProgressIndicator:
    """Background spinner coordinated by a done signal and a CancelToken.

    Example:
        with ProgressIndicator("Analyzing files...", cancel=token, console=console):
            do_blocking_work()
        # final frame is already on screen here

    Args:
        message: Text shown next to the spinner.
        cancel: Process-wide cancellation token.
        console: Rich console to render on.
        tasks: Optional shared task counter the indicator registers with.
        interval: Seconds between two frames.
    """

    def __init__(
        self,
        message: str,
        *,
        cancel: CancelToken,
        console: Console,
        tasks: BackgroundTasks | None = None,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        self._message = message
        self._cancel = cancel
        self._console = console
        self._tasks = tasks
        self._interval = interval

        self._state = IndicatorState.PENDING
        self._state_lock = threading.Lock()
        self._done = threading.Event()
        self._finished = threading.Event()
        self._thread: threading.Thread | None = None
        self._frames_rendered = 0

    @property
    def state(self) -> IndicatorState:
        """Current lifecycle state."""
        with self._state_lock:
            return self._state

    @property
    def frames_rendered(self) -> int:
        """Number of animation frames drawn so far."""
        return self._frames_rendered

    def start(self) -> None:
        """Start rendering on a background thread.

        Raises:
            RuntimeError: If the indicator was already started.
        """
        with self._state_lock:
            if self._state is not IndicatorState.PENDING:
                msg = f"ProgressIndicator already started (state={self._state.value})"
                raise RuntimeError(msg)
            self._state = IndicatorState.RUNNING

        if self._tasks is not None:
            self._tasks.add()
        self._thread = threading.Thread(target=self._run, name="progress-indicator", daemon=True)
        self._thread.start()

    def done(self) -> None:
        """Signal that the owner's work has completed."""
        self._done.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the final frame has been rendered.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Returns:
            True if the indicator reached a terminal state.

        Raises:
            RuntimeError: If the indicator was never started.
        """
        if self.state is IndicatorState.PENDING:
            msg = "ProgressIndicator was never started"
            raise RuntimeError(msg)
        return self._finished.wait(timeout)

    def stop(self) -> IndicatorState:
        """Signal done and wait for termination.

        Returns:
            The terminal state the indicator ended in.
        """
        self.done()
        self.wait()
        return self.state

    def __enter__(self) -> "ProgressIndicator":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def _run(self) -> None:
        """Render frames until done or cancelled."""
        message = escape(self._message)
        try:
            while True:
                # done() is checked first: when both signals are pending the
                # owner's completion wins.
                if self._done.is_set():
                    self._finish(IndicatorState.STOPPED_OK)
                    self._console.print(f"[success]✅[/] {message}", highlight=False)
                    return
                if self._cancel.is_cancelled():
                    self._finish(IndicatorState.STOPPED_INTERRUPTED)
                    self._console.print(
                        f"[error]❌[/] {message} [muted](interrupted)[/]", highlight=False
                    )
                    return

                frame = SPINNER_FRAMES[self._frames_rendered % len(SPINNER_FRAMES)]
                self._console.print(f"[spinner]{frame}[/] {message}", end="\r", highlight=False)
                self._frames_rendered += 1
                self._done.wait(self._interval)
        except Exception:
            logger.exception("Progress indicator failed while rendering")
        finally:
            self._finished.set()
            if self._tasks is not None:
                self._tasks.done()

    def _finish(self, state: IndicatorState) -> None:
        with self._state_lock:
            self._state = state
