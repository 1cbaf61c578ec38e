"""Background task bookkeeping.

BackgroundTasks is the shared completion counter of a run: every
background thread is counted in when it starts and counted out when it
reaches a terminal state. The owner calls wait() before printing its next
line or exiting, so no output is cut short.
"""

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class BackgroundTasks:
    """Counter of running background tasks with a blocking wait.

    Example:
        tasks = BackgroundTasks()
        tasks.spawn(loop, name="monitor")
        ...
        tasks.wait()
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._pending = 0

    @property
    def pending(self) -> int:
        """Number of tasks that have not reached a terminal state yet."""
        with self._cond:
            return self._pending

    def add(self, count: int = 1) -> None:
        """Count in ``count`` tasks about to start."""
        with self._cond:
            self._pending += count

    def done(self) -> None:
        """Count out one finished task.

        Raises:
            RuntimeError: If more tasks finish than were added.
        """
        with self._cond:
            if self._pending <= 0:
                msg = "BackgroundTasks.done() called more often than add()"
                raise RuntimeError(msg)
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until every counted task is done.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Returns:
            True if all tasks finished, False if the timeout expired.
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)

    def spawn(self, target: Callable[[], None], *, name: str) -> threading.Thread:
        """Start ``target`` on a daemon thread counted by this group.

        The task is counted out when ``target`` returns or raises. An
        exception escaping ``target`` is logged, never re-raised into the
        owner.

        Args:
            target: Callable run on the background thread.
            name: Thread name, used in log records.

        Returns:
            The started thread.
        """
        self.add()

        def _run() -> None:
            try:
                target()
            except Exception:
                logger.exception("Background task %s failed", name)
            finally:
                self.done()

        thread = threading.Thread(target=_run, name=name, daemon=True)
        thread.start()
        return thread
