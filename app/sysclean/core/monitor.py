"""Live system monitor.

Polls system-wide CPU and memory usage through psutil and renders one
continuously overwritten status line. All metrics are system-wide, not
per-process.
"""

import logging
import threading
import time
from dataclasses import dataclass

import psutil
from rich.console import Console

from sysclean.core.cancel import CancelToken
from sysclean.core.tasks import BackgroundTasks

BYTES_PER_GB = 1e9


@dataclass(frozen=True, slots=True)
class MetricsSample:
    """A single snapshot of system resource usage.

    Attributes:
        cpu_percent: System-wide CPU utilization in percent.
        ram_percent: Used share of physical memory in percent.
        ram_used_bytes: Used physical memory in bytes.
        ram_total_bytes: Total physical memory in bytes.
    """

    cpu_percent: float
    ram_percent: float
    ram_used_bytes: int
    ram_total_bytes: int

    @property
    def ram_used_gb(self) -> float:
        return self.ram_used_bytes / BYTES_PER_GB

    @property
    def ram_total_gb(self) -> float:
        return self.ram_total_bytes / BYTES_PER_GB

    def render(self) -> str:
        """Format the sample as the monitor status line (Rich markup)."""
        return (
            f"🖥️ CPU Usage: [metric]{self.cpu_percent:.2f}%[/]  "
            f"🏋️ RAM Usage: [metric]{self.ram_percent:.2f}%[/]  "
            f"({self.ram_used_gb:.2f} GB used of {self.ram_total_gb:.2f} GB)  "
        )


def sample_metrics(cpu_interval: float | None = None) -> MetricsSample:
    """Read instantaneous CPU and memory usage.

    Args:
        cpu_interval: Passed to ``psutil.cpu_percent``. None compares against
            the previous call and returns immediately.

    Returns:
        MetricsSample with current values.
    """
    cpu = psutil.cpu_percent(interval=cpu_interval)
    mem = psutil.virtual_memory()
    return MetricsSample(
        cpu_percent=float(cpu),
        ram_percent=float(mem.percent),
        ram_used_bytes=int(mem.used),
        ram_total_bytes=int(mem.total),
    )


class SystemMonitor:
    """Background CPU/RAM readout.

    Runs as a task of a BackgroundTasks group until the CancelToken fires,
    stop() is called, or ``duration`` seconds have elapsed.

    Args:
        cancel: Process-wide cancellation token.
        tasks: Task counter the monitor registers with.
        console: Rich console to render on.
        interval: Seconds between two readings (min 0.1).
        duration: Seconds to run, None to run until cancelled or stopped.
    """

    def __init__(
        self,
        *,
        cancel: CancelToken,
        tasks: BackgroundTasks,
        console: Console,
        interval: float = 2.0,
        duration: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._cancel = cancel
        self._tasks = tasks
        self._console = console
        self._interval = max(0.1, interval)
        self._duration = duration
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._stop_event = threading.Event()
        self._running = threading.Event()
        self._lock = threading.Lock()
        self._samples_rendered = 0

    @property
    def samples_rendered(self) -> int:
        """Number of status lines drawn so far."""
        with self._lock:
            return self._samples_rendered

    @property
    def is_running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        """Start the monitor loop in the background."""
        if self._running.is_set():
            self._logger.warning("Monitor already running")
            return
        self._running.set()
        self._stop_event.clear()
        self._console.print("\n📊 [bold_header]Live System Monitor[/] [muted](Ctrl+C to stop)[/]")
        self._tasks.spawn(self._loop, name="system-monitor")

    def stop(self) -> None:
        """Ask the loop to exit after its current wait."""
        self._stop_event.set()

    def _should_stop(self, started: float) -> bool:
        if self._stop_event.is_set() or self._cancel.is_cancelled():
            return True
        return self._duration is not None and time.monotonic() - started >= self._duration

    def _loop(self) -> None:
        started = time.monotonic()
        try:
            # Prime psutil so the first reading is not a meaningless 0.0.
            psutil.cpu_percent(interval=None)
            while not self._should_stop(started):
                self._stop_event.wait(self._interval)
                if self._should_stop(started):
                    break
                try:
                    sample = sample_metrics()
                except (OSError, RuntimeError, psutil.Error) as e:
                    self._logger.error("Error getting system metrics: %s", e)
                    continue
                self._console.print(sample.render(), end="\r", highlight=False)
                with self._lock:
                    self._samples_rendered += 1
        finally:
            self._running.clear()
            # Leave the cursor on a fresh line for whatever prints next.
            self._console.print()
