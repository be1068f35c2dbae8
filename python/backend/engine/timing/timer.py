"""Wall-clock timing around a search call."""

from __future__ import annotations

import time


class RunTimer:
    """Measures elapsed time between ``start`` and ``stop``.

    Usable as a context manager::

        with RunTimer() as timer:
            Solver.solve(board)
        print(timer.format_elapsed())
    """

    def __init__(self) -> None:
        self._start_time: float | None = None
        self._end_time: float | None = None

    # -- time tracking --------------------------------------------------------

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._end_time = None

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("RunTimer.stop() called before start().")
        self._end_time = time.perf_counter()

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._end_time is None

    @property
    def elapsed(self) -> float:
        if self._start_time is None:
            return 0.0
        end = self._end_time if self._end_time is not None else time.perf_counter()
        return end - self._start_time

    def format_elapsed(self) -> str:
        """E.g. ``2.534`` seconds becomes ``(2 seconds and 534/1000)``."""
        elapsed = self.elapsed
        seconds = int(elapsed)
        millis = int((elapsed - seconds) * 1000)
        return f"({seconds} seconds and {millis}/1000)"

    # -- context manager ------------------------------------------------------

    def __enter__(self) -> RunTimer:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()
