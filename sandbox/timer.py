"""A context manager that reports how long a block took."""

from __future__ import annotations

import sys
from time import perf_counter_ns
from typing import Optional, TextIO


class Timer:
    """Measure a block and print ``[TIMER] <label> took <ms> ms`` on exit."""

    def __init__(self, label: str = "", stream: Optional[TextIO] = None) -> None:
        self.label = label
        self.stream = stream
        self._start = perf_counter_ns()
        self._end: Optional[int] = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = perf_counter_ns()
        stream = self.stream if self.stream is not None else sys.stdout
        print(f"[TIMER] {self.label} took {self.elapsed_ms():g} ms", file=stream)

    def elapsed_ms(self) -> float:
        """Milliseconds since the timer started, at microsecond resolution."""
        end = self._end if self._end is not None else perf_counter_ns()
        micros = (end - self._start) // 1000
        return micros / 1000.0