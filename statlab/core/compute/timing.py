"""
Per-stage timing for backends.

A backend starts a Timer, wraps each stage of its computation in a
named section and stores timer.result() in Result.timing, e.g.
{'total_seconds': 2.1e-4, 'normal_equations': 9e-5, 'inversion': 6e-5}.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """Overall wall-clock time plus named, accumulating sections."""

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + time.perf_counter() - start

    def result(self) -> dict[str, float]:
        """
        'total_seconds' plus one entry per section.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
