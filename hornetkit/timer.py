"""Stopwatch timers over wall-clock, process CPU and user/system time."""

from __future__ import annotations

import enum
import math
import os
import time
from collections.abc import Callable

_UNITS: dict[str, float] = {
    "us": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "min": 60.0,
    "h": 3600.0,
}


class TimerType(enum.Enum):
    """The clock a timer reads."""

    HOST = 0  # wall-clock time
    CPU = 1  # process CPU time
    SYS = 2  # user plus system time


def _wall_clock() -> float:
    return time.perf_counter()


def _cpu_clock() -> float:
    return time.process_time()


def _sys_clock() -> float:
    times = os.times()
    return times.user + times.system


_CLOCKS: dict[TimerType, Callable[[], float]] = {
    TimerType.HOST: _wall_clock,
    TimerType.CPU: _cpu_clock,
    TimerType.SYS: _sys_clock,
}


class Timer:
    """A repeatable stopwatch that keeps statistics over its runs.

    Durations are reported in ``unit``: one of ``us``, ``ms``, ``s``,
    ``min`` or ``h``.
    """

    def __init__(
        self,
        kind: TimerType = TimerType.HOST,
        unit: str = "ms",
        decimals: int = 1,
        space: int = 15,
    ) -> None:
        if unit not in _UNITS:
            raise ValueError(f"unknown time unit {unit!r}")
        self._kind = TimerType(kind)
        self._clock = _CLOCKS[self._kind]
        self._unit = unit
        self._scale = _UNITS[unit]
        self._decimals = decimals
        self._space = space
        self._start_time: float | None = None
        self.reset()

    @property
    def kind(self) -> TimerType:
        return self._kind

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def runs(self) -> int:
        return self._runs

    def start(self) -> None:
        """Start (or restart) a measurement."""
        self._start_time = self._clock()

    def stop(self) -> None:
        """End the current measurement and record it."""
        if self._start_time is None:
            raise RuntimeError("timer stopped before being started")
        elapsed = (self._clock() - self._start_time) / self._scale
        self._start_time = None
        self._register(elapsed)

    def _register(self, elapsed: float) -> None:
        self._elapsed = elapsed
        self._total += elapsed
        self._total_squared += elapsed * elapsed
        self._min = elapsed if self._runs == 0 else min(self._min, elapsed)
        self._max = elapsed if self._runs == 0 else max(self._max, elapsed)
        self._runs += 1

    def _require_runs(self) -> None:
        if self._runs == 0:
            raise RuntimeError("no measurement has been recorded")

    def duration(self) -> float:
        """Return the time of the last measurement."""
        self._require_runs()
        return self._elapsed

    def total_duration(self) -> float:
        """Return the sum of all measurements."""
        return self._total

    def average(self) -> float:
        """Return the mean measurement."""
        self._require_runs()
        return self._total / self._runs

    def std_deviation(self) -> float:
        """Return the population standard deviation of the measurements."""
        mean = self.average()
        variance = self._total_squared / self._runs - mean * mean
        return math.sqrt(max(variance, 0.0))

    def min(self) -> float:
        """Return the shortest measurement."""
        self._require_runs()
        return self._min

    def max(self) -> float:
        """Return the longest measurement."""
        self._require_runs()
        return self._max

    def reset(self) -> None:
        """Forget every recorded measurement."""
        self._elapsed = 0.0
        self._total = 0.0
        self._total_squared = 0.0
        self._min = 0.0
        self._max = 0.0
        self._runs = 0
        self._start_time = None

    def _format(self, value: float) -> str:
        return f"{value:.{self._decimals}f} {self._unit}"

    def print(self, label: str = "") -> None:
        """Print ``label`` and the last measurement."""
        print(f"{label:<{self._space}}{self._format(self.duration())}")

    def print_all(self, label: str = "") -> None:
        """Print ``label`` and statistics over all measurements."""
        print(
            f"{label:<{self._space}}"
            f"total: {self._format(self.total_duration())}  "
            f"avg: {self._format(self.average())}  "
            f"min: {self._format(self.min())}  "
            f"max: {self._format(self.max())}  "
            f"std_dev: {self._format(self.std_deviation())}  "
            f"runs: {self._runs}"
        )

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()