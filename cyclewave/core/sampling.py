# cyclewave/core/sampling.py
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .exceptions import InvalidInput


@dataclass(frozen=True, slots=True)
class SamplingSpec:
    """
    Fixed sampling grid of a series.

    - start: timestamp of the first sample (e.g. fractional year 1947.0)
    - frequency: samples per unit time (4 for quarterly, 12 for monthly)

    Only used to label output; the transform itself works on indices.
    """
    start: float
    frequency: float

    def __post_init__(self) -> None:
        try:
            start = float(self.start)
            frequency = float(self.frequency)
        except (TypeError, ValueError) as e:
            raise InvalidInput("SamplingSpec.start and .frequency must be real numbers.") from e

        if not math.isfinite(start):
            raise InvalidInput("SamplingSpec.start must be finite.")
        if not math.isfinite(frequency) or frequency <= 0:
            raise InvalidInput(f"SamplingSpec.frequency must be positive, got {self.frequency!r}")

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "frequency", frequency)

    @classmethod
    def from_period(cls, year: int, period: int = 1, frequency: float = 4) -> "SamplingSpec":
        """Build a spec from a (year, period) anchor, e.g. (1947, 1) for 1947 Q1."""
        if frequency <= 0:
            raise InvalidInput(f"frequency must be positive, got {frequency!r}")
        if not 1 <= period <= frequency:
            raise InvalidInput(f"period must be in 1..{frequency:g}, got {period!r}")
        return cls(start=year + (period - 1) / frequency, frequency=frequency)

    @classmethod
    def infer(cls, time: np.ndarray, *, rtol: float = 1e-6) -> "SamplingSpec":
        """
        Infer the sampling grid of a regularly spaced time vector.

        Raises InvalidInput if the vector has fewer than 2 samples or is
        not evenly spaced.
        """
        t = np.asarray(time, dtype=float)
        if t.ndim != 1 or t.size < 2:
            raise InvalidInput("Need a 1D time vector with at least 2 samples to infer sampling.")

        dt = np.diff(t)
        step = float(np.median(dt))
        if step <= 0 or not np.allclose(dt, step, rtol=rtol, atol=0.0):
            raise InvalidInput("Time vector is not regularly sampled.")
        return cls(start=float(t[0]), frequency=1.0 / step)

    @property
    def step(self) -> float:
        return 1.0 / self.frequency

    def timestamps(self, n: int) -> np.ndarray:
        if n < 0:
            raise InvalidInput(f"n must be non-negative, got {n!r}")
        return self.start + np.arange(n, dtype=float) / self.frequency

    def period_of(self, timestamp: float) -> tuple[int, int]:
        """
        Return the (year, period) a timestamp falls in.

        Periods are 1-based: for quarterly data 1947.25 -> (1947, 2).
        """
        year = math.floor(timestamp)
        # round first so 1947.9999999 lands in the last period, not the next year
        offset = round((timestamp - year) * self.frequency, 6)
        period = int(math.floor(offset)) + 1
        if period > self.frequency:
            return year + 1, 1
        return year, period

