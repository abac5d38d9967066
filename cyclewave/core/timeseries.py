# cyclewave/core/timeseries.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np

from .exceptions import InvalidInput, InvalidTimeSeries
from .sampling import SamplingSpec


def _freeze(a: np.ndarray) -> np.ndarray:
    a = np.array(a, copy=True)
    a.setflags(write=False)
    return a


@dataclass(frozen=True, slots=True)
class TimeSeries:
    """Immutable time series: 1D time vector + 1D values vector.

    Iterating yields (timestamp, value) pairs.
    """

    time: np.ndarray = field(repr=False)
    values: np.ndarray = field(repr=False)
    unit: str | None = None
    name: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        t = np.asarray(self.time, dtype=float)
        v = np.asarray(self.values, dtype=float)

        if t.ndim != 1:
            raise InvalidTimeSeries(f"`time` must be 1D, got shape {t.shape}")
        if v.ndim != 1:
            raise InvalidTimeSeries(f"`values` must be 1D, got shape {v.shape}")
        if t.size != v.size:
            raise InvalidTimeSeries(
                f"`time` and `values` must have same length, got {t.size} vs {v.size}"
            )

        if t.size > 0:
            if not np.isfinite(t).all():
                raise InvalidTimeSeries("`time` contains non-finite values (NaN/Inf).")
            if np.any(np.diff(t) <= 0):
                raise InvalidTimeSeries("`time` must be strictly increasing.")

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidTimeSeries("`attrs` must be a dict.")

        object.__setattr__(self, "time", _freeze(t))
        object.__setattr__(self, "values", _freeze(v))

    @classmethod
    def from_sampling(
        cls,
        values,
        sampling: SamplingSpec,
        *,
        unit: str | None = None,
        name: str | None = None,
    ) -> "TimeSeries":
        if not isinstance(sampling, SamplingSpec):
            raise InvalidTimeSeries("`sampling` must be a SamplingSpec instance.")
        v = np.asarray(values, dtype=float)
        if v.ndim != 1:
            raise InvalidTimeSeries(f"`values` must be 1D, got shape {v.shape}")
        return cls(time=sampling.timestamps(v.size), values=v, unit=unit, name=name)

    # ---- sequence of (timestamp, value) ----
    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for t, v in zip(self.time.tolist(), self.values.tolist()):
            yield t, v

    def pairs(self) -> list[tuple[float, float]]:
        return list(self)

    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def t_start(self) -> float | None:
        return None if self.n == 0 else float(self.time[0])

    @property
    def t_end(self) -> float | None:
        return None if self.n == 0 else float(self.time[-1])

    @property
    def sampling(self) -> SamplingSpec:
        """Sampling grid inferred from `time` (raises InvalidInput if irregular)."""
        return SamplingSpec.infer(self.time)

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "TimeSeries":
        if closed not in {"both", "left", "right", "neither"}:
            raise InvalidTimeSeries("closed must be one of: both, left, right, neither")

        if self.n == 0:
            return self

        t = self.time
        mask = np.ones_like(t, dtype=bool)

        if t_min is not None:
            if closed in {"both", "left"}:
                mask &= (t >= t_min)
            else:
                mask &= (t > t_min)

        if t_max is not None:
            if closed in {"both", "right"}:
                mask &= (t <= t_max)
            else:
                mask &= (t < t_max)

        return TimeSeries(
            time=t[mask],
            values=self.values[mask],
            unit=self.unit,
            name=self.name,
            attrs=self.attrs.copy(),
        )

    def with_values(self, values, *, name: str | None = None) -> "TimeSeries":
        """New series on the same time base."""
        return TimeSeries(
            time=self.time,
            values=values,
            unit=self.unit,
            name=self.name if name is None else name,
            attrs=self.attrs.copy(),
        )

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.values.copy()
        return self.time, self.values


def align_time(signal, sampling: SamplingSpec) -> TimeSeries:
    """
    Attach timestamps to a signal.

    timestamp[0] = start and timestamp[i] = start + i / frequency. The
    returned TimeSeries iterates as (timestamp, value) pairs.
    """
    if not isinstance(sampling, SamplingSpec):
        raise InvalidInput("align_time() expects a SamplingSpec instance.")

    v = np.asarray(signal, dtype=float)
    if v.ndim != 1:
        raise InvalidInput(f"signal must be 1D, got shape {v.shape}")
    return TimeSeries(time=sampling.timestamps(v.size), values=v)
