# cyclewave/core/component.py

from __future__ import annotations

from dataclasses import dataclass, field

from .timeseries import TimeSeries
from .exceptions import InvalidComponent
from .metadata import ComponentMeta

import numpy as np


@dataclass(slots=True, frozen=True)
class BandComponent:
    """A named band of a decomposed series (sum of one or more levels, or the residual)."""

    name: str
    series: TimeSeries
    meta: ComponentMeta = field(default_factory=ComponentMeta)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidComponent("BandComponent.name must be a non-empty string.")

        if not isinstance(self.series, TimeSeries):
            raise InvalidComponent("BandComponent.series must be a TimeSeries instance.")

        if not isinstance(self.meta, ComponentMeta):
            raise InvalidComponent("BandComponent.meta must be a ComponentMeta instance.")

        # Keep the series labelled with the component name
        if self.series.name != self.name:
            object.__setattr__(self, "series", self.series.with_values(self.series.values, name=self.name))

    # Convenience accessors
    @property
    def time(self) -> np.ndarray:
        return self.series.time

    @property
    def values(self) -> np.ndarray:
        return self.series.values

    @property
    def unit(self) -> str | None:
        # Meta takes precedence
        return self.meta.unit if self.meta.unit is not None else self.series.unit

    @property
    def levels(self) -> tuple[int, ...]:
        return self.meta.levels

    @property
    def is_residual(self) -> bool:
        return self.meta.is_residual

    @property
    def n(self) -> int:
        return self.series.n

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "BandComponent":
        return BandComponent(
            name=self.name,
            series=self.series.slice_time(t_min, t_max, closed=closed),
            meta=self._copy_meta(),
        )

    def rename(self, name: str) -> "BandComponent":
        return BandComponent(name=name, series=self.series, meta=self._copy_meta())

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        return self.series.to_numpy(copy=copy)

    def _copy_meta(self) -> ComponentMeta:
        return ComponentMeta(
            levels=self.meta.levels,
            periods=self.meta.periods,
            unit=self.meta.unit,
            description=self.meta.description,
            attrs=self.meta.attrs.copy(),
        )
