# cyclewave/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .exceptions import InvalidComponent, InvalidDecomposition
from .sampling import SamplingSpec


@dataclass(frozen=True, slots=True)
class ComponentMeta:
    """
    Metadata attached to a BandComponent.

    - levels: raw decomposition levels summed into the component
      (empty for the residual)
    - periods: (shortest, longest) period covered, in time units
    - description: human-friendly description ("business cycle", ...)
    - attrs: arbitrary additional fields
    """
    levels: tuple[int, ...] = ()
    periods: tuple[float, float] | None = None
    unit: str | None = None
    description: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        levels = tuple(self.levels)
        if any(isinstance(j, bool) or not isinstance(j, (int, np.integer)) or j < 1 for j in levels):
            raise InvalidComponent("ComponentMeta.levels must be positive integers.")
        levels = tuple(int(j) for j in levels)
        object.__setattr__(self, "levels", levels)

        if self.periods is not None:
            lo, hi = self.periods
            if not 0 <= lo <= hi:
                raise InvalidComponent("ComponentMeta.periods must satisfy 0 <= low <= high.")
            object.__setattr__(self, "periods", (float(lo), float(hi)))

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidComponent("ComponentMeta.attrs must be a dict.")

    @property
    def is_residual(self) -> bool:
        return not self.levels


@dataclass(frozen=True, slots=True)
class DecompositionMeta:
    """
    Metadata attached to a Decomposition (one decomposed series).
    """
    levels: int = 1
    family: str = "haar"
    residual_name: str = "long"
    sampling: SamplingSpec | None = None
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.levels, bool) or not isinstance(self.levels, (int, np.integer)) or self.levels < 1:
            raise InvalidDecomposition("DecompositionMeta.levels must be a positive integer.")
        object.__setattr__(self, "levels", int(self.levels))
        if not isinstance(self.residual_name, str) or not self.residual_name.strip():
            raise InvalidDecomposition("DecompositionMeta.residual_name must be a non-empty string.")
        if self.sampling is not None and not isinstance(self.sampling, SamplingSpec):
            raise InvalidDecomposition("DecompositionMeta.sampling must be a SamplingSpec.")
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidDecomposition("DecompositionMeta.attrs must be a dict.")
