# cyclewave/core/decomposition.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

import numpy as np

from .exceptions import ComponentNotFound, InvalidDecomposition
from .metadata import DecompositionMeta
from .component import BandComponent
from .timeseries import TimeSeries


@dataclass(frozen=True, slots=True)
class Decomposition:
    """
    The time-aligned band components of one decomposed series.

    Design goals:
    - easy access: dec["cycle"]
    - safe: every component shares the source time base
    - predictable: immutable; transformations return new Decomposition

    Components keep insertion order: bands from shortest to longest
    period, then the residual.
    """
    name: str
    source: TimeSeries = field(repr=False)
    components: Mapping[str, BandComponent] = field(default_factory=dict, repr=False)
    meta: DecompositionMeta = field(default_factory=DecompositionMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidDecomposition("Decomposition.name must be a non-empty string.")
        if not isinstance(self.source, TimeSeries):
            raise InvalidDecomposition("Decomposition.source must be a TimeSeries instance.")
        if not isinstance(self.components, Mapping):
            raise InvalidDecomposition("Decomposition.components must be a mapping (e.g., dict).")
        if not isinstance(self.meta, DecompositionMeta):
            raise InvalidDecomposition("Decomposition.meta must be a DecompositionMeta instance.")

        normalized: dict[str, BandComponent] = {}
        for key, comp in self.components.items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidDecomposition("Decomposition.components keys must be non-empty strings.")
            if not isinstance(comp, BandComponent):
                raise InvalidDecomposition("Decomposition.components values must be BandComponent instances.")
            if comp.name != key:
                raise InvalidDecomposition(
                    f"Component name mismatch: key '{key}' but BandComponent.name is '{comp.name}'."
                )
            if comp.n != self.source.n or not np.array_equal(comp.time, self.source.time):
                raise InvalidDecomposition(
                    f"Component '{key}' is not aligned with the source time base."
                )
            normalized[key] = comp

        object.__setattr__(self, "components", normalized)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)

    def keys(self) -> Iterable[str]:
        return self.components.keys()

    def items(self) -> Iterable[tuple[str, BandComponent]]:
        return self.components.items()

    def values(self) -> Iterable[BandComponent]:
        return self.components.values()

    def __contains__(self, name: object) -> bool:
        return name in self.components

    def __getitem__(self, name: str) -> BandComponent:
        try:
            return self.components[name]
        except KeyError as e:
            raise ComponentNotFound(name) from e

    def get(self, name: str, default: BandComponent | None = None) -> BandComponent | None:
        return self.components.get(name, default)

    # ---- views ----
    @property
    def time(self) -> np.ndarray:
        return self.source.time

    @property
    def bands(self) -> dict[str, BandComponent]:
        return {k: c for k, c in self.components.items() if not c.is_residual}

    @property
    def residual(self) -> BandComponent:
        return self[self.meta.residual_name]

    def reconstruct(self) -> TimeSeries:
        """Elementwise sum of all components."""
        total = np.zeros(self.source.n, dtype=float)
        for comp in self.components.values():
            total = total + comp.values
        return self.source.with_values(total)

    def reconstruction_error(self) -> float:
        """Largest absolute difference between the source and the sum of components."""
        if self.source.n == 0:
            return 0.0
        return float(np.max(np.abs(self.reconstruct().values - self.source.values)))

    def to_table(self) -> tuple[list[str], np.ndarray]:
        """
        Tabular view for presentation layers.

        Returns column names and an (N, 2 + n_components) array:
        time, source, then one column per component.
        """
        columns = ["time", self.source.name or self.name, *self.components]
        arrays = [self.source.time, self.source.values]
        arrays.extend(c.values for c in self.components.values())
        return columns, np.column_stack(arrays)

    # ---- transformations ----
    def select(self, names: Iterable[str], *, missing: str = "raise") -> "Decomposition":
        """
        Keep only the given component names (order preserved by insertion in `names`).

        missing:
          - "raise": error if any name is missing
          - "ignore": skip missing names
        """
        selected: dict[str, BandComponent] = {}
        for n in names:
            if n in self.components:
                selected[n] = self.components[n]
            elif missing == "raise":
                raise ComponentNotFound(n)
        return Decomposition(name=self.name, source=self.source, components=selected, meta=self.meta)

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "Decomposition":
        """
        Slice the source and all components by time.

        Slicing happens after the transform, so boundary effects of the
        periodic wraparound are kept as computed on the full series.
        """
        return Decomposition(
            name=self.name,
            source=self.source.slice_time(t_min, t_max, closed=closed),
            components={
                k: c.slice_time(t_min, t_max, closed=closed) for k, c in self.components.items()
            },
            meta=self.meta,
        )

    def rename(self, name: str) -> "Decomposition":
        return Decomposition(name=name, source=self.source, components=dict(self.components), meta=self.meta)
