# cyclewave/modwt/bands.py
"""
Aggregation of raw decomposition levels into named bands.

A partition groups levels 1..J into contiguous, ordered, non-overlapping
bands (level 1 = shortest period). The residual is always its own band.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Sequence, Union

import numpy as np

from cyclewave.core.exceptions import InvalidInput
from .pyramid import LevelSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BandSpec:
    """A named, contiguous run of levels."""
    name: str
    levels: tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInput("Band name must be a non-empty string.")
        try:
            levels = tuple(self.levels)
        except TypeError as e:
            raise InvalidInput(f"Band '{self.name}' levels must be a sequence of integers.") from e
        if not levels:
            raise InvalidInput(f"Band '{self.name}' has no levels.")
        for j in levels:
            if isinstance(j, bool) or not isinstance(j, (int, np.integer)):
                raise InvalidInput(f"Band '{self.name}' has a non-integer level {j!r}.")
        levels = tuple(int(j) for j in levels)
        if any(b - a != 1 for a, b in zip(levels, levels[1:])):
            raise InvalidInput(
                f"Band '{self.name}' levels must be consecutive and ascending, got {levels}."
            )
        object.__setattr__(self, "levels", levels)

    @property
    def first(self) -> int:
        return self.levels[0]

    @property
    def last(self) -> int:
        return self.levels[-1]


PartitionLike = Union[
    Mapping[str, Sequence[int]],
    Iterable[Union[BandSpec, tuple[str, Sequence[int]]]],
]


def level_periods(first: int, last: int | None = None, frequency: float = 1.0) -> tuple[float, float]:
    """
    Range of periods (in time units) covered by levels first..last.

    Level j roughly spans 2**(j-1) to 2**j sampling periods.
    """
    last = first if last is None else last
    if frequency <= 0:
        raise InvalidInput(f"frequency must be positive, got {frequency!r}")
    return 2.0 ** (first - 1) / frequency, 2.0 ** last / frequency


def _as_specs(partition: PartitionLike) -> list[BandSpec]:
    if isinstance(partition, BandSpec):
        return [partition]
    if isinstance(partition, Mapping):
        return [BandSpec(name, levels) for name, levels in partition.items()]
    if isinstance(partition, (str, bytes)):
        raise InvalidInput("partition must be a mapping or a sequence of bands.")

    specs = []
    try:
        items = list(partition)
    except TypeError as e:
        raise InvalidInput("partition must be a mapping or a sequence of bands.") from e
    for item in items:
        if isinstance(item, BandSpec):
            specs.append(item)
            continue
        try:
            name, levels = item
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Malformed band entry {item!r}; expected (name, levels).") from e
        specs.append(BandSpec(name, levels))
    return specs


def validate_partition(
    partition: PartitionLike,
    n_levels: int,
    *,
    residual_name: str = "long",
) -> tuple[BandSpec, ...]:
    """
    Check that `partition` splits levels 1..n_levels into ordered bands.

    Raises InvalidInput if a level is omitted, duplicated or out of range,
    if a band is not contiguous or out of order, or if band names clash.
    """
    specs = _as_specs(partition)
    if not specs:
        raise InvalidInput("partition must contain at least one band.")

    names = [s.name for s in specs]
    if len(set(names)) != len(names):
        raise InvalidInput(f"Duplicate band names in partition: {names}.")
    if residual_name in names:
        raise InvalidInput(f"Band name '{residual_name}' is reserved for the residual.")

    seen = [j for s in specs for j in s.levels]
    out_of_range = [j for j in seen if not 1 <= j <= n_levels]
    if out_of_range:
        raise InvalidInput(f"Levels {out_of_range} are outside 1..{n_levels}.")
    duplicated = sorted({j for j in seen if seen.count(j) > 1})
    if duplicated:
        raise InvalidInput(f"Levels {duplicated} belong to more than one band.")
    missing = sorted(set(range(1, n_levels + 1)) - set(seen))
    if missing:
        raise InvalidInput(f"Levels {missing} are not assigned to any band.")
    if seen != list(range(1, n_levels + 1)):
        raise InvalidInput("Bands must be listed from the shortest to the longest levels.")

    return tuple(specs)


def partition_by_sizes(names: Sequence[str], sizes: Sequence[int]) -> tuple[BandSpec, ...]:
    """
    Build a partition from consecutive group sizes.

    partition_by_sizes(("short", "cycle", "medium"), (2, 2, 2)) assigns
    levels 1-2, 3-4 and 5-6.
    """
    if len(names) != len(sizes):
        raise InvalidInput(f"Got {len(names)} names but {len(sizes)} sizes.")

    specs = []
    start = 1
    for name, size in zip(names, sizes):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise InvalidInput(f"Band '{name}' size must be a positive integer, got {size!r}.")
        specs.append(BandSpec(name, tuple(range(start, start + int(size)))))
        start += int(size)
    return tuple(specs)


@dataclass(frozen=True, slots=True)
class BandSet:
    """Named band arrays (shortest to longest period) plus the residual."""

    bands: Mapping[str, np.ndarray] = field(repr=False)
    residual: np.ndarray = field(repr=False)
    specs: tuple[BandSpec, ...] = ()
    residual_name: str = "long"

    def __len__(self) -> int:
        return len(self.bands) + 1

    def __iter__(self) -> Iterator[str]:
        yield from self.bands
        yield self.residual_name

    def __contains__(self, name: object) -> bool:
        return name in self.bands or name == self.residual_name

    def __getitem__(self, name: str) -> np.ndarray:
        if name == self.residual_name:
            return self.residual
        return self.bands[name]

    def items(self) -> Iterator[tuple[str, np.ndarray]]:
        for name in self:
            yield name, self[name]

    def spec(self, name: str) -> BandSpec | None:
        for s in self.specs:
            if s.name == name:
                return s
        return None

    def reconstruct(self) -> np.ndarray:
        total = self.residual.copy()
        for values in self.bands.values():
            total = total + values
        return total


def aggregate(
    level_set: LevelSet,
    partition: PartitionLike,
    *,
    residual_name: str = "long",
) -> BandSet:
    """
    Sum grouped levels into named bands.

    The residual is recomputed as the original signal minus the sum of
    ALL levels, so bands plus residual reconstruct the signal.
    """
    if not isinstance(level_set, LevelSet):
        raise InvalidInput("aggregate() expects a LevelSet instance.")
    if not isinstance(residual_name, str) or not residual_name.strip():
        raise InvalidInput("residual_name must be a non-empty string.")

    specs = validate_partition(partition, level_set.n_levels, residual_name=residual_name)

    bands: dict[str, np.ndarray] = {}
    for s in specs:
        values = level_set.levels[s.first - 1:s.last].sum(axis=0)
        values.setflags(write=False)
        bands[s.name] = values

    residual = level_set.signal - level_set.levels.sum(axis=0)
    residual.setflags(write=False)

    logger.debug(
        "Aggregated %d levels into bands %s + residual '%s'",
        level_set.n_levels, [s.name for s in specs], residual_name,
    )
    return BandSet(bands=bands, residual=residual, specs=specs, residual_name=residual_name)
