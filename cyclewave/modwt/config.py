"""
Defaults for decomposing macro-economic series.

The quarterly preset splits six levels into three two-level bands:
short (0.5-1 year), cycle (1-4 years), medium (4-16 years); whatever is
slower than 16 years stays in the residual "long" component.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

import numpy as np

from cyclewave.core.exceptions import InvalidInput
from .bands import BandSpec, PartitionLike, validate_partition
from .convolution import METHODS
from .filters import get_filter_pair

DEFAULT_FAMILY: Final[str] = "haar"
DEFAULT_LEVELS: Final[int] = 6
DEFAULT_METHOD: Final[str] = "direct"
RESIDUAL_NAME: Final[str] = "long"

QUARTERLY_BANDS: Final[tuple[tuple[str, tuple[int, ...]], ...]] = (
    ("short", (1, 2)),
    ("cycle", (3, 4)),
    ("medium", (5, 6)),
)

BAND_DESCRIPTIONS: Final[dict[str, str]] = {
    "short": "short-run fluctuations",
    "cycle": "business cycle",
    "medium": "medium-term swings",
    "long": "long-term trend",
}


@dataclass(frozen=True, slots=True)
class DecompositionConfig:
    """
    Parameters of one decomposition run.

    `bands` is validated against `levels` on construction; leave it
    empty to get one band per level ("level_1", "level_2", ...).
    """
    levels: int = DEFAULT_LEVELS
    bands: tuple[BandSpec, ...] = field(default=())
    family: str = DEFAULT_FAMILY
    method: str = DEFAULT_METHOD
    residual_name: str = RESIDUAL_NAME

    def __post_init__(self) -> None:
        if isinstance(self.levels, bool) or not isinstance(self.levels, (int, np.integer)) or self.levels < 1:
            raise InvalidInput(f"levels must be an integer >= 1, got {self.levels!r}")
        object.__setattr__(self, "levels", int(self.levels))
        if self.method not in METHODS:
            raise InvalidInput(f"method must be one of {METHODS}, got {self.method!r}")
        get_filter_pair(self.family)

        bands: PartitionLike = self.bands
        if not bands:
            bands = [(f"level_{j}", (j,)) for j in range(1, self.levels + 1)]
        specs = validate_partition(bands, self.levels, residual_name=self.residual_name)
        object.__setattr__(self, "bands", specs)

    @classmethod
    def quarterly(cls) -> "DecompositionConfig":
        return cls(levels=DEFAULT_LEVELS, bands=QUARTERLY_BANDS)
