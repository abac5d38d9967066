# cyclewave/modwt/pyramid.py
"""
MODWT pyramid algorithm and multiresolution analysis.

Stage j turns the previous smooth V_{j-1} into wavelet coefficients W_j
and the next smooth V_j using the level-j filters (dilated by 2**(j-1)
and rescaled by 1/sqrt(2)). The multiresolution analysis projects each
W_j back to the time domain, giving details D_1..D_J and a smooth S_J.
Both W_1..W_J + V_J and D_1..D_J + S_J add up to the input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from cyclewave.core.exceptions import InvalidInput
from .convolution import circular_convolve, circular_correlate
from .filters import get_filter_pair, level_filter_pair, modwt_taps, FilterPair

logger = logging.getLogger(__name__)


def _as_signal(signal) -> np.ndarray:
    x = np.array(signal, dtype=float)
    if x.ndim != 1:
        raise InvalidInput(f"signal must be 1D, got shape {x.shape}")
    if x.size == 0:
        raise InvalidInput("signal must not be empty.")
    return x


def _check_levels(levels) -> int:
    if isinstance(levels, bool) or not isinstance(levels, (int, np.integer)) or levels < 1:
        raise InvalidInput(f"levels must be an integer >= 1, got {levels!r}")
    return int(levels)


def _readonly(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


@dataclass(frozen=True, slots=True)
class ModwtCoefficients:
    """Raw pyramid output: W_1..W_J stacked as a (J, N) array, and V_J."""

    wavelet: np.ndarray = field(repr=False)
    scaling: np.ndarray = field(repr=False)
    family: str = "haar"

    @property
    def n_levels(self) -> int:
        return int(self.wavelet.shape[0])

    @property
    def n(self) -> int:
        return int(self.scaling.size)

    def energy_by_level(self) -> np.ndarray:
        """Sum of squares of W_1..W_J followed by that of V_J (length J + 1)."""
        return np.append(np.sum(self.wavelet ** 2, axis=1), np.sum(self.scaling ** 2))

    def total_energy(self) -> float:
        return float(np.sum(self.energy_by_level()))


@dataclass(frozen=True, slots=True)
class LevelSet:
    """
    Additive decomposition of one signal.

    levels[j - 1] is level j (period roughly 2**(j-1) to 2**j samples);
    residual is the signal minus all levels.
    """

    signal: np.ndarray = field(repr=False)
    levels: np.ndarray = field(repr=False)
    residual: np.ndarray = field(repr=False)
    coefficients: ModwtCoefficients = field(repr=False)

    @property
    def n_levels(self) -> int:
        return int(self.levels.shape[0])

    @property
    def n(self) -> int:
        return int(self.signal.size)

    def __len__(self) -> int:
        return self.n_levels

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.levels)

    def level(self, j: int) -> np.ndarray:
        """Level j (1-indexed)."""
        if isinstance(j, bool) or not isinstance(j, (int, np.integer)) or not 1 <= j <= self.n_levels:
            raise InvalidInput(f"level must be in 1..{self.n_levels}, got {j!r}")
        return self.levels[j - 1]

    def reconstruct(self) -> np.ndarray:
        return self.levels.sum(axis=0) + self.residual


def modwt(signal, levels: int, family: str = "haar", *, method: str = "direct") -> ModwtCoefficients:
    """
    MODWT coefficients of `signal` up to level `levels`.

    Energy is preserved: sum(W_j**2) over all levels plus sum(V_J**2)
    equals sum(signal**2).
    """
    x = _as_signal(signal)
    n_levels = _check_levels(levels)
    base = get_filter_pair(family)

    if 2 ** n_levels > x.size:
        logger.debug(
            "Decomposing %d samples into %d levels: widest filter wraps around the signal",
            x.size, n_levels,
        )

    wavelet = np.empty((n_levels, x.size), dtype=float)
    v = x
    for j in range(1, n_levels + 1):
        g, h = modwt_taps(level_filter_pair(j, base))
        wavelet[j - 1] = circular_convolve(v, h, method=method)
        v = circular_convolve(v, g, method=method)
        logger.debug("MODWT level %d/%d done (filter length %d)", j, n_levels, g.size)

    return ModwtCoefficients(wavelet=_readonly(wavelet), scaling=_readonly(v), family=family)


def _synthesize(
    w: np.ndarray | None,
    v: np.ndarray | None,
    top: int,
    base: FilterPair,
    method: str,
) -> np.ndarray:
    """Run the inverse pyramid from stage `top` down to stage 1.

    `w` is used at stage `top` only; None stands for an all-zero vector.
    """
    g, h = modwt_taps(level_filter_pair(top, base))
    out = 0.0
    if w is not None:
        out = out + circular_correlate(w, h, method=method)
    if v is not None:
        out = out + circular_correlate(v, g, method=method)

    for j in range(top - 1, 0, -1):
        g, _ = modwt_taps(level_filter_pair(j, base))
        out = circular_correlate(out, g, method=method)
    return out


def imodwt(coefficients: ModwtCoefficients, *, method: str = "direct") -> np.ndarray:
    """Invert `modwt`: V_{j-1} = corr(W_j, h_j) + corr(V_j, g_j) for j = J..1."""
    if not isinstance(coefficients, ModwtCoefficients):
        raise InvalidInput("imodwt() expects a ModwtCoefficients instance.")

    base = get_filter_pair(coefficients.family)
    v = coefficients.scaling
    for j in range(coefficients.n_levels, 0, -1):
        g, h = modwt_taps(level_filter_pair(j, base))
        v = (
            circular_correlate(coefficients.wavelet[j - 1], h, method=method)
            + circular_correlate(v, g, method=method)
        )
    return v


def smooth(coefficients: ModwtCoefficients, *, method: str = "direct") -> np.ndarray:
    """Smooth S_J: the part of the signal carried by V_J alone."""
    base = get_filter_pair(coefficients.family)
    return _synthesize(None, coefficients.scaling, coefficients.n_levels, base, method)


def decompose(signal, levels: int, family: str = "haar", *, method: str = "direct") -> LevelSet:
    """
    Split `signal` into `levels` time-aligned wavelet levels plus a residual.

    Level j holds the MODWT wavelet coefficients W_j, same length as the
    input (no decimation). Each pyramid stage splits V_{j-1} exactly into
    W_j + V_j, so the residual (signal minus all levels) is the final
    smooth V_J, and levels plus residual carry the energy of the signal.

    Raises InvalidInput for an empty signal or levels < 1.
    """
    x = _as_signal(signal)
    coefficients = modwt(x, levels, family, method=method)

    wavelet = np.array(coefficients.wavelet)
    residual = x - wavelet.sum(axis=0)

    return LevelSet(
        signal=_readonly(x),
        levels=_readonly(wavelet),
        residual=_readonly(residual),
        coefficients=coefficients,
    )


def mra(signal, levels: int, family: str = "haar", *, method: str = "direct") -> LevelSet:
    """
    Multiresolution analysis: details D_1..D_J and smooth S_J.

    D_j is W_j projected back to the time domain through the inverse
    pyramid. The residual is the signal minus all details, which equals
    S_J up to rounding.
    """
    x = _as_signal(signal)
    coefficients = modwt(x, levels, family, method=method)
    base = get_filter_pair(family)

    details = np.empty((coefficients.n_levels, x.size), dtype=float)
    for j in range(1, coefficients.n_levels + 1):
        details[j - 1] = _synthesize(coefficients.wavelet[j - 1], None, j, base, method)

    residual = x - details.sum(axis=0)

    return LevelSet(
        signal=_readonly(x),
        levels=_readonly(details),
        residual=_readonly(residual),
        coefficients=coefficients,
    )
