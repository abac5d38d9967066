# cyclewave/modwt/filters.py
"""
Filter bank for the two-tap averaging/differencing (Haar) wavelet family.

The base pair is the orthonormal DWT pair; the MODWT pyramid rescales it
by 1/sqrt(2) at every stage.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from cyclewave.core.exceptions import InvalidInput

_SQRT1_2 = 1.0 / np.sqrt(2.0)

# family name -> (scaling, wavelet)
_FAMILIES: dict[str, tuple[tuple[float, ...], tuple[float, ...]]] = {
    "haar": ((_SQRT1_2, _SQRT1_2), (_SQRT1_2, -_SQRT1_2)),
}
_ALIASES = {"d2": "haar", "db1": "haar"}


@dataclass(frozen=True, slots=True)
class FilterPair:
    """
    Scaling (low-pass) and wavelet (high-pass) taps of equal length.

    Both filters have unit energy and are orthogonal to each other.
    """
    scaling: np.ndarray = field(repr=False)
    wavelet: np.ndarray = field(repr=False)
    level: int = 1

    def __post_init__(self) -> None:
        g = np.array(self.scaling, dtype=float)
        h = np.array(self.wavelet, dtype=float)

        if g.ndim != 1 or h.ndim != 1:
            raise InvalidInput("FilterPair taps must be 1D.")
        if g.size == 0 or g.size != h.size:
            raise InvalidInput(
                f"FilterPair taps must be non-empty and of equal length, got {g.size} vs {h.size}"
            )
        if not np.isclose(np.dot(g, g), 1.0, rtol=0.0, atol=1e-12):
            raise InvalidInput("FilterPair.scaling must have unit energy.")
        if not np.isclose(np.dot(h, h), 1.0, rtol=0.0, atol=1e-12):
            raise InvalidInput("FilterPair.wavelet must have unit energy.")
        if not np.isclose(np.dot(g, h), 0.0, rtol=0.0, atol=1e-12):
            raise InvalidInput("FilterPair.scaling and .wavelet must be orthogonal.")

        g.setflags(write=False)
        h.setflags(write=False)
        object.__setattr__(self, "scaling", g)
        object.__setattr__(self, "wavelet", h)

    @property
    def length(self) -> int:
        return int(self.scaling.size)


def _family_name(family: str) -> str:
    if not isinstance(family, str):
        raise InvalidInput(f"Wavelet family must be a string, got {family!r}")
    key = family.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _FAMILIES:
        raise InvalidInput(f"Unsupported wavelet family {family!r} (supported: {sorted(_FAMILIES)})")
    return key


def get_filter_pair(family: str = "haar") -> FilterPair:
    """Base (level 1) filter pair of a wavelet family."""
    scaling, wavelet = _FAMILIES[_family_name(family)]
    return FilterPair(scaling=np.array(scaling), wavelet=np.array(wavelet))


def haar_filter_pair() -> FilterPair:
    return get_filter_pair("haar")


def _check_level(level) -> int:
    if isinstance(level, bool) or not isinstance(level, (int, np.integer)) or level < 1:
        raise InvalidInput(f"level must be an integer >= 1, got {level!r}")
    return int(level)


def upsample(taps, level: int) -> np.ndarray:
    """
    Dilate a filter for pyramid stage `level`.

    Inserts 2**(level - 1) - 1 zeros between consecutive taps; level 1
    returns the taps unchanged.
    """
    level = _check_level(level)
    f = np.asarray(taps, dtype=float)
    if f.ndim != 1 or f.size == 0:
        raise InvalidInput("taps must be a non-empty 1D sequence.")

    stride = 2 ** (level - 1)
    out = np.zeros((f.size - 1) * stride + 1, dtype=float)
    out[::stride] = f
    return out


def level_filter_pair(level: int, base: FilterPair | None = None) -> FilterPair:
    """Filter pair applied at pyramid stage `level`."""
    level = _check_level(level)
    if base is None:
        base = haar_filter_pair()
    return FilterPair(
        scaling=upsample(base.scaling, level),
        wavelet=upsample(base.wavelet, level),
        level=level,
    )


def modwt_taps(pair: FilterPair) -> tuple[np.ndarray, np.ndarray]:
    """MODWT-normalised (scaling, wavelet) taps: the pair divided by sqrt(2)."""
    return pair.scaling * _SQRT1_2, pair.wavelet * _SQRT1_2


def equivalent_filters(level: int, family: str = "haar") -> tuple[np.ndarray, np.ndarray]:
    """
    Cascaded MODWT filters of width 2**level.

    Convolving the input circularly with these gives the level-`level`
    scaling and wavelet coefficients in one step, which is what the
    pyramid computes stage by stage.
    """
    level = _check_level(level)
    base = get_filter_pair(family)

    smooth = np.array([1.0])
    for j in range(1, level):
        g_j, _ = modwt_taps(level_filter_pair(j, base))
        smooth = np.convolve(smooth, g_j)

    g_last, h_last = modwt_taps(level_filter_pair(level, base))
    return np.convolve(smooth, g_last), np.convolve(smooth, h_last)
