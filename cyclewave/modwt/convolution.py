# cyclewave/modwt/convolution.py
"""
Periodic-boundary convolution.

The signal is treated as if tiled infinitely: every index is taken
modulo N, so filters longer than the signal wrap around more than once.
"""
from __future__ import annotations

import numpy as np

from cyclewave.core.exceptions import InvalidInput

METHODS = ("direct", "fft")


def _prepare(signal, taps, method: str) -> tuple[np.ndarray, np.ndarray]:
    if method not in METHODS:
        raise InvalidInput(f"method must be one of {METHODS}, got {method!r}")

    s = np.asarray(signal, dtype=float)
    f = np.asarray(taps, dtype=float)
    if s.ndim != 1:
        raise InvalidInput(f"signal must be 1D, got shape {s.shape}")
    if s.size == 0:
        raise InvalidInput("signal must not be empty.")
    if f.ndim != 1 or f.size == 0:
        raise InvalidInput("taps must be a non-empty 1D sequence.")
    return s, f


def _fold(taps: np.ndarray, n: int) -> np.ndarray:
    """Wrap taps onto a length-n kernel: kernel[l mod n] += taps[l]."""
    kernel = np.zeros(n, dtype=float)
    np.add.at(kernel, np.arange(taps.size) % n, taps)
    return kernel


def circular_convolve(signal, taps, *, method: str = "direct") -> np.ndarray:
    """
    out[t] = sum_l taps[l] * signal[(t - l) mod N]
    """
    s, f = _prepare(signal, taps, method)

    if method == "fft":
        kernel = _fold(f, s.size)
        return np.real(np.fft.ifft(np.fft.fft(s) * np.fft.fft(kernel)))

    out = np.zeros_like(s)
    for lag in np.flatnonzero(f):
        # np.roll(s, k)[t] == s[(t - k) mod N]
        out += f[lag] * np.roll(s, int(lag))
    return out


def circular_correlate(signal, taps, *, method: str = "direct") -> np.ndarray:
    """
    out[t] = sum_l taps[l] * signal[(t + l) mod N]

    Adjoint of circular_convolve for the same taps.
    """
    s, f = _prepare(signal, taps, method)

    if method == "fft":
        kernel = _fold(f, s.size)
        return np.real(np.fft.ifft(np.fft.fft(s) * np.conj(np.fft.fft(kernel))))

    out = np.zeros_like(s)
    for lag in np.flatnonzero(f):
        out += f[lag] * np.roll(s, -int(lag))
    return out
