"""
Maximal-overlap discrete wavelet transform (MODWT) engine.

- filters: two-tap (Haar) filter bank and its dyadic dilations
- convolution: periodic-boundary convolution / correlation
- pyramid: MODWT coefficients and the additive level decomposition
- bands: aggregation of levels into named bands plus residual
- analysis: decompose a series into a time-aligned Decomposition
"""

from .filters import (
    FilterPair,
    get_filter_pair,
    haar_filter_pair,
    upsample,
    level_filter_pair,
    equivalent_filters,
)
from .convolution import circular_convolve, circular_correlate
from .pyramid import LevelSet, ModwtCoefficients, modwt, imodwt, smooth, decompose, mra
from .bands import BandSpec, BandSet, aggregate, validate_partition, partition_by_sizes, level_periods
from .config import DecompositionConfig, QUARTERLY_BANDS
from .analysis import decompose_series


__all__ = [
    # filters
    "FilterPair",
    "get_filter_pair",
    "haar_filter_pair",
    "upsample",
    "level_filter_pair",
    "equivalent_filters",

    # convolution
    "circular_convolve",
    "circular_correlate",

    # pyramid
    "LevelSet",
    "ModwtCoefficients",
    "modwt",
    "imodwt",
    "smooth",
    "decompose",
    "mra",

    # bands
    "BandSpec",
    "BandSet",
    "aggregate",
    "validate_partition",
    "partition_by_sizes",
    "level_periods",

    # configuration / pipeline
    "DecompositionConfig",
    "QUARTERLY_BANDS",
    "decompose_series",
]
