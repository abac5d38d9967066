"""
Core domain objects for cyclewave.

This module defines the immutable data model around a decomposition:
- SamplingSpec: fixed sampling grid (start + frequency) used for labelling
- TimeSeries: validated 1D signal over time
- BandComponent: named band (sum of levels) or residual of a series
- Decomposition: all aligned components of one series

The core layer is independent from the transform engine and from I/O.
"""

from .sampling import SamplingSpec
from .timeseries import TimeSeries, align_time
from .component import BandComponent
from .decomposition import Decomposition
from .metadata import ComponentMeta, DecompositionMeta
from .exceptions import (
    CoreError,
    InvalidInput,
    InvalidTimeSeries,
    InvalidComponent,
    InvalidDecomposition,
    ComponentNotFound,
    SeriesNotFound,
)


__all__ = [
    # sampling / time series
    "SamplingSpec",
    "TimeSeries",
    "align_time",

    # domain objects
    "BandComponent",
    "Decomposition",

    # metadata
    "ComponentMeta",
    "DecompositionMeta",

    # exceptions
    "CoreError",
    "InvalidInput",
    "InvalidTimeSeries",
    "InvalidComponent",
    "InvalidDecomposition",
    "ComponentNotFound",
    "SeriesNotFound",
]
