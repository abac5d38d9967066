# cyclewave/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all cyclewave exceptions."""


# ---- Precondition errors (also behave like ValueError) ----
class InvalidInput(CoreError, ValueError):
    """Raised when a transform is called with inputs violating its preconditions."""


class InvalidTimeSeries(InvalidInput):
    """Raised when a TimeSeries is constructed with invalid inputs."""


class InvalidComponent(InvalidInput):
    """Raised when a BandComponent / ComponentMeta is constructed with invalid inputs."""


class InvalidDecomposition(InvalidInput):
    """Raised when a Decomposition / DecompositionMeta is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ComponentNotFound(CoreError, KeyError):
    """Raised when a requested component name is not present."""


class SeriesNotFound(CoreError, KeyError):
    """Raised when a requested series is not present in a file."""
