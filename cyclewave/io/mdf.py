from __future__ import annotations

import logging
from pathlib import Path

from asammdf import MDF, Signal  # MDF container for series interchange
import numpy as np

from cyclewave.core import Decomposition, InvalidInput, SeriesNotFound, TimeSeries

logger = logging.getLogger(__name__)


def read_series(path: str | Path, channel: str) -> TimeSeries:
    """Read one channel of an MDF file as a TimeSeries.

    Parameters
    ----------
    path:
        MDF file (.mf4 / .mdf).
    channel:
        Channel name. It must be unique in the file.

    Raises
    ------
    SeriesNotFound
        If the channel is not present.
    """
    path = Path(path)
    with MDF(str(path)) as mdf:
        if channel not in mdf.channels_db:
            raise SeriesNotFound(channel)
        sig = mdf.get(channel)
        time = np.array(sig.timestamps, dtype=float)
        values = np.array(sig.samples, dtype=float)
        unit = sig.unit or None

    logger.debug("Read channel '%s' (%d samples) from %s", channel, values.size, path)
    return TimeSeries(time=time, values=values, unit=unit, name=channel)


def write_decomposition(decomposition: Decomposition, path: str | Path) -> Path:
    """Write the source series and every component of a Decomposition to an MDF file.

    All channels share the aligned time base, so they land in a single
    channel group. The source channel is named after the series; if that
    clashes with a component name it gets a "_source" suffix.
    """
    if not isinstance(decomposition, Decomposition):
        raise InvalidInput("write_decomposition() expects a Decomposition instance.")

    time = np.array(decomposition.time, dtype=float)
    source_name = decomposition.source.name or decomposition.name
    if source_name in decomposition:
        source_name = f"{source_name}_source"

    signals = [
        Signal(
            samples=np.array(decomposition.source.values, dtype=float),
            timestamps=time,
            name=source_name,
            unit=decomposition.source.unit or "",
            comment="source series",
        )
    ]
    for comp in decomposition.values():
        signals.append(
            Signal(
                samples=np.array(comp.values, dtype=float),
                timestamps=time,
                name=comp.name,
                unit=comp.unit or "",
                comment=comp.meta.description or "",
            )
        )

    path = Path(path)
    mdf = MDF()
    try:
        mdf.append(signals, comment=f"{decomposition.name}: {decomposition.meta.family} MODWT")
        path = Path(mdf.save(str(path), overwrite=True))
    finally:
        mdf.close()

    logger.debug("Wrote %d channels of '%s' to %s", len(signals), decomposition.name, path)
    return path
