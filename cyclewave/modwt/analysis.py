# cyclewave/modwt/analysis.py
from __future__ import annotations

import logging

from cyclewave.core import (
    BandComponent,
    ComponentMeta,
    Decomposition,
    DecompositionMeta,
    InvalidInput,
    SamplingSpec,
    TimeSeries,
)
from .bands import aggregate, level_periods
from .config import BAND_DESCRIPTIONS, DecompositionConfig
from .pyramid import decompose

logger = logging.getLogger(__name__)


def decompose_series(
    series,
    sampling: SamplingSpec | None = None,
    config: DecompositionConfig | None = None,
    *,
    name: str | None = None,
) -> Decomposition:
    """
    Decompose one series into time-aligned bands plus a residual.

    `series` is either a TimeSeries (its sampling is inferred from the
    time vector unless `sampling` is given; a series shorter than 2
    samples needs `sampling`) or a plain 1D array, which requires
    `sampling`. The caller supplies a contiguous, gap-free series.
    """
    if config is None:
        config = DecompositionConfig.quarterly()

    if isinstance(series, TimeSeries):
        if sampling is None:
            if series.n < 2:
                raise InvalidInput(
                    "Cannot infer sampling from fewer than 2 samples; pass `sampling` explicitly."
                )
            sampling = series.sampling
        source = TimeSeries.from_sampling(
            series.values, sampling, unit=series.unit, name=series.name
        )
    else:
        if sampling is None:
            raise InvalidInput("A SamplingSpec is required when `series` is not a TimeSeries.")
        source = TimeSeries.from_sampling(series, sampling, name=name)

    name = name or source.name or "series"
    logger.debug(
        "Decomposing '%s' (%d samples, %d levels, family=%s)",
        name, source.n, config.levels, config.family,
    )

    level_set = decompose(source.values, config.levels, config.family, method=config.method)
    band_set = aggregate(level_set, config.bands, residual_name=config.residual_name)

    components: dict[str, BandComponent] = {}
    for spec in band_set.specs:
        components[spec.name] = BandComponent(
            name=spec.name,
            series=source.with_values(band_set[spec.name], name=spec.name),
            meta=ComponentMeta(
                levels=spec.levels,
                periods=level_periods(spec.first, spec.last, sampling.frequency),
                description=BAND_DESCRIPTIONS.get(spec.name),
            ),
        )

    components[config.residual_name] = BandComponent(
        name=config.residual_name,
        series=source.with_values(band_set.residual, name=config.residual_name),
        meta=ComponentMeta(
            periods=(2.0 ** config.levels / sampling.frequency, float("inf")),
            description=BAND_DESCRIPTIONS.get(config.residual_name),
        ),
    )

    return Decomposition(
        name=name,
        source=source,
        components=components,
        meta=DecompositionMeta(
            levels=config.levels,
            family=config.family,
            residual_name=config.residual_name,
            sampling=sampling,
        ),
    )
