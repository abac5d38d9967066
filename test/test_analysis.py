# test/test_analysis.py
import numpy as np
import pytest

from cyclewave.core import Decomposition, InvalidInput, SamplingSpec, TimeSeries
from cyclewave.modwt import DecompositionConfig, decompose, decompose_series


def _gdp_like(n: int = 96) -> np.ndarray:
    t = np.arange(n)
    rng = np.random.default_rng(1)
    return 0.02 * t + np.sin(2 * np.pi * t / 20.0) + 0.3 * rng.normal(size=n)


def test_quarterly_decomposition_of_array():
    x = _gdp_like()
    sampling = SamplingSpec.from_period(1990, 1, frequency=4)
    dec = decompose_series(x, sampling, name="gdp")

    assert isinstance(dec, Decomposition)
    assert dec.name == "gdp"
    assert list(dec) == ["short", "cycle", "medium", "long"]
    assert np.allclose(dec.time, sampling.timestamps(x.size))
    assert dec.reconstruction_error() < 1e-9
    assert dec.meta.levels == 6
    assert dec.meta.sampling == sampling


def test_components_match_level_sums():
    x = _gdp_like()
    dec = decompose_series(x, SamplingSpec(start=1990.0, frequency=4))
    ls = decompose(x, 6)

    assert np.allclose(dec["cycle"].values, ls.levels[2] + ls.levels[3])
    assert np.allclose(dec["long"].values, ls.residual)


def test_component_metadata_describes_periods():
    dec = decompose_series(_gdp_like(), SamplingSpec(start=1990.0, frequency=4))

    assert dec["short"].meta.levels == (1, 2)
    assert dec["short"].meta.periods == (0.25, 1.0)
    assert dec["cycle"].meta.periods == (1.0, 4.0)
    assert dec["cycle"].meta.description == "business cycle"
    assert dec["long"].is_residual
    assert dec["long"].meta.periods == (16.0, float("inf"))


def test_timeseries_input_infers_sampling():
    x = _gdp_like(64)
    ts = TimeSeries.from_sampling(x, SamplingSpec(start=2000.0, frequency=12), unit="%", name="ip")
    dec = decompose_series(ts, config=DecompositionConfig(levels=3))

    assert dec.name == "ip"
    assert dec.source.unit == "%"
    assert np.isclose(dec.meta.sampling.frequency, 12.0)
    assert list(dec) == ["level_1", "level_2", "level_3", "long"]
    assert dec.reconstruction_error() < 1e-9


def test_custom_partition_and_fft_method():
    cfg = DecompositionConfig(
        levels=4,
        bands=(("fast", (1,)), ("slow", (2, 3, 4))),
        method="fft",
        residual_name="trend",
    )
    dec = decompose_series(_gdp_like(50), SamplingSpec(start=0.0, frequency=1), config=cfg)

    assert list(dec) == ["fast", "slow", "trend"]
    assert dec.residual.name == "trend"
    assert dec.reconstruction_error() < 1e-9


def test_array_input_requires_sampling():
    with pytest.raises(InvalidInput):
        decompose_series(_gdp_like())


def test_empty_series_rejected():
    with pytest.raises(InvalidInput):
        decompose_series([], SamplingSpec(start=0.0, frequency=4))


def test_table_export_has_one_column_per_component():
    dec = decompose_series(_gdp_like(32), SamplingSpec(start=1990.0, frequency=4), name="gdp")
    columns, data = dec.to_table()
    assert columns == ["time", "gdp", "short", "cycle", "medium", "long"]
    assert data.shape == (32, 6)
    assert np.allclose(data[:, 2:].sum(axis=1), data[:, 1])


def test_single_sample_timeseries_needs_sampling():
    ts = TimeSeries(time=[2000.0], values=[1.5])
    with pytest.raises(InvalidInput, match="sampling"):
        decompose_series(ts, config=DecompositionConfig(levels=1))

    dec = decompose_series(ts, SamplingSpec(start=2000.0, frequency=4.0), DecompositionConfig(levels=1))
    assert dec.reconstruction_error() < 1e-12
