# test/test_component.py
import numpy as np
import pytest

from cyclewave.core import TimeSeries, BandComponent, ComponentMeta, InvalidComponent


def test_component_basic_accessors():
    ts = TimeSeries(time=np.array([0.0, 1.0]), values=np.array([10.0, 20.0]), unit="%")
    comp = BandComponent(name="cycle", series=ts, meta=ComponentMeta(levels=(3, 4)))

    assert comp.name == "cycle"
    assert comp.n == 2
    assert comp.unit == "%"
    assert comp.levels == (3, 4)
    assert not comp.is_residual
    assert np.allclose(comp.values, [10.0, 20.0])


def test_component_labels_series_with_its_name():
    ts = TimeSeries(time=np.array([0.0, 1.0]), values=np.array([1.0, 2.0]), name="other")
    comp = BandComponent(name="short", series=ts)
    assert comp.series.name == "short"


def test_component_rejects_empty_name_and_bad_series():
    ts = TimeSeries(time=np.array([0.0]), values=np.array([1.0]))
    with pytest.raises(InvalidComponent):
        BandComponent(name="   ", series=ts)
    with pytest.raises(InvalidComponent):
        BandComponent(name="x", series=np.array([1.0]))  # type: ignore[arg-type]


def test_residual_has_no_levels():
    ts = TimeSeries(time=np.array([0.0]), values=np.array([1.0]))
    comp = BandComponent(name="long", series=ts)
    assert comp.is_residual


def test_unit_precedence_meta_over_series():
    ts = TimeSeries(time=np.array([0.0, 1.0]), values=np.array([1.0, 2.0]), unit="A")
    comp = BandComponent(name="x", series=ts, meta=ComponentMeta(unit="B"))
    assert comp.unit == "B"


def test_slice_time_and_rename_keep_meta_copy():
    ts = TimeSeries(time=np.array([0.0, 1.0, 2.0, 3.0]), values=np.array([10.0, 20.0, 30.0, 40.0]))
    comp = BandComponent(
        name="x",
        series=ts,
        meta=ComponentMeta(levels=(1,), periods=(0.25, 0.5), description="hello", attrs={"a": 1}),
    )

    out = comp.slice_time(1.0, 2.0)
    assert np.allclose(out.time, [1.0, 2.0])
    assert out.meta.description == "hello"
    assert out.meta.periods == (0.25, 0.5)
    assert out.meta.attrs == {"a": 1}
    assert out.meta.attrs is not comp.meta.attrs

    renamed = comp.rename("y")
    assert renamed.name == "y"
    assert renamed.series.name == "y"
    assert renamed.levels == (1,)
