# test/test_metadata.py
import numpy as np
import pytest

from cyclewave.core import ComponentMeta, DecompositionMeta, SamplingSpec
from cyclewave.core import InvalidComponent, InvalidDecomposition


def test_componentmeta_accepts_dict_and_normalizes_none():
    m = ComponentMeta(levels=[1, 2], attrs={"k": 1})
    assert m.levels == (1, 2)
    assert m.attrs == {"k": 1}

    m2 = ComponentMeta(attrs=None)
    assert m2.attrs == {}
    assert m2.is_residual


def test_componentmeta_rejects_bad_levels_periods_attrs():
    with pytest.raises(InvalidComponent):
        ComponentMeta(levels=(0,))
    with pytest.raises(InvalidComponent):
        ComponentMeta(periods=(4.0, 1.0))
    with pytest.raises(InvalidComponent):
        ComponentMeta(attrs=["not", "a", "dict"])  # type: ignore[arg-type]


def test_componentmeta_allows_unbounded_period():
    m = ComponentMeta(periods=(16, float("inf")))
    assert m.periods == (16.0, float("inf"))


def test_decompositionmeta_defaults_and_sampling():
    m = DecompositionMeta(levels=6, sampling=SamplingSpec(start=1947.0, frequency=4))
    assert m.family == "haar"
    assert m.residual_name == "long"
    assert m.attrs == {}


def test_decompositionmeta_rejects_invalid():
    with pytest.raises(InvalidDecomposition):
        DecompositionMeta(levels=0)
    with pytest.raises(InvalidDecomposition):
        DecompositionMeta(residual_name=" ")
    with pytest.raises(InvalidDecomposition):
        DecompositionMeta(sampling=(1947.0, 4))  # type: ignore[arg-type]
    with pytest.raises(InvalidDecomposition):
        DecompositionMeta(attrs=123)  # type: ignore[arg-type]


def test_numpy_integer_levels_accepted():
    meta = DecompositionMeta(levels=np.int64(2))
    assert meta.levels == 2
    assert type(meta.levels) is int
    assert ComponentMeta(levels=(np.int32(1), np.int64(2))).levels == (1, 2)
