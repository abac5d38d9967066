# test/test_filters.py
import numpy as np
import pytest

from cyclewave.core import InvalidInput
from cyclewave.modwt.filters import (
    FilterPair,
    equivalent_filters,
    get_filter_pair,
    haar_filter_pair,
    level_filter_pair,
    upsample,
)

R = 1.0 / np.sqrt(2.0)


def test_haar_pair_values_and_invariants():
    pair = haar_filter_pair()
    assert pair.length == 2
    assert np.allclose(pair.scaling, [R, R])
    assert np.allclose(pair.wavelet, [R, -R])
    assert np.isclose(np.sum(pair.scaling ** 2), 1.0)
    assert np.isclose(np.sum(pair.wavelet ** 2), 1.0)
    assert np.isclose(np.dot(pair.scaling, pair.wavelet), 0.0)


def test_family_lookup_is_case_insensitive_with_aliases():
    for name in ("haar", "HAAR", "d2", "db1"):
        assert np.allclose(get_filter_pair(name).wavelet, [R, -R])


def test_unknown_family_rejected():
    with pytest.raises(InvalidInput):
        get_filter_pair("la8")
    with pytest.raises(InvalidInput):
        get_filter_pair(None)  # type: ignore[arg-type]


def test_filter_pair_validation():
    with pytest.raises(InvalidInput):
        FilterPair(scaling=[1.0, 1.0], wavelet=[1.0, -1.0])  # not unit energy
    with pytest.raises(InvalidInput):
        FilterPair(scaling=[1.0, 0.0], wavelet=[1.0, 0.0])  # not orthogonal
    with pytest.raises(InvalidInput):
        FilterPair(scaling=[R, R], wavelet=[1.0])  # length mismatch


def test_filter_pair_taps_are_read_only():
    pair = haar_filter_pair()
    with pytest.raises(ValueError):
        pair.scaling[0] = 0.0


def test_upsample_inserts_dyadic_zeros():
    assert np.allclose(upsample([1.0, 2.0], 1), [1.0, 2.0])
    assert np.allclose(upsample([1.0, 2.0], 2), [1.0, 0.0, 2.0])
    assert np.allclose(upsample([1.0, 2.0], 3), [1.0, 0.0, 0.0, 0.0, 2.0])
    assert upsample([1.0, 2.0], 5).size == 2 ** 4 + 1


@pytest.mark.parametrize("level", [0, -1, 1.5, True])
def test_upsample_rejects_bad_level(level):
    with pytest.raises(InvalidInput):
        upsample([1.0, 1.0], level)


def test_level_filter_pair_keeps_invariants():
    pair = level_filter_pair(3)
    assert pair.level == 3
    assert pair.length == 5
    assert np.isclose(np.sum(pair.wavelet ** 2), 1.0)
    assert np.isclose(np.dot(pair.scaling, pair.wavelet), 0.0)


def test_equivalent_filters_have_width_two_to_the_level():
    g1, h1 = equivalent_filters(1)
    assert np.allclose(g1, [0.5, 0.5])
    assert np.allclose(h1, [0.5, -0.5])

    g2, h2 = equivalent_filters(2)
    assert np.allclose(g2, [0.25] * 4)
    assert np.allclose(h2, [0.25, 0.25, -0.25, -0.25])

    for j in range(1, 7):
        g, h = equivalent_filters(j)
        assert g.size == h.size == 2 ** j
        # MODWT filters at level j carry energy 1 / 2**j
        assert np.isclose(np.sum(h ** 2), 2.0 ** -j)
        assert np.isclose(np.sum(g), 1.0)
        assert np.isclose(np.sum(h), 0.0)
