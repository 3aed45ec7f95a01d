import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votestats.quantile
import votestats.sample

VALUES = [5, 1, 9, 3, 7, 2, 8]


def test_quantile_extremes():
    assert votestats.quantile.quantile(VALUES, 0) == min(VALUES)
    assert votestats.quantile.quantile(VALUES, 1) == max(VALUES)


def test_quantile_monotonic():
    qs = [i / 40 for i in range(41)]
    results = [votestats.quantile.quantile(VALUES, q) for q in qs]
    assert results == sorted(results)


@pytest.mark.parametrize('q, expected', [
    (0, 10),
    (.1, 10),
    (.125, 20),
    (.25, 20),
    (Fraction(1, 2), 30),
    (.75, 40),
    (.874, 40),
    (.875, 50),
    (1, 50),
])
def test_quantile_nearest_rank(q, expected):
    assert votestats.quantile.quantile([50, 10, 40, 20, 30], q) == expected


def test_quantile_is_member():
    values = [.5, 1.5, 2.5, 10.]
    for q in (.1, .3, .5, .7, .9):
        assert votestats.quantile.quantile(values, q) in values


@pytest.mark.parametrize('q', [-.01, 1.5, float('nan')])
def test_quantile_invalid(q):
    with pytest.raises(votestats.sample.InvalidQuantileError):
        votestats.quantile.quantile(VALUES, q)


def test_quantile_empty():
    with pytest.raises(votestats.sample.EmptyInputError):
        votestats.quantile.quantile([], .5)


def test_quantile_invalid_before_empty():
    with pytest.raises(votestats.sample.InvalidQuantileError):
        votestats.quantile.quantile([], 2)


@pytest.mark.parametrize('values, expected', [
    ([1, 2, 3], 2),
    ([3, 1, 2], 2),
    ([1, 2, 3, 4], 2.5),
    ([4, 1, 3, 2], 2.5),
    ([7], 7),
    ([1., 2.], 1.5),
])
def test_median(values, expected):
    assert votestats.quantile.median(values) == expected


def test_median_empty():
    with pytest.raises(votestats.sample.EmptyInputError):
        votestats.quantile.median([])


def test_median_differs_from_middle_quantile():
    values = [1, 2, 3, 4]
    assert votestats.quantile.median(values) == Fraction(5, 2)
    assert votestats.quantile.quantile(values, .5) == 3


def test_median_matches_middle_quantile_odd():
    assert votestats.quantile.median(VALUES) == \
        votestats.quantile.quantile(VALUES, .5)


def test_five_number_summary():
    assert votestats.quantile.five_number_summary(range(1, 10)) == \
        [1, 3, 5, 7, 9]


def test_five_number_summary_uses_quantile():
    values = [1, 2, 3, 4]
    summary = votestats.quantile.five_number_summary(values)
    assert summary == [
        votestats.quantile.quantile(values, q)
        for q in votestats.quantile.QUARTILES
    ]
    assert summary[2] != votestats.quantile.median(values)


def test_five_number_summary_empty():
    with pytest.raises(votestats.sample.EmptyInputError):
        votestats.quantile.five_number_summary([])
