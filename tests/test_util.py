import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votestats.util


@pytest.mark.parametrize('numerator, denominator, expected', [
    (1, 0, 0),
    (6, 3, 2),
    (1, 4, .25),
    (0, 0, 0),
    (30958, 0., 0),
])
def test_safe_divide(numerator, denominator, expected):
    assert votestats.util.safe_divide(numerator, denominator) == expected


def test_safe_divide_fallback():
    assert votestats.util.safe_divide(1, 0, fallback=None) is None
    assert votestats.util.safe_divide(1, 0, fallback=-1) == -1


def test_divide_strict():
    with pytest.raises(ZeroDivisionError):
        votestats.util.divide(1, 0)


def test_divide_exact():
    assert votestats.util.divide(1, 3) == Fraction(1, 3)
    assert votestats.util.divide(Fraction(1, 2), 2) == Fraction(1, 4)
    assert votestats.util.divide(1., 4) == .25


def test_exact_sum():
    assert votestats.util.exact_sum([Fraction(1, 3)] * 3) == 1
    assert votestats.util.exact_sum([.1] * 10) == 1.


@pytest.mark.parametrize('values, exact', [
    ([1, 2, 3], True),
    ([1, Fraction(1, 2)], True),
    ([1, 2.], False),
    ([], True),
])
def test_is_exact(values, exact):
    assert votestats.util.is_exact(values) == exact
