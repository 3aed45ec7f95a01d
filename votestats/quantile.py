"""Quantile estimation.

Two estimators of the center of a sample coexist here and they are not
interchangeable:

-   :func:`quantile` uses the *nearest rank* method, selecting an element of
    the sorted sample without interpolation. ``quantile(sample, .5)`` is thus
    always a member of the sample.
-   :func:`median` averages the two middle elements of an even-sized sample.

For odd-sized samples both give the same value; for even-sized samples they
may differ. The five-number summary is based on :func:`quantile`.
"""

import math
from numbers import Real
from typing import Iterable, List, Tuple

import votestats.util
from votestats.sample import as_sample, check_quantile


QUARTILES: Tuple[Real, ...] = (0, .25, .5, .75, 1)


def quantile(sample: Iterable[Real], q: Real) -> Real:
    """Estimate the q-th quantile of the sample by its nearest rank.

    The rank of the selected element in the ascending sample is
    ``floor((n - 1) * q + 0.5)``, so the zeroth quantile is the minimum and
    the first quantile is the maximum.

    :param sample: Real numbers.
    :param q: The quantile to estimate, between 0 and 1 inclusive.
    :raises InvalidQuantileError: If q is outside the unit interval.
    :raises EmptyInputError: If the sample is empty.
    """
    check_quantile(q)
    ordered = sorted(as_sample(sample, 'quantile'))
    return ordered[_nearest_rank(len(ordered), q)]


def _nearest_rank(n: int, q: Real) -> int:
    rank = math.floor((n - 1) * q + .5)
    return min(max(rank, 0), n - 1)


def median(sample: Iterable[Real]) -> Real:
    """Compute the median of the sample.

    For an odd number of values, this is the middle value of the sorted
    sample; for an even number of values, the mean of the two middle ones.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    ordered = sorted(as_sample(sample, 'median'))
    mid = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[mid]
    else:
        return votestats.util.divide(ordered[mid - 1] + ordered[mid], 2)


def five_number_summary(sample: Iterable[Real]) -> List[Real]:
    """Compute the minimum, lower quartile, median, upper quartile and maximum.

    All five values are nearest-rank quantiles (see :func:`quantile`), so the
    middle value may differ from :func:`median` for even-sized samples.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    ordered = sorted(as_sample(sample, 'five-number summary'))
    return [ordered[_nearest_rank(len(ordered), q)] for q in QUARTILES]
