"""Equal-width binning and probability mass functions.

Binning divides the range of a sample into a number of consecutive,
equally-sized bins to give a broad sense of the structure of continuous data;
counting the members of each bin yields a histogram, and dividing the counts
by the sample size yields a probability mass function (PMF) that can be
compared across samples of very different sizes.

The bins are always laid over the sample's *own* range, so bin ``k`` out of
``n_bins`` denotes the relative position ``k / n_bins`` between the sample
minimum and maximum rather than a fixed value. See :mod:`votestats.compare`
for how this is used to compare distribution shapes.
"""

import collections
from fractions import Fraction
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, List

from votestats.sample import as_sample, BoundsChecker, DegenerateRangeError, \
    EmptyInputError


DEFAULT_N_BINS: int = 40

N_BINS_CHECKER = BoundsChecker((1, None), value_name='bin count',
                               integral=True)


def bin_indices(sample: Iterable[Real], n_bins: int = DEFAULT_N_BINS
                ) -> List[int]:
    """Assign each sample value to one of equal-width bins over its range.

    The bin index of a value ``x`` is
    ``floor((x - min) / (max - min) * n_bins)``, with the maximum itself
    placed into the last bin (``n_bins - 1``) so that all indices are valid.
    The division is done by flooring so that integer and fractional samples
    are binned without rounding errors.

    :param sample: Real numbers.
    :param n_bins: Number of bins to divide the sample range into.
    :returns: Bin indices in the order of the sample values.
    :raises InvalidConfigurationError: If n_bins is not a positive integer.
    :raises EmptyInputError: If the sample is empty.
    :raises DegenerateRangeError: If all sample values are equal, since there
        is no equal-width partition of a zero-width range.
    """
    N_BINS_CHECKER.check(n_bins)
    sample = as_sample(sample, 'bins')
    min_x = min(sample)
    range_x = max(sample) - min_x
    if range_x == 0:
        raise DegenerateRangeError(min_x)
    last_bin = n_bins - 1
    return [
        min(int((x - min_x) * n_bins // range_x), last_bin)
        for x in sample
    ]


def frequencies(items: Iterable[Hashable]) -> Dict[Any, int]:
    """Count the occurrences of each distinct item.

    Only the items that occur at least once are present in the output.
    """
    return dict(collections.Counter(items))


def as_pmf(bins: Iterable[Hashable]) -> Dict[Any, Fraction]:
    """Convert bin indices to a probability mass function.

    The probabilities are exact fractions that sum to one. The output is
    ordered by bin index.

    :param bins: Bin indices (or other sortable discrete outcomes) of
        a sample, one per sample member.
    :raises EmptyInputError: If there are no bin indices.
    """
    histogram = frequencies(bins)
    if not histogram:
        raise EmptyInputError('probability mass function')
    total = sum(histogram.values())
    return {
        key: Fraction(count, total)
        for key, count in sorted(histogram.items())
    }
