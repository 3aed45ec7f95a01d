"""Descriptive statistics of a sample.

The two most basic statistics of a sample are its mean and variance; the
standard deviation expresses the variance in the units of the sample values
(people rather than people squared for electorate sizes) and the skewness
shows whether the values lean towards one side of the mean.

All functions here compute the *population* statistics (dividing by the
sample size, not by the sample size minus one). If all sample values are
integers or fractions, the mean and variance are exact fractions; otherwise,
they are floats accumulated with :func:`math.fsum`. The standard deviation
and skewness are always computed in floating point.
"""

import dataclasses
import math
from fractions import Fraction
from numbers import Real
from typing import Iterable, List, Optional, Union

import votestats.quantile
import votestats.util
from votestats.sample import as_sample, DegenerateInputError, Sample


def mean(sample: Iterable[Real]) -> Union[Fraction, float]:
    """Compute the arithmetic mean of the sample.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    sample = as_sample(sample, 'mean')
    return votestats.util.divide(votestats.util.exact_sum(sample), len(sample))


def variance(sample: Iterable[Real]) -> Union[Fraction, float]:
    """Compute the population variance of the sample.

    The variance is the mean of squared deviations from the mean, computed
    in two passes over the sample to avoid the cancellation of the
    sum-of-squares formula. Integer samples use that formula anyway since
    integer sums cannot cancel.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    sample = as_sample(sample, 'variance')
    if all(isinstance(value, int) for value in sample):
        n = len(sample)
        total = sum(sample)
        return Fraction(n * sum(value * value for value in sample)
                        - total * total, n * n)
    center = mean(sample)
    return mean((value - center) ** 2 for value in sample)


def standard_deviation(sample: Iterable[Real]) -> float:
    """Compute the population standard deviation of the sample.

    Computed in floating point regardless of the sample value types.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    sample = as_sample(sample, 'standard deviation')
    return math.sqrt(_float_moment(sample, 2))


def skewness(sample: Iterable[Real]) -> float:
    """Compute the skewness (third standardized moment) of the sample.

    Positive skewness means a longer right tail, such as the weights of
    loaves sold by a baker who keeps the lighter ones for himself.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    :raises DegenerateInputError: If all sample values are equal.
    """
    sample = as_sample(sample, 'skewness')
    var = _float_moment(sample, 2)
    if var == 0 or min(sample) == max(sample):
        raise DegenerateInputError(
            'skewness undefined for a sample with zero standard deviation'
        )
    return _float_moment(sample, 3) / var ** 1.5


def _float_moment(sample: Sample, order: int) -> float:
    center = math.fsum(float(value) for value in sample) / len(sample)
    return math.fsum(
        (float(value) - center) ** order for value in sample
    ) / len(sample)


@dataclasses.dataclass(frozen=True)
class Summary:
    """Descriptive statistics of a single sample."""
    count: int
    mean: Real
    median: Real
    standard_deviation: float
    skewness: Optional[float]
    five_number_summary: List[Real]


def summarize(sample: Iterable[Real]) -> Summary:
    """Compute all descriptive statistics of the sample at once.

    The skewness is None for a sample whose values are all equal.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    """
    sample = as_sample(sample, 'summary')
    try:
        skew = skewness(sample)
    except DegenerateInputError:
        skew = None
    return Summary(
        count=len(sample),
        mean=mean(sample),
        median=votestats.quantile.median(sample),
        standard_deviation=standard_deviation(sample),
        skewness=skew,
        five_number_summary=votestats.quantile.five_number_summary(sample),
    )
