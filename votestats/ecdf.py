"""Cumulative distribution functions of samples.

The empirical cumulative distribution function (ECDF) of a sample gives, for
any value, the fraction of the sample at or below it. Plotting the ECDFs of
two samples over each other, or the ECDF of a sample over the CDF of the
normal distribution fitted to it, is a quick way to see how the distributions
differ. This module computes the data for such comparisons; it does not plot.
"""

import bisect
from fractions import Fraction
from numbers import Real
from statistics import NormalDist
from typing import Callable, Iterable, List, Tuple, Union

import votestats.describe
from votestats.sample import as_sample, DegenerateInputError


class EmpiricalCDF:
    '''The empirical cumulative distribution function of a sample.

    Holds a sorted copy of the sample; calling the object with a value
    returns the fraction of sample values less than or equal to it, found by
    binary search. The value need not be a member of the sample, so the
    function can be evaluated at points of other samples or theoretical
    distributions.

    The function is a right-continuous, non-decreasing step function that is
    zero below the sample minimum and one from the sample maximum upwards.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    '''
    def __init__(self, sample: Iterable[Real]):
        self.values = as_sample(sample, 'empirical CDF').sorted()

    def __call__(self, x: Real) -> Fraction:
        return Fraction(bisect.bisect_right(self.values, x), len(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} over {len(self)} values>'

    def points(self) -> List[Tuple[Real, Fraction]]:
        '''Return the steps of the function.

        :returns: Pairs of each distinct sample value and the cumulative
            probability at it, in ascending order.
        '''
        steps = []
        n = len(self.values)
        for i, value in enumerate(self.values):
            if i + 1 == n or self.values[i + 1] != value:
                steps.append((value, Fraction(i + 1, n)))
        return steps


def build_ecdf(sample: Iterable[Real]) -> EmpiricalCDF:
    '''Build the empirical cumulative distribution function of the sample.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    '''
    return EmpiricalCDF(sample)


def fitted_normal(sample: Iterable[Real]) -> NormalDist:
    '''Fit a normal distribution to the sample by its mean and deviation.

    :param sample: Real numbers.
    :raises EmptyInputError: If the sample is empty.
    :raises DegenerateInputError: If all sample values are equal.
    '''
    sample = as_sample(sample, 'normal fit')
    sd = votestats.describe.standard_deviation(sample)
    if sd == 0:
        raise DegenerateInputError(
            'cannot fit a normal distribution with zero standard deviation'
        )
    return NormalDist(float(votestats.describe.mean(sample)), sd)


def fitted_normal_cdf(sample: Iterable[Real]) -> Callable[[Real], float]:
    '''Return the CDF of the normal distribution fitted to the sample.

    Evaluate it at the sample values and compare to :func:`build_ecdf` to see
    how far the sample departs from normality.
    '''
    return fitted_normal(sample).cdf


def normal_qq(sample: Iterable[Real]
              ) -> List[Tuple[float, Union[Real, float]]]:
    '''Compute the points of a normal quantile-quantile plot.

    Pairs each sorted sample value with the standard normal quantile at its
    plotting position ``(i + 0.5) / n``. For a normally distributed sample,
    the points lie close to a straight line; a curved line betrays skew.

    :param sample: Real numbers.
    :returns: Pairs of theoretical (standard normal) quantile and sample
        value, in ascending order.
    :raises EmptyInputError: If the sample is empty.
    '''
    ordered = as_sample(sample, 'Q-Q points').sorted()
    n = len(ordered)
    standard = NormalDist()
    return [
        (standard.inv_cdf((i + .5) / n), value)
        for i, value in enumerate(ordered)
    ]
