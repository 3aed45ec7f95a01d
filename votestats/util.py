'''Various utility functions for other modules of Votestats.

There should normally be no need to use these functions directly, except for
:func:`safe_divide`, which is meant for computing derived ratios in election
tables.
'''

import math
from fractions import Fraction
from typing import Iterable, Union
from numbers import Number, Real


EXACT_TYPES = (int, Fraction)


def is_exact(values: Iterable[Real]) -> bool:
    '''Return True if all values can be combined without rounding.

    Integers and fractions are exact; a single float or decimal makes the
    whole computation inexact.
    '''
    return all(isinstance(value, EXACT_TYPES) for value in values)


def exact_sum(values: Iterable[Real]) -> Union[int, Fraction, float]:
    '''Sum the values exactly if they are exact, using fsum otherwise.'''
    values = list(values)
    if is_exact(values):
        return sum(values)
    else:
        return math.fsum(values)


def divide(numerator: Real, denominator: Real) -> Union[Fraction, float]:
    '''Divide, keeping the result a fraction if both operands are exact.'''
    if isinstance(numerator, EXACT_TYPES) \
            and isinstance(denominator, EXACT_TYPES):
        return Fraction(numerator, denominator)
    else:
        return numerator / denominator


def safe_divide(numerator: Number,
                denominator: Number,
                fallback: Number = 0,
                ) -> Number:
    '''Divide the numbers, returning a fallback for a zero denominator.

    Election tables contain precincts with no eligible voters or no valid
    ballots; their turnout or vote share is reported as the fallback instead
    of failing the whole column. The statistics themselves never use this.

    Unlike :func:`divide`, this always performs true division, since ratios
    with unrelated denominators make exact fractions grow without bound when
    summed over a whole column.

    :param numerator: The dividend.
    :param denominator: The divisor.
    :param fallback: The value to return when the divisor is zero.
    '''
    if denominator == 0:
        return fallback
    return numerator / denominator
