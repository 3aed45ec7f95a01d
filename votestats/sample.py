'''Sample type, statistical error types and parameter checks.

A sample is a finite collection of real numbers, such as the electorate
sizes or turnouts of all constituencies in an election. Its order carries no
meaning for any of the statistics computed in this package, but is preserved
so that per-value results (such as bin indices) can be matched back to the
input.

All estimators accept any iterable of real numbers and coerce it to a
:class:`Sample` first. If the input cannot be processed, they raise a
subclass of :class:`StatisticsError`:

-   :class:`EmptyInputError` for a sample with no values,
-   :class:`InvalidQuantileError` for a quantile outside the unit interval,
-   :class:`DegenerateRangeError` when binning a sample with zero range,
-   :class:`DegenerateInputError` when the skewness of a sample with zero
    spread is requested,
-   :class:`InvalidConfigurationError` for a bin count, group size or other
    parameter outside its permitted bounds.

None of these are recovered from internally; the caller decides what the
fallback should be.
'''

import abc
import math
from numbers import Number, Real
from typing import Any, Iterable, Optional, Tuple


class StatisticsError(Exception, metaclass=abc.ABCMeta):
    '''A statistic cannot be computed for the given input.'''
    pass


class EmptyInputError(StatisticsError):
    '''An estimator received a sample with no values.

    :param what: Name of the estimator that was attempted.
    '''
    def __init__(self, what: str = 'statistic'):
        self.what = what
        super().__init__(f'cannot compute {what} of an empty sample')


class InvalidQuantileError(StatisticsError):
    '''A quantile was requested outside the unit interval.

    :param q: The invalid quantile.
    '''
    def __init__(self, q: Any):
        self.q = q
        super().__init__(f'invalid quantile: {q!r}, must be in [0, 1]')


class DegenerateRangeError(StatisticsError):
    '''A sample with zero range cannot be split into equal-width bins.

    :param value: The single value all sample members are equal to.
    '''
    def __init__(self, value: Number):
        self.value = value
        super().__init__(
            f'cannot bin a sample with zero range (all values are {value})'
        )


class DegenerateInputError(StatisticsError):
    '''A statistic is undefined for a sample with zero standard deviation.'''
    pass


class InvalidConfigurationError(StatisticsError):
    '''A parameter is outside its permitted range.

    :param value: The invalid parameter value.
    :param min_value: Minimum value permissible in the context.
    :param max_value: Maximum value permissible in the context.
    :param value_name: Name of the parameter.
    '''
    def __init__(self,
                 value: Any,
                 min_value: Optional[Number] = None,
                 max_value: Optional[Number] = None,
                 value_name: str = 'parameter',
                 ):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        message = f'invalid {value_name}: {value!r}'
        parts = []
        if min_value is not None:
            parts.append(f'>={min_value}')
        if max_value is not None:
            parts.append(f'<={max_value}')
        if parts:
            message += ', must be ' + ' and '.join(parts)
        super().__init__(message)


class Sample(tuple):
    '''An immutable ordered collection of real numbers.

    Constructed from any iterable of real numbers; booleans, strings,
    missing values (None) and non-finite floats (NaN and infinities) are
    rejected so that uncleaned table columns do not slip into the statistics
    unnoticed.

    :param values: The numbers forming the sample.
    :raises TypeError: If any of the values is not a finite real number.
    '''
    def __new__(cls, values: Iterable[Real] = ()):
        if isinstance(values, cls):
            return values
        values = tuple(values)
        for value in values:
            if isinstance(value, bool) or not isinstance(value, Real) \
                    or not math.isfinite(value):
                raise TypeError(
                    f'sample values must be finite real numbers, got {value!r}'
                )
        return super().__new__(cls, values)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self)!r})'

    def nonempty(self, what: str = 'statistic') -> 'Sample':
        '''Return the sample itself if it has any values.

        :param what: Name of the statistic to report in the error message.
        :raises EmptyInputError: If the sample is empty.
        '''
        if not self:
            raise EmptyInputError(what)
        return self

    def sorted(self) -> 'Sample':
        '''Return an ascending copy of the sample.'''
        return self.__class__(sorted(self))


def as_sample(values: Iterable[Real], what: str = 'statistic') -> Sample:
    '''Coerce the values to a sample and reject it if it is empty.

    :param values: Any iterable of real numbers.
    :param what: Name of the statistic to report if the sample is empty.
    :raises EmptyInputError: If there are no values.
    '''
    return Sample(values).nonempty(what)


BoundsTupleType = Tuple[Optional[Number], Optional[Number]]


class BoundsChecker:
    '''A helper class to check if a parameter is in a specified range.

    :param bounds: A tuple with lower and upper bounds (inclusive) for the
        value to be checked. None means the respective bound is not checked.
    :param value_name: Name of the value to be checked (included in the error
        message).
    :param integral: Whether the value must be an integer.
    '''
    def __init__(self,
                 bounds: BoundsTupleType = (None, None),
                 value_name: str = 'parameter',
                 integral: bool = False,
                 ):
        self.min_value, self.max_value = bounds
        self.value_name = value_name
        self.integral = integral

    def is_valid(self, value: Any) -> bool:
        '''Return True if the value is a number within the given range.'''
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if self.integral and not isinstance(value, int):
            return False
        return (
            (self.min_value is None or value >= self.min_value)
            and (self.max_value is None or value <= self.max_value)
        )

    def check(self, value: Any) -> None:
        '''Check if the value is within the given range.

        :raises InvalidConfigurationError: If the value is outside the given
            range or not a number of the required kind.
        '''
        if not self.is_valid(value):
            raise InvalidConfigurationError(
                value, self.min_value, self.max_value, self.value_name
            )


def check_quantile(q: Any) -> None:
    '''Check that the quantile lies in the unit interval.

    :raises InvalidQuantileError: If it does not (NaN included).
    '''
    if isinstance(q, bool) or not isinstance(q, Real) or not 0 <= q <= 1:
        raise InvalidQuantileError(q)
