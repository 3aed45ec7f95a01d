"""Generate random sequences for illustrating distribution shapes.

The processes here are infinite lazy sequences of random numbers: iterating
over a process yields as many values as the consumer asks for, and
:meth:`Process.take` collects a finite prefix into a sample. Every iteration
starts a fresh sequence with its own random number generator; if a
``random_state`` seed is given, each iteration replays the same sequence,
otherwise each one is independent.

Processes compose: :class:`GroupReducer` wraps another process and reduces
consecutive groups of its values into one. This is how the two bakers of
Poincaré's story are modeled:

-   The *honest baker* (:func:`honest_process`) sells loaves whose weights are
    normally distributed around the advertised weight.
-   The *dishonest baker* (:func:`dishonest_process`) bakes lighter loaves
    but hands the customer the heaviest of every batch. The weights he sells
    are right-skewed, with a mean above his baking mean.

The means of groups of uniform draws (:func:`means_process`) illustrate the
central limit theorem in the same way.
"""

import abc
import itertools
import logging
import random
from numbers import Number, Real
from typing import Any, Callable, Dict, FrozenSet, Iterable, Iterator, \
    Optional, Sequence, Union

import votestats.describe
from votestats.sample import BoundsChecker, Sample


DEFAULT_GROUP_SIZE: int = 13

GROUP_SIZE_CHECKER = BoundsChecker((1, None), value_name='group size',
                                   integral=True)
COUNT_CHECKER = BoundsChecker((0, None), value_name='value count',
                              integral=True)
DEVIATION_CHECKER = BoundsChecker((0, None), value_name='standard deviation')


class Process(metaclass=abc.ABCMeta):
    """An infinite lazy sequence of random values."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Real]:
        raise NotImplementedError

    def take(self, n: int) -> Sample:
        """Draw the first n values of a fresh sequence into a sample.

        :raises InvalidConfigurationError: If n is not a non-negative integer.
        """
        COUNT_CHECKER.check(n)
        return Sample(itertools.islice(self, n))


class DistributionProcess(Process):
    """Draw values independently from a statistical distribution.

    The distributions are taken from the methods of Python's
    :class:`random.Random` by referencing their names. Any keyword arguments
    are passed to the generating method; if none are given but the
    distribution needs them, defaults specified in this class are used
    (standard normal, unit uniform, etc.).

    :param distribution: The name of the distribution to use. Must be one of
        :attr:`DISTRIBUTIONS`, the methods of :class:`random.Random` that
        produce random floats.
    :param random_state: Seed for the random number generator. If None,
        every iteration is seeded from the system.
    :raises ValueError: If the distribution is not known.
    """
    DEFAULT_PARAMS: Dict[str, Dict[str, Number]] = {
        'gauss': {'mu': 0, 'sigma': 1},
        'normalvariate': {'mu': 0, 'sigma': 1},
        'uniform': {'a': 0, 'b': 1},
        'triangular': {'low': 0, 'high': 1, 'mode': .5},
        'betavariate': {'alpha': 2, 'beta': 2},
        'expovariate': {'lambd': 1},
    }
    DISTRIBUTIONS: FrozenSet[str] = frozenset(DEFAULT_PARAMS) | {
        'random',
        'lognormvariate',
        'gammavariate',
        'vonmisesvariate',
        'paretovariate',
        'weibullvariate',
    }

    def __init__(self,
                 distribution: str = 'gauss',
                 random_state: Optional[Any] = None,
                 **kwargs):
        if distribution not in self.DISTRIBUTIONS:
            raise ValueError(f'unknown distribution: {distribution}')
        if not kwargs and distribution in self.DEFAULT_PARAMS:
            kwargs = self.DEFAULT_PARAMS[distribution].copy()
        self.distribution = distribution
        self.params = kwargs
        self.random_state = random_state

    def __iter__(self) -> Iterator[float]:
        draw = getattr(random.Random(self.random_state), self.distribution)
        while True:
            yield draw(**self.params)

    def __repr__(self) -> str:
        params = ', '.join(f'{k}={v!r}' for k, v in self.params.items())
        return f'{self.__class__.__name__}({self.distribution!r}, {params})'


class GroupReducer(Process):
    """Reduce consecutive non-overlapping groups of values into single values.

    Pulls ``group_size`` values from the inner sequence and yields the result
    of the reducer applied to them, then continues with the next group.
    If the inner sequence is finite, an incomplete last group is dropped.

    :param inner: The sequence to reduce, usually another process.
    :param group_size: Number of inner values per output value.
    :param reducer: A function combining a sequence of values into one, such
        as ``max`` for an order statistic or a mean.
    :raises InvalidConfigurationError: If group_size is not a positive
        integer.
    """
    def __init__(self,
                 inner: Iterable[Real],
                 group_size: int,
                 reducer: Callable[[Sequence[Real]], Real] = max,
                 ):
        GROUP_SIZE_CHECKER.check(group_size)
        self.inner = inner
        self.group_size = group_size
        self.reducer = reducer

    def __iter__(self) -> Iterator[Real]:
        values = iter(self.inner)
        while True:
            group = tuple(itertools.islice(values, self.group_size))
            if len(group) < self.group_size:
                return
            yield self.reducer(group)

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}({self.inner!r}, '
                f'{self.group_size}, {self.reducer!r})')


def honest_process(mean: Real,
                   sd: Real,
                   random_state: Optional[Any] = None,
                   ) -> DistributionProcess:
    """Draw independent values from a normal distribution.

    :param mean: Mean of the distribution (the advertised loaf weight).
    :param sd: Standard deviation of the distribution.
    :param random_state: Seed for the random number generator.
    :raises InvalidConfigurationError: If sd is negative.
    """
    DEVIATION_CHECKER.check(sd)
    logging.debug('honest process with mean %g and deviation %g', mean, sd)
    return DistributionProcess('gauss', random_state, mu=mean, sigma=sd)


def dishonest_process(mean: Real,
                      sd: Real,
                      group_size: int = DEFAULT_GROUP_SIZE,
                      random_state: Optional[Any] = None,
                      ) -> Union[GroupReducer, DistributionProcess]:
    """Yield the maximum of each group of normally distributed draws.

    The output distribution is right-skewed and its mean exceeds the mean of
    the underlying draws. With a group size of one, this is the same as
    :func:`honest_process`.

    :param mean: Mean of the underlying draws (the actual baking weight).
    :param sd: Standard deviation of the underlying draws.
    :param group_size: Number of draws to select the maximum from.
    :param random_state: Seed for the random number generator.
    :raises InvalidConfigurationError: If group_size is not a positive
        integer or sd is negative.
    """
    GROUP_SIZE_CHECKER.check(group_size)
    honest = honest_process(mean, sd, random_state=random_state)
    if group_size == 1:
        return honest
    logging.debug('dishonest process selecting maximum of %d', group_size)
    return GroupReducer(honest, group_size, max)


def means_process(group_size: int = 10,
                  random_state: Optional[Any] = None,
                  ) -> GroupReducer:
    """Yield means of groups of uniformly distributed draws.

    By the central limit theorem, the output is approximately normal around
    one half even though the draws themselves are uniform.

    :param group_size: Number of draws to average.
    :param random_state: Seed for the random number generator.
    """
    return GroupReducer(
        DistributionProcess('uniform', random_state),
        group_size,
        votestats.describe.mean,
    )
