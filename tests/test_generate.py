import sys
import os
import itertools

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votestats.describe
import votestats.generate
import votestats.sample


def test_honest_baker():
    sample = votestats.generate.honest_process(
        1000, 30, random_state=1711
    ).take(100000)
    assert len(sample) == 100000
    assert abs(votestats.describe.mean(sample) - 1000) < 1
    assert abs(votestats.describe.standard_deviation(sample) - 30) < 2


def test_dishonest_baker():
    sample = votestats.generate.dishonest_process(
        950, 30, 13, random_state=1711
    ).take(100000)
    mean = votestats.describe.mean(sample)
    assert mean > 950
    # expected maximum of 13 standard normal draws is about 1.67
    assert 990 < mean < 1010
    assert votestats.describe.skewness(sample) > .1
    assert votestats.describe.skewness(sample) < 1


def test_honest_baker_symmetric():
    sample = votestats.generate.honest_process(
        1000, 30, random_state=1711
    ).take(100000)
    assert abs(votestats.describe.skewness(sample)) < .05


def test_dishonest_single_is_honest():
    honest = votestats.generate.honest_process(950, 30, random_state=5)
    dishonest = votestats.generate.dishonest_process(
        950, 30, 1, random_state=5
    )
    assert dishonest.take(10) == honest.take(10)


def test_dishonest_is_max_of_groups():
    honest = votestats.generate.honest_process(950, 30, random_state=5)
    expected = [
        max(group) for group in zip(*[iter(honest.take(13 * 5))] * 13)
    ]
    dishonest = votestats.generate.dishonest_process(
        950, 30, random_state=5
    )
    assert list(dishonest.take(5)) == expected


@pytest.mark.parametrize('group_size', [0, -1, 2.5])
def test_dishonest_invalid_group(group_size):
    with pytest.raises(votestats.sample.InvalidConfigurationError):
        votestats.generate.dishonest_process(950, 30, group_size)


def test_negative_deviation():
    with pytest.raises(votestats.sample.InvalidConfigurationError):
        votestats.generate.honest_process(1000, -30)


def test_seeded_replay():
    process = votestats.generate.honest_process(0, 1, random_state=3)
    assert process.take(5) == process.take(5)


def test_unseeded_independent():
    first = votestats.generate.honest_process(0, 1).take(5)
    second = votestats.generate.honest_process(0, 1).take(5)
    assert first != second


def test_lazy_infinite():
    process = votestats.generate.dishonest_process(950, 30, random_state=9)
    prefix = list(itertools.islice(process, 3))
    assert len(prefix) == 3


def test_take_zero():
    assert votestats.generate.honest_process(0, 1).take(0) == ()


def test_take_invalid():
    with pytest.raises(votestats.sample.InvalidConfigurationError):
        votestats.generate.honest_process(0, 1).take(-1)


def test_take_returns_sample():
    sample = votestats.generate.honest_process(0, 1).take(3)
    assert isinstance(sample, votestats.sample.Sample)


def test_group_reducer_finite():
    reducer = votestats.generate.GroupReducer([1, 5, 2, 8, 3], 2, max)
    assert list(reducer) == [5, 8]


def test_group_reducer_mean():
    reducer = votestats.generate.GroupReducer(
        [1, 2, 3, 5, 7, 9], 3, votestats.describe.mean
    )
    assert list(reducer) == [2, 7]


def test_group_reducer_composes():
    inner = votestats.generate.GroupReducer(range(12), 2, max)
    outer = votestats.generate.GroupReducer(inner, 3, min)
    assert list(outer) == [1, 7]


def test_means_process():
    sample = votestats.generate.means_process(10, random_state=1711).take(
        10000
    )
    assert abs(votestats.describe.mean(sample) - .5) < .01
    assert abs(
        votestats.describe.standard_deviation(sample) - (1 / 120) ** .5
    ) < .005


def test_distribution_params():
    sample = votestats.generate.DistributionProcess(
        'uniform', random_state=1, a=5, b=6
    ).take(100)
    assert min(sample) >= 5
    assert max(sample) <= 6


def test_distribution_defaults():
    process = votestats.generate.DistributionProcess('triangular')
    assert process.params == {'low': 0, 'high': 1, 'mode': .5}


@pytest.mark.parametrize('name', [
    'cauchy', '_randbelow', 'seed', 'getstate', 'choice', 'shuffle',
])
def test_distribution_unknown(name):
    with pytest.raises(ValueError):
        votestats.generate.DistributionProcess(name)


@pytest.mark.parametrize('name, params', [
    ('random', {}),
    ('lognormvariate', {'mu': 0, 'sigma': 1}),
    ('paretovariate', {'alpha': 3}),
])
def test_distribution_float_methods(name, params):
    sample = votestats.generate.DistributionProcess(
        name, random_state=1711, **params
    ).take(20)
    assert len(sample) == 20
    assert all(isinstance(value, float) for value in sample)
