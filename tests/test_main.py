import sys
import os
import io

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votestats.__main__


UK_CSV = '''Constituency Name,Election Year,Electorate,Votes,Con,LD
Aberavon,2010,50838,30958,4411,5034
Aberconwy,2010,44593,29966,10734,5786
Aldershot,2010,71469,45384,21203,15477
Buckingham,2010,74996,49709,,
'''


def test_describe_column(capsys):
    votestats.__main__.main(
        input_file=io.StringIO(UK_CSV),
        column='Electorate',
        n_bins=2,
        quiet=True,
    )
    out = capsys.readouterr().out
    assert 'Described 4 values of Electorate' in out
    assert 'Bin probabilities' in out


def test_describe_prepared(capsys):
    votestats.__main__.main(
        input_file=io.StringIO(UK_CSV),
        column='turnout',
        dataset_kind='uk',
        quiet=True,
    )
    out = capsys.readouterr().out
    assert 'Described 3 values of turnout' in out


def test_skip_non_numeric():
    sample = votestats.__main__.load_sample(io.StringIO(UK_CSV), 'Con')
    assert sample == (4411, 10734, 21203)


def test_simulate(capsys):
    votestats.__main__.main(
        simulate='dishonest',
        n_values=500,
        random_state=1711,
        n_bins=10,
        quiet=True,
    )
    out = capsys.readouterr().out
    assert 'Described 500 values of dishonest baker' in out
    assert 'skewness' in out


def test_simulate_unknown():
    with pytest.raises(ValueError):
        votestats.__main__.simulate_sample('fair', 1000, 30, 13, 10)


def test_constant_column(capsys):
    votestats.__main__.main(
        input_file=io.StringIO('a\n5\n5\n'),
        column='a',
        quiet=True,
    )
    out = capsys.readouterr().out
    assert 'undefined' in out
    assert 'Bin probabilities' not in out


def test_empty_column():
    with pytest.warns(UserWarning):
        votestats.__main__.main(
            input_file=io.StringIO('a,b\n'),
            column='a',
            quiet=True,
        )


def test_need_column():
    with pytest.raises(ValueError):
        votestats.__main__.main(input_file=io.StringIO(UK_CSV), quiet=True)
