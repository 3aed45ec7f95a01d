"""A commandline tool for quick description of election data distributions.

Summarizes a numeric column of an election results CSV file, or a sequence
drawn from the honest or dishonest baker process, by its descriptive
statistics and its binned probability mass function.
"""

import argparse
import io
import logging
import sys
import warnings
from numbers import Real
from typing import Dict, Optional

import votestats.binning
import votestats.dataset
import votestats.describe
import votestats.generate
from votestats.sample import Sample, StatisticsError

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='CSV file to load the election table from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the election table from standard input',
)
argparser.add_argument(
    '-c', '--column',
    help='name of the numeric column to describe',
)
argparser.add_argument(
    '-k', '--dataset-kind',
    choices=[kind.value for kind in votestats.dataset.DatasetKind],
    help=(
        'prepare the table as this dataset first, adding the victors,'
        ' victors_share and turnout columns'
    ),
)
argparser.add_argument(
    '-D', '--delimiter',
    default=',',
    help='field delimiter of the CSV input',
)
argparser.add_argument(
    '-s', '--simulate',
    choices=['honest', 'dishonest'],
    help='describe a simulated baker sequence instead of a file',
)
argparser.add_argument(
    '--mean',
    type=float,
    default=1000,
    help='mean of the simulated draws',
)
argparser.add_argument(
    '--sd',
    type=float,
    default=30,
    help='standard deviation of the simulated draws',
)
argparser.add_argument(
    '-g', '--group-size',
    type=int,
    default=votestats.generate.DEFAULT_GROUP_SIZE,
    help='number of draws the dishonest baker selects the maximum from',
)
argparser.add_argument(
    '-N', '--n-values',
    type=int,
    default=10000,
    help='number of values to simulate',
)
argparser.add_argument(
    '-r', '--random-state',
    type=int,
    help='seed for the simulation',
)
argparser.add_argument(
    '-n', '--n-bins',
    type=int,
    default=votestats.binning.DEFAULT_N_BINS,
    help='number of bins for the probability mass function',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages',
)


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         column: Optional[str] = None,
         dataset_kind: Optional[str] = None,
         delimiter: str = ',',
         simulate: Optional[str] = None,
         mean: float = 1000,
         sd: float = 30,
         group_size: int = votestats.generate.DEFAULT_GROUP_SIZE,
         n_values: int = 10000,
         random_state: Optional[int] = None,
         n_bins: int = votestats.binning.DEFAULT_N_BINS,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if simulate:
        sample = simulate_sample(
            simulate, mean, sd, group_size, n_values, random_state
        )
        label = f'{simulate} baker'
    else:
        if use_stdin:
            input_file = sys.stdin
        if column is None:
            raise ValueError('need a column name to describe')
        sample = load_sample(input_file, column, dataset_kind, delimiter)
        label = column
    if not sample:
        warnings.warn('empty sample: nothing to describe, terminating')
        return
    show_summary(label, votestats.describe.summarize(sample))
    try:
        pmf = votestats.binning.as_pmf(
            votestats.binning.bin_indices(sample, n_bins)
        )
    except StatisticsError as err:
        logging.warning('cannot bin %s: %s', label, err)
    else:
        show_pmf(pmf)


def load_sample(input_file: io.TextIOBase,
                column: str,
                dataset_kind: Optional[str] = None,
                delimiter: str = ',',
                ) -> Sample:
    """Load the column from the CSV file, preparing the dataset if needed.

    Rows where the column is not a number are skipped with a warning.
    """
    table = votestats.dataset.load(input_file, delimiter=delimiter)
    if dataset_kind is not None:
        table = votestats.dataset.prepare(dataset_kind, table)
    values = table.column(column)
    numbers = [
        value for value in values
        if isinstance(value, Real) and not isinstance(value, bool)
    ]
    if len(numbers) < len(values):
        logging.warning('skipping %d non-numeric values of %s',
                        len(values) - len(numbers), column)
    return Sample(numbers)


def simulate_sample(process: str,
                    mean: float,
                    sd: float,
                    group_size: int,
                    n_values: int,
                    random_state: Optional[int] = None,
                    ) -> Sample:
    """Draw a sample from the honest or dishonest baker process."""
    if process == 'honest':
        gen = votestats.generate.honest_process(mean, sd, random_state)
    elif process == 'dishonest':
        gen = votestats.generate.dishonest_process(
            mean, sd, group_size, random_state
        )
    else:
        raise ValueError(f'unknown process: {process}')
    logging.info('drawing %d values from the %s baker', n_values, process)
    return gen.take(n_values)


def show_summary(label: str, summary: votestats.describe.Summary) -> None:
    print(f'Described {summary.count} values of {label}')
    rows = [
        ('mean', summary.mean),
        ('median', summary.median),
        ('std. deviation', summary.standard_deviation),
        ('skewness', summary.skewness),
    ]
    for name, value in zip(
        ('minimum', 'lower quartile', 'middle quantile',
         'upper quartile', 'maximum'),
        summary.five_number_summary
    ):
        rows.append((name, value))
    n_just_chars = len(max((name for name, _ in rows), key=len))
    for name, value in rows:
        print(name.ljust(n_just_chars), ' ', _format_number(value))


def show_pmf(pmf: Dict[int, Real]) -> None:
    print()
    print('Bin probabilities:')
    for bin_i, prob in pmf.items():
        print(str(bin_i).rjust(4), ' ', f'{float(prob):.4f}')


def _format_number(value: Optional[Real]) -> str:
    if value is None:
        return 'undefined'
    return f'{float(value):g}'


if __name__ == '__main__':
    args = argparser.parse_args()
    if not args.simulate and not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        main(**vars(args))
