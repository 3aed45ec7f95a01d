"""Election result tables and their preparation for statistical analysis.

Election results are published as tables with one row per constituency or
precinct, with very different column names from country to country. This
module reads such tables from CSV files into :class:`ElectionTable` objects,
which support just enough manipulation to clean them (renaming, filtering
rows, adding derived columns) and to extract numeric columns as samples.

Preparation routines for the supported datasets are registered by
:class:`DatasetKind` and invoked through :func:`prepare`. All of them produce
the same derived columns so that the datasets can be compared:

-   ``victors`` - votes for the winning party (or parties),
-   ``victors_share`` - their share of the valid votes,
-   ``turnout`` - the share of the electorate that voted.

Every call returns a new table; nothing is cached at module level.
"""

import csv
import dataclasses
import enum
import io
import logging
import math
import operator
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, \
    TextIO, Tuple, Union

import votestats.util
from votestats.sample import Sample


RowType = Dict[str, Any]


@dataclasses.dataclass(frozen=True)
class ElectionTable:
    """A table of election results, one row per electoral unit.

    The table is not modified by any of its methods; they return new tables.

    :param columns: Column names in their order.
    :param rows: Rows as dictionaries keyed by column names.
    """
    columns: Tuple[str, ...]
    rows: Tuple[RowType, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> List[Any]:
        """Return the values of the given column.

        :raises KeyError: If there is no such column.
        """
        self._check_column(name)
        return [row[name] for row in self.rows]

    def sample(self, name: str) -> Sample:
        """Return the values of a numeric column as a sample.

        :raises KeyError: If there is no such column.
        :raises TypeError: If any of the values is not a number; filter such
            rows out with :meth:`where` first.
        """
        return Sample(self.column(name))

    def rename(self, mapping: Mapping[str, str]) -> 'ElectionTable':
        """Rename the columns according to the mapping.

        Columns not present in the mapping keep their names.
        """
        for name in mapping:
            self._check_column(name)
        return ElectionTable(
            columns=tuple(mapping.get(col, col) for col in self.columns),
            rows=tuple(
                {mapping.get(col, col): val for col, val in row.items()}
                for row in self.rows
            ),
        )

    def where(self, predicate: Callable[[RowType], bool]) -> 'ElectionTable':
        """Keep only the rows for which the predicate is true."""
        kept = tuple(row for row in self.rows if predicate(row))
        logging.info('kept %d of %d rows', len(kept), len(self.rows))
        return dataclasses.replace(self, rows=kept)

    def derive(self,
               name: str,
               sources: Sequence[str],
               function: Callable[..., Any],
               ) -> 'ElectionTable':
        """Add a column computed from other columns in the same row.

        :param name: Name of the new column. An existing column of that name
            is replaced.
        :param sources: Names of the columns whose values are passed to the
            function, in this order.
        :param function: Computes the new value from the source values.
        """
        for source in sources:
            self._check_column(source)
        columns = self.columns
        if name not in columns:
            columns += (name, )
        return ElectionTable(
            columns=columns,
            rows=tuple(
                {**row, name: function(*(row[src] for src in sources))}
                for row in self.rows
            ),
        )

    def concat(self, other: 'ElectionTable') -> 'ElectionTable':
        """Append the rows of another table with the same columns.

        :raises ValueError: If the columns of the tables differ.
        """
        if set(self.columns) != set(other.columns):
            raise ValueError('cannot concatenate tables with different'
                             f' columns: {self.columns} and {other.columns}')
        return dataclasses.replace(self, rows=self.rows + other.rows)

    def _check_column(self, name: str) -> None:
        if name not in self.columns:
            raise KeyError(f'unknown column: {name!r}')


def load(csv_file: Union[TextIO, Iterable[str]],
         delimiter: str = ',',
         ) -> ElectionTable:
    """Read an election table from a CSV file with a header row.

    Fields that look like integers or finite decimal numbers are converted
    to numbers; empty fields become None; other fields (including ``NaN``
    and ``inf``) are kept as strings.

    :param csv_file: An open text file or any iterable of lines.
    :param delimiter: The field delimiter.
    """
    reader = csv.reader(csv_file, delimiter=delimiter)
    try:
        header = tuple(col.strip() for col in next(reader))
    except StopIteration:
        return ElectionTable(columns=())
    rows = []
    for line in reader:
        if not line:
            continue
        if len(line) != len(header):
            raise ValueError(f'row {len(rows) + 1} has {len(line)} fields,'
                             f' expected {len(header)}')
        rows.append(dict(zip(header, (_parse_field(f) for f in line))))
    return ElectionTable(columns=header, rows=tuple(rows))


def loads(text: str, delimiter: str = ',') -> ElectionTable:
    """Read an election table from CSV text with a header row."""
    return load(io.StringIO(text, newline=''), delimiter=delimiter)


def _parse_field(field: str) -> Union[int, float, str, None]:
    field = field.strip()
    if not field:
        return None
    try:
        return int(field)
    except ValueError:
        pass
    try:
        number = float(field)
    except ValueError:
        return field
    # NaN and infinity spellings are labels, not measurements
    return number if math.isfinite(number) else field


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class DatasetKind(enum.Enum):
    """Election datasets with known structure."""
    UK_2010 = 'uk'
    RUSSIA_2011 = 'ru'
    SLOVAKIA_2016 = 'sk'


def prepare_uk(table: ElectionTable) -> ElectionTable:
    """Prepare the results of the 2010 United Kingdom general election.

    Removes the summary total row (the one with no election year) and the
    constituencies where the Conservatives or the Liberal Democrats did not
    field a candidate. The victors are the two coalition parties.
    """
    return (
        table
        .where(lambda row: row['Election Year'] is not None)
        .where(lambda row: _is_number(row['Con']) and _is_number(row['LD']))
        .derive('victors', ['Con', 'LD'], operator.add)
        .derive('victors_share', ['victors', 'Votes'],
                operator.truediv)
        .derive('turnout', ['Votes', 'Electorate'], operator.truediv)
    )


RUSSIA_COLUMNS = {
    'Number of voters included in voters list': 'electorate',
    'Number of valid ballots': 'valid_ballots',
    'United Russia': 'victors',
}


def prepare_russia(table: ElectionTable) -> ElectionTable:
    """Prepare the results of the 2011 Russian legislative election.

    The precinct results are usually published in several parts; concatenate
    them with :meth:`ElectionTable.concat` first.
    """
    return (
        table
        .rename(RUSSIA_COLUMNS)
        .derive('victors_share', ['victors', 'valid_ballots'],
                votestats.util.safe_divide)
        .derive('turnout', ['valid_ballots', 'electorate'],
                operator.truediv)
    )


SLOVAKIA_COLUMNS = {
    'voters_eligible': 'electorate',
    'ballots_valid': 'valid_ballots',
    'ballots_valid_smer': 'victors',
}


def prepare_slovakia(table: ElectionTable) -> ElectionTable:
    """Prepare the results of the 2016 Slovak parliamentary election.

    Precincts without eligible voters are removed.
    """
    return (
        table
        .rename(SLOVAKIA_COLUMNS)
        .derive('victors_share', ['victors', 'valid_ballots'],
                votestats.util.safe_divide)
        .where(lambda row: row['electorate'] > 0)
        .derive('turnout', ['valid_ballots', 'electorate'],
                votestats.util.safe_divide)
    )


PREPARERS: Dict[DatasetKind, Callable[[ElectionTable], ElectionTable]] = {
    DatasetKind.UK_2010: prepare_uk,
    DatasetKind.RUSSIA_2011: prepare_russia,
    DatasetKind.SLOVAKIA_2016: prepare_slovakia,
}


def prepare(kind: Union[DatasetKind, str],
            table: ElectionTable,
            ) -> ElectionTable:
    """Clean the table and add derived columns for the given dataset kind.

    :param kind: The dataset kind or its code (``uk``, ``ru``, ``sk``).
    :param table: The raw table as loaded.
    :raises ValueError: If the dataset kind is unknown.
    """
    kind = DatasetKind(kind)
    logging.info('preparing %s dataset with %d rows', kind.name, len(table))
    return PREPARERS[kind](table)
