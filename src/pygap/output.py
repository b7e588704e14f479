"""
Output formatting for PyGap.

Two representations of the yearly plot records are provided:

- a fixed-width text table (header plus one line per plot and year)
- a pandas DataFrame with one row per plot and year, exportable to CSV/JSON
"""
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from .plot import PlotRecord
from .species import SpeciesCatalog

__all__ = [
    'format_header',
    'format_record',
    'records_to_dataframe',
    'DataExporter',
]


def format_header(catalog: SpeciesCatalog) -> str:
    """Two-line header matching the columns of format_record().

    The first line carries the plot and species banners, the second the
    column labels.
    """
    banner = f"{'':6s}|{' PLOT':<32s}"
    for pft in catalog:
        banner += f"| {pft.name:<31s}"

    labels = f"{' Year':<6s}|{' #tr':<6s}|{' weight':<12s}|{' b. area':<12s}"
    for _ in catalog:
        labels += f"|{' #tr':<6s}|{' weight':<12s}|{' b. area':<12s}"

    return f"{banner}|\n{labels}|"


def format_record(record: PlotRecord) -> str:
    """Fixed-width line for one plot record."""
    line = f"{record.year:6d} {record.trees:6d} {record.weight:12.3f} {record.basal_area:12.3f}"
    for tally in record.species:
        line += f" {tally.count:6d} {tally.weight:12.3f} {tally.basal_area:12.3f}"
    return line


def records_to_dataframe(records: Iterable[PlotRecord], catalog: SpeciesCatalog) -> pd.DataFrame:
    """Convert plot records to a DataFrame.

    Columns are ``year, plot, trees, weight, basal_area`` followed by
    ``<species>_trees``, ``<species>_weight`` and ``<species>_basal_area`` for
    every species in catalog order.
    """
    names = catalog.names
    columns = ['year', 'plot', 'trees', 'weight', 'basal_area']
    for name in names:
        columns += [f"{name}_trees", f"{name}_weight", f"{name}_basal_area"]
    rows: List[dict] = [record.to_dict(names) for record in records]
    return pd.DataFrame(rows, columns=columns)


class DataExporter:
    """Writes simulation tables to disk.

    Supported formats are chosen from the file suffix: .csv, .json.
    """

    SUPPORTED_FORMATS = ('.csv', '.json')

    def export(self, df: pd.DataFrame, filepath: Union[str, Path]) -> Path:
        """Write ``df`` to ``filepath``.

        Returns:
            Path of the written file

        Raises:
            ValueError: If the suffix is not a supported format
        """
        path = Path(filepath)
        suffix = path.suffix.lower()
        if suffix not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported export format: {suffix}. "
                             f"Supported formats: {', '.join(self.SUPPORTED_FORMATS)}")

        path.parent.mkdir(parents=True, exist_ok=True)
        if suffix == '.csv':
            df.to_csv(path, index=False)
        else:
            df.to_json(path, orient='records', indent=2)
        return path
