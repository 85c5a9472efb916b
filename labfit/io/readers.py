"""
Reader plug-ins that turn data files into numeric columns and Measures.

Supported formats
-----------------
- Delimited text (.txt, .csv, .tsv, .dat): DelimitedTextReader
- Excel workbooks (.xlsx): XlsxReader

Usage
-----
>>> time, position = read_to_measures("data.txt", separator="\\t", decimal=",")

Files are expected to hold measures as consecutive column pairs: values in
one column, their errors in the next one. A column ends at its first empty
cell, so measures of different lengths can share a file.
"""

from io import StringIO
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from labfit.config import READER_DEFAULTS
from labfit.measure import Measure

from .base import Column, Reader
from .registry import get_reader, register_reader


def _to_numeric(df: pd.DataFrame, path) -> pd.DataFrame:
    try:
        return df.apply(pd.to_numeric, errors="raise").astype(float)
    except (ValueError, TypeError) as err:
        raise ValueError(f"Non number found in {Path(path).name}: {err}") from err


@register_reader(".txt", ".csv", ".tsv", ".dat")
class DelimitedTextReader(Reader):
    """
    Parse delimited text with a configurable separator and decimal mark.

    Blank lines are ignored before the header rows are skipped; empty cells
    become NaN.
    """

    def read(
        self,
        path: Path,
        separator=READER_DEFAULTS["separator"],
        line="\n",
        decimal=READER_DEFAULTS["decimal"],
        headers=READER_DEFAULTS["headers"],
        **_,
    ) -> pd.DataFrame:
        text = Path(path).expanduser().read_text(encoding="utf-8")
        rows = [row for row in text.split(line) if row.strip()][headers:]
        if not rows:
            return pd.DataFrame(dtype=float)

        width = max(len(row.split(separator)) for row in rows)
        raw = pd.read_csv(
            StringIO("\n".join(rows)),
            sep=separator,
            header=None,
            names=range(width),
            dtype=str,
            keep_default_na=False,
            engine="python",
        )

        cells = raw.apply(lambda col: col.str.strip())
        if decimal != ".":
            cells = cells.apply(lambda col: col.str.replace(decimal, ".", regex=False))
        cells = cells.replace("", np.nan)
        return _to_numeric(cells, path)


@register_reader(".xlsx")
class XlsxReader(Reader):
    """Read the numeric block of one worksheet (first sheet by default)."""

    def read(
        self,
        path: Path,
        headers=READER_DEFAULTS["headers"],
        sheet_name=0,
        **_,
    ) -> pd.DataFrame:
        raw = pd.read_excel(
            path, sheet_name=sheet_name, header=None, skiprows=headers, engine="openpyxl"
        )
        raw = raw.dropna(how="all").reset_index(drop=True)
        raw.columns = range(raw.shape[1])
        return _to_numeric(raw, path)


def read_file(
    path,
    separator=READER_DEFAULTS["separator"],
    line="\n",
    decimal=READER_DEFAULTS["decimal"],
    headers=READER_DEFAULTS["headers"],
    by_columns=READER_DEFAULTS["by_columns"],
    **options,
) -> List[Column]:
    """
    Extract numbers from a data file.

    Parameters
    ----------
    path : str or pathlib.Path
        File to read; the extension selects the reader.
    separator : str
        Column separator, tab by default.
    line : str
        Row separator, newline by default.
    decimal : str
        Decimal mark, ',' by default.
    headers : int
        Number of non-empty leading rows to skip.
    by_columns : bool
        Return columns (True) or rows (False).

    Returns
    -------
    list of list of float or None
        None marks an empty cell.
    """
    df = get_reader(path).read(
        path, separator=separator, line=line, decimal=decimal, headers=headers, **options
    )
    table = df.to_numpy(dtype=float)
    if by_columns:
        table = table.T
    return [[None if np.isnan(cell) else float(cell) for cell in vec] for vec in table]


def _leading_run(column: Column) -> List[float]:
    out = []
    for cell in column:
        if cell is None:
            break
        out.append(cell)
    return out


def read_to_measures(
    path,
    separator=READER_DEFAULTS["separator"],
    line="\n",
    decimal=READER_DEFAULTS["decimal"],
    headers=READER_DEFAULTS["headers"],
    auto_approximate=True,
    **options,
) -> List[Measure]:
    """
    Read a file whose columns come in (values, errors) pairs.

    A trailing unpaired column is ignored.

    Returns
    -------
    list of Measure
        One Measure per column pair, approximated to the first significant
        figure of each error unless ``auto_approximate`` is False.

    Raises
    ------
    InvalidErrorLength
        If an error column is neither one cell long nor as long as its values.
    """
    columns = read_file(
        path,
        separator=separator,
        line=line,
        decimal=decimal,
        headers=headers,
        by_columns=True,
        **options,
    )
    return [
        Measure(_leading_run(values), _leading_run(errors), auto_approximate=auto_approximate)
        for values, errors in zip(columns[0::2], columns[1::2])
    ]
