"""
Report tables built from Measures, in LaTeX or Typst syntax.

Each Measure is one column (or one row with ``transpose=False``); every
cell is a single ``value ± error`` pair rendered with the matching Measure
style. Shorter measures are padded with empty cells.

Examples
--------
>>> time = measure([0.2, 0.3, 0.4, 0.5], [0.01, 0.02, 0.02, 0.04])
>>> position = measure([2.4, 3.4, 5.1, 7.2], [0.2, 0.4, 0.5, 0.8])
>>> print(latex([time, position], ["t/s", "x/m"], "Caption", "label"))
"""

from typing import List, Sequence

from labfit.config import TABLE_DEFAULTS
from labfit.measure import Measure, Style


def _transpose(rows: List[List[str]]) -> List[List[str]]:
    return [list(col) for col in zip(*rows)]


def create_table_list(
    data: Sequence[Measure], header: Sequence[str], transpose: bool, style: Style
) -> List[List[str]]:
    """Render every element of ``data`` as a cell string, one list per measure."""
    if not data:
        raise ValueError("At least one measure is needed to build a table.")

    cells = [[str(part.with_style(style)) for part in m.split()] for m in data]
    depth = max(len(col) for col in cells)
    cells = [col + [""] * (depth - len(col)) for col in cells]

    if header:
        header = list(header) + [""] * (len(cells) - len(header))
        cells = [[head] + col for head, col in zip(header, cells)]

    return _transpose(cells) if transpose else cells


def latex(
    data: Sequence[Measure],
    header: Sequence[str] = (),
    caption=TABLE_DEFAULTS["caption"],
    label=TABLE_DEFAULTS["label"],
    transpose=TABLE_DEFAULTS["transpose"],
) -> str:
    """
    Build a LaTeX ``table`` environment.

    Parameters
    ----------
    data : sequence of Measure
        One measure per column.
    header : sequence of str
        Column titles; missing titles are left empty.
    caption, label : str
        LaTeX caption and label.
    transpose : bool
        Measures as columns (True) or as rows (False).

    Returns
    -------
    str
    """
    rows = create_table_list(data, header, transpose, Style.LATEX_TABLE)
    width = max(len(row) for row in rows)
    body = "\n".join(f"\t\t{' & '.join(row)}\\\\" for row in rows)
    return (
        "\\begin{table}[ht]\n"
        "\t\\centering\n"
        f"\t\\caption{{{caption}}}\n"
        f"\t\\label{{{label}}}\n"
        f"\t\\begin{{tabular}}{{{'|c' * width}|}}\n"
        f"{body}\n"
        "\t\\end{tabular}\n"
        "\\end{table}"
    )


def typst(
    data: Sequence[Measure],
    header: Sequence[str] = (),
    transpose=TABLE_DEFAULTS["transpose"],
) -> str:
    """Build a Typst ``table(...)`` call; see `latex` for the parameters."""
    rows = create_table_list(data, header, transpose, Style.TYPST_TABLE)
    width = max(len(row) for row in rows)
    body = "\n".join("\t\t" + ", ".join(f"[{cell}]" for cell in row) + "," for row in rows)
    return f"table(\n\tcolumns: {width},\n\talign: center,\n{body}\n)"


class TableBuilder:
    """
    Fluent wrapper around `latex` and `typst`.

    >>> TableBuilder([time, position], ["t/s", "x/m"]).caption("Run 1").latex()
    """

    def __init__(self, data: Sequence[Measure], header: Sequence[str] = ()):
        self._data = list(data)
        self._header = list(header)
        self._transpose = TABLE_DEFAULTS["transpose"]
        self._caption = TABLE_DEFAULTS["caption"]
        self._label = TABLE_DEFAULTS["label"]

    def transpose(self, transpose: bool):
        self._transpose = transpose
        return self

    def caption(self, caption: str):
        self._caption = caption
        return self

    def label(self, label: str):
        self._label = label
        return self

    def latex(self) -> str:
        return latex(self._data, self._header, self._caption, self._label, self._transpose)

    def typst(self) -> str:
        return typst(self._data, self._header, self._transpose)
