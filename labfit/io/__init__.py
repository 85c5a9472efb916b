"""
I/O subsystem for labfit: tabular views, ingestion and report tables.

Overview
--------
- **Base interfaces**: `Serializable` (objects with DataFrame / Dataset
  views, implemented by `Measure` and `FitResult`) and `Reader` (file
  parsers returning numeric columns).

- **Registry**: maps file extensions to readers, so `load(path)` picks the
  right parser. New formats register with `@register_reader(".ext")`.

- **Readers**: delimited text (`.txt`, `.csv`, `.tsv`, `.dat`) through
  pandas, and `.xlsx` through pandas/openpyxl.

- **Tables**: LaTeX and Typst table strings built from Measures.

Submodules
----------
- `base`       : Abstract base classes.
- `registry`   : Reader registry and the `load` entry point.
- `readers`    : Reader plug-ins and the `read_file` / `read_to_measures` helpers.
- `tables`     : `latex`, `typst` and `TableBuilder`.
- `fit_result` : Container for nonlinear fit outputs.

Only the base interfaces and the registry are imported here; the other
submodules depend on `labfit.measure`, which itself imports `base`.
"""

from .base import Reader, Serializable
from .registry import load, register_reader

__all__ = ["Reader", "Serializable", "load", "register_reader"]
