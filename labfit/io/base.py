"""
Base interfaces for the labfit.io module.

Defines the abstract base class for objects that expose tabular and
n-dimensional views, and for file readers that turn text or spreadsheet
files into numeric columns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

import pandas as pd
import xarray as xr

Column = List[Optional[float]]


class Serializable(ABC):
    """
    Common contract for objects with DataFrame and Dataset views.

    Methods
    -------
    tag() : str
        Return a short string identifier, e.g. 'measure', 'fit'.
    to_dataframe() : pandas.DataFrame
        Return a long DataFrame (one row per element).
    to_dataset() : xarray.Dataset
        Return a labelled Dataset.
    """

    # --- identity ---------------------------------------------------------
    @abstractmethod
    def tag(self) -> str:
        """
        Return a short string identifier for the object.

        Returns
        -------
        str
            Identifier string, e.g. 'measure', 'fit'.
        """
        pass

    # --- tabular and n-D views -------------------------------------------
    @abstractmethod
    def to_dataframe(self) -> pd.DataFrame:
        """
        Return a long-format DataFrame representation of the object.

        Returns
        -------
        pandas.DataFrame
            Long-format table, one row per element.
        """
        pass

    @abstractmethod
    def to_dataset(self) -> xr.Dataset:
        """
        Return an xarray.Dataset representation of the object.

        Returns
        -------
        xarray.Dataset
            Labelled dataset.
        """
        pass


class Reader(ABC):
    """
    Low-level file parser that returns numeric data.

    Methods
    -------
    read(path, **options) -> pandas.DataFrame
        Parse the file at the given path and return a DataFrame of floats
        (NaN marks an empty cell).
    """

    @abstractmethod
    def read(self, path: Path, **options) -> pd.DataFrame:
        """
        Parse *path* and return its numeric content.

        Parameters
        ----------
        path : pathlib.Path
            Path to the file to parse.
        **options
            Format-specific options (separator, decimal mark, header rows).

        Returns
        -------
        pandas.DataFrame
            One column per file column, float dtype.
        """
        ...
