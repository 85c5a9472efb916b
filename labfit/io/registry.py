"""
Global reader registry and the `load` entry point.

This module manages the registration and lookup of file readers by file
extension. Reader plug-ins live in `labfit.io.readers` and register
themselves with the `register_reader` decorator.

Functions
---------
register_reader(*exts)
    Decorator to register a Reader for one or more file extensions.
get_reader(path)
    Return the Reader registered for the extension of *path*.
load(path, **options)
    Read *path* into a list of Measures (value/error column pairs).
"""

from pathlib import Path
from typing import Dict

from .base import Reader

ReaderKey = str  # '.ext'

_readers: Dict[ReaderKey, Reader] = {}


def register_reader(*exts: str):
    def decorator(cls):
        instance = cls()
        for ext in exts:
            _readers[ext.lower()] = instance
        return cls

    return decorator


def get_reader(path) -> Reader:
    # plug-ins register on import
    from . import readers  # noqa: F401

    ext = Path(path).suffix.lower()
    try:
        return _readers[ext]
    except KeyError as err:
        raise ValueError(f"No reader for *{ext} files") from err


def load(path, **options):
    """
    Read *path* and pair its columns into Measures.

    Parameters
    ----------
    path : str or pathlib.Path
        File to read; the extension selects the reader.
    **options
        Forwarded to `labfit.io.readers.read_to_measures`.

    Returns
    -------
    list of Measure
    """
    from .readers import read_to_measures

    return read_to_measures(path, **options)
