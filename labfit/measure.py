"""
The Measure type: a vector of values with paired uncertainties.

Every transform returns a new Measure whose errors follow first-order
(linearised) propagation, ``sigma_f = |df/dx| * sigma_x``, combined in
quadrature when several independent inputs contribute. NaN and inf flow
through silently so that one bad element does not abort a whole batch.

Examples
--------
>>> x = measure([1, 2, 3, 4], [0.1, 0.2, 0.3, 0.4])
>>> y = measure([0.5, 0.6, 0.7, 0.8], [0.05, 0.06, 0.07, 0.08])
>>> (x + y).approximate().values
array([1.5, 2.6, 3.7, 4.8])
"""

from enum import Enum
from numbers import Real

import numpy as np
import pandas as pd
import xarray as xr

from labfit.errors import InvalidErrorLength, LengthMismatchError
from labfit.io.base import Serializable
from labfit.rounding import approximate, round_value


class Style(Enum):
    """How a Measure is rendered by ``str()``."""

    LIST = "list"  # [values] ± [errors]
    PM = "pm"  # value ± error, ...
    TABLE = "table"  # value ± error (single element)
    LATEX_TABLE = "latex"  # $value \pm error$
    TYPST_TABLE = "typst"  # $value plus.minus error$


_SINGLE_ONLY = "This style is only for one value and its error."


def _fmt(number):
    return str(float(number))


def _as_vector(data):
    # owned copy, never a view on the caller's array
    arr = np.atleast_1d(np.array(data, dtype=float, copy=True))
    if arr.ndim != 1:
        raise ValueError(f"Expected a one-dimensional sequence, got shape {arr.shape}.")
    return arr


def align_and_broadcast(a, b):
    """
    Bring the value/error vectors of two Measures to a common length.

    A Measure of length 1 broadcasts against the other one; any other
    length mismatch is an error.

    Returns
    -------
    tuple of numpy.ndarray
        ``(a_values, a_errors, b_values, b_errors)``.

    Raises
    ------
    LengthMismatchError
        If neither length is 1 and the lengths differ.
    """
    if len(a) != len(b) and len(a) != 1 and len(b) != 1:
        raise LengthMismatchError(
            f"Measures lengths must be equal, obtained {len(a)} and {len(b)}."
        )
    return tuple(np.broadcast_arrays(a._values, a._errors, b._values, b._errors))


class Measure(Serializable):
    """
    Ordered collection of (value, error) pairs with uncertainty propagation.

    Parameters
    ----------
    values : float or sequence of float
        Measured values.
    errors : float or sequence of float, default 0.0
        One error per value, or a single error shared by every value.
    auto_approximate : bool, default False
        Round each pair to the first significant figure of its error.

    Raises
    ------
    InvalidErrorLength
        If ``errors`` has neither one element nor one per value.
    """

    # keep numpy scalars from treating a Measure as an array operand
    __array_ufunc__ = None

    def __init__(self, values, errors=0.0, auto_approximate=False, style=Style.PM):
        values = _as_vector(values)
        errors = _as_vector(errors)

        if len(errors) != len(values):
            if len(errors) != 1:
                raise InvalidErrorLength(len(values), len(errors))
            errors = np.full(len(values), errors[0])

        if auto_approximate:
            pairs = [approximate(val, err) for val, err in zip(values, errors)]
            values = np.array([val for val, _ in pairs], dtype=float)
            errors = np.array([err for _, err in pairs], dtype=float)

        self._values = values
        self._errors = errors
        self._style = Style(style)

    @classmethod
    def _raw(cls, values, errors, style=Style.PM):
        # trusted internal constructor, lengths already match
        obj = cls.__new__(cls)
        obj._values = np.asarray(values, dtype=float)
        obj._errors = np.asarray(errors, dtype=float)
        obj._style = style
        return obj

    @classmethod
    def from_pairs(cls, pairs, auto_approximate=False):
        """Build a Measure from an iterable of ``(value, error)`` pairs."""
        pairs = list(pairs)
        values = [float(val) for val, _ in pairs]
        errors = [float(err) for _, err in pairs]
        return cls(values, errors if errors else 0.0, auto_approximate=auto_approximate)

    # --- accessors --------------------------------------------------------
    @property
    def values(self) -> np.ndarray:
        return self._values.copy()

    @property
    def errors(self) -> np.ndarray:
        return self._errors.copy()

    @property
    def style(self) -> Style:
        return self._style

    @style.setter
    def style(self, style):
        self._style = Style(style)

    def with_style(self, style):
        """Return a copy rendered with ``style``."""
        return Measure._raw(self._values.copy(), self._errors.copy(), Style(style))

    def unpack(self):
        """Return ``(values, errors)``."""
        return self.values, self.errors

    def is_empty(self) -> bool:
        return len(self._values) == 0

    def copy(self):
        return Measure._raw(self._values.copy(), self._errors.copy(), self._style)

    def get(self, index, default=None):
        """Return ``(value, error)`` at ``index``, or ``default`` when out of range."""
        try:
            return self[index]
        except IndexError:
            return default

    def set(self, index, value, error):
        self._values[index] = value
        self._errors[index] = error

    def set_value(self, index, value):
        self._values[index] = value

    def set_error(self, index, error):
        self._errors[index] = error

    def split(self):
        """Return one length-1 Measure per element."""
        return [Measure._raw([val], [err]) for val, err in self]

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return ((float(val), float(err)) for val, err in zip(self._values, self._errors))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Measure._raw(self._values[index].copy(), self._errors[index].copy(), self._style)
        return float(self._values[index]), float(self._errors[index])

    def __setitem__(self, index, pair):
        value, error = pair
        self.set(index, value, error)

    def __eq__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        return np.array_equal(self._values, other._values) and np.array_equal(
            self._errors, other._errors
        )

    __hash__ = None

    def __repr__(self):
        return f"Measure(values={self._values.tolist()}, errors={self._errors.tolist()})"

    def __str__(self):
        style = self._style
        if style is Style.LIST:
            return f"{[float(v) for v in self._values]} ± {[float(e) for e in self._errors]}"
        if style is Style.PM:
            return ", ".join(f"{_fmt(val)} ± {_fmt(err)}" for val, err in self)
        if len(self) != 1:
            return _SINGLE_ONLY
        val, err = _fmt(self._values[0]), _fmt(self._errors[0])
        if style is Style.TABLE:
            return f"{val} ± {err}"
        if style is Style.LATEX_TABLE:
            return f"${val} \\pm {err}$"
        return f"${val} plus.minus {err}$"

    # --- rounding ---------------------------------------------------------
    def approximate(self):
        """Round every pair to the first significant figure of its error."""
        return Measure(self._values, self._errors, auto_approximate=True, style=self._style)

    def approximate_to(self, decimals):
        """Round values and errors to a fixed number of decimals."""
        return Measure._raw(
            round_value(self._values, decimals),
            round_value(self._errors, decimals),
            self._style,
        )

    # --- aggregate statistics ---------------------------------------------
    def mean(self) -> float:
        return float(np.mean(self._values))

    def standard_deviation(self) -> float:
        """Sample standard deviation of the values (divisor n - 1)."""
        with np.errstate(all="ignore"):
            return float(np.std(self._values, ddof=1))

    def standard_error(self) -> float:
        with np.errstate(all="ignore"):
            return float(self.standard_deviation() / np.sqrt(len(self)))

    def estimation(self):
        """
        Best estimate of a repeated measurement.

        Every value becomes the mean; each error combines the standard error
        of the mean with that element's own error in quadrature.
        """
        se = self.standard_error()
        return Measure._raw(
            np.full(len(self), self.mean()), np.sqrt(se**2 + self._errors**2)
        )

    # --- elementwise transforms ---------------------------------------------
    def _map(self, value_func, error_func):
        v, s = self._values, self._errors
        with np.errstate(all="ignore"):
            new_values = value_func(v)
            new_errors = error_func(v, s, new_values)
        return Measure._raw(new_values, new_errors)

    def pow(self, exponent):
        p = float(exponent)
        return self._map(
            lambda v: np.power(v, p), lambda v, s, _: np.abs(p * np.power(v, p - 1.0) * s)
        )

    def sqrt(self):
        return self._map(np.sqrt, lambda v, s, _: s / (2.0 * np.sqrt(v)))

    def abs(self):
        return self._map(np.abs, lambda v, s, _: s.copy())

    def sin(self):
        def error(v, s, out):
            # the derivative vanishes where sin(x) == ±1, use the secant instead
            edge = np.abs(out) == 1.0
            return np.where(edge, np.abs(np.sin(v + s) - out), np.abs(np.cos(v) * s))

        return self._map(np.sin, error)

    def cos(self):
        def error(v, s, out):
            edge = np.abs(out) == 1.0
            return np.where(edge, np.abs(np.cos(v + s) - out), np.abs(np.sin(v) * s))

        return self._map(np.cos, error)

    def tan(self):
        return self._map(np.tan, lambda v, s, out: (1.0 + out**2) * s)

    def asin(self):
        def error(v, s, out):
            edge = np.abs(v) == 1.0
            inward = np.where(v > 0, v - s, v + s)
            return np.where(
                edge, np.abs(np.arcsin(inward) - out), s / np.sqrt(1.0 - v**2)
            )

        return self._map(np.arcsin, error)

    def acos(self):
        def error(v, s, out):
            edge = np.abs(v) == 1.0
            inward = np.where(v > 0, v - s, v + s)
            return np.where(
                edge, np.abs(np.arccos(inward) - out), s / np.sqrt(1.0 - v**2)
            )

        return self._map(np.arccos, error)

    def atan(self):
        return self._map(np.arctan, lambda v, s, _: s / (1.0 + v**2))

    def atan2(self, other):
        """Four-quadrant arctangent of ``self / other`` (self is the ordinate)."""
        sv, se, ov, oe = align_and_broadcast(self, other)
        with np.errstate(all="ignore"):
            values = np.arctan2(sv, ov)
            errors = np.sqrt((ov * se) ** 2 + (sv * oe) ** 2) / (sv**2 + ov**2)
        return Measure._raw(values, errors)

    def ln(self):
        return self._map(np.log, lambda v, s, _: np.abs(s / v))

    def exp(self):
        """Exponential; the error is scaled by the input magnitude, ``|v| * sigma``."""
        return self._map(np.exp, lambda v, s, _: np.abs(v) * s)

    def rad(self):
        """Convert degrees to radians."""
        return Measure._raw(np.deg2rad(self._values), np.deg2rad(self._errors))

    def grad(self):
        """Convert radians to degrees."""
        return Measure._raw(np.rad2deg(self._values), np.rad2deg(self._errors))

    def delta(self):
        """Differences between consecutive elements (length n - 1)."""
        v, s = self._values, self._errors
        return Measure._raw(np.diff(v), np.sqrt(s[:-1] ** 2 + s[1:] ** 2))

    def __abs__(self):
        return self.abs()

    def __neg__(self):
        return Measure._raw(-self._values, self._errors.copy())

    def __pos__(self):
        return self.copy()

    def __pow__(self, exponent):
        if isinstance(exponent, Measure):
            return NotImplemented
        return self.pow(exponent)

    # --- arithmetic -------------------------------------------------------
    def __add__(self, other):
        if isinstance(other, Measure):
            av, ae, bv, be = align_and_broadcast(self, other)
            return Measure._raw(av + bv, np.hypot(ae, be))
        if isinstance(other, Real):
            return Measure._raw(self._values + other, self._errors.copy())
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Real):
            return Measure._raw(other + self._values, self._errors.copy())
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Measure):
            av, ae, bv, be = align_and_broadcast(self, other)
            return Measure._raw(av - bv, np.hypot(ae, be))
        if isinstance(other, Real):
            return Measure._raw(self._values - other, self._errors.copy())
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Real):
            return Measure._raw(other - self._values, self._errors.copy())
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Measure):
            av, ae, bv, be = align_and_broadcast(self, other)
            with np.errstate(all="ignore"):
                return Measure._raw(av * bv, np.hypot(bv * ae, av * be))
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                return Measure._raw(self._values * other, self._errors * abs(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Measure):
            av, ae, bv, be = align_and_broadcast(self, other)
            with np.errstate(all="ignore"):
                return Measure._raw(av / bv, np.hypot(ae / bv, av * be / bv**2))
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                return Measure._raw(
                    np.true_divide(self._values, other),
                    np.true_divide(self._errors, abs(other)),
                )
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            v, s = self._values, self._errors
            with np.errstate(all="ignore"):
                return Measure._raw(other / v, abs(other) * s / v**2)
        return NotImplemented

    # --- Serializable interface -------------------------------------------
    def tag(self) -> str:
        return "measure"

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({"value": self._values, "error": self._errors})

    def to_dataset(self) -> xr.Dataset:
        return xr.Dataset(
            {
                "value": ("index", self._values.copy()),
                "error": ("index", self._errors.copy()),
            },
            coords={"index": np.arange(len(self))},
            attrs={"object_type": self.tag(), "style": self._style.value},
        )

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, value_col="value", error_col="error", auto_approximate=False):
        """Build a Measure from two columns of a DataFrame."""
        return cls(
            df[value_col].to_numpy(dtype=float),
            df[error_col].to_numpy(dtype=float),
            auto_approximate=auto_approximate,
        )


def measure(*args, auto_approximate=True):
    """
    Convenience constructor that approximates by default.

    Accepted forms::

        measure([1, 2, 3])                    # errors default to 0
        measure([1, 2, 3], 0.1)               # one error for all values
        measure([1, 2, 3], [0.1, 0.2, 0.3])   # one error per value
        measure(1, 0.3)                       # single value
        measure((1, 0.1), (2, 0.2))           # (value, error) pairs

    Tuples of length 2 always mean ``(value, error)`` pairs, so
    ``measure((1.0, 2.0), (0.1, 0.2))`` is the two pairs ``1.0 ± 2.0`` and
    ``0.1 ± 0.2``. Pass values and errors as lists or arrays instead.

    Raises
    ------
    InvalidErrorLength
        If the error vector does not fit the values.
    """
    if not args:
        raise TypeError("measure() needs at least one argument")
    if all(isinstance(arg, tuple) and len(arg) == 2 for arg in args):
        return Measure.from_pairs(args, auto_approximate=auto_approximate)
    if len(args) == 1:
        return Measure(args[0], 0.0, auto_approximate=auto_approximate)
    if len(args) == 2:
        return Measure(args[0], args[1], auto_approximate=auto_approximate)
    raise TypeError(f"measure() takes values and errors, got {len(args)} arguments")
