"""
labfit: measurements with uncertainties and the fits built on them.

>>> from labfit import measure, LinearFit
>>> x = measure([0.7, 1.8, 2.7, 4.3], 0.1)
>>> y = measure([4.6, 5.4, 6.9, 8.1], [0.1, 0.3, 0.4, 0.7])
>>> slope, intercept = LinearFit.from_measures(x, y).fit()
"""

from labfit.errors import (
    ConvergenceWarning,
    InvalidErrorLength,
    LabfitError,
    LengthMismatchError,
    SingularHessianWarning,
)
from labfit.measure import Measure, Style, align_and_broadcast, measure
from labfit.rounding import approximate, round_value, truncate
from labfit.fitting import (
    CurveFit,
    LinearFit,
    correlation_coefficient,
    curve_fit,
    invert_matrix,
    linear_fit,
    nelder_mead,
    weighted_linear_fit,
)
from labfit.io import load
from labfit.io.fit_result import FitResult
from labfit.io.readers import read_file, read_to_measures
from labfit.io.tables import TableBuilder, latex, typst

__version__ = "0.1.0"
