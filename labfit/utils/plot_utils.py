import os

import matplotlib.pyplot as plt
import numpy as np

from labfit.config import PLOT_STYLE, font_size
from labfit.fitting_utils import as_float_array

plot_config = {
    "x_label": r"$x$",
    "y_label": r"$y$",
    "data_label": "Measured",
    "fit_label": "Fit",
    # model curve sampling between the outermost data points
    "curve_points": 200,
}


def create_plots(
    x_label=plot_config["x_label"],
    y_label=plot_config["y_label"],
    suptitle="",
    plot_title="",
    *args,
    **kwargs,
):
    with plt.rc_context(PLOT_STYLE):
        fig, ax = plt.subplots(*args, **kwargs)

        ax.grid(which="major", linestyle=":", linewidth="0.5", color="gray")
        ax.grid(which="minor", linestyle=":", linewidth="0.5", color="lightgray")

        if suptitle != "":
            fig.suptitle(f"{suptitle}")

        if plot_title != "":
            ax.set_title(f"{plot_title}")

        ax.set_xlabel(f"{x_label}")
        ax.set_ylabel(f"{y_label}")

    return fig, ax


def plot_measures(x, y, ax=None, label=plot_config["data_label"], **kwargs):
    """
    Error-bar plot of two Measures (or plain sequences, drawn without bars).

    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = create_plots()

    xerr = getattr(x, "errors", None)
    yerr = getattr(y, "errors", None)
    fmt = kwargs.pop("fmt", "o")
    capsize = kwargs.pop("capsize", 3)
    with plt.rc_context(PLOT_STYLE):
        ax.errorbar(
            as_float_array(x),
            as_float_array(y),
            xerr=xerr,
            yerr=yerr,
            fmt=fmt,
            capsize=capsize,
            label=label,
            **kwargs,
        )
    return ax


def plot_fit(x, y, model, params, ax=None, x_label=plot_config["x_label"], y_label=plot_config["y_label"], plot_title=""):
    """
    Draw the data with error bars and the model curve through the fitted parameters.

    ``params`` may be the Measures returned by a fit; their values are used.
    """
    if ax is None:
        fig, ax = create_plots(x_label=x_label, y_label=y_label, plot_title=plot_title)
    else:
        fig = ax.figure

    plot_measures(x, y, ax=ax)

    values = np.array([getattr(p, "values", [p])[0] for p in params], dtype=float)
    x_values = as_float_array(x)
    curve_x = np.linspace(np.min(x_values), np.max(x_values), plot_config["curve_points"])
    with np.errstate(all="ignore"):
        curve_y = np.array([model(xi, values) for xi in curve_x], dtype=float)

    with plt.rc_context(PLOT_STYLE):
        ax.plot(curve_x, curve_y, "--", color="blue", alpha=0.6, label=plot_config["fit_label"])
        ax.legend(fontsize=font_size - 2)

    fig.set_label("fit_plot")
    return fig


def save_plot(fig, plots_dir, verbose=False):
    filename = f"{fig.get_label() or 'plot'}.png"
    plot_file = os.path.join(plots_dir, filename)
    fig.savefig(plot_file, bbox_inches="tight", dpi=300)
    if verbose:
        print(f"Plot saved to {plot_file}")
    return plot_file
