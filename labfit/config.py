"""
Default settings shared across labfit.

Builders copy these values when they are created, so changing an entry
here affects every fit, reader or table built afterwards.
"""

FIT_DEFAULTS = {
    "tolerance": 1e-6,
    # None means "until the tolerance is met"; an ill-posed objective may then never return
    "max_iterations": None,
    "initial_simplex_scale": 0.5,
}

FINITE_DIFFERENCE = {
    # step = relative_step * min(|p_i|)
    "relative_step": 1e-6,
    # used when the relative step collapses to zero (a parameter is exactly 0)
    "fallback_step": 1e-6,
}

READER_DEFAULTS = {
    "separator": "\t",
    "decimal": ",",
    "headers": 0,
    "by_columns": True,
}

TABLE_DEFAULTS = {
    "caption": "caption",
    "label": "label",
    "transpose": True,
}

font_size = 11
PLOT_STYLE = {
    "figure.figsize": (8, 6),
    "figure.dpi": 120,
    "figure.titlesize": font_size,
    "figure.titleweight": "bold",
    "axes.titlesize": font_size,
    "font.size": font_size,
    "axes.labelsize": font_size,
    "xtick.labelsize": font_size,
    "ytick.labelsize": font_size,
    "legend.fontsize": font_size - 2,
    "lines.linewidth": 1.5,
    "axes.grid": True,
    "axes.formatter.use_mathtext": True,
    "axes.formatter.limits": (-2, 3),
    "xtick.direction": "in",
    "xtick.minor.visible": True,
    "xtick.major.size": 5,
    "xtick.minor.size": 3,
    "ytick.direction": "in",
    "ytick.minor.visible": True,
    "ytick.major.size": 5,
    "ytick.minor.size": 3,
    "legend.loc": "best",
    "legend.frameon": True,
    "legend.framealpha": 0.5,
    "grid.color": "gray",
    "grid.linestyle": "-",
    "grid.linewidth": 0.5,
    "grid.alpha": 0.7,
    "savefig.bbox": "tight",
    "savefig.format": "png",
}
