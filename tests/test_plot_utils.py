import matplotlib.pyplot as plt

from labfit import measure
from labfit.models import linear
from labfit.utils.plot_utils import create_plots, plot_fit, plot_measures, save_plot


def test_create_plots_labels():
    fig, ax = create_plots(x_label="t / s", y_label="x / m", plot_title="Run")
    assert ax.get_xlabel() == "t / s"
    assert ax.get_title() == "Run"
    plt.close(fig)


def test_plot_measures_draws_error_bars():
    x = measure([1.0, 2.0, 3.0], 0.1)
    y = measure([2.0, 4.1, 5.9], 0.2)
    ax = plot_measures(x, y)
    assert len(ax.containers) == 1
    plt.close(ax.figure)


def test_plot_fit_and_save(tmp_path):
    x = measure([1.0, 2.0, 3.0], 0.1)
    y = measure([2.0, 4.1, 5.9], 0.2)
    fig = plot_fit(x, y, linear, [measure(1.95, 0.05), measure(0.1, 0.1)])
    ax = fig.axes[0]
    assert len(ax.get_lines()) >= 1
    path = save_plot(fig, tmp_path)
    assert (tmp_path / "fit_plot.png").exists()
    assert path.endswith("fit_plot.png")
    plt.close(fig)
