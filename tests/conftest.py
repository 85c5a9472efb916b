import matplotlib


def pytest_configure() -> None:
    # no display on CI
    matplotlib.use("Agg")
