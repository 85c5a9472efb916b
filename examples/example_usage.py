import matplotlib.pyplot as plt

from labfit import CurveFit, LinearFit, measure, typst
from labfit.utils.plot_utils import plot_fit

# measures from the lab notebook, rounded to the first significant figure of each error
time = measure(
    [0.0001346, 0.1134, 0.22734, 0.312324, 0.4019256, 0.5127634],
    [0.0000123, 0.0154, 0.012, 0.02943, 0.02544, 0.04872],
)
position = measure(
    [0.0023, 1.41134, 2.425, 3.41515, 5.13545, 7.24524],
    [0.000123, 0.154, 0.2, 0.43, 0.544, 0.872],
)

# or read them from a tab separated file with decimal commas:
# time, position = labfit.load("data.txt")

speed = position / time

slope, intercept = LinearFit.from_measures(time, position).fit()
print(f"x = ({slope.approximate()}) t + ({intercept.approximate()})")

result = (
    CurveFit(lambda t, p: p[0] * t**2 + p[1] * t, time, position)
    .initial_ones(2)
    .parameter_names("a/2", "v0")
    .fit_result()
)
print(result.summary())

print(typst([time, position, speed], ["t/s", "x/m", "v/ms^(-1)"]))

fig = plot_fit(time, position, lambda t, p: p[0] * t**2 + p[1] * t, result.params, x_label="t / s", y_label="x / m")
plt.show()
