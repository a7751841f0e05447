# splinelab

`splinelab` builds a cubic interpolating spline for one of a small set of
test functions on an interval `[a, b]`. It compares the spline with the
function on a control grid ten times finer than the spline grid and reports
how far apart they are. It does this for the values, the first derivatives
and the second derivatives.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
splinelab coefficients [options]
splinelab compare [options] [--plot PATH] [--kind {function,first,second}]
```

`coefficients` prints `i`, `xᵢ`, `fᵢ`, `aᵢ`, `bᵢ`, `cᵢ`, `dᵢ` for every
interval of the spline grid.

`compare` prints a table with `xi`, `Fi`, `Si`, `|Fi-Si|`, `F'i`, `S'i`,
`|F'i-S'i|`, `F''i`, `S''i` and `|F''i-S''i|` for every point of the control
grid. A summary follows the table. It gives the largest error of each kind,
with the control-point index `j` and the `x` where that error occurs. When
several points share the largest error, the last of them is reported.

With `--plot PATH`, `compare` also saves a chart. The file format follows the
suffix of `PATH`. `--kind` chooses what the chart shows:

* `function`: the function, the spline and their difference. This is the default.
* `first`: the first derivatives and their difference.
* `second`: the second derivatives and their difference.

Both commands take these options:

| Option | Meaning | Default |
| --- | --- | --- |
| `-f`, `--function` | `phi`, `log-shifted`, `log-x` or `sin-x` | `log-shifted` |
| `-o`, `--oscillation` | `none`, `cos10` or `cos100` | `none` |
| `-a`, `-b` | ends of the interval | `-1`, `1` for `phi`; `1`, `2` otherwise |
| `-n` | number of spline intervals | `20` |
| `--boundary` | `natural` or `exact` | `exact` for `phi`, `natural` otherwise |

The functions are:

* `phi`: the piecewise cubic `ϕ(x)`. It is `x³+3x²` on `[-1, 0]`, `-x³+3x²` on `[0, 1]`, and `0` elsewhere.
* `log-shifted`: `ln(x+1)/(x+1)`.
* `log-x`: `ln(x+1)/x`.
* `sin-x`: `sin(x+1)/x`.

The oscillations `cos10` and `cos100` add `cos(10x)` or `cos(100x)` to the
chosen function.

The boundary conditions are:

* `natural`: `S''(a) = S''(b) = 0`.
* `exact`: `S''(a) = F''(a)` and `S''(b) = F''(b)`.

On invalid input or an arithmetic failure, the command prints `Error: ...` to
standard error and exits with status 1. Invalid input includes a
non-positive `-n`. An arithmetic failure is, for example, a logarithm of a
non-positive number.

## Library

`splinelab.functions` holds the numerical core:

* `TestFunction` and `Oscillation` are enums for the functions and the added oscillating terms.
* `value`, `first_derivative` and `second_derivative` evaluate a function with its oscillation at a point. Each takes either the enum members or their integer values.
* `sweep(n, h, mu1, mu2, f)` solves the tridiagonal system for the spline's second-derivative coefficients. It uses the sweep (Thomas) method and returns `n + 1` values whose ends are `mu1` and `mu2`.
* `spline_coefficients(n, mu1, mu2, h, f)` returns `SplineCoefficients` with the lists `a`, `b`, `c` and `d`.
* `CubicSpline(nodes, coefficients)` evaluates the spline with `value`, `derivative` and `second_derivative`. A point outside the nodes raises `ValueError`.
* `spline_error(count, function, oscillation, spline)` samples `count` equally spaced points starting at the first node. It returns an `ErrorTable` with the values, the differences and the largest difference of each kind.

`splinelab.report` builds on the core:

* `Problem` describes a task. It holds the function, the oscillation, `a`, `b`, `n` and a `BoundaryCondition` (`NATURAL` or `EXACT_SECOND_DERIVATIVE`).
* `Problem` has `boundary_values`, `nodes` and `build_spline`.
* `coefficient_rows(problem)` produces the coefficient table as `CoefficientRow` items.
* `compare(problem)` produces a `Comparison` made of `ComparisonRow` items and the largest errors with their positions.
* `format_coefficient_table` and `format_comparison` render these as text.
* `default_interval(function)` gives the interval each function is normally studied on.

`splinelab.plot` handles charts:

* `series(comparison, kind)` returns the curves for a `PlotKind`, keyed by legend name.
* `plot_comparison(comparison, kind, path)` draws the curves with matplotlib and saves them to `path`.

## What it does not do

There is no graphical or interactive interface. Parameters are given on the
command line or in code. Results come out as text tables on standard output
and, on request, as a saved chart image.