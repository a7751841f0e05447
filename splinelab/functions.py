"""Test functions, their derivatives, and cubic spline construction and evaluation."""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class TestFunction(Enum):
    """Functions that can be interpolated."""

    __test__ = False

    PIECEWISE_CUBIC = 3
    LOG_OVER_SHIFTED = 4
    LOG_OVER_X = 5
    SIN_OVER_X = 6

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    TestFunction.PIECEWISE_CUBIC: "ϕ(x)",
    TestFunction.LOG_OVER_SHIFTED: "ln(x+1)/(x+1)",
    TestFunction.LOG_OVER_X: "ln(x+1)/x",
    TestFunction.SIN_OVER_X: "sin(x+1)/x",
}


class Oscillation(Enum):
    """Oscillating term added to the chosen function."""

    NONE = 0
    COS_10 = 1
    COS_100 = 2

    @property
    def frequency(self) -> int:
        return {Oscillation.NONE: 0, Oscillation.COS_10: 10, Oscillation.COS_100: 100}[self]


def _piecewise(x: float, left: float, right: float) -> float:
    """Pick the branch of the piecewise cubic; zero outside [-1, 1]."""
    result = 0.0
    if -1 <= x <= 0:
        result = left
    if 0 <= x <= 1:
        result = right
    return result


def value(x: float, function: TestFunction | int, oscillation: Oscillation | int) -> float:
    """Value of the chosen function with its oscillating term at ``x``."""
    function = TestFunction(function)
    oscillation = Oscillation(oscillation)
    if function is TestFunction.PIECEWISE_CUBIC:
        f = _piecewise(x, x**3 + 3 * x**2, -(x**3) + 3 * x**2)
    elif function is TestFunction.LOG_OVER_SHIFTED:
        f = math.log(x + 1) / (x + 1)
    elif function is TestFunction.LOG_OVER_X:
        f = math.log(x + 1) / x
    else:
        f = math.sin(x + 1) / x
    k = oscillation.frequency
    if k:
        f += math.cos(k * x)
    return f


def first_derivative(x: float, function: TestFunction | int, oscillation: Oscillation | int) -> float:
    """First derivative of the chosen function with its oscillating term at ``x``."""
    function = TestFunction(function)
    oscillation = Oscillation(oscillation)
    if function is TestFunction.PIECEWISE_CUBIC:
        f = _piecewise(x, 3 * x**2 + 6 * x, -3 * x**2 + 6 * x)
    elif function is TestFunction.LOG_OVER_SHIFTED:
        f = (1 - math.log(x + 1)) / (x + 1) ** 2
    elif function is TestFunction.LOG_OVER_X:
        f = (x + (-x - 1) * math.log(x + 1)) / (x**3 + x**2)
    else:
        f = (math.cos(x + 1) * x - math.sin(x + 1)) / (x * x)
    k = oscillation.frequency
    if k:
        f += -k * math.sin(k * x)
    return f


def second_derivative(x: float, function: TestFunction | int, oscillation: Oscillation | int) -> float:
    """Second derivative of the chosen function with its oscillating term at ``x``."""
    function = TestFunction(function)
    oscillation = Oscillation(oscillation)
    if function is TestFunction.PIECEWISE_CUBIC:
        f = _piecewise(x, 6 * x + 6, -6 * x + 6)
    elif function is TestFunction.LOG_OVER_SHIFTED:
        f = (2 * math.log(x + 1) - 3) / (x + 1) ** 3
    elif function is TestFunction.LOG_OVER_X:
        f = (
            math.log(x + 1) * (2 * x**3 + 4 * x**2 + 2 * x) - 3 * x**3 - 2 * x * x
        ) / (x**3 + x**2) ** 2
    else:
        f = (math.sin(x + 1) * (2 - x * x) - 2 * x * math.cos(x + 1)) / x**3
    k = oscillation.frequency
    if k:
        f += -k * k * math.cos(k * x)
    return f


def sweep(n: int, h: float, mu1: float, mu2: float, f: Sequence[float]) -> list[float]:
    """Solve the tridiagonal system for the spline's second-derivative coefficients.

    Returns ``n + 1`` values whose ends are the boundary conditions ``mu1`` and ``mu2``.
    """
    if n < 1:
        raise ValueError("number of intervals must be positive")
    if len(f) < n + 1:
        raise ValueError("need n + 1 function values")
    alpha = [0.0] * n
    beta = [0.0] * n
    beta[0] = mu1

    a_coef = h
    b_coef = h
    c_coef = -2 * h
    for i in range(1, n - 1):
        phi = -6 * ((f[i + 1] - f[i]) / h - (f[i] - f[i - 1]) / h)
        denominator = c_coef - a_coef * alpha[i - 1]
        alpha[i] = b_coef / denominator
        beta[i] = (phi + a_coef * beta[i - 1]) / denominator

    result = [0.0] * (n + 1)
    result[0] = mu1
    result[n] = mu2
    for i in range(n - 1, 0, -1):
        result[i] = alpha[i] * result[i + 1] + beta[i]
    return result


@dataclass
class SplineCoefficients:
    """Coefficients of a cubic spline; ``c`` has one entry more than the others."""

    a: list[float]
    b: list[float]
    c: list[float]
    d: list[float]


def spline_coefficients(
    n: int, mu1: float, mu2: float, h: float, f: Sequence[float]
) -> SplineCoefficients:
    """Compute spline coefficients for ``n`` equal intervals of width ``h``."""
    c = sweep(n, h, mu1, mu2, f)
    pairs = list(zip(f[: n + 1], f[1 : n + 1]))
    c_pairs = list(zip(c, c[1:]))
    a = [f_right for _, f_right in pairs]
    d = [(c_right - c_left) / h for c_left, c_right in c_pairs]
    b = [
        (f_right - f_left) / h + c_right * h / 3 + c_left * h / 6
        for (f_left, f_right), (c_left, c_right) in zip(pairs, c_pairs)
    ]
    return SplineCoefficients(a=a, b=b, c=c, d=d)


@dataclass
class CubicSpline:
    """A cubic spline over the given nodes."""

    nodes: list[float]
    coefficients: SplineCoefficients

    def _segment(self, x: float) -> tuple[int, float] | None:
        """Index ``i`` of the node closing the segment holding ``x``, and ``x - nodes[i]``."""
        nodes = self.nodes
        if x < nodes[0] or x > nodes[-1]:
            raise ValueError(f"x={x} lies outside [{nodes[0]}, {nodes[-1]}]")
        if math.isnan(x) or len(nodes) < 2:
            return None
        i = bisect_left(nodes, x, 1)
        if i >= len(nodes):
            return None
        return i, x - nodes[i]

    def value(self, x: float) -> float:
        """Spline value at ``x``."""
        segment = self._segment(x)
        if segment is None:
            return math.nan
        i, t = segment
        k = self.coefficients
        return k.a[i - 1] + k.b[i - 1] * t + k.c[i] / 2.0 * t**2 + k.d[i - 1] / 6.0 * t**3

    def derivative(self, x: float) -> float:
        """First derivative of the spline at ``x``."""
        segment = self._segment(x)
        if segment is None:
            return math.nan
        i, t = segment
        k = self.coefficients
        return k.b[i - 1] + k.c[i] * t + k.d[i - 1] / 2.0 * t**2

    def second_derivative(self, x: float) -> float:
        """Second derivative of the spline at ``x``."""
        segment = self._segment(x)
        if segment is None:
            return math.nan
        i, t = segment
        k = self.coefficients
        return k.c[i] + k.d[i - 1] * t


@dataclass
class ErrorTable:
    """Function and spline values, derivatives and their differences on a control grid."""

    points: list[float] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    spline_values: list[float] = field(default_factory=list)
    errors: list[float] = field(default_factory=list)
    derivatives: list[float] = field(default_factory=list)
    spline_derivatives: list[float] = field(default_factory=list)
    derivative_errors: list[float] = field(default_factory=list)
    second_derivatives: list[float] = field(default_factory=list)
    spline_second_derivatives: list[float] = field(default_factory=list)
    second_derivative_errors: list[float] = field(default_factory=list)
    max_error: float = 0.0
    max_derivative_error: float = 0.0
    max_second_derivative_error: float = 0.0


def spline_error(
    count: int,
    function: TestFunction | int,
    oscillation: Oscillation | int,
    spline: CubicSpline,
) -> ErrorTable:
    """Compare the function with the spline at ``count`` equally spaced points."""
    if count < 1:
        raise ValueError("control grid size must be positive")
    function = TestFunction(function)
    oscillation = Oscillation(oscillation)
    start, end = spline.nodes[0], spline.nodes[-1]
    step = (end - start) / count
    table = ErrorTable()
    x = start
    for _ in range(count):
        table.points.append(x)

        s = spline.value(x)
        f = value(x, function, oscillation)
        diff = abs(f - s)
        table.spline_values.append(s)
        table.values.append(f)
        table.errors.append(diff)
        table.max_error = max(table.max_error, diff)

        s1 = spline.derivative(x)
        f1 = first_derivative(x, function, oscillation)
        diff = abs(f1 - s1)
        table.spline_derivatives.append(s1)
        table.derivatives.append(f1)
        table.derivative_errors.append(diff)
        table.max_derivative_error = max(table.max_derivative_error, diff)

        s2 = spline.second_derivative(x)
        f2 = second_derivative(x, function, oscillation)
        diff = abs(f2 - s2)
        table.spline_second_derivatives.append(s2)
        table.second_derivatives.append(f2)
        table.second_derivative_errors.append(diff)
        table.max_second_derivative_error = max(table.max_second_derivative_error, diff)

        x += step
    return table