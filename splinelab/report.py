"""Spline problems, coefficient tables and spline-versus-function comparison reports."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from .functions import (
    CubicSpline,
    Oscillation,
    TestFunction,
    second_derivative,
    spline_coefficients,
    spline_error,
    value,
)

CONTROL_GRID_FACTOR = 10
DEFAULT_INTERVAL = (1.0, 2.0)
PIECEWISE_INTERVAL = (-1.0, 1.0)


class BoundaryCondition(Enum):
    """How the spline's second derivative is fixed at the interval ends."""

    NATURAL = "natural"
    EXACT_SECOND_DERIVATIVE = "exact"

    @property
    def label(self) -> str:
        if self is BoundaryCondition.NATURAL:
            return "S''(a)=S''(b)=0"
        return "F''(a)=S''(a)  F''(b)=S''(b)"


def default_interval(function: TestFunction | int) -> tuple[float, float]:
    """Interval offered by default for the chosen function."""
    if TestFunction(function) is TestFunction.PIECEWISE_CUBIC:
        return PIECEWISE_INTERVAL
    return DEFAULT_INTERVAL


@dataclass
class Problem:
    """An interpolation task: function, interval, grid size and boundary conditions."""

    function: TestFunction = TestFunction.LOG_OVER_SHIFTED
    oscillation: Oscillation = Oscillation.NONE
    a: float = DEFAULT_INTERVAL[0]
    b: float = DEFAULT_INTERVAL[1]
    n: int = 20
    boundary: BoundaryCondition = BoundaryCondition.NATURAL

    def __post_init__(self) -> None:
        self.function = TestFunction(self.function)
        self.oscillation = Oscillation(self.oscillation)
        self.boundary = BoundaryCondition(self.boundary)
        self.a = float(self.a)
        self.b = float(self.b)
        if isinstance(self.n, bool) or int(self.n) != self.n:
            raise ValueError(f"number of intervals must be an integer, got {self.n!r}")
        self.n = int(self.n)
        if self.n < 1:
            raise ValueError("number of intervals must be positive")

    @property
    def step(self) -> float:
        return (self.b - self.a) / self.n

    def boundary_values(self) -> tuple[float, float]:
        """Second-derivative values imposed at ``a`` and ``b``."""
        if self.boundary is BoundaryCondition.NATURAL:
            return 0.0, 0.0
        return (
            second_derivative(self.a, self.function, self.oscillation),
            second_derivative(self.b, self.function, self.oscillation),
        )

    def nodes(self) -> list[float]:
        """The ``n + 1`` equally spaced spline nodes."""
        h = self.step
        return [self.a + i * h for i in range(self.n + 1)]

    def node_values(self) -> list[float]:
        """Function values at the spline nodes."""
        return [value(x, self.function, self.oscillation) for x in self.nodes()]

    def build_spline(self) -> CubicSpline:
        """Construct the interpolating cubic spline."""
        mu1, mu2 = self.boundary_values()
        coefficients = spline_coefficients(self.n, mu1, mu2, self.step, self.node_values())
        return CubicSpline(nodes=self.nodes(), coefficients=coefficients)


@dataclass(frozen=True)
class CoefficientRow:
    """Spline coefficients of one interval."""

    i: int
    x: float
    f: float
    a: float
    b: float
    c: float
    d: float


@dataclass(frozen=True)
class ComparisonRow:
    """Function and spline at one control point."""

    i: int
    x: float
    f: float
    s: float
    error: float
    f1: float
    s1: float
    error1: float
    f2: float
    s2: float
    error2: float


@dataclass
class Comparison:
    """Result of comparing a function with its spline on the control grid."""

    grid_size: int
    control_size: int
    rows: list[ComparisonRow] = field(default_factory=list)
    max_error: float = 0.0
    max_error_index: int = -1
    max_error_x: float = 0.0
    max_derivative_error: float = 0.0
    max_derivative_error_index: int = -1
    max_derivative_error_x: float = 0.0
    max_second_derivative_error: float = 0.0
    max_second_derivative_error_index: int = -1
    max_second_derivative_error_x: float = 0.0


def coefficient_rows(problem: Problem) -> list[CoefficientRow]:
    """One row of coefficients for each interval of the spline grid."""
    spline = problem.build_spline()
    k = spline.coefficients
    xs = spline.nodes
    fs = problem.node_values()
    return [
        CoefficientRow(i=i, x=x, f=f, a=a, b=b, c=c, d=d)
        for i, (x, f, a, b, c, d) in enumerate(zip(xs[: problem.n], fs, k.a, k.b, k.c, k.d))
    ]


def _last_maximum(
    errors: Sequence[float], points: Sequence[float], start: float
) -> tuple[float, int, float]:
    """Largest error with the last index reaching it and its point."""
    best, index, where = start, -1, 0.0
    for i, (err, x) in enumerate(zip(errors, points)):
        if err >= best:
            best, index, where = err, i, x
    return best, index, where


def compare(problem: Problem) -> Comparison:
    """Evaluate function and spline on a grid ten times finer than the spline's."""
    spline = problem.build_spline()
    count = CONTROL_GRID_FACTOR * problem.n
    table = spline_error(count, problem.function, problem.oscillation, spline)
    step = (problem.b - problem.a) / count
    xs = [problem.a + i * step for i in range(count)]

    rows = [
        ComparisonRow(i, x, f, s, e, f1, s1, e1, f2, s2, e2)
        for i, (x, f, s, e, f1, s1, e1, f2, s2, e2) in enumerate(
            zip(
                xs,
                table.values,
                table.spline_values,
                table.errors,
                table.derivatives,
                table.spline_derivatives,
                table.derivative_errors,
                table.second_derivatives,
                table.spline_second_derivatives,
                table.second_derivative_errors,
            )
        )
    ]
    e0, i0, x0 = _last_maximum(table.errors, xs, table.max_error)
    e1, i1, x1 = _last_maximum(table.derivative_errors, xs, table.max_derivative_error)
    e2, i2, x2 = _last_maximum(
        table.second_derivative_errors, xs, table.max_second_derivative_error
    )
    return Comparison(
        grid_size=problem.n,
        control_size=count,
        rows=rows,
        max_error=e0,
        max_error_index=i0,
        max_error_x=x0,
        max_derivative_error=e1,
        max_derivative_error_index=i1,
        max_derivative_error_x=x1,
        max_second_derivative_error=e2,
        max_second_derivative_error_index=i2,
        max_second_derivative_error_x=x2,
    )


def _fixed(number: float, digits: int = 6) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    return f"{number:.{digits}f}"


def _render(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    body = [list(row) for row in rows]
    widths = [len(h) for h in headers]
    for row in body:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    lines = ["  ".join(h.rjust(w) for h, w in zip(headers, widths))]
    lines.extend("  ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in body)
    return "\n".join(lines)


COEFFICIENT_HEADERS = ("i", "xᵢ", "fᵢ", "aᵢ", "bᵢ", "cᵢ", "dᵢ")
COMPARISON_HEADERS = (
    "i",
    "xi",
    "Fi",
    "Si",
    "|Fi-Si|",
    "F'i",
    "S'i",
    "|F'i-S'i|",
    "F''i",
    "S''i",
    "|F''i-S''i|",
)


def format_coefficient_table(rows: Iterable[CoefficientRow]) -> str:
    """Render spline coefficients as an aligned text table."""
    return _render(
        COEFFICIENT_HEADERS,
        (
            [str(r.i)] + [_fixed(v) for v in (r.x, r.f, r.a, r.b, r.c, r.d)]
            for r in rows
        ),
    )


def format_comparison(comparison: Comparison) -> str:
    """Render the comparison table followed by a summary of the largest errors."""
    table = _render(
        COMPARISON_HEADERS,
        (
            [str(r.i)]
            + [
                _fixed(v)
                for v in (r.x, r.f, r.s, r.error, r.f1, r.s1, r.error1, r.f2, r.s2, r.error2)
            ]
            for r in comparison.rows
        ),
    )
    c = comparison
    summary = [
        f"Spline grid n={c.grid_size}",
        f"Control grid N={c.control_size}",
        f"max |Fj-Sj| = {_fixed(c.max_error, 8)} at j={c.max_error_index}"
        f" x={_fixed(c.max_error_x, 8)}",
        f"max |F'j-S'j| = {_fixed(c.max_derivative_error, 8)}"
        f" at j={c.max_derivative_error_index} x={_fixed(c.max_derivative_error_x, 8)}",
        f"max |F''j-S''j| = {_fixed(c.max_second_derivative_error, 8)}"
        f" at j={c.max_second_derivative_error_index}"
        f" x={_fixed(c.max_second_derivative_error_x, 8)}",
    ]
    return table + "\n\n" + "\n".join(summary)