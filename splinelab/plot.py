"""Charts of a function against its spline, for values and derivatives."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import NamedTuple

from matplotlib.figure import Figure

from .report import Comparison


class _Style(NamedTuple):
    name: str
    field: str
    color: str
    width: float


class PlotKind(Enum):
    """Which quantities to chart."""

    FUNCTION = "function"
    FIRST_DERIVATIVE = "first"
    SECOND_DERIVATIVE = "second"

    @property
    def _styles(self) -> tuple[_Style, _Style, _Style]:
        return _STYLES[self]

    @property
    def names(self) -> tuple[str, str, str]:
        """Legend names of the function, spline and error curves."""
        first, second, third = self._styles
        return first.name, second.name, third.name


_STYLES = {
    PlotKind.FUNCTION: (
        _Style("F(x)", "f", "blue", 2),
        _Style("S(x)", "s", "green", 2),
        _Style("F(x)-S(x)", "error", "red", 1),
    ),
    PlotKind.FIRST_DERIVATIVE: (
        _Style("F'(x)", "f1", "blue", 2),
        _Style("S'(x)", "s1", "green", 2),
        _Style("F'(x)-S'(x)", "error1", "red", 1),
    ),
    PlotKind.SECOND_DERIVATIVE: (
        _Style("F''(x)", "f2", "blue", 2),
        _Style("S''(x)", "s2", "green", 2),
        _Style("F''(x)-S''(x)", "error2", "red", 1),
    ),
}


def series(
    comparison: Comparison, kind: PlotKind | str
) -> dict[str, list[tuple[float, float]]]:
    """Points of the function, spline and error curves, keyed by legend name."""
    kind = PlotKind(kind)
    return {
        style.name: [(row.x, getattr(row, style.field)) for row in comparison.rows]
        for style in kind._styles
    }


def plot_comparison(
    comparison: Comparison, kind: PlotKind | str, path: str | Path
) -> Path:
    """Draw the chosen curves and save the chart to ``path``; the format follows the suffix."""
    kind = PlotKind(kind)
    data = series(comparison, kind)
    figure = Figure(figsize=(12, 6))
    axes = figure.add_subplot()
    for style in kind._styles:
        points = data[style.name]
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        axes.plot(xs, ys, label=style.name, color=style.color, linewidth=style.width)
    axes.set_xlabel("x")
    axes.set_ylabel("Значения")
    axes.relim()
    axes.autoscale_view()
    axes.legend(loc="center left", bbox_to_anchor=(1.0, 0.5))
    figure.tight_layout()
    target = Path(path)
    figure.savefig(target)
    return target