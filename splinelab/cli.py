"""Command line front end: spline coefficient tables, comparisons and charts."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .functions import Oscillation, TestFunction
from .plot import PlotKind, plot_comparison
from .report import (
    BoundaryCondition,
    Problem,
    coefficient_rows,
    compare,
    default_interval,
    format_coefficient_table,
    format_comparison,
)

FUNCTIONS = {
    "phi": TestFunction.PIECEWISE_CUBIC,
    "log-shifted": TestFunction.LOG_OVER_SHIFTED,
    "log-x": TestFunction.LOG_OVER_X,
    "sin-x": TestFunction.SIN_OVER_X,
}

OSCILLATIONS = {
    "none": Oscillation.NONE,
    "cos10": Oscillation.COS_10,
    "cos100": Oscillation.COS_100,
}

BOUNDARIES = {
    "natural": BoundaryCondition.NATURAL,
    "exact": BoundaryCondition.EXACT_SECOND_DERIVATIVE,
}

PLOT_KINDS = {kind.value: kind for kind in PlotKind}


def _problem_options() -> argparse.ArgumentParser:
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "-f",
        "--function",
        choices=sorted(FUNCTIONS),
        default="log-shifted",
        help="function to interpolate (default: log-shifted)",
    )
    options.add_argument(
        "-o",
        "--oscillation",
        choices=list(OSCILLATIONS),
        default="none",
        help="oscillating term added to the function (default: none)",
    )
    options.add_argument(
        "-a", type=float, default=None, help="left end of the interval"
    )
    options.add_argument(
        "-b", type=float, default=None, help="right end of the interval"
    )
    options.add_argument(
        "-n", type=int, default=20, help="number of spline intervals (default: 20)"
    )
    options.add_argument(
        "--boundary",
        choices=list(BOUNDARIES),
        default=None,
        help="second-derivative conditions at the ends "
        "(default: exact for phi, natural otherwise)",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    """Parser for the ``coefficients`` and ``compare`` commands."""
    options = _problem_options()
    parser = argparse.ArgumentParser(
        prog="splinelab",
        description="Interpolate a function with a cubic spline and measure the error.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    commands.add_parser(
        "coefficients",
        parents=[options],
        help="print the spline coefficients for every interval",
    )
    comparison = commands.add_parser(
        "compare",
        parents=[options],
        help="compare function and spline on a control grid ten times finer",
    )
    comparison.add_argument(
        "--plot", metavar="PATH", default=None, help="save a chart to PATH"
    )
    comparison.add_argument(
        "--kind",
        choices=list(PLOT_KINDS),
        default=PlotKind.FUNCTION.value,
        help="what to chart (default: function)",
    )
    return parser


def _problem(args: argparse.Namespace) -> Problem:
    function = FUNCTIONS[args.function]
    default_a, default_b = default_interval(function)
    if args.boundary is None:
        boundary = (
            BoundaryCondition.EXACT_SECOND_DERIVATIVE
            if function is TestFunction.PIECEWISE_CUBIC
            else BoundaryCondition.NATURAL
        )
    else:
        boundary = BOUNDARIES[args.boundary]
    return Problem(
        function=function,
        oscillation=OSCILLATIONS[args.oscillation],
        a=default_a if args.a is None else args.a,
        b=default_b if args.b is None else args.b,
        n=args.n,
        boundary=boundary,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        problem = _problem(args)
        if args.command == "coefficients":
            print(format_coefficient_table(coefficient_rows(problem)))
        else:
            comparison = compare(problem)
            print(format_comparison(comparison))
            if args.plot is not None:
                target = plot_comparison(comparison, PLOT_KINDS[args.kind], args.plot)
                print(f"Chart saved to {target}")
    except (ValueError, ArithmeticError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())