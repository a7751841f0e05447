import pytest

from splinelab.cli import build_parser, main
from splinelab.functions import Oscillation, TestFunction
from splinelab.report import (
    BoundaryCondition,
    Problem,
    coefficient_rows,
    compare,
    format_coefficient_table,
    format_comparison,
)


def test_coefficients_prints_one_row_per_interval(capsys):
    assert main(["coefficients", "-n", "5"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 6
    assert lines[0].split()[0] == "i"


def test_coefficients_match_report_module(capsys):
    assert main(["coefficients", "-n", "4", "-o", "cos10"]) == 0
    out = capsys.readouterr().out
    problem = Problem(
        function=TestFunction.LOG_OVER_SHIFTED,
        oscillation=Oscillation.COS_10,
        a=1.0,
        b=2.0,
        n=4,
        boundary=BoundaryCondition.NATURAL,
    )
    assert out.strip() == format_coefficient_table(coefficient_rows(problem))


def test_phi_defaults_to_its_interval_and_exact_boundary(capsys):
    assert main(["coefficients", "-f", "phi", "-n", "4"]) == 0
    out = capsys.readouterr().out
    problem = Problem(
        function=TestFunction.PIECEWISE_CUBIC,
        a=-1.0,
        b=1.0,
        n=4,
        boundary=BoundaryCondition.EXACT_SECOND_DERIVATIVE,
    )
    assert out.strip() == format_coefficient_table(coefficient_rows(problem))
    first_row = out.strip().splitlines()[1].split()
    assert first_row[1] == "-1.000000"


def test_compare_reports_control_grid(capsys):
    assert main(["compare", "-n", "3"]) == 0
    out = capsys.readouterr().out
    assert "Control grid N=30" in out
    assert "Spline grid n=3" in out
    assert out.strip() == format_comparison(compare(Problem(n=3)))


def test_compare_with_custom_interval(capsys):
    assert main(["compare", "-f", "sin-x", "-a", "1", "-b", "3", "-n", "2"]) == 0
    out = capsys.readouterr().out
    problem = Problem(function=TestFunction.SIN_OVER_X, a=1.0, b=3.0, n=2)
    assert out.strip() == format_comparison(compare(problem))


def test_compare_saves_plot(tmp_path, capsys):
    target = tmp_path / "chart.png"
    assert main(["compare", "-n", "2", "--plot", str(target), "--kind", "second"]) == 0
    assert target.stat().st_size > 0
    assert str(target) in capsys.readouterr().out


def test_non_positive_grid_is_reported(capsys):
    assert main(["coefficients", "-n", "0"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_domain_error_is_reported(capsys):
    assert main(["compare", "-f", "log-x", "-a", "-3", "-b", "-2", "-n", "2"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_non_integer_grid_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["coefficients", "-n", "abc"])
    assert excinfo.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 2


def test_parser_defaults():
    args = build_parser().parse_args(["compare"])
    assert args.function == "log-shifted"
    assert args.oscillation == "none"
    assert args.n == 20
    assert args.kind == "function"
    assert args.plot is None