import pytest

from splinelab.plot import PlotKind, plot_comparison, series
from splinelab.report import Problem, compare


@pytest.fixture(scope="module")
def comparison():
    return compare(Problem(n=4))


def test_function_series_names(comparison):
    data = series(comparison, PlotKind.FUNCTION)
    assert list(data) == ["F(x)", "S(x)", "F(x)-S(x)"]


def test_derivative_series_names(comparison):
    assert list(series(comparison, PlotKind.FIRST_DERIVATIVE)) == [
        "F'(x)",
        "S'(x)",
        "F'(x)-S'(x)",
    ]
    assert list(series(comparison, "second")) == ["F''(x)", "S''(x)", "F''(x)-S''(x)"]


def test_series_follow_rows(comparison):
    data = series(comparison, PlotKind.FUNCTION)
    rows = comparison.rows
    assert len(data["F(x)"]) == len(rows) == comparison.control_size
    assert data["F(x)"] == [(r.x, r.f) for r in rows]
    assert data["S(x)"] == [(r.x, r.s) for r in rows]
    assert data["F(x)-S(x)"] == [(r.x, r.error) for r in rows]


def test_second_derivative_series_values(comparison):
    data = series(comparison, PlotKind.SECOND_DERIVATIVE)
    assert [y for _, y in data["S''(x)"]] == [r.s2 for r in comparison.rows]
    assert [y for _, y in data["F''(x)-S''(x)"]] == [r.error2 for r in comparison.rows]


def test_error_curve_is_non_negative(comparison):
    data = series(comparison, PlotKind.FIRST_DERIVATIVE)
    assert all(y >= 0 for _, y in data["F'(x)-S'(x)"])


def test_unknown_kind_raises(comparison):
    with pytest.raises(ValueError):
        series(comparison, "third")


def test_kind_names_property(comparison):
    assert PlotKind.FUNCTION.names == ("F(x)", "S(x)", "F(x)-S(x)")
    assert tuple(series(comparison, PlotKind.FUNCTION)) == PlotKind.FUNCTION.names


def test_plot_writes_png(comparison, tmp_path):
    target = tmp_path / "chart.png"
    result = plot_comparison(comparison, PlotKind.FUNCTION, target)
    assert result == target
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_writes_svg(comparison, tmp_path):
    target = tmp_path / "chart.svg"
    plot_comparison(comparison, "first", str(target))
    text = target.read_text(encoding="utf-8")
    assert "<svg" in text


def test_plot_rejects_unknown_kind(comparison, tmp_path):
    target = tmp_path / "chart.png"
    with pytest.raises(ValueError):
        plot_comparison(comparison, "nothing", target)
    assert not target.exists()