"""Tests for ranking and report rendering."""

import pytest

from orm_bench.report import fastest, format_duration, render_report
from orm_bench.runner import BenchmarkResult


def _results(**durations_ms):
    return [BenchmarkResult(name, ms / 1000) for name, ms in durations_ms.items()]


def test_first_of_tied_minimums_wins():
    results = _results(A=120, B=95, C=140, D=95)
    assert fastest(results).name == "B"


def test_unique_minimum_wins_regardless_of_position():
    assert fastest(_results(A=120, B=130, C=140, D=95)).name == "D"
    assert fastest(_results(A=90, B=130, C=140, D=95)).name == "A"


def test_all_equal_picks_first():
    assert fastest(_results(A=10, B=10, C=10)).name == "A"


def test_empty_results_cannot_be_ranked():
    with pytest.raises(ValueError):
        fastest([])


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0008124, "812.40µs"),
        (0.03512, "35.12ms"),
        (1.25, "1.25s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_report_lists_every_adapter_and_one_fastest_line():
    results = _results(A=120, B=95, C=140, D=95)
    report = render_report(results)
    lines = report.splitlines()

    assert "🏆 BENCHMARK RESULTS" in lines
    for name in "ABCD":
        assert sum(line.startswith(f"{name}:") for line in lines) == 1
    fastest_lines = [line for line in lines if "Fastest:" in line]
    assert fastest_lines == ["🥇 Fastest: B (95.00ms)"]


def test_report_preserves_run_order():
    report = render_report(_results(Z=3, Y=2, X=1))
    order = [line.split(":")[0] for line in report.splitlines() if line[:2] in ("Z:", "Y:", "X:")]
    assert order == ["Z", "Y", "X"]


def test_report_shows_memory_change_per_run():
    results = [BenchmarkResult("A", 0.01, 1.5), BenchmarkResult("B", 0.02, -0.5)]
    lines = render_report(results).splitlines()

    assert any(line.startswith("A:") and line.endswith("(RSS change +1.5 MB)") for line in lines)
    assert any(line.startswith("B:") and line.endswith("(RSS change -0.5 MB)") for line in lines)
