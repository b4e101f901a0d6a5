"""Rank benchmark results and render the summary printed by ``run_benchmark.py``."""

from typing import List, Sequence

from orm_bench.runner import BenchmarkResult


def fastest(results: Sequence[BenchmarkResult]) -> BenchmarkResult:
    """Return the result with the smallest duration.

    Ties go to whichever result comes first, i.e. the adapter that ran first.
    """
    if not results:
        raise ValueError("cannot rank an empty set of results")

    best = results[0]
    for result in results[1:]:
        if result.duration < best.duration:
            best = result
    return best


def format_duration(seconds: float) -> str:
    """Human-readable duration, e.g. ``812.40µs``, ``35.12ms`` or ``1.25s``."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


def render_report(results: Sequence[BenchmarkResult]) -> str:
    """Results section plus the fastest adapter, one line per adapter in run order."""
    winner = fastest(results)
    name_width = max(len(r.name) for r in results) + 1

    lines: List[str] = [
        "",
        "🏆 BENCHMARK RESULTS",
        "=" * 20,
    ]
    for result in results:
        label = f"{result.name}:"
        lines.append(f"{label:<{name_width}} {format_duration(result.duration):>10}  (RSS change {result.rss_delta_mb:+.1f} MB)")

    lines.append("")
    lines.append(f"🥇 Fastest: {winner.name} ({format_duration(winner.duration)})")
    return "\n".join(lines)
