#!/usr/bin/env python3
"""
ORM Benchmark Script - runs the same CRUD workload through every adapter.

Each adapter gets a fresh in-memory SQLite store, performs create -> read ->
update -> delete for every workload item, and is timed end to end. The first
failure stops the whole benchmark; there is no partial ranking.
"""

import argparse
import functools
import logging
import sys

from orm_bench.adapters import ADAPTERS
from orm_bench.errors import HarnessError
from orm_bench.report import format_duration, render_report
from orm_bench.runner import run_all
from orm_bench.workload import WORKLOAD_SIZE, Workload


def select_adapters(name_filter: str = None) -> list:
    """Adapter classes in invocation order, optionally filtered by name."""
    if not name_filter:
        return list(ADAPTERS)
    needle = name_filter.lower()
    return [cls for cls in ADAPTERS if needle in cls.name.lower()]


def print_start(adapter) -> None:
    print(f"Testing {adapter.name}... ", end="", flush=True)


def print_result(result) -> None:
    print(f"✅ {format_duration(result.duration)}")


def main(argv=None) -> int:
    """Main benchmark function."""
    parser = argparse.ArgumentParser(description="Python ORM CRUD Benchmark")
    parser.add_argument("--count", type=int, default=WORKLOAD_SIZE,
                        help=f"Create/read/update/delete cycles per adapter (default: {WORKLOAD_SIZE})")
    parser.add_argument("--filter", help="Only run adapters whose name contains this text (e.g. 'sqlalchemy')")
    parser.add_argument("--echo", action="store_true", help="Log every SQL statement (slows the run down)")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if args.echo:
        logging.getLogger("orm_bench").setLevel(logging.INFO)

    if args.count <= 0:
        parser.error("--count must be positive")

    adapters = select_adapters(args.filter)
    if not adapters:
        print(f"❌ No adapters match filter {args.filter!r}")
        return 2

    print("🚀 Python ORM Benchmark Testing")
    print("=" * 31)
    print(f"📊 Workload: {args.count} create/read/update/delete cycles")
    print(f"🧩 Adapters: {[cls.name for cls in adapters]}")
    if args.filter:
        print(f"🔍 Filter: {args.filter}")

    print("\n📊 Running Performance Benchmarks...")
    factories = [functools.partial(cls, echo=args.echo) for cls in adapters]
    try:
        results = run_all(factories, Workload(args.count), on_start=print_start, on_result=print_result)
    except HarnessError as e:
        print(f"❌ {e}")
        return 1

    print(render_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
