"""
Top-K Stream Command-Line Interface (CLI)

Runs an integer stream through a BoundedMinHeap and prints or exports the
largest distinct values. It ties together:
- Stream sources (reference range, alternating sign, file/stdin input)
- The runner that feeds the heap
- Rendering/CSV export and the push/pop benchmark

Usage examples:
    python -m topk.cli run
    python -m topk.cli run --keep 10 --start 1 --end 1000 --sorted
    python -m topk.cli run --input numbers.txt
    python -m topk.cli export-csv --path top50.csv --alternate
    python -m topk.cli -v bench --path bench.csv
"""

import argparse
import logging
import sys

from . import bench
from .stream import report, runner, sources

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: build the stream selected by the common options
# -------------------------------------------------------------------
def build_stream(args):
    """Return the integer iterable described by the stream options."""
    if args.input == "-":
        values = sources.read_integers(sys.stdin)
    elif args.input:
        # Read eagerly so the file can be closed before the run starts.
        with open(args.input, "r", encoding="utf-8") as f:
            values = list(sources.read_integers(f))
    else:
        values = sources.integer_range(args.start, args.end)

    if args.alternate:
        values = sources.alternating_sign(values)
    return values


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_run(args):
    """Run the stream and print the retained values."""
    heap, summary = runner.run(build_stream(args), keep=args.keep)
    print(report.render_heap(heap, sort=args.sorted))
    logger.debug("summary: %s", summary)


def cmd_export_csv(args):
    """Run the stream and export the retained values to a CSV file."""
    heap, _ = runner.run(build_stream(args), keep=args.keep)
    n = report.write_csv(heap, args.path)
    print(f"Exported {n} values to {args.path}")


def cmd_bench(args):
    """Benchmark push/pop and write the timings to a CSV file."""
    rows = bench.run_benchmarks(
        args.path,
        base_input=args.base_input,
        steps=args.steps,
        capacity=args.keep,
    )
    print(f"Benchmark completed. {rows} results saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def _add_stream_options(s):
    s.add_argument("--keep", type=int, default=sources.DEFAULT_KEEP, help="Number of values to retain")
    s.add_argument("--start", type=int, default=sources.DEFAULT_START)
    s.add_argument("--end", type=int, default=sources.DEFAULT_END)
    s.add_argument("--input", help="Read integers from a file ('-' for stdin) instead of the range")
    s.add_argument("--alternate", action="store_true", help="Negate even values before pushing")


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m topk.cli", description="Top-K stream CLI")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("run", help="Print the largest distinct values of a stream")
    _add_stream_options(s)
    s.add_argument("--sorted", action="store_true", help="Print ascending instead of heap order")
    s.set_defaults(func=cmd_run)

    s = sub.add_parser("export-csv", help="Export the largest values to CSV")
    _add_stream_options(s)
    s.add_argument("--path", required=True)
    s.set_defaults(func=cmd_export_csv)

    s = sub.add_parser("bench", help="Benchmark push/pop")
    s.add_argument("--path", required=True)
    s.add_argument("--keep", type=int, default=sources.DEFAULT_KEEP)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=8)
    s.set_defaults(func=cmd_bench)

    return p


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m topk.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.func(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
