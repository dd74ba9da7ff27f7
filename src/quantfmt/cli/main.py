"""Command line entry point: ``quantfmt <kind> VALUE...``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from quantfmt.cli.display import print_error, print_results
from quantfmt.formatter import QuantityFormatter
from quantfmt.loader import load_config

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s - %(name)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantfmt",
        description="Format raw counts, byte sizes, floats and time deltas for display.",
    )
    parser.add_argument("--capacity", type=int, default=None, help="Truncate results to fit a buffer of this size")
    parser.add_argument("--config", default=None, help="YAML formatter config")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="kind", required=True)
    sub.add_parser("count", help="Unscaled counts (k/M/G/T)").add_argument("values", nargs="+", type=int)
    sub.add_parser("mem", help="Byte sizes (B/kB/MB/GB/TB)").add_argument("values", nargs="+", type=int)
    sub.add_parser("float", help="Floating point values").add_argument("values", nargs="+", type=float)

    delta = sub.add_parser("delta", help="Time since an event, in milliseconds")
    delta.add_argument("current_ms", type=int)
    delta.add_argument("event_ms", type=int, nargs="+")
    delta.add_argument("--no-sentinel", action="store_true", help="Show the elapsed time even when the event time is 0")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
        if args.capacity is not None:
            config.capacity = args.capacity
        if getattr(args, "no_sentinel", False):
            config.sentinel = False
        fmt = QuantityFormatter.from_config(config)

        if args.kind == "count":
            rows = [(f"{v:,}", fmt.count(v)) for v in args.values]
        elif args.kind == "mem":
            rows = [(f"{v:,} bytes", fmt.memory_size(v)) for v in args.values]
        elif args.kind == "float":
            rows = [(repr(v), fmt.float_value(v)) for v in args.values]
        else:
            rows = [
                (f"{args.current_ms - e:,} ms" if e else "-", fmt.time_delta(args.current_ms, e))
                for e in args.event_ms
            ]
    except (ValueError, KeyError, FileNotFoundError) as e:
        logger.debug("Formatting failed", exc_info=True)
        print_error(str(e))
        return 1

    print_results(args.kind, rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
