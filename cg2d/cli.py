from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .geom import EPS
from .errors import MalformedInput
from .textio import read_points, write_hull
from .pipeline import BACKENDS, convex_hull

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "cg2d",
        description="Convex hull of a planar point set (QuickHull).",
    )
    parser.add_argument("--input", type=str, default=None,
                        help="read points from a file instead of stdin")
    parser.add_argument("--output", type=str, default=None,
                        help="write the hull to a file instead of stdout")
    parser.add_argument("--interactive", action="store_true",
                        help="prompt for the count and every point")
    parser.add_argument("--backend", choices=BACKENDS, default="internal")
    parser.add_argument("--eps", type=float, default=EPS,
                        help="collinearity tolerance relative to the point-set extent (default: %(default)s)")
    parser.add_argument("--dedup", action="store_true",
                        help="drop duplicate points before building the hull")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    _setup_logging(args.verbose)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    # 1) точки
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as fh:
                points = read_points(fh)
        else:
            points = read_points(stdin, prompt=stdout if args.interactive else None)
    except MalformedInput as e:
        logger.error("Malformed input: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    # 2) оболонка
    try:
        _, hull = convex_hull(points, backend=args.backend, dedup=args.dedup, eps=args.eps)
    except RuntimeError as e:
        # відсутній SciPy або QhullError (підклас RuntimeError)
        logger.error("Hull computation failed (backend=%s): %s", args.backend, e)
        return 1

    # 3) вивід
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            write_hull(f, hull)
        logger.info("Wrote %s hull vertices to %s", len(hull), args.output)
    else:
        write_hull(stdout, hull)
    return 0
