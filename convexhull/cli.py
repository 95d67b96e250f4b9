"""Command line entry point: read points, compute the hull, write it out."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .geom import Point
from .scan import graham_scan_fast, graham_scan_slow
from .timer import Timer

_RULE = "=" * 56
_ALGORITHMS = {
    "slow": ("Slow", graham_scan_slow),
    "fast": ("Fast", graham_scan_fast),
}


def read_points(path) -> list[Point]:
    """Read a point count followed by that many ``x y`` pairs."""
    with open(path, encoding="utf-8") as fh:
        tokens = fh.read().split()
    if not tokens:
        raise ValueError(f"{path}: input file is empty")
    try:
        count = int(tokens[0])
    except ValueError as exc:
        raise ValueError(f"{path}: invalid point count {tokens[0]!r}") from exc
    if count < 0:
        raise ValueError(f"{path}: point count must not be negative")
    coords = tokens[1 : 1 + 2 * count]
    if len(coords) < 2 * count:
        raise ValueError(f"{path}: expected {count} points, file is too short")
    try:
        values = [float(token) for token in coords]
    except ValueError as exc:
        raise ValueError(f"{path}: invalid coordinate") from exc
    it = iter(values)
    return [Point(x, y) for x, y in zip(it, it)]


def write_hull(path, hull: Iterable[Point]) -> None:
    """Write the hull size followed by one ``x y`` line per point."""
    points = list(hull)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"{len(points)}\n")
        fh.writelines(f"{p.x:.6f} {p.y:.6f}\n" for p in points)


def _prompt_token(message: str) -> str:
    print(message)
    while True:
        words = input().split()
        if words:
            return words[0]


def _prompt_for_points() -> list[Point]:
    while True:
        name = _prompt_token("Please enter the file name of your input data:")
        try:
            return read_points(name)
        except FileNotFoundError:
            print("Error! File Not Found", file=sys.stderr)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="convexhull", description="Compute a convex hull with the Graham scan."
    )
    parser.add_argument("input", nargs="?", help="input data file")
    parser.add_argument("prefix", nargs="?", help="output filename prefix")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(_ALGORITHMS), default="fast",
        help="sorting algorithm used by the scan",
    )
    args = parser.parse_args(argv)
    label, scan = _ALGORITHMS[args.algorithm]

    try:
        points = read_points(args.input) if args.input else _prompt_for_points()

        print(_RULE)
        print(f"   Running Graham Scan Algorithim ({label} Sorting Algo)")
        print(_RULE)
        with Timer() as timer:
            hull = scan(points)
        print(f"          Execution completed in {timer.elapsed_ms:10f}ms")
        print(_RULE)
        print()

        prefix = args.prefix or _prompt_token("Please enter output filename prefix:")
        write_hull(f"{prefix}-{args.algorithm}.txt", hull)
    except (OSError, ValueError) as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error! Unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())