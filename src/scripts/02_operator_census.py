#!/usr/bin/env python3
"""
OPERATOR CENSUS - Every operator on every seed
==============================================

Goal: One table row per (seed, operator) pair, for checking operator
      topology against the expected counts at a glance.

EXPECTED
--------
    d:  V' = F, E' = E, F' = V, chi = 2
    k:  V' = V + F, E' = 3E, F' = 2E, chi = 2
    t:  V' = V + 2E, E' = 3E, F' = F, open surface (2E vertices referenced)

At this script's default chop = 0.5 the two truncation points on each edge
coincide, so the coincident column for t equals E.
"""

import argparse
import logging
import sys
from pathlib import Path

# Path setup
_src_dir = Path(__file__).resolve().parents[2] / 'src'
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from conway_math.spec.constants import DEFAULT_CENTROID, CENTROID_METHODS
from conway_math.builders import SolidKind, make_seed
from conway_math.notation import Operation, Specification
from conway_math.analysis import summarize_polyhedron


def census(edge_length: float, chop: float, centroid_method: str):
    """Yield (notation, summary) for each seed and each seed+operator."""
    for kind in SolidKind:
        seed = make_seed(kind, edge_length)
        yield kind.letter, summarize_polyhedron(seed.polyhedron)
        for op in Operation:
            spec = Specification([seed, op], chop=chop, centroid_method=centroid_method)
            yield spec.notation(), summarize_polyhedron(spec.produce())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="V/E/F census of each operator on each seed")
    parser.add_argument("--edge-length", type=float, default=1.0)
    parser.add_argument("--chop", type=float, default=0.5,
                        help="Truncation fraction (default 0.5, edge midpoints)")
    parser.add_argument("--centroid", choices=CENTROID_METHODS, default=DEFAULT_CENTROID)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s:%(name)s:%(message)s")

    print("=" * 78)
    print(f"OPERATOR CENSUS (edge={args.edge_length}, chop={args.chop}, centroid={args.centroid})")
    print("=" * 78)
    print(f"  {'name':>5s} {'V':>5s} {'E':>5s} {'F':>5s} {'chi':>4s} {'coinc':>6s} {'radius dev':>11s}")
    print("  " + "-" * 50)

    for notation, s in census(args.edge_length, args.chop, args.centroid):
        if len(notation) == 1:
            print()
        print(f"  {notation:>5s} {s['V']:5d} {s['E']:5d} {s['F']:5d} {s['chi']:4d} "
              f"{s['coincident_pairs']:6d} {s['max_radius_deviation']:11.2e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
