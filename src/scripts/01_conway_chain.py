#!/usr/bin/env python3
"""
CONWAY CHAIN - Stage-by-stage report of one Conway description
===============================================================

Goal: Build a seed, apply a chain of operators and print the topology
      after every stage, so the effect of each operator is visible.

INPUT
-----
    Either a notation string (right to left, seed last):
        --notation kdC
    or a seed and an operator list (applied left to right):
        --seed cube --ops dual kis

REPORT (per stage)
------------------
    V, E, F, chi = V - E + F
    face sizes        {size: count}
    referenced        vertices used by at least one face
    radius dev        max | |v - center| - radius |
    planarity dev     max distance of a face vertex from its best-fit plane
    coincident        vertex pairs closer than COINCIDENT_TOL

    Closed outputs (d, k on any seed) report chi = 2. Truncate output is
    an open surface (no vertex-figure faces): the original vertices are
    no longer referenced, chi still reads 2 only because they are
    counted, and chop = 0.5 shows one coincident pair per edge.

Exit status: 0 on success, 1 if the description is rejected, 2 if an
operator hits degenerate geometry (e.g. dual after truncate).
"""

import argparse
import logging
import sys
from pathlib import Path

# Path setup
_src_dir = Path(__file__).resolve().parents[2] / 'src'
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from conway_math.spec.constants import DEFAULT_CHOP, DEFAULT_CENTROID, CENTROID_METHODS
from conway_math.spec.errors import OpError, InternalConsistencyError
from conway_math.builders import make_seed
from conway_math.notation import ConwayDescription, parse_notation
from conway_math.analysis import summarize_polyhedron

logger = logging.getLogger("conway_chain")


def build_specification(args):
    if args.notation:
        return parse_notation(args.notation, edge_length=args.edge_length,
                              chop=args.chop, centroid_method=args.centroid)

    desc = ConwayDescription()
    desc.seed(make_seed(args.seed, args.edge_length))
    for op in args.ops:
        desc.operation(op)
    return desc.emit(chop=args.chop, centroid_method=args.centroid)


def print_stage(notation: str, summary: dict):
    sizes = ", ".join(f"{k}:{v}" for k, v in summary['face_sizes'].items())
    print(f"  {notation:>10s}  V={summary['V']:5d}  E={summary['E']:5d}  "
          f"F={summary['F']:5d}  chi={summary['chi']:3d}  faces[{sizes}]")
    print(f"  {'':>10s}  referenced={summary['referenced_vertices']}  "
          f"radius dev={summary['max_radius_deviation']:.2e}  "
          f"planarity dev={summary['max_planarity_deviation']:.2e}  "
          f"coincident={summary['coincident_pairs']}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Stage-by-stage Conway chain report")
    parser.add_argument("--notation", type=str, default=None,
                        help="Conway notation, seed letter last (e.g. kdC)")
    parser.add_argument("--seed", type=str, default="cube",
                        help="Seed solid name or letter (ignored with --notation)")
    parser.add_argument("--ops", nargs="*", default=["dual"],
                        help="Operators in application order: dual kis truncate, or d k t")
    parser.add_argument("--edge-length", type=float, default=1.0,
                        help="Seed edge length (default 1.0)")
    parser.add_argument("--chop", type=float, default=DEFAULT_CHOP,
                        help=f"Truncation fraction in (0, 1) (default {DEFAULT_CHOP})")
    parser.add_argument("--centroid", choices=CENTROID_METHODS, default=DEFAULT_CENTROID,
                        help="Face centroid method for dual and kis")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging from the operators")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s:%(name)s:%(message)s")

    try:
        spec = build_specification(args)
    except (OpError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print("=" * 78)
    print(f"CONWAY CHAIN: {spec.notation()}  (edge={spec.seed.edge_length}, "
          f"chop={spec.chop}, centroid={spec.centroid_method})")
    print("=" * 78)

    try:
        for notation, poly in spec.stages():
            print_stage(notation, summarize_polyhedron(poly))
    except InternalConsistencyError as exc:
        logger.error("%s failed: %s", spec.notation(), exc)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
