"""
CONWAY_MATH - Conway polyhedron operators on Platonic seeds
===========================================================

NO rendering. NO GPU. NO windowing.

Structure:
    spec/          - Constants, errors and the Polyhedron contract
    geometry/      - Normals, centroids, planes, angular ordering
    builders/      - Platonic seed solids
    operators/     - Dual, kis, truncate
    notation/      - Specification builder and Conway notation
    analysis/      - V/E/F summaries and geometric diagnostics
    presentation/  - Flat vertex/index buffers for a renderer

Every builder and operator returns a Polyhedron:
    - center, radius (circumscribing sphere)
    - vertices (N×3, read-only)
    - faces (tuples of vertex indices, CCW from outside)

Requirements:
    Python >= 3.9
    numpy >= 1.20
    scipy >= 1.11
"""

import sys

if sys.version_info < (3, 9):
    raise ImportError(f"conway_math requires Python >= 3.9, got {sys.version}")

import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"conway_math requires numpy >= 1.20, got {np.__version__}")

from .spec.structures import Polyhedron, CentroidPolyhedron, NormalPolyhedron
from .builders import SolidKind, Seed, make_seed
from .operators import dual, kis, truncate
from .notation import ConwayDescription, Specification, Operation, parse_notation

__version__ = "0.1.0"
