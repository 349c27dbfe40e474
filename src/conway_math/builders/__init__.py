"""
Seed builders - Platonic solids, no operator dependency.

EXPORTS:
- Raw solids: build_* (return Polyhedron)
- Tagged seeds: SolidKind, Seed, make_seed
"""

from .platonic import (
    build_tetrahedron,
    build_cube,
    build_octahedron,
    build_dodecahedron,
    build_icosahedron,
)
from .seeds import SolidKind, Seed, make_seed
