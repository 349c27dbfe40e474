"""
Pytest Configuration
====================

Automatically loaded by pytest. Puts src/ on sys.path so conway_math
imports without installation, and provides the seed fixtures every
test module shares.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from conway_math.builders import SolidKind, make_seed  # noqa: E402


# (V, E, F) of each seed, from the Platonic solid tables
SEED_COUNTS = {
    SolidKind.TETRAHEDRON: (4, 6, 4),
    SolidKind.CUBE: (8, 12, 6),
    SolidKind.OCTAHEDRON: (6, 12, 8),
    SolidKind.DODECAHEDRON: (20, 30, 12),
    SolidKind.ICOSAHEDRON: (12, 30, 20),
}


@pytest.fixture(params=list(SolidKind), ids=lambda k: k.name.lower())
def seed(request):
    """Each Platonic seed at unit edge length."""
    return make_seed(request.param, 1.0)


@pytest.fixture(scope="module")
def cube():
    return make_seed(SolidKind.CUBE, 1.0).polyhedron


@pytest.fixture(scope="module")
def tetrahedron():
    return make_seed(SolidKind.TETRAHEDRON, 1.0).polyhedron


@pytest.fixture(scope="module")
def octahedron():
    return make_seed(SolidKind.OCTAHEDRON, 1.0).polyhedron
