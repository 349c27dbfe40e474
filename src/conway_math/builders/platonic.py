"""
Platonic Solid Construction
===========================

Build the five Platonic solids as seed polyhedra, centered at the origin.

SOLIDS:
    - Tetrahedron  (V=4,  E=6,  F=4  triangles)
    - Cube         (V=8,  E=12, F=6  squares)
    - Octahedron   (V=6,  E=12, F=8  triangles)
    - Dodecahedron (V=20, E=30, F=12 pentagons)
    - Icosahedron  (V=12, E=30, F=20 triangles)

    χ = V - E + F = 2 for all five.

CONSTRUCTION:
    Vertices are closed-form coordinates scaled so every edge has the
    requested length. Each face is the set of vertices extremal along one
    face direction (the directions of the DUAL solid's vertices) and is
    ordered counterclockwise about its outward normal.

CIRCUMSCRIBED RADII (edge length a, φ = golden ratio):
    tetrahedron   a·√6/4
    cube          a·√3/2
    octahedron    a·√2/2
    dodecahedron  a·φ·√3/2
    icosahedron   a·√(φ²+1)/2
"""

import logging
import math
from itertools import product
from typing import List, Sequence

import numpy as np

from ..spec.constants import EPS_CLOSE, PHI, SQRT2, SQRT3, SQRT6
from ..spec.structures import Polyhedron, create_polyhedron

logger = logging.getLogger(__name__)

ORIGIN = (0.0, 0.0, 0.0)


def _check_edge_length(edge_length: float) -> float:
    edge_length = float(edge_length)
    if not math.isfinite(edge_length) or edge_length <= 0.0:
        raise ValueError(f"Edge length must be a positive finite number, got {edge_length}")
    return edge_length


def _cyclic_permutations(x, y, z) -> List[tuple]:
    return [(x, y, z), (z, x, y), (y, z, x)]


def _order_face_vertices(vertices: np.ndarray,
                         face_idx: List[int],
                         normal: np.ndarray) -> List[int]:
    """
    Order face vertices counter-clockwise when viewed from normal direction.

    Internal helper function.
    """
    coords = vertices[face_idx]
    centroid = coords.mean(axis=0)
    normal = normal / np.linalg.norm(normal)

    # Build local coordinate frame
    if abs(normal[0]) < 0.9:
        u = np.cross(normal, [1, 0, 0])
    else:
        u = np.cross(normal, [0, 1, 0])
    u = u / np.linalg.norm(u)
    v = np.cross(normal, u)

    angles = [np.arctan2(np.dot(coords[k] - centroid, v),
                         np.dot(coords[k] - centroid, u))
              for k in range(len(face_idx))]
    order = np.argsort(angles)
    return [face_idx[o] for o in order]


def _faces_from_directions(vertices: np.ndarray,
                           directions: Sequence[Sequence[float]],
                           face_size: int) -> List[List[int]]:
    """
    One face per direction: the vertices with maximal projection on it.

    FAIL-FAST:
        Raises ValueError if a direction does not pick exactly face_size vertices.
    """
    faces = []
    scale = np.max(np.linalg.norm(vertices, axis=1))
    for d in directions:
        d = np.asarray(d, dtype=float)
        proj = vertices @ d
        top = proj.max()
        face_idx = [i for i in range(len(vertices))
                    if abs(proj[i] - top) < EPS_CLOSE * max(1.0, scale)]
        if len(face_idx) != face_size:
            raise ValueError(f"Direction {d.tolist()} selects {len(face_idx)} vertices, "
                             f"expected {face_size}")
        faces.append(_order_face_vertices(vertices, face_idx, d))
    return faces


def _assemble(name: str, vertices: np.ndarray, directions, face_size: int,
              radius: float) -> Polyhedron:
    faces = _faces_from_directions(vertices, directions, face_size)

    # Radius is analytic; the coordinates must agree with it.
    norms = np.linalg.norm(vertices, axis=1)
    if not np.allclose(norms, radius, rtol=0.0, atol=EPS_CLOSE * max(1.0, radius)):
        raise ValueError(f"{name}: vertices off the circumscribed sphere "
                         f"(max |r - R| = {np.abs(norms - radius).max():.3e})")

    poly = create_polyhedron(ORIGIN, radius, vertices, faces)
    logger.debug("built %s: V=%d E=%d F=%d R=%.6g",
                 name, poly.n_vertices, poly.n_edges, poly.n_faces, radius)
    return poly


# =============================================================================
# THE FIVE SOLIDS
# =============================================================================

def build_tetrahedron(edge_length: float = 1.0) -> Polyhedron:
    """
    Build a regular tetrahedron centered at origin.

    TOPOLOGY:
        V = 4 vertices (alternating corners of a cube)
        E = 6 edges
        F = 4 faces (triangles), each opposite one vertex
        χ = 4 - 6 + 4 = 2

    GEOMETRY:
        Corners (1,1,1), (1,-1,-1), (-1,1,-1), (-1,-1,1) have edge 2√2,
        scaled by a / (2√2). Circumscribed radius a·√6/4.
    """
    a = _check_edge_length(edge_length)
    corners = np.array([(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)], dtype=float)
    vertices = corners * (a / (2.0 * SQRT2))
    radius = a * SQRT6 / 4.0

    # Face opposite vertex i points along -corner[i]
    return _assemble("tetrahedron", vertices, -corners, 3, radius)


def build_cube(edge_length: float = 1.0) -> Polyhedron:
    """
    Build a cube centered at origin.

    TOPOLOGY:
        V = 8 vertices (±a/2, ±a/2, ±a/2)
        E = 12 edges
        F = 6 faces (squares), one per axis direction
        χ = 8 - 12 + 6 = 2

    Circumscribed radius a·√3/2.
    """
    a = _check_edge_length(edge_length)
    h = a / 2.0
    vertices = np.array([(sx * h, sy * h, sz * h)
                         for sx, sy, sz in product([1, -1], repeat=3)], dtype=float)
    radius = a * SQRT3 / 2.0

    directions = []
    for axis in range(3):
        for sign in [1, -1]:
            d = [0.0, 0.0, 0.0]
            d[axis] = sign
            directions.append(d)

    return _assemble("cube", vertices, directions, 4, radius)


def build_octahedron(edge_length: float = 1.0) -> Polyhedron:
    """
    Build a regular octahedron centered at origin.

    TOPOLOGY:
        V = 6 vertices (on axes at ±a·√2/2)
        E = 12 edges
        F = 8 faces (triangles), one per octant
        χ = 6 - 12 + 8 = 2

    Circumscribed radius a·√2/2 (the vertices sit on the sphere axes).
    """
    a = _check_edge_length(edge_length)
    radius = a * SQRT2 / 2.0
    vertices = []
    for axis in range(3):
        for sign in [1, -1]:
            v = [0.0, 0.0, 0.0]
            v[axis] = sign * radius
            vertices.append(v)
    vertices = np.array(vertices, dtype=float)

    directions = list(product([1, -1], repeat=3))
    return _assemble("octahedron", vertices, directions, 3, radius)


def _icosahedron_unit() -> np.ndarray:
    """Cyclic permutations of (0, ±1, ±φ): edge length 2."""
    points = []
    for s1, s2 in product([1, -1], repeat=2):
        points.extend(_cyclic_permutations(0.0, s1 * 1.0, s2 * PHI))
    return np.array(points, dtype=float)


def _dodecahedron_unit(swap: bool = False) -> np.ndarray:
    """
    (±1, ±1, ±1) and cyclic permutations of (0, ±1/φ, ±φ): edge length 2/φ.

    With swap=True the golden rectangles become (0, ±φ, ±1/φ): the
    dodecahedron dual to _icosahedron_unit(), i.e. its face directions.
    """
    p, q = (PHI, 1.0 / PHI) if swap else (1.0 / PHI, PHI)
    points = [tuple(float(c) for c in corner) for corner in product([1, -1], repeat=3)]
    for s1, s2 in product([1, -1], repeat=2):
        points.extend(_cyclic_permutations(0.0, s1 * p, s2 * q))
    return np.array(points, dtype=float)


def _dodecahedron_face_directions() -> np.ndarray:
    """Cyclic permutations of (0, ±φ, ±1): the icosahedron dual to _dodecahedron_unit()."""
    points = []
    for s1, s2 in product([1, -1], repeat=2):
        points.extend(_cyclic_permutations(0.0, s1 * PHI, s2 * 1.0))
    return np.array(points, dtype=float)


def build_dodecahedron(edge_length: float = 1.0) -> Polyhedron:
    """
    Build a regular dodecahedron centered at origin.

    TOPOLOGY:
        V = 20 vertices
        E = 30 edges
        F = 12 faces (pentagons), one per icosahedron vertex direction
        χ = 20 - 30 + 12 = 2

    GEOMETRY:
        Cube corners (±1, ±1, ±1) plus three golden rectangles
        (0, ±1/φ, ±φ) cyclic. Edge 2/φ, scaled by a·φ/2.
        Circumscribed radius a·φ·√3/2.
    """
    a = _check_edge_length(edge_length)
    vertices = _dodecahedron_unit() * (a * PHI / 2.0)
    radius = a * PHI * SQRT3 / 2.0
    return _assemble("dodecahedron", vertices, _dodecahedron_face_directions(), 5, radius)


def build_icosahedron(edge_length: float = 1.0) -> Polyhedron:
    """
    Build a regular icosahedron centered at origin.

    TOPOLOGY:
        V = 12 vertices
        E = 30 edges
        F = 20 faces (triangles), one per dodecahedron vertex direction
        χ = 12 - 30 + 20 = 2

    GEOMETRY:
        Three orthogonal golden rectangles (0, ±1, ±φ) cyclic. Edge 2,
        scaled by a/2. Circumscribed radius a·√(φ²+1)/2.
    """
    a = _check_edge_length(edge_length)
    vertices = _icosahedron_unit() * (a / 2.0)
    radius = a * math.sqrt(PHI * PHI + 1.0) / 2.0
    return _assemble("icosahedron", vertices, _dodecahedron_unit(swap=True), 3, radius)
