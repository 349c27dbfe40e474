"""
Polyhedron Diagnostics
======================

Counts and geometric quality measures for a finished polyhedron.

    summarize_polyhedron      V, E, F, χ, face-size histogram, deviations
    radius_deviation          per-vertex distance from the circumscribing sphere
    face_planarity_deviation  per-face distance from its least-squares plane
    find_coincident_vertices  vertex pairs closer than a tolerance

Operators only approximately preserve planarity (repeated centroid and
re-projection steps drift in floating point); these functions measure how far.
"""

import logging
from collections import Counter
from typing import Dict, List, Tuple

import numpy as np
from scipy.spatial import cKDTree

from ..spec.constants import COINCIDENT_TOL
from ..spec.structures import Polyhedron
from ..operators.incidence import build_edges

logger = logging.getLogger(__name__)


def radius_deviation(poly: Polyhedron) -> np.ndarray:
    """|‖v - center‖ - radius| for every vertex."""
    if poly.n_vertices == 0:
        return np.zeros(0)
    return np.abs(np.linalg.norm(poly.vertices - poly.center, axis=1) - poly.radius)


def face_planarity_deviation(poly: Polyhedron) -> np.ndarray:
    """
    Max distance of a face's vertices from the face's best-fit plane.

    The plane normal is the smallest singular vector of the centered
    vertex coordinates. Triangles give 0 by construction.
    """
    deviations = np.zeros(poly.n_faces)
    for f_idx in range(poly.n_faces):
        coords = poly.face_points(f_idx)
        if len(coords) <= 3:
            continue
        centered = coords - coords.mean(axis=0)
        _, _, vh = np.linalg.svd(centered)
        deviations[f_idx] = np.max(np.abs(centered @ vh[-1]))
    return deviations


def find_coincident_vertices(vertices, tol: float = COINCIDENT_TOL) -> List[Tuple[int, int]]:
    """
    Pairs (i, j), i < j, of vertices within `tol` of each other.

    Uses a KD-tree, so it scales to large meshes.
    """
    pts = np.asarray(vertices, dtype=float)
    if len(pts) < 2:
        return []
    return sorted(cKDTree(pts).query_pairs(tol))


def summarize_polyhedron(poly: Polyhedron) -> Dict:
    """
    Topology and geometry summary.

    E is counted from the distinct edges in the face cycles, so it stays
    correct for open surfaces (truncate output), where half the total face
    length would not be an edge count.

    Returns:
        dict with V, E, F, chi, face_sizes, referenced_vertices,
        max_radius_deviation, max_planarity_deviation, coincident_pairs
    """
    E = len(build_edges(poly.faces))
    referenced = {v for face in poly.faces for v in face}
    planarity = face_planarity_deviation(poly)
    radial = radius_deviation(poly)

    summary = {
        'V': poly.n_vertices,
        'E': E,
        'F': poly.n_faces,
        'chi': poly.n_vertices - E + poly.n_faces,
        'face_sizes': dict(sorted(Counter(len(f) for f in poly.faces).items())),
        'referenced_vertices': len(referenced),
        'max_radius_deviation': float(radial.max()) if len(radial) else 0.0,
        'max_planarity_deviation': float(planarity.max()) if len(planarity) else 0.0,
        'coincident_pairs': len(find_coincident_vertices(poly.vertices)),
    }
    logger.debug("summary: %s", summary)
    return summary
