"""
Truncate Operator (vertex chamfer)
==================================

Cut every vertex back along its edges.

CONSTRUCTION:
    For vertex v and each edge (v, n), found from face adjacency:
        p = n + chop·(v - n)         (chop of the way from n toward v)
    p replaces v in both faces bordering that edge. Within a face, v is
    replaced by its two edge points, the one toward the preceding vertex
    first, so the face stays a simple cycle in its original winding.

TOPOLOGY (as implemented):
    V' = V + 2E        (one point per edge END, so two per edge)
    F' = F             (faces grow, none are added)

KNOWN GAPS:
    - No vertex-figure face is emitted for the cut corners, so the result
      is an open surface: it has a hole where each vertex used to be.
    - The two points on an edge are never merged. With chop = 0.5 they
      coincide; analysis.find_coincident_vertices reports them.
    - Substitutes are spliced in at the removed vertex's position rather
      than appended at the end of the face, so every face stays a simple
      cycle in its original winding.
"""

import logging
from collections import defaultdict

import numpy as np

from ..spec.constants import DEFAULT_CHOP
from ..spec.structures import Polyhedron
from .incidence import faces_per_vertex, vertex_edges

logger = logging.getLogger(__name__)


def truncate(poly: Polyhedron, chop: float = DEFAULT_CHOP) -> Polyhedron:
    """
    Conway truncate `t`.

    Args:
        poly: input polyhedron
        chop: fraction of each edge measured from the far endpoint, in (0, 1)

    Returns:
        new Polyhedron: original vertices followed by the truncation points

    Raises:
        ValueError: chop outside (0, 1)
    """
    chop = float(chop)
    if not 0.0 < chop < 1.0:
        raise ValueError(f"chop must lie in (0, 1), got {chop}")

    vertices = poly.vertices
    faces = poly.faces
    incident = faces_per_vertex(faces, poly.n_vertices)

    new_points = []
    # (face, vertex) → [(neighbor, new point index), ...]
    substitutes = defaultdict(list)

    for v, face_ids in enumerate(incident):
        for edge in vertex_edges(v, face_ids, faces):
            idx = poly.n_vertices + len(new_points)
            new_points.append(vertices[edge.other] + chop * (vertices[v] - vertices[edge.other]))
            substitutes[(edge.face_a, v)].append((edge.other, idx))
            substitutes[(edge.face_b, v)].append((edge.other, idx))

    new_faces = []
    for f_idx, face in enumerate(faces):
        k = len(face)
        cycle = []
        for i, v in enumerate(face):
            subs = substitutes.get((f_idx, v))
            if not subs:
                cycle.append(v)
                continue
            prev_v, next_v = face[i - 1], face[(i + 1) % k]
            rank = {prev_v: 0, next_v: 1}
            cycle.extend(idx for _, idx in sorted(subs, key=lambda s: rank.get(s[0], 2)))
        new_faces.append(cycle)

    new_vertices = np.vstack([vertices, np.array(new_points).reshape(-1, 3)])

    result = Polyhedron(poly.center, poly.radius, new_vertices, new_faces)
    logger.debug("truncate(chop=%.3g): V=%d F=%d → V=%d F=%d", chop,
                 poly.n_vertices, poly.n_faces, result.n_vertices, result.n_faces)
    return result
