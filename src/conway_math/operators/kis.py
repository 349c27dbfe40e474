"""
Kis Operator
============

Raise a pyramid on every face.

    apex of face f = face centroid pushed onto the circumscribing sphere,
                     stored at vertex index V + f
    face (v0 .. vk-1) → k triangles (v_i, v_i+1, apex)

TOPOLOGY:
    V' = V + F
    F' = Σ len(face)
    tetrahedron (4, 6, 4) → triakis tetrahedron (8, 18, 12)
"""

import logging

import numpy as np

from ..spec.constants import DEFAULT_CENTROID
from ..spec.structures import Polyhedron
from ..geometry.primitives import point_line_lengthen

logger = logging.getLogger(__name__)


def kis(poly: Polyhedron, centroid_method: str = DEFAULT_CENTROID) -> Polyhedron:
    """
    Conway kis `k`.

    Triangles keep the winding of the face they split, so an outward
    face gives outward triangles.
    """
    annotated = poly.with_centroids(centroid_method)
    center = annotated.center
    n_v = annotated.n_vertices

    apexes = [center + point_line_lengthen(c - center, annotated.radius)
              for c in annotated.centroids]

    new_faces = []
    for f_idx, face in enumerate(annotated.faces):
        apex = n_v + f_idx
        k = len(face)
        for i in range(k):
            new_faces.append((face[i], face[(i + 1) % k], apex))

    new_vertices = np.vstack([annotated.vertices, np.array(apexes).reshape(-1, 3)])

    result = Polyhedron(center, annotated.radius, new_vertices, new_faces)
    logger.debug("kis: V=%d F=%d → V=%d F=%d",
                 poly.n_vertices, poly.n_faces, result.n_vertices, result.n_faces)
    return result
