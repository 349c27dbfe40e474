"""
Dual Operator
=============

Swap the roles of vertices and faces, keeping the circumscribing sphere.

    old face f    → new vertex f   (face centroid, pushed onto the sphere)
    old vertex v  → new face       (v's incident faces, in angular order)

CONSTRUCTION (per old vertex v):
    1. Plane with normal = direction of v, through one incident face centroid.
    2. New face center = where the ray origin→v meets that plane.
    3. Sort v's incident faces by the angle of their centroids about that
       center, counterclockwise seen from outside.

TOPOLOGY:
    V' = F, F' = V, E' = E
    cube (8, 12, 6) → octahedron (6, 12, 8)
"""

import logging

import numpy as np

from ..spec.constants import DEFAULT_CENTROID
from ..spec.errors import DegenerateGeometryError
from ..spec.structures import Polyhedron
from ..geometry.plane import Plane
from ..geometry.primitives import point_line_lengthen, sort_clockwise
from .incidence import faces_per_vertex

logger = logging.getLogger(__name__)


def dual(poly: Polyhedron, centroid_method: str = DEFAULT_CENTROID) -> Polyhedron:
    """
    Conway dual `d`.

    Args:
        poly: input polyhedron (vertices on the circumscribing sphere)
        centroid_method: "area" or "mean", see Polyhedron.with_centroids

    Returns:
        new Polyhedron, same center and radius

    Raises:
        DegenerateGeometryError: a vertex with fewer than 3 incident faces, or whose
            incident centroids are coplanar with the center
    """
    annotated = poly.with_centroids(centroid_method)
    centroids = annotated.centroids
    center = annotated.center
    incident = faces_per_vertex(annotated.faces, annotated.n_vertices)

    new_faces = []
    for v, face_ids in enumerate(incident):
        if len(face_ids) < 3:
            # Orphaned or open-boundary vertex (e.g. after truncate): no closed dual face.
            raise DegenerateGeometryError(
                f"Vertex {v} has {len(face_ids)} incident faces, need at least 3", vertex=v)

        direction = annotated.vertices[v] - center
        plane = Plane(direction, centroids[face_ids[0]])
        face_center = plane.line_intersection(direction, center)
        if face_center is None:
            raise DegenerateGeometryError(
                f"Vertex {v}: ray from center does not meet the plane of its "
                f"incident face centroids", vertex=v)

        new_faces.append(sort_clockwise(face_ids, centroids, face_center, plane.normal))

    new_vertices = np.array([center + point_line_lengthen(c - center, annotated.radius)
                             for c in centroids])

    result = Polyhedron(center, annotated.radius, new_vertices, new_faces)
    logger.debug("dual: V=%d F=%d → V=%d F=%d",
                 poly.n_vertices, poly.n_faces, result.n_vertices, result.n_faces)
    return result
