"""
Geometry Primitives
===================

Point/vector operations used by the Conway operators.

    triangle_normal                  (p2 - p1) × (p3 - p1)
    convex_planar_polygon_centroid   area-weighted centroid of a convex polygon
    polyhedron_face_center           unweighted vertex mean
    point_line_lengthen              rescale origin→point to a given length
    clockwise / sort_clockwise       angular order of points about a face center

Points and vectors are (3,) float arrays. Anything array-like is accepted.
"""

from enum import IntEnum
from functools import cmp_to_key
from typing import List, Sequence

import numpy as np

from ..spec.constants import PHI, EPS_ZERO


def golden_ratio() -> float:
    """
    Golden ratio 1.6180339887...

        1 + √5
        ──────
          2
    """
    return PHI


def triangle_normal(p1, p2, p3, normalize: bool = False) -> np.ndarray:
    """
    Normal of the plane through three points: (p2 - p1) × (p3 - p1).

    Points wound counterclockwise when viewed from outside give an outward
    normal. Left unnormalized unless `normalize` is set; callers that shade
    with it normalize later.
    """
    p1 = np.asarray(p1, dtype=float)
    n = np.cross(np.asarray(p2, dtype=float) - p1, np.asarray(p3, dtype=float) - p1)
    if normalize:
        n = n / np.linalg.norm(n)
    return n


def convex_planar_polygon_centroid(vertices) -> np.ndarray:
    """
    Area-weighted centroid of a convex planar polygon.

    ALGORITHM:
        Fan-triangulate from vertices[0]. For each triangle (v0, v[i], v[i+1])
        weight its centroid by its area and divide by the total area.
        The ½ of the triangle area is dropped; it cancels in the ratio.

    Args:
        vertices: (n, 3) array, n ≥ 3, coplanar, convex, ordered around the face

    Returns:
        (3,) centroid

    Raises:
        ValueError: fewer than 3 vertices
        ZeroDivisionError: zero total area (collinear input)
    """
    pts = np.asarray(vertices, dtype=float)
    if len(pts) < 3:
        raise ValueError(f"Polygon needs at least 3 vertices, got {len(pts)}")

    v0 = pts[0]
    weighted = np.zeros(3)
    total_area = 0.0

    for i in range(1, len(pts) - 1):
        a, b = pts[i], pts[i + 1]
        area = np.linalg.norm(np.cross(a - v0, b - v0))
        weighted += area * (v0 + a + b) / 3.0
        total_area += area

    if total_area == 0.0:
        raise ZeroDivisionError("Polygon has zero area (collinear vertices)")

    return weighted / total_area


def polyhedron_face_center(vertices) -> np.ndarray:
    """
    Unweighted mean of the face vertices.

    NOTE: deliberately not the planar centroid. For irregular faces the mean
    sits off the area-weighted center, and re-projecting it outward keeps a
    long operator chain from shrinking the solid. An intentional approximation.
    """
    pts = np.asarray(vertices, dtype=float)
    if len(pts) == 0:
        raise ValueError("Face center of an empty vertex list")
    return pts.mean(axis=0)


def point_line_lengthen(point, distance: float) -> np.ndarray:
    """
    Rescale the vector origin→point so its magnitude becomes `distance`.

    Used to put derived points back onto the circumscribing sphere.

    Example:
        >>> point_line_lengthen([3, 4, 0], 10)
        array([6., 8., 0.])
    """
    p = np.asarray(point, dtype=float)
    norm = np.linalg.norm(p)
    if norm < EPS_ZERO:
        raise ValueError("Cannot lengthen a point at the origin (no direction)")
    return p / norm * distance


# =============================================================================
# ANGULAR ORDERING
# =============================================================================

class Ordering(IntEnum):
    """Three-way comparison result, usable directly as a cmp return value."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def clockwise(relative, check, center, normal) -> Ordering:
    """
    Rotational comparison of two points about `center` in the plane of `normal`.

    DEFINITION:
        s = ((relative - center) × (check - center)) · normal
        s > 0 → GREATER  (check is counterclockwise of relative seen from +normal)
        s < 0 → LESS
        s = 0 → EQUAL    (identical, or collinear through center)

    Example (normal pointing down -z):
        clockwise((0,1,0), (0.2,0.8,0), (0,0,0), (0,0,-1)) → GREATER
        clockwise((0,1,0), (-0.2,0.8,0), (0,0,0), (0,0,-1)) → LESS
    """
    relative = np.asarray(relative, dtype=float)
    check = np.asarray(check, dtype=float)
    if np.array_equal(relative, check):
        return Ordering.EQUAL

    center = np.asarray(center, dtype=float)
    s = np.dot(np.cross(relative - center, check - center), np.asarray(normal, dtype=float))
    if s > 0:
        return Ordering.GREATER
    if s < 0:
        return Ordering.LESS
    return Ordering.EQUAL


def sort_clockwise(indices: Sequence[int],
                   points,
                   center,
                   normal) -> List[int]:
    """
    Order `indices` by angle of points[index] about `center`.

    `clockwise` alone is not transitive once points span more than half a
    turn, so the points are first split into two half-turns measured from the
    first point (the anchor). Inside a half-turn `clockwise` is a proper order.

    Ascending order runs counterclockwise seen from the tip of `normal`, so an
    outward `normal` gives an outward-facing winding.

    Args:
        indices: keys to sort (e.g. face indices)
        points: indexable giving a (3,) point for each key
        center: rotation center
        normal: plane normal (need not be unit length)

    Returns:
        list of keys starting at the anchor
    """
    indices = list(indices)
    if len(indices) < 3:
        return indices

    center = np.asarray(center, dtype=float)
    normal = np.asarray(normal, dtype=float)
    anchor = np.asarray(points[indices[0]], dtype=float)
    anchor_dir = anchor - center

    def half(idx):
        p = np.asarray(points[idx], dtype=float)
        side = clockwise(anchor, p, center, normal)
        if side == Ordering.GREATER:
            return 0
        if side == Ordering.LESS:
            return 1
        # Collinear with the anchor: same direction is angle 0, opposite is π.
        return 0 if np.dot(p - center, anchor_dir) >= 0 else 1

    def compare(i, j):
        hi, hj = half(i), half(j)
        if hi != hj:
            return hi - hj
        side = clockwise(points[i], points[j], center, normal)
        # j counterclockwise of i → i comes first
        return -int(side)

    # Anchor first, the rest ordered after it.
    rest = sorted(indices[1:], key=cmp_to_key(compare))
    return [indices[0]] + rest
