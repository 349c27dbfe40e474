"""Geometry primitives - points, planes, angular ordering. No topology."""

from .primitives import (
    golden_ratio,
    triangle_normal,
    convex_planar_polygon_centroid,
    polyhedron_face_center,
    point_line_lengthen,
    Ordering,
    clockwise,
    sort_clockwise,
)
from .plane import Plane
