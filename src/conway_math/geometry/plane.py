"""
Plane
=====

A plane stored as a point on it and a unit normal.
"""

from typing import Optional

import numpy as np

from ..spec.constants import EPS_ZERO
from ..spec.errors import DegenerateGeometryError


class Plane:
    """
    Plane through `point` with unit `normal`.

    The normal passed in need not be unit length; it is normalized here.
    """

    __slots__ = ("normal", "point")

    def __init__(self, normal, point):
        normal = np.asarray(normal, dtype=float)
        norm = np.linalg.norm(normal)
        if norm < EPS_ZERO:
            raise DegenerateGeometryError("Plane normal has zero length")
        self.normal = normal / norm
        self.point = np.asarray(point, dtype=float)

    def line_parameter(self, direction, origin) -> Optional[float]:
        """
        Solve origin + t·direction on the plane for t.

            t = ((point - origin) · normal) / (direction · normal)

        Returns None when the line is parallel to the plane, and when the
        origin itself lies in the plane (ambiguous, treated as failure).
        """
        direction = np.asarray(direction, dtype=float)
        origin = np.asarray(origin, dtype=float)

        denominator = np.dot(direction, self.normal)
        if abs(denominator) < EPS_ZERO:
            return None

        numerator = np.dot(self.point - origin, self.normal)
        if abs(numerator) < EPS_ZERO:
            return None

        return numerator / denominator

    def line_intersection(self, direction, origin) -> Optional[np.ndarray]:
        """
        Point where the line origin + t·direction meets the plane, or None.
        """
        t = self.line_parameter(direction, origin)
        if t is None:
            return None
        return np.asarray(origin, dtype=float) + t * np.asarray(direction, dtype=float)

    def signed_distance(self, point) -> float:
        return float(np.dot(np.asarray(point, dtype=float) - self.point, self.normal))

    def __repr__(self) -> str:
        return f"Plane(normal={self.normal.tolist()}, point={self.point.tolist()})"
