"""
Planar Faces for External Consumption
=====================================

The faces of a finished Polyhedron as planar polygons, and their
conversion into flat vertex/index buffers a renderer can upload.

This module does not take part in the Conway operators. Each polygon is
fan-triangulated from its first vertex:

    (0, 1, 2), (0, 2, 3), ..., (0, n-2, n-1)

Faces with more than three vertices are planar only up to floating point
drift; the fan does not check.
"""

from typing import Iterator, Sequence, Tuple

import numpy as np

from ..spec.constants import MAX_INDEX
from ..spec.structures import NormalPolyhedron

# One renderer vertex: position, face normal, colour (flat shading).
VERTEX_DTYPE = np.dtype([
    ('position', np.float32, (3,)),
    ('normal', np.float32, (3,)),
    ('colour', np.float32, (3,)),
])


class Polygon:
    """
    A planar polygon with its unit normal.

    Not validated: ≥ 3 vertices and planarity are the caller's promise
    (faces of a Polyhedron satisfy both).
    """

    __slots__ = ("vertices", "normal")

    def __init__(self, vertices, normal):
        self.vertices = np.asarray(vertices, dtype=float)
        self.normal = np.asarray(normal, dtype=float)

    def __len__(self) -> int:
        return len(self.vertices)

    def fan_indices(self, index_offset: int = 0) -> np.ndarray:
        """(n-2)*3 triangle-fan indices, shifted by index_offset."""
        n = len(self.vertices)
        if n < 3:
            raise ValueError(f"Polygon needs at least 3 vertices, got {n}")
        if index_offset + n - 1 > MAX_INDEX:
            raise ValueError(f"Index {index_offset + n - 1} exceeds uint16 range")
        i = np.arange(1, n - 1)
        tris = np.stack([np.zeros_like(i), i, i + 1], axis=1) + index_offset
        return tris.reshape(-1).astype(np.uint16)

    def as_scene_consumable(self, colour: Sequence[float],
                            index_offset: int = 0) -> Tuple[np.ndarray, np.ndarray]:
        """
        Renderer buffers for this face.

        Args:
            colour: RGB triple applied to every vertex
            index_offset: index of this polygon's first vertex in the shared buffer

        Returns:
            (vertices, indices): VERTEX_DTYPE array of length n, uint16 array
        """
        out = np.zeros(len(self.vertices), dtype=VERTEX_DTYPE)
        out['position'] = self.vertices
        out['normal'] = self.normal
        out['colour'] = colour
        return out, self.fan_indices(index_offset)


def face_polygons(poly: NormalPolyhedron) -> Iterator[Polygon]:
    """One Polygon per face, in face order."""
    for f_idx in range(poly.n_faces):
        yield Polygon(poly.face_points(f_idx), poly.normals[f_idx])
