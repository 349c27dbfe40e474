"""
Prepare a Polyhedron for presentation.
"""

import logging
from typing import NamedTuple, Sequence

import numpy as np

from ..spec.structures import Polyhedron, NormalPolyhedron
from .planar import VERTEX_DTYPE, face_polygons

logger = logging.getLogger(__name__)


class Cached(NamedTuple):
    """Flat renderer buffers: VERTEX_DTYPE vertices and uint16 triangle indices."""
    vertices: np.ndarray
    index: np.ndarray


class SingleColour:
    """Flat-shade every face of a polyhedron in one colour."""

    def __init__(self, colour: Sequence[float], polyhedron: Polyhedron):
        if len(colour) != 3:
            raise ValueError(f"Colour must be an RGB triple, got {colour!r}")
        self.colour = tuple(float(c) for c in colour)
        if not isinstance(polyhedron, NormalPolyhedron):
            polyhedron = polyhedron.with_normals()
        self.polyhedron = polyhedron

    def to_cached(self) -> Cached:
        vertex_chunks = []
        index_chunks = []
        offset = 0

        for polygon in face_polygons(self.polyhedron):
            v, i = polygon.as_scene_consumable(self.colour, offset)
            offset += len(v)
            vertex_chunks.append(v)
            index_chunks.append(i)

        if not vertex_chunks:
            return Cached(np.zeros(0, dtype=VERTEX_DTYPE), np.zeros(0, dtype=np.uint16))

        cached = Cached(np.concatenate(vertex_chunks), np.concatenate(index_chunks))
        logger.debug("presenter: %d faces → %d vertices, %d triangles",
                     self.polyhedron.n_faces, len(cached.vertices), len(cached.index) // 3)
        return cached
