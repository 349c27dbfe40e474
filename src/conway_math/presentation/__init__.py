"""Presentation adapter - finished polyhedron to flat renderer buffers."""

from .planar import VERTEX_DTYPE, Polygon, face_polygons
from .presenter import Cached, SingleColour
