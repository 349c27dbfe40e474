"""
Analysis functions - depend on operators layer.

Diagnostics for finished polyhedra: counts, Euler characteristic,
sphere and planarity deviation, coincident vertices.
"""

from .topology import (
    summarize_polyhedron,
    radius_deviation,
    face_planarity_deviation,
    find_coincident_vertices,
)
