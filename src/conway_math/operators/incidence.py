"""
Vertex/Face/Edge Incidence
==========================

Pure combinatorics on face index lists - NO coordinates.

Edges are never stored on a Polyhedron. They are recovered from faces:

    build_edges         every consecutive pair of a face cycle, (i, j) with i < j
    faces_per_vertex    vertex → incident face indices
    vertex_edges        vertex → (neighbor, face A, face B) per incident edge,
                        found as pairs of incident faces sharing a second vertex
"""

from typing import List, NamedTuple, Sequence, Tuple


class VertexEdge(NamedTuple):
    """Edge from a vertex to `other`, bordered by faces `face_a` < `face_b`."""
    other: int
    face_a: int
    face_b: int


def build_edges(faces: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    """
    Edge list implied by face cycles.

    Returns:
        sorted list of unique (i, j) with i < j
    """
    edges = set()
    for face in faces:
        n = len(face)
        for k in range(n):
            i, j = face[k], face[(k + 1) % n]
            edges.add((min(i, j), max(i, j)))
    return sorted(edges)


def faces_per_vertex(faces: Sequence[Sequence[int]], n_vertices: int) -> List[List[int]]:
    """
    For each vertex index i, the indices of the faces whose cycle contains i.

    Face indices appear in ascending order.
    """
    incident: List[List[int]] = [[] for _ in range(n_vertices)]
    for f_idx, face in enumerate(faces):
        for v in face:
            incident[v].append(f_idx)
    return incident


def vertex_edges(vertex: int,
                 incident_faces: Sequence[int],
                 faces: Sequence[Sequence[int]]) -> List[VertexEdge]:
    """
    Edges at `vertex`, reconstructed from face adjacency.

    Two faces incident to `vertex` that also share a second vertex `n`
    meet along the edge (vertex, n).

    Args:
        vertex: vertex index
        incident_faces: faces containing vertex (from faces_per_vertex)
        faces: all face cycles

    Returns:
        one VertexEdge per (face pair, shared neighbor)
    """
    edges = []
    incident_faces = list(incident_faces)
    for a in range(len(incident_faces)):
        fa = incident_faces[a]
        set_a = set(faces[fa])
        for b in range(a + 1, len(incident_faces)):
            fb = incident_faces[b]
            for other in faces[fb]:
                if other != vertex and other in set_a:
                    edges.append(VertexEdge(other, fa, fb))
    return edges
