"""
Conway Operator Tests
=====================

Topology and geometry of dual, kis and truncate:
- dual:     V' = F, E' = E, F' = V; cube ↔ octahedron, tetrahedron self-dual
- kis:      V' = V + F, F' = Σ face sizes, all triangles
- truncate: V' = V + 2E, F' = F (no vertex figures, no merging)

Run: pytest tests/core/test_operators.py -v
"""

import numpy as np
import pytest

from conway_math.builders import SolidKind, make_seed
from conway_math.operators import (
    build_edges,
    dual,
    faces_per_vertex,
    kis,
    truncate,
    vertex_edges,
)
from conway_math.analysis import (
    face_planarity_deviation,
    find_coincident_vertices,
    radius_deviation,
)
from conway_math.spec.constants import PLANAR_TOL, SPHERE_TOL
from conway_math.spec.errors import DegenerateGeometryError, InternalConsistencyError
from conway_math.spec.structures import Polyhedron, validate_polyhedron


def _outward(poly, f_idx):
    pts = poly.face_points(f_idx)
    n = np.cross(pts[1] - pts[0], pts[2] - pts[0])
    return np.dot(n, pts.mean(axis=0) - poly.center) > 0


# =============================================================================
# Incidence helpers
# =============================================================================

class TestIncidence:

    def test_build_edges_sorted_unique(self, cube):
        edges = build_edges(cube.faces)
        assert len(edges) == 12
        assert edges == sorted(edges)
        assert all(i < j for i, j in edges)

    def test_faces_per_vertex_matches_method(self, cube):
        assert [tuple(fs) for fs in faces_per_vertex(cube.faces, cube.n_vertices)] \
            == list(cube.faces_per_vertex())

    def test_vertex_edges_cube(self, cube):
        incident = cube.faces_per_vertex()
        for v in range(cube.n_vertices):
            edges = vertex_edges(v, incident[v], cube.faces)
            assert len(edges) == 3
            for e in edges:
                assert e.face_a < e.face_b
                assert v in cube.faces[e.face_a] and e.other in cube.faces[e.face_a]
                assert v in cube.faces[e.face_b] and e.other in cube.faces[e.face_b]
            assert len({e.other for e in edges}) == 3

    def test_vertex_edges_isolated_vertex(self):
        assert vertex_edges(5, [], [(0, 1, 2)]) == []


# =============================================================================
# Dual
# =============================================================================

class TestDual:

    def test_cube_gives_octahedron_counts(self, cube):
        d = dual(cube)
        assert (d.n_vertices, d.n_edges, d.n_faces) == (6, 12, 8)
        assert all(len(f) == 3 for f in d.faces)

    def test_octahedron_gives_cube_counts(self, octahedron):
        d = dual(octahedron)
        assert (d.n_vertices, d.n_edges, d.n_faces) == (8, 12, 6)
        assert all(len(f) == 4 for f in d.faces)

    def test_counts_swap(self, seed):
        poly = seed.polyhedron
        d = dual(poly)
        assert d.n_vertices == poly.n_faces
        assert d.n_faces == poly.n_vertices
        assert d.n_edges == poly.n_edges

    def test_sphere_preserved(self, seed):
        poly = seed.polyhedron
        d = dual(poly)
        assert d.radius == poly.radius
        np.testing.assert_allclose(d.center, poly.center)
        assert radius_deviation(d).max() < SPHERE_TOL

    def test_cube_dual_vertices_on_axes(self, cube):
        d = dual(cube)
        expected = np.sort(np.abs(d.vertices), axis=1)
        np.testing.assert_allclose(expected, np.tile([0, 0, cube.radius], (6, 1)), atol=1e-12)

    def test_closed_and_outward(self, seed):
        d = dual(seed.polyhedron)
        ok, errors = validate_polyhedron(d, strict=False)
        assert ok, errors
        assert all(_outward(d, f) for f in range(d.n_faces))
        assert face_planarity_deviation(d).max() < PLANAR_TOL

    def test_new_face_lists_incident_old_faces(self, cube):
        d = dual(cube)
        incident = cube.faces_per_vertex()
        for v, face in enumerate(d.faces):
            assert sorted(face) == sorted(incident[v])

    def test_double_dual_restores_directions(self, seed):
        poly = seed.polyhedron
        dd = dual(dual(poly))
        assert (dd.n_vertices, dd.n_faces) == (poly.n_vertices, poly.n_faces)
        unit = poly.vertices / np.linalg.norm(poly.vertices, axis=1)[:, None]
        unit_dd = dd.vertices / np.linalg.norm(dd.vertices, axis=1)[:, None]
        # Same direction set, possibly reordered
        for u in unit:
            assert np.min(np.linalg.norm(unit_dd - u, axis=1)) < 1e-9

    @pytest.mark.parametrize("method", ["area", "mean"])
    def test_centroid_method(self, cube, method):
        d = dual(cube, centroid_method=method)
        assert d.n_vertices == 6

    def test_unknown_centroid_method(self, cube):
        with pytest.raises(ValueError):
            dual(cube, centroid_method="bogus")

    def test_result_is_plain_polyhedron(self, cube):
        assert type(dual(cube)) is Polyhedron

    def test_orphaned_vertex_raises(self, tetrahedron):
        padded = Polyhedron(tetrahedron.center, tetrahedron.radius,
                            np.vstack([tetrahedron.vertices, [[0.0, 0.0, tetrahedron.radius]]]),
                            tetrahedron.faces)
        with pytest.raises(DegenerateGeometryError) as info:
            dual(padded)
        assert info.value.vertex == 4

    def test_centroid_coplanar_with_center_raises(self):
        """Vertex 0 on +z, its first face centroid on z = 0: the ray misses."""
        vertices = [(0, 0, 1), (1, 0, -0.5), (0, 1, -0.5), (-1, -1, 0)]
        faces = [(0, 1, 2), (0, 2, 3), (0, 3, 1)]
        poly = Polyhedron((0, 0, 0), 1.0, vertices, faces)
        np.testing.assert_allclose(poly.with_centroids().centroids[0], [1 / 3, 1 / 3, 0],
                                   atol=1e-15)
        with pytest.raises(DegenerateGeometryError) as info:
            dual(poly)
        assert info.value.vertex == 0

    def test_after_truncate_raises(self, cube):
        with pytest.raises(InternalConsistencyError):
            dual(truncate(cube))


# =============================================================================
# Kis
# =============================================================================

class TestKis:

    def test_tetrahedron_counts(self, tetrahedron):
        k = kis(tetrahedron)
        assert k.n_vertices == 8
        assert k.n_faces == 12
        assert k.n_edges == 18
        assert k.euler_characteristic == 2

    def test_counts(self, seed):
        poly = seed.polyhedron
        k = kis(poly)
        assert k.n_vertices == poly.n_vertices + poly.n_faces
        assert k.n_faces == sum(len(f) for f in poly.faces)
        assert all(len(f) == 3 for f in k.faces)

    def test_original_vertices_kept_first(self, seed):
        poly = seed.polyhedron
        k = kis(poly)
        np.testing.assert_array_equal(k.vertices[:poly.n_vertices], poly.vertices)

    def test_apexes_on_sphere(self, seed):
        k = kis(seed.polyhedron)
        assert radius_deviation(k).max() < SPHERE_TOL

    def test_closed_and_outward(self, seed):
        k = kis(seed.polyhedron)
        ok, errors = validate_polyhedron(k, strict=False)
        assert ok, errors
        assert all(_outward(k, f) for f in range(k.n_faces))

    def test_triangles_follow_parent_edges(self, cube):
        k = kis(cube)
        first = cube.faces[0]
        apex = cube.n_vertices
        assert k.faces[:4] == tuple((first[i], first[(i + 1) % 4], apex) for i in range(4))

    def test_kis_then_dual(self, tetrahedron):
        kd = dual(kis(tetrahedron))
        assert (kd.n_vertices, kd.n_faces) == (12, 8)


# =============================================================================
# Truncate
# =============================================================================

class TestTruncate:

    def test_counts(self, seed):
        poly = seed.polyhedron
        t = truncate(poly)
        assert t.n_vertices == poly.n_vertices + 2 * poly.n_edges
        assert t.n_faces == poly.n_faces

    def test_face_sizes_double(self, seed):
        poly = seed.polyhedron
        t = truncate(poly)
        assert [len(f) for f in t.faces] == [2 * len(f) for f in poly.faces]

    def test_original_vertices_orphaned(self, cube):
        t = truncate(cube)
        referenced = {v for f in t.faces for v in f}
        assert referenced.isdisjoint(range(cube.n_vertices))
        assert len(referenced) == 2 * cube.n_edges

    def test_faces_are_simple_cycles(self, seed):
        t = truncate(seed.polyhedron)
        for face in t.faces:
            assert len(face) == len(set(face))

    def test_point_position(self, cube):
        chop = 0.75
        t = truncate(cube, chop=chop)
        new = t.vertices[cube.n_vertices:]
        # Every point sits on a cube edge, 1 - chop from its own corner
        for p in new:
            d = np.sort(np.linalg.norm(cube.vertices - p, axis=1))
            np.testing.assert_allclose(d[:2], [1 - chop, chop])

    def test_faces_stay_planar(self, seed):
        t = truncate(seed.polyhedron, chop=0.6)
        assert face_planarity_deviation(t).max() < PLANAR_TOL

    def test_winding_preserved(self, seed):
        t = truncate(seed.polyhedron)
        assert all(_outward(t, f) for f in range(t.n_faces))

    def test_cut_edges_unpaired(self, cube):
        """No vertex-figure faces: the corner cuts are boundary edges."""
        t = truncate(cube)
        ok, _ = validate_polyhedron(t, strict=False)
        assert not ok
        assert len(build_edges(t.faces)) == 3 * cube.n_edges

    def test_half_chop_coincident_pairs(self, seed):
        poly = seed.polyhedron
        t = truncate(poly, chop=0.5)
        pairs = find_coincident_vertices(t.vertices)
        assert len(pairs) == poly.n_edges
        assert all(i >= poly.n_vertices for pair in pairs for i in pair)

    def test_no_coincident_pairs_by_default(self, seed):
        t = truncate(seed.polyhedron)
        assert find_coincident_vertices(t.vertices) == []

    @pytest.mark.parametrize("chop", [0.0, 1.0, -0.5, 1.5])
    def test_chop_out_of_range(self, cube, chop):
        with pytest.raises(ValueError, match="chop"):
            truncate(cube, chop=chop)

    def test_radius_carried(self, cube):
        t = truncate(cube)
        assert t.radius == cube.radius

    def test_truncate_then_kis(self):
        """kis accepts the open truncate output."""
        poly = make_seed(SolidKind.OCTAHEDRON).polyhedron
        tk = kis(truncate(poly))
        assert tk.n_faces == 2 * 3 * poly.n_faces
