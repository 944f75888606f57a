"""Tests for the list-based surface and solid representation."""

import pytest

from roundpath.geom import point
from roundpath.loft import extrude_filleted
from roundpath.solid import (issolid, issolidclosed, issurface, normfunc,
                             reversesurface, solid, solidbbox, surface,
                             transformsolid, volumeof)
from roundpath.triangulator import clean_loop, triangulate_loops
from roundpath.xform import Translation


def tri_surface():
    verts = [[0, 0, 0, 1], [1, 0, 0, 1], [0, 1, 0, 1]]
    norms = [[0, 0, 1, 0]] * 3
    return surface(verts, norms, [[0, 1, 2]])


class TestSurface:

    def test_empty(self):
        assert surface() == ['surface', [], [], [], [], []]

    def test_defaults(self):
        s = tri_surface()
        assert issurface(s, fast=False)
        assert s[4] == [] and s[5] == []

    @pytest.mark.parametrize('args', [
        ([],),
        ([[0, 0, 0, 1]], [], []),
        ([[0, 0, 0, 1]], [[0, 0, 1, 0]], [[0, 1, 2]]),
        ([[0, 0, 0, 1]], [[0, 0, 1, 0]], [[0, 0]]),
        ([], [], [], [], [], []),
    ])
    def test_bad_arguments(self, args):
        with pytest.raises(ValueError):
            surface(*args)

    def test_reverse(self):
        r = reversesurface(tri_surface())
        assert r[3] == [[0, 2, 1]]
        assert r[2][0] == [0, 0, -1, 0]


class TestSolid:

    def test_empty_solid(self):
        assert solid() == ['solid', [], [], []]
        assert solid([]) == ['solid', [], [], []]

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            solid(['not a surface'])
        with pytest.raises(ValueError):
            solid([tri_surface()], 'steel')
        assert not issolid(['solid', []])

    def test_open_surface_is_not_closed(self):
        assert not issolidclosed(solid([tri_surface()]))

    def test_transform_moves_box(self):
        box = extrude_filleted([(0, 0), (2, 0), (2, 3), (0, 3)], 4)
        moved = transformsolid(box, Translation(point(10, 20, 30)))
        lo, hi = solidbbox(moved)
        assert lo[:3] == pytest.approx([10, 20, 30])
        assert hi[:3] == pytest.approx([12, 23, 34])
        assert volumeof(moved) == pytest.approx(24)
        # the original is untouched
        assert solidbbox(box)[0][:3] == pytest.approx([0, 0, 0])

    def test_reversed_surfaces_give_negative_volume(self):
        box = extrude_filleted([(0, 0), (2, 0), (2, 3), (0, 3)], 4)
        inside_out = solid([reversesurface(s) for s in box[1]])
        assert volumeof(inside_out) == pytest.approx(-24)

    def test_bbox_of_empty_solid(self):
        with pytest.raises(ValueError):
            solidbbox(solid())


def test_normfunc():
    n = normfunc([point(0, 0, 0), point(1, 0, 0), point(0, 1, 0)])
    assert n == pytest.approx([0, 0, 1, 0])
    assert normfunc([point(0, 0, 0), point(1, 0, 0), point(2, 0, 0)]) is None


class TestTriangulator:

    def test_square(self):
        tris = triangulate_loops([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert len(tris) == 2

    def test_triangles_are_counterclockwise(self):
        loop = [(0, 1), (1, 1), (1, 0), (0, 0)]
        for a, b, c in triangulate_loops(loop):
            (x0, y0), (x1, y1), (x2, y2) = loop[a], loop[b], loop[c]
            assert (x1 - x0) * (y2 - y0) - (y1 - y0) * (x2 - x0) > 0

    def test_hole(self):
        outer = [(0, 0), (10, 0), (10, 10), (0, 10)]
        hole = [(4, 4), (4, 6), (6, 6), (6, 4)]
        pts = outer + hole
        tris = triangulate_loops(outer, [hole])
        area = 0.0
        for a, b, c in tris:
            (x0, y0), (x1, y1), (x2, y2) = pts[a], pts[b], pts[c]
            area += ((x1 - x0) * (y2 - y0) - (y1 - y0) * (x2 - x0)) / 2
        assert area == pytest.approx(96)

    def test_too_few_points(self):
        assert triangulate_loops([(0, 0), (1, 0)]) == []

    def test_clean_loop(self):
        assert clean_loop([(0, 0), (1, 0), (1, 0), (1, 1), (0, 0)]) == [(0, 0), (1, 0), (1, 1)]
