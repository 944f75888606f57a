"""Tests for shell assembly and the native shell offsets."""

import math

import pytest
from shapely.geometry import Polygon

from roundpath.engine import native
from roundpath.errors import GeometryError, InvalidPointError
from roundpath.fillet import CLOSED
from roundpath.shell import ShellResult, build_shell

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


def test_inward_shell_of_a_square():
    shell = build_shell(SQUARE, -2)
    assert isinstance(shell, ShellResult)
    assert shell.area == pytest.approx(64)
    assert shell.base == [(0, 0), (10, 0), (10, 10), (0, 10)]
    outer, inner = shell.boundaries()
    assert len(outer) == 1 and len(inner) == 1
    assert Polygon(inner[0]).area == pytest.approx(36)


def test_outward_shell_has_rounded_outside():
    shell = build_shell(SQUARE, 2)
    assert shell.inner.area == pytest.approx(100)
    assert shell.area == pytest.approx(80 + 4 * math.pi, rel=1e-2)


def test_offset_order_does_not_matter():
    a = build_shell(SQUARE, -1, 1)
    b = build_shell(SQUARE, 1, -1)
    assert a.area == pytest.approx(b.area)
    assert a.shape.symmetric_difference(b.shape).area == pytest.approx(0, abs=1e-9)


def test_rounded_outline_shell():
    rounded = build_shell([(0, 0, 3), (10, 0, 3), (10, 10, 3), (0, 10, 3)], -1,
                          resolution=16)
    assert len(rounded.base) == 64
    assert rounded.area < build_shell(SQUARE, -1).area


def test_minimum_outer_radius_rounds_corners():
    sharp = build_shell(SQUARE, -2)
    soft = build_shell(SQUARE, -2, min_r_outer=1)
    assert soft.outer.area == pytest.approx(100 - (4 - math.pi), rel=1e-2)
    assert soft.area < sharp.area


def test_fill_is_added_back():
    shell = build_shell(SQUARE, -2, fill=[(4, 4), (6, 4), (6, 6), (4, 6)])
    assert shell.area == pytest.approx(68)


def test_equal_offsets_leave_nothing():
    with pytest.raises(GeometryError):
        build_shell(SQUARE, 0, 0)


def test_bad_points():
    with pytest.raises(InvalidPointError):
        build_shell([], -1)


class RecordingEngine:

    def __init__(self):
        self.calls = []

    def fillet(self, path, resolution, mode):
        self.calls.append(('fillet', path, resolution, mode))
        return native.fillet(path, resolution, mode)

    def shell_offset(self, base, *args, **kwargs):
        self.calls.append(('shell_offset', base, args, kwargs))
        return native.shell_offset(base, *args, **kwargs)

    def chain_offset(self, *args, **kwargs):
        raise AssertionError('not used')

    extrude_filleted = extrude_with_end_radii = chain_offset


def test_engine_calls():
    engine = RecordingEngine()
    fill = [(4, 4), (6, 4), (6, 6), (4, 6)]
    build_shell(SQUARE, -2, 1, 0.5, 0.25, 7, fill=fill, engine=engine)
    (name, path, resolution, mode), (name2, base, args, kwargs) = engine.calls
    assert name == 'fillet' and name2 == 'shell_offset'
    assert path == [(0, 0, 0), (10, 0, 0), (10, 10, 0), (0, 10, 0)]
    assert (resolution, mode) == (7, CLOSED)
    assert args == (-2, 1, 0.5, 0.25)
    assert kwargs == {'fill': fill}


class TestNativeHelpers:

    def test_as_geometry(self):
        poly = Polygon(SQUARE)
        assert native.as_geometry(poly) is poly
        assert native.as_geometry(SQUARE).area == pytest.approx(100)
        two = native.as_geometry([SQUARE, [(20, 0), (21, 0), (21, 1), (20, 1)]])
        assert two.area == pytest.approx(101)
        assert native.as_geometry([]).is_empty

    def test_round2d(self):
        poly = Polygon(SQUARE)
        assert native.round2d(poly) is poly
        assert native.round2d(poly, outer_radius=2).area < 100

    def test_empty_base(self):
        with pytest.raises(GeometryError):
            native.shell_offset([], -1)
