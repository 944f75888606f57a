"""Tests for radius-point normalization and the point helpers."""

import numpy as np
import pytest

from roundpath.errors import InvalidPointError
from roundpath.extrude import extrude
from roundpath.points import (RadiusPoint, is_radius_path, mirror_points,
                              normalize, translate_points)
from roundpath.solid import volumeof


def test_normalize_square_without_radii():
    result = normalize([[0, 0], [10, 0], [10, 10], [0, 10]])
    assert result == [(0, 0, 0), (10, 0, 0), (10, 10, 0), (0, 10, 0)]
    assert all(isinstance(p, RadiusPoint) for p in result)


def test_normalize_three_components_is_identity():
    pts = [(0, 0, 1), (5, 0, -2), (5, 5, 0.5)]
    assert normalize(pts) == pts


def test_normalize_mixed_points_keeps_order():
    result = normalize([(0, 0), (4, 0, 1.5), [4, 4], (0, 4, 2)])
    assert [p.r for p in result] == [0, 1.5, 0, 2]
    assert [(p.x, p.y) for p in result] == [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_normalize_two_component_radius_is_zero():
    pts = [(i, i * 2) for i in range(7)]
    result = normalize(pts)
    assert len(result) == len(pts)
    assert all(p.r == 0 for p in result)


def test_normalize_accepts_generators_and_radius_points():
    rp = RadiusPoint(1, 2, 3)
    result = normalize(p for p in [rp, (3, 4)])
    assert result[0] is rp
    assert result[1] == (3, 4, 0)


def test_normalize_accepts_numpy_rows():
    result = normalize(np.array([[0, 0], [1, 0]]))
    assert result == [(0, 0, 0), (1, 0, 0)]
    assert all(type(c) is int for p in result for c in p)
    result = normalize(np.array([[0.5, 1.0, 2.0], [3.0, 4.0, -1.0]]))
    assert result == [(0.5, 1.0, 2.0), (3.0, 4.0, -1.0)]
    assert all(type(c) is float for p in result for c in p)


def test_numpy_rows_extrude_along_an_axis():
    sld = extrude(np.array([[0, 0], [4, 0], [4, 4], [0, 4]]), 2, axis='+X')
    assert volumeof(sld) == pytest.approx(32)


@pytest.mark.parametrize('bad', [
    [],
    [(1,)],
    [(1, 2, 3, 4)],
    [(1, 'a')],
    [(True, 0)],
    [(0, 0), None],
    ['xy'],
    np.array([[True, False], [False, True]]),
])
def test_normalize_rejects_malformed_points(bad):
    with pytest.raises(InvalidPointError):
        normalize(bad)


def test_invalid_point_error_is_a_value_error():
    with pytest.raises(ValueError):
        normalize([(1,)])


def test_is_radius_path():
    assert is_radius_path(normalize([(0, 0), (1, 1)]))
    assert not is_radius_path([(0, 0, 0)])
    assert not is_radius_path([])


def test_translate_points_keeps_radii():
    moved = translate_points([(0, 0, 1), (2, 0)], dx=3, dy=-1)
    assert moved == [(3, -1, 1), (5, -1, 0)]


def test_mirror_points_across_x_axis():
    half = [(-5, 0, 0), (-5, 4, 1), (5, 4, 1), (5, 0, 0)]
    full = mirror_points(half)
    assert len(full) == 8
    assert full[:4] == half
    assert full[4] == pytest.approx((5, 0, 0))
    assert full[5] == pytest.approx((5, -4, 1))
    assert full[6] == pytest.approx((-5, -4, 1))
    assert full[7] == pytest.approx((-5, 0, 0))


def test_mirror_points_end_attenuation_drops_points_on_the_line():
    half = [(-5, 0, 0), (-5, 4, 1), (5, 4, 1), (5, 0, 0)]
    full = mirror_points(half, end_attenuation=(1, 1))
    assert len(full) == 6
    assert full[4] == pytest.approx((5, -4, 1))
    assert full[5] == pytest.approx((-5, -4, 1))


def test_mirror_points_across_y_axis():
    full = mirror_points([(0, 5), (3, 2)], angle=90)
    assert full[2] == pytest.approx((-3, 2, 0))
    assert full[3] == pytest.approx((0, 5, 0))


def test_mirror_points_rejects_negative_attenuation():
    with pytest.raises(ValueError):
        mirror_points([(0, 0), (1, 1)], end_attenuation=(-1, 0))
