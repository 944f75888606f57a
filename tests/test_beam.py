"""Tests for the beam path generator."""

import pytest

from roundpath.beam import BeamParameters, build_beam_boundary, synthesize_midpoint
from roundpath.errors import (GeometryError, InsufficientPathError,
                              InvalidBeamModeError, InvalidBeamParametersError,
                              InvalidPointError, RoundPathError)
from roundpath.points import RadiusPoint


class RecordingEngine:
    """Engine double that records chain_offset calls."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result if result is not None else [RadiusPoint(0, 0, 0)]
        self.error = error

    def chain_offset(self, path, offset1, offset2=None, **kwargs):
        self.calls.append((path, offset1, offset2, kwargs))
        if self.error is not None:
            raise self.error
        return self.result

    def fillet(self, *args, **kwargs):
        raise AssertionError('not used')

    extrude_filleted = shell_offset = extrude_with_end_radii = fillet


def test_two_point_path_gets_a_midpoint():
    engine = RecordingEngine()
    build_beam_boundary([(0, 0), (50, 0)], 2, -2, engine=engine)
    (path, off1, off2, kwargs), = engine.calls
    assert path == [(0, 0, 0), (25, 0, 0), (50, 0, 0)]
    assert (off1, off2) == (2, -2)
    assert kwargs == {}


def test_midpoint_is_sharp_and_ends_keep_radii():
    path = synthesize_midpoint([RadiusPoint(0, 0, 1), RadiusPoint(10, 4, -2)])
    assert path == [(0, 0, 1), (5, 2, 0), (10, 4, -2)]


def test_longer_paths_are_passed_through():
    engine = RecordingEngine()
    pts = [(0, 0), (10, 0, 3), (10, 10), (20, 10)]
    build_beam_boundary(pts, 1, -1, engine=engine)
    assert engine.calls[0][0] == [(0, 0, 0), (10, 0, 3), (10, 10, 0), (20, 10, 0)]


def test_engine_result_is_returned_unchanged():
    sentinel = [RadiusPoint(1, 2, 3)]
    engine = RecordingEngine(result=sentinel)
    assert build_beam_boundary([(0, 0), (1, 0)], 1, 2, engine=engine) is sentinel


@pytest.mark.parametrize('params,expected', [
    (None, {}),
    ({}, {}),
    ({'mode': 2}, {'mode': 2}),
    ({'start_angle': 30, 'end_angle': -15}, {'start_angle': 30, 'end_angle': -15}),
    (BeamParameters(start_angle=0, mode=0), {'start_angle': 0, 'mode': 0}),
])
def test_only_set_parameters_are_forwarded(params, expected):
    engine = RecordingEngine()
    build_beam_boundary([(0, 0), (5, 5), (10, 0)], 1, -1, params, engine=engine)
    assert engine.calls[0][3] == expected


@pytest.mark.parametrize('path', [[], [(0, 0)], [(3, 4, 1)]])
def test_too_few_points(path):
    engine = RecordingEngine()
    with pytest.raises(InsufficientPathError):
        build_beam_boundary(path, 1, -1, engine=engine)
    assert engine.calls == []


def test_bad_points_are_rejected_before_the_engine():
    engine = RecordingEngine()
    with pytest.raises(InvalidPointError):
        build_beam_boundary([(0, 0), ('a', 1)], 1, -1, engine=engine)
    assert engine.calls == []


def test_engine_errors_propagate():
    engine = RecordingEngine(error=GeometryError('boom'))
    with pytest.raises(GeometryError, match='boom'):
        build_beam_boundary([(0, 0), (10, 0)], 1, -1, engine=engine)


class TestBeamParameters:

    @pytest.mark.parametrize('mode', [4, -1, True, 'x'])
    def test_bad_mode(self, mode):
        with pytest.raises(InvalidBeamModeError):
            BeamParameters(mode=mode)

    def test_unknown_keys(self):
        with pytest.raises(InvalidBeamParametersError, match='bad beam parameters'):
            BeamParameters.from_mapping({'angle': 3})

    def test_unknown_keys_stop_the_call(self):
        engine = RecordingEngine()
        with pytest.raises(RoundPathError):
            build_beam_boundary([(0, 0), (1, 0)], 1, -1, {'start': 0}, engine=engine)
        assert engine.calls == []

    def test_bad_mode_in_mapping_stops_the_call(self):
        engine = RecordingEngine()
        with pytest.raises(InvalidBeamModeError):
            build_beam_boundary([(0, 0), (1, 0)], 1, -1, {'mode': 9}, engine=engine)
        assert engine.calls == []

    def test_defaults_are_unset(self):
        assert BeamParameters().engine_kwargs() == {}


def test_native_engine_beam():
    result = build_beam_boundary([(0, 0), (50, 0)], 2, -2, engine='native')
    coords = [c for p in result for c in (p.x, p.y)]
    assert coords == pytest.approx([0, -2, 25, -2, 50, -2, 50, 2, 25, 2, 0, 2])


@pytest.mark.parametrize('mode', [0, 1])
def test_native_engine_square_caps_by_default(mode):
    result = build_beam_boundary([(0, 0), (50, 0)], 2, -2, {'mode': mode}, engine='native')
    coords = [c for p in result for c in (p.x, p.y)]
    assert coords == pytest.approx([0, -2, 25, -2, 50, -2, 50, 2, 25, 2, 0, 2])


def test_native_engine_forward_only_beam():
    result = build_beam_boundary([(0, 0), (50, 0)], 2, -2, {'mode': 2}, engine='native')
    coords = [c for p in result for c in (p.x, p.y)]
    assert coords == pytest.approx([0, 2, 25, 2, 50, 2])
