"""Beam paths: open radius paths thickened into a band of material."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from roundpath.chain import BEAM_MODES
from roundpath.engine import get_engine
from roundpath.errors import (InsufficientPathError, InvalidBeamModeError,
                              InvalidBeamParametersError)
from roundpath.points import RadiusPoint, RadiusPointPath, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeamParameters:
    """End-cap parameters for a beam.

    ``None`` means *unset*: the value is left out of the engine call so
    that the engine's own default applies.

    Attributes:
        start_angle: Cap angle at the first point, in degrees.
        end_angle: Cap angle at the last point, in degrees.
        mode: How the angles are interpreted, one of 0, 1, 2, 3
            (see :mod:`roundpath.chain`).
    """
    start_angle: Optional[float] = None
    end_angle: Optional[float] = None
    mode: Optional[int] = None

    def __post_init__(self):
        if self.mode is not None and (isinstance(self.mode, bool) or self.mode not in BEAM_MODES):
            raise InvalidBeamModeError(f'bad beam mode: {self.mode!r}; expected one of {BEAM_MODES}')

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "BeamParameters":
        if values is None:
            return cls()
        unknown = set(values) - {'start_angle', 'end_angle', 'mode'}
        if unknown:
            raise InvalidBeamParametersError(
                f'bad beam parameters passed to from_mapping: {sorted(unknown)}')
        return cls(**values)

    def engine_kwargs(self) -> Dict[str, Any]:
        """Only the parameters that were actually set."""

        kwargs = {}
        if self.start_angle is not None:
            kwargs['start_angle'] = self.start_angle
        if self.end_angle is not None:
            kwargs['end_angle'] = self.end_angle
        if self.mode is not None:
            kwargs['mode'] = self.mode
        return kwargs


def synthesize_midpoint(path: RadiusPointPath) -> RadiusPointPath:
    """Insert a sharp midpoint into a two-point path; longer paths are returned as is.

    Chain offsets decide which way a path turns from triples of
    consecutive points, so a single segment needs a third point.
    """

    if len(path) != 2:
        return list(path)
    a, b = path
    mid = RadiusPoint((a.x + b.x) / 2, (a.y + b.y) / 2, 0)
    logger.debug('two-point beam path, inserting midpoint (%s, %s)', mid.x, mid.y)
    return [a, mid, b]


def build_beam_boundary(path, offset_inner: float, offset_outer: float,
                        params=None, *, engine=None) -> RadiusPointPath:
    """Return the radius-point outline of a beam following ``path``.

    ``params`` is a :class:`BeamParameters`, a mapping with any of
    ``start_angle``, ``end_angle`` and ``mode``, or ``None``.  Errors
    from the engine are not caught.
    """

    pts = list(path)
    if len(pts) < 2:
        raise InsufficientPathError(
            f'beam path needs at least 2 points, got {len(pts)}')
    pts = normalize(pts)
    if not isinstance(params, BeamParameters):
        params = BeamParameters.from_mapping(params)

    chain = synthesize_midpoint(pts)
    backend = get_engine(engine)
    return backend.chain_offset(chain, offset_inner, offset_outer,
                                **params.engine_kwargs())
