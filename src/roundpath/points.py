"""Radius points and the normalizer that produces them.

A *radius point* is a planar coordinate paired with a signed corner
radius, ``(x, y, r)``.  User input may omit the radius on any point;
:func:`normalize` is the single place where the two input shapes are
collapsed into canonical :class:`RadiusPoint` triples.  Everything
downstream of it (the rounding engine, the beam generator, the shell
builder) only ever sees triples.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from roundpath.errors import InvalidPointError


class RadiusPoint(NamedTuple):
    """A 2D vertex with a signed fillet radius.

    Positive ``r`` rounds the corner, negative ``r`` produces an inverse
    (notch) fillet and zero leaves the corner sharp.
    """

    x: float
    y: float
    r: float = 0


Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]
RadiusPointPath = List[RadiusPoint]


def to_radius_point(pt: Sequence[float]) -> RadiusPoint:
    """Return ``pt`` as a :class:`RadiusPoint`, defaulting a missing radius to 0."""

    if isinstance(pt, RadiusPoint):
        return pt
    if (isinstance(pt, (str, bytes)) or not hasattr(pt, "__len__")
            or not hasattr(pt, "__getitem__") or len(pt) not in (2, 3)):
        raise InvalidPointError(f'bad point passed to normalize: {pt!r}')
    comps = [pt[i] for i in range(len(pt))]
    for comp in comps:
        if isinstance(comp, bool) or not isinstance(comp, numbers.Real):
            raise InvalidPointError(f'bad point component passed to normalize: {pt!r}')
    comps = [_plain(c) for c in comps]
    if len(comps) == 2:
        return RadiusPoint(comps[0], comps[1], 0)
    return RadiusPoint(comps[0], comps[1], comps[2])


def _plain(c):
    # numpy scalars become builtin numbers so the matrix code accepts them
    if type(c) in (int, float):
        return c
    return int(c) if isinstance(c, numbers.Integral) else float(c)


def normalize(points: Iterable[Sequence[float]]) -> RadiusPointPath:
    """Convert a sequence of ``(x, y)`` / ``(x, y, r)`` records into radius points.

    Records may be lists, tuples or any other indexable sequence of real
    numbers, so the rows of an ``(N, 2)`` or ``(N, 3)`` numpy array work
    too.

    The result has the same length and order as ``points``.  Only the
    shape of each record is checked; whether the radii can actually be
    built is left to the rounding engine.
    """

    path = [to_radius_point(pt) for pt in points]
    if not path:
        raise InvalidPointError('empty point list passed to normalize')
    return path


def is_radius_path(value) -> bool:
    """``True`` if ``value`` is a non-empty list of :class:`RadiusPoint`."""

    return (isinstance(value, list) and len(value) > 0
            and all(isinstance(p, RadiusPoint) for p in value))


def translate_points(points: Iterable[Sequence[float]], dx: float = 0.0,
                     dy: float = 0.0) -> RadiusPointPath:
    """Return a copy of ``points`` shifted by ``(dx, dy)``; radii are kept."""

    return [RadiusPoint(p.x + dx, p.y + dy, p.r) for p in normalize(points)]


def mirror_points(points: Iterable[Sequence[float]], angle: float = 0.0,
                  end_attenuation: Tuple[int, int] = (0, 0)) -> RadiusPointPath:
    """Mirror a path across the line through the origin at ``angle`` degrees.

    The mirrored copy is appended in reverse order so that a half
    profile drawn on one side of the mirror line becomes a complete
    closed profile.  ``end_attenuation`` drops that many points from the
    start and the end of the mirrored copy, which is how points lying on
    the mirror line avoid being duplicated.
    """

    path = normalize(points)
    skip_start, skip_end = end_attenuation
    if skip_start < 0 or skip_end < 0:
        raise ValueError('bad end_attenuation passed to mirror_points')

    rad = math.radians(2.0 * angle)
    c, s = math.cos(rad), math.sin(rad)
    mirrored = [RadiusPoint(c * p.x + s * p.y, s * p.x - c * p.y, p.r)
                for p in path]
    mirrored.reverse()
    mirrored = mirrored[skip_end:len(mirrored) - skip_start]
    return path + mirrored
