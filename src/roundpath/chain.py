"""Chain offsets: turning an open radius path into a beam outline.

A chain offset walks an open path and places a parallel boundary at a
fixed distance from it, vertex by vertex.  Two such boundaries joined
at the ends by cap lines give the outline of a beam that follows the
path.  The corner radii travel with the boundary: on the outside of a
turn a radius grows by the offset, on the inside it shrinks, so that
the rounded beam keeps a constant width through each bend.

End caps are controlled by ``start_angle``, ``end_angle`` and ``mode``:

====  ===================================================  =========
mode  end angles                                           default
====  ===================================================  =========
0     relative to the end legs; negative end radii flare   90
1     relative to the end legs; no flare                   90
2     as 0, but only the ``offset1`` side is returned      90
3     absolute from +X; no flare                           0
====  ===================================================  =========
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from roundpath.errors import GeometryError, InvalidBeamModeError
from roundpath.geom import (add2, angle2, cross2, direction2, epsilon,
                            leftnormal2, lineLineIntersectXY, scale2, sign,
                            signedAreaXY, sub2, unit2)
from roundpath.points import RadiusPoint, normalize

BEAM_MODES = (0, 1, 2, 3)
RELATIVE_MODES = (0, 1, 2)
FLARE_MODES = (0, 2)
FORWARD_ONLY_MODE = 2

FLARE_LENGTH_FACTOR = 10.0


def path_winding(path: Sequence[RadiusPoint]) -> int:
    """+1 for a counterclockwise (or straight) path, -1 for a clockwise one.

    The path is treated as if its last point connected back to its first.
    """

    return -1 if signedAreaXY(path) < 0 else 1


def offset_vertex(prev, cur, nxt, distance: float, min_radius: float = 0.0) -> RadiusPoint:
    """Offset ``cur`` by ``distance`` to the left of travel (right when negative).

    ``prev`` or ``nxt`` may be the same point as ``cur`` at the ends of an
    open path, in which case only the remaining segment is used.
    """

    if distance == 0:
        return RadiusPoint(cur.x, cur.y, cur.r)

    has_prev = prev is not None and _distinct(prev, cur)
    has_next = nxt is not None and _distinct(cur, nxt)
    if not (has_prev or has_next):
        raise GeometryError(f'isolated point ({cur.x}, {cur.y}) cannot be offset')

    d_in = unit2(sub2(cur, prev)) if has_prev else None
    d_out = unit2(sub2(nxt, cur)) if has_next else None

    if d_in is None or d_out is None:
        d = d_in or d_out
        x, y = add2(cur, scale2(leftnormal2(d), distance))
        return RadiusPoint(x, y, cur.r)

    p_in = add2(cur, scale2(leftnormal2(d_in), distance))
    p_out = add2(cur, scale2(leftnormal2(d_out), distance))
    hit = lineLineIntersectXY(p_in, d_in, p_out, d_out)
    if hit is False:
        hit = p_in

    r = cur.r
    if r != 0:
        turn = sign(cross2(d_in, d_out))
        side = sign(distance)
        mag = abs(r) - abs(distance) if turn == side else abs(r) + abs(distance)
        r = math.copysign(max(mag, min_radius, 0.0), r) or 0
    return RadiusPoint(hit[0], hit[1], r)


def offset_path(path: Sequence[RadiusPoint], distance: float, closed: bool = False,
                min_radius: float = 0.0) -> List[RadiusPoint]:
    """Offset every vertex of ``path`` by ``distance`` to the left of travel."""

    n = len(path)
    out = []
    for i in range(n):
        if closed:
            prev, nxt = path[i - 1], path[(i + 1) % n]
        else:
            prev = path[i - 1] if i > 0 else None
            nxt = path[i + 1] if i < n - 1 else None
        out.append(offset_vertex(prev, path[i], nxt, distance, min_radius))
    return out


def chain_offset(path, offset1: float, offset2: Optional[float] = None,
                 start_angle: Optional[float] = None,
                 end_angle: Optional[float] = None,
                 mode: Optional[int] = None,
                 min_radius: float = 0.0) -> List[RadiusPoint]:
    """Build the boundary of a beam of material following ``path``.

    ``offset1`` and ``offset2`` are the distances of the two boundaries
    from the path.  Positive offsets go to the inside of the path's
    overall turn (the left of travel for a counterclockwise or straight
    path).  Without ``offset2`` (or in mode 2) only the ``offset1``
    boundary is returned, as an open path; otherwise the result is the
    closed outline ``offset2`` boundary followed by the reversed
    ``offset1`` boundary.
    """

    if mode is None:
        mode = 0
    if mode not in BEAM_MODES:
        raise InvalidBeamModeError(f'bad mode passed to chain_offset: {mode!r}')

    pts = normalize(path)
    if len(pts) < 2:
        raise GeometryError('chain_offset needs at least two points')
    last = len(pts) - 1
    first_leg = angle2(pts[0], pts[1])
    last_leg = angle2(pts[last], pts[last - 1])

    if mode in RELATIVE_MODES:
        start = first_leg + (90.0 if start_angle is None else start_angle)
        end = last_leg + (90.0 if end_angle is None else end_angle)
    else:
        start = 0.0 if start_angle is None else start_angle
        end = 0.0 if end_angle is None else end_angle

    winding = path_winding(pts)
    flare = mode in FLARE_MODES

    side1 = _boundary(pts, winding * offset1, start, end, min_radius)
    if offset2 is None or mode == FORWARD_ONLY_MODE:
        return _with_flares(side1, pts, None, flare)
    side2 = _boundary(pts, winding * offset2, start, end, min_radius)

    line1 = _with_flares(side1, pts, side2, flare)
    line2 = _with_flares(side2, pts, side1, flare)
    return line2 + list(reversed(line1))


def _boundary(pts, distance, start, end, min_radius):
    line = offset_path(pts, distance, closed=False, min_radius=min_radius)
    last = len(pts) - 1
    head = _cap_point(pts[0], start, line[0], sub2(pts[1], pts[0]))
    tail = _cap_point(pts[last], end, line[last], sub2(pts[last - 1], pts[last]))
    line[0] = RadiusPoint(head[0], head[1], abs(pts[0].r))
    line[last] = RadiusPoint(tail[0], tail[1], abs(pts[last].r))
    return line


def _cap_point(anchor, angle, on_line, leg):
    hit = lineLineIntersectXY(anchor, direction2(angle), on_line, unit2(leg))
    if hit is False:
        raise GeometryError(f'end angle {angle} is parallel to the path leg at '
                            f'({anchor.x}, {anchor.y})')
    return hit


def _with_flares(line, pts, other, flare):
    if not flare:
        return line
    out = list(line)
    last = len(pts) - 1
    if pts[last].r < 0:
        out.append(_flare_point(out[-1], other[last] if other else None,
                                pts[last], pts[last - 1]))
    if pts[0].r < 0:
        out.insert(0, _flare_point(out[0], other[0] if other else None,
                                   pts[0], pts[1]))
    return out


def _flare_point(end_pt, other_end, anchor, neighbour):
    # push outward along the cap line, away from the other boundary
    if other_end is not None and _distinct(end_pt, other_end):
        away = unit2(sub2(end_pt, other_end))
    elif _distinct(end_pt, anchor):
        away = unit2(sub2(end_pt, anchor))
    else:
        away = leftnormal2(unit2(sub2(anchor, neighbour)))
    x, y = add2(end_pt, scale2(away, FLARE_LENGTH_FACTOR * abs(anchor.r)))
    return RadiusPoint(x, y, 0)


def _distinct(a, b) -> bool:
    return abs(a.x - b.x) > epsilon or abs(a.y - b.y) > epsilon
