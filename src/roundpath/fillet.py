"""Corner rounding for radius-point polygons and polylines.

Every vertex of a radius path carries its own fillet radius.  A corner
with a non-zero radius is replaced by a run of points on the circular
arc tangent to both of its edges; a zero radius leaves the corner
sharp.  A negative radius mirrors the arc center across the tangent
chord, which cuts a scallop into the corner instead of rounding it.

Three modes are supported:

* ``CLOSED`` (0): closed polygon.  Where two neighbouring fillets would
  overlap on their shared edge both are shrunk proportionally.
* ``STRICT`` (1): closed polygon, but an oversized radius raises
  :class:`~roundpath.errors.GeometryError` instead of being shrunk.
* ``OPEN`` (2): open polyline.  The first and last points are never
  rounded; radii are shrunk as in ``CLOSED``.

The number of output points per corner depends only on whether the
radius is zero, never on its size, so layers of the same path inset by
different amounts produce loops that can be lofted point for point.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from roundpath.errors import GeometryError
from roundpath.geom import (add2, close, cross2, dist2, dot2, epsilon,
                            scale2, sub2, unit2)
from roundpath.points import RadiusPoint, normalize

logger = logging.getLogger(__name__)

CLOSED = 0
STRICT = 1
OPEN = 2
FILLET_MODES = (CLOSED, STRICT, OPEN)

DEFAULT_RESOLUTION = 5

Point2D = Tuple[float, float]


def simplify(path: Sequence[RadiusPoint], closed: bool = True) -> List[RadiusPoint]:
    """Drop repeated points and points in the middle of a straight run.

    A radius on a point that sits on a straight line has nothing to
    round, so such points are removed whatever their radius.  The end
    points of an open path are always kept.
    """

    pts = [p for i, p in enumerate(path)
           if i == 0 or not _same(p, path[i - 1])]
    if closed:
        while len(pts) > 1 and _same(pts[0], pts[-1]):
            pts.pop()

    changed = True
    while changed and len(pts) > 2:
        changed = False
        n = len(pts)
        indices = range(n) if closed else range(1, n - 1)
        for i in indices:
            prev, cur, nxt = pts[i - 1], pts[i], pts[(i + 1) % n]
            if _is_straight(prev, cur, nxt):
                del pts[i]
                changed = True
                break
    return pts


def fillet(path, resolution: int = DEFAULT_RESOLUTION, mode: int = CLOSED) -> List[Point2D]:
    """Round the corners of ``path`` and return the outline as ``(x, y)`` tuples.

    For the closed modes the outline is not repeated at the end; the
    last point connects back to the first.
    """

    if mode not in FILLET_MODES:
        raise ValueError(f'bad mode passed to fillet: {mode!r}')
    if resolution < 1:
        raise ValueError(f'bad resolution passed to fillet: {resolution!r}')

    closed = mode != OPEN
    pts = simplify(normalize(path), closed=closed)
    if closed and len(pts) < 3:
        raise GeometryError(f'degenerate polygon passed to fillet: {pts}')
    if not closed and len(pts) < 2:
        raise GeometryError(f'degenerate polyline passed to fillet: {pts}')

    n = len(pts)
    tangents = [0.0] * n
    half_angles = [0.0] * n
    for i in range(n):
        if not closed and i in (0, n - 1):
            continue
        if pts[i].r == 0:
            continue
        half = _half_angle(pts[i - 1], pts[i], pts[(i + 1) % n])
        half_angles[i] = half
        tangents[i] = abs(pts[i].r) / math.tan(half)

    tangents = _fit_tangents(pts, tangents, closed, strict=(mode == STRICT))

    outline: List[Point2D] = []
    for i, p in enumerate(pts):
        if tangents[i] == 0.0:
            outline.append((p.x, p.y))
            continue
        outline.extend(_corner_arc(pts[i - 1], p, pts[(i + 1) % n],
                                   tangents[i], half_angles[i], resolution))
    return outline


def _fit_tangents(pts, tangents, closed, strict):
    n = len(pts)
    edges = range(n) if closed else range(n - 1)
    scale = [1.0] * n
    for i in edges:
        j = (i + 1) % n
        need = tangents[i] + tangents[j]
        if need <= 0.0:
            continue
        avail = dist2(pts[i], pts[j])
        if need <= avail + epsilon:
            continue
        if strict:
            raise GeometryError(
                f'radii {pts[i].r} and {pts[j].r} do not fit on edge '
                f'({pts[i].x}, {pts[i].y}) - ({pts[j].x}, {pts[j].y}) of length {avail}')
        factor = avail / need
        scale[i] = min(scale[i], factor)
        scale[j] = min(scale[j], factor)

    fitted = [t * s for t, s in zip(tangents, scale)]
    for i in range(n):
        if scale[i] < 1.0:
            logger.debug('fillet radius %s at (%s, %s) clamped by %.4f',
                         pts[i].r, pts[i].x, pts[i].y, scale[i])
    return fitted


def _half_angle(prev, cur, nxt) -> float:
    u = unit2(sub2(prev, cur))
    v = unit2(sub2(nxt, cur))
    cosang = max(-1.0, min(1.0, dot2(u, v)))
    ang = math.acos(cosang)
    if ang < 1e-6:
        raise GeometryError(f'corner at ({cur.x}, {cur.y}) folds back on itself')
    return ang / 2.0


def _corner_arc(prev, cur, nxt, tangent, half, resolution) -> List[Point2D]:
    u = unit2(sub2(prev, cur))
    v = unit2(sub2(nxt, cur))
    start = add2(cur, scale2(u, tangent))
    end = add2(cur, scale2(v, tangent))
    radius = tangent * math.tan(half)
    bisector = unit2(add2(u, v))
    center = add2(cur, scale2(bisector, radius / math.sin(half)))
    if cur.r < 0:
        # reflect across the tangent chord
        center = (start[0] + end[0] - center[0], start[1] + end[1] - center[1])

    a0 = math.atan2(start[1] - center[1], start[0] - center[0])
    a1 = math.atan2(end[1] - center[1], end[0] - center[0])
    sweep = a1 - a0
    while sweep > math.pi:
        sweep -= 2.0 * math.pi
    while sweep <= -math.pi:
        sweep += 2.0 * math.pi

    if resolution == 1:
        mid = a0 + sweep / 2.0
        return [(center[0] + radius * math.cos(mid),
                 center[1] + radius * math.sin(mid))]
    arc = []
    for k in range(resolution):
        a = a0 + sweep * k / (resolution - 1)
        arc.append((center[0] + radius * math.cos(a),
                    center[1] + radius * math.sin(a)))
    return arc


def _same(a, b) -> bool:
    return close(a[0], b[0]) and close(a[1], b[1])


def _is_straight(prev, cur, nxt) -> bool:
    u = sub2(cur, prev)
    v = sub2(nxt, cur)
    lu, lv = math.hypot(*u), math.hypot(*v)
    if lu < epsilon or lv < epsilon:
        return False
    return abs(cross2(u, v)) / (lu * lv) < 1e-9 and dot2(u, v) > 0
