"""Cap triangulation for roundpath extrusions.

We delegate to ``mapbox-earcut`` (the fast ear clipping implementation
used by Mapbox GL).  The helpers here normalise XY loops into the flat
vertex/ring-end format earcut expects and convert the resulting indices
back into index triples over the combined loop vertices, so callers can
reuse the vertex order they already lofted.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate extrusion caps"
    ) from exc

from roundpath.geom import epsilon, signedAreaXY

Point2D = Tuple[float, float]


def triangulate_loops(outer: Sequence[Sequence[float]],
                      holes: Iterable[Sequence[Sequence[float]]] | None = None
                      ) -> List[Tuple[int, int, int]]:
    """Return index triples covering ``outer`` minus ``holes``.

    Indices refer to the concatenation ``outer + holes[0] + holes[1] ...``
    in the order given, so the loops must already be free of duplicate
    closing points.  Triangles are always wound counterclockwise (normal
    along +Z); callers flip them for downward-facing caps.
    """

    loops = [list(outer)] + [list(h) for h in (holes or [])]
    if len(loops[0]) < 3:
        return []

    flat: List[Point2D] = []
    ring_ends: List[int] = []
    for loop in loops:
        for pt in loop:
            flat.append((float(pt[0]), float(pt[1])))
        ring_ends.append(len(flat))

    vertices = np.asarray(flat, dtype=np.float64).reshape(-1, 2)
    rings = np.asarray(ring_ends, dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, rings)

    triangles: List[Tuple[int, int, int]] = []
    for i in range(0, len(indices), 3):
        tri = (int(indices[i]), int(indices[i + 1]), int(indices[i + 2]))
        area = signedAreaXY([flat[j] for j in tri])
        if abs(area) <= epsilon * epsilon:
            continue
        if area < 0:
            tri = (tri[0], tri[2], tri[1])
        triangles.append(tri)
    return triangles


def clean_loop(points: Sequence[Sequence[float]]) -> List[Point2D]:
    """Drop consecutive duplicates and a repeated closing point."""

    loop: List[Point2D] = []
    for pt in points:
        x, y = float(pt[0]), float(pt[1])
        if loop and _near(loop[-1], (x, y)):
            continue
        loop.append((x, y))
    while len(loop) > 1 and _near(loop[0], loop[-1]):
        loop.pop()
    return loop


def _near(p1: Point2D, p2: Point2D) -> bool:
    return abs(p1[0] - p2[0]) <= epsilon and abs(p1[1] - p2[1]) <= epsilon
