"""Layered solids: filleted extrusions with rounded or flared ends.

Both extrusion operations build a stack of planar layers between
``z=0`` and ``z=length``.  Each layer is the profile inset by an amount
that follows a quarter circle near the ends: a positive end radius
rounds the edge over, a negative one flares it out like a cove.

* :func:`extrude_filleted` works on radius paths.  Every layer is the
  radius path offset as a whole (so corner radii shrink and grow with
  the inset) and rounded with the same resolution, which keeps the
  point count of all layers equal and lets them be lofted into one
  closed, watertight solid.
* :func:`extrude_with_end_radii` works on arbitrary shapely polygons,
  possibly with holes.  Layers there cannot be matched point for point,
  so the solid is a stack of straight slabs, each inset by the profile.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.polygon import orient

from roundpath.chain import offset_path
from roundpath.errors import GeometryError
from roundpath.fillet import CLOSED, DEFAULT_RESOLUTION, fillet, simplify
from roundpath.geom import dot2, epsilon, signedAreaXY, sub2
from roundpath.points import RadiusPoint, normalize
from roundpath.solid import normfunc, reversesurface, solid, surface
from roundpath.triangulator import clean_loop, triangulate_loops

logger = logging.getLogger(__name__)

## smallest radius a rounded corner may shrink to while layers are
## inset; keeps the per-corner point count fixed through the stack
MIN_LAYER_RADIUS = 0.001

Layer = Tuple[float, float]


def end_profile(length: float, r1: float = 0, r2: float = 0,
                resolution: int = DEFAULT_RESOLUTION) -> List[Layer]:
    """Return ``(z, inset)`` pairs from ``z=0`` to ``z=length``.

    ``inset`` is positive where the section shrinks (rounded ends) and
    negative where it grows (flared ends).
    """

    a1, a2 = abs(r1), abs(r2)
    if length <= epsilon:
        raise GeometryError(f'bad length passed to extrusion: {length}')
    if a1 + a2 > length + epsilon:
        raise GeometryError(f'end radii {r1} and {r2} do not fit in length {length}')
    if resolution < 1:
        raise ValueError(f'bad resolution passed to extrusion: {resolution!r}')

    layers: List[Layer] = []
    if a1 > 0:
        for k in range(resolution + 1):
            t = (math.pi / 2.0) * k / resolution
            layers.append((a1 * (1.0 - math.cos(t)),
                           math.copysign(a1 * (1.0 - math.sin(t)), r1)))
    else:
        layers.append((0.0, 0.0))

    top: List[Layer] = []
    if a2 > 0:
        for k in range(resolution, -1, -1):
            t = (math.pi / 2.0) * k / resolution
            top.append((length - a2 * (1.0 - math.cos(t)),
                        math.copysign(a2 * (1.0 - math.sin(t)), r2)))
    else:
        top.append((float(length), 0.0))

    for z, inset in top:
        if abs(z - layers[-1][0]) <= epsilon:
            continue
        layers.append((z, inset))
    return layers


def loft_loops(loops: Sequence[Tuple[float, Sequence[Tuple[float, float]]]]):
    """Loft equal-length counterclockwise XY loops, given as ``(z, loop)``
    pairs in increasing ``z``, into a list of three surfaces: bottom cap,
    side wall and top cap.
    """

    if len(loops) < 2:
        raise GeometryError('at least two layers are needed to loft a solid')
    count = len(loops[0][1])
    if any(len(loop) != count for _, loop in loops):
        raise GeometryError('layers of a lofted solid must have equal point counts')

    verts = []
    for z, loop in loops:
        verts.extend([[x, y, z, 1.0] for x, y in loop])
    normals = [[0, 0, 1, 0] for _ in verts]
    faces = []
    for layer in range(len(loops) - 1):
        base = layer * count
        for i in range(count):
            j0 = base + i
            j1 = base + (i + 1) % count
            j2 = j1 + count
            j3 = j0 + count
            for tri in ([j0, j1, j2], [j0, j2, j3]):
                n = normfunc([verts[k] for k in tri])
                if n is None:
                    continue
                for k in tri:
                    normals[k] = n
                faces.append(tri)
    wall = surface(verts, normals, faces)

    bottom = reversesurface(_cap(loops[0][1], [], loops[0][0]))
    top = _cap(loops[-1][1], [], loops[-1][0])
    return [bottom, wall, top]


def _cap(outer, holes, z):
    # faces up (+Z); reversesurface() turns it into a bottom cap
    loops = [list(outer)] + [list(h) for h in holes]
    tris = triangulate_loops(loops[0], loops[1:])
    verts = [[x, y, z, 1.0] for loop in loops for x, y in loop]
    faces = [list(t) for t in tris]
    boundary = list(range(len(loops[0])))
    holeidx = []
    start = len(loops[0])
    for h in loops[1:]:
        holeidx.append(list(range(start, start + len(h))))
        start += len(h)
    return surface(verts, [[0, 0, 1, 0] for _ in verts], faces, boundary, holeidx)


def _walls(loop, z0, z1):
    count = len(loop)
    verts = [[x, y, z0, 1.0] for x, y in loop] + [[x, y, z1, 1.0] for x, y in loop]
    normals = [[0, 0, 1, 0] for _ in verts]
    faces = []
    for i in range(count):
        j0, j1 = i, (i + 1) % count
        j2, j3 = j1 + count, j0 + count
        for tri in ([j0, j1, j2], [j0, j2, j3]):
            n = normfunc([verts[k] for k in tri])
            if n is None:
                continue
            for k in tri:
                normals[k] = n
            faces.append(tri)
    return surface(verts, normals, faces)


def inset_radius_path(path: Sequence[RadiusPoint], inset: float) -> List[RadiusPoint]:
    """Offset a counterclockwise radius polygon inward by ``inset``.

    Negative values grow the polygon.  Rounded corners keep a radius of
    at least :data:`MIN_LAYER_RADIUS`; sharp corners stay sharp.
    """

    if inset == 0:
        return list(path)
    return offset_path(path, inset, closed=True, min_radius=MIN_LAYER_RADIUS)


def _same_edges(base, layer):
    # an inset past the middle of the profile turns edges around
    n = len(base)
    for i in range(n):
        j = (i + 1) % n
        if dot2(sub2(layer[j], layer[i]), sub2(base[j], base[i])) <= 0:
            return False
    return True


def extrude_filleted(path, length: float, r1: float = 0, r2: float = 0,
                     resolution: int = DEFAULT_RESOLUTION, convexity: int = 10):
    """Extrude a radius polygon along +Z from ``z=0`` to ``z=length``.

    ``r1`` and ``r2`` round (positive) or flare (negative) the bottom
    and top edges.  ``convexity`` is carried into the construction
    record for renderers that use it.
    """

    pts = simplify(normalize(path), closed=True)
    if len(pts) < 3:
        raise GeometryError(f'degenerate polygon passed to extrude_filleted: {pts}')
    if signedAreaXY(pts) < 0:
        pts.reverse()

    base_count = None
    loops = []
    for z, inset in end_profile(length, r1, r2, resolution):
        layer = inset_radius_path(pts, inset)
        loop = fillet(layer, resolution, CLOSED) if _same_edges(pts, layer) else []
        if base_count is None:
            base_count = len(loop)
        if not loop or len(loop) != base_count or signedAreaXY(loop) <= 0:
            raise GeometryError(f'end radius inset {inset} collapses the profile at z={z}')
        loops.append((z, loop))

    call = {'length': length, 'r1': r1, 'r2': r2,
            'resolution': resolution, 'convexity': convexity}
    return solid(loft_loops(loops), [], ['procedure', 'extrude_filleted', call])


def polygons_of(geom):
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        return [geom]
    if isinstance(geom, MultiPolygon):
        return list(geom.geoms)
    return [g for g in getattr(geom, 'geoms', []) if isinstance(g, Polygon) and not g.is_empty]


def prism(section, z0: float, z1: float):
    """Return the surfaces of a straight extrusion of a shapely polygonal
    ``section`` between ``z0`` and ``z1``."""

    surfaces = []
    for poly in polygons_of(section):
        poly = orient(poly, sign=1.0)
        outer = clean_loop(poly.exterior.coords)
        holes = [clean_loop(ring.coords) for ring in poly.interiors]
        holes = [h for h in holes if len(h) >= 3]
        if len(outer) < 3:
            continue
        surfaces.append(reversesurface(_cap(outer, holes, z0)))
        surfaces.append(_walls(outer, z0, z1))
        for h in holes:
            surfaces.append(_walls(h, z0, z1))
        surfaces.append(_cap(outer, holes, z1))
    return surfaces


def extrude_with_end_radii(section, length: float, r1: float = 0, r2: float = 0,
                           resolution: int = DEFAULT_RESOLUTION):
    """Extrude a shapely polygonal ``section`` with rounded or flared ends."""

    if section.is_empty:
        raise GeometryError('empty section passed to extrude_with_end_radii')
    layers = end_profile(length, r1, r2, resolution)

    surfaces = []
    for (z0, i0), (z1, i1) in zip(layers, layers[1:]):
        inset = (i0 + i1) / 2.0
        slab = section if inset == 0 else section.buffer(-inset)
        if slab.is_empty:
            logger.debug('slab %.4f..%.4f vanishes at inset %.4f', z0, z1, inset)
            continue
        surfaces.extend(prism(slab, z0, z1))

    call = {'length': length, 'r1': r1, 'r2': r2, 'resolution': resolution}
    return solid(surfaces, [], ['procedure', 'extrude_with_end_radii', call])
