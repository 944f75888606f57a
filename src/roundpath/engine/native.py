"""Native rounding engine.

Corner rounding, chain offsets and the layered extrusions are computed
directly by :mod:`roundpath.fillet`, :mod:`roundpath.chain` and
:mod:`roundpath.loft`.  Shell offsets need true polygon offsetting and
are delegated to shapely's buffer operation.
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from roundpath.chain import chain_offset
from roundpath.errors import GeometryError
from roundpath.fillet import fillet
from roundpath.loft import extrude_filleted, extrude_with_end_radii

__all__ = ['fillet', 'chain_offset', 'extrude_filleted',
           'extrude_with_end_radii', 'shell_offset', 'round2d', 'as_geometry']


def as_geometry(shape) -> BaseGeometry:
    """Return ``shape`` as shapely geometry.

    ``shape`` is either shapely geometry already, a single XY loop, or a
    list of XY loops (which are unioned).
    """

    if isinstance(shape, BaseGeometry):
        return shape
    if not shape:
        return Polygon()
    first = shape[0]
    if isinstance(first, BaseGeometry):
        return unary_union(list(shape))
    if len(first) and isinstance(first[0], (tuple, list)):
        return unary_union([Polygon([(p[0], p[1]) for p in loop]) for loop in shape])
    return Polygon([(p[0], p[1]) for p in shape])


def round2d(geom: BaseGeometry, outer_radius: float = 0, inner_radius: float = 0) -> BaseGeometry:
    """Round convex corners of ``geom`` to ``outer_radius`` and concave
    corners to ``inner_radius``."""

    if outer_radius == 0 and inner_radius == 0:
        return geom
    return (geom.buffer(inner_radius)
                .buffer(-inner_radius - outer_radius)
                .buffer(outer_radius))


def shell_offset(base: Sequence, offset1: float, offset2: float = 0,
                 min_outer_radius: float = 0, min_inner_radius: float = 0,
                 fill=None):
    """Return ``(outer, inner)`` boundaries of a shell around ``base``.

    The outer boundary is ``base`` grown by the larger offset, the inner
    one ``base`` grown by the smaller offset minus ``fill``.  Each is
    rounded so that no corner of the resulting band is sharper than the
    given minimum radii.
    """

    contour = as_geometry(base)
    if contour.is_empty or contour.area <= 0:
        raise GeometryError('empty base contour passed to shell_offset')

    outer = round2d(contour.buffer(max(offset1, offset2)),
                    min_outer_radius, min_inner_radius)
    inner = contour.buffer(min(offset1, offset2))
    if fill is not None:
        inner = inner.difference(as_geometry(fill))
    inner = round2d(inner, min_inner_radius, min_outer_radius)

    if outer.difference(inner).is_empty:
        raise GeometryError(f'offsets {offset1} and {offset2} leave an empty shell')
    return outer, inner
