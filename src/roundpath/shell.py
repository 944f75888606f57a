"""Shells: a rounded outline reduced to a hollow band."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from shapely.geometry.base import BaseGeometry

from roundpath.engine import get_engine
from roundpath.fillet import CLOSED, DEFAULT_RESOLUTION
from roundpath.loft import polygons_of
from roundpath.points import normalize

Loop = List[Tuple[float, float]]


@dataclass(frozen=True)
class ShellResult:
    """Outer and inner boundaries of a shell and the band between them."""
    outer: BaseGeometry
    inner: BaseGeometry
    base: Loop

    @property
    def shape(self) -> BaseGeometry:
        return self.outer.difference(self.inner)

    @property
    def area(self) -> float:
        return self.shape.area

    def boundaries(self) -> Tuple[List[Loop], List[Loop]]:
        """Exterior rings of the outer and inner regions as XY loops."""

        return _exteriors(self.outer), _exteriors(self.inner)


def _exteriors(geom: BaseGeometry) -> List[Loop]:
    return [[(x, y) for x, y in poly.exterior.coords[:-1]] for poly in polygons_of(geom)]


def build_shell(path, offset_inner: float, offset_outer: float = 0,
                min_r_outer: float = 0, min_r_inner: float = 0,
                resolution: int = DEFAULT_RESOLUTION, *, fill=None,
                engine=None) -> ShellResult:
    """Round ``path`` into a closed contour and hollow it out.

    The band lies between the contour grown by ``max(offset_inner,
    offset_outer)`` and the contour grown by the smaller of the two, so
    ``build_shell(path, -2)`` leaves a 2 unit wall inside the outline.
    ``fill`` (shapely geometry or XY loops) is added back to the inside.
    """

    pts = normalize(path)
    backend = get_engine(engine)
    base = backend.fillet(pts, resolution, CLOSED)
    outer, inner = backend.shell_offset(base, offset_inner, offset_outer,
                                        min_r_outer, min_r_inner, fill=fill)
    return ShellResult(outer=outer, inner=inner, base=list(base))
