"""One-call extrusions along any principal axis.

These compose the pieces of the library: points are normalized, the
axis is resolved into a frame (which also validates it, before any
geometry is attempted), the engine builds the solid along native +Z
and the frame carries the solid onto the requested axis.
"""

from __future__ import annotations

from roundpath.axis import resolve_frame
from roundpath.beam import build_beam_boundary
from roundpath.engine import get_engine
from roundpath.fillet import DEFAULT_RESOLUTION
from roundpath.points import normalize
from roundpath.shell import build_shell


def extrude(points, length: float, r1: float = 0, r2: float = 0, *,
            axis="+Z", center: bool = False,
            resolution: int = DEFAULT_RESOLUTION, convexity: int = 10,
            engine=None):
    """Extrude a radius polygon by ``length`` along ``axis``.

    ``r1`` and ``r2`` round (or, when negative, flare) the start and
    end edges of the extrusion.
    """

    frame = resolve_frame(axis, length, center)
    pts = normalize(points)
    backend = get_engine(engine)
    sld = backend.extrude_filleted(pts, length, r1, r2, resolution, convexity)
    return frame.apply(sld)


def beam_extrude(points, length: float, offset_inner: float, offset_outer: float,
                 params=None, *, r1: float = 0, r2: float = 0, axis="+Z",
                 center: bool = False, resolution: int = DEFAULT_RESOLUTION,
                 convexity: int = 10, engine=None):
    """Extrude a beam that follows the open path ``points``."""

    resolve_frame(axis, length, center)
    boundary = build_beam_boundary(points, offset_inner, offset_outer, params,
                                   engine=engine)
    return extrude(boundary, length, r1, r2, axis=axis, center=center,
                   resolution=resolution, convexity=convexity, engine=engine)


def shell_extrude(points, length: float, offset_inner: float, offset_outer: float = 0,
                  *, min_r_outer: float = 0, min_r_inner: float = 0, fill=None,
                  r1: float = 0, r2: float = 0, axis="+Z", center: bool = False,
                  resolution: int = DEFAULT_RESOLUTION, engine=None):
    """Extrude the shell of the rounded outline ``points``."""

    frame = resolve_frame(axis, length, center)
    shell = build_shell(points, offset_inner, offset_outer, min_r_outer,
                        min_r_inner, resolution, fill=fill, engine=engine)
    backend = get_engine(engine)
    sld = backend.extrude_with_end_radii(shell.shape, length, r1, r2, resolution)
    return frame.apply(sld)
