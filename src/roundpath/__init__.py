"""roundpath: radius-point paths, beams, shells and rounded extrusions.

The most used entry points are re-exported here::

    from roundpath import normalize, extrude
    sld = extrude([(0, 0, 2), (20, 0, 2), (20, 10), (0, 10)], 5, axis="+X")
"""

from importlib.metadata import PackageNotFoundError, version

from roundpath.axis import Axis, ExtrusionFrame, resolve_frame
from roundpath.beam import BeamParameters, build_beam_boundary
from roundpath.extrude import beam_extrude, extrude, shell_extrude
from roundpath.points import RadiusPoint, normalize
from roundpath.shell import ShellResult, build_shell

try:
    __version__ = version("roundpath")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = ['Axis', 'ExtrusionFrame', 'resolve_frame', 'BeamParameters',
           'build_beam_boundary', 'beam_extrude', 'extrude', 'shell_extrude',
           'RadiusPoint', 'normalize', 'ShellResult', 'build_shell']
