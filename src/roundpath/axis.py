"""Named extrusion axes and the frames that realize them.

The extrusion primitives always build along their native +Z axis over
``0 <= z <= length``.  :func:`resolve_frame` returns
the rotation and translation that carry such a solid onto one of the
six principal directions.  The table is kept literal and keyed by
:class:`Axis`; rows that resolve to a zero translation are part of the
table, not a fallthrough.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from roundpath import xform
from roundpath.errors import InvalidAxisError
from roundpath.geom import homo, point
from roundpath.solid import transformsolid, transformsurface

Vec3 = Tuple[float, float, float]


class Axis(Enum):
    """One of the six principal extrusion directions."""

    POS_X = "+X"
    NEG_X = "-X"
    POS_Y = "+Y"
    NEG_Y = "-Y"
    POS_Z = "+Z"
    NEG_Z = "-Z"

    @classmethod
    def parse(cls, value) -> "Axis":
        """Return the member for ``value``; only exact symbols are accepted."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidAxisError(f'bad axis passed to resolve_frame: {value!r}; '
                               f'expected one of {[m.value for m in cls]}')

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExtrusionFrame:
    """Rotation (degrees about X, then Y, then Z) followed by a translation."""

    translation: Vec3
    rotation: Vec3

    def matrix(self) -> xform.Matrix:
        """Return ``T * R`` so that points are rotated first, then translated."""

        rot = xform.EulerRotation(*self.rotation)
        return xform.Translation(list(self.translation)).mul(rot)

    def apply(self, obj):
        """Return a transformed copy of a point, a surface or a solid."""

        mat = self.matrix()
        if isinstance(obj, list) and obj and obj[0] == 'solid':
            return transformsolid(obj, mat)
        if isinstance(obj, list) and obj and obj[0] == 'surface':
            return transformsurface(obj, mat)
        if isinstance(obj, (tuple, list)) and len(obj) in (3, 4):
            return homo(mat.mul(point(obj)))
        raise ValueError(f'bad object passed to ExtrusionFrame.apply: {obj!r}')


## rotation per axis; independent of length and centering
_ROTATIONS: Dict[Axis, Vec3] = {
    Axis.POS_X: (90, 0, 90),
    Axis.NEG_X: (90, 0, 90),
    Axis.POS_Y: (90, 0, 0),
    Axis.NEG_Y: (90, 0, 0),
    Axis.POS_Z: (0, 0, 0),
    Axis.NEG_Z: (0, 0, 0),
}

## translation per axis as a function of the shift length, which is
## ``length`` for a base-anchored extrusion and ``length/2`` for a
## centered one
_TRANSLATIONS: Dict[Axis, Callable[[float], Vec3]] = {
    Axis.POS_X: lambda d: (0, 0, 0),
    Axis.NEG_X: lambda d: (-d, 0, 0),
    Axis.POS_Y: lambda d: (0, d, 0),
    Axis.NEG_Y: lambda d: (0, 0, 0),
    Axis.POS_Z: lambda d: (0, 0, 0),
    Axis.NEG_Z: lambda d: (0, 0, -d),
}


def resolve_frame(axis, length: float, center: bool = False) -> ExtrusionFrame:
    """Map a named axis, an extrusion length and a centering flag to a frame.

    >>> resolve_frame("-Z", 10, False)
    ExtrusionFrame(translation=(0, 0, -10), rotation=(0, 0, 0))
    """

    ax = Axis.parse(axis)
    shift = length / 2 if center else length
    return ExtrusionFrame(translation=_TRANSLATIONS[ax](shift),
                          rotation=_ROTATIONS[ax])
