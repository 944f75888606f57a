"""Exceptions raised by roundpath.

Precondition failures that this library owns (bad axis names, too-short
beam paths, malformed points) are raised before any engine work.  The
engine raises :class:`GeometryError` for infeasible geometry; the core
layer lets those propagate untouched.
"""


class RoundPathError(ValueError):
    """Base class for all roundpath errors."""


class InvalidPointError(RoundPathError):
    """A point record is not a 2- or 3-component numeric sequence."""


class InvalidAxisError(RoundPathError):
    """An extrusion axis is not one of ``+X -X +Y -Y +Z -Z``."""


class InsufficientPathError(RoundPathError):
    """A beam path has fewer than two points."""


class InvalidBeamModeError(RoundPathError):
    """A beam end-angle mode is outside ``{0, 1, 2, 3}``."""


class InvalidBeamParametersError(RoundPathError):
    """Beam parameters name keys other than the end angles and mode."""


class EngineNotFoundError(RoundPathError, LookupError):
    """No rounding engine is registered under the requested name."""


class GeometryError(RoundPathError):
    """The rounding engine cannot construct the requested geometry."""
