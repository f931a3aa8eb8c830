"""
lasserre/exceptions.py

Exception classes used throughout the project.
"""


class LasserreError(Exception):
    """Common ancestor of every error signaled by `lasserre`."""
    pass


class ParseError(LasserreError):
    """Emitted when a halfspace description file is malformed."""
    pass


class DegenerateInputError(LasserreError):
    """
    Emitted when a halfspace system is ill-formed: no rows, no coordinates, a
    row whose coefficient vector vanishes, or an equality constraint (which
    forces the body to be lower-dimensional).
    """
    pass


class InfeasibleRegionError(LasserreError):
    """Emitted when a convex polytope has no strictly interior point."""
    pass


class UnboundedRegionError(InfeasibleRegionError):
    """Emitted when a halfspace system does not cut out a bounded body."""
    pass


class DegenerateReferencePointError(LasserreError):
    """
    Signaled when no strictly interior reference point survives the re-pick.

    With exact arithmetic this indicates a logic bug rather than bad luck, so
    the volume computation is abandoned.
    """
    pass


class DivisionByZero(LasserreError, ZeroDivisionError):
    """Emitted when an exact rational division meets a zero denominator."""
    pass
