"""
lasserre/backend/backend_abc.py

A generic backend specification for the exact linear programs behind facet
enumeration.
"""

from abc import ABC, abstractmethod


class Backend(ABC):
    """
    Generic backend interface for polytope feasibility procedures.

    Implementations must be exact: every returned coordinate is a `Fraction`.
    """

    @staticmethod
    @abstractmethod
    def interior_point(convex_polytope):  # ConvexPolytope -> List[Fraction]
        """
        Calculates a point strictly inside the ConvexPolytope.

        Signals `InfeasibleRegionError` if the interior is empty.
        """
        pass

    @staticmethod
    @abstractmethod
    def is_bounded(convex_polytope):  # ConvexPolytope -> bool
        """
        Decides whether the ConvexPolytope is bounded.

        Signals `InfeasibleRegionError` if the ConvexPolytope has no points.
        """
        pass

    @staticmethod
    @abstractmethod
    def facet_indices(convex_polytope, candidates):  # ... -> List[int]
        """
        Selects, from the inequalities `candidates` of the full-dimensional
        ConvexPolytope, those which cut out (d-1)-dimensional faces.

        The candidates must be pairwise distinct and must cut out the same
        region as the whole system.
        """
        pass
