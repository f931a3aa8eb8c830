"""
lasserre/polytopes.py

Basic data structures for manipulating convex polytopes.
"""

from copy import copy
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional

import lasserre.backend
import lasserre.facets
from lasserre.exceptions import DegenerateInputError, InfeasibleRegionError, \
    UnboundedRegionError
from lasserre.io.base import HalfspaceSystemData, generate_anonymous_cp_name
from lasserre.rational import evaluate, primitive_row, to_rational
from lasserre.utilities import clear_memoization, memoized_property
from lasserre.volume import lasserre_volume


@dataclass
class ConvexPolytope(HalfspaceSystemData):
    """
    Houses a single full-dimensional convex polytope, together with methods for
    querying it.

    Each inequality is rescaled on the way in to a primitive integer row, which
    cuts out the same halfspace.

    NOTE: This object is meant to be read-only after instantiation.
    """

    def __post_init__(self):
        if 0 == len(self.inequalities):
            raise DegenerateInputError(f"{self.name} has no inequalities.")
        if 0 < len(self.equalities):
            raise DegenerateInputError(
                f"{self.name} has equality constraints, so it is not "
                f"full-dimensional."
            )

        width = len(self.inequalities[0])
        if width < 2:
            raise DegenerateInputError(f"{self.name} is zero-dimensional.")

        rows = []
        for index, row in enumerate(self.inequalities):
            if len(row) != width:
                raise DegenerateInputError(
                    f"{self.name}: inequality {index} has {len(row)} entries, "
                    f"expected {width}."
                )
            try:
                row = [to_rational(x) for x in row]
            except (TypeError, ValueError) as error:
                raise DegenerateInputError(
                    f"{self.name}: inequality {index} is not numeric."
                ) from error
            if all(x == 0 for x in row[1:]):
                raise DegenerateInputError(
                    f"{self.name}: inequality {index} has a vanishing "
                    f"coefficient vector."
                )
            rows.append(primitive_row(row))

        self.inequalities = rows

    @property
    def dimension(self) -> int:
        return len(self.inequalities[0]) - 1

    def slacks(self, point) -> List[Fraction]:
        """
        Values of the left-hand sides of the inequalities at `point`.
        """
        return [evaluate(row, point) for row in self.inequalities]

    def has_element(self, point, strict=False) -> bool:
        """
        Returns True when `point` belongs to `self`, or to its interior if
        `strict` is set.
        """
        if strict:
            return all([0 < slack for slack in self.slacks(point)])
        return all([0 <= slack for slack in self.slacks(point)])

    def is_bounded(self) -> bool:
        """
        Returns True when the inequalities cut out a bounded region.

        Raises InfeasibleRegionError if they cut out no region at all.
        """
        return lasserre.backend.backend.is_bounded(self)

    @memoized_property
    def interior_point(self) -> List[Fraction]:
        """
        Some point strictly inside this convex body.

        Raises InfeasibleRegionError if the interior is empty.
        """
        return lasserre.backend.backend.interior_point(self)

    @memoized_property
    def facets(self) -> List["lasserre.facets.Facet"]:
        """
        Facets of this convex body, one per irredundant inequality.
        """
        return lasserre.facets.enumerate_facets(self)

    def is_redundant(self, index) -> bool:
        """
        Returns True when inequality `index` does not define a facet.
        """
        if not 0 <= index < len(self.inequalities):
            raise IndexError(f"{self.name} has no inequality {index}.")
        return all([facet.index != index for facet in self.facets])

    def reduce(self):  # -> ConvexPolytope
        """
        Produces an equivalent convex body with irredundant inequalities.
        """
        clone = copy(self)
        clone.inequalities = [list(facet.row) for facet in self.facets]
        clear_memoization(clone)
        return clone

    @memoized_property
    def volume(self) -> Fraction:
        """
        Exact Euclidean volume of this convex body.

        A body with empty interior has volume zero; an unbounded one raises
        UnboundedRegionError.
        """
        try:
            return lasserre_volume(self)
        except UnboundedRegionError:
            raise
        except InfeasibleRegionError:
            return Fraction(0)

    def __str__(self) -> str:
        output = f"# {self.name}: \n"
        for inequality in self.inequalities:
            output += f"{str(inequality[0]): >5}"
            for index, item in enumerate(inequality[1:]):
                output += f" + {str(item): >5} x{1+index}"
            output += " >= 0\n"

        return output


def make_convex_polytope(
        inequalities: List[List[int]],
        name: Optional[str] = None,
) -> ConvexPolytope:
    """
    Convenience method for forming a ConvexPolytope.
    """
    name = name if name is not None else generate_anonymous_cp_name()

    return ConvexPolytope(inequalities=inequalities, name=name)
