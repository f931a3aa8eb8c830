"""
lasserre/facets.py

Facet enumeration: sorting the inequalities of a ConvexPolytope into facets and
redundant constraints, and cutting each facet out as a polytope of its own.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

import lasserre.backend
import lasserre.polytopes
from lasserre.rational import divide, evaluate
from lasserre.utilities import argmax_abs


@dataclass(frozen=True)
class Facet:
    """
    A facet of a d-dimensional ConvexPolytope.

    `row` is the inequality `index` of the parent which is tight along the
    facet.  The facet is parametrized by every coordinate except `pivot`, the
    one solved for from `row`; in those coordinates it is the
    (d-1)-dimensional `subpolytope`, cut out by the parent inequalities listed
    in `neighbors`.  When d = 1 the facet is a point and `subpolytope` is None.
    """
    index: int
    row: Tuple[int, ...]
    pivot: int
    neighbors: Tuple[int, ...]
    subpolytope: Optional["lasserre.polytopes.ConvexPolytope"]

    def height(self, point) -> Fraction:
        """
        Signed, rationally normalized height of `point` above the facet: the
        slack of `row` at `point`, divided by the magnitude of the pivot
        coefficient.  Positive on the side of the polytope.

        NOTE: The Euclidean height would divide by the norm of the coefficient
              vector instead.  The two differ by the factor by which projecting
              along the pivot axis shrinks facet areas, which `subpolytope`'s
              volume already absorbs, so their products agree.
        """
        return divide(evaluate(self.row, point), abs(self.row[1 + self.pivot]))

    def project(self, point) -> Tuple[Fraction, ...]:
        """
        Projects `point` along the pivot axis into the facet's coordinates.
        """
        return tuple(x for index, x in enumerate(point) if index != self.pivot)


def duplicate_indices(convex_polytope, index) -> Tuple[int, ...]:
    """
    Indices of the other inequalities which coincide with inequality `index`.
    """
    row = convex_polytope.inequalities[index]
    return tuple(other_index
                 for other_index, other_row
                 in enumerate(convex_polytope.inequalities)
                 if other_index != index and other_row == row)


def cut_facet(convex_polytope, index, facet_indices) -> Facet:
    """
    Restricts the facet inequalities `facet_indices` of `convex_polytope` to
    the hyperplane where inequality `index` is tight.
    """
    row = convex_polytope.inequalities[index]
    pivot = argmax_abs(row[1:])
    if 1 == convex_polytope.dimension:
        return Facet(index=index, row=tuple(row), pivot=pivot, neighbors=(),
                     subpolytope=None)

    # substitute x_pivot = -(row[0] + sum_{j != pivot} row[1+j] x_j) / row[1+pivot]
    neighbors, subrows = [], []
    for other_index in facet_indices:
        if other_index == index:
            continue
        other_row = convex_polytope.inequalities[other_index]
        scale = divide(other_row[1 + pivot], row[1 + pivot])
        subrow = [Fraction(x) - scale * y for x, y in zip(other_row, row)]
        del subrow[1 + pivot]
        # parallel inequalities hold identically along a nonempty facet
        if all(x == 0 for x in subrow[1:]):
            assert subrow[0] >= 0, "Facet contradicts a parallel facet."
            continue
        neighbors.append(other_index)
        subrows.append(subrow)

    return Facet(
        index=index,
        row=tuple(row),
        pivot=pivot,
        neighbors=tuple(neighbors),
        subpolytope=lasserre.polytopes.ConvexPolytope(
            inequalities=subrows,
            name=f"{convex_polytope.name}/{index}",
        ),
    )


def cut_facets(convex_polytope, facet_indices):
    """
    Cuts out the facets of `convex_polytope` defined by its inequalities
    `facet_indices`.
    """
    return [cut_facet(convex_polytope, index, facet_indices)
            for index in facet_indices]


def enumerate_facets(convex_polytope, chatty=False):
    """
    Computes the facets of `convex_polytope`, in the order of their defining
    inequalities.  Of a family of coinciding inequalities only the first can
    define a facet; the others are reported redundant.
    """
    repeats = set()
    for index in range(len(convex_polytope.inequalities)):
        duplicates = duplicate_indices(convex_polytope, index)
        if any(other_index < index for other_index in duplicates):
            repeats.add(index)

    facet_indices = lasserre.backend.backend.facet_indices(
        convex_polytope,
        [index for index in range(len(convex_polytope.inequalities))
         if index not in repeats],
    )

    if chatty:
        for index in range(len(convex_polytope.inequalities)):
            if index in repeats:
                print(f"{convex_polytope.name}: inequality {index} repeats "
                      f"an earlier one.")
            elif index not in facet_indices:
                print(f"{convex_polytope.name}: inequality {index} is "
                      f"redundant.")

    return cut_facets(convex_polytope, facet_indices)
