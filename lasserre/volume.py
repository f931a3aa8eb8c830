"""
lasserre/volume.py

Exact volume of a convex polytope by Lasserre's recursive decomposition.

For any point p, a d-dimensional polytope P with facets F satisfies

    vol_d(P) = (1/d) sum_F h_F(p) vol_{d-1}(F),

where h_F(p) is the signed height of p above F (see `Facet.height`).  Each
facet is itself a polytope one dimension down, so the formula recurses until
it reaches intervals, whose lengths are read off directly.

The same face is reached along many orders of descent.  Faces are named by
the set of top-level inequalities tight along them, so that their facets and
volumes are computed once per volume computation (see `FaceCache`).
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, FrozenSet, Tuple

import lasserre.facets
from lasserre.exceptions import DegenerateReferencePointError, \
    UnboundedRegionError
from lasserre.rational import divide, sign, to_rational
from lasserre.scipy import scipy_chebyshev_center


@dataclass
class FaceCache:
    """
    Results shared across the branches of one recursion.

    `facets` maps (tight rows, inequality rows) to the positions among the
    inequality rows which define facets; `volumes` maps (tight rows, remaining
    coordinates) to the volume of the face projected onto those coordinates.
    Rows and coordinates are numbered as in the top-level polytope.
    """
    facets: Dict[Tuple[FrozenSet[int], Tuple[int, ...]], Tuple[int, ...]] = \
        field(default_factory=dict)
    volumes: Dict[Tuple[FrozenSet[int], Tuple[int, ...]], Fraction] = \
        field(default_factory=dict)


@dataclass(frozen=True)
class VolumeContext:
    """
    The state threaded through one branch of the recursion.

    `reference_point` is the top-level reference point, projected into the
    coordinates of the current facet.  `facet_stack` lists the
    (top-level inequality index, pivot) pairs descended through.  `rows`
    gives the top-level index of each inequality of the current facet, and
    `coordinates` the top-level index of each of its coordinates.

    `sign` is the product of the signs of the heights along the branch.  It is
    informational only: each signed height already enters the sum with its
    own sign, so nothing multiplies by it.
    """
    reference_point: Tuple[Fraction, ...]
    sign: int = 1
    facet_stack: Tuple[Tuple[int, int], ...] = ()
    rows: Tuple[int, ...] = ()
    coordinates: Tuple[int, ...] = ()
    chatty: bool = False
    cache: FaceCache = field(default_factory=FaceCache, compare=False,
                             repr=False)

    @property
    def depth(self) -> int:
        return len(self.facet_stack)

    @property
    def tight_rows(self) -> FrozenSet[int]:
        """Top-level inequalities held tight along the current facet."""
        return frozenset(index for index, _ in self.facet_stack)

    def descend(self, facet, height):  # -> VolumeContext
        """Produces the context for the recursive call on `facet`."""
        return VolumeContext(
            reference_point=facet.project(self.reference_point),
            sign=self.sign * sign(height),
            facet_stack=self.facet_stack + (
                (self.rows[facet.index], facet.pivot),
            ),
            rows=tuple(self.rows[index] for index in facet.neighbors),
            coordinates=tuple(coordinate for index, coordinate
                              in enumerate(self.coordinates)
                              if index != facet.pivot),
            chatty=self.chatty,
            cache=self.cache,
        )


def face_facets(convex_polytope, context):
    """
    Facets of `convex_polytope`, the face of the top-level polytope reached
    by `context`, enumerated only on the first visit to its inequality system.
    """
    key = (context.tight_rows, context.rows)
    if key in context.cache.facets:
        return lasserre.facets.cut_facets(convex_polytope,
                                          list(context.cache.facets[key]))

    facets = convex_polytope.facets
    context.cache.facets[key] = tuple(facet.index for facet in facets)
    return facets


def face_volume(facet, context, direct_intervals=True) -> Fraction:
    """
    Volume of `facet`, reached by `context`, in its own coordinates.
    """
    if facet.subpolytope is None:
        return Fraction(1)  # a point

    key = (context.tight_rows, context.coordinates)
    if key not in context.cache.volumes:
        context.cache.volumes[key] = recursive_volume(
            facet.subpolytope, context, direct_intervals=direct_intervals
        )
    return context.cache.volumes[key]


def interval_length(convex_polytope) -> Fraction:
    """
    Length of the one-dimensional `convex_polytope`, zero if it is empty.
    """
    assert 1 == convex_polytope.dimension
    lower, upper = None, None
    for b, a in convex_polytope.inequalities:
        # b + a x >= 0 bounds x from below when a > 0, from above when a < 0
        bound = divide(-b, a)
        if a > 0:
            lower = bound if lower is None else max(lower, bound)
        else:
            upper = bound if upper is None else min(upper, bound)

    if lower is None or upper is None:
        raise UnboundedRegionError(f"{convex_polytope.name} is a ray or line.")

    return max(upper - lower, Fraction(0))


def pick_reference_point(convex_polytope, candidate=None, chatty=False):
    """
    Chooses the reference point for one volume computation.

    Tries `candidate`, or else a rationalized Chebyshev center; if that is
    not strictly inside `convex_polytope`, re-picks once with the exact
    interior point.  Raises DegenerateReferencePointError if the re-pick
    fails too.
    """
    if candidate is None:
        candidate = scipy_chebyshev_center(convex_polytope)
    else:
        candidate = [to_rational(x) for x in candidate]
        if len(candidate) != convex_polytope.dimension:
            raise ValueError(
                f"Reference point has {len(candidate)} coordinates, expected "
                f"{convex_polytope.dimension}."
            )

    if candidate is not None and \
            convex_polytope.has_element(candidate, strict=True):
        return tuple(candidate)

    if chatty:
        print(f"{convex_polytope.name}: re-picking the reference point.")
    candidate = convex_polytope.interior_point
    if not convex_polytope.has_element(candidate, strict=True):
        raise DegenerateReferencePointError(
            f"{convex_polytope.name}: {candidate} lies on a facet."
        )
    return tuple(candidate)


def recursive_volume(convex_polytope, context, direct_intervals=True):
    """
    Lasserre's sum over the facets of `convex_polytope`, recursing into each.
    """
    dimension = convex_polytope.dimension
    if 1 == dimension and direct_intervals:
        return interval_length(convex_polytope)

    total_volume = Fraction(0)
    for facet in face_facets(convex_polytope, context):
        height = facet.height(context.reference_point)
        # the facet contributes h * vol(F) = 0
        if height == 0:
            continue

        child_context = context.descend(facet, height)
        facet_volume = face_volume(facet, child_context,
                                   direct_intervals=direct_intervals)

        if context.chatty:
            print(f"{'  ' * context.depth}{convex_polytope.name} "
                  f"facet {facet.index} (pivot x{1 + facet.pivot}): "
                  f"height {height}, volume {facet_volume}, "
                  f"sign {child_context.sign:+d}")
        total_volume += height * facet_volume / dimension

    return total_volume


def lasserre_volume(
        convex_polytope,
        reference_point=None,
        chatty=False,
        direct_intervals=True,
) -> Fraction:
    """
    Computes the exact volume of `convex_polytope`.

    Raises UnboundedRegionError if the polytope is unbounded,
    InfeasibleRegionError if it has empty interior, and
    DegenerateReferencePointError if no usable reference point is found.
    `reference_point` optionally proposes the reference point; the result
    does not depend on it.  With `direct_intervals` unset, the recursion
    continues through intervals down to points.
    """
    if not convex_polytope.is_bounded():
        raise UnboundedRegionError(f"{convex_polytope.name} is unbounded.")
    # signals InfeasibleRegionError for bodies without interior
    convex_polytope.interior_point

    context = VolumeContext(
        reference_point=pick_reference_point(
            convex_polytope, candidate=reference_point, chatty=chatty
        ),
        rows=tuple(range(len(convex_polytope.inequalities))),
        coordinates=tuple(range(convex_polytope.dimension)),
        chatty=chatty,
    )
    if chatty:
        print(f"{convex_polytope.name}: reference point "
              f"{[str(x) for x in context.reference_point]}")

    return recursive_volume(convex_polytope, context,
                            direct_intervals=direct_intervals)
