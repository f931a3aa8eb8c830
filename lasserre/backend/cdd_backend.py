"""
lasserre/backend/cdd_backend.py

Communication interface for `cddlib`, through the exact (GMP rational) half of
`pycddlib`.

More information about `cddlib`: https://people.inf.ethz.ch/fukudak/cdd_home/
"""

from fractions import Fraction
from typing import List

import cdd
import cdd.gmp

from .backend_abc import Backend
from ..exceptions import InfeasibleRegionError


INFEASIBLE = (
    cdd.LPStatusType.INCONSISTENT,
    cdd.LPStatusType.STRUC_INCONSISTENT,
    cdd.LPStatusType.DUAL_UNBOUNDED,
)
"""Outcomes of `linprog_solve` which certify that no point is feasible."""


UNBOUNDED = (
    cdd.LPStatusType.DUAL_INCONSISTENT,
    cdd.LPStatusType.STRUC_DUAL_INCONSISTENT,
    cdd.LPStatusType.UNBOUNDED,
)
"""Outcomes of `linprog_solve` which certify an unbounded objective."""


def inequality_matrix(rows, objective=None):
    """
    Packs `rows`, each `[b, a_1, ..., a_d]` standing for `b + a.x >= 0`, into
    an exact cdd matrix.  If `objective` `[c_0, c_1, ..., c_d]` is supplied,
    the matrix also carries the linear program maximizing `c_0 + c.x`.
    """
    rows = [[Fraction(x) for x in row] for row in rows]
    if objective is None:
        return cdd.gmp.matrix_from_array(rows, rep_type=cdd.RepType.INEQUALITY)

    return cdd.gmp.matrix_from_array(
        rows,
        rep_type=cdd.RepType.INEQUALITY,
        obj_type=cdd.LPObjType.MAX,
        obj_func=[Fraction(x) for x in objective],
    )


def solve_linear_program(matrix):
    """Runs cdd's exact solver on the linear program carried by `matrix`."""
    lp = cdd.gmp.linprog_from_matrix(matrix)
    cdd.gmp.linprog_solve(lp)
    return lp


class CDDBackend(Backend):
    """
    Answers the feasibility questions of facet enumeration with `cddlib`.

    The linear programs below append a trailing variable `t` to some of the
    inequalities, as in `b + a.x - t >= 0`, so that `t` measures how strictly
    they hold.
    """

    @staticmethod
    def interior_point(convex_polytope) -> List[Fraction]:
        dimension = convex_polytope.dimension
        rows = [list(row) + [-1] for row in convex_polytope.inequalities]
        # cap the slack so that the program stays bounded
        rows.append([1] + [0] * dimension + [-1])

        lp = solve_linear_program(
            inequality_matrix(rows, objective=[0] * (1 + dimension) + [1])
        )
        assert lp.status == cdd.LPStatusType.OPTIMAL, \
            "Slack maximization is feasible and capped."
        if lp.obj_value <= 0:
            raise InfeasibleRegionError(
                f"{convex_polytope.name} has no strictly interior point."
            )

        return [Fraction(x) for x in lp.primal_solution[:dimension]]

    @staticmethod
    def is_bounded(convex_polytope) -> bool:
        dimension = convex_polytope.dimension

        for coordinate in range(dimension):
            for direction in [1, -1]:
                objective = [0] * (1 + dimension)
                objective[1 + coordinate] = direction
                lp = solve_linear_program(inequality_matrix(
                    convex_polytope.inequalities, objective=objective
                ))
                if lp.status in INFEASIBLE:
                    raise InfeasibleRegionError(
                        f"{convex_polytope.name} has no points."
                    )
                if lp.status in UNBOUNDED:
                    return False

        return True

    @staticmethod
    def facet_indices(convex_polytope, candidates) -> List[int]:
        candidates = list(candidates)
        redundant = cdd.gmp.redundant_rows(inequality_matrix(
            [convex_polytope.inequalities[index] for index in candidates]
        ))
        return [index for position, index in enumerate(candidates)
                if position not in redundant]
