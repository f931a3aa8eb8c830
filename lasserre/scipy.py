"""
lasserre/scipy.py

Floating-point helpers based on `scipy`, used to propose well-centered points.

NOTE: The routines in this file can fail for numerical reasons.  Nothing they
      return is trusted: callers re-verify it in exact arithmetic and fall
      back to the exact routines when the check fails.
"""

from fractions import Fraction
from typing import List, Optional
import warnings

import numpy as np

from scipy.optimize import linprog


CHEBYSHEV_DENOMINATOR = 10_000
"""Largest denominator used when rationalizing a floating-point center."""


def scipy_chebyshev_center(
        convex_polytope,
        denominator: int = CHEBYSHEV_DENOMINATOR,
) -> Optional[List[Fraction]]:
    """
    Approximates the center of the largest ball inscribed in `convex_polytope`
    and rounds it to nearby rationals of bounded denominator.

    Returns None if scipy fails to produce a center with positive radius.
    """
    try:
        A = np.array([[-float(x) for x in row[1:]]
                      for row in convex_polytope.inequalities])
        b_ub = np.array([float(row[0]) for row in convex_polytope.inequalities])
    except OverflowError:
        return None

    norms = np.linalg.norm(A, axis=1)
    A_ub = np.hstack([A, norms.reshape(-1, 1)])
    c = np.zeros(1 + convex_polytope.dimension)
    c[-1] = -1

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=RuntimeWarning)
        result = linprog(
            c, A_ub=A_ub, b_ub=b_ub,
            bounds=[(None, None)] * convex_polytope.dimension + [(0, None)],
        )

    if not result.success or not result.x[-1] > 0:
        return None

    return [Fraction(float(x)).limit_denominator(denominator)
            for x in result.x[:-1]]
