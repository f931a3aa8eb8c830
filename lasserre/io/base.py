"""
lasserre/io/base.py

Bare dataclasses which house halfspace information.
"""

from dataclasses import dataclass, field
from typing import List


anonymous_convex_polytope_counter = 0


def generate_anonymous_cp_name():
    global anonymous_convex_polytope_counter
    anonymous_convex_polytope_counter += 1
    return f"anonymous_convex_polytope_{anonymous_convex_polytope_counter}"


@dataclass
class HalfspaceSystemData:
    """
    The raw data underlying a ConvexPolytope.  Describes a single convex
    polytope, specified by families of `inequalities` and `equalities`, each
    entry of which respectively corresponds to

        inequalities[j][0] + sum_i inequalities[j][i] * xi >= 0

    and

        equalities[j][0] + sum_i equalities[j][i] * xi == 0.
    """

    inequalities: List[List[int]]
    equalities: List[List[int]] = field(default_factory=list)
    name: str = field(default_factory=generate_anonymous_cp_name)

    @classmethod
    def inflate(cls, data):
        """
        Converts the `data` produced by `dataclasses.asdict` to a live object.
        """

        return cls(**data)
