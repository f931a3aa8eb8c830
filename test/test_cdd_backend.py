"""
test/test_cdd_backend.py

Tests for lasserre/backend/cdd_backend.py .
"""

from fractions import Fraction

import ddt
import unittest

from lasserre.backend.cdd_backend import *
from lasserre.exceptions import InfeasibleRegionError
from lasserre.polytopes import make_convex_polytope
from lasserre.static.examples import box, unit_cube


@ddt.ddt
class TestLasserreCDDLinearPrograms(unittest.TestCase):
    """Check the exact linear programs handed to cdd."""

    def test_optimal(self):
        # maximize x + y subject to x <= 1, y <= 2, x + y <= 5/2
        lp = solve_linear_program(inequality_matrix(
            [[1, -1, 0], [2, 0, -1], [Fraction(5, 2), -1, -1]],
            objective=[0, 1, 1],
        ))
        self.assertEqual(cdd.LPStatusType.OPTIMAL, lp.status)
        self.assertEqual(Fraction(5, 2), lp.obj_value)

    def test_unique_vertex(self):
        lp = solve_linear_program(inequality_matrix(
            [[3, -1, 0], [Fraction(1, 3), 0, -1], [0, 1, 0], [0, 0, 1]],
            objective=[0, 1, 2],
        ))
        self.assertEqual(Fraction(11, 3), lp.obj_value)
        self.assertEqual([Fraction(3), Fraction(1, 3)],
                         [Fraction(x) for x in lp.primal_solution])

    def test_infeasible(self):
        lp = solve_linear_program(inequality_matrix(
            [[-1, 1], [0, -1]], objective=[0, 1],
        ))
        self.assertIn(lp.status, INFEASIBLE)

    def test_unbounded(self):
        lp = solve_linear_program(inequality_matrix(
            [[0, 1]], objective=[0, 1],
        ))
        self.assertIn(lp.status, UNBOUNDED)


@ddt.ddt
class TestLasserreCDDBackend(unittest.TestCase):
    """Check the feasibility questions answered by the cdd backend."""

    square = make_convex_polytope([
        [0, 1, 0], [1, -1, 0], [0, 0, 1], [1, 0, -1],
    ])

    def test_interior_point(self):
        cube = unit_cube(3)
        point = CDDBackend.interior_point(cube)
        self.assertEqual(3, len(point))
        self.assertTrue(cube.has_element(point, strict=True))
        self.assertTrue(all(isinstance(x, Fraction) for x in point))

    def test_interior_point_of_thin_box(self):
        thin_box = box((0, Fraction(1, 1000)), (-5, 5))
        point = CDDBackend.interior_point(thin_box)
        self.assertTrue(thin_box.has_element(point, strict=True))

    def test_no_interior_point(self):
        segment = make_convex_polytope([
            [0, 1, 0], [0, -1, 0], [0, 0, 1], [1, 0, -1],
        ])
        with self.assertRaises(InfeasibleRegionError):
            CDDBackend.interior_point(segment)

    def test_is_bounded(self):
        self.assertTrue(CDDBackend.is_bounded(unit_cube(2)))
        quadrant = make_convex_polytope([[0, 1, 0], [0, 0, 1]])
        self.assertFalse(CDDBackend.is_bounded(quadrant))

    def test_is_bounded_on_empty_set(self):
        empty = make_convex_polytope([[-1, 1], [0, -1]])
        with self.assertRaises(InfeasibleRegionError):
            CDDBackend.is_bounded(empty)

    def test_square_sides_are_facets(self):
        self.assertEqual([0, 1, 2, 3],
                         CDDBackend.facet_indices(self.square, range(4)))

    @ddt.data(
        [2, -1, -1],  # x + y <= 2 touches a corner only
        [3, -1, 0],   # x <= 3 misses the square
        [5, 1, 1],    # x + y = -5 misses the square
    )
    def test_not_a_facet(self, extra_row):
        polytope = make_convex_polytope(self.square.inequalities + [extra_row])
        self.assertEqual([0, 1, 2, 3],
                         CDDBackend.facet_indices(polytope, range(5)))

    def test_candidate_subset(self):
        polytope = make_convex_polytope(self.square.inequalities + [[0, 1, 0]])
        self.assertEqual([1, 2, 3, 4],
                         CDDBackend.facet_indices(polytope, [1, 2, 3, 4]))
        self.assertEqual([0, 1, 2, 3],
                         CDDBackend.facet_indices(polytope, [0, 1, 2, 3]))
