"""
lasserre/static/examples.py

A variety of "standard" polytopes, with closed-form volumes to compare against.
"""

from fractions import Fraction
from itertools import product
from math import factorial

from ..polytopes import ConvexPolytope, make_convex_polytope
from ..rational import determinant


def box(*intervals, name=None) -> ConvexPolytope:
    """
    Produces the product of the intervals [lower, upper] in `intervals`.
    """
    table = []
    for index, (lower, upper) in enumerate(intervals):
        row = [0] * (1 + len(intervals))
        row[0], row[1 + index] = -Fraction(lower), 1
        table.append(row)
        row = [0] * (1 + len(intervals))
        row[0], row[1 + index] = Fraction(upper), -1
        table.append(row)
    return make_convex_polytope(table, name=name)


def unit_cube(dimension) -> ConvexPolytope:
    """[0, 1]^dimension."""
    return box(*([(0, 1)] * dimension), name=f"unit_cube_{dimension}")


def standard_simplex(dimension) -> ConvexPolytope:
    """
    The corner simplex x_i >= 0, x_1 + ... + x_d <= 1, of volume 1/d!.
    """
    table = []
    for index in range(dimension):
        row = [0] * (1 + dimension)
        row[1 + index] = 1
        table.append(row)
    table.append([1] + [-1] * dimension)
    return make_convex_polytope(table, name=f"standard_simplex_{dimension}")


def cross_polytope(dimension) -> ConvexPolytope:
    """
    The unit ball of the l_1 norm, |x_1| + ... + |x_d| <= 1, of volume 2^d/d!.
    """
    table = [[1] + [-s for s in signs]
             for signs in product([1, -1], repeat=dimension)]
    return make_convex_polytope(table, name=f"cross_polytope_{dimension}")


def simplex_vertices(convex_polytope):
    """
    Vertices of a simplex given by d + 1 inequalities: vertex j is where every
    inequality but j is tight.  Solved by Cramer's rule.
    """
    inequalities = convex_polytope.inequalities
    dimension = convex_polytope.dimension
    assert len(inequalities) == 1 + dimension, "Not a simplex."

    vertices = []
    for skipped in range(len(inequalities)):
        rows = [row for index, row in enumerate(inequalities)
                if index != skipped]
        # a . x = -b
        matrix = [row[1:] for row in rows]
        rhs = [-row[0] for row in rows]
        denominator = determinant(matrix)
        vertex = []
        for column in range(dimension):
            replaced = [m[:column] + [r] + m[1 + column:]
                        for m, r in zip(matrix, rhs)]
            vertex.append(determinant(replaced) / denominator)
        vertices.append(vertex)
    return vertices


def simplex_volume(convex_polytope) -> Fraction:
    """
    Closed-form volume |det(v_1 - v_0, ..., v_d - v_0)| / d! of a simplex
    given by d + 1 inequalities.
    """
    vertices = simplex_vertices(convex_polytope)
    base = vertices[0]
    edges = [[x - y for x, y in zip(vertex, base)] for vertex in vertices[1:]]
    return abs(determinant(edges)) / factorial(convex_polytope.dimension)
