"""
lasserre/rational.py

Exact rational arithmetic helpers.

`fractions.Fraction` is the rational number type of this package: it keeps its
numerator and denominator in lowest terms, with the sign carried by the
numerator, and its arithmetic never rounds.  The routines below collect the
handful of operations the volume computation needs on top of it.
"""

from fractions import Fraction
from functools import reduce
import math
from numbers import Rational
from typing import List, Sequence

from .exceptions import DivisionByZero
from .utilities import lcm


def to_rational(value) -> Fraction:
    """
    Converts `value` to an exact `Fraction`.

    Accepts integers, rationals, and strings such as "3", "-2/7" or "0.125".
    Strings are read in decimal, so "0.1" becomes 1/10 rather than the binary
    float nearest to it.
    """
    if isinstance(value, bool):
        raise TypeError(f"Refusing to read boolean {value!r} as a number.")
    if isinstance(value, Rational):
        return Fraction(value)
    if isinstance(value, str):
        return Fraction(value.strip())
    raise TypeError(f"Cannot read {value!r} as an exact rational.")


def divide(numerator, denominator) -> Fraction:
    """
    Exact quotient of two rationals.

    Raises DivisionByZero when `denominator` vanishes.
    """
    if 0 == denominator:
        raise DivisionByZero(f"Attempted to divide {numerator} by zero.")
    return Fraction(numerator) / Fraction(denominator)


def sign(value) -> int:
    if value > 0:
        return 1
    elif value < 0:
        return -1
    return 0


def dot(left: Sequence, right: Sequence) -> Fraction:
    assert len(left) == len(right)
    return sum((Fraction(x) * y for x, y in zip(left, right)), Fraction(0))


def evaluate(row: Sequence, point: Sequence) -> Fraction:
    """
    Computes the slack `row[0] + sum_i row[i] * point[i-1]` of the inequality
    `row` at `point`.  Nonnegative slack means `point` satisfies the row.
    """
    return Fraction(row[0]) + dot(row[1:], point)


def primitive_row(row: Sequence) -> List[int]:
    """
    Rescales a rational `row` by a positive factor so that its entries become
    coprime integers.  The rescaled row describes the same halfspace.
    """
    fractions = [to_rational(x) for x in row]
    row_lcm = abs(lcm(*[x.denominator for x in fractions]))
    integers = [int(x * row_lcm) for x in fractions]
    row_gcd = abs(reduce(math.gcd, integers))
    row_gcd = row_gcd if row_gcd != 0 else 1
    return [x // row_gcd for x in integers]


def determinant(matrix: Sequence[Sequence]) -> Fraction:
    """
    Exact determinant of a square `matrix`, by Gaussian elimination.
    """
    rows = [[Fraction(x) for x in row] for row in matrix]
    size = len(rows)
    assert all(len(row) == size for row in rows), "Matrix is not square."

    result = Fraction(1)
    for column in range(size):
        pivot_index = next((index for index in range(column, size)
                            if rows[index][column] != 0), None)
        if pivot_index is None:
            return Fraction(0)
        if pivot_index != column:
            rows[column], rows[pivot_index] = rows[pivot_index], rows[column]
            result = -result
        pivot = rows[column][column]
        result *= pivot
        for index in range(1 + column, size):
            factor = rows[index][column] / pivot
            if factor != 0:
                rows[index] = [x - factor * y
                               for x, y in zip(rows[index], rows[column])]

    return result
