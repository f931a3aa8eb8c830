"""
test/test_ine.py

Tests for lasserre/io/ine.py .
"""

import os
import tempfile

import ddt
import unittest

from lasserre.exceptions import DegenerateInputError, ParseError
from lasserre.io.ine import *
from lasserre.static.examples import standard_simplex


unit_square_ine = """\
unit_square
* the square [0, 1]^2
H-representation
begin
4 3 rational
0  1  0
1 -1  0
0  0  1
1  0 -1
end
volume
"""


def ine_with_rows(*rows, header="4 3 rational"):
    return "\n".join(["begin", header, *rows, "end"]) + "\n"


@ddt.ddt
class TestLasserreIne(unittest.TestCase):
    """Check the .ine reader and writer."""

    def test_decode(self):
        data = decode_inequalities(unit_square_ine)
        self.assertEqual("unit_square", data["name"])
        self.assertEqual([], data["equalities"])
        self.assertEqual(
            [[0, 1, 0], [1, -1, 0], [0, 0, 1], [1, 0, -1]],
            data["inequalities"]
        )

    def test_decode_bytes(self):
        self.assertEqual(decode_inequalities(unit_square_ine),
                         decode_inequalities(unit_square_ine.encode()))

    def test_anonymous(self):
        data = decode_inequalities(ine_with_rows(
            "0 1 0", "1 -1 0", "0 0 1", "1 0 -1",
        ))
        self.assertTrue(data["name"].startswith("anonymous_convex_polytope_"))

    def test_exact_entries(self):
        data = decode_inequalities(ine_with_rows(
            "0.5 1 0", "1/3 -1 0", "0 0 2", "1e1 0 -1", header="4 3 real",
        ))
        self.assertEqual(
            [Fraction(1, 2), Fraction(1, 3), Fraction(0), Fraction(10)],
            [row[0] for row in data["inequalities"]]
        )

    def test_linearity(self):
        data = decode_inequalities(
            "linearity 1 2\n" +
            ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1 0 -1")
        )
        self.assertEqual([[1, -1, 0]], data["equalities"])
        self.assertEqual(3, len(data["inequalities"]))
        with self.assertRaises(DegenerateInputError):
            ConvexPolytope.inflate(data)

    @ddt.data(
        # missing end marker
        "begin\n1 2 rational\n0 1\n",
        # missing begin
        "name\nH-representation\n1 2 rational\n",
        # nothing at all
        "",
        # malformed table size
        "begin\nfour 3 rational\nend\n",
        "begin\n4 3\nend\n",
        "begin\n-1 3 rational\nend\n",
        # unknown number type
        "begin\n1 2 float\n0 1\nend\n",
        # wrong row arity
        ine_with_rows("0 1 0", "1 -1", "0 0 1", "1 0 -1"),
        ine_with_rows("0 1 0", "1 -1 0 0", "0 0 1", "1 0 -1"),
        # non-numeric tokens
        ine_with_rows("0 1 0", "1 -1 x", "0 0 1", "1 0 -1"),
        ine_with_rows("0 1 0", "1 -1 0", "0 1/0 1", "1 0 -1"),
        # integers only
        ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1/2 0 -1",
                      header="4 3 integer"),
        # too few and too many rows
        ine_with_rows("0 1 0", "1 -1 0", "0 0 1"),
        ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1 0 -1", "1 1 1"),
        # vertex descriptions
        "V-representation\nbegin\n1 3 rational\n1 0 0\nend\n",
        # bad linearity lines
        "linearity 2 1\n" + ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1 0 -1"),
        "linearity one 1\n" + ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1 0 -1"),
        "linearity 1 9\n" + ine_with_rows("0 1 0", "1 -1 0", "0 0 1", "1 0 -1"),
        # junk after the name
        "name\nmore junk\nbegin\n1 2 rational\n0 1\nend\n",
    )
    def test_parse_errors(self, payload):
        with self.assertRaises(ParseError):
            decode_inequalities(payload)

    def test_encode_round_trip(self):
        simplex = standard_simplex(3)
        payload = encode_inequalities(simplex)
        self.assertIn("begin\n4 4 rational\n", payload)
        reread = ConvexPolytope(**decode_inequalities(payload))
        self.assertEqual(simplex.inequalities, reread.inequalities)
        self.assertEqual(simplex.name, reread.name)

    def test_encode_options(self):
        payload = encode_inequalities(standard_simplex(2), options=["volume"])
        self.assertTrue(payload.endswith("end\nvolume\n"))

    def test_read_write(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "vol.ine")
            with open(path, "w") as handle:
                handle.write(unit_square_ine)
            square = read_ine(path)
            self.assertEqual(2, square.dimension)
            self.assertEqual(Fraction(1), square.volume)

            copy_path = os.path.join(directory, "copy.ine")
            write_ine(square, copy_path)
            self.assertEqual(square.inequalities,
                             read_ine(copy_path).inequalities)

    @ddt.data(
        (Fraction(1), False, "1/1"),
        (Fraction(1, 2), False, "1/2"),
        (Fraction(-7, 3), False, "-7/3"),
        (Fraction(1, 3), True, "0.333333"),
        (Fraction(8), True, "8.000000"),
    )
    @ddt.unpack
    def test_format_volume(self, volume, decimal, expected):
        self.assertEqual(expected, format_volume(volume, decimal=decimal))
