"""
lasserre/io/ine.py

Reading and writing halfspace descriptions in the `.ine` format shared by
`cdd` and `lrs`:

    name
    H-representation
    linearity k i1 ... ik        (optional)
    begin
    m n rational
    b_1 a_11 ... a_1d
    ...
    end
    (options)

where each row stands for `b_i + a_i1 x1 + ... + a_id xd >= 0` and n = d + 1.
Lines starting with `*` or `#` are comments.
"""

from fractions import Fraction

from ..exceptions import ParseError
from ..polytopes import ConvexPolytope
from ..rational import to_rational
from .base import generate_anonymous_cp_name


NUMBER_TYPES = ("rational", "integer", "real")


def _parse_number(token, number_type, line_number) -> Fraction:
    try:
        if number_type == "integer":
            return Fraction(int(token))
        return to_rational(token)
    except (ValueError, ZeroDivisionError):
        raise ParseError(
            f"line {line_number}: {token!r} is not a valid {number_type} entry."
        ) from None


def _parse_linearity(line, line_number):
    tokens = line.split()[1:]
    try:
        numbers = [int(token) for token in tokens]
    except ValueError:
        raise ParseError(
            f"line {line_number}: malformed linearity line {line!r}."
        ) from None
    if 0 == len(numbers) or numbers[0] != len(numbers) - 1:
        raise ParseError(
            f"line {line_number}: linearity count does not match its indices."
        )
    return numbers[1:]


def decode_inequalities(payload):
    """
    Parse an `.ine` description (as `str` or `bytes`) into python data.

    Returns a dictionary with keys `inequalities`, `equalities` and `name`,
    suitable for `ConvexPolytope.inflate`, with `Fraction` entries.  Raises
    ParseError on malformed input.
    """
    text = payload.decode('utf-8') if isinstance(payload, bytes) else payload

    name = None
    linearity = []
    row_count, column_count, number_type = None, None, None
    rows = []
    state = "preamble"
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        # ignore comments
        if line == '' or line.startswith('*') or line.startswith('#'):
            continue

        if state == "preamble":
            if line == 'H-representation':
                continue
            if line == 'V-representation':
                raise ParseError(
                    f"line {line_number}: vertex descriptions are not supported."
                )
            if line.startswith('linearity'):
                linearity = _parse_linearity(line, line_number)
                continue
            if line == 'begin':
                state = "size"
                continue
            # first free-standing line is our name
            if name is None:
                name = line
                continue
            raise ParseError(
                f"line {line_number}: unexpected {line!r} before 'begin'."
            )

        elif state == "size":
            tokens = line.split()
            if len(tokens) != 3:
                raise ParseError(
                    f"line {line_number}: expected 'm n <type>', got {line!r}."
                )
            try:
                row_count, column_count = int(tokens[0]), int(tokens[1])
            except ValueError:
                raise ParseError(
                    f"line {line_number}: malformed table size {line!r}."
                ) from None
            if row_count < 0 or column_count < 1:
                raise ParseError(
                    f"line {line_number}: impossible table size {line!r}."
                )
            if tokens[2] not in NUMBER_TYPES:
                raise ParseError(
                    f"line {line_number}: unknown number type {tokens[2]!r}."
                )
            number_type = tokens[2]
            state = "rows"

        elif state == "rows":
            if line == 'end':
                if len(rows) != row_count:
                    raise ParseError(
                        f"line {line_number}: expected {row_count} rows, "
                        f"found {len(rows)}."
                    )
                state = "options"
                continue
            tokens = line.split()
            if len(tokens) != column_count:
                raise ParseError(
                    f"line {line_number}: expected {column_count} entries, "
                    f"found {len(tokens)}."
                )
            if len(rows) == row_count:
                raise ParseError(
                    f"line {line_number}: more than the declared {row_count} rows."
                )
            rows.append([_parse_number(token, number_type, line_number)
                         for token in tokens])

        # trailing options are meant for other tools

    if state == "preamble":
        raise ParseError("Missing 'begin'.")
    if state != "options":
        raise ParseError("Missing 'end'.")
    if any(index < 1 or index > len(rows) for index in linearity):
        raise ParseError("Linearity index out of range.")

    return dict(
        inequalities=[row for index, row in enumerate(rows)
                      if 1 + index not in linearity],
        equalities=[row for index, row in enumerate(rows)
                    if 1 + index in linearity],
        name=name if name is not None else generate_anonymous_cp_name(),
    )


def encode_inequalities(convex_polytope, options=None) -> str:
    """Format `convex_polytope` as an `.ine` description."""
    options = options if options is not None else []
    inequalities = convex_polytope.inequalities
    equalities = convex_polytope.equalities
    rows = inequalities + equalities

    output = ""
    output += convex_polytope.name + "\n"
    output += "H-representation\n"
    if 0 < len(equalities):
        output += (f"linearity {len(equalities)} " +
                   " ".join(str(1 + len(inequalities) + index)
                            for index in range(len(equalities))) + "\n")
    output += "begin\n"
    output += f"{len(rows)} {len(rows[0]) if rows else 1} rational\n"
    for row in rows:
        output += " ".join([str(x) for x in row]) + "\n"
    output += "end\n"
    for option in options:
        output += f"{option}\n"

    return output


def read_ine(path) -> ConvexPolytope:
    """Reads the `.ine` file at `path` into a ConvexPolytope."""
    with open(path, "r", encoding="utf-8") as handle:
        return ConvexPolytope.inflate(decode_inequalities(handle.read()))


def write_ine(convex_polytope, path, options=None):
    """Writes `convex_polytope` to `path` in the `.ine` format."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(encode_inequalities(convex_polytope, options=options))


def format_volume(volume, decimal=False) -> str:
    """
    Renders an exact `volume` as `p/q`, or, when `decimal` is set, as the
    fixed-point rendering of its nearest float.
    """
    volume = Fraction(volume)
    if decimal:
        return f"{float(volume):f}"
    return f"{volume.numerator}/{volume.denominator}"
