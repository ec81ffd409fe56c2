import ast
import re
from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError
from lark.visitors import Transformer
from .base_decoder import decode
from .errors import SecretSearchError, DecodeError, InvalidInputError
from .points import Point, PointSet


"""
test case layout (not general JSON - only one level of nesting, no arrays, floats or booleans):

{
    "keys": {"n": 4, "k": 3},        (or just "k": 3 at the top level)
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    ...
}

every key other than "k"/"keys" is the x value of a point, its record gives the y value as digits in a base
"""

parser = Lark(r"""
    object: "{" [member ("," member)*] "}"
    member: string ":" value

    record: "{" [field ("," field)*] "}"
    field: string ":" scalar

    ?value: scalar
          | record

    ?scalar: number
           | string

    number: SIGNED_INT
    string: ESCAPED_STRING

    %import common.ESCAPED_STRING
    %import common.SIGNED_INT
    %import common.WS
    %ignore WS
    """, start='object', parser='lalr')


POINT_KEY = re.compile(r"-?\d+")


def to_int(value, what):
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(f"{what} must be an integer (got a record)")
    try:
        return int(value.strip())
    except ValueError:
        raise InvalidInputError(f"{what} must be an integer (got {value!r})") from None


class CaseConverter(Transformer):
    def __init__(self, strict_digits: bool = False):
        """
        strict_digits: reject value strings containing characters that are not digits in their base
        """
        super().__init__()
        self.strict_digits = strict_digits

    def object(self, children):
        k = None
        declared_n = None
        points = []
        bases = []
        seen_xs = set()

        for key, value in self.unique_pairs(children, "test case"):
            if key == "k":
                k = self.merge_k(k, to_int(value, "k"))
            elif key == "keys":
                if not isinstance(value, dict):
                    raise InvalidInputError("'keys' must be a record like {\"n\": 4, \"k\": 3}")
                if "k" in value:
                    k = self.merge_k(k, to_int(value["k"], "k"))
                if "n" in value:
                    declared_n = to_int(value["n"], "n")
            elif POINT_KEY.fullmatch(key):
                x = int(key)
                if x in seen_xs:
                    raise InvalidInputError(f"duplicate x value {x}")
                seen_xs.add(x)
                y, base = self.decode_record(key, value)
                points.append(Point(x, y))
                bases.append(base)
            else:
                raise InvalidInputError(f"unexpected key {key!r} (expected 'k', 'keys' or an integer x value)")

        if k is None:
            raise InvalidInputError("test case does not specify k")

        return PointSet(tuple(points), k, declared_n, tuple(bases))

    def member(self, children):
        key, value = children
        return (key, value)

    def record(self, children):
        return dict(self.unique_pairs(children, "record"))

    def field(self, children):
        key, value = children
        return (key, value)

    def number(self, children):
        return int(children[0])

    def string(self, children):
        # ESCAPED_STRING keeps its quotes and backslash escapes, e.g "\u0031" -> "1"
        try:
            return ast.literal_eval(str(children[0]))
        except (ValueError, SyntaxError):
            raise InvalidInputError(f"invalid string literal {children[0]}") from None

    def unique_pairs(self, children, where):
        # [] in the grammar leaves a None child for an empty object
        pairs = [child for child in children if child is not None]
        keys = [key for key, _ in pairs]
        for key in keys:
            if keys.count(key) > 1:
                raise InvalidInputError(f"duplicate key {key!r} in {where}")
        return pairs

    def merge_k(self, current, new):
        if current is not None and current != new:
            raise InvalidInputError(f"conflicting values for k ({current} and {new})")
        return new

    def decode_record(self, key, record):
        if not isinstance(record, dict):
            raise InvalidInputError(f"point {key} must be a record with 'base' and 'value'")
        missing = [name for name in ("base", "value") if name not in record]
        if missing:
            raise InvalidInputError(f"point {key} is missing {', '.join(missing)}")

        try:
            base = to_int(record["base"], f"base of point {key}")
        except InvalidInputError as e:
            raise DecodeError(str(e)) from None

        # values may be given unquoted
        return decode(str(record["value"]), base, strict=self.strict_digits), base


def ingest(raw_text: str, strict_digits: bool = False) -> tuple[PointSet, int]:
    """
    Parse one test case and decode its values.

    Returns:
        Tuple of (PointSet, k)
    """
    try:
        parse_tree = parser.parse(raw_text)
    except UnexpectedInput as e:
        raise InvalidInputError(f"could not parse test case: {e}") from e

    try:
        point_set = CaseConverter(strict_digits).transform(parse_tree)
    except VisitError as e:
        # lark wraps anything raised inside the transformer
        if isinstance(e.orig_exc, SecretSearchError):
            raise e.orig_exc from None
        raise

    return point_set, point_set.k


def ingest_file(path, strict_digits: bool = False) -> tuple[PointSet, int]:
    with open(path, "r") as f:
        return ingest(f.read(), strict_digits)
