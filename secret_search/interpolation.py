from fractions import Fraction
from math import floor, isfinite, prod
from .errors import InvalidInputError
from .points import as_points, check_distinct_xs


# formulas taken from https://en.wikipedia.org/wiki/Lagrange_polynomial
# field is the number type to compute in: Fraction (exact) or float (legacy, loses precision
# once the products of (x_i - x_j) get large)
class Interpolator:
    def __init__(self, field, xs):
        if len(xs) == 0:
            raise InvalidInputError("xs list must not be empty (need at least one point to interpolate)")
        if len(set(xs)) != len(xs):
            raise InvalidInputError(f"x values must be distinct (got {list(xs)})")

        self.field = field
        self.xs = [self.to_field(x) for x in xs]
        self.w = self.get_interpolation_weights(self.xs)
        self.degree = len(xs)-1


    def to_field(self, value):
        try:
            return self.field(value)
        except OverflowError:
            raise InvalidInputError(f"value {value} is too large for {self.field.__name__} arithmetic") from None


    # called w_j in the wikipedia article
    def get_interpolation_weights(self, xs):
        return [prod((self.field(1)/(x_j-x_m) for x_m in xs if x_j != x_m), start=self.field(1))
                for x_j in xs]


    def interpolate(self, ys):
        """
        returns a function, which when called with a single argument, evaluates the polynomial at that point
        """
        if len(self.xs) != len(ys):
            raise InvalidInputError("number of x values given and y value given must match")

        ys = [self.to_field(y) for y in ys]

        def f(x):
            x = self.to_field(x)

            # using the formula itself to calculate f(xi) (if xi is in self.xs) results in 0/0
            # so this is a manual override
            for i, xi in enumerate(self.xs):
                if xi == x: return ys[i]

            numer = self.field(0)
            denom = self.field(0)
            for (xi, yi, wi) in zip(self.xs, ys, self.w):
                v = (wi/(x-xi))
                numer += v*yi
                denom += v
            return numer/denom

        return f


def round_half_away_from_zero(value) -> int:
    if isinstance(value, float) and not isfinite(value):
        raise InvalidInputError(f"interpolated value is not finite ({value}), use exact arithmetic for values this large")
    # round() on floats and Fractions rounds half to even, which is not what we want
    magnitude = floor(abs(value) + Fraction(1, 2))
    return magnitude if value >= 0 else -magnitude


def interpolate_at_zero(points, exact: bool = True) -> int:
    """
    Value at x = 0 of the unique polynomial of degree < len(points) through the given points,
    rounded to the nearest integer (halves away from zero).

    Args:
        points: Points (or (x, y) pairs) with pairwise distinct x values
        exact: compute with Fractions; if False use floats like the old implementation

    Returns:
        the secret (constant term) as an int
    """
    points = as_points(points)
    check_distinct_xs(points)

    field = Fraction if exact else float
    I = Interpolator(field, [p.x for p in points])
    poly = I.interpolate([p.y for p in points])
    try:
        value = poly(0)
    except OverflowError:
        raise InvalidInputError("interpolation overflowed, use exact arithmetic for values this large") from None
    return round_half_away_from_zero(value)
