from dataclasses import dataclass, field
from .errors import InvalidInputError


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class PointSet:
    points: tuple[Point, ...]
    k: int
    # n from a "keys" header, if the input declared one
    declared_n: int | None = field(default=None, compare=False)
    # base each y value was written in, parallel to points (empty when built by hand)
    bases: tuple[int, ...] = field(default=(), compare=False)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def n(self):
        return len(self.points)


def check_distinct_xs(points):
    seen = set()
    for p in points:
        if p.x in seen:
            raise InvalidInputError(f"duplicate x value {p.x} (each point must have a unique x)")
        seen.add(p.x)


def as_points(points) -> list[Point]:
    # accepts Point objects or plain (x, y) pairs
    return [p if isinstance(p, Point) else Point(*p) for p in points]
