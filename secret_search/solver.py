from dataclasses import dataclass
from pathlib import Path
from .errors import SecretSearchError
from .parser import ingest_file
from .points import PointSet
from .subset_search import find_majority_secret


@dataclass(frozen=True)
class CaseResult:
    name: str
    secret: int | None
    error: str | None = None
    point_set: PointSet | None = None

    @property
    def ok(self):
        return self.error is None


def solve(point_set, k: int, exact: bool = True) -> int:
    """secret of one test case - the majority over all k-subsets of its points"""
    points = point_set.points if isinstance(point_set, PointSet) else point_set
    return find_majority_secret(points, k, exact=exact)


def solve_case_file(path, exact: bool = True, strict_digits: bool = False, on_parsed=None) -> CaseResult:
    name = Path(path).name
    point_set = None
    try:
        point_set, k = ingest_file(path, strict_digits)
        if on_parsed is not None:
            on_parsed(name, point_set)
        return CaseResult(name, solve(point_set, k, exact), point_set=point_set)
    except (SecretSearchError, OSError) as e:
        # one bad test case should not stop the others from being solved
        return CaseResult(name, None, f"{type(e).__name__}: {e}", point_set)


def solve_test_cases(paths, exact: bool = True, strict_digits: bool = False, on_parsed=None) -> list[CaseResult]:
    """
    Solve each test case file independently.

    Args:
        paths: iterable of test case file paths
        exact: use exact rational arithmetic for interpolation
        strict_digits: reject values containing characters that are not digits in their base
        on_parsed: optional callback(name, point_set), called after a file is ingested and before the search

    Returns:
        one CaseResult per path, in order. failed cases have secret None and the error message set
    """
    return [
        solve_case_file(path, exact, strict_digits, on_parsed)
        for path in paths
    ]
