from collections import defaultdict
from itertools import combinations
from math import comb
from .errors import InvalidInputError, InsufficientDataError
from .interpolation import interpolate_at_zero
from .points import as_points, check_distinct_xs

# Majority vote over every k-subset of the points.
# A single interpolation over all points would be cheaper but one corrupted point would then
# change the answer; voting lets the correct secret win as long as most subsets are clean.


def combination_count(n: int, k: int) -> int:
    return comb(n, k)


def iter_index_masks(n: int, k: int):
    """
    yields every 0/1 tuple of length n with exactly k ones, in increasing lexicographic order
    e.g n=3, k=2 -> (0, 1, 1), (1, 0, 1), (1, 1, 0)
    """
    # ascending masks are exactly the lexicographic combinations of the positions of the zeros
    for zeros in combinations(range(n), n-k):
        zero_set = set(zeros)
        yield tuple(0 if i in zero_set else 1 for i in range(n))


def validate_points(points, k):
    points = as_points(points)
    if k < 1:
        raise InvalidInputError(f"k must be at least 1 (got k = {k})")
    if len(points) < k:
        raise InsufficientDataError(f"Not enough points to reconstruct secret. (have {len(points)}/{k} points)")
    check_distinct_xs(points)
    return points


def iter_subset_secrets(points, k: int, exact: bool = True):
    """
    lazily yields (subset, secret) for every k-subset of points.
    callers can stop consuming at any time to bound the work done for large inputs
    """
    points = validate_points(points, k)
    for mask in iter_index_masks(len(points), k):
        subset = [p for p, selected in zip(points, mask) if selected]
        yield subset, interpolate_at_zero(subset, exact=exact)


def tally_secrets(points, k: int, exact: bool = True) -> dict[int, int]:
    tally = defaultdict(int)
    for _, secret in iter_subset_secrets(points, k, exact=exact):
        tally[secret] += 1
    return dict(tally)


def pick_majority(tally: dict[int, int]) -> int:
    # ties go to the smallest secret
    if not tally:
        raise InsufficientDataError("no subsets were evaluated")
    max_count = max(tally.values())
    return min(secret for secret, count in tally.items() if count == max_count)


def find_majority_secret(points, k: int, exact: bool = True) -> int:
    """
    Interpolate every k-subset of points at x = 0 and return the secret produced most often.

    Args:
        points: Points (or (x, y) pairs), n >= k, distinct x values
        k: number of points per subset (degree of the polynomial + 1)
        exact: passed through to interpolate_at_zero

    Returns:
        the majority secret, the smallest one if several share the highest count

    Runs C(n, k) interpolations, so only practical for small n.
    """
    return pick_majority(tally_secrets(points, k, exact=exact))
