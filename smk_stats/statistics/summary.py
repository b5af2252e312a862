"""
Numeric summaries: mean, median, nearest-rank percentiles and weighted variants.

All functions accept any iterable of numbers, never modify their input and
return zeros for empty input.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
import math
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from smk_stats.statistics.model import DistanceStat

Number = float


def mean(values: Iterable[Number]) -> float:
    """Arithmetic mean, 0 for empty input."""
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    return total / count if count else 0


def round_half_up(value: Number, ndigits: int = 0) -> Union[int, float]:
    """
    Round for display with halves rounded away from zero (2.5 -> 3).

    The exact binary value is rounded, so 1.005 gives 1.0 as its stored
    value is just below 1.005. ndigits=0 returns an int. Non-finite values
    are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP)
    return int(rounded) if ndigits == 0 else float(rounded)


def median(values: Iterable[Number]) -> float:
    """
    Median of a sorted copy of values.

    Odd length returns the middle element, even length the average of the
    two middle elements. Empty input returns 0.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0
    mid = n // 2
    if n % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def percentile(values: Iterable[Number], p: float) -> float:
    """
    Nearest-rank percentile without interpolation.

    The element at index floor(len * p) of the sorted values is returned,
    clamped to the last element for p >= 1.
    """
    return _percentile_sorted(sorted(values), p)


def _percentile_sorted(ordered: Sequence[Number], p: float) -> float:
    if not ordered:
        return 0
    index = min(int(math.floor(len(ordered) * p)), len(ordered) - 1)
    return ordered[index]


def min_max(values: Iterable[Number]) -> Tuple[Number, Number]:
    """
    Minimum and maximum in a single iterative pass.

    Returns (0, 0) for empty input.
    """
    iterator = iter(values)
    try:
        lo = hi = next(iterator)
    except StopIteration:
        return 0, 0
    for value in iterator:
        if value < lo:
            lo = value
        elif value > hi:
            hi = value
    return lo, hi


def expand_weighted(pairs: Iterable[Tuple[Number, int]]) -> List[Number]:
    """
    Expand (value, weight) pairs into repeated scalar observations.

    Args:
        pairs: Iterable of (value, integer weight); weights <= 0 contribute nothing.

    Returns:
        List of values, each repeated weight times (unsorted).
    """
    expanded: List[Number] = []
    for value, weight in pairs:
        if weight > 0:
            expanded.extend([value] * int(weight))
    return expanded


def weighted_mean(pairs: Iterable[Tuple[Number, int]]) -> float:
    """Mean of (value, weight) pairs, 0 when the total weight is 0."""
    total = 0.0
    weight_sum = 0
    for value, weight in pairs:
        total += value * weight
        weight_sum += weight
    return total / weight_sum if weight_sum else 0


def distance_stats(pairs: Iterable[Tuple[Number, int]]) -> DistanceStat:
    """
    Summarize weighted distances.

    Each (distance, count) pair is expanded into count observations; median,
    q1 and q3 are nearest-rank positions 0.5, 0.25 and 0.75 of the expanded
    sorted sequence. Empty input returns an all-zero DistanceStat.
    """
    pairs = list(pairs)
    distances = sorted(expand_weighted(pairs))
    if not distances:
        return DistanceStat()
    return DistanceStat(
        median=_percentile_sorted(distances, 0.5),
        q1=_percentile_sorted(distances, 0.25),
        q3=_percentile_sorted(distances, 0.75),
        min=distances[0],
        max=distances[-1],
        avg=weighted_mean(pairs),
    )


def summarize(values: Iterable[Number]) -> Dict[str, float]:
    """
    Count, mean, median, min and max of values.

    Returns zeros for every key when values is empty.
    """
    ordered = sorted(values)
    if not ordered:
        return {'count': 0, 'mean': 0, 'median': 0, 'min': 0, 'max': 0}
    return {
        'count': len(ordered),
        'mean': mean(ordered),
        'median': median(ordered),
        'min': ordered[0],
        'max': ordered[-1],
    }
