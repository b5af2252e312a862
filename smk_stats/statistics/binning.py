"""
Histogram binning: fixed-edge bins and dynamic decade bins, counted per gender.

Bins are half-open [min, max). A value is assigned to the first bin that
contains it; a value outside every bin is dropped silently.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple

from smk_stats.record import GENDERS, YEAR_MAX, YEAR_MIN, UNKNOWN
from smk_stats.statistics.model import Bin
from smk_stats.statistics.summary import min_max

logger = logging.getLogger(__name__)


def fixed_bins(edges: Sequence[float], labels: Sequence[str]) -> List[Bin]:
    """
    Build consecutive bins from ascending lower edges.

    Bin i covers [edges[i], edges[i + 1]); the last bin is unbounded above.

    Args:
        edges: Strictly ascending lower bounds.
        labels: One label per edge.

    Returns:
        List of Bin.

    Raises:
        ValueError: If edges are not strictly ascending or the label count differs.
    """
    if len(edges) != len(labels):
        raise ValueError(f"Expected {len(edges)} labels, got {len(labels)}")
    if any(edges[i] >= edges[i + 1] for i in range(len(edges) - 1)):
        raise ValueError(f"Bin edges must be strictly ascending: {list(edges)}")
    bins = []
    for i, (lower, label) in enumerate(zip(edges, labels)):
        upper = edges[i + 1] if i + 1 < len(edges) else math.inf
        bins.append(Bin(min=lower, max=upper, label=label))
    return bins


def assign_bin(value: float, bins: Sequence[Bin]) -> Optional[int]:
    """Index of the first bin containing value, or None."""
    for index, b in enumerate(bins):
        if b.contains(value):
            return index
    return None


def plausible_years(values: Iterable[Optional[int]], lower: int = YEAR_MIN, upper: int = YEAR_MAX) -> List[int]:
    """Keep truthy years inside [lower, upper]."""
    return [v for v in values if v and lower <= v <= upper]


def decade_bins(values: Iterable[Optional[int]], lower: int = YEAR_MIN, upper: int = YEAR_MAX) -> List[Bin]:
    """
    Consecutive 10-year bins covering every plausible value.

    Values are filtered to [lower, upper]; bins run from the decade of the
    smallest survivor through the decade of the largest, including empty
    decades in between. Labels are the decade start, e.g. '1620s'.

    Returns:
        List of Bin, empty when no value survives the filter.
    """
    years = plausible_years(values, lower, upper)
    if not years:
        return []
    min_year, max_year = min_max(years)
    start = (min_year // 10) * 10
    # Exclusive end: one decade past the decade holding max_year
    end = (max_year // 10 + 1) * 10
    return [Bin(min=decade, max=decade + 10, label=f"{decade}s") for decade in range(start, end, 10)]


def empty_bin_counts(bins: Sequence[Bin]) -> Dict[str, List[int]]:
    return {gender: [0] * len(bins) for gender in GENDERS}


def bin_counts(observations: Iterable[Tuple[Any, ...]], bins: Sequence[Bin]) -> Dict[str, List[int]]:
    """
    Count observations per gender and bin.

    Args:
        observations: (gender, value) or (gender, value, weight) tuples.
        bins: Bins to count into.

    Returns:
        Gender -> list of counts parallel to bins.
    """
    counts = empty_bin_counts(bins)
    dropped = 0
    for observation in observations:
        gender, value = observation[0], observation[1]
        weight = observation[2] if len(observation) > 2 else 1
        index = assign_bin(value, bins)
        if index is None:
            dropped += 1
            continue
        counts[gender][index] += weight
    if dropped:
        logger.debug(f"{dropped} values fell outside all bins")
    return counts


def bin_unique_counts(observations: Iterable[Tuple[str, float, Optional[Hashable]]], bins: Sequence[Bin]) -> Dict[str, List[int]]:
    """
    Count distinct identity keys per gender and bin.

    Args:
        observations: (gender, value, key) tuples. Observations whose key is
            None or the 'Unknown' sentinel are excluded.
        bins: Bins to count into.

    Returns:
        Gender -> list of distinct-key counts parallel to bins.
    """
    seen: Dict[str, List[Set[Hashable]]] = {gender: [set() for _ in bins] for gender in GENDERS}
    for gender, value, key in observations:
        if key is None or key == UNKNOWN:
            continue
        index = assign_bin(value, bins)
        if index is not None:
            seen[gender][index].add(key)
    return {gender: [len(keys) for keys in sets] for gender, sets in seen.items()}


def bin_totals(counts: Dict[str, List[int]]) -> Dict[str, int]:
    return {gender: sum(values) for gender, values in counts.items()}


def bin_percentages(counts: Dict[str, List[int]]) -> Dict[str, List[float]]:
    """
    Share of each bin within its gender's total, in percent.

    A gender with a zero total gets all-zero percentages.
    """
    percentages = {}
    for gender, values in counts.items():
        total = sum(values)
        percentages[gender] = [(v / total) * 100 if total > 0 else 0 for v in values]
    return percentages
