"""
Group-by-category counting partitioned by creator gender.

Two flavours:
    - group_count: one increment per extracted value (multi-valued attributes
      add to several groups)
    - unique_group_count: distinct identities per group, ignoring the
      'Unknown' sentinel

Groups are returned largest first; ties keep first-seen order.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Set

from smk_stats.record import ArtworkRecord, GENDERS, UNKNOWN
from smk_stats.statistics.model import GroupedCount, empty_gender_counts

Accessor = Callable[[ArtworkRecord], Any]


def _values(extracted: Any) -> List[Any]:
    """Normalize an accessor result to a list of group keys."""
    if extracted is None:
        return []
    if isinstance(extracted, (list, tuple, set, frozenset)):
        return [v for v in extracted if v is not None and v != '']
    if extracted == '':
        return []
    return [extracted]


def _rank(groups: Iterable[GroupedCount], top_n: Optional[int]) -> List[GroupedCount]:
    ranked = sorted(groups, key=lambda g: g.total, reverse=True)
    return ranked[:top_n] if top_n is not None else ranked


def group_count(
    records: Iterable[ArtworkRecord],
    accessor: Accessor,
    top_n: Optional[int] = None,
) -> List[GroupedCount]:
    """
    Count records per extracted value and gender.

    Args:
        records: Artwork records.
        accessor: Returns a scalar, a sequence of values or None per record.
        top_n: Keep only the first top_n groups after sorting.

    Returns:
        GroupedCount list sorted by total descending.
    """
    groups: Dict[Any, GroupedCount] = {}
    for record in records:
        for value in _values(accessor(record)):
            group = groups.get(value)
            if group is None:
                group = groups[value] = GroupedCount(label=value)
            group.add(record.gender)
    return _rank(groups.values(), top_n)


def unique_group_count(
    records: Iterable[ArtworkRecord],
    accessor: Accessor,
    identity: Accessor,
    top_n: Optional[int] = None,
) -> List[GroupedCount]:
    """
    Count distinct identities per extracted value and gender.

    Records whose identity is None or 'Unknown' are skipped entirely.

    Args:
        records: Artwork records.
        accessor: Group key(s) per record.
        identity: Dedup key per record (e.g. creator name).
        top_n: Keep only the first top_n groups after sorting.

    Returns:
        GroupedCount list of set sizes, sorted by total descending.
    """
    seen: Dict[Any, Dict[str, Set[Hashable]]] = {}
    for record in records:
        key = identity(record)
        if key is None or key == UNKNOWN:
            continue
        for value in _values(accessor(record)):
            if value not in seen:
                seen[value] = {gender: set() for gender in GENDERS}
            seen[value][record.gender].add(key)

    groups = (
        GroupedCount(label=value, counts={gender: len(keys) for gender, keys in by_gender.items()})
        for value, by_gender in seen.items()
    )
    return _rank(groups, top_n)


def gender_percentage(count: float, total: float) -> float:
    """count / total * 100, or 0 when total is 0."""
    return (count / total) * 100 if total > 0 else 0


def gender_totals(records: Iterable[ArtworkRecord], predicate: Optional[Callable[[ArtworkRecord], bool]] = None) -> Dict[str, int]:
    """Records per gender, optionally only those matching predicate."""
    totals = empty_gender_counts()
    for record in records:
        if predicate is None or predicate(record):
            totals[record.gender] += 1
    return totals


def by_gender_keys(values: Dict[str, Any], suffix: str) -> Dict[str, Any]:
    """{'Male': a, 'Female': b, ...} -> {'male_<suffix>': a, 'female_<suffix>': b, ...}."""
    return {f"{gender.lower()}_{suffix}": values[gender] for gender in GENDERS}


def to_series(groups: Iterable[GroupedCount]) -> Dict[str, List[Any]]:
    """Labels plus parallel per-gender count arrays."""
    groups = list(groups)
    return {
        'labels': [g.label for g in groups],
        'male_data': [g.counts['Male'] for g in groups],
        'female_data': [g.counts['Female'] for g in groups],
        'unknown_data': [g.counts['Unknown'] for g in groups],
    }


def row_percentages(series: Dict[str, List[Any]]) -> Dict[str, List[Any]]:
    """
    Convert a count series to per-label gender shares for 100% stacked charts.

    Each label's three values sum to 100, or are all 0 when the label has no
    records.
    """
    result: Dict[str, List[Any]] = {
        'labels': list(series['labels']),
        'male_data': [],
        'female_data': [],
        'unknown_data': [],
    }
    for male, female, unknown in zip(series['male_data'], series['female_data'], series['unknown_data']):
        total = male + female + unknown
        result['male_data'].append(gender_percentage(male, total))
        result['female_data'].append(gender_percentage(female, total))
        result['unknown_data'].append(gender_percentage(unknown, total))
    return result


def group_by_year(records: Iterable[ArtworkRecord], gender: str) -> Dict[int, int]:
    """Acquisition year -> number of records for one gender."""
    grouped: Dict[int, int] = defaultdict(int)
    for record in records:
        if record.gender == gender and record.acquisition_year is not None:
            grouped[record.acquisition_year] += 1
    return dict(grouped)
