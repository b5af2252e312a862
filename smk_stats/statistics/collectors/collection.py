"""
Collection composition metrics: gender balance, object types, nationalities,
techniques / materials and departments.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional, Sequence

from smk_stats.record import ArtworkRecord, GENDERS, UNKNOWN
from smk_stats.statistics.aggregation import (
    by_gender_keys,
    gender_percentage,
    gender_totals,
    group_count,
    row_percentages,
    to_series,
    unique_group_count,
)
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.model import GroupedCount, Stats
from smk_stats.statistics.summary import round_half_up

logger = logging.getLogger(__name__)

GROUPED_ATTRIBUTES = ('techniques', 'materials')


def _grouped_result(groups: List[GroupedCount]) -> Dict[str, Any]:
    """
    Series with per-gender totals, within-gender percentages and per-label shares.

    male_percent[i] is the share of label i among all male counts listed;
    share holds each label's own Male/Female/Unknown split.
    """
    series = to_series(groups)
    totals = {gender: sum(g.counts[gender] for g in groups) for gender in GENDERS}
    percents = {
        gender: [gender_percentage(g.counts[gender], totals[gender]) for g in groups]
        for gender in GENDERS
    }
    return {
        **series,
        **by_gender_keys(percents, 'percent'),
        'totals': totals,
        'share': row_percentages(series),
    }


def gender_summary(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Records per creator gender with percentages of the whole collection.

    Percentages are rounded to one decimal and are 0 for an empty collection.
    """
    counts = gender_totals(records)
    total = sum(counts.values())
    return {
        'counts': counts,
        'total': total,
        **{f"{gender.lower()}_percent": round_half_up(gender_percentage(counts[gender], total), 1) for gender in GENDERS},
    }


def object_type_data(records: Sequence[ArtworkRecord], top_n: Optional[int] = None) -> Dict[str, Any]:
    """Artworks per object type and gender, largest type first."""
    return _grouped_result(group_count(records, lambda r: r.object_type, top_n=top_n))


def nationality_data(records: Sequence[ArtworkRecord], top_n: Optional[int] = 20) -> Dict[str, Any]:
    """
    Unique artists per nationality and gender (top_n nationalities).

    Artists are identified by creator name; works with an unknown creator
    are ignored. A missing nationality is grouped as 'Unknown'.
    """
    groups = unique_group_count(
        records,
        accessor=lambda r: r.nationality or UNKNOWN,
        identity=lambda r: r.creator_name,
        top_n=top_n,
    )
    return _grouped_result(groups)


def top_attribute_data(records: Sequence[ArtworkRecord], attribute: str, top_n: Optional[int] = 20) -> Dict[str, Any]:
    """
    Artworks per value of a multi-valued attribute (e.g. 'techniques').

    A work with several values adds one count to each of them.
    """
    if attribute not in GROUPED_ATTRIBUTES:
        logger.warning(f"Attribute '{attribute}' is not a grouped attribute {GROUPED_ATTRIBUTES}")
    groups = group_count(records, lambda r: getattr(r, attribute, None), top_n=top_n)
    return {'attribute': attribute, **_grouped_result(groups)}


def department_gender_data(records: Sequence[ArtworkRecord], top_n: Optional[int] = 15) -> Dict[str, Any]:
    """
    Department -> gender flows for a Sankey diagram.

    Departments are ranked by artwork count and cut to top_n; links are only
    emitted for non-zero flows. Totals cover the listed departments only.
    """
    groups = group_count(records, lambda r: r.department or UNKNOWN, top_n=top_n)

    nodes = [{'name': g.label, 'id': f"dept_{index}"} for index, g in enumerate(groups)]
    nodes.extend({'name': gender, 'id': f"gender_{gender.lower()}"} for gender in GENDERS)

    links = []
    for index, group in enumerate(groups):
        for gender in GENDERS:
            if group.counts[gender] > 0:
                links.append({
                    'source': f"dept_{index}",
                    'target': f"gender_{gender.lower()}",
                    'value': group.counts[gender],
                })

    totals = {gender: sum(g.counts[gender] for g in groups) for gender in GENDERS}
    return {
        'nodes': nodes,
        'links': links,
        'department_counts': {g.label: {**g.counts, 'total': g.total} for g in groups},
        **by_gender_keys(totals, 'total'),
        'total_artworks': sum(totals.values()),
    }


@register_collector
@dataclass
class CollectionCollector(MetricCollector):
    """
    Collects collection composition statistics.

    Statistics collected:
        - Gender balance of the whole collection
        - Object types by gender
        - Unique artists per nationality
        - Top techniques and materials
        - Department -> gender flows
    """
    collector_id: str = "collection"
    top_n: int = 20
    department_top_n: int = 15

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect collection composition statistics."""
        return self._run_metrics(records, {
            'gender_summary': lambda: gender_summary(records),
            'object_types': lambda: object_type_data(records),
            'nationalities': lambda: nationality_data(records, top_n=self.top_n),
            'techniques': lambda: top_attribute_data(records, 'techniques', top_n=self.top_n),
            'materials': lambda: top_attribute_data(records, 'materials', top_n=self.top_n),
            'departments': lambda: department_gender_data(records, top_n=self.department_top_n),
        }, collector_num, total_collectors)
