"""
Physical size metrics for one object type (paintings by default).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from smk_stats.record import ArtworkRecord, GENDERS
from smk_stats.statistics.aggregation import by_gender_keys
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.binning import bin_counts, bin_percentages, bin_totals, fixed_bins
from smk_stats.statistics.model import Stats
from smk_stats.statistics.summary import round_half_up, summarize

AREA_EDGES = [0, 500, 1000, 2500, 5000, 10000, 25000, 50000]
AREA_LABELS = ['< 500', '500-1K', '1K-2.5K', '2.5K-5K', '5K-10K', '10K-25K', '25K-50K', '> 50K']
DIMENSION_LABELS = ['Avg Height (cm)', 'Avg Width (cm)', 'Avg Area (cm²)']


def _sized_records(records: Sequence[ArtworkRecord], object_type: str) -> List[ArtworkRecord]:
    """Records of object_type (case-insensitive) with a non-zero area."""
    wanted = object_type.lower()
    return [
        r for r in records
        if r.object_type and r.object_type.lower() == wanted and r.area_cm2
    ]


def dimension_data(records: Sequence[ArtworkRecord], object_type: str = "Painting") -> Dict[str, Any]:
    """
    Average and median size per gender for one object type.

    Areas are reported in cm², heights and widths in cm. A record without a
    height or width still counts towards the area statistics.

    Gender rows hold [avg height (1 decimal), avg width (1 decimal),
    avg area (whole cm²)].
    """
    filtered = _sized_records(records, object_type)

    stats = {}
    for gender in GENDERS:
        dims = [r.dimensions for r in filtered if r.gender == gender]
        areas = sorted(d.area / 100 for d in dims)
        area = summarize(areas)
        heights = sorted(d.height / 10 for d in dims if d.height is not None)
        widths = sorted(d.width / 10 for d in dims if d.width is not None)
        stats[gender] = {
            'count': area['count'],
            'avg_area': area['mean'],
            'median_area': area['median'],
            'avg_height': summarize(heights)['mean'],
            'avg_width': summarize(widths)['mean'],
            'min_area': area['min'],
            'max_area': area['max'],
            'areas': areas,
            'heights': heights,
            'widths': widths,
        }

    rows = {
        g: [round_half_up(stats[g]['avg_height'], 1), round_half_up(stats[g]['avg_width'], 1), round_half_up(stats[g]['avg_area'])]
        for g in GENDERS
    }
    return {
        'object_type': object_type,
        'total_count': len(filtered),
        'stats': stats,
        'labels': list(DIMENSION_LABELS),
        **by_gender_keys(rows, 'data'),
    }


def area_distribution_data(records: Sequence[ArtworkRecord], object_type: str = "Painting") -> Dict[str, Any]:
    """Area histogram (cm²) per gender, with within-gender percentages."""
    bins = fixed_bins(AREA_EDGES, AREA_LABELS)
    counts = bin_counts(((r.gender, r.area_cm2) for r in _sized_records(records, object_type)), bins)
    return {
        'object_type': object_type,
        'labels': [b.label for b in bins],
        **by_gender_keys(counts, 'data'),
        **by_gender_keys(bin_percentages(counts), 'percent'),
        'totals': bin_totals(counts),
    }


@register_collector
@dataclass
class DimensionsCollector(MetricCollector):
    """
    Collects size statistics for one object type.

    Statistics collected:
        - Average height, width and area per gender
        - Area histogram per gender
    """
    collector_id: str = "dimensions"
    object_type: str = "Painting"

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect size statistics."""
        return self._run_metrics(records, {
            'dimensions': lambda: dimension_data(records, self.object_type),
            'area_distribution': lambda: area_distribution_data(records, self.object_type),
        }, collector_num, total_collectors)
