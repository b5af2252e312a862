"""
Visibility metrics: exhibitions, works on display and image availability.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from smk_stats.record import ArtworkRecord, GENDERS
from smk_stats.statistics.aggregation import by_gender_keys, gender_percentage, gender_totals
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.model import Stats, empty_gender_counts
from smk_stats.statistics.summary import round_half_up

EXHIBITION_LABELS = ['Total Exhibitions', 'Works Ever Exhibited', 'Avg per Work']


def _exhibition_counts(records: Sequence[ArtworkRecord]):
    total_works = empty_gender_counts()
    total_exhibitions = empty_gender_counts()
    works_exhibited = empty_gender_counts()
    for record in records:
        total_works[record.gender] += 1
        total_exhibitions[record.gender] += record.exhibitions
        if record.exhibitions > 0:
            works_exhibited[record.gender] += 1
    return total_works, total_exhibitions, works_exhibited


def exhibition_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Exhibition totals per gender.

    Each gender row is [total exhibitions, works ever exhibited, average
    exhibitions per work (2 decimals)].
    """
    total_works, total_exhibitions, works_exhibited = _exhibition_counts(records)
    rows = {}
    for gender in GENDERS:
        average = total_exhibitions[gender] / total_works[gender] if total_works[gender] else 0
        rows[gender] = [total_exhibitions[gender], works_exhibited[gender], round_half_up(average, 2)]
    return {
        'labels': list(EXHIBITION_LABELS),
        **by_gender_keys(rows, 'data'),
        'total_works': total_works,
        'works_exhibited': works_exhibited,
        'total_exhibitions': total_exhibitions,
    }


def exhibition_metrics(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """Average exhibitions per work and percentage of works ever exhibited, per gender."""
    total_works, total_exhibitions, works_exhibited = _exhibition_counts(records)
    return {
        'avg_data': {
            'labels': list(GENDERS),
            'values': [total_exhibitions[g] / total_works[g] if total_works[g] else 0 for g in GENDERS],
        },
        'percent_data': {
            'labels': list(GENDERS),
            'values': [gender_percentage(works_exhibited[g], total_works[g]) for g in GENDERS],
        },
        'total_works': total_works,
        'works_exhibited': works_exhibited,
        'total_exhibitions': total_exhibitions,
    }


def _flag_share(records: Sequence[ArtworkRecord], flag: Callable[[ArtworkRecord], bool], positive: str, negative: str) -> Dict[str, Any]:
    """Per-gender share of records where flag holds, with the complement."""
    total = gender_totals(records)
    flagged = gender_totals(records, flag)
    percents = {g: gender_percentage(flagged[g], total[g]) for g in GENDERS}
    return {
        'labels': list(GENDERS),
        f"{positive}_percent": [percents[g] for g in GENDERS],
        f"{negative}_percent": [100 - percents[g] if total[g] else 0 for g in GENDERS],
        positive: flagged,
        'total': total,
        **by_gender_keys({g: [flagged[g], total[g], round_half_up(percents[g], 1)] for g in GENDERS}, 'data'),
    }


def on_display_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Share of works currently on display, per gender.

    Gender rows hold [displayed, total, percent displayed (1 decimal)].
    """
    return _flag_share(records, lambda r: r.on_display, 'displayed', 'not_displayed')


def has_image_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """Share of works with a digitized image, per gender."""
    return _flag_share(records, lambda r: r.has_image, 'with_image', 'without_image')


@register_collector
@dataclass
class ExhibitionsCollector(MetricCollector):
    """
    Collects visibility statistics.

    Statistics collected:
        - Exhibition totals and averages (all works and recent acquisitions)
        - Works on display
        - Image availability
    """
    collector_id: str = "exhibitions"
    recent_start: int = 2000
    recent_end: int = 2025

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect visibility statistics."""
        recent = [
            r for r in records
            if r.acquisition_year is not None and self.recent_start <= r.acquisition_year <= self.recent_end
        ]
        return self._run_metrics(records, {
            'exhibitions': lambda: exhibition_data(records),
            'exhibitions_recent': lambda: exhibition_data(recent),
            'exhibition_metrics': lambda: exhibition_metrics(records),
            'on_display': lambda: on_display_data(records),
            'has_image': lambda: has_image_data(records),
        }, collector_num, total_collectors)
