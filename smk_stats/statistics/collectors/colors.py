"""
Palette metrics: color family shares, their change per decade and raw hex frequencies.

Every color of an artwork is counted, so a work with five extracted colors
contributes five observations.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from smk_stats.colors import COLOR_FAMILIES, categorize_color, normalize_hex
from smk_stats.record import ArtworkRecord, GENDERS, YEAR_MAX, YEAR_MIN
from smk_stats.statistics.aggregation import by_gender_keys, gender_percentage, gender_totals
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.model import Stats, empty_gender_counts


def _family_counts() -> Dict[str, Counter]:
    return {gender: Counter() for gender in GENDERS}


def _family_percents(counts: Counter) -> List[float]:
    total = sum(counts.values())
    return [gender_percentage(counts[family], total) for family in COLOR_FAMILIES]


def color_distribution_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Color family shares per gender.

    *_data holds within-gender percentages in COLOR_FAMILIES order, *_counts
    the raw color counts.
    """
    with_colors = [r for r in records if r.colors]
    counts = _family_counts()
    for record in with_colors:
        for hex_color in record.colors:
            counts[record.gender][categorize_color(hex_color)] += 1

    return {
        'labels': list(COLOR_FAMILIES),
        **by_gender_keys({g: _family_percents(counts[g]) for g in GENDERS}, 'data'),
        **by_gender_keys({g: [counts[g][f] for f in COLOR_FAMILIES] for g in GENDERS}, 'counts'),
        'totals': {g: sum(counts[g].values()) for g in GENDERS},
        'total_with_colors': len(with_colors),
        'total_artworks': len(records),
    }


def color_timeline_data(records: Sequence[ArtworkRecord], year_min: int = YEAR_MIN, year_max: int = YEAR_MAX) -> Dict[str, Any]:
    """
    Color family shares per production decade and gender.

    Only decades holding at least one colored work with a plausible
    production year are listed. For each gender, *_data maps a family to a
    list of percentages parallel to labels; a decade where the gender has
    no colors gives 0. totals counts artworks, not colors.
    """
    filtered = [
        r for r in records
        if r.colors and r.production_year and year_min <= r.production_year <= year_max
    ]
    if not filtered:
        return {
            'labels': [],
            'color_families': list(COLOR_FAMILIES),
            'male_data': {}, 'female_data': {}, 'unknown_data': {},
            'totals': empty_gender_counts(),
            'total_with_data': 0,
            'total_artworks': len(records),
        }

    decades: Dict[int, Dict[str, Counter]] = {}
    for record in filtered:
        decade = (record.production_year // 10) * 10
        by_gender = decades.setdefault(decade, _family_counts())
        for hex_color in record.colors:
            by_gender[record.gender][categorize_color(hex_color)] += 1

    ordered = sorted(decades)
    series = {gender: {family: [] for family in COLOR_FAMILIES} for gender in GENDERS}
    for decade in ordered:
        for gender in GENDERS:
            for family, percent in zip(COLOR_FAMILIES, _family_percents(decades[decade][gender])):
                series[gender][family].append(percent)

    return {
        'labels': [f"{decade}s" for decade in ordered],
        'color_families': list(COLOR_FAMILIES),
        **by_gender_keys(series, 'data'),
        'totals': gender_totals(filtered),
        'total_with_data': len(filtered),
        'total_artworks': len(records),
    }


def color_treemap_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Raw hex color frequencies per gender, most frequent first.

    Hex codes are upper-cased before counting; ties keep first-seen order.
    """
    counts = _family_counts()
    for record in records:
        for hex_color in record.colors:
            counts[record.gender][normalize_hex(hex_color)] += 1

    return {
        **{
            gender.lower(): [{'hex': hex_code, 'count': count} for hex_code, count in counts[gender].most_common()]
            for gender in GENDERS
        },
        'totals': {g: sum(counts[g].values()) for g in GENDERS},
    }


@register_collector
@dataclass
class ColorsCollector(MetricCollector):
    """
    Collects palette statistics.

    Statistics collected:
        - Color family distribution per gender
        - Color family shares per production decade
        - Hex color frequencies
    """
    collector_id: str = "colors"
    year_min: int = YEAR_MIN
    year_max: int = YEAR_MAX

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect palette statistics."""
        return self._run_metrics(records, {
            'color_distribution': lambda: color_distribution_data(records),
            'color_timeline': lambda: color_timeline_data(records, self.year_min, self.year_max),
            'color_treemap': lambda: color_treemap_data(records),
        }, collector_num, total_collectors)
