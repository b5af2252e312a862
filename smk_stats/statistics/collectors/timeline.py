"""
Temporal metrics: acquisitions over time, acquisition lag and decade
distributions of birth and production years.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from smk_stats.record import ArtworkRecord, FEMALE, GENDERS, YEAR_MAX, YEAR_MIN
from smk_stats.statistics.aggregation import by_gender_keys, gender_percentage, gender_totals, group_by_year
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.binning import (
    bin_counts,
    bin_percentages,
    bin_totals,
    bin_unique_counts,
    decade_bins,
    fixed_bins,
    plausible_years,
)
from smk_stats.statistics.model import Stats, empty_gender_counts
from smk_stats.statistics.summary import min_max, round_half_up, summarize

LAG_EDGES = [0, 10, 25, 50, 100, 200, 300, 500]
LAG_LABELS = ['0-10', '10-25', '25-50', '50-100', '100-200', '200-300', '300-500', '500+']


def gender_distribution_over_time(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Acquisitions per year and gender, with each year's gender split in percent.

    Records without an acquisition year are left out.
    """
    by_year = {g: group_by_year(records, g) for g in GENDERS}
    years = sorted(set().union(*by_year.values()))
    counts = {g: [by_year[g].get(y, 0) for y in years] for g in GENDERS}
    percents = {g: [] for g in GENDERS}
    for i in range(len(years)):
        total = sum(counts[g][i] for g in GENDERS)
        for g in GENDERS:
            percents[g].append(gender_percentage(counts[g][i], total))
    return {
        'years': years,
        **by_gender_keys(percents, 'percent'),
        **by_gender_keys(counts, 'count'),
    }


def female_trend_data(
    records: Sequence[ArtworkRecord],
    all_records: Optional[Sequence[ArtworkRecord]] = None,
    start_year: int = 1975,
    end_year: int = 2025,
) -> Dict[str, Any]:
    """
    Yearly share of works by women among acquisitions in [start_year, end_year].

    Only years with at least one acquisition are listed. collection_average is
    the female share of all_records (defaults to records).
    """
    if all_records is None:
        all_records = records
    yearly: Dict[int, Dict[str, int]] = defaultdict(empty_gender_counts)
    for record in records:
        year = record.acquisition_year
        if year is not None and start_year <= year <= end_year:
            yearly[year][record.gender] += 1

    years = sorted(yearly)
    female_percents = [gender_percentage(yearly[y][FEMALE], sum(yearly[y].values())) for y in years]
    overall = gender_totals(all_records)
    return {
        'years': years,
        'female_percents': female_percents,
        'collection_average': gender_percentage(overall[FEMALE], sum(overall.values())),
    }


def _lag_records(records: Sequence[ArtworkRecord]) -> List[ArtworkRecord]:
    """Records with both years where acquisition is not before production."""
    return [
        r for r in records
        if r.production_year and r.acquisition_year and r.acquisition_year >= r.production_year
    ]


def acquisition_lag_data(records: Sequence[ArtworkRecord], recent_start: int = 2000, recent_end: int = 2025) -> Dict[str, Any]:
    """
    Years between production and acquisition, summarized per gender.

    Gender rows hold [average lag, median lag (whole years), percent
    acquired within [recent_start, recent_end] (1 decimal)].
    """
    filtered = _lag_records(records)
    lags: Dict[str, List[int]] = {g: [] for g in GENDERS}
    recent = empty_gender_counts()
    for record in filtered:
        lags[record.gender].append(record.acquisition_year - record.production_year)
        if recent_start <= record.acquisition_year <= recent_end:
            recent[record.gender] += 1

    stats = {}
    for gender in GENDERS:
        values = sorted(lags[gender])
        summary = summarize(values)
        stats[gender] = {
            'count': summary['count'],
            'avg_lag': summary['mean'],
            'median_lag': summary['median'],
            'min_lag': summary['min'],
            'max_lag': summary['max'],
            'recent_count': recent[gender],
            'recent_percent': gender_percentage(recent[gender], len(values)),
            'lags': values,
        }

    rows = {
        g: [round_half_up(stats[g]['avg_lag']), round_half_up(stats[g]['median_lag']), round_half_up(stats[g]['recent_percent'], 1)]
        for g in GENDERS
    }
    return {
        'total_count': len(filtered),
        'stats': stats,
        'labels': ['Avg Lag (years)', 'Median Lag (years)', f"% {recent_start}-{recent_end}"],
        **by_gender_keys(rows, 'data'),
    }


def acquisition_lag_distribution(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """Acquisition lag histogram per gender, counts and within-gender percentages."""
    bins = fixed_bins(LAG_EDGES, LAG_LABELS)
    counts = bin_counts(
        ((r.gender, r.acquisition_year - r.production_year) for r in _lag_records(records)),
        bins,
    )
    return _histogram_result(bins, counts)


def _histogram_result(bins, counts: Dict[str, List[int]]) -> Dict[str, Any]:
    return {
        'labels': [b.label for b in bins],
        **by_gender_keys(counts, 'data'),
        **by_gender_keys(bin_percentages(counts), 'percent'),
        'totals': bin_totals(counts),
    }


def _empty_year_histogram() -> Dict[str, Any]:
    return {
        'labels': [],
        'male_data': [], 'female_data': [], 'unknown_data': [],
        'male_percent': [], 'female_percent': [], 'unknown_percent': [],
        'totals': empty_gender_counts(),
        'min_year': None,
        'max_year': None,
    }


def birth_year_data(records: Sequence[ArtworkRecord], year_min: int = YEAR_MIN, year_max: int = YEAR_MAX) -> Dict[str, Any]:
    """
    Unique artists per birth decade and gender.

    An artist is identified by (creator name, birth year); works by unknown
    creators are not counted. Every decade between the earliest and latest
    plausible birth year is listed, including empty ones.
    """
    filtered = [r for r in records if r.birth_year and year_min <= r.birth_year <= year_max]
    bins = decade_bins((r.birth_year for r in filtered), year_min, year_max)
    if not bins:
        return _empty_year_histogram()

    def artist_key(record: ArtworkRecord):
        if not record.creator_name or record.creator_name == 'Unknown':
            return None
        return (record.creator_name, record.birth_year)

    counts = bin_unique_counts(((r.gender, r.birth_year, artist_key(r)) for r in filtered), bins)
    min_year, max_year = min_max(r.birth_year for r in filtered)
    return {**_histogram_result(bins, counts), 'min_year': min_year, 'max_year': max_year}


def creation_year_data(records: Sequence[ArtworkRecord], year_min: int = YEAR_MIN, year_max: int = YEAR_MAX) -> Dict[str, Any]:
    """Artworks per production decade and gender (plausible years only)."""
    years = plausible_years((r.production_year for r in records), year_min, year_max)
    bins = decade_bins(years, year_min, year_max)
    if not bins:
        return _empty_year_histogram()
    counts = bin_counts(
        ((r.gender, r.production_year) for r in records
         if r.production_year and year_min <= r.production_year <= year_max),
        bins,
    )
    min_year, max_year = min_max(years)
    return {**_histogram_result(bins, counts), 'min_year': min_year, 'max_year': max_year}


@register_collector
@dataclass
class TimelineCollector(MetricCollector):
    """
    Collects temporal statistics.

    Statistics collected:
        - Gender split of acquisitions per year
        - Female share trend of recent acquisitions
        - Acquisition lag summary and histogram
        - Unique artists per birth decade
        - Artworks per production decade
    """
    collector_id: str = "timeline"
    year_min: int = YEAR_MIN
    year_max: int = YEAR_MAX
    recent_start: int = 2000
    recent_end: int = 2025
    trend_start_year: int = 1975

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect temporal statistics."""
        return self._run_metrics(records, {
            'gender_over_time': lambda: gender_distribution_over_time(records),
            'female_trend': lambda: female_trend_data(records, records, self.trend_start_year, self.recent_end),
            'acquisition_lag': lambda: acquisition_lag_data(records, self.recent_start, self.recent_end),
            'acquisition_lag_distribution': lambda: acquisition_lag_distribution(records),
            'birth_years': lambda: birth_year_data(records, self.year_min, self.year_max),
            'creation_years': lambda: creation_year_data(records, self.year_min, self.year_max),
        }, collector_num, total_collectors)
