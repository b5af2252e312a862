"""
Artist-level metrics: most prolific artists and who depicts whom.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from smk_stats.record import ArtworkRecord, FEMALE, GENDERS, MALE, UNKNOWN, YEAR_MAX, YEAR_MIN
from smk_stats.statistics.aggregation import by_gender_keys, gender_percentage
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.model import Stats, empty_gender_counts
from smk_stats.statistics.ranking import aggregate_artists, filter_by_gender, scatter_subset, top_n
from smk_stats.statistics.summary import median, round_half_up


def artist_data(
    records: Sequence[ArtworkRecord],
    top_k: int = 10,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
    min_scatter_artworks: int = 2,
) -> Dict[str, Any]:
    """
    Artists ranked by artwork count, split by gender.

    Args:
        records: Artwork records.
        top_k: Length of the per-gender top lists.
        year_min, year_max: Birth year range for the scatter subset.
        min_scatter_artworks: Minimum artwork count for the scatter subset.

    Returns:
        Dict of artist lists (as dicts) and summary stats. avg_works_per_artist
        divides attributed artworks by artists (1 decimal).
    """
    artists = aggregate_artists(records)
    by_gender = {gender: filter_by_gender(artists, gender) for gender in GENDERS}
    attributed = sum(a.artwork_count for a in artists)

    def dicts(items):
        return [a.to_dict() for a in items]

    return {
        'all_artists': dicts(artists),
        **by_gender_keys({g: dicts(by_gender[g]) for g in GENDERS}, 'artists'),
        'top_male': dicts(top_n(by_gender[MALE], top_k)),
        'top_female': dicts(top_n(by_gender[FEMALE], top_k)),
        'top_unknown': dicts(top_n(by_gender[UNKNOWN], top_k)),
        'scatter_data': dicts(scatter_subset(artists, year_min, year_max, min_scatter_artworks)),
        'stats': {
            'total_artists': len(artists),
            **by_gender_keys({g: len(by_gender[g]) for g in GENDERS}, 'artist_count'),
            'avg_works_per_artist': round_half_up(attributed / len(artists), 1) if artists else 0,
            'median_male_works': median(a.artwork_count for a in by_gender[MALE]),
            'median_female_works': median(a.artwork_count for a in by_gender[FEMALE]),
        },
    }


def creator_depicted_gender_data(records: Sequence[ArtworkRecord]) -> Dict[str, Any]:
    """
    Creator gender -> depicted person gender combinations.

    Every depicted person counts once. percentages[creator][depicted] is the
    share within that creator gender's depicted persons. The
    *_depicted_percent / *_depicted_count arrays are indexed by creator
    gender (Male, Female, Unknown).
    """
    with_depictions = [r for r in records if r.depicted_persons]
    combinations = {gender: empty_gender_counts() for gender in GENDERS}
    creator_counts = empty_gender_counts()
    for record in with_depictions:
        creator_counts[record.gender] += 1
        for person in record.depicted_persons:
            combinations[record.gender][person.gender] += 1

    percentages = {}
    for creator in GENDERS:
        total = sum(combinations[creator].values())
        percentages[creator] = {depicted: gender_percentage(combinations[creator][depicted], total) for depicted in GENDERS}

    return {
        'total_artworks': len(records),
        'artworks_with_depictions': len(with_depictions),
        'coverage_percent': round_half_up(gender_percentage(len(with_depictions), len(records)), 1),
        'creator_counts': creator_counts,
        'combinations': combinations,
        'percentages': percentages,
        'labels': [f"{creator} creators" for creator in GENDERS],
        **by_gender_keys({d: [percentages[c][d] for c in GENDERS] for d in GENDERS}, 'depicted_percent'),
        **by_gender_keys({d: [combinations[c][d] for c in GENDERS] for d in GENDERS}, 'depicted_count'),
    }


@register_collector
@dataclass
class ArtistsCollector(MetricCollector):
    """
    Collects artist-level statistics.

    Statistics collected:
        - Artist rankings, top lists and scatter subset
        - Creator gender vs. depicted person gender
    """
    collector_id: str = "artists"
    top_k: int = 10
    year_min: int = YEAR_MIN
    year_max: int = YEAR_MAX
    min_scatter_artworks: int = 2

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect artist-level statistics."""
        return self._run_metrics(records, {
            'artists': lambda: artist_data(records, self.top_k, self.year_min, self.year_max, self.min_scatter_artworks),
            'creator_depicted_gender': lambda: creator_depicted_gender_data(records),
        }, collector_num, total_collectors)
