"""
Depicted-place metrics: where artworks show, and how far that is from the museum.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from smk_stats.geodesic import COPENHAGEN, haversine_km
from smk_stats.record import ArtworkRecord, GENDERS
from smk_stats.statistics.aggregation import by_gender_keys
from smk_stats.statistics.base import MetricCollector, register_collector
from smk_stats.statistics.binning import bin_counts, bin_percentages, bin_totals, fixed_bins
from smk_stats.statistics.model import Stats, empty_gender_counts
from smk_stats.statistics.summary import distance_stats

logger = logging.getLogger(__name__)

DISTANCE_EDGES = [0, 50, 200, 500, 1000, 2000]
DISTANCE_LABELS = ['0-50 km', '50-200 km', '200-500 km', '500-1000 km', '1000-2000 km', '2000+ km']


def location_key(latitude: float, longitude: float) -> str:
    """Coordinates rounded to 4 decimals; locations sharing a key are merged."""
    return f"{latitude:.4f},{longitude:.4f}"


def _aggregate_locations(records: Sequence[ArtworkRecord], reference: Tuple[float, float]) -> List[Dict[str, Any]]:
    """
    Depicted locations with per-gender occurrence counts, first-seen order.

    The name and coordinates of the first occurrence of a key are kept.
    """
    locations: Dict[str, Dict[str, Any]] = {}
    for record in records:
        for loc in record.geo_locations:
            key = location_key(loc.latitude, loc.longitude)
            entry = locations.get(key)
            if entry is None:
                entry = locations[key] = {
                    'name': loc.name,
                    'latitude': loc.latitude,
                    'longitude': loc.longitude,
                    'distance': haversine_km(reference[0], reference[1], loc.latitude, loc.longitude),
                    **empty_gender_counts(),
                }
            entry[record.gender] += 1
    return list(locations.values())


def depicted_location_data(records: Sequence[ArtworkRecord], reference: Tuple[float, float] = COPENHAGEN) -> Dict[str, Any]:
    """
    Depicted locations and their distance from a reference point, per gender.

    Each location is counted once per record that depicts it. Distance
    statistics weight every location by its occurrence count; median and
    quartiles use nearest rank and all values are rounded to whole km.

    Args:
        records: Artwork records.
        reference: (latitude, longitude) the distances are measured from.

    Returns:
        Dict with per-gender location lists, distance histogram (counts and
        within-gender percentages), totals and per-gender distance stats.
    """
    locations = _aggregate_locations(records, reference)

    per_gender = {
        gender: [{**loc, 'count': loc[gender]} for loc in locations if loc[gender] > 0]
        for gender in GENDERS
    }

    bins = fixed_bins(DISTANCE_EDGES, DISTANCE_LABELS)
    distribution = bin_counts(
        ((gender, loc['distance'], loc[gender]) for loc in locations for gender in GENDERS),
        bins,
    )

    distances = {
        gender: distance_stats((loc['distance'], loc['count']) for loc in per_gender[gender]).rounded(0)
        for gender in GENDERS
    }

    with_location = sum(1 for r in records if r.geo_locations)
    logger.debug(f"{len(locations)} distinct depicted locations in {with_location} artworks")
    return {
        **by_gender_keys(per_gender, 'locations'),
        'all_locations': locations,
        'distance_bins': [b.label for b in bins],
        'distance_distribution': distribution,
        **by_gender_keys(bin_percentages(distribution), 'percents'),
        'totals': bin_totals(distribution),
        **by_gender_keys(distances, 'stats'),
        'artworks_with_location': with_location,
        'total_artworks': len(records),
    }


@register_collector
@dataclass
class GeographyCollector(MetricCollector):
    """
    Collects depicted-location statistics.

    Statistics collected:
        - Locations per gender
        - Distance histogram and distance summary from the reference point
    """
    collector_id: str = "geography"
    reference_latitude: float = COPENHAGEN[0]
    reference_longitude: float = COPENHAGEN[1]

    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect depicted-location statistics."""
        reference = (self.reference_latitude, self.reference_longitude)
        return self._run_metrics(records, {
            'depicted_locations': lambda: depicted_location_data(records, reference),
        }, collector_num, total_collectors)
