"""smk_stats package: gender-partitioned analytics over SMK artwork records."""

from smk_stats.app_hooks import AppHooks
from smk_stats.colors import COLOR_FAMILIES, categorize_color, hex_to_hsl
from smk_stats.geodesic import COPENHAGEN, haversine_km
from smk_stats.record import (
    ArtworkRecord,
    DepictedPerson,
    Dimensions,
    GeoLocation,
    normalize_gender,
    records_from_dicts,
)
from smk_stats.statistics import Statistics, StatisticsConfig, StatisticsPipeline, Stats

__all__ = [
    "AppHooks",
    "ArtworkRecord",
    "COLOR_FAMILIES",
    "COPENHAGEN",
    "DepictedPerson",
    "Dimensions",
    "GeoLocation",
    "Statistics",
    "StatisticsConfig",
    "StatisticsPipeline",
    "Stats",
    "categorize_color",
    "haversine_km",
    "hex_to_hsl",
    "normalize_gender",
    "records_from_dicts",
]
