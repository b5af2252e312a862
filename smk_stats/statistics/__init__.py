"""
Statistics module for gender-partitioned collection analysis.

Every metric is a plain function over a sequence of ArtworkRecord objects;
collectors group related metrics and the pipeline runs them all.

Main components:
    - MetricCollector: Base class for creating custom metric collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - Statistics: Convenience wrapper around the pipeline
    - Built-in collectors: collection, exhibitions, timeline, dimensions,
      geography, colors, artists
"""

from smk_stats.statistics.base import MetricCollector, register_collector, get_collector_registry
from smk_stats.statistics.pipeline import StatisticsPipeline, StatisticsConfig
from smk_stats.statistics.model import Bin, DistanceStat, GroupedCount, Stats, StatValue
from smk_stats.statistics.statistics import Statistics

# Import collectors to ensure they're registered
from smk_stats.statistics import collectors

__all__ = [
    'MetricCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'StatisticsConfig',
    'Statistics',
    'Stats',
    'StatValue',
    'GroupedCount',
    'Bin',
    'DistanceStat',
    'collectors',
]
