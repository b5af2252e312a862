"""
Built-in metric collectors.

Import collectors here to automatically register them.
"""

from smk_stats.statistics.collectors.collection import CollectionCollector
from smk_stats.statistics.collectors.exhibitions import ExhibitionsCollector
from smk_stats.statistics.collectors.timeline import TimelineCollector
from smk_stats.statistics.collectors.dimensions import DimensionsCollector
from smk_stats.statistics.collectors.geography import GeographyCollector
from smk_stats.statistics.collectors.colors import ColorsCollector
from smk_stats.statistics.collectors.artists import ArtistsCollector

__all__ = [
    'CollectionCollector',
    'ExhibitionsCollector',
    'TimelineCollector',
    'DimensionsCollector',
    'GeographyCollector',
    'ColorsCollector',
    'ArtistsCollector',
]
