from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

from smk_stats.record import ArtworkRecord, records_from_dicts
from smk_stats.app_hooks import AppHooks
from .pipeline import StatisticsConfig, StatisticsPipeline
from .model import Stats

logger = logging.getLogger(__name__)


class Statistics:
    """
    High-level interface for collecting statistics from artwork records.

    This is a convenience wrapper around StatisticsPipeline that provides
    a simpler API for common use cases.

    Example:
        stats = Statistics(records=records)
        results = stats.results  # Get Stats object

        # Only some collectors, with options
        stats = Statistics(records=records, config_dict={
            'collectors': {'geography': False},
            'options': {'top_n': 10},
        })
    """

    def __init__(
        self,
        records: Optional[Iterable[Any]] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize statistics collection.

        Args:
            records: Optional iterable of ArtworkRecord objects or normalized dicts
            config_dict: Dictionary to configure collectors (e.g., {'collectors': {'colors': False}})
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting
        """
        self.app_hooks = app_hooks

        self.records: List[ArtworkRecord] = records_from_dicts(records) if records is not None else []
        if not self.records:
            logger.warning("No artwork records provided to Statistics")

        # Create configuration
        if config_dict:
            self.config = StatisticsConfig.from_dict(config_dict)
        elif config_file:
            self.config = StatisticsConfig(config_file=config_file)
        else:
            self.config = StatisticsConfig.default()

        self.pipeline = StatisticsPipeline(config=self.config, app_hooks=app_hooks)

        # Run analysis automatically
        self._results: Optional[Stats] = None
        if self.records:
            self._results = self._analyze()

    def _analyze(self) -> Stats:
        """
        Run statistics collection on the records.

        Returns:
            Stats object with collected statistics
        """
        logger.info(f"Collecting statistics on {len(self.records)} artworks")
        return self.pipeline.run(self.records)

    @property
    def results(self) -> Optional[Stats]:
        """Get the statistics results."""
        return self._results

    def analyze(self, records: Optional[Iterable[Any]] = None) -> Stats:
        """
        Analyze the given records.

        Args:
            records: Optional iterable of records. If None, uses self.records.

        Returns:
            Stats object with collected statistics
        """
        if records is not None:
            self.records = records_from_dicts(records)

        self._results = self._analyze()
        return self._results

    def get_value(self, category: str, name: str, default=None):
        """
        Convenience method to get a specific metric result.

        Args:
            category: Category name (e.g., 'collection', 'colors')
            name: Metric name (e.g., 'gender_summary')
            default: Default value if not found

        Returns:
            The metric result or default
        """
        if self._results:
            return self._results.get_value(category, name, default)
        return default

    def get_category(self, category: str) -> Dict[str, Any]:
        """
        Get all metric results in a category.

        Args:
            category: Category name (e.g., 'timeline')

        Returns:
            Dictionary of metric names to results
        """
        if self._results:
            return self._results.get_category(category)
        return {}

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """
        Export all statistics as a dictionary.

        Returns:
            Dictionary of categories to metric results
        """
        if self._results:
            return self._results.to_dict()
        return {}
