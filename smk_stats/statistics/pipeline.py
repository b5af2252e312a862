"""
Pipeline for running metric collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import yaml

from smk_stats.record import ArtworkRecord, records_from_dicts
from smk_stats.statistics.base import MetricCollector, get_collector_registry
from smk_stats.statistics.model import Stats

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"


@dataclass
class StatisticsConfig:
    """
    Configuration for a statistics run.

    Attributes:
        collectors: Dict of collector_id -> enabled status
        statistics_options: Option name -> value, applied to every collector
            that declares an option field of that name (e.g. top_n, object_type)
        config_file: Path to YAML config file (optional)
    """
    collectors: Dict[str, bool] = field(default_factory=dict)
    statistics_options: Dict[str, Any] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists."""
        if self.config_file:
            if Path(self.config_file).exists():
                self._load_from_file()
            else:
                logger.warning(f"Statistics config file not found: {self.config_file}")

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section: 'collectors' holds enable/disable
        settings and 'options' holds collector options. Values given to the
        constructor take precedence over the file.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")
            return

        statistics_config = data.get('statistics') or {}
        if not isinstance(statistics_config, dict):
            logger.warning(f"Ignoring malformed 'statistics' section in {self.config_file}")
            return

        collectors_config = statistics_config.get('collectors') or {}
        for collector_id, settings in collectors_config.items():
            if collector_id in self.collectors:
                continue
            if isinstance(settings, dict):
                self.collectors[collector_id] = bool(settings.get('enabled', True))
            elif isinstance(settings, bool):
                self.collectors[collector_id] = settings

        options = statistics_config.get('options') or {}
        if isinstance(options, dict):
            for name, value in options.items():
                self.statistics_options.setdefault(name, value)

        logger.info(f"Loaded statistics config from {self.config_file}")

    def is_enabled(self, collector_id: str) -> bool:
        """
        Check if a collector is enabled.

        Args:
            collector_id: Identifier of the collector to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.collectors.get(collector_id, True)

    def options_for(self, collector_cls: type) -> Dict[str, Any]:
        """Subset of statistics_options that the collector class accepts."""
        accepted = collector_cls.option_names() if hasattr(collector_cls, 'option_names') else set()
        return {k: v for k, v in self.statistics_options.items() if k in accepted}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatisticsConfig:
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary with optional 'collectors' (collector_id -> enabled)
                and 'options' (option name -> value) keys

        Returns:
            StatisticsConfig instance
        """
        return cls(
            collectors=dict(data.get('collectors') or {}),
            statistics_options=dict(data.get('options') or {}),
        )

    @classmethod
    def default(cls) -> StatisticsConfig:
        """Configuration loaded from the packaged config.yaml."""
        return cls(config_file=DEFAULT_CONFIG_FILE)


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running metric collectors on a record collection.

    Attributes:
        collectors: List of collector instances to run
        config: Configuration for the pipeline
        app_hooks: Optional application hooks for progress reporting
    """
    collectors: List[MetricCollector] = field(default_factory=list)
    config: StatisticsConfig = field(default_factory=StatisticsConfig)
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """
        Initialize collectors from registry if none provided.
        """
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Instantiate every registered collector with configuration applied.

        The enabled flag comes from config.collectors and option fields from
        config.statistics_options.
        """
        registry = get_collector_registry()
        for collector_id, collector_cls in registry.items():
            enabled = self.config.is_enabled(collector_id)
            options = self.config.options_for(collector_cls)
            try:
                collector = collector_cls(enabled=enabled, app_hooks=self.app_hooks, **options)
            except (TypeError, ValueError) as e:
                logger.error(f"Failed to load collector {collector_id}: {e}")
                continue
            self.collectors.append(collector)
            logger.debug(f"Loaded collector: {collector_id} (enabled={enabled}, options={options})")

    def run(self, records: Iterable[Any]) -> Stats:
        """
        Run all enabled collectors on the records.

        Args:
            records: Iterable of ArtworkRecord objects or normalized dicts

        Returns:
            Stats object with one category per collector that ran
        """
        stats = Stats()

        # One materialized pass shared by every collector
        record_list: List[ArtworkRecord] = records_from_dicts(records)

        logger.debug(f"Running statistics on {len(record_list)} artworks")

        enabled_collectors = [c for c in self.collectors if c.enabled]
        total_collectors = len(enabled_collectors)
        self._report_step(info="Collecting statistics", target=total_collectors, reset_counter=True, plus_step=0)

        for collector_num, collector in enumerate(enabled_collectors, start=1):
            if self._stop_requested("Statistics collection stopped by user"):
                logger.info(f"Statistics stopped after {collector_num - 1} collectors")
                return stats

            try:
                logger.debug(f"Running collector: {collector.collector_id}")
                collector_stats = collector.collect(record_list, stats, collector_num, total_collectors)
                stats.merge(collector_stats)
                self._report_step(plus_step=1)
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)

        return stats

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.debug(info)

    def _stop_requested(self, logger_stop_message: str = "Stop requested by user") -> bool:
        """
        Check if stop has been requested via app hooks. (Private method)

        Returns:
            bool: True if stop requested, False otherwise.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "stop_requested", None)):
            if self.app_hooks.stop_requested():
                if logger_stop_message:
                    logger.info(logger_stop_message)
                return True
        return False
