"""
Base classes for metric collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
import logging
from typing import Any, Callable, Dict, Optional, Sequence, Type

from smk_stats.record import ArtworkRecord
from smk_stats.statistics.model import Stats, StatValue

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['MetricCollector']] = {}


def register_collector(cls: Type['MetricCollector']) -> Type['MetricCollector']:
    """
    Decorator to register a collector class in the global registry.

    Usage:
        @register_collector
        @dataclass
        class MyCollector(MetricCollector):
            collector_id: str = "my_collector"
            ...
    """
    collector_id = getattr(cls, 'collector_id', None)
    if collector_id:
        _COLLECTOR_REGISTRY[collector_id] = cls
        logger.debug(f"Registered metric collector: {collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} missing 'collector_id' attribute, not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['MetricCollector']]:
    """Get a copy of the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class MetricCollector(ABC):
    """
    Base class for metric collectors.

    A collector runs a related group of metric functions over the records and
    stores each result in the Stats category named by collector_id. Records
    are only read, never modified.

    Subclasses declare their tunable options (top_n, object_type, ...) as
    dataclass fields; the pipeline fills them from configuration.

    Attributes:
        collector_id: Unique identifier, also the Stats category name
        enabled: Whether this collector is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    collector_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    @abstractmethod
    def collect(self, records: Sequence[ArtworkRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """
        Compute this collector's metrics.

        Args:
            records: Sequence of ArtworkRecord objects
            existing_stats: Results of collectors that already ran
            collector_num: Position of this collector in the run (for progress)
            total_collectors: Number of enabled collectors in the run

        Returns:
            Stats object holding this collector's category
        """

    def __post_init__(self):
        """Validate collector configuration."""
        if not self.collector_id:
            raise ValueError(f"{self.__class__.__name__} must define collector_id")

    @classmethod
    def option_names(cls) -> set:
        """Names of the configurable option fields of this collector."""
        base = {f.name for f in fields(MetricCollector)}
        return {f.name for f in fields(cls)} - base

    def _run_metrics(self, records: Sequence[ArtworkRecord], metrics: Dict[str, Callable[[], StatValue]], collector_num: Optional[int], total_collectors: Optional[int]) -> Stats:
        """
        Evaluate named metric thunks into a Stats category.

        Stops early (keeping finished metrics) when the app hooks request it.
        """
        stats = Stats()
        prefix = f"Statistics ({collector_num}/{total_collectors}): " if collector_num and total_collectors else "Statistics: "
        self._report_step(info=f"{prefix}{self.collector_id}", target=len(metrics), reset_counter=True, plus_step=0)
        for name, metric in metrics.items():
            if self._stop_requested(f"{self.collector_id} collection stopped"):
                break
            stats.add_value(self.collector_id, name, metric())
            self._report_step(plus_step=1)
        logger.info(f"{self.collector_id}: {len(stats.get_category(self.collector_id))} metrics over {len(records)} artworks")
        return stats

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """Report a step via app hooks if available.

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
        """Check if stop has been requested via app hooks.

        Returns:
            bool: True if stop requested, False otherwise.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "stop_requested", None)):
            if self.app_hooks.stop_requested():
                if logger_stop_message:
                    logger.debug(logger_stop_message)
                return True
        return False
