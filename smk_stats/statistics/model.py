"""
Data models for the statistics package.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from smk_stats.record import GENDERS


StatValue = Union[int, float, str, List[Any], Dict[str, Any]]


def empty_gender_counts() -> Dict[str, int]:
    """Fresh {'Male': 0, 'Female': 0, 'Unknown': 0} accumulator."""
    return {gender: 0 for gender in GENDERS}


@dataclass
class GroupedCount:
    """
    Per-gender counts for one category value (e.g. one object type).

    Attributes:
        label: Category value.
        counts: Gender -> count.
    """
    label: Any
    counts: Dict[str, int] = field(default_factory=empty_gender_counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def add(self, gender: str, amount: int = 1) -> None:
        self.counts[gender] = self.counts.get(gender, 0) + amount

    def to_dict(self) -> Dict[str, Any]:
        return {'label': self.label, **self.counts, 'total': self.total}


@dataclass(frozen=True)
class Bin:
    """
    Half-open histogram bin [min, max).

    The last bin of a fixed set normally uses max=math.inf.
    """
    min: float
    max: float
    label: str

    def contains(self, value: float) -> bool:
        return self.min <= value < self.max


@dataclass(frozen=True)
class DistanceStat:
    """Distribution summary of distances in kilometres."""
    median: float = 0.0
    q1: float = 0.0
    q3: float = 0.0
    min: float = 0.0
    max: float = 0.0
    avg: float = 0.0

    def rounded(self, ndigits: int = 0) -> Dict[str, float]:
        """Values rounded half up for display."""
        from smk_stats.statistics.summary import round_half_up
        return {
            'median': round_half_up(self.median, ndigits),
            'q1': round_half_up(self.q1, ndigits),
            'q3': round_half_up(self.q3, ndigits),
            'min': round_half_up(self.min, ndigits),
            'max': round_half_up(self.max, ndigits),
            'avg': round_half_up(self.avg, ndigits),
        }


@dataclass
class Stats:
    """
    Container for metric results produced by collectors.

    Results are organized by category (one per collector, e.g. 'collection',
    'colors') with one named metric result within each category.
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        """Store a metric result under a category."""
        self.categories.setdefault(category, {})[name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        """Get a metric result from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        """Get all metric results in a category."""
        return self.categories.get(category, {})

    def merge(self, other: Stats) -> None:
        """Merge another Stats object into this one; later values win."""
        for category, values in other.categories.items():
            self.categories.setdefault(category, {}).update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        """Convert to a plain dictionary."""
        return {category: dict(values) for category, values in self.categories.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, StatValue]]) -> Stats:
        """Create from a plain dictionary."""
        return cls(categories={category: dict(values) for category, values in data.items()})
