"""
Tests for statistics.model module.
"""
from __future__ import annotations

import math
import pytest

from smk_stats.statistics.model import Bin, DistanceStat, GroupedCount, Stats, empty_gender_counts


class TestStats:
    """Tests for Stats class."""

    def test_add_and_get_value(self):
        """Test adding and retrieving values."""
        stats = Stats()

        stats.add_value('collection', 'total', 100)

        assert stats.get_value('collection', 'total') == 100

    def test_get_nonexistent_value(self):
        """Test getting a nonexistent value returns None."""
        stats = Stats()

        assert stats.get_value('collection', 'total') is None

    def test_get_value_with_default(self):
        """Test getting value with default."""
        stats = Stats()

        assert stats.get_value('collection', 'total', 0) == 0

    def test_get_category(self):
        """Test getting all values in a category."""
        stats = Stats()

        stats.add_value('colors', 'color_distribution', {'labels': []})
        stats.add_value('colors', 'color_treemap', {'male': []})

        category = stats.get_category('colors')

        assert len(category) == 2
        assert category['color_treemap'] == {'male': []}

    def test_merge(self):
        """Test merging two Stats objects; later values win."""
        stats1 = Stats()
        stats1.add_value('collection', 'total', 100)
        stats1.add_value('collection', 'object_types', 'old')

        stats2 = Stats()
        stats2.add_value('collection', 'object_types', 'new')
        stats2.add_value('timeline', 'birth_years', [])

        stats1.merge(stats2)

        assert stats1.get_value('collection', 'total') == 100
        assert stats1.get_value('collection', 'object_types') == 'new'
        assert stats1.get_value('timeline', 'birth_years') == []

    def test_to_dict_and_from_dict(self):
        """Test conversion to and from plain dictionaries."""
        stats = Stats()
        stats.add_value('collection', 'total', 5)

        data = stats.to_dict()
        restored = Stats.from_dict(data)

        assert data == {'collection': {'total': 5}}
        assert restored.get_value('collection', 'total') == 5


class TestGroupedCount:
    """Tests for GroupedCount."""

    def test_starts_empty(self):
        """A new group has zero counts for every gender."""
        group = GroupedCount(label='Painting')

        assert group.counts == empty_gender_counts()
        assert group.total == 0

    def test_add_and_total(self):
        """Counts accumulate per gender and total sums them."""
        group = GroupedCount(label='Painting')
        group.add('Male')
        group.add('Female', 2)

        assert group.counts['Male'] == 1
        assert group.counts['Female'] == 2
        assert group.total == 3
        assert group.to_dict() == {'label': 'Painting', 'Male': 1, 'Female': 2, 'Unknown': 0, 'total': 3}

    def test_counts_not_shared(self):
        """Each group gets its own counts dict."""
        a = GroupedCount(label='a')
        b = GroupedCount(label='b')
        a.add('Male')

        assert b.counts['Male'] == 0


class TestBin:
    """Tests for Bin."""

    def test_half_open(self):
        """The lower bound is inclusive, the upper exclusive."""
        b = Bin(min=10, max=25, label='10-25')

        assert b.contains(10)
        assert b.contains(24.9)
        assert not b.contains(25)

    def test_open_last_bin(self):
        """A bin with infinite max contains every larger value."""
        b = Bin(min=500, max=math.inf, label='500+')

        assert b.contains(10 ** 9)


class TestDistanceStat:
    """Tests for DistanceStat."""

    def test_defaults_are_zero(self):
        """The default summary is all zeros."""
        assert DistanceStat().rounded() == {'median': 0, 'q1': 0, 'q3': 0, 'min': 0, 'max': 0, 'avg': 0}

    def test_rounded(self):
        """Values are rounded to whole kilometres."""
        stat = DistanceStat(median=10.4, q1=5.6, q3=20.2, min=1.1, max=30.9, avg=12.5001)

        assert stat.rounded(0) == {'median': 10, 'q1': 6, 'q3': 20, 'min': 1, 'max': 31, 'avg': 13}

    def test_rounded_halves_go_up(self):
        """An exact half rounds up, not to the nearest even number."""
        stat = DistanceStat(median=2.5, q1=0.5, q3=3.5, min=0.5, max=4.5, avg=1026.5)

        assert stat.rounded(0) == {'median': 3, 'q1': 1, 'q3': 4, 'min': 1, 'max': 5, 'avg': 1027}
