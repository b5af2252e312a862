"""
Tests for statistics.aggregation module.
"""
from __future__ import annotations

import pytest

from smk_stats.statistics.aggregation import (
    by_gender_keys,
    gender_percentage,
    gender_totals,
    group_by_year,
    group_count,
    row_percentages,
    to_series,
    unique_group_count,
)


class TestGroupCount:
    """Tests for group_count."""

    def test_counts_sum_to_matching_records(self, make_record):
        """Summed per-gender counts equal the records with a value."""
        records = [
            make_record('Male', object_type='Painting'),
            make_record('Female', object_type='Painting'),
            make_record('Female', object_type='Drawing'),
            make_record('Unknown'),
        ]

        groups = group_count(records, lambda r: r.object_type)

        assert sum(g.total for g in groups) == 3
        assert [g.label for g in groups] == ['Painting', 'Drawing']
        assert groups[0].counts == {'Male': 1, 'Female': 1, 'Unknown': 0}

    def test_multi_valued_attribute(self, make_record):
        """A record with several values counts once per value."""
        records = [make_record('Female', techniques=['oil', 'pastel'])]

        groups = group_count(records, lambda r: r.techniques)

        assert {g.label: g.total for g in groups} == {'oil': 1, 'pastel': 1}

    def test_ties_keep_first_seen_order(self, make_record):
        """Groups with equal totals stay in first-seen order."""
        records = [make_record('Male', object_type=t) for t in ['b', 'a', 'c', 'a']]

        groups = group_count(records, lambda r: r.object_type)

        assert [g.label for g in groups] == ['a', 'b', 'c']

    def test_top_n(self, make_record):
        """top_n keeps only the largest groups."""
        records = [make_record('Male', object_type=t) for t in ['x', 'x', 'y', 'z']]

        groups = group_count(records, lambda r: r.object_type, top_n=1)

        assert [g.label for g in groups] == ['x']

    def test_empty(self):
        """No records gives no groups."""
        assert group_count([], lambda r: r.object_type) == []


class TestUniqueGroupCount:
    """Tests for unique_group_count."""

    def test_same_identity_counts_once(self, make_record):
        """Two works by the same artist count as one artist."""
        records = [
            make_record('Male', creator='A', nationality='Danish'),
            make_record('Male', creator='A', nationality='Danish'),
            make_record('Female', creator='B', nationality='Danish'),
        ]

        groups = unique_group_count(records, lambda r: r.nationality, lambda r: r.creator_name)

        assert groups[0].counts == {'Male': 1, 'Female': 1, 'Unknown': 0}

    def test_different_dedup_key_counts_twice(self, make_record):
        """A differing dedup key (e.g. birth year) counts separately."""
        records = [
            make_record('Male', creator='A', birth=1850, nationality='Danish'),
            make_record('Male', creator='A', birth=1851, nationality='Danish'),
        ]

        groups = unique_group_count(records, lambda r: r.nationality, lambda r: (r.creator_name, r.birth_year))

        assert groups[0].counts['Male'] == 2

    def test_unknown_identity_skipped(self, make_record):
        """Records with no or 'Unknown' identity are ignored."""
        records = [
            make_record('Unknown', creator='Unknown', nationality='Dutch'),
            make_record('Unknown', creator=None, nationality='Dutch'),
        ]

        assert unique_group_count(records, lambda r: r.nationality, lambda r: r.creator_name) == []


class TestHelpers:
    """Tests for percentage and series helpers."""

    def test_gender_percentage_zero_total(self):
        """Division by zero yields 0."""
        assert gender_percentage(3, 0) == 0
        assert gender_percentage(1, 4) == 25

    def test_gender_totals_with_predicate(self, make_record):
        """Predicate filters records before counting."""
        records = [make_record('Male', on_display=True), make_record('Male'), make_record('Female', on_display=True)]

        assert gender_totals(records) == {'Male': 2, 'Female': 1, 'Unknown': 0}
        assert gender_totals(records, lambda r: r.on_display) == {'Male': 1, 'Female': 1, 'Unknown': 0}

    def test_by_gender_keys(self):
        """Gender keys become lower-case prefixed keys."""
        assert by_gender_keys({'Male': 1, 'Female': 2, 'Unknown': 3}, 'total') == {
            'male_total': 1, 'female_total': 2, 'unknown_total': 3}

    def test_series_and_row_percentages(self, make_record):
        """Each label's shares sum to 100."""
        records = [make_record('Male', object_type='P'), make_record('Female', object_type='P'),
                   make_record('Female', object_type='P'), make_record('Unknown', object_type='D')]

        series = to_series(group_count(records, lambda r: r.object_type))
        shares = row_percentages(series)

        assert series['labels'] == ['P', 'D']
        assert series['female_data'] == [2, 0]
        for i in range(len(shares['labels'])):
            total = shares['male_data'][i] + shares['female_data'][i] + shares['unknown_data'][i]
            assert total == pytest.approx(100)

    def test_group_by_year(self, make_record):
        """Acquisitions per year for one gender."""
        records = [make_record('Female', acquired=2001), make_record('Female', acquired=2001),
                   make_record('Female'), make_record('Male', acquired=2001)]

        assert group_by_year(records, 'Female') == {2001: 2}
