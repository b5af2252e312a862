"""
Unit tests for visibility metrics.
"""
import pytest

from smk_stats.statistics.collectors.exhibitions import (
    ExhibitionsCollector,
    exhibition_data,
    exhibition_metrics,
    has_image_data,
    on_display_data,
)
from smk_stats.statistics.model import Stats


def test_exhibition_data(sample_records):
    """Rows hold total exhibitions, works exhibited and the average."""
    data = exhibition_data(sample_records)

    assert data['labels'] == ['Total Exhibitions', 'Works Ever Exhibited', 'Avg per Work']
    assert data['male_data'] == [4, 2, 2.0]
    assert data['female_data'] == [2, 1, 1.0]
    assert data['unknown_data'] == [0, 0, 0]
    assert data['total_works'] == {'Male': 2, 'Female': 2, 'Unknown': 1}


def test_exhibition_metrics(sample_records):
    """Average per work and percent exhibited per gender."""
    data = exhibition_metrics(sample_records)

    assert data['avg_data']['labels'] == ['Male', 'Female', 'Unknown']
    assert data['avg_data']['values'] == [2, 1, 0]
    assert data['percent_data']['values'] == [100, 50, 0]


def test_on_display_data(sample_records):
    """Displayed and complement percentages; empty genders give 0."""
    data = on_display_data(sample_records)

    assert data['displayed_percent'] == [50, 50, 0]
    assert data['not_displayed_percent'] == [50, 50, 100]
    assert data['displayed'] == {'Male': 1, 'Female': 1, 'Unknown': 0}
    assert data['male_data'] == [1, 2, 50.0]


def test_flag_share_empty_gender(make_record):
    """A gender without works gets zero on both sides."""
    data = has_image_data([make_record('Male', has_image=True)])

    assert data['with_image_percent'] == [100, 0, 0]
    assert data['without_image_percent'] == [0, 0, 0]


def test_exhibitions_collector_recent_window(sample_records):
    """Recent exhibitions only consider acquisitions in the window."""
    stats = ExhibitionsCollector().collect(sample_records, Stats())

    recent = stats.get_value('exhibitions', 'exhibitions_recent')
    assert recent['male_data'] == [1, 1, 1.0]
    assert recent['female_data'] == [2, 1, 2.0]
    assert recent['total_works'] == {'Male': 1, 'Female': 1, 'Unknown': 0}
