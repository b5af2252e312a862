"""
Unit tests for temporal metrics.

Covers acquisitions over time, the recent female share trend, acquisition
lag and decade histograms of birth and production years.
"""
import pytest

from smk_stats.statistics.collectors.timeline import (
    TimelineCollector,
    acquisition_lag_data,
    acquisition_lag_distribution,
    birth_year_data,
    creation_year_data,
    female_trend_data,
    gender_distribution_over_time,
)
from smk_stats.statistics.model import Stats


def test_gender_distribution_over_time(sample_records):
    """Years are sorted; records without acquisition year are skipped."""
    data = gender_distribution_over_time(sample_records)

    assert data['years'] == [1920, 1950, 2001, 2005]
    assert data['male_count'] == [1, 0, 1, 0]
    assert data['female_count'] == [0, 1, 0, 1]
    assert data['female_percent'] == [0, 100, 0, 100]


def test_female_trend_data(sample_records):
    """Only acquisition years inside the window are listed."""
    data = female_trend_data(sample_records, start_year=1975, end_year=2025)

    assert data['years'] == [2001, 2005]
    assert data['female_percents'] == [0, 100]
    assert data['collection_average'] == pytest.approx(40)


def test_acquisition_lag_data(sample_records):
    """Lag statistics per gender with whole-year rounding in the rows."""
    data = acquisition_lag_data(sample_records)

    assert data['total_count'] == 4
    assert data['stats']['Male']['lags'] == [20, 96]
    assert data['stats']['Female']['median_lag'] == 91
    assert data['stats']['Male']['recent_count'] == 1
    assert data['male_data'] == [58, 58, 50.0]
    assert data['unknown_data'] == [0, 0, 0]
    assert data['labels'][2] == '% 2000-2025'


def test_acquisition_lag_excludes_acquired_before_production(make_record):
    """Acquisition before production is not a valid lag."""
    records = [make_record('Male', produced=1900, acquired=1890), make_record('Male', produced=1900, acquired=1900)]

    data = acquisition_lag_data(records)

    assert data['total_count'] == 1
    assert data['stats']['Male']['lags'] == [0]


def test_acquisition_lag_rows_round_half_up(make_record):
    """An average or median lag of 2.5 years is shown as 3."""
    records = [make_record('Female', produced=1900, acquired=1902), make_record('Female', produced=1900, acquired=1903)]

    data = acquisition_lag_data(records)

    assert data['stats']['Female']['avg_lag'] == 2.5
    assert data['female_data'][:2] == [3, 3]


def test_acquisition_lag_distribution(sample_records):
    """Lags fall into fixed bins; boundaries go to the upper bin."""
    data = acquisition_lag_distribution(sample_records)

    assert data['labels'] == ['0-10', '10-25', '25-50', '50-100', '100-200', '200-300', '300-500', '500+']
    assert data['male_data'] == [0, 1, 0, 1, 0, 0, 0, 0]
    assert data['female_data'] == [0, 0, 0, 1, 1, 0, 0, 0]
    assert data['totals'] == {'Male': 2, 'Female': 2, 'Unknown': 0}
    assert sum(data['female_percent']) == pytest.approx(100)


def test_birth_year_data(sample_records):
    """Unique artists per birth decade."""
    data = birth_year_data(sample_records)

    assert data['labels'] == ['1850s', '1860s']
    assert data['male_data'] == [0, 1]
    assert data['female_data'] == [1, 1]
    assert data['min_year'] == 1859
    assert data['max_year'] == 1867


def test_birth_year_data_intermediate_decades(make_record):
    """Empty decades between the extremes are listed."""
    records = [make_record('Male', creator=name, birth=year)
               for name, year in [('A', 1600), ('B', 1614), ('C', 1699)]]

    data = birth_year_data(records)

    assert data['labels'][0] == '1600s'
    assert data['labels'][-1] == '1690s'
    assert data['male_data'][data['labels'].index('1620s')] == 0
    assert sum(data['male_data']) == 3


def test_birth_year_data_dedup_key(make_record):
    """Same name and birth year count once; a different birth year counts again."""
    records = [
        make_record('Female', creator='A', birth=1850),
        make_record('Female', creator='A', birth=1850),
        make_record('Female', creator='A', birth=1855),
        make_record('Female', creator='Unknown', birth=1850),
    ]

    data = birth_year_data(records)

    assert data['female_data'] == [2]


def test_creation_year_data(sample_records):
    """Works per production decade including empty decades."""
    data = creation_year_data(sample_records)

    assert data['labels'][0] == '1650s'
    assert data['labels'][-1] == '1900s'
    assert len(data['labels']) == 26
    assert data['unknown_data'][0] == 1
    assert data['male_data'][-1] == 2
    assert data['min_year'] == 1650


def test_year_histograms_empty(make_record):
    """No plausible year gives empty labels."""
    records = [make_record('Male', birth=1200, produced=3000)]

    assert birth_year_data(records)['labels'] == []
    assert creation_year_data(records)['totals'] == {'Male': 0, 'Female': 0, 'Unknown': 0}


def test_timeline_collector(sample_records):
    """The collector honours its year window options."""
    collector = TimelineCollector(trend_start_year=2003)

    stats = collector.collect(sample_records, Stats())

    assert stats.get_value('timeline', 'female_trend')['years'] == [2005]
    assert set(stats.get_category('timeline')) == {
        'gender_over_time', 'female_trend', 'acquisition_lag', 'acquisition_lag_distribution',
        'birth_years', 'creation_years'}
