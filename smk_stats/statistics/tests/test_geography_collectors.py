"""
Unit tests for depicted-location metrics.
"""
import pytest

from smk_stats.geodesic import haversine_km
from smk_stats.statistics.collectors.geography import (
    GeographyCollector,
    depicted_location_data,
    location_key,
)
from smk_stats.record import ArtworkRecord
from smk_stats.statistics.model import Stats


def test_location_key():
    """Keys use four decimals."""
    assert location_key(55.67614, 12.5683) == '55.6761,12.5683'


def test_depicted_location_data(sample_records):
    """Locations are binned by distance from Copenhagen."""
    data = depicted_location_data(sample_records)

    assert data['distance_bins'] == ['0-50 km', '50-200 km', '200-500 km', '500-1000 km', '1000-2000 km', '2000+ km']
    assert data['distance_distribution']['Male'] == [1, 0, 0, 0, 1, 0]
    assert data['distance_distribution']['Female'] == [0, 0, 1, 0, 0, 0]
    assert data['male_percents'] == [50, 0, 0, 0, 50, 0]
    assert data['totals'] == {'Male': 2, 'Female': 1, 'Unknown': 0}
    assert data['artworks_with_location'] == 3
    assert data['total_artworks'] == 5
    assert [loc['name'] for loc in data['male_locations']] == ['Copenhagen', 'Paris']
    assert len(data['all_locations']) == 3


def test_distance_stats_weighted(make_record):
    """Median and quartiles weight each location by its occurrence count."""
    paris = ('Paris', 48.8566, 2.3522)
    home = ('Copenhagen', 55.6761, 12.5683)
    records = [make_record('Female', places=[home]) for _ in range(3)] + [make_record('Female', places=[paris])]

    data = depicted_location_data(records)

    stats = data['female_stats']
    paris_km = round(haversine_km(55.6761, 12.5683, 48.8566, 2.3522))
    assert stats['min'] == 0
    assert stats['q1'] == 0
    assert stats['median'] == 0
    assert stats['q3'] == paris_km
    assert stats['max'] == paris_km
    assert stats['avg'] == round(haversine_km(55.6761, 12.5683, 48.8566, 2.3522) / 4)
    assert data['unknown_stats'] == {'median': 0, 'q1': 0, 'q3': 0, 'min': 0, 'max': 0, 'avg': 0}


def test_same_coordinates_merged(make_record):
    """Locations with the same rounded coordinates merge; the first name is kept."""
    records = [
        make_record('Male', places=[('Kbh', 55.67610, 12.56830)]),
        make_record('Female', places=[('Copenhagen', 55.676101, 12.568301)]),
    ]

    data = depicted_location_data(records)

    assert len(data['all_locations']) == 1
    location = data['all_locations'][0]
    assert location['name'] == 'Kbh'
    assert (location['Male'], location['Female']) == (1, 1)
    assert data['female_locations'][0]['count'] == 1


def test_geography_collector_reference(make_record):
    """Distances are measured from the configured reference point."""
    records = [make_record('Male', places=[('Paris', 48.8566, 2.3522)])]

    stats = GeographyCollector(reference_latitude=48.8566, reference_longitude=2.3522).collect(records, Stats())

    data = stats.get_value('geography', 'depicted_locations')
    assert data['distance_distribution']['Male'][0] == 1


def test_non_finite_coordinates_excluded():
    """Locations with inf or nan coordinates never reach the distance statistics."""
    record = ArtworkRecord.from_dict({
        'gender': 'male',
        'geoLocations': [
            {'name': 'x', 'latitude': 'inf', 'longitude': 0},
            {'name': 'y', 'latitude': 'nan', 'longitude': 'nan'},
        ],
    })

    data = depicted_location_data([record])

    assert data['all_locations'] == []
    assert data['artworks_with_location'] == 0
    assert data['male_stats'] == {'median': 0, 'q1': 0, 'q3': 0, 'min': 0, 'max': 0, 'avg': 0}


def test_antipodal_location(make_record):
    """A location on the far side of the globe from the reference point is still measured."""
    records = [make_record('Female', places=[('Antipode', 43.5577, -57.6554)])]

    stats = GeographyCollector(reference_latitude=-43.5577, reference_longitude=122.3446).collect(records, Stats())

    data = stats.get_value('geography', 'depicted_locations')
    assert data['distance_distribution']['Female'][-1] == 1
    assert data['female_stats']['max'] == pytest.approx(20015, abs=1)
