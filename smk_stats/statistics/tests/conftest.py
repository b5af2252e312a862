"""
Pytest fixtures for statistics tests.
"""
from __future__ import annotations

import pytest
from typing import List, Optional, Sequence, Tuple

from smk_stats.record import ArtworkRecord, DepictedPerson, Dimensions, GeoLocation


@pytest.fixture
def make_record():
    """Create ArtworkRecord objects with short keyword arguments."""
    def _create_record(gender: str = 'Unknown',
                       creator: Optional[str] = None,
                       object_type: Optional[str] = None,
                       nationality: Optional[str] = None,
                       birth: Optional[int] = None,
                       produced: Optional[int] = None,
                       acquired: Optional[int] = None,
                       exhibitions: int = 0,
                       on_display: bool = False,
                       has_image: bool = False,
                       size: Optional[Tuple[float, float, float]] = None,
                       colors: Sequence[str] = (),
                       places: Sequence[Tuple[str, float, float]] = (),
                       depicted: Sequence[str] = (),
                       department: Optional[str] = None,
                       techniques: Sequence[str] = (),
                       materials: Sequence[str] = ()) -> ArtworkRecord:
        return ArtworkRecord(
            gender=gender,
            object_type=object_type,
            nationality=nationality,
            creator_name=creator,
            birth_year=birth,
            production_year=produced,
            acquisition_year=acquired,
            exhibitions=exhibitions,
            on_display=on_display,
            has_image=has_image,
            dimensions=Dimensions(*size) if size else None,
            colors=tuple(colors),
            geo_locations=tuple(GeoLocation(name, lat, lon) for name, lat, lon in places),
            depicted_persons=tuple(DepictedPerson(gender=g) for g in depicted),
            department=department,
            techniques=tuple(techniques),
            materials=tuple(materials),
        )

    return _create_record


@pytest.fixture
def sample_records(make_record) -> List[ArtworkRecord]:
    """A small mixed collection touching every metric."""
    return [
        make_record('Male', creator='Hammershøi', object_type='Painting', nationality='Danish',
                    birth=1864, produced=1900, acquired=1920, exhibitions=3, on_display=True, has_image=True,
                    size=(500, 400, 200000), colors=['#FF0000', '#000000'],
                    places=[('Copenhagen', 55.6761, 12.5683)], depicted=['Female'],
                    department='Painting and Sculpture', techniques=['oil'], materials=['canvas']),
        make_record('Male', creator='Hammershøi', object_type='Painting', nationality='Danish',
                    birth=1864, produced=1905, acquired=2001, exhibitions=1, has_image=True,
                    size=(600, 500, 300000), colors=['#ffffff'],
                    places=[('Paris', 48.8566, 2.3522)], department='Painting and Sculpture',
                    techniques=['oil'], materials=['canvas']),
        make_record('Female', creator='Anna Ancher', object_type='Painting', nationality='Danish',
                    birth=1859, produced=1883, acquired=2005, exhibitions=2, on_display=True,
                    size=(800, 600, 480000), colors=['#0000FF'],
                    places=[('Skagen', 57.7209, 10.5839)], depicted=['Female', 'Male'],
                    department='Painting and Sculpture', techniques=['oil', 'pastel'], materials=['canvas']),
        make_record('Female', creator='Marie Krøyer', object_type='Drawing', nationality='Danish',
                    birth=1867, produced=1890, acquired=1950,
                    department='Prints and Drawings', techniques=['pencil'], materials=['paper']),
        make_record('Unknown', creator='Unknown', object_type='Print',
                    produced=1650, department='Prints and Drawings', materials=['paper']),
    ]
