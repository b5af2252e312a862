"""
record.py - smk_stats normalized artwork record model.

This module provides the immutable ArtworkRecord consumed by every statistic,
together with its small value types. It supports:
    - Gender normalization to Male / Female / Unknown
    - Building records from normalized dicts (camelCase or snake_case keys)
    - Tolerant parsing of nested dimensions, locations and depicted persons

Module: smk_stats.record
Last updated: 2026-10-19
"""
from __future__ import annotations

__all__ = [
    'ArtworkRecord', 'Dimensions', 'GeoLocation', 'DepictedPerson',
    'normalize_gender', 'records_from_dicts',
    'GENDERS', 'MALE', 'FEMALE', 'UNKNOWN', 'YEAR_MIN', 'YEAR_MAX',
]

from dataclasses import dataclass, field, fields
import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

MALE = 'Male'
FEMALE = 'Female'
UNKNOWN = 'Unknown'
GENDERS: Tuple[str, str, str] = (MALE, FEMALE, UNKNOWN)

# Plausibility domain for birth / production years
YEAR_MIN = 1400
YEAR_MAX = 2025

# Upstream camelCase keys -> ArtworkRecord field names
_KEY_ALIASES = {
    'creatorName': 'creator_name',
    'birthYear': 'birth_year',
    'productionYear': 'production_year',
    'acquisitionYear': 'acquisition_year',
    'onDisplay': 'on_display',
    'hasImage': 'has_image',
    'geoLocations': 'geo_locations',
    'depictedPersons': 'depicted_persons',
    'creditLine': 'credit_line',
    'objectType': 'object_type',
}


def normalize_gender(raw_gender: Any) -> str:
    """
    Normalize a raw gender value to Male, Female or Unknown.

    Args:
        raw_gender: Raw value (e.g. 'male', 'F', None).

    Returns:
        str: One of GENDERS.
    """
    if not raw_gender or not isinstance(raw_gender, str):
        return UNKNOWN
    normalized = raw_gender.strip().lower()
    if normalized in ('male', 'm'):
        return MALE
    if normalized in ('female', 'f'):
        return FEMALE
    return UNKNOWN


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # inf and nan are treated as missing
    return number if math.isfinite(number) else None


def _as_str_tuple(values: Any) -> Tuple[str, ...]:
    if not values or isinstance(values, (str, bytes)):
        return ()
    return tuple(str(v) for v in values if v is not None)


@dataclass(frozen=True)
class Dimensions:
    """
    Physical dimensions of an artwork in millimetres.

    Attributes:
        height (Optional[float]): Height in mm.
        width (Optional[float]): Width in mm.
        area (Optional[float]): Area in mm^2.
    """
    height: Optional[float] = None
    width: Optional[float] = None
    area: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Any) -> Optional[Dimensions]:
        if isinstance(d, Dimensions):
            return d
        if not isinstance(d, Mapping):
            return None
        return cls(
            height=_as_float(d.get('height')),
            width=_as_float(d.get('width')),
            area=_as_float(d.get('area')),
        )


@dataclass(frozen=True)
class GeoLocation:
    """A depicted place with coordinates in degrees."""
    name: Optional[str]
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, d: Any) -> Optional[GeoLocation]:
        """Return a GeoLocation, or None when coordinates are missing or not numeric."""
        if isinstance(d, GeoLocation):
            return d
        if not isinstance(d, Mapping):
            return None
        lat = _as_float(d.get('latitude'))
        lon = _as_float(d.get('longitude'))
        if lat is None or lon is None:
            return None
        return cls(name=d.get('name'), latitude=lat, longitude=lon)


@dataclass(frozen=True)
class DepictedPerson:
    """A person depicted in an artwork."""
    gender: str = UNKNOWN
    name: Optional[str] = None
    nationality: Optional[str] = None

    def __post_init__(self) -> None:
        if self.gender not in GENDERS:
            object.__setattr__(self, 'gender', normalize_gender(self.gender))

    @classmethod
    def from_dict(cls, d: Any) -> Optional[DepictedPerson]:
        if isinstance(d, DepictedPerson):
            return d
        if not isinstance(d, Mapping):
            return None
        return cls(
            gender=normalize_gender(d.get('gender')),
            name=d.get('name') or d.get('full_name'),
            nationality=d.get('nationality'),
        )


@dataclass(frozen=True)
class ArtworkRecord:
    """
    One normalized artwork from the collection.

    Records are read-only; statistics never modify them. The gender field is
    normalized on construction so it is always one of GENDERS.

    Attributes:
        gender (str): Creator gender (Male / Female / Unknown).
        object_type (Optional[str]): Object type name, e.g. 'Painting'.
        nationality (Optional[str]): Creator nationality.
        creator_name (Optional[str]): Creator name, 'Unknown' when unresolved.
        birth_year (Optional[int]): Creator birth year.
        production_year (Optional[int]): Year the work was produced.
        acquisition_year (Optional[int]): Year the museum acquired the work.
        exhibitions (int): Number of exhibitions the work appeared in.
        on_display (bool): Whether the work is currently on display.
        has_image (bool): Whether a digitized image exists.
        dimensions (Optional[Dimensions]): Physical size in mm.
        colors (Tuple[str, ...]): Dominant colors as hex strings.
        geo_locations (Tuple[GeoLocation, ...]): Depicted places.
        depicted_persons (Tuple[DepictedPerson, ...]): Depicted people.
        department (Optional[str]): Responsible museum department.
        techniques (Tuple[str, ...]): Techniques used.
        materials (Tuple[str, ...]): Materials used.
        credit_line (Optional[str]): Acquisition credit line.
    """
    gender: str = UNKNOWN
    object_type: Optional[str] = None
    nationality: Optional[str] = None
    creator_name: Optional[str] = None
    birth_year: Optional[int] = None
    production_year: Optional[int] = None
    acquisition_year: Optional[int] = None
    exhibitions: int = 0
    on_display: bool = False
    has_image: bool = False
    dimensions: Optional[Dimensions] = None
    colors: Tuple[str, ...] = field(default_factory=tuple)
    geo_locations: Tuple[GeoLocation, ...] = field(default_factory=tuple)
    depicted_persons: Tuple[DepictedPerson, ...] = field(default_factory=tuple)
    department: Optional[str] = None
    techniques: Tuple[str, ...] = field(default_factory=tuple)
    materials: Tuple[str, ...] = field(default_factory=tuple)
    credit_line: Optional[str] = None

    def __post_init__(self) -> None:
        if self.gender not in GENDERS:
            object.__setattr__(self, 'gender', normalize_gender(self.gender))
        # Accept lists from callers but store tuples
        for name in ('colors', 'geo_locations', 'depicted_persons', 'techniques', 'materials'):
            value = getattr(self, name)
            if isinstance(value, str):
                object.__setattr__(self, name, (value,) if value else ())
            elif not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value) if value else ())

    @property
    def area_cm2(self) -> Optional[float]:
        """Area in cm^2, or None when the record has no usable area."""
        if self.dimensions and self.dimensions.area:
            return self.dimensions.area / 100
        return None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> ArtworkRecord:
        """
        Create an ArtworkRecord from a normalized dictionary.

        Both the upstream camelCase keys (creatorName, birthYear, ...) and the
        snake_case field names are accepted. Unknown keys are ignored.

        Args:
            d (Mapping): Normalized artwork dictionary.

        Returns:
            ArtworkRecord: Record instance.

        Raises:
            TypeError: If d is not a mapping.
        """
        if not isinstance(d, Mapping):
            raise TypeError(f"from_dict expects a mapping, got {type(d)}")
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        unknown = []
        for key, value in d.items():
            name = _KEY_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                unknown.append(key)
        if unknown:
            logger.debug(f"Ignoring unknown artwork keys: {unknown}")

        locations = (GeoLocation.from_dict(loc) for loc in values.get('geo_locations') or ())
        persons = (DepictedPerson.from_dict(p) for p in values.get('depicted_persons') or ())
        return cls(
            gender=normalize_gender(values.get('gender')),
            object_type=values.get('object_type'),
            nationality=values.get('nationality'),
            creator_name=values.get('creator_name'),
            birth_year=_as_int(values.get('birth_year')),
            production_year=_as_int(values.get('production_year')),
            acquisition_year=_as_int(values.get('acquisition_year')),
            exhibitions=_as_int(values.get('exhibitions')) or 0,
            on_display=bool(values.get('on_display')),
            has_image=bool(values.get('has_image')),
            dimensions=Dimensions.from_dict(values.get('dimensions')),
            colors=_as_str_tuple(values.get('colors')),
            geo_locations=tuple(loc for loc in locations if loc is not None),
            depicted_persons=tuple(p for p in persons if p is not None),
            department=values.get('department'),
            techniques=_as_str_tuple(values.get('techniques')),
            materials=_as_str_tuple(values.get('materials')),
            credit_line=values.get('credit_line'),
        )


def records_from_dicts(items: Iterable[Any]) -> List[ArtworkRecord]:
    """
    Build records from an iterable of normalized dicts.

    Items that are not mappings are skipped with a warning.
    """
    records = []
    skipped = 0
    for item in items or ():
        if isinstance(item, ArtworkRecord):
            records.append(item)
        elif isinstance(item, Mapping):
            records.append(ArtworkRecord.from_dict(item))
        else:
            skipped += 1
    if skipped:
        logger.warning(f"Skipped {skipped} non-mapping artwork items")
    return records
