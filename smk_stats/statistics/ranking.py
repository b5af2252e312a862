"""
Artist aggregation and top-N selection.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from smk_stats.record import ArtworkRecord, UNKNOWN, YEAR_MAX, YEAR_MIN


@dataclass
class Artist:
    """
    Artworks attributed to one creator name.

    gender, birth_year and nationality come from the first record seen for
    the name; later records only increment artwork_count.
    """
    name: str
    gender: str
    birth_year: Optional[int] = None
    nationality: Optional[str] = None
    artwork_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def aggregate_artists(records: Iterable[ArtworkRecord]) -> List[Artist]:
    """
    Group records by creator name, most prolific first.

    Records without a name or with the 'Unknown' sentinel are ignored.
    Ties keep first-seen order.
    """
    artists: Dict[str, Artist] = {}
    for record in records:
        name = record.creator_name
        if not name or name == UNKNOWN:
            continue
        artist = artists.get(name)
        if artist is None:
            artist = artists[name] = Artist(
                name=name,
                gender=record.gender,
                birth_year=record.birth_year,
                nationality=record.nationality,
            )
        artist.artwork_count += 1
    return sorted(artists.values(), key=lambda a: a.artwork_count, reverse=True)


def filter_by_gender(artists: Iterable[Artist], gender: str) -> List[Artist]:
    return [a for a in artists if a.gender == gender]


def top_n(items: Iterable[Any], n: int) -> List[Any]:
    """First n items of an already ranked iterable."""
    return list(items)[:max(n, 0)]


def scatter_subset(
    artists: Iterable[Artist],
    lower: int = YEAR_MIN,
    upper: int = YEAR_MAX,
    min_artworks: int = 2,
) -> List[Artist]:
    """Artists with a birth year in [lower, upper] and at least min_artworks works."""
    return [
        a for a in artists
        if a.birth_year and lower <= a.birth_year <= upper and a.artwork_count >= min_artworks
    ]
