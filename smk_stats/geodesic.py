"""
geodesic.py - smk_stats great-circle distance utilities.

Module: smk_stats.geodesic
Last updated: 2026-10-19
"""
from __future__ import annotations

__all__ = ['EARTH_RADIUS_KM', 'COPENHAGEN', 'haversine_km']

import math
from typing import Tuple

EARTH_RADIUS_KM = 6371

# SMK, Statens Museum for Kunst
COPENHAGEN: Tuple[float, float] = (55.6761, 12.5683)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points using the haversine formula.

    Args:
        lat1, lon1: First point in degrees.
        lat2, lon2: Second point in degrees.

    Returns:
        float: Distance in kilometres on a sphere of radius EARTH_RADIUS_KM.
    """
    d_lat = (lat2 - lat1) * math.pi / 180
    d_lon = (lon2 - lon1) * math.pi / 180
    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(lat1 * math.pi / 180) * math.cos(lat2 * math.pi / 180)
        * math.sin(d_lon / 2) * math.sin(d_lon / 2)
    )
    # Rounding can push a slightly outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
