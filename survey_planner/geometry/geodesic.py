"""Geodesic measurements on the WGS 84 ellipsoid.

Every length and area the planner reports goes through ``pyproj.Geod``
so results are ellipsoidal rather than spherical or planar, and are
reproducible across platforms for identical inputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import TYPE_CHECKING

from survey_planner.core.constants import SQ_METRES_PER_HECTARE, WGS84_ELLIPSOID

if TYPE_CHECKING:
    from pyproj import Geod


@lru_cache(maxsize=1)
def get_geod() -> Geod:
    """Return the shared WGS 84 ``Geod`` instance."""
    from pyproj import Geod

    return Geod(ellps=WGS84_ELLIPSOID)


def distance_m(start: tuple[float, float], end: tuple[float, float]) -> float:
    """Geodesic distance in metres between two ``(lon, lat)`` positions."""
    _fwd, _back, dist = get_geod().inv(start[0], start[1], end[0], end[1])
    return float(dist)


def line_length_m(coords: Sequence[tuple[float, float]]) -> float:
    """Geodesic length in metres of a ``(lon, lat)`` polyline."""
    if len(coords) < 2:
        return 0.0
    lons = [c[0] for c in coords]
    lats = [c[1] for c in coords]
    return float(get_geod().line_length(lons, lats))


def polygon_area_ha(coords: Sequence[tuple[float, float]]) -> float:
    """Geodesic area in hectares of a ``(lon, lat)`` ring.

    Returns absolute area (winding-order agnostic).
    """
    if len(coords) < 3:
        return 0.0
    lons = [c[0] for c in coords]
    lats = [c[1] for c in coords]
    # Geod.polygon_area_perimeter returns (area_m2, perimeter_m)
    area_m2, _perimeter = get_geod().polygon_area_perimeter(lons, lats)
    return abs(area_m2) / SQ_METRES_PER_HECTARE
