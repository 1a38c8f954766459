"""Geometry primitives used by the planning stages.

- frame: WGS 84 <-> local azimuthal-equidistant plane (pyproj)
- rotation: rotate-about-pivot, forward and inverse (shapely)
- geodesic: ellipsoidal distances, lengths and areas (pyproj.Geod)
"""

from survey_planner.geometry.frame import LocalFrame
from survey_planner.geometry.geodesic import distance_m, line_length_m, polygon_area_ha
from survey_planner.geometry.rotation import PivotRotation

__all__ = [
    "LocalFrame",
    "PivotRotation",
    "distance_m",
    "line_length_m",
    "polygon_area_ha",
]
