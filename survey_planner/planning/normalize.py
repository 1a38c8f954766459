"""Normalise a survey area into the strip-planning frame.

The survey polygon is projected into a local metric plane centred on
its centroid and rotated about that centroid so the requested flight
direction points along +y.  Strip generation can then treat every
flight as a north-south pass.  The returned ``NormalizedArea`` carries
the frame and the rotation so every later inverse transform uses the
same pivot and angle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from survey_planner.geometry.frame import LocalFrame
from survey_planner.geometry.rotation import PivotRotation

if TYPE_CHECKING:
    from shapely.geometry import Point, Polygon
    from shapely.geometry.base import BaseGeometry

    from survey_planner.models.area import SurveyArea

logger = logging.getLogger("survey_planner.planning.normalize")


@dataclass(frozen=True)
class NormalizedArea:
    """A survey polygon in the rotated planning frame.

    Attributes:
        original: The polygon in WGS 84 degrees.
        polygon: The polygon in the local plane, rotated by the flight direction.
        bbox: ``(min_x, min_y, max_x, max_y)`` of ``polygon`` in metres.
        centroid: Centroid of ``original`` as ``(lon, lat)``.
        frame: Local plane centred on ``centroid``.
        rotation: Rotation about the projected centroid.
    """

    original: Polygon
    polygon: Polygon
    bbox: tuple[float, float, float, float]
    centroid: tuple[float, float]
    frame: LocalFrame
    rotation: PivotRotation

    def to_original(self, geom: BaseGeometry) -> BaseGeometry:
        """Map a geometry from the planning frame back to WGS 84."""
        return self.frame.to_wgs84(self.rotation.inverse(geom))

    def point_to_original(self, point: Point) -> tuple[float, float]:
        """Map a planning-frame point back to a WGS 84 ``(lon, lat)`` pair."""
        back = self.rotation.inverse(point)
        return self.frame.point_to_wgs84(back.x, back.y)


def normalize_area(area: SurveyArea, direction: float) -> NormalizedArea:
    """Rotate *area* so that *direction* (degrees from north) becomes +y."""
    original = area.to_polygon()
    centroid_point = original.centroid
    centroid = (float(centroid_point.x), float(centroid_point.y))

    frame = LocalFrame(origin=centroid)
    rotation = PivotRotation(pivot=frame.point_to_local(*centroid), bearing_deg=direction)
    rotated = rotation.forward(frame.to_local(original))
    min_x, min_y, max_x, max_y = rotated.bounds

    logger.debug(
        "Normalised '%s' | direction=%.1f | centroid=(%.6f, %.6f) | bbox=[%.1f, %.1f, %.1f, %.1f]",
        area.name,
        direction,
        *centroid,
        min_x,
        min_y,
        max_x,
        max_y,
    )
    return NormalizedArea(
        original=original,
        polygon=rotated,
        bbox=(min_x, min_y, max_x, max_y),
        centroid=centroid,
        frame=frame,
        rotation=rotation,
    )
