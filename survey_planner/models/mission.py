"""Data model for a survey plan annotated with terrain elevation.

``MissionContext`` is handed from the planning core to the elevation
and export collaborators.  It owns the plan together with the
per-point ground elevation and absolute altitude, so no collaborator
needs process-wide state to find the points another one produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from survey_planner.models.plan import SurveyPlan


@dataclass(frozen=True, slots=True)
class AltitudePoint:
    """A position with ground elevation and absolute flight altitude.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
        elevation: Ground elevation in metres above sea level (0 on lookup failure).
        absolute_altitude: ``elevation + flight height`` in metres.
    """

    lat: float
    lng: float
    elevation: float = 0.0
    absolute_altitude: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "elevation": self.elevation,
            "absoluteAltitude": self.absolute_altitude,
        }


@dataclass(frozen=True, slots=True)
class MissionContext:
    """A survey plan plus its altitude annotations.

    Attributes:
        plan: The planning result the annotations belong to.
        flight_height: Flight height above ground in metres.
        photo_altitudes: One entry per ``plan.photo_points``, same order.
        strip_altitudes: Strip id -> one entry per strip vertex, same order.
        elevation_source: Name of the provider that supplied elevations.
    """

    plan: SurveyPlan
    flight_height: float
    photo_altitudes: list[AltitudePoint] = field(default_factory=list)
    strip_altitudes: dict[str, list[AltitudePoint]] = field(default_factory=dict)
    elevation_source: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise for exporters: the plan with altitude fields merged in."""
        photo_points = []
        for point, altitude in zip(self.plan.photo_points, self.photo_altitudes, strict=True):
            entry = point.to_dict()
            entry["elevation"] = altitude.elevation
            entry["absoluteAltitude"] = altitude.absolute_altitude
            photo_points.append(entry)
        return {
            "flightHeight": self.flight_height,
            "elevationSource": self.elevation_source,
            "photoPoints": photo_points,
            "stripLines": [
                {
                    "id": strip.id,
                    "points": [a.to_dict() for a in self.strip_altitudes.get(strip.id, [])],
                }
                for strip in self.plan.strip_lines
            ],
            "summaryStats": self.plan.summary_stats.to_dict(),
        }
