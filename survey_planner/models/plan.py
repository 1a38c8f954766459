"""Data models for a computed survey plan.

A ``SurveyPlan`` is the output of ``plan_survey``: the clipped flight
strips, the photo-capture points sampled along them, and the summary
statistics of the mission.  Coordinates are WGS 84; strip vertices are
``(lon, lat)`` while photo points expose ``lat`` and ``lng`` fields.

``to_dict()`` emits the camelCase keys consumed by map renderers and
exporters (``photoPoints``, ``stripLines``, ``summaryStats``).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PhotoPoint:
    """A single photo-capture position.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
        strip_index: Logical strip that produced the point.
        point_index: Position within the producing segment (restarts per segment).
    """

    lat: float
    lng: float
    strip_index: int
    point_index: int

    def to_dict(self) -> dict[str, object]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "stripIndex": self.strip_index,
            "pointIndex": self.point_index,
        }


@dataclass(frozen=True, slots=True)
class StripLine:
    """One clipped flight-strip segment.

    Attributes:
        id: ``"{strip_index}-{segment_index}"``.  The segment index restarts
            for every strip, so ids are not comparable with planners that
            key segments by scan-line number and a global segment count.
        coordinates: Ordered ``(lon, lat)`` vertices in the original frame.
        strip_index: Logical strip the segment belongs to.
        segment_index: Position of the segment within its strip.
        length_m: Geodesic length of the segment in metres.
    """

    id: str
    coordinates: tuple[tuple[float, float], ...]
    strip_index: int = 0
    segment_index: int = 0
    length_m: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "coordinates": [list(c) for c in self.coordinates],
        }


@dataclass(frozen=True, slots=True)
class SummaryStats:
    """Aggregate statistics for a survey plan.

    Attributes:
        area_ha: Geodesic survey area in hectares (2 dp).
        num_strips: Strips that produced at least one segment.
        num_photos: Number of photo points.
        total_length_km: Sum of segment lengths in kilometres (2 dp).
        est_time_min: Estimated flight time in whole minutes (rounded up).
    """

    area_ha: float = 0.0
    num_strips: int = 0
    num_photos: int = 0
    total_length_km: float = 0.0
    est_time_min: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "areaHa": self.area_ha,
            "numStrips": self.num_strips,
            "numPhotos": self.num_photos,
            "totalLengthKm": self.total_length_km,
            "estTimeMin": self.est_time_min,
        }


@dataclass(frozen=True, slots=True)
class SurveyPlan:
    """Strips, photo points and statistics produced by one planning call."""

    photo_points: list[PhotoPoint] = field(default_factory=list)
    strip_lines: list[StripLine] = field(default_factory=list)
    summary_stats: SummaryStats = field(default_factory=SummaryStats)

    def to_dict(self) -> dict[str, object]:
        """Serialise to plain JSON-compatible structures."""
        return {
            "photoPoints": [p.to_dict() for p in self.photo_points],
            "stripLines": [s.to_dict() for s in self.strip_lines],
            "summaryStats": self.summary_stats.to_dict(),
        }
