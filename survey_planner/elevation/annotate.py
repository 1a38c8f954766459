"""Altitude annotation of a survey plan.

Collects every photo point followed by every strip vertex (strips in
plan order), resolves ground elevation for all of them in one provider
call, and returns a ``MissionContext`` in which each point carries
``absolute_altitude = elevation + flight height``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from survey_planner.models.mission import AltitudePoint, MissionContext

if TYPE_CHECKING:
    from survey_planner.elevation.base import ElevationProvider
    from survey_planner.models.plan import SurveyPlan

logger = logging.getLogger("survey_planner.elevation.annotate")


def annotate_mission(
    plan: SurveyPlan,
    provider: ElevationProvider,
    flight_height: float,
) -> MissionContext:
    """Attach ground elevation and absolute altitude to every plan point."""
    queries: list[tuple[float, float]] = [(p.lat, p.lng) for p in plan.photo_points]
    for strip in plan.strip_lines:
        queries.extend((lat, lon) for lon, lat in strip.coordinates)

    if not queries:
        logger.warning("Plan has no points to annotate with elevation")
        return MissionContext(
            plan=plan, flight_height=flight_height, elevation_source=provider.name
        )

    elevations = provider.lookup(queries)
    if len(elevations) != len(queries):
        msg = (
            f"Elevation provider {provider.name!r} returned {len(elevations)} value(s) "
            f"for {len(queries)} point(s)"
        )
        raise ValueError(msg)

    def _point(index: int) -> AltitudePoint:
        lat, lng = queries[index]
        elevation = elevations[index]
        return AltitudePoint(
            lat=lat,
            lng=lng,
            elevation=elevation,
            absolute_altitude=elevation + flight_height,
        )

    photo_altitudes = [_point(i) for i in range(len(plan.photo_points))]

    strip_altitudes: dict[str, list[AltitudePoint]] = {}
    cursor = len(plan.photo_points)
    for strip in plan.strip_lines:
        count = len(strip.coordinates)
        strip_altitudes[strip.id] = [_point(i) for i in range(cursor, cursor + count)]
        cursor += count

    logger.info(
        "Mission annotated | source=%s | photos=%d | strip_vertices=%d | flight_height=%.1f m",
        provider.name,
        len(photo_altitudes),
        cursor - len(plan.photo_points),
        flight_height,
    )
    return MissionContext(
        plan=plan,
        flight_height=flight_height,
        photo_altitudes=photo_altitudes,
        strip_altitudes=strip_altitudes,
        elevation_source=provider.name,
    )
