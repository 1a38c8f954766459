"""Summary statistics for a survey plan."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from survey_planner.core.constants import (
    DEFAULT_CRUISE_SPEED_MPS,
    METRES_PER_KILOMETRE,
    SECONDS_PER_MINUTE,
)
from survey_planner.geometry.geodesic import polygon_area_ha
from survey_planner.models.plan import SummaryStats

if TYPE_CHECKING:
    from survey_planner.models.area import SurveyArea


def summarize(
    area: SurveyArea,
    *,
    num_strips: int,
    num_photos: int,
    total_length_m: float,
    cruise_speed_mps: float = DEFAULT_CRUISE_SPEED_MPS,
) -> SummaryStats:
    """Aggregate area, counts, path length and flight time.

    The flight time is the total strip length at *cruise_speed_mps*,
    rounded up to whole minutes; transit between strips is not counted.
    """
    total_length_km = total_length_m / METRES_PER_KILOMETRE
    km_per_minute = cruise_speed_mps * SECONDS_PER_MINUTE / METRES_PER_KILOMETRE
    # 6 km at 0.6 km/min must stay 10 minutes, not 11.
    est_time_min = math.ceil(round(total_length_km / km_per_minute, 9))

    return SummaryStats(
        area_ha=round(polygon_area_ha(area.exterior_coords), 2),
        num_strips=num_strips,
        num_photos=num_photos,
        total_length_km=round(total_length_km, 2),
        est_time_min=est_time_min,
    )
