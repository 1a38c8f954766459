"""Survey planning entry point.

Runs the full pipeline for one survey area:

1. Validate the area (``InputTypeError``) and derive the footprint
   (``MissingParameterError``).
2. Normalise the polygon into the flight-direction frame.
3. Lay out and scan candidate strips; sample photo points on every
   accepted segment.
4. Merge candidates in order, assigning logical strip indices only to
   candidates that produced segments, and aggregate the summary.

The computation is pure and deterministic: no I/O and no state shared
between calls.  Passing a ``concurrent.futures.Executor`` scans the
candidates in parallel; the ordered merge makes the result identical to
the sequential one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from survey_planner.core.config import PlannerConfig
from survey_planner.models.camera import CameraModel
from survey_planner.models.options import FlightOptions
from survey_planner.models.plan import PhotoPoint, StripLine, SurveyPlan
from survey_planner.planning.footprint import compute_footprint
from survey_planner.planning.normalize import NormalizedArea, normalize_area
from survey_planner.planning.photos import (
    SampledSegment,
    estimate_photo_count,
    sample_segment,
)
from survey_planner.planning.strips import StripLayout, layout_strips, scan_candidate
from survey_planner.planning.summary import summarize
from survey_planner.survey_area import load_survey_area

if TYPE_CHECKING:
    from concurrent.futures import Executor

logger = logging.getLogger("survey_planner.planning.pipeline")


def plan_survey(
    area: object,
    camera: CameraModel | Mapping[str, Any] | None,
    options: FlightOptions | Mapping[str, Any] | None,
    *,
    config: PlannerConfig | None = None,
    executor: Executor | None = None,
) -> SurveyPlan:
    """Compute flight strips, photo points and summary for a survey area.

    Args:
        area: A ``SurveyArea`` or a GeoJSON ``Polygon`` / ``Feature``
            (mapping or JSON text) with ``(lon, lat)`` coordinates.
        camera: Camera optics, as a ``CameraModel`` or a payload dict;
            ``None`` means no optics were given.
        options: Flight options, as ``FlightOptions`` or a payload dict;
            ``None`` means all defaults (and no height).
        config: Planner configuration; defaults to ``PlannerConfig()``.
        executor: Optional executor used to scan candidates in parallel.

    Returns:
        A ``SurveyPlan``.  The caller owns every returned collection.

    Raises:
        InputTypeError: If *area* is missing, not a polygon or not a valid ring.
        MissingParameterError: If the optics or height give a zero footprint.
        InvalidOptionError: If an option or camera value is malformed.
        StripLimitError: If the layout needs more strips than allowed.
        PhotoLimitError: If the plan would hold more photo points than allowed.
    """
    config = config or PlannerConfig()
    survey_area = load_survey_area(area)
    if not isinstance(camera, CameraModel):
        camera = CameraModel.from_dict(dict(camera or {}))
    if not isinstance(options, FlightOptions):
        options = FlightOptions.from_dict(dict(options or {}), config=config)

    footprint = compute_footprint(camera, options.height)
    strip_spacing = footprint.strip_spacing(options.sidelap)
    photo_spacing = footprint.photo_spacing(options.frontlap)

    normalized = normalize_area(survey_area, options.direction)
    layout = layout_strips(
        normalized,
        strip_spacing,
        max_strips=config.max_strips,
        min_half_length=config.scan_line_half_length_m,
    )
    estimate_photo_count(
        normalized,
        strip_spacing,
        photo_spacing,
        candidate_count=layout.count,
        max_photos=config.max_photos,
    )

    def process(index: int) -> list[SampledSegment]:
        return _process_candidate(
            normalized,
            layout,
            index,
            photo_spacing=photo_spacing,
            min_segment_length=options.min_segment_length,
        )

    indices = range(layout.count)
    if executor is None:
        candidates = [process(i) for i in indices]
    else:
        candidates = list(executor.map(process, indices))

    photo_points: list[PhotoPoint] = []
    strip_lines: list[StripLine] = []
    total_length_m = 0.0
    strip_count = 0

    for segments in candidates:
        if not segments:
            continue
        for segment_index, segment in enumerate(segments):
            strip_lines.append(
                StripLine(
                    id=f"{strip_count}-{segment_index}",
                    coordinates=segment.coordinates,
                    strip_index=strip_count,
                    segment_index=segment_index,
                    length_m=segment.length_m,
                )
            )
            total_length_m += segment.length_m
            for point_index, (lon, lat) in enumerate(segment.photo_positions):
                photo_points.append(
                    PhotoPoint(
                        lat=lat,
                        lng=lon,
                        strip_index=strip_count,
                        point_index=point_index,
                    )
                )
        strip_count += 1

    summary = summarize(
        survey_area,
        num_strips=strip_count,
        num_photos=len(photo_points),
        total_length_m=total_length_m,
        cruise_speed_mps=config.cruise_speed_mps,
    )

    logger.info(
        "Survey planned | area=%s | area_ha=%.2f | direction=%.1f | footprint=%.1fx%.1f m | "
        "candidates=%d | strips=%d | segments=%d | photos=%d | length=%.2f km | time=%d min",
        survey_area.name or "<unnamed>",
        summary.area_ha,
        options.direction,
        footprint.width_m,
        footprint.height_m,
        layout.count,
        summary.num_strips,
        len(strip_lines),
        summary.num_photos,
        summary.total_length_km,
        summary.est_time_min,
    )

    return SurveyPlan(
        photo_points=photo_points,
        strip_lines=strip_lines,
        summary_stats=summary,
    )


def _process_candidate(
    normalized: NormalizedArea,
    layout: StripLayout,
    index: int,
    *,
    photo_spacing: float,
    min_segment_length: float,
) -> list[SampledSegment]:
    """Scan one candidate strip and sample each accepted segment."""
    return [
        sample_segment(
            normalized,
            segment,
            photo_spacing=photo_spacing,
            min_segment_length=min_segment_length,
        )
        for segment in scan_candidate(normalized, layout, index)
    ]
