"""Strip generation: scan lines clipped against the normalised polygon.

Candidate strips are laid out across the rotated bounding box at the
across-track spacing.  The first candidate sits one spacing left of the
box and the count is ``ceil((span + spacing) / spacing)``.  Candidates
that end up with no accepted segment are dropped by the caller without
consuming a strip index.

Each candidate is a pure function of its index, so candidates may be
scanned in parallel as long as results are merged in candidate order.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from survey_planner.core.exceptions import StripLimitError
from survey_planner.geometry.geodesic import distance_m

if TYPE_CHECKING:
    from shapely.geometry import LineString
    from shapely.geometry.base import BaseGeometry

    from survey_planner.planning.normalize import NormalizedArea

logger = logging.getLogger("survey_planner.planning.strips")


@dataclass(frozen=True, slots=True)
class StripLayout:
    """Placement of the candidate scan lines in the planning frame.

    Attributes:
        start_x: x of candidate 0, one spacing left of the bounding box.
        spacing: Across-track distance between candidates in metres.
        count: Number of candidate scan lines.
        span_m: Geodesic width of the bounding box in metres.
        centre_y: y of the bounding-box centre.
        half_length: Reach of each scan line either side of ``centre_y``.
    """

    start_x: float
    spacing: float
    count: int
    span_m: float
    centre_y: float
    half_length: float

    def x_at(self, index: int) -> float:
        return self.start_x + index * self.spacing


def layout_strips(
    normalized: NormalizedArea,
    spacing: float,
    *,
    max_strips: int,
    min_half_length: float,
) -> StripLayout:
    """Work out how many candidate strips to scan and where.

    Raises:
        StripLimitError: If the spacing is not positive or the candidate
            count exceeds *max_strips*.
    """
    if not spacing > 0:
        msg = f"Strip spacing must be > 0 metres, got {spacing}"
        raise StripLimitError(msg)

    from shapely.geometry import Point

    min_x, min_y, max_x, max_y = normalized.bbox
    centre_y = (min_y + max_y) / 2
    left = normalized.point_to_original(Point(min_x, centre_y))
    right = normalized.point_to_original(Point(max_x, centre_y))
    span_m = distance_m(left, right)

    count = max(1, math.ceil((span_m + spacing) / spacing))
    if count > max_strips:
        msg = (
            f"Survey needs {count} candidate strips (span {span_m:.1f} m at "
            f"{spacing:.3f} m spacing), above the limit of {max_strips}"
        )
        raise StripLimitError(msg)

    return StripLayout(
        start_x=min_x - spacing,
        spacing=spacing,
        count=count,
        span_m=span_m,
        centre_y=centre_y,
        half_length=max(min_half_length, max_y - min_y),
    )


def scan_candidate(
    normalized: NormalizedArea,
    layout: StripLayout,
    index: int,
) -> list[LineString]:
    """Clip candidate scan line *index* against the normalised polygon.

    Returns the accepted segments in the planning frame, ordered from
    south to north, each oriented south to north.  Pieces whose midpoint
    is not strictly inside the polygon (edge grazes, collinear touches)
    are discarded.
    """
    from shapely.geometry import LineString

    x = layout.x_at(index)
    scan_line = LineString(
        [
            (x, layout.centre_y - layout.half_length),
            (x, layout.centre_y + layout.half_length),
        ]
    )

    accepted: list[LineString] = []
    for piece in _line_parts(scan_line.intersection(normalized.polygon)):
        midpoint = piece.interpolate(0.5, normalized=True)
        if normalized.polygon.contains(midpoint):
            accepted.append(_south_to_north(piece))

    accepted.sort(key=lambda seg: seg.coords[0][1])
    logger.debug("Candidate %d at x=%.2f: %d segment(s)", index, x, len(accepted))
    return accepted


def _line_parts(geom: BaseGeometry) -> list[LineString]:
    """Flatten a clipping result into its non-degenerate line parts."""
    if geom.is_empty:
        return []
    if geom.geom_type == "LineString":
        return [geom] if geom.length > 0 else []  # type: ignore[list-item]
    if hasattr(geom, "geoms"):
        parts: list[LineString] = []
        for part in geom.geoms:
            parts.extend(_line_parts(part))
        return parts
    return []


def _south_to_north(segment: LineString) -> LineString:
    coords = list(segment.coords)
    if coords[0][1] > coords[-1][1]:
        from shapely.geometry import LineString

        return LineString(coords[::-1])
    return segment
