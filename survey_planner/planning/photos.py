"""Photo-point sampling along accepted strip segments.

Samples are taken at ``0, spacing, 2·spacing, …`` up to
``floor(length / spacing)`` inclusive, measured geodesically along the
segment.  Each sample is rotated back to WGS 84 and kept only if the
original, un-rotated polygon covers it, which guards against rounding
in the forward and inverse transforms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from survey_planner.core.exceptions import PhotoLimitError
from survey_planner.geometry.geodesic import line_length_m

if TYPE_CHECKING:
    from shapely.geometry import LineString

    from survey_planner.planning.normalize import NormalizedArea


@dataclass(frozen=True, slots=True)
class SampledSegment:
    """An accepted segment mapped back to WGS 84 with its photo positions.

    Attributes:
        coordinates: Segment vertices as ``(lon, lat)``.
        length_m: Geodesic length in metres.
        photo_positions: Kept samples as ``(lon, lat)``, in flight order.
    """

    coordinates: tuple[tuple[float, float], ...]
    length_m: float
    photo_positions: tuple[tuple[float, float], ...]


def estimate_photo_count(
    normalized: NormalizedArea,
    strip_spacing: float,
    photo_spacing: float,
    *,
    candidate_count: int,
    max_photos: int,
) -> int:
    """Estimate the photo points a plan will hold, before any sampling.

    Each photo covers roughly ``strip_spacing x photo_spacing`` of the
    area, plus one extra sample at the start of every candidate strip.

    Raises:
        PhotoLimitError: If the photo spacing is not positive or the
            estimate exceeds *max_photos*.
    """
    if not photo_spacing > 0:
        msg = f"Photo spacing must be > 0 metres, got {photo_spacing}"
        raise PhotoLimitError(msg)

    estimate = math.ceil(normalized.polygon.area / (strip_spacing * photo_spacing))
    estimate += candidate_count
    if estimate > max_photos:
        msg = (
            f"Survey needs about {estimate} photo points ({photo_spacing:.3f} m "
            f"along-track spacing), above the limit of {max_photos}"
        )
        raise PhotoLimitError(msg)
    return estimate


def sample_segment(
    normalized: NormalizedArea,
    segment: LineString,
    *,
    photo_spacing: float,
    min_segment_length: float,
) -> SampledSegment:
    """Map *segment* back to WGS 84 and sample photo positions along it.

    Segments shorter than *min_segment_length* keep their geometry but
    get no photo positions.
    """
    from shapely.geometry import Point

    coordinates = tuple(
        (float(lon), float(lat)) for lon, lat in normalized.to_original(segment).coords
    )
    length_m = line_length_m(coordinates)

    if length_m < min_segment_length or length_m == 0:
        return SampledSegment(coordinates, length_m, ())

    positions: list[tuple[float, float]] = []
    step_count = math.floor(length_m / photo_spacing)
    for step in range(step_count + 1):
        fraction = min(1.0, step * photo_spacing / length_m)
        sample = segment.interpolate(fraction, normalized=True)
        lon, lat = normalized.point_to_original(sample)
        if normalized.original.covers(Point(lon, lat)):
            positions.append((lon, lat))

    return SampledSegment(coordinates, length_m, tuple(positions))
