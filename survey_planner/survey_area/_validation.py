"""Validation helpers for survey-area input.

Responsibilities:
- Coordinate bounds checking (WGS 84)
- Polygon ring structure validation (closure, vertex count)
- Shapely geometry validity checks
"""

from __future__ import annotations

import logging
import math

from survey_planner.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_POLYGON_VERTICES,
)
from survey_planner.core.exceptions import InputTypeError

logger = logging.getLogger("survey_planner.survey_area")


class KmlParseError(InputTypeError):
    """Raised when a KML document cannot be parsed."""

    default_code = "KML_PARSE_FAILED"


class InvalidCoordinateError(InputTypeError):
    """Raised when coordinates are outside valid WGS 84 bounds."""

    default_code = "COORDINATE_INVALID"


# ---------------------------------------------------------------------------
# Coordinate validation
# ---------------------------------------------------------------------------


def validate_coordinates(coords: list[tuple[float, float]], area_name: str) -> None:
    """Validate that all coordinates are finite and within WGS 84 bounds.

    Raises:
        InvalidCoordinateError: If any coordinate is out of bounds.
    """
    for lon, lat in coords:
        if not (math.isfinite(lon) and math.isfinite(lat)):
            msg = f"Non-finite coordinate ({lon}, {lat}) in survey area '{area_name}'"
            raise InvalidCoordinateError(msg)
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            msg = (
                f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
                f"in survey area '{area_name}'"
            )
            raise InvalidCoordinateError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
                f"in survey area '{area_name}'"
            )
            raise InvalidCoordinateError(msg)


# ---------------------------------------------------------------------------
# Polygon ring validation
# ---------------------------------------------------------------------------


def validate_polygon_ring(
    coords: list[tuple[float, float]],
    area_name: str,
    *,
    auto_close: bool = False,
) -> list[tuple[float, float]]:
    """Validate a polygon ring has enough vertices and is closed.

    Returns the (possibly auto-closed) coordinate list.

    Raises:
        InputTypeError: If the ring is unclosed (and ``auto_close`` is off)
            or has fewer than 3 distinct points.
    """
    if len(coords) < 3:
        msg = (
            f"Polygon ring has only {len(coords)} point(s), need at least 3 "
            f"in survey area '{area_name}'"
        )
        raise InputTypeError(msg)

    if coords[0] != coords[-1]:
        if not auto_close:
            msg = (
                f"Polygon ring is not closed (first vertex {coords[0]} != last vertex "
                f"{coords[-1]}) in survey area '{area_name}'"
            )
            raise InputTypeError(msg)
        logger.warning("Auto-closing unclosed ring in survey area '%s'", area_name)
        coords = [*coords, coords[0]]

    if len(coords) < MIN_POLYGON_VERTICES:
        msg = (
            f"Polygon ring has fewer than {MIN_POLYGON_VERTICES} vertices "
            f"(including closure) in survey area '{area_name}'"
        )
        raise InputTypeError(msg)

    distinct = set(coords)
    if len(distinct) < 3:
        msg = f"Polygon ring has fewer than 3 distinct points in survey area '{area_name}'"
        raise InputTypeError(msg)

    return coords


# ---------------------------------------------------------------------------
# Shapely geometry validation
# ---------------------------------------------------------------------------


def validate_shapely_geometry(exterior: list[tuple[float, float]], area_name: str) -> None:
    """Validate the ring with shapely.

    Self-intersecting rings are rejected rather than repaired: a repaired
    ring can become a MultiPolygon, which strip clipping does not handle.

    Raises:
        InputTypeError: If the geometry is invalid or has zero area.
    """
    from shapely.geometry import Polygon
    from shapely.validation import explain_validity

    try:
        poly = Polygon(exterior)
    except (ValueError, TypeError) as exc:
        msg = f"Cannot create polygon for survey area '{area_name}': {exc}"
        raise InputTypeError(msg) from exc

    if not poly.is_valid:
        msg = f"Invalid polygon ring in survey area '{area_name}': {explain_validity(poly)}"
        raise InputTypeError(msg)

    if poly.area == 0:
        msg = f"Zero-area polygon in survey area '{area_name}'"
        raise InputTypeError(msg)
