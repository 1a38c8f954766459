"""Survey-area loading: GeoJSON and KML input.

Turns caller input into a validated ``SurveyArea``:
- **load_survey_area**: a GeoJSON ``Polygon`` geometry or ``Feature``
  (mapping or JSON text), or an existing ``SurveyArea``
- **load_survey_areas_from_kml**: every Placemark polygon in a KML file

The stages are split into focused modules:
- **_validation**: coordinate bounds, ring closure, shapely validity
- **_kml_parser**: lxml element-tree walk, coordinate text and metadata

Every rejection raises ``InputTypeError`` (or a subclass) before any
planning work starts.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from survey_planner.core.exceptions import InputTypeError
from survey_planner.models.area import SurveyArea
from survey_planner.survey_area._kml_parser import KML_NAMESPACE, parse_survey_areas
from survey_planner.survey_area._validation import (
    InvalidCoordinateError,
    KmlParseError,
    validate_coordinates,
    validate_polygon_ring,
    validate_shapely_geometry,
)

logger = logging.getLogger("survey_planner.survey_area")

__all__ = [
    "KML_NAMESPACE",
    "InvalidCoordinateError",
    "KmlParseError",
    "load_survey_area",
    "load_survey_areas_from_kml",
]


def load_survey_area(area: object, *, name: str = "") -> SurveyArea:
    """Validate survey-area input and return a ``SurveyArea``.

    Args:
        area: A ``SurveyArea``, a GeoJSON ``Polygon`` geometry or
            ``Feature`` with a polygon geometry, or the JSON text of one.
        name: Display name used in error messages and logs.

    Raises:
        InputTypeError: If the input is missing, not a polygon, or its
            exterior ring is not a valid closed ring.
    """
    if isinstance(area, SurveyArea):
        return area
    if area is None:
        msg = "Survey area is required"
        raise InputTypeError(msg)

    if isinstance(area, str | bytes):
        try:
            area = json.loads(area)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = "Survey area payload is invalid JSON"
            raise InputTypeError(msg) from exc

    if not isinstance(area, Mapping):
        msg = f"Survey area must be a GeoJSON Polygon, got {type(area).__name__}"
        raise InputTypeError(msg)

    geometry = area
    if area.get("type") == "Feature":
        geometry = area.get("geometry") or {}
        properties = area.get("properties") or {}
        if not name and isinstance(properties, Mapping):
            name = str(properties.get("name", ""))
        if not isinstance(geometry, Mapping):
            msg = "Feature geometry must be a GeoJSON object"
            raise InputTypeError(msg)

    if geometry.get("type") != "Polygon":
        msg = f"Survey area must be a GeoJSON Polygon, got type {geometry.get('type')!r}"
        raise InputTypeError(msg)

    rings = geometry.get("coordinates")
    if not isinstance(rings, list | tuple) or not rings:
        msg = "Polygon coordinates are required"
        raise InputTypeError(msg)
    if len(rings) > 1:
        logger.warning(
            "Ignoring %d interior ring(s) of survey area '%s': holes are not supported",
            len(rings) - 1,
            name,
        )

    exterior = _ring_positions(rings[0])
    validate_coordinates(exterior, name)
    exterior = validate_polygon_ring(exterior, name)
    validate_shapely_geometry(exterior, name)

    return SurveyArea(exterior_coords=tuple(exterior), name=name)


def load_survey_areas_from_kml(kml_path: Path | str) -> list[SurveyArea]:
    """Read every valid Placemark polygon from a KML file.

    Raises:
        KmlParseError: If the file cannot be read or is not KML.
    """
    path = Path(kml_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file: {exc}"
        raise KmlParseError(msg) from exc

    areas = parse_survey_areas(content, source_filename=path.name)
    logger.info("Loaded %d survey area(s) from %s", len(areas), path.name)
    return areas


def _ring_positions(ring: object) -> list[tuple[float, float]]:
    """Read a GeoJSON ring as ``(lon, lat)`` pairs, dropping any altitude.

    Raises:
        InputTypeError: If the ring is not a list or a position is malformed.
    """
    if not isinstance(ring, list | tuple):
        msg = f"Polygon ring must be a list of positions, got {type(ring).__name__}"
        raise InputTypeError(msg)

    positions: list[tuple[float, float]] = []
    for index, position in enumerate(ring):
        try:
            if not isinstance(position, list | tuple) or len(position) < 2:
                raise TypeError(f"expected [lon, lat], got {position!r}")
            positions.append((float(position[0]), float(position[1])))
        except (TypeError, ValueError) as exc:
            msg = f"Malformed coordinate at index {index}: {exc}"
            raise InputTypeError(msg) from exc
    return positions
