"""lxml-based KML reader for survey areas.

Walks the element tree of a KML document and turns every Placemark
``<Polygon>`` into a ``SurveyArea``.  Inner boundaries are ignored
(holes are not supported by strip planning) and invalid polygons are
skipped with a warning so one bad Placemark does not hide the rest.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from survey_planner.core.exceptions import InputTypeError
from survey_planner.models.area import SurveyArea
from survey_planner.survey_area._validation import (
    KmlParseError,
    validate_coordinates,
    validate_polygon_ring,
    validate_shapely_geometry,
)

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("survey_planner.survey_area")

# KML 2.2 namespace
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"


def parse_kml_root(content: bytes) -> _Element:
    """Parse KML bytes into an element tree root.

    Raises:
        KmlParseError: If the content is empty, not XML, or not KML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    tag = root.tag
    if f"{{{KML_NAMESPACE}}}" not in tag and "kml" not in tag.lower():
        msg = f"Not a KML document, root element is <{tag}>"
        raise KmlParseError(msg)
    return root


def parse_survey_areas(content: bytes, source_filename: str = "") -> list[SurveyArea]:
    """Extract every valid Placemark polygon from a KML document."""
    root = parse_kml_root(content)
    ns = {"kml": KML_NAMESPACE}

    areas: list[SurveyArea] = []
    placemarks: list[_Element] = root.findall(".//kml:Placemark", ns)

    for idx, pm in enumerate(placemarks):
        polygons = pm.findall(".//kml:Polygon", ns)
        if not polygons:
            continue

        name_elem = pm.find("kml:name", ns)
        placemark_name = (name_elem.text or "").strip() if name_elem is not None else ""
        metadata = _placemark_metadata(pm, ns)

        for poly_idx, polygon in enumerate(polygons):
            display_name = placemark_name or f"Placemark {idx}"
            if len(polygons) > 1:
                display_name = f"{display_name} (part {poly_idx})"

            try:
                exterior = _parse_exterior(polygon, ns)
                if not exterior:
                    msg = (
                        f"Placemark '{display_name}' has a <Polygon> with no exterior "
                        f"coordinates (missing or empty outerBoundaryIs/LinearRing)."
                    )
                    raise InputTypeError(msg)
                if polygon.find("kml:innerBoundaryIs", ns) is not None:
                    logger.warning(
                        "Ignoring inner boundaries of '%s' in %s: holes are not supported",
                        display_name,
                        source_filename,
                    )

                validate_coordinates(exterior, display_name)
                exterior = validate_polygon_ring(exterior, display_name, auto_close=True)
                validate_shapely_geometry(exterior, display_name)

            except InputTypeError as exc:
                logger.warning(
                    "Skipping invalid survey area '%s' in %s: %s",
                    display_name,
                    source_filename,
                    exc,
                )
                continue

            areas.append(
                SurveyArea(
                    exterior_coords=tuple(exterior),
                    name=display_name,
                    source_file=source_filename,
                    metadata=metadata,
                )
            )

    return areas


def _parse_exterior(polygon_elem: _Element, ns: dict[str, str]) -> list[tuple[float, float]]:
    """Read the outer ``LinearRing`` as ``(lon, lat)`` pairs, altitude dropped.

    Raises:
        InputTypeError: If a coordinate tuple is not numeric.
    """
    text = polygon_elem.findtext("kml:outerBoundaryIs/kml:LinearRing/kml:coordinates", "", ns)
    ring: list[tuple[float, float]] = []
    for position, token in enumerate(text.split()):
        lon_text, _, rest = token.partition(",")
        lat_text = rest.split(",", 1)[0]
        try:
            ring.append((float(lon_text), float(lat_text)))
        except ValueError as exc:
            msg = f"Unreadable KML coordinate {token!r} at position {position}"
            raise InputTypeError(msg) from exc
    return ring


def _placemark_metadata(placemark: _Element, ns: dict[str, str]) -> dict[str, str]:
    """Collect ``ExtendedData`` fields, untyped ``Data`` and typed ``SimpleData``."""
    metadata: dict[str, str] = {}
    for data in placemark.iterfind("kml:ExtendedData/kml:Data", ns):
        value = (data.findtext("kml:value", "", ns) or "").strip()
        if data.get("name") and value:
            metadata[data.get("name")] = value
    for simple in placemark.iterfind("kml:ExtendedData/kml:SchemaData/kml:SimpleData", ns):
        value = (simple.text or "").strip()
        if simple.get("name") and value:
            metadata[simple.get("name")] = value
    return metadata
