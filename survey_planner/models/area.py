"""Data model for a validated survey area.

A ``SurveyArea`` is a closed exterior ring of WGS 84 ``(lon, lat)``
vertices.  Interior rings (holes) are not supported: flight strips are
clipped against the exterior ring only.  Instances are produced by the
loaders in ``survey_planner.survey_area``, which validate the ring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapely.geometry import Polygon


@dataclass(frozen=True, slots=True)
class SurveyArea:
    """A survey polygon ready for planning.

    Attributes:
        exterior_coords: Closed exterior ring as ``(lon, lat)`` tuples.
        name: Display name (e.g. the KML Placemark name).
        source_file: Name of the file the area was read from, if any.
        metadata: Key-value metadata carried over from the source.
    """

    exterior_coords: tuple[tuple[float, float], ...]
    name: str = ""
    source_file: str = ""
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the exterior ring, closure included."""
        return len(self.exterior_coords)

    def to_polygon(self) -> Polygon:
        """Return the ring as a shapely ``Polygon`` in degrees."""
        from shapely.geometry import Polygon

        return Polygon(self.exterior_coords)

    def to_geojson(self) -> dict[str, object]:
        """Return the area as a GeoJSON ``Polygon`` geometry."""
        return {
            "type": "Polygon",
            "coordinates": [[list(c) for c in self.exterior_coords]],
        }
