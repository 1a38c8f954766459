"""Local metric frame centred on a survey area.

Projects WGS 84 geometries into an azimuthal-equidistant plane centred
on the survey centroid (metres, x east, y north) and back.  Inside this
plane rotations, clipping and interpolation are ordinary planar
operations; distortion stays negligible at survey scale because
distances from the centre are preserved exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from survey_planner.core.constants import WGS84_CRS

if TYPE_CHECKING:
    from pyproj import Transformer
    from shapely.geometry.base import BaseGeometry


def _aeqd_crs(lon: float, lat: float) -> str:
    """Return a PROJ string for an azimuthal-equidistant CRS at ``(lon, lat)``."""
    return f"+proj=aeqd +lat_0={lat!r} +lon_0={lon!r} +datum=WGS84 +units=m +no_defs"


@dataclass(frozen=True)
class LocalFrame:
    """Forward and inverse projection between WGS 84 and a local plane.

    Attributes:
        origin: ``(lon, lat)`` of the projection centre.
    """

    origin: tuple[float, float]
    _to_local: Transformer = field(init=False, repr=False, compare=False)
    _to_wgs: Transformer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        from pyproj import Transformer

        local_crs = _aeqd_crs(*self.origin)
        object.__setattr__(
            self, "_to_local", Transformer.from_crs(WGS84_CRS, local_crs, always_xy=True)
        )
        object.__setattr__(
            self, "_to_wgs", Transformer.from_crs(local_crs, WGS84_CRS, always_xy=True)
        )

    def point_to_local(self, lon: float, lat: float) -> tuple[float, float]:
        x, y = self._to_local.transform(lon, lat)
        return (float(x), float(y))

    def point_to_wgs84(self, x: float, y: float) -> tuple[float, float]:
        lon, lat = self._to_wgs.transform(x, y)
        return (float(lon), float(lat))

    def to_local(self, geom: BaseGeometry) -> BaseGeometry:
        """Project a WGS 84 geometry into the local plane."""
        import shapely

        return shapely.transform(geom, self._to_local.transform, interleaved=False)

    def to_wgs84(self, geom: BaseGeometry) -> BaseGeometry:
        """Project a local-plane geometry back to WGS 84."""
        import shapely

        return shapely.transform(geom, self._to_wgs.transform, interleaved=False)
