"""Rotation about a fixed pivot, applied forward and inverse.

The planner rotates the survey polygon into a frame where every flight
strip runs along the y axis, clips there, and rotates results back.  A
single ``PivotRotation`` value is built once per planning call and used
for every geometry so the pivot and angle cannot drift between the
forward and the inverse transform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True, slots=True)
class PivotRotation:
    """Planar rotation by a compass bearing about a pivot.

    ``forward`` maps the original frame into the normalised frame, in
    which a line with compass bearing ``bearing_deg`` points due "north"
    (along +y).  ``inverse`` undoes it.

    Attributes:
        pivot: ``(x, y)`` rotation centre.
        bearing_deg: Flight direction in degrees clockwise from north.
    """

    pivot: tuple[float, float]
    bearing_deg: float

    def forward(self, geom: BaseGeometry) -> BaseGeometry:
        # Clockwise bearings undo with a counter-clockwise rotation.
        from shapely import affinity

        return affinity.rotate(geom, self.bearing_deg, origin=self.pivot)

    def inverse(self, geom: BaseGeometry) -> BaseGeometry:
        from shapely import affinity

        return affinity.rotate(geom, -self.bearing_deg, origin=self.pivot)
