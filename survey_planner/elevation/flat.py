"""Constant-elevation adapter for offline planning and tests."""

from __future__ import annotations

from collections.abc import Sequence

from survey_planner.elevation.base import ElevationProvider


class FlatElevationProvider(ElevationProvider):
    """Report the same ground elevation for every point."""

    name = "flat"

    def __init__(self, elevation: float = 0.0) -> None:
        self.elevation = float(elevation)

    def lookup(self, points: Sequence[tuple[float, float]]) -> list[float]:
        return [self.elevation] * len(points)
