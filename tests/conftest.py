"""Shared pytest fixtures for the survey planner test suite."""

from __future__ import annotations

import pytest

from survey_planner.models.camera import CameraModel

# ---------------------------------------------------------------------------
# Reference polygons
# ---------------------------------------------------------------------------

# ~1 km x 1 km square near 48 N (0.013424 deg lon ~ 1000 m, 0.008993 deg lat ~ 1000 m)
SQUARE_48N = [
    (11.000000, 48.000000),
    (11.013424, 48.000000),
    (11.013424, 48.008993),
    (11.000000, 48.008993),
    (11.000000, 48.000000),
]

# C-shaped block opening to the east: vertical passes through the notch
# cross the polygon twice.
C_SHAPE_48N = [
    (11.000, 48.000),
    (11.010, 48.000),
    (11.010, 48.002),
    (11.003, 48.002),
    (11.003, 48.004),
    (11.010, 48.004),
    (11.010, 48.006),
    (11.000, 48.006),
    (11.000, 48.000),
]

# ~5 m x 5 m plot, smaller than one footprint in every direction
TINY_PLOT = [
    (11.00000, 48.00000),
    (11.00007, 48.00000),
    (11.00007, 48.000045),
    (11.00000, 48.000045),
    (11.00000, 48.00000),
]


def polygon_geojson(ring: list[tuple[float, float]]) -> dict[str, object]:
    """Wrap a ring as a GeoJSON Polygon geometry."""
    return {"type": "Polygon", "coordinates": [[list(c) for c in ring]]}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def camera() -> CameraModel:
    """4000 x 3000 px sensor, 4.4 um pitch, 25 mm lens."""
    return CameraModel(
        sensor_width_px=4000,
        sensor_height_px=3000,
        pixel_size_um=4.4,
        focal_length_mm=25,
    )


@pytest.fixture()
def square_geojson() -> dict[str, object]:
    return polygon_geojson(SQUARE_48N)


@pytest.fixture()
def c_shape_geojson() -> dict[str, object]:
    return polygon_geojson(C_SHAPE_48N)


@pytest.fixture()
def tiny_geojson() -> dict[str, object]:
    return polygon_geojson(TINY_PLOT)


@pytest.fixture()
def square_ring() -> list[tuple[float, float]]:
    return list(SQUARE_48N)


@pytest.fixture()
def c_shape_ring() -> list[tuple[float, float]]:
    return list(C_SHAPE_48N)
