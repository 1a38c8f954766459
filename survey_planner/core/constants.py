"""Shared planner constants and defaults.

Centralises unit conversions, WGS 84 bounds and the planning defaults
that were previously scattered as literals across the planning stages.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------

SQ_METRES_PER_HECTARE: float = 10_000.0
METRES_PER_KILOMETRE: float = 1_000.0
METRES_PER_MICROMETRE: float = 1e-6
METRES_PER_MILLIMETRE: float = 1e-3
SECONDS_PER_MINUTE: float = 60.0

# ---------------------------------------------------------------------------
# WGS 84
# ---------------------------------------------------------------------------

WGS84_CRS: str = "EPSG:4326"
"""Coordinate reference system of every survey polygon."""

WGS84_ELLIPSOID: str = "WGS84"
"""Ellipsoid used for geodesic lengths and areas."""

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# Minimum vertices for a valid polygon ring (3 distinct + closing = 4)
MIN_POLYGON_VERTICES = 4

# ---------------------------------------------------------------------------
# Planning defaults
# ---------------------------------------------------------------------------

DEFAULT_FRONTLAP: float = 0.7
DEFAULT_SIDELAP: float = 0.6
DEFAULT_DIRECTION_DEG: float = 0.0
DEFAULT_MIN_SEGMENT_LENGTH_M: float = 1.0

DEFAULT_CRUISE_SPEED_MPS: float = 10.0
"""Assumed cruise speed for the flight-time estimate (0.6 km/min)."""

DEFAULT_MAX_STRIPS: int = 5_000
"""Upper bound on candidate strips before a configuration is rejected."""

DEFAULT_MAX_PHOTOS: int = 250_000
"""Upper bound on estimated photo points before a request is rejected."""

DEFAULT_SCAN_LINE_HALF_LENGTH_M: float = 20_000.0
"""Minimum reach of a scan line on either side of the survey centre."""

# ---------------------------------------------------------------------------
# Elevation lookups
# ---------------------------------------------------------------------------

OPEN_ELEVATION_ENDPOINT: str = "https://api.open-elevation.com/api/v1/lookup"
DEFAULT_ELEVATION_BATCH_SIZE: int = 500
DEFAULT_ELEVATION_TIMEOUT_S: float = 12.0
