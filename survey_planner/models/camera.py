"""Data models for camera optics and the derived ground footprint.

A ``CameraModel`` describes the sensor and lens; a ``Footprint`` is the
ground area one photo covers at a given flight height.  Both are plain
immutable values: the footprint is computed per planning call and never
cached on the camera.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from survey_planner.core.constants import METRES_PER_MICROMETRE, METRES_PER_MILLIMETRE
from survey_planner.core.exceptions import InvalidOptionError

# External (camelCase) field names accepted by ``CameraModel.from_dict``.
_CAMEL_CASE_KEYS = {
    "sensorWidth_px": "sensor_width_px",
    "sensorHeight_px": "sensor_height_px",
    "pixelSize_um": "pixel_size_um",
    "focalLength_mm": "focal_length_mm",
}
_FIELD_NAMES = ("sensor_width_px", "sensor_height_px", "pixel_size_um", "focal_length_mm")


@dataclass(frozen=True, slots=True)
class CameraModel:
    """Sensor geometry and lens of the survey camera.

    Every field is optional on input and defaults to ``0.0``; a zero
    value is only rejected when the footprint is derived.

    Attributes:
        sensor_width_px: Sensor width in pixels (across-track).
        sensor_height_px: Sensor height in pixels (along-track).
        pixel_size_um: Pixel pitch in micrometres.
        focal_length_mm: Focal length in millimetres.
    """

    sensor_width_px: float = 0.0
    sensor_height_px: float = 0.0
    pixel_size_um: float = 0.0
    focal_length_mm: float = 0.0

    def __post_init__(self) -> None:
        for name in _FIELD_NAMES:
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, 0.0)
                continue
            try:
                number = float(value)
            except (TypeError, ValueError) as exc:
                msg = f"Camera field {name} must be numeric, got {value!r}"
                raise InvalidOptionError(msg, stage="camera") from exc
            if not math.isfinite(number) or number < 0:
                msg = f"Camera field {name} must be a finite value >= 0, got {value!r}"
                raise InvalidOptionError(msg, stage="camera")
            object.__setattr__(self, name, number)

    @property
    def pixel_size_m(self) -> float:
        """Pixel pitch in metres."""
        return self.pixel_size_um * METRES_PER_MICROMETRE

    @property
    def focal_length_m(self) -> float:
        """Focal length in metres."""
        return self.focal_length_mm * METRES_PER_MILLIMETRE

    @property
    def sensor_width_m(self) -> float:
        """Physical sensor width in metres."""
        return self.sensor_width_px * self.pixel_size_m

    @property
    def sensor_height_m(self) -> float:
        """Physical sensor height in metres."""
        return self.sensor_height_px * self.pixel_size_m

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CameraModel:
        """Build a camera from a request payload.

        Accepts both the snake_case field names and the camelCase names
        used by drone profile payloads (``sensorWidth_px`` etc.).
        Missing fields default to ``0.0``.
        """
        values: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _CAMEL_CASE_KEYS.get(key, key)
            if field_name in _FIELD_NAMES:
                values[field_name] = value
        return cls(**values)


@dataclass(frozen=True, slots=True)
class Footprint:
    """Ground footprint of one photo in metres.

    Attributes:
        width_m: Across-track ground width.
        height_m: Along-track ground height.
    """

    width_m: float
    height_m: float

    def strip_spacing(self, sidelap: float) -> float:
        """Distance between adjacent strips for the given sidelap."""
        return self.width_m * (1.0 - sidelap)

    def photo_spacing(self, frontlap: float) -> float:
        """Distance between consecutive photos for the given frontlap."""
        return self.height_m * (1.0 - frontlap)
