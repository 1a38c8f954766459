"""Ground footprint of one photo.

``footprint = height × physical sensor size / focal length`` for each
sensor axis, where the physical size is pixel count × pixel pitch.
"""

from __future__ import annotations

import logging

from survey_planner.core.exceptions import MissingParameterError
from survey_planner.models.camera import CameraModel, Footprint

logger = logging.getLogger("survey_planner.planning.footprint")


def compute_footprint(camera: CameraModel, height: float) -> Footprint:
    """Derive the ground footprint for *camera* flown at *height* metres.

    Raises:
        MissingParameterError: If any pixel count, the pixel pitch, the
            focal length or the height is missing or zero.
    """
    sensor_w_m = camera.sensor_width_m
    sensor_h_m = camera.sensor_height_m
    focal_m = camera.focal_length_m

    if not sensor_w_m or not sensor_h_m or not focal_m or not height:
        missing = [
            name
            for name, value in (
                ("sensor_width_px", camera.sensor_width_px),
                ("sensor_height_px", camera.sensor_height_px),
                ("pixel_size_um", camera.pixel_size_um),
                ("focal_length_mm", camera.focal_length_mm),
                ("height", height),
            )
            if not value
        ]
        msg = f"Missing sensor/pixel/focal/height parameters: {', '.join(missing)}"
        raise MissingParameterError(msg)

    footprint = Footprint(
        width_m=height * sensor_w_m / focal_m,
        height_m=height * sensor_h_m / focal_m,
    )
    logger.debug(
        "Footprint %.2f m x %.2f m at height %.1f m",
        footprint.width_m,
        footprint.height_m,
        height,
    )
    return footprint
