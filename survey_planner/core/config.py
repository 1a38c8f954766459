"""Planner configuration loaded from environment variables.

All configuration values have sensible defaults; environment variables
override them for deployments that plan with different conventions
(e.g. a slower survey aircraft or a self-hosted elevation service).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.  This catches bad configuration at
    startup instead of deep inside a planning call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from survey_planner.core.constants import (
    DEFAULT_CRUISE_SPEED_MPS,
    DEFAULT_ELEVATION_BATCH_SIZE,
    DEFAULT_ELEVATION_TIMEOUT_S,
    DEFAULT_FRONTLAP,
    DEFAULT_MAX_PHOTOS,
    DEFAULT_MAX_STRIPS,
    DEFAULT_MIN_SEGMENT_LENGTH_M,
    DEFAULT_SCAN_LINE_HALF_LENGTH_M,
    DEFAULT_SIDELAP,
    OPEN_ELEVATION_ENDPOINT,
)
from survey_planner.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class PlannerConfig:
    """Immutable planner configuration.

    Attributes:
        default_frontlap: Frontlap used when a request omits it.
        default_sidelap: Sidelap used when a request omits it.
        min_segment_length_m: Segments shorter than this get no photos.
        cruise_speed_mps: Cruise speed behind the flight-time estimate.
        max_strips: Candidate-strip ceiling before a request is rejected.
        max_photos: Estimated photo-point ceiling before a request is rejected.
        scan_line_half_length_m: Minimum scan-line reach either side of centre.
        elevation_provider: Active elevation provider (``open_elevation`` or ``flat``).
        elevation_endpoint: Lookup URL for the Open-Elevation adapter.
        elevation_batch_size: Locations per elevation request.
        elevation_timeout_s: Per-batch HTTP timeout in seconds.
    """

    default_frontlap: float = DEFAULT_FRONTLAP
    default_sidelap: float = DEFAULT_SIDELAP
    min_segment_length_m: float = DEFAULT_MIN_SEGMENT_LENGTH_M
    cruise_speed_mps: float = DEFAULT_CRUISE_SPEED_MPS
    max_strips: int = DEFAULT_MAX_STRIPS
    max_photos: int = DEFAULT_MAX_PHOTOS
    scan_line_half_length_m: float = DEFAULT_SCAN_LINE_HALF_LENGTH_M
    elevation_provider: str = "open_elevation"
    elevation_endpoint: str = OPEN_ELEVATION_ENDPOINT
    elevation_batch_size: int = DEFAULT_ELEVATION_BATCH_SIZE
    elevation_timeout_s: float = DEFAULT_ELEVATION_TIMEOUT_S

    @classmethod
    def from_env(cls) -> PlannerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range
                or a required string value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``SURVEY_MAX_STRIPS=abc``).
        """
        config = cls(
            default_frontlap=float(os.getenv("SURVEY_DEFAULT_FRONTLAP", str(DEFAULT_FRONTLAP))),
            default_sidelap=float(os.getenv("SURVEY_DEFAULT_SIDELAP", str(DEFAULT_SIDELAP))),
            min_segment_length_m=float(
                os.getenv("SURVEY_MIN_SEGMENT_LENGTH_M", str(DEFAULT_MIN_SEGMENT_LENGTH_M))
            ),
            cruise_speed_mps=float(
                os.getenv("SURVEY_CRUISE_SPEED_MPS", str(DEFAULT_CRUISE_SPEED_MPS))
            ),
            max_strips=int(os.getenv("SURVEY_MAX_STRIPS", str(DEFAULT_MAX_STRIPS))),
            max_photos=int(os.getenv("SURVEY_MAX_PHOTOS", str(DEFAULT_MAX_PHOTOS))),
            scan_line_half_length_m=float(
                os.getenv(
                    "SURVEY_SCAN_LINE_HALF_LENGTH_M", str(DEFAULT_SCAN_LINE_HALF_LENGTH_M)
                )
            ),
            elevation_provider=os.getenv("ELEVATION_PROVIDER", "open_elevation"),
            elevation_endpoint=os.getenv("ELEVATION_ENDPOINT", OPEN_ELEVATION_ENDPOINT),
            elevation_batch_size=int(
                os.getenv("ELEVATION_BATCH_SIZE", str(DEFAULT_ELEVATION_BATCH_SIZE))
            ),
            elevation_timeout_s=float(
                os.getenv("ELEVATION_TIMEOUT_S", str(DEFAULT_ELEVATION_TIMEOUT_S))
            ),
        )
        _validate(config)
        return config


def _validate(config: PlannerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not 0.0 <= config.default_frontlap < 1.0:
        raise ConfigValidationError(
            "SURVEY_DEFAULT_FRONTLAP",
            config.default_frontlap,
            "must be in [0, 1) (fraction)",
        )

    if not 0.0 <= config.default_sidelap < 1.0:
        raise ConfigValidationError(
            "SURVEY_DEFAULT_SIDELAP",
            config.default_sidelap,
            "must be in [0, 1) (fraction)",
        )

    if config.min_segment_length_m < 0:
        raise ConfigValidationError(
            "SURVEY_MIN_SEGMENT_LENGTH_M",
            config.min_segment_length_m,
            "must be >= 0 (metres)",
        )

    if config.cruise_speed_mps <= 0:
        raise ConfigValidationError(
            "SURVEY_CRUISE_SPEED_MPS",
            config.cruise_speed_mps,
            "must be > 0 (metres per second)",
        )

    if config.max_strips < 1:
        raise ConfigValidationError(
            "SURVEY_MAX_STRIPS",
            config.max_strips,
            "must be >= 1",
        )

    if config.max_photos < 1:
        raise ConfigValidationError(
            "SURVEY_MAX_PHOTOS",
            config.max_photos,
            "must be >= 1",
        )

    if config.scan_line_half_length_m <= 0:
        raise ConfigValidationError(
            "SURVEY_SCAN_LINE_HALF_LENGTH_M",
            config.scan_line_half_length_m,
            "must be > 0 (metres)",
        )

    if not config.elevation_provider:
        raise ConfigValidationError(
            "ELEVATION_PROVIDER",
            config.elevation_provider,
            "must not be empty",
        )

    if config.elevation_batch_size < 1:
        raise ConfigValidationError(
            "ELEVATION_BATCH_SIZE",
            config.elevation_batch_size,
            "must be >= 1",
        )

    if config.elevation_timeout_s <= 0:
        raise ConfigValidationError(
            "ELEVATION_TIMEOUT_S",
            config.elevation_timeout_s,
            "must be > 0 (seconds)",
        )
