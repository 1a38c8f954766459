"""Data model for per-request flight options.

Heights and lengths are metres, overlaps are fractions and the
direction is a compass bearing in degrees (0 = north), normalised into
``[0, 360)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from survey_planner.core.constants import (
    DEFAULT_DIRECTION_DEG,
    DEFAULT_FRONTLAP,
    DEFAULT_MIN_SEGMENT_LENGTH_M,
    DEFAULT_SIDELAP,
)
from survey_planner.core.exceptions import InvalidOptionError

if TYPE_CHECKING:
    from survey_planner.core.config import PlannerConfig

_CAMEL_CASE_KEYS = {"minSegmentLength": "min_segment_length"}


@dataclass(frozen=True, slots=True)
class FlightOptions:
    """Flight parameters for one planning call.

    A zero ``height`` is accepted here and rejected when the footprint
    is derived, so that every missing optic or height parameter surfaces
    as the same ``MissingParameterError``.

    Attributes:
        height: Flight height above ground in metres.
        frontlap: Along-track overlap fraction in ``[0, 1)``.
        sidelap: Across-track overlap fraction in ``[0, 1)``.
        direction: Flight direction in degrees, normalised mod 360.
        min_segment_length: Segments shorter than this (metres) get no photos.
    """

    height: float = 0.0
    frontlap: float = DEFAULT_FRONTLAP
    sidelap: float = DEFAULT_SIDELAP
    direction: float = DEFAULT_DIRECTION_DEG
    min_segment_length: float = DEFAULT_MIN_SEGMENT_LENGTH_M

    def __post_init__(self) -> None:
        height = _as_float("height", self.height)
        frontlap = _as_float("frontlap", self.frontlap)
        sidelap = _as_float("sidelap", self.sidelap)
        direction = _as_float("direction", self.direction)
        min_segment_length = _as_float("min_segment_length", self.min_segment_length)

        if height < 0:
            msg = f"Flight height must be >= 0 metres, got {height}"
            raise InvalidOptionError(msg)
        for name, value in (("frontlap", frontlap), ("sidelap", sidelap)):
            if not 0.0 <= value < 1.0:
                msg = f"{name} must be a fraction in [0, 1), got {value}"
                raise InvalidOptionError(msg)
        if min_segment_length < 0:
            msg = f"min_segment_length must be >= 0 metres, got {min_segment_length}"
            raise InvalidOptionError(msg)

        object.__setattr__(self, "height", height)
        object.__setattr__(self, "frontlap", frontlap)
        object.__setattr__(self, "sidelap", sidelap)
        object.__setattr__(self, "direction", direction % 360.0)
        object.__setattr__(self, "min_segment_length", min_segment_length)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        config: PlannerConfig | None = None,
    ) -> FlightOptions:
        """Build options from a request payload.

        Missing or ``None`` values fall back to the configured defaults
        (or the module defaults when no config is given).
        """
        defaults: dict[str, float] = {
            "height": 0.0,
            "frontlap": config.default_frontlap if config else DEFAULT_FRONTLAP,
            "sidelap": config.default_sidelap if config else DEFAULT_SIDELAP,
            "direction": DEFAULT_DIRECTION_DEG,
            "min_segment_length": (
                config.min_segment_length_m if config else DEFAULT_MIN_SEGMENT_LENGTH_M
            ),
        }
        values: dict[str, Any] = dict(defaults)
        for key, value in data.items():
            field_name = _CAMEL_CASE_KEYS.get(key, key)
            if field_name in defaults and value is not None:
                values[field_name] = value
        return cls(**values)


def _as_float(name: str, value: object) -> float:
    """Coerce an option to a finite float or raise ``InvalidOptionError``."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Flight option {name} must be numeric, got {value!r}"
        raise InvalidOptionError(msg) from exc
    if not math.isfinite(number):
        msg = f"Flight option {name} must be finite, got {value!r}"
        raise InvalidOptionError(msg)
    return number
