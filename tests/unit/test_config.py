"""Tests for planner configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from survey_planner.core.config import ConfigValidationError, PlannerConfig
from survey_planner.core.constants import OPEN_ELEVATION_ENDPOINT


class TestPlannerConfigDefaults:
    """Verify default configuration values."""

    def test_default_overlaps(self) -> None:
        cfg = PlannerConfig()
        assert cfg.default_frontlap == 0.7
        assert cfg.default_sidelap == 0.6

    def test_default_min_segment_length(self) -> None:
        assert PlannerConfig().min_segment_length_m == 1.0

    def test_default_cruise_speed(self) -> None:
        assert PlannerConfig().cruise_speed_mps == 10.0

    def test_default_strip_limit(self) -> None:
        assert PlannerConfig().max_strips == 5_000

    def test_default_photo_limit(self) -> None:
        assert PlannerConfig().max_photos == 250_000

    def test_default_elevation_settings(self) -> None:
        cfg = PlannerConfig()
        assert cfg.elevation_provider == "open_elevation"
        assert cfg.elevation_endpoint == OPEN_ELEVATION_ENDPOINT
        assert cfg.elevation_batch_size == 500
        assert cfg.elevation_timeout_s == 12.0


class TestPlannerConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "SURVEY_DEFAULT_FRONTLAP": "0.8",
            "SURVEY_DEFAULT_SIDELAP": "0.5",
            "SURVEY_MIN_SEGMENT_LENGTH_M": "5",
            "SURVEY_CRUISE_SPEED_MPS": "12.5",
            "SURVEY_MAX_STRIPS": "200",
            "SURVEY_MAX_PHOTOS": "10000",
            "SURVEY_SCAN_LINE_HALF_LENGTH_M": "50000",
            "ELEVATION_PROVIDER": "flat",
            "ELEVATION_ENDPOINT": "http://localhost:8080/api/v1/lookup",
            "ELEVATION_BATCH_SIZE": "100",
            "ELEVATION_TIMEOUT_S": "3",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = PlannerConfig.from_env()

        assert cfg.default_frontlap == 0.8
        assert cfg.default_sidelap == 0.5
        assert cfg.min_segment_length_m == 5.0
        assert cfg.cruise_speed_mps == 12.5
        assert cfg.max_strips == 200
        assert cfg.max_photos == 10_000
        assert cfg.scan_line_half_length_m == 50_000.0
        assert cfg.elevation_provider == "flat"
        assert cfg.elevation_endpoint == "http://localhost:8080/api/v1/lookup"
        assert cfg.elevation_batch_size == 100
        assert cfg.elevation_timeout_s == 3.0

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = PlannerConfig.from_env()
        assert cfg == PlannerConfig()

    def test_non_numeric_value_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"SURVEY_MAX_STRIPS": "lots"}, clear=False),
            pytest.raises(ValueError),
        ):
            PlannerConfig.from_env()


class TestPlannerConfigValidation:
    """Fail-fast range validation."""

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("SURVEY_DEFAULT_FRONTLAP", "1.0"),
            ("SURVEY_DEFAULT_SIDELAP", "-0.1"),
            ("SURVEY_MIN_SEGMENT_LENGTH_M", "-1"),
            ("SURVEY_CRUISE_SPEED_MPS", "0"),
            ("SURVEY_MAX_STRIPS", "0"),
            ("SURVEY_MAX_PHOTOS", "0"),
            ("SURVEY_SCAN_LINE_HALF_LENGTH_M", "0"),
            ("ELEVATION_PROVIDER", ""),
            ("ELEVATION_BATCH_SIZE", "0"),
            ("ELEVATION_TIMEOUT_S", "-2"),
        ],
    )
    def test_out_of_range_rejected(self, key: str, value: str) -> None:
        with (
            patch.dict(os.environ, {key: value}, clear=False),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            PlannerConfig.from_env()
        assert exc_info.value.key == key

    def test_error_is_validation_category(self) -> None:
        err = ConfigValidationError("SURVEY_MAX_STRIPS", 0, "must be >= 1")
        assert err.category == "validation"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert "SURVEY_MAX_STRIPS=0" in str(err)

    def test_config_is_frozen(self) -> None:
        cfg = PlannerConfig()
        with pytest.raises(AttributeError):
            cfg.max_strips = 10  # type: ignore[misc]
