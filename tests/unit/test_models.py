"""Tests for the planner value types.

Covers camera parsing, flight-option validation and normalisation, and
the camelCase serialisation consumed by renderers and exporters.
"""

from __future__ import annotations

import pytest

from survey_planner.core.config import PlannerConfig
from survey_planner.core.exceptions import InvalidOptionError
from survey_planner.models import (
    AltitudePoint,
    CameraModel,
    FlightOptions,
    Footprint,
    MissionContext,
    PhotoPoint,
    StripLine,
    SummaryStats,
    SurveyPlan,
)


class TestCameraModel:
    def test_from_dict_accepts_camel_case(self) -> None:
        cam = CameraModel.from_dict(
            {
                "sensorWidth_px": 4000,
                "sensorHeight_px": 3000,
                "pixelSize_um": 4.4,
                "focalLength_mm": 25,
                "model": "ignored",
            }
        )
        assert cam == CameraModel(4000, 3000, 4.4, 25)

    def test_from_dict_accepts_snake_case(self) -> None:
        cam = CameraModel.from_dict({"sensor_width_px": "4000", "focal_length_mm": 8.8})
        assert cam.sensor_width_px == 4000.0
        assert cam.focal_length_mm == 8.8
        assert cam.sensor_height_px == 0.0

    def test_none_becomes_zero(self) -> None:
        cam = CameraModel(sensor_width_px=None)  # type: ignore[arg-type]
        assert cam.sensor_width_px == 0.0

    def test_physical_sizes(self) -> None:
        cam = CameraModel(4000, 3000, 4.4, 25)
        assert cam.sensor_width_m == pytest.approx(0.0176)
        assert cam.sensor_height_m == pytest.approx(0.0132)
        assert cam.focal_length_m == pytest.approx(0.025)

    @pytest.mark.parametrize("bad", ["wide", -1.0, float("nan")])
    def test_invalid_values_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidOptionError):
            CameraModel(sensor_width_px=bad)  # type: ignore[arg-type]


class TestFootprint:
    def test_spacings(self) -> None:
        fp = Footprint(width_m=70.4, height_m=52.8)
        assert fp.strip_spacing(0.6) == pytest.approx(28.16)
        assert fp.photo_spacing(0.7) == pytest.approx(15.84)


class TestFlightOptions:
    def test_defaults(self) -> None:
        opts = FlightOptions(height=100)
        assert opts.frontlap == 0.7
        assert opts.sidelap == 0.6
        assert opts.direction == 0.0
        assert opts.min_segment_length == 1.0

    @pytest.mark.parametrize(
        ("direction", "expected"),
        [(0, 0.0), (360, 0.0), (450, 90.0), (-90, 270.0), (725.5, 5.5)],
    )
    def test_direction_wraps(self, direction: float, expected: float) -> None:
        assert FlightOptions(height=100, direction=direction).direction == pytest.approx(expected)

    @pytest.mark.parametrize("field_name", ["frontlap", "sidelap"])
    @pytest.mark.parametrize("value", [1.0, 1.5, -0.1])
    def test_overlap_out_of_range(self, field_name: str, value: float) -> None:
        with pytest.raises(InvalidOptionError):
            FlightOptions(height=100, **{field_name: value})

    def test_zero_overlap_allowed(self) -> None:
        opts = FlightOptions(height=100, frontlap=0, sidelap=0)
        assert opts.frontlap == 0.0
        assert opts.sidelap == 0.0

    def test_negative_height_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            FlightOptions(height=-10)

    def test_zero_height_accepted(self) -> None:
        assert FlightOptions(height=0).height == 0.0

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(InvalidOptionError, match="direction"):
            FlightOptions(height=100, direction="north")  # type: ignore[arg-type]

    def test_from_dict_uses_config_defaults(self) -> None:
        cfg = PlannerConfig(default_frontlap=0.8, default_sidelap=0.5, min_segment_length_m=3.0)
        opts = FlightOptions.from_dict({"height": "120", "frontlap": None}, config=cfg)
        assert opts.height == 120.0
        assert opts.frontlap == 0.8
        assert opts.sidelap == 0.5
        assert opts.min_segment_length == 3.0

    def test_from_dict_accepts_camel_case(self) -> None:
        opts = FlightOptions.from_dict({"height": 80, "minSegmentLength": 10, "direction": 45})
        assert opts.min_segment_length == 10.0
        assert opts.direction == 45.0


class TestPlanSerialisation:
    def _plan(self) -> SurveyPlan:
        return SurveyPlan(
            photo_points=[PhotoPoint(lat=48.0, lng=11.0, strip_index=0, point_index=0)],
            strip_lines=[
                StripLine(id="0-0", coordinates=((11.0, 48.0), (11.0, 48.01)), length_m=1112.0)
            ],
            summary_stats=SummaryStats(
                area_ha=1.5, num_strips=1, num_photos=1, total_length_km=1.11, est_time_min=2
            ),
        )

    def test_plan_to_dict(self) -> None:
        data = self._plan().to_dict()
        assert data["photoPoints"] == [{"lat": 48.0, "lng": 11.0, "stripIndex": 0, "pointIndex": 0}]
        assert data["stripLines"] == [{"id": "0-0", "coordinates": [[11.0, 48.0], [11.0, 48.01]]}]
        assert data["summaryStats"] == {
            "areaHa": 1.5,
            "numStrips": 1,
            "numPhotos": 1,
            "totalLengthKm": 1.11,
            "estTimeMin": 2,
        }

    def test_empty_plan_has_zero_stats(self) -> None:
        assert SurveyPlan().summary_stats == SummaryStats(0.0, 0, 0, 0.0, 0)

    def test_mission_context_to_dict(self) -> None:
        plan = self._plan()
        ctx = MissionContext(
            plan=plan,
            flight_height=100.0,
            photo_altitudes=[AltitudePoint(48.0, 11.0, 500.0, 600.0)],
            strip_altitudes={
                "0-0": [AltitudePoint(48.0, 11.0, 500.0, 600.0), AltitudePoint(48.01, 11.0, 510.0, 610.0)]
            },
            elevation_source="flat",
        )
        data = ctx.to_dict()
        assert data["photoPoints"][0]["absoluteAltitude"] == 600.0  # type: ignore[index]
        assert data["stripLines"][0]["points"][1]["elevation"] == 510.0  # type: ignore[index]
        assert data["elevationSource"] == "flat"
