"""Unit tests for elevation providers, the factory and mission annotation.

HTTP traffic is served by ``httpx.MockTransport``; nothing leaves the
process.
"""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from survey_planner.core.config import PlannerConfig
from survey_planner.elevation import (
    ElevationProviderError,
    annotate_mission,
    factory,
    get_provider,
    list_providers,
    register_provider,
)
from survey_planner.elevation.flat import FlatElevationProvider
from survey_planner.elevation.open_elevation import OpenElevationProvider
from survey_planner.models import PhotoPoint, StripLine, SummaryStats, SurveyPlan


def _echo_handler(requests: list[dict[str, object]]):
    """Reply with ``elevation = latitude * 10`` and record each request body."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append(body)
        results = [
            {
                "latitude": loc["latitude"],
                "longitude": loc["longitude"],
                "elevation": loc["latitude"] * 10,
            }
            for loc in body["locations"]
        ]
        return httpx.Response(200, json={"results": results})

    return handler


def _provider(handler, batch_size: int = 500) -> OpenElevationProvider:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return OpenElevationProvider(
        endpoint="https://elevation.test/api/v1/lookup",
        batch_size=batch_size,
        client=client,
    )


POINTS = [(1.0, 10.0), (2.0, 20.0), (3.0, 30.0), (4.0, 40.0), (5.0, 50.0)]


# ---------------------------------------------------------------------------
# Open-Elevation adapter
# ---------------------------------------------------------------------------


class TestOpenElevationProvider:
    def test_batches_requests(self) -> None:
        requests: list[dict[str, object]] = []
        provider = _provider(_echo_handler(requests), batch_size=2)
        assert provider.lookup(POINTS) == [10.0, 20.0, 30.0, 40.0, 50.0]
        assert [len(r["locations"]) for r in requests] == [2, 2, 1]  # type: ignore[arg-type]
        assert requests[0]["locations"][0] == {"latitude": 1.0, "longitude": 10.0}  # type: ignore[index]

    def test_empty_input_makes_no_request(self) -> None:
        requests: list[dict[str, object]] = []
        assert _provider(_echo_handler(requests)).lookup([]) == []
        assert requests == []

    def test_failed_batch_degrades_to_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        calls = {"n": 0}
        echo = _echo_handler([])

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] == 2:
                return httpx.Response(503, text="busy")
            return echo(request)

        with caplog.at_level(logging.ERROR):
            values = _provider(handler, batch_size=2).lookup(POINTS)
        assert values == [10.0, 20.0, 0.0, 0.0, 50.0]
        assert "failed, using zeros" in caplog.text

    def test_transport_error_degrades_to_zero(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        assert _provider(handler).lookup(POINTS[:2]) == [0.0, 0.0]

    def test_malformed_payload_degrades_to_zero(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"results": [{"elevation": 1.0}]})

        assert _provider(handler).lookup(POINTS[:3]) == [0.0, 0.0, 0.0]

    def test_non_json_degrades_to_zero(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        assert _provider(handler).lookup(POINTS[:1]) == [0.0]

    def test_non_numeric_elevation_is_zero(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"results": [{"elevation": "high"}, {"elevation": None}, {"elevation": 7}]},
            )

        assert _provider(handler).lookup(POINTS[:3]) == [0.0, 0.0, 7.0]

    def test_invalid_points_not_sent(self) -> None:
        requests: list[dict[str, object]] = []
        provider = _provider(_echo_handler(requests))
        values = provider.lookup([(1.0, 10.0), (float("nan"), 20.0), (3.0, float("inf"))])
        assert values == [10.0, 0.0, 0.0]
        assert len(requests[0]["locations"]) == 1  # type: ignore[arg-type]

    def test_rejects_bad_batch_size(self) -> None:
        with pytest.raises(ValueError, match="batch_size"):
            OpenElevationProvider(batch_size=0)

    def test_borrowed_client_left_open(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(_echo_handler([])))
        with OpenElevationProvider(client=client):
            pass
        assert not client.is_closed
        client.close()


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestFactory:
    def test_builtin_providers(self) -> None:
        assert {"flat", "open_elevation"} <= set(list_providers())

    def test_flat_by_name(self) -> None:
        provider = get_provider("flat")
        assert isinstance(provider, FlatElevationProvider)
        assert provider.lookup(POINTS[:2]) == [0.0, 0.0]

    def test_default_from_config(self) -> None:
        provider = get_provider(config=PlannerConfig(elevation_provider="flat"))
        assert provider.name == "flat"

    def test_open_elevation_uses_config(self) -> None:
        cfg = PlannerConfig(elevation_endpoint="https://dem.test/lookup", elevation_batch_size=50)
        with get_provider("open_elevation", cfg) as provider:
            assert isinstance(provider, OpenElevationProvider)
            assert provider.endpoint == "https://dem.test/lookup"
            assert provider.batch_size == 50

    def test_unknown_provider(self) -> None:
        with pytest.raises(ElevationProviderError, match="Unknown elevation provider"):
            get_provider("srtm_tiles")

    def test_register_custom(self, monkeypatch: pytest.MonkeyPatch) -> None:
        list_providers()
        monkeypatch.setattr(factory, "_ADAPTER_REGISTRY", dict(factory._ADAPTER_REGISTRY))
        register_provider("sea_level", lambda cfg: FlatElevationProvider(elevation=0.0))
        assert "sea_level" in list_providers()
        assert isinstance(get_provider("sea_level"), FlatElevationProvider)

    def test_register_empty_name(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            register_provider("", lambda cfg: FlatElevationProvider())


# ---------------------------------------------------------------------------
# Mission annotation
# ---------------------------------------------------------------------------


class TestAnnotateMission:
    def _plan(self) -> SurveyPlan:
        return SurveyPlan(
            photo_points=[
                PhotoPoint(lat=48.0, lng=11.0, strip_index=0, point_index=0),
                PhotoPoint(lat=48.001, lng=11.0, strip_index=0, point_index=1),
            ],
            strip_lines=[
                StripLine(id="0-0", coordinates=((11.0, 48.0), (11.0, 48.002)), length_m=222.4)
            ],
            summary_stats=SummaryStats(1.0, 1, 2, 0.22, 1),
        )

    def test_flat_terrain(self) -> None:
        ctx = annotate_mission(self._plan(), FlatElevationProvider(elevation=520.0), 100.0)
        assert ctx.elevation_source == "flat"
        assert [a.absolute_altitude for a in ctx.photo_altitudes] == [620.0, 620.0]
        assert [a.elevation for a in ctx.strip_altitudes["0-0"]] == [520.0, 520.0]

    def test_queries_photos_then_strip_vertices(self) -> None:
        requests: list[dict[str, object]] = []
        ctx = annotate_mission(self._plan(), _provider(_echo_handler(requests)), 50.0)
        (body,) = requests
        lats = [loc["latitude"] for loc in body["locations"]]  # type: ignore[union-attr]
        assert lats == [48.0, 48.001, 48.0, 48.002]
        assert ctx.strip_altitudes["0-0"][1].lat == 48.002
        assert ctx.strip_altitudes["0-0"][1].lng == 11.0
        assert ctx.photo_altitudes[1].absolute_altitude == pytest.approx(480.01 + 50.0)

    def test_empty_plan(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            ctx = annotate_mission(SurveyPlan(), FlatElevationProvider(), 100.0)
        assert ctx.photo_altitudes == []
        assert ctx.strip_altitudes == {}
        assert "no points" in caplog.text

    def test_to_dict_merges_altitudes(self) -> None:
        ctx = annotate_mission(self._plan(), FlatElevationProvider(elevation=10.0), 100.0)
        data = ctx.to_dict()
        assert data["flightHeight"] == 100.0
        assert data["photoPoints"][0]["absoluteAltitude"] == 110.0  # type: ignore[index]
        assert len(data["stripLines"][0]["points"]) == 2  # type: ignore[index]
