"""Open-Elevation adapter.

Posts locations to an Open-Elevation compatible ``/api/v1/lookup``
endpoint in fixed-size batches using ``httpx``.

Degradation rules:
- Points with non-finite coordinates are not sent and get ``0.0``.
- A batch that fails (HTTP error, timeout, malformed payload) gets
  ``0.0`` for every point in it; later batches still run.
- A non-numeric ``elevation`` in an otherwise valid result gets ``0.0``.

No retries are attempted; the caller decides whether to re-run.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

import httpx

from survey_planner.core.constants import (
    DEFAULT_ELEVATION_BATCH_SIZE,
    DEFAULT_ELEVATION_TIMEOUT_S,
    OPEN_ELEVATION_ENDPOINT,
)
from survey_planner.elevation.base import ElevationLookupError, ElevationProvider

logger = logging.getLogger(__name__)


class OpenElevationProvider(ElevationProvider):
    """Elevation lookups against the Open-Elevation API."""

    name = "open_elevation"

    def __init__(
        self,
        *,
        endpoint: str = OPEN_ELEVATION_ENDPOINT,
        batch_size: int = DEFAULT_ELEVATION_BATCH_SIZE,
        timeout_s: float = DEFAULT_ELEVATION_TIMEOUT_S,
        client: httpx.Client | None = None,
    ) -> None:
        if batch_size < 1:
            msg = f"batch_size must be >= 1, got {batch_size}"
            raise ValueError(msg)
        self.endpoint = endpoint
        self.batch_size = batch_size
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_s)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def lookup(self, points: Sequence[tuple[float, float]]) -> list[float]:
        if not points:
            return []

        valid_indices = [
            idx
            for idx, (lat, lng) in enumerate(points)
            if isinstance(lat, int | float)
            and isinstance(lng, int | float)
            and math.isfinite(lat)
            and math.isfinite(lng)
        ]
        skipped = len(points) - len(valid_indices)
        if skipped:
            logger.warning("Skipping %d invalid point(s) in elevation lookup", skipped)

        elevations = [0.0] * len(points)
        total = len(valid_indices)
        for start in range(0, total, self.batch_size):
            batch_indices = valid_indices[start : start + self.batch_size]
            batch = [points[i] for i in batch_indices]
            try:
                values = self._fetch_batch(batch)
            except (httpx.HTTPError, ElevationLookupError) as exc:
                logger.error(
                    "Elevation batch %d-%d of %d failed, using zeros: %s",
                    start,
                    start + len(batch),
                    total,
                    exc,
                )
                continue
            for idx, value in zip(batch_indices, values, strict=True):
                elevations[idx] = value
            logger.debug(
                "Elevation lookup progress %d/%d", min(start + self.batch_size, total), total
            )

        return elevations

    def _fetch_batch(self, batch: list[tuple[float, float]]) -> list[float]:
        """POST one batch and return its elevations, aligned to *batch*.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses.
            ElevationLookupError: If the payload has no usable ``results``.
        """
        payload = {"locations": [{"latitude": lat, "longitude": lng} for lat, lng in batch]}
        response = self._client.post(
            self.endpoint,
            json=payload,
            headers={"Accept": "application/json"},
        )
        response.raise_for_status()

        try:
            data: Any = response.json()
        except ValueError as exc:
            msg = f"Elevation response is not JSON: {exc}"
            raise ElevationLookupError(msg) from exc

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list) or len(results) != len(batch):
            msg = f"Unexpected elevation payload for {len(batch)} location(s): {data!r:.200}"
            raise ElevationLookupError(msg)

        return [_elevation_value(result) for result in results]


def _elevation_value(result: object) -> float:
    value = result.get("elevation") if isinstance(result, dict) else None
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return 0.0
    return float(value)
