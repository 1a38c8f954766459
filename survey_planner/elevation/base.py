"""ElevationProvider abstract base class.

Defines the contract every terrain-elevation adapter implements.  The
altitude annotation step talks only to this interface and never knows
which concrete service is behind it.

Degraded results are part of the contract: a provider returns ``0.0``
for any point it cannot resolve instead of raising, so one failed
lookup batch never discards a whole mission.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence

from survey_planner.core.exceptions import PermanentError, TransientError


class ElevationProvider(abc.ABC):
    """Abstract base class for elevation lookup adapters.

    Example usage::

        provider = get_provider("open_elevation")
        elevations = provider.lookup([(48.1, 11.5), (48.2, 11.6)])
    """

    #: Registry name of the adapter.
    name: str = ""

    @abc.abstractmethod
    def lookup(self, points: Sequence[tuple[float, float]]) -> list[float]:
        """Return the ground elevation in metres for each ``(lat, lng)``.

        The result has exactly one entry per input point, in input
        order.  Points that cannot be resolved yield ``0.0``.
        """

    def close(self) -> None:
        """Release any resources held by the adapter."""

    def __enter__(self) -> ElevationProvider:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Elevation exceptions
# ---------------------------------------------------------------------------


class ElevationLookupError(TransientError):
    """A lookup request failed or returned an unusable payload."""

    default_stage = "elevation"
    default_code = "ELEVATION_LOOKUP_FAILED"


class ElevationProviderError(PermanentError):
    """The requested elevation provider is unknown or misconfigured."""

    default_stage = "elevation"
    default_code = "ELEVATION_PROVIDER_INVALID"
