"""Elevation provider factory that selects the active provider by name.

The factory maintains a registry of known adapters.  New adapters are
registered with ``register_provider``.

Usage::

    from survey_planner.elevation.factory import get_provider

    provider = get_provider("open_elevation", config)
    elevations = provider.lookup(points)

The provider name is normally read from ``PlannerConfig.elevation_provider``
(``ELEVATION_PROVIDER`` environment variable).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from survey_planner.core.config import PlannerConfig
from survey_planner.elevation.base import ElevationProvider, ElevationProviderError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Provider name constants
# ---------------------------------------------------------------------------

OPEN_ELEVATION = "open_elevation"
FLAT = "flat"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps a provider name to a callable that builds the adapter
# from configuration.  Imports are lazy so httpx is only loaded when the
# HTTP adapter is selected.

_ADAPTER_REGISTRY: dict[str, Callable[[PlannerConfig], ElevationProvider]] = {}


def _register_builtin_adapters() -> None:
    """Register the built-in elevation adapters."""

    def _open_elevation(config: PlannerConfig) -> ElevationProvider:
        from survey_planner.elevation.open_elevation import OpenElevationProvider

        return OpenElevationProvider(
            endpoint=config.elevation_endpoint,
            batch_size=config.elevation_batch_size,
            timeout_s=config.elevation_timeout_s,
        )

    def _flat(config: PlannerConfig) -> ElevationProvider:
        from survey_planner.elevation.flat import FlatElevationProvider

        return FlatElevationProvider()

    _ADAPTER_REGISTRY[OPEN_ELEVATION] = _open_elevation
    _ADAPTER_REGISTRY[FLAT] = _flat


def _ensure_registry() -> None:
    """Initialise the adapter registry once (idempotent)."""
    if not _ADAPTER_REGISTRY:
        _register_builtin_adapters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_provider(
    name: str,
    builder: Callable[[PlannerConfig], ElevationProvider],
) -> None:
    """Register a custom elevation adapter.

    Args:
        name: Provider name (e.g. ``"srtm_local"``).
        builder: A callable taking a ``PlannerConfig`` and returning the adapter.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Provider name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _ADAPTER_REGISTRY[name] = builder
    logger.debug("Registered elevation provider: %s", name)


def get_provider(
    name: str | None = None,
    config: PlannerConfig | None = None,
) -> ElevationProvider:
    """Create and return an elevation provider instance.

    Args:
        name: Provider identifier; defaults to ``config.elevation_provider``.
        config: Optional ``PlannerConfig``; defaults to ``PlannerConfig()``.

    Raises:
        ElevationProviderError: If the named provider is not registered.
    """
    _ensure_registry()
    config = config or PlannerConfig()
    name = name or config.elevation_provider

    builder = _ADAPTER_REGISTRY.get(name)
    if builder is None:
        available = ", ".join(sorted(_ADAPTER_REGISTRY))
        msg = f"Unknown elevation provider: {name!r}. Available: {available}"
        raise ElevationProviderError(msg)

    logger.info("Creating elevation provider: %s", name)
    return builder(config)


def list_providers() -> list[str]:
    """Return the names of all registered elevation adapters."""
    _ensure_registry()
    return sorted(_ADAPTER_REGISTRY)
