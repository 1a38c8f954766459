"""Terrain elevation lookup and altitude annotation.

Exports the provider contract, the factory and ``annotate_mission``,
which turns a ``SurveyPlan`` into a ``MissionContext`` with absolute
altitudes for exporters.
"""

from survey_planner.elevation.annotate import annotate_mission
from survey_planner.elevation.base import (
    ElevationLookupError,
    ElevationProvider,
    ElevationProviderError,
)
from survey_planner.elevation.factory import get_provider, list_providers, register_provider

__all__ = [
    "ElevationLookupError",
    "ElevationProvider",
    "ElevationProviderError",
    "annotate_mission",
    "get_provider",
    "list_providers",
    "register_provider",
]
