"""Data models and schemas.

Defines the immutable values exchanged by the planner:
- SurveyArea: validated survey polygon
- CameraModel / Footprint: sensor optics and derived ground footprint
- FlightOptions: per-request flight parameters
- PhotoPoint / StripLine / SummaryStats / SurveyPlan: planning output
- AltitudePoint / MissionContext: plan annotated with terrain elevation
"""

from survey_planner.models.area import SurveyArea
from survey_planner.models.camera import CameraModel, Footprint
from survey_planner.models.mission import AltitudePoint, MissionContext
from survey_planner.models.options import FlightOptions
from survey_planner.models.plan import PhotoPoint, StripLine, SummaryStats, SurveyPlan

__all__ = [
    "AltitudePoint",
    "CameraModel",
    "FlightOptions",
    "Footprint",
    "MissionContext",
    "PhotoPoint",
    "StripLine",
    "SummaryStats",
    "SurveyArea",
    "SurveyPlan",
]
