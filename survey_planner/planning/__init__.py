"""Survey planning stages.

- footprint: ground footprint from camera optics and height
- normalize: rotate the survey polygon into the flight-direction frame
- strips: lay out and clip candidate scan lines
- photos: sample photo points along accepted segments
- summary: area, counts, length and flight-time estimate
- pipeline: ``plan_survey`` entry point tying the stages together
"""

from survey_planner.planning.footprint import compute_footprint
from survey_planner.planning.pipeline import plan_survey

__all__ = ["compute_footprint", "plan_survey"]
