"""Aerial photo-survey mission planner.

Turns a survey-area polygon plus camera optics and flight parameters
into parallel flight strips, evenly spaced photo-capture points, and
summary statistics for the mission.
"""

__version__ = "0.1.0"
