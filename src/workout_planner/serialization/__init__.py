"""Serialization module — export plan units to device-compatible formats."""

from workout_planner.serialization.garmin import (
    sport_type_for,
    to_garmin_json,
    to_garmin_json_string,
)

__all__ = ["sport_type_for", "to_garmin_json", "to_garmin_json_string"]
