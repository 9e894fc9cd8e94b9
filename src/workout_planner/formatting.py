"""Human-readable formatting for durations and distances."""

from __future__ import annotations

from workout_planner.models.enums import LengthUnit


def format_duration(seconds: float) -> str:
    """Format a duration as ``m:ss``, or ``h:mm:ss`` from one hour up.

    The value is rounded to whole seconds first, so 269.6 s renders
    as ``4:30``.
    """
    total = int(round(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(value: float, unit: LengthUnit) -> str:
    """Format a distance with one decimal in its own unit, e.g. ``5.0 km``."""
    return f"{value:.1f} {unit.value}"
