"""Environment-variable-based configuration for the push CLI."""

from __future__ import annotations

import os
from pathlib import Path

from workout_planner.models.enums import DEFAULT_SCHEDULE_SPACING_MIN

STORE_PATH: Path = Path(os.environ.get("WORKOUT_STORE_PATH", "workouts.db")).expanduser()
GARMIN_EMAIL: str = os.environ.get("GARMIN_EMAIL", "")
GARMIN_PASSWORD: str = os.environ.get("GARMIN_PASSWORD", "")
TOKEN_DIR: Path = Path(os.environ.get("GARMIN_TOKEN_DIR", "~/.garminconnect")).expanduser()
SPACING_MIN: int = int(os.environ.get("SCHEDULE_SPACING_MIN", str(DEFAULT_SCHEDULE_SPACING_MIN)))
