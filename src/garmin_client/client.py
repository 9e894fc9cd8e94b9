"""Garmin Connect facade for workout upload and calendar scheduling.

garminconnect covers the workout library; calendar entries go through the
underlying garth session since the library has no schedule endpoint.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from garmin_client.auth import DEFAULT_TOKEN_DIR, create_session
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError

logger = logging.getLogger(__name__)

_SCHEDULE_PATH = "/workout-service/schedule/{}"
_MAX_ATTEMPTS = 3
_BACKOFF_BASE_S = 2


def _status_of(exc: Exception) -> Optional[int]:
    return getattr(exc, "status", None) or getattr(exc, "status_code", None)


def _schedule_id(resp: Any) -> Optional[int]:
    # garth.post returns the raw response
    if not isinstance(resp, dict) and hasattr(resp, "json"):
        try:
            resp = resp.json()
        except ValueError:
            return None
    if not isinstance(resp, dict):
        return None
    value = resp.get("workoutScheduleId") or resp.get("scheduleId")
    return int(value) if value is not None else None


class GarminClient:
    """Upload, schedule, list and delete workouts on Garmin Connect."""

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token_dir: Path | str = DEFAULT_TOKEN_DIR,
        prompt_mfa: Optional[Callable[[], str]] = None,
    ) -> None:
        self._garmin = create_session(
            email=email or "",
            password=password or "",
            token_dir=token_dir,
            prompt_mfa=prompt_mfa,
        )

    # -- workout library ------------------------------------------------

    def upload_workout(self, workout_json: dict) -> int:
        """Create a workout from its JSON payload and return its workoutId."""
        resp = self._request("upload", self._garmin.upload_workout, workout_json)
        if not (isinstance(resp, dict) and "workoutId" in resp):
            raise GarminAPIError(f"Unexpected upload response: {resp}")
        workout_id = int(resp["workoutId"])
        logger.info("Uploaded %r as workout %d", workout_json.get("workoutName"), workout_id)
        return workout_id

    def get_workouts(self, limit: int = 100) -> list[dict]:
        return self._request("list", self._garmin.get_workouts, 0, limit) or []

    def delete_workout(self, workout_id: int) -> None:
        self._request("delete", self._garmin.delete_workout, workout_id)
        logger.info("Deleted workout %d", workout_id)

    # -- calendar -------------------------------------------------------

    def schedule_workout(self, workout_id: int, target_date: date) -> Optional[int]:
        """Put an uploaded workout on the calendar for *target_date*.

        Returns the calendar entry id, or None when the response has none.
        """
        resp = self._request(
            "schedule",
            self._garmin.garth.post,
            "connectapi",
            _SCHEDULE_PATH.format(workout_id),
            json={"date": target_date.isoformat()},
            api=True,
        )
        logger.info("Workout %d on the calendar for %s", workout_id, target_date)
        return _schedule_id(resp)

    def unschedule_workout(self, schedule_id: int) -> None:
        """Drop a calendar entry. The workout stays in the library."""
        self._request(
            "unschedule",
            self._garmin.garth.request,
            "DELETE",
            "connectapi",
            _SCHEDULE_PATH.format(schedule_id),
            api=True,
        )
        logger.info("Calendar entry %d removed", schedule_id)

    # -- plumbing -------------------------------------------------------

    def _request(self, action: str, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Run one Garmin call, backing off while the server answers 429."""
        for attempt in range(1, _MAX_ATTEMPTS + 1):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                status = _status_of(exc)
                if status != 429:
                    raise GarminAPIError(f"Garmin {action} failed: {exc}", status_code=status) from exc
                if attempt == _MAX_ATTEMPTS:
                    raise GarminRateLimitError(
                        f"Garmin {action} still rate limited after {_MAX_ATTEMPTS} attempts"
                    ) from exc
                delay = _BACKOFF_BASE_S * 2 ** (attempt - 1)
                logger.warning(
                    "Garmin %s rate limited (attempt %d/%d), waiting %ds",
                    action, attempt, _MAX_ATTEMPTS, delay,
                )
                time.sleep(delay)
