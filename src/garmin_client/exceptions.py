"""Errors raised while talking to Garmin Connect."""

from __future__ import annotations


class GarminClientError(Exception):
    """Base for every garmin_client failure."""


class GarminAuthError(GarminClientError):
    """Login or token resume failed."""


class GarminMFARequired(GarminAuthError):
    """Garmin asked for an MFA code and no prompt was available."""


class GarminAPIError(GarminClientError):
    """An upload, schedule or delete call was rejected."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GarminRateLimitError(GarminAPIError):
    """HTTP 429 persisted through every retry."""

    def __init__(self, message: str = "Rate limited by Garmin Connect") -> None:
        super().__init__(message, status_code=429)
