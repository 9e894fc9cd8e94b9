"""Fixtures with Garmin API response dicts and a mocked Garmin session."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from garmin_client.client import GarminClient


@pytest.fixture
def upload_response() -> dict:
    """Trimmed Garmin workout-service upload response."""
    return {
        "workoutId": 987654321,
        "ownerId": 1234567,
        "workoutName": "Leg Day - Cycling",
        "sportType": {"sportTypeId": 2, "sportTypeKey": "cycling", "displayOrder": 2},
        "createdDate": "2026-10-19T18:02:11.0",
    }


@pytest.fixture
def schedule_response() -> dict:
    """Trimmed Garmin workout-service schedule response."""
    return {
        "workoutScheduleId": 555001,
        "workout": {"workoutId": 987654321},
        "calendarDate": "2026-10-20",
    }


@pytest.fixture
def mock_garmin():
    mock = MagicMock()
    mock.garth = MagicMock()
    return mock


@pytest.fixture
def client(mock_garmin):
    """GarminClient backed by a mocked Garmin session."""
    with patch("garmin_client.client.create_session", return_value=mock_garmin):
        c = GarminClient(email="test@test.com", password="pass")
    return c
