"""
Pytest configuration for Trip Planner tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("A4F_API_KEY", "test-a4f-api-key")


def _make_http_response(status_code=200, json_data=None, text=""):
    """Build a MagicMock shaped like a requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def full_preferences():
    """Fully populated planner form submission."""
    from trip_planner.schemas.trips import TripPreferences

    return TripPreferences(
        destination="Netarhat",
        travel_date="2025-12-20",
        travellers="4",
        trip_type="adventure",
        budget="25000",
        hotel_nearby=True,
        best_places=True,
    )


@pytest.fixture
def empty_preferences():
    """Form submitted with every field left blank."""
    from trip_planner.schemas.trips import TripPreferences

    return TripPreferences()


@pytest.fixture
def make_http_response():
    """Factory for stubbed requests.Response objects."""
    return _make_http_response
