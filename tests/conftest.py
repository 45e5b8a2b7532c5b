"""Pytest configuration and fixtures."""

import csv
from pathlib import Path

import pytest

from iss_core.config import Settings

HEADER = [
    "Date",
    "Day",
    "Crew Member",
    "Role",
    "Shift Start (UTC)",
    "Shift End (UTC)",
    "Activity",
    "Location",
    "Notes",
]

SAMPLE_ROWS = [
    ["2025-10-06", "Monday", "Jane Doe", "Commander", "06:00", "14:00",
     "Systems checkout", "Node 2 (Harmony)", ""],
    ["2025-10-06", "Monday", "Alexei Petrov", "Flight Engineer", "07:00", "15:00",
     "Filter swap", "Node 3 (Tranquility)", "Coordinate with ground"],
    ["2025-10-07", "Tuesday", "Jane Doe", "Commander", "06:00", "14:00",
     "EVA suit fit check", "Quest Airlock", "Suit 3011 only"],
    ["2025-10-08", "Wednesday", "John Janeway", "Mission Specialist", "08:00", "16:00",
     "Exercise", "Node 1 (Unity)", ""],
]


@pytest.fixture
def write_schedule(tmp_path):
    """Return a function writing rows (under HEADER by default) to a temp CSV."""

    def _write(rows, header=HEADER, name="iss_schedule.csv") -> Path:
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def schedule_csv(write_schedule):
    """A schedule with four rows across three days."""
    return write_schedule(SAMPLE_ROWS)


@pytest.fixture
def settings():
    """Settings with a fake key pointing at a fake endpoint."""
    return Settings(
        serpapi_key="test-key-123",
        serpapi_endpoint="https://serpapi.test/search.json",
        serpapi_timeout=2.0,
    )
