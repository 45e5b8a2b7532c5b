# =============================================================================
# iss_core/models.py  -  Data Models
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# from a lookup back to a tool.  They carry almost no behavior: conversion to
# and from the wire shape, nothing else.
#
# TWO KINDS OF MODEL LIVE HERE:
#   - ScheduleRecord: one row of the crew schedule CSV.  The CSV header names
#     ("Crew Member", "Shift Start (UTC)", ...) are the public field names of
#     the structured output, so the model knows how to map itself back to them.
#   - AnswerBox / WeatherReading: the weather lookup.  SerpAPI's response is
#     dynamically shaped, so AnswerBox holds only the fields we read, all of
#     them optional, and WeatherReading is produced only after every field
#     has been checked for presence.
# =============================================================================

import math
from dataclasses import dataclass
from typing import Any, Optional

# -----------------------------------------------------------------------------
# Crew schedule
# -----------------------------------------------------------------------------
# Column order here is the order of the CSV header and of the structured
# record.  "Notes" is the only optional column.
# -----------------------------------------------------------------------------
SCHEDULE_COLUMNS: tuple[str, ...] = (
    "Date",
    "Day",
    "Crew Member",
    "Role",
    "Shift Start (UTC)",
    "Shift End (UTC)",
    "Activity",
    "Location",
)
NOTES_COLUMN = "Notes"


@dataclass(frozen=True)
class ScheduleRecord:
    """One crew member's shift on one day."""

    date: str                          # "2025-10-06"
    day: str                           # "Monday"
    crew_member: str                   # "Jane Doe"
    role: str                          # "Flight Engineer"
    shift_start: str                   # "06:00"
    shift_end: str                     # "14:00"
    activity: str                      # "EVA preparation"
    location: str                      # "Quest Airlock"
    notes: Optional[str] = None        # Free text; empty cells become None

    @classmethod
    def from_row(cls, row: dict[str, str]) -> "ScheduleRecord":
        """Build a record from a csv.DictReader row keyed by header name."""
        return cls(
            date=row["Date"],
            day=row["Day"],
            crew_member=row["Crew Member"],
            role=row["Role"],
            shift_start=row["Shift Start (UTC)"],
            shift_end=row["Shift End (UTC)"],
            activity=row["Activity"],
            location=row["Location"],
            notes=row.get(NOTES_COLUMN) or None,
        )

    def to_row(self) -> dict[str, str]:
        """Return the record keyed by CSV header, as exposed to callers."""
        row = {
            "Date": self.date,
            "Day": self.day,
            "Crew Member": self.crew_member,
            "Role": self.role,
            "Shift Start (UTC)": self.shift_start,
            "Shift End (UTC)": self.shift_end,
            "Activity": self.activity,
            "Location": self.location,
        }
        if self.notes:
            row[NOTES_COLUMN] = self.notes
        return row


# -----------------------------------------------------------------------------
# Weather
# -----------------------------------------------------------------------------
# NOT_FOUND is the sentinel the weather tool reports when the search
# succeeded but carried no usable answer box.  It is a normal result.
# -----------------------------------------------------------------------------
NOT_FOUND = "not found"


@dataclass(frozen=True)
class AnswerBox:
    """The subset of SerpAPI's ``answer_box`` that the weather tool reads.

    Every field is optional: SerpAPI only fills the weather answer box for
    queries Google recognises as weather questions, and even then the fields
    vary by locale.
    """

    temperature: Optional[float] = None
    wind: Optional[str] = None
    precipitation: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["AnswerBox"]:
        """Extract the answer box from a raw SerpAPI response.

        Returns None when the response has no ``answer_box`` object at all.
        """
        if not isinstance(payload, dict):
            return None
        box = payload.get("answer_box")
        if not isinstance(box, dict):
            return None
        return cls(
            temperature=_as_number(box.get("temperature")),
            wind=_as_text(box.get("wind")),
            precipitation=_as_text(box.get("precipitation")),
        )

    def to_reading(self) -> Optional["WeatherReading"]:
        """Project to a WeatherReading, or None if any required field is absent."""
        if self.temperature is None or self.wind is None or self.precipitation is None:
            return None
        return WeatherReading(
            temperature=self.temperature,
            winds=self.wind,
            precipitation=self.precipitation,
        )


@dataclass(frozen=True)
class WeatherReading:
    """The weather tool's success payload."""

    temperature: float                 # Degrees Fahrenheit (gl=us, hl=en)
    winds: str                         # "8 mph"
    precipitation: str                 # "10%"


def _as_number(value: Any) -> Optional[float]:
    # SerpAPI returns temperatures as strings ("72"); bools are not numbers.
    # NaN and infinities have no JSON number form, so they count as absent.
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
