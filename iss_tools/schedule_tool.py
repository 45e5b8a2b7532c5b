# =============================================================================
# iss_tools/schedule_tool.py  -  get-iss-schedule
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the ISS crew schedule (iss_core/schedule.py) as an MCP tool.
#   The tool reads the packaged CSV on every call, filters it, and returns
#   every matching shift as both a readable summary and the raw records.
#
# THE FLOW:
#   1. FastMCP validates {day?, name?} against the signature below
#   2. load_schedule() parses the CSV (fails fast if the file is missing)
#   3. filter_schedule() applies day, then name
#   4. Nothing matched  -> "no entries" envelope, results = []
#      Matches          -> one paragraph per record, results = the records
#      Anything raised  -> failure envelope with {"error": ...}
# =============================================================================

from pathlib import Path
from typing import Annotated, Any, Callable, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from iss_core.models import NOTES_COLUMN, SCHEDULE_COLUMNS, ScheduleRecord
from iss_core.schedule import filter_schedule, load_schedule
from iss_tools.responses import (
    envelope,
    failure,
    log_request,
    log_response,
    log_status,
    output_schema,
)

TOOL_NAME = "get-iss-schedule"
TOOL_TITLE = "Get ISS Crew Schedule"
TOOL_DESCRIPTION = (
    "Read the ISS crew schedule from a CSV file. "
    "Optionally filter by day or crew member name."
)
FAILURE_PHRASE = "Failed to read ISS schedule"

CREW_RECORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        **{column: {"type": "string"} for column in SCHEDULE_COLUMNS},
        NOTES_COLUMN: {"type": "string"},
    },
    "required": list(SCHEDULE_COLUMNS),
}

SCHEDULE_OUTPUT_SCHEMA = output_schema(
    {
        "type": "object",
        "properties": {"results": {"type": "array", "items": CREW_RECORD_SCHEMA}},
        "required": ["results"],
    }
)


# =============================================================================
# Text formatting
# =============================================================================
def format_record(record: ScheduleRecord) -> str:
    """One paragraph per shift: header, time range, activity, location, notes."""
    lines = [
        f"📅 **{record.day} ({record.date})** · {record.crew_member} ({record.role})",
        f"🕕 {record.shift_start} → {record.shift_end}",
        f"🔧 **Activity:** {record.activity}",
        f"📍 {record.location}",
    ]
    if record.notes:
        lines.append(f"📝 {record.notes}")
    return "\n".join(lines)


def format_schedule(records: list[ScheduleRecord]) -> str:
    summary = "\n\n---\n\n".join(format_record(r) for r in records)
    return f"🛰️ **ISS Crew Schedule** ({len(records)} entries)\n\n{summary}"


def format_no_results(day: Optional[str], name: Optional[str]) -> str:
    return (
        f'No schedule entries found for filters: '
        f'day="{day or "any"}", name="{name or "any"}"'
    )


# =============================================================================
# Handler
# =============================================================================
def make_schedule_handler(path: Optional[Path] = None) -> Callable[..., ToolResult]:
    """Build the get-iss-schedule handler.

    Args:
        path: CSV to read.  Defaults to the schedule packaged with iss_core.
    """

    def get_iss_schedule(
        day: Annotated[
            Optional[str],
            Field(description="Filter schedule by day (e.g., 'Monday')"),
        ] = None,
        name: Annotated[
            Optional[str],
            Field(description="Filter schedule by crew member name (case-insensitive)"),
        ] = None,
    ) -> ToolResult:
        """Return every schedule entry matching the optional day and name filters."""
        log_request(TOOL_NAME, day=day, name=name)

        try:
            records = load_schedule(path)
            log_status(f"Loaded {len(records)} schedule records")

            matches = filter_schedule(records, day=day, name=name)
            log_status(f"{len(matches)} records match")

            if not matches:
                result = envelope(format_no_results(day, name), {"results": []})
            else:
                result = envelope(
                    format_schedule(matches),
                    {"results": [r.to_row() for r in matches]},
                )
        except Exception as e:
            log_status(f"{type(e).__name__}: {e}")
            result = failure(FAILURE_PHRASE, e)

        return log_response(TOOL_NAME, result)

    return get_iss_schedule


def register(server: FastMCP, path: Optional[Path] = None) -> None:
    """Register get-iss-schedule on a FastMCP server.  Call once per server."""
    server.tool(
        make_schedule_handler(path),
        name=TOOL_NAME,
        title=TOOL_TITLE,
        description=TOOL_DESCRIPTION,
        output_schema=SCHEDULE_OUTPUT_SCHEMA,
    )
