# =============================================================================
# iss_tools/weather_tool.py  -  get_weather
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the SerpAPI weather lookup (iss_core/weather.py) as an MCP tool:
#   location name + date in, temperature / wind / precipitation out.
#
# THREE OUTCOMES:
#   - Reading found   -> {temperature, winds, precipitation}
#   - No answer box   -> {result: "not found"}   (a success, not an error)
#   - Request failed  -> {error: message}
#
# CONFIGURATION:
#   The handler is built by make_weather_handler(settings), so the API key
#   and timeout arrive as arguments rather than being read from the
#   environment mid-request.
# =============================================================================

from dataclasses import asdict
from datetime import date
from typing import Annotated, Any, Awaitable, Callable, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from iss_core.config import Settings
from iss_core.models import NOT_FOUND, WeatherReading
from iss_core.weather import lookup_weather
from iss_tools.responses import (
    envelope,
    failure,
    log_request,
    log_response,
    log_status,
    output_schema,
)

TOOL_NAME = "get_weather"
TOOL_TITLE = "Weather Query Tool"
TOOL_DESCRIPTION = (
    "take location by name and day (YYYY-MM-DD) to get weather conditions in Fahrenheit"
)
FAILURE_PHRASE = "Failed to fetch weather"

WEATHER_OUTPUT_SCHEMA = output_schema(
    {
        "type": "object",
        "properties": {
            "temperature": {"type": "number"},
            "winds": {"type": "string"},
            "precipitation": {"type": "string"},
        },
        "required": ["temperature", "winds", "precipitation"],
    },
    {
        "type": "object",
        "properties": {"result": {"const": NOT_FOUND}},
        "required": ["result"],
    },
)


def format_reading(location_name: str, day: date, reading: WeatherReading) -> str:
    return (
        f"🌤️ **Weather in {location_name} on {day.isoformat()}**\n"
        f"🌡️ **Temperature:** {reading.temperature:g}°F\n"
        f"💨 **Winds:** {reading.winds}\n"
        f"🌧️ **Precipitation:** {reading.precipitation}"
    )


def format_not_found(location_name: str, day: date) -> str:
    return f'No weather data found for "{location_name}" on {day.isoformat()}'


def make_weather_handler(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Callable[..., Awaitable[ToolResult]]:
    """Build the get_weather handler bound to the given settings.

    Args:
        settings: Supplies the SerpAPI key, endpoint and timeout.
        transport: Optional httpx transport, for tests.
    """

    async def get_weather(
        location_name: Annotated[
            str, Field(description="Place to look up (e.g., 'Houston, TX')")
        ],
        date_YYYYMMDD: Annotated[
            date, Field(description="Day to look up, in YYYY-MM-DD format")
        ],
    ) -> ToolResult:
        """Look up temperature, wind and precipitation for a place and a day."""
        log_request(TOOL_NAME, location_name=location_name, date_YYYYMMDD=date_YYYYMMDD)

        try:
            reading = await lookup_weather(location_name, date_YYYYMMDD, settings, transport)
            if reading is None:
                log_status("No weather answer box in search result")
                structured: dict[str, Any] = {"result": NOT_FOUND}
                result = envelope(format_not_found(location_name, date_YYYYMMDD), structured)
            else:
                log_status(f"Temperature {reading.temperature:g}°F")
                result = envelope(
                    format_reading(location_name, date_YYYYMMDD, reading),
                    asdict(reading),
                )
        except Exception as e:
            log_status(f"{type(e).__name__}: {e}")
            result = failure(FAILURE_PHRASE, e)

        return log_response(TOOL_NAME, result)

    return get_weather


def register(
    server: FastMCP,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Register get_weather on a FastMCP server.  Call once per server."""
    server.tool(
        make_weather_handler(settings, transport),
        name=TOOL_NAME,
        title=TOOL_TITLE,
        description=TOOL_DESCRIPTION,
        output_schema=WEATHER_OUTPUT_SCHEMA,
    )
