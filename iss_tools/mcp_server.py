# =============================================================================
# iss_tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the FastMCP server and registers every tool on it.  Each tool
#   module exposes register(server, ...); this is the one place that calls
#   them, once each, at startup.
#
# HOW IT WORKS (the flow):
#   1. An MCP client lists tools and calls one by name
#   2. FastMCP validates the arguments against the handler's signature
#   3. The handler calls iss_core/ logic and shapes the envelope
#   4. FastMCP relays the envelope back to the client unmodified
#
# TOOL NAMES:
#   - get-iss-schedule  ->  iss_tools/schedule_tool.py
#   - get_weather       ->  iss_tools/weather_tool.py
#   The two spellings are the published names clients already use.
#
# RUNNING THIS SERVER:
#   python -m iss_tools.mcp_server        (stdio transport)
# =============================================================================

import logging
import sys
from pathlib import Path
from typing import Optional

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP

from iss_core.config import Settings
from iss_tools import schedule_tool, weather_tool

SERVER_NAME = "iss-mission-tools"


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to STDERR; STDOUT belongs to the MCP transport."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def create_server(
    settings: Settings,
    schedule_path: Optional[Path] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Create a FastMCP server with every tool registered.

    Args:
        settings: Process settings (SerpAPI key, endpoint, timeout).
        schedule_path: Override for the crew schedule CSV.
        transport: Optional httpx transport for the weather tool.
    """
    server = FastMCP(SERVER_NAME)
    schedule_tool.register(server, schedule_path)
    weather_tool.register(server, settings, transport)
    return server


def main() -> None:
    # Populate os.environ from .env BEFORE reading settings.
    load_dotenv()
    configure_logging()
    server = create_server(Settings.from_env())
    logging.getLogger("iss_tools").info("Starting %s", SERVER_NAME)
    server.run()


if __name__ == "__main__":
    main()
