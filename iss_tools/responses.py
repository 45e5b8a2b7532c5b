# =============================================================================
# iss_tools/responses.py  -  Response Envelopes & Tool Logging
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Every tool returns the same envelope: a text block for display and a
#   structured object for programs.  This module builds it, so each tool only
#   decides WHICH of the three outcomes it has:
#
#     success  ->  formatted summary        +  the typed result
#     empty    ->  "nothing matched ..."    +  an empty (still valid) result
#     failure  ->  "<phrase>: <message>"    +  {"error": message}
#
#   `content` always holds exactly one text block, on every path.
#
# LOGGING:
#   We log to STDERR because the MCP server talks to its client over STDOUT
#   (stdio transport).  Anything printed to stdout would corrupt the protocol
#   stream.  The server entry point configures the handler; this module only
#   emits records.
#
#   ANSI colours make tool traffic easy to scan in a terminal:
#     - CYAN for incoming requests (tool name + parameters)
#     - YELLOW for intermediate status messages
#     - GREEN for the structured response
# =============================================================================

import json
import logging
from typing import Any, Optional

from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

logger = logging.getLogger("iss_tools")

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log the structured half of a result as compact JSON in GREEN, then return it."""
    body = json.dumps(result.structured_content, separators=(",", ":"), default=str)
    logger.info(f"{_GREEN}  ← {tool_name} response: {body}{_RESET}")
    return result


# =============================================================================
# Envelope builders
# =============================================================================
def envelope(text: str, structured: Optional[dict[str, Any]]) -> ToolResult:
    """Wrap a text block and a structured object into a ToolResult."""
    return ToolResult(
        content=[TextContent(type="text", text=text)],
        structured_content=structured,
    )


def error_message(error: BaseException) -> str:
    """The caller-facing message for an exception, never empty."""
    return str(error) or type(error).__name__


def failure(phrase: str, error: BaseException) -> ToolResult:
    """Build the failure envelope: ``<phrase>: <message>`` plus ``{"error": message}``."""
    message = error_message(error)
    return envelope(f"{phrase}: {message}", {"error": message})


# =============================================================================
# Output-schema helpers
# =============================================================================
# The failure payload is declared as one branch of each tool's output schema,
# so an `{"error": ...}` response is still schema-conformant.  Callers tell
# the branches apart by the presence of the "error" key.
# =============================================================================
ERROR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {"error": {"type": "string", "minLength": 1}},
    "required": ["error"],
    "additionalProperties": False,
}


def output_schema(*branches: dict[str, Any]) -> dict[str, Any]:
    """Combine success branches with the error branch into one object schema."""
    return {"type": "object", "oneOf": [*branches, ERROR_SCHEMA]}
