# =============================================================================
# iss_core/__init__.py
# =============================================================================
# Business logic for the ISS mission tools: the crew schedule reader, the
# weather lookup, and the data models they share.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP type.  The tool layer
#   (iss_tools/) wraps these functions; the functions themselves can be used
#   from a plain Python REPL.
# =============================================================================
