# =============================================================================
# iss_tools/__init__.py
# =============================================================================
# FastMCP tool wrappers around iss_core.
#
# ARCHITECTURAL ROLE:
#   iss_tools/ is the translation layer between an MCP client and the core
#   lookups.  Each tool module here:
#     1. Declares the tool's name, title, description and output schema
#     2. Builds a handler whose typed signature FastMCP turns into the
#        input schema
#     3. Calls iss_core/ and shapes the result into a text + structured
#        envelope (iss_tools/responses.py)
#     4. Exposes register(server, ...) for the server to call at startup
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse CSV or talk HTTP themselves (that's iss_core/)
#   - They do NOT let exceptions escape: every path returns an envelope
# =============================================================================
