# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes RestCSV as MCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP client and the RestCSV
#   REST API.  Each tool:
#     1. Takes typed arguments (FastMCP validates them, UUIDs included)
#     2. Builds one ApiRequest with a core/ builder
#     3. Sends it through the shared gateway
#     4. Returns the response body as text, or "Error: ..." on failure
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT inspect or reshape RestCSV data (bodies pass through)
#   - They do NOT retry, cache, or combine calls
#
# TOOL CONTRACT QUALITY:
#   Tool names and docstrings are what the calling model reads to decide
#   which tool to use, so every argument is documented in the docstring.
# =============================================================================
