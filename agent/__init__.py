# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a Google ADK assistant that drives the RestCSV MCP
# server conversationally.
#
# ARCHITECTURAL ROLE:
#   The agent is a CLIENT of tools/mcp_server.py.  It starts the server as a
#   stdio subprocess, discovers its tools, and lets the LLM decide which to
#   call.  It adds no RestCSV behavior of its own: anything the assistant can
#   do, a plain MCP client can do with the same tools.
# =============================================================================
