# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything the RestCSV tools need below the MCP layer:
# configuration, request builders for each resource family, the HTTP gateway,
# and the client-config helper used by scripts/show_settings.py.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The request builders (actions, csvs, webhooks) are pure
#   Python: they describe the HTTP call, they never perform it.  Only
#   core/gateway.py touches the network, and it does so through httpx.
# =============================================================================
