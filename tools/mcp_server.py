# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL RestCSV tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the RestCSV REST API as MCP tools.  Each tool is a thin wrapper:
#   it builds an ApiRequest with a core/ builder, sends it through the shared
#   gateway, and returns the response body as text.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g., "show_csv")
#   2. FastMCP validates the arguments against the function signature
#      (a malformed UUID never reaches the handler)
#   3. The handler builds the request (core/actions, core/csvs, core/webhooks)
#   4. _call() sends exactly ONE request through the gateway
#   5. The body comes back as compact JSON text, or "Error: ..." on failure
#
# FAILURE CONTRACT:
#   Transport errors and non-2xx responses are caught in _call() and turned
#   into text.  The client always gets a reply, never a crashed tool.
#
# RUNNING THIS SERVER:
#   a) python -m tools.mcp_server      (stdio transport)
#   b) restcsv-mcp                     (console script from pyproject.toml)
#   Both need RESTCSV_API_KEY; startup aborts without it.
# =============================================================================

import logging
import sys
from typing import Any, Optional
from uuid import UUID

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP

from core import actions, csvs, webhooks
from core.config import MissingApiKeyError, load_settings
from core.gateway import RestCsvGateway, format_body, format_error
from core.models import ApiRequest

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON stream, so every log line goes to STDERR.
# Colors: CYAN for incoming calls, YELLOW for status, GREEN for responses.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Responses can be whole CSVs; the log only shows the head.
_LOG_PREVIEW_CHARS = 300

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _preview(text: str) -> str:
    """Cut long text down to _LOG_PREVIEW_CHARS for the log."""
    if len(text) <= _LOG_PREVIEW_CHARS:
        return text
    return f"{text[:_LOG_PREVIEW_CHARS]}... ({len(text)} chars)"


def _mask_headers(headers: Optional[list[Any]]) -> Optional[list[Any]]:
    """Hide header values; webhook headers usually carry credentials."""
    if headers is None:
        return None
    masked = []
    for entry in headers:
        if isinstance(entry, dict):
            masked.append({key: "***" for key in entry})
        else:
            masked.append("***")
    return masked


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str, failed: bool = False) -> str:
    """Log a (truncated) reply, then return it unchanged."""
    color = _RED if failed else _GREEN
    logger.info(f"{color}  ← {tool_name} response: {_preview(text)}{_RESET}")
    return text


# =============================================================================
# Server instance and gateway
# =============================================================================
# "RestCSV" is the server identity clients see during MCP initialization.
# The gateway is created once at startup (see main()).  configure_gateway()
# lets tests swap in one backed by httpx.MockTransport.
# =============================================================================
mcp = FastMCP("RestCSV", version="1.0.0")

_gateway: Optional[RestCsvGateway] = None


def configure_gateway(gateway: Optional[RestCsvGateway]) -> None:
    global _gateway
    _gateway = gateway


def get_gateway() -> RestCsvGateway:
    """Return the configured gateway, building it from the environment if needed."""
    global _gateway
    if _gateway is None:
        _gateway = RestCsvGateway(load_settings())
    return _gateway


async def _call(tool_name: str, request: ApiRequest) -> str:
    """Send one request and turn the outcome into the tool's text reply."""
    _log_status(f"{request.method} {request.path}")
    try:
        data = await get_gateway().send(request)
    except httpx.HTTPError as exc:
        return _log_response(tool_name, format_error(exc), failed=True)
    return _log_response(tool_name, format_body(data))


# =============================================================================
# ACTIONS
# =============================================================================
# An Action is a natural-language instruction RestCSV applies to CSVs or
# rows.  create/update take the instruction plus the target object ids.
# =============================================================================
@mcp.tool()
async def list_actions() -> str:
    """List all Actions on the account."""
    _log_request("list_actions")
    return await _call("list_actions", actions.list_actions())


@mcp.tool()
async def create_action(prompt: str, applies_to: list[str]) -> str:
    """Create an Action: a natural-language instruction applied to CSV data.

    Args:
        prompt: The instruction. Example: "Split name field into first and last name".
        applies_to: The UUID(s) of the CSV or CsvRow object(s) this action applies to.
    """
    _log_request("create_action", prompt=prompt, applies_to=applies_to)
    return await _call("create_action", actions.create_action(prompt, applies_to))


@mcp.tool()
async def show_action(action: UUID) -> str:
    """Show one Action.

    Args:
        action: The UUID of the Action object.
    """
    _log_request("show_action", action=action)
    return await _call("show_action", actions.show_action(action))


@mcp.tool()
async def update_action(action: UUID, prompt: str, applies_to: list[str]) -> str:
    """Replace an Action's instruction and targets.

    Args:
        action: The action UUID.
        prompt: The instruction. Example: "Split name field into first and last name".
        applies_to: The UUID(s) of the CSV or CsvRow object(s) this action applies to.
    """
    _log_request("update_action", action=action, prompt=prompt, applies_to=applies_to)
    return await _call("update_action", actions.update_action(action, prompt, applies_to))


@mcp.tool()
async def delete_action(action: UUID) -> str:
    """Delete an Action.

    Args:
        action: The action UUID.
    """
    _log_request("delete_action", action=action)
    return await _call("delete_action", actions.delete_action(action))


@mcp.tool()
async def execute_action(action: UUID, csvs: Optional[list[str]] = None,
                         rows: Optional[list[str]] = None) -> str:
    """Run an Action now.

    Args:
        action: The action UUID.
        csvs: Optional CSV UUIDs to run against.
        rows: Optional row UUIDs to run against.
    """
    _log_request("execute_action", action=action, csvs=csvs, rows=rows)
    return await _call("execute_action", actions.execute_action(action, csvs, rows))


# =============================================================================
# CSVS
# =============================================================================
@mcp.tool()
async def list_csvs() -> str:
    """List all stored CSVs."""
    _log_request("list_csvs")
    return await _call("list_csvs", csvs.list_csvs())


@mcp.tool()
async def store_csv(csv: str) -> str:
    """Store a new CSV from raw CSV text.

    Args:
        csv: The CSV data, header row first (e.g. "a,b\\n1,2").

    Returns:
        The stored CSV object, including the UUID used by every other CSV tool.
    """
    _log_request("store_csv", csv=_preview(csv))
    return await _call("store_csv", csvs.store_csv(csv))


@mcp.tool()
async def show_csv(csv: UUID) -> str:
    """Show one CSV.

    Args:
        csv: The csv UUID.
    """
    _log_request("show_csv", csv=csv)
    return await _call("show_csv", csvs.show_csv(csv))


@mcp.tool()
async def delete_csv(csv: UUID) -> str:
    """Delete a CSV and its rows.

    Args:
        csv: The csv UUID.
    """
    _log_request("delete_csv", csv=csv)
    return await _call("delete_csv", csvs.delete_csv(csv))


# =============================================================================
# CSV ROWS
# =============================================================================
# A row payload ("meta") is a list of entries, typically key/value pairs but
# possibly nested JSON.  show/update/remove take a NULLABLE row id: None is
# sent through and RestCSV decides whether that is valid.
# =============================================================================
@mcp.tool()
async def list_csv_rows(csv: UUID) -> str:
    """List the rows of a CSV.

    Args:
        csv: The csv UUID.
    """
    _log_request("list_csv_rows", csv=csv)
    return await _call("list_csv_rows", csvs.list_csv_rows(csv))


@mcp.tool()
async def store_csv_row(csv: UUID, meta: list[Any]) -> str:
    """Append one row to a CSV.

    Args:
        csv: The csv UUID.
        meta: Typically key/value pairs, but can also be nested json.
    """
    _log_request("store_csv_row", csv=csv, meta=meta)
    return await _call("store_csv_row", csvs.store_csv_row(csv, meta))


@mcp.tool()
async def show_csv_row(csv: UUID, row: Optional[UUID]) -> str:
    """Show one row of a CSV.

    Args:
        csv: The csv UUID.
        row: The row UUID (may be null).
    """
    _log_request("show_csv_row", csv=csv, row=row)
    return await _call("show_csv_row", csvs.show_csv_row(csv, row))


@mcp.tool()
async def update_csv_row(csv: UUID, row: Optional[UUID], meta: list[Any]) -> str:
    """Replace the contents of one row.

    Args:
        csv: The csv UUID.
        row: The row UUID (may be null).
        meta: Typically key/value pairs, but can also be nested json.
    """
    _log_request("update_csv_row", csv=csv, row=row, meta=meta)
    return await _call("update_csv_row", csvs.update_csv_row(csv, row, meta))


@mcp.tool()
async def remove_csv_row(csv: UUID, row: Optional[UUID]) -> str:
    """Remove one row from a CSV.

    Args:
        csv: The csv UUID.
        row: The row UUID (may be null).
    """
    _log_request("remove_csv_row", csv=csv, row=row)
    return await _call("remove_csv_row", csvs.remove_csv_row(csv, row))


@mcp.tool()
async def bulk_store_csv_row(csv: UUID, metas: list[list[Any]]) -> str:
    """Append many rows to a CSV in a single request.

    Args:
        csv: The csv UUID.
        metas: One entry per row; each is a row payload like store_csv_row's meta.
    """
    _log_request("bulk_store_csv_row", csv=csv, rows=len(metas))
    return await _call("bulk_store_csv_row", csvs.bulk_store_csv_row(csv, metas))


# =============================================================================
# SEARCH
# =============================================================================
@mcp.tool()
async def search_single_csv(csv: UUID, searchable: Optional[str] = None,
                            term: Optional[str] = None,
                            per_page: Optional[int] = None) -> str:
    """Search the rows of one CSV.

    Args:
        csv: The csv UUID.
        searchable: Column to search in. Omit to search every column.
        term: Text to look for.
        per_page: Page size.
    """
    _log_request("search_single_csv", csv=csv, searchable=searchable,
                 term=term, per_page=per_page)
    return await _call("search_single_csv",
                       csvs.search_single_csv(csv, searchable, term, per_page))


# =============================================================================
# WEBHOOKS
# =============================================================================
@mcp.tool()
async def list_webhooks() -> str:
    """List all webhooks."""
    _log_request("list_webhooks")
    return await _call("list_webhooks", webhooks.list_webhooks())


@mcp.tool()
async def store_webhook(verb: str, endpoint: str, mappings: list[Any],
                        headers: Optional[list[Any]] = None) -> str:
    """Create a webhook that sends row data to an external endpoint.

    Args:
        verb: The HTTP verb.
        endpoint: The webhook endpoint.
        mappings: The webhook mapping. The key is the CSV column name and the
            value is the mapping to the payload receiving this webhook.
        headers: Any headers that need to be included.
    """
    _log_request("store_webhook", verb=verb, endpoint=endpoint,
                 mappings=mappings, headers=_mask_headers(headers))
    return await _call("store_webhook",
                       webhooks.store_webhook(verb, endpoint, mappings, headers))


@mcp.tool()
async def show_webhook(webhook: UUID) -> str:
    """Show one webhook.

    Args:
        webhook: The webhook UUID.
    """
    _log_request("show_webhook", webhook=webhook)
    return await _call("show_webhook", webhooks.show_webhook(webhook))


@mcp.tool()
async def update_webhook(webhook: UUID, verb: str, endpoint: str,
                         mappings: list[Any],
                         headers: Optional[list[Any]] = None) -> str:
    """Replace a webhook's configuration.

    Args:
        webhook: The webhook UUID.
        verb: The HTTP verb.
        endpoint: The webhook endpoint.
        mappings: The webhook mapping.
        headers: Any headers that need to be included.
    """
    _log_request("update_webhook", webhook=webhook, verb=verb, endpoint=endpoint,
                 mappings=mappings, headers=_mask_headers(headers))
    return await _call("update_webhook",
                       webhooks.update_webhook(webhook, verb, endpoint, mappings, headers))


@mcp.tool()
async def delete_webhook(webhook: UUID) -> str:
    """Delete a webhook.

    Args:
        webhook: The webhook UUID.
    """
    _log_request("delete_webhook", webhook=webhook)
    return await _call("delete_webhook", webhooks.delete_webhook(webhook))


@mcp.tool()
async def test_webhook(webhook: UUID) -> str:
    """Fire a webhook once with sample data.

    Args:
        webhook: The webhook UUID.
    """
    _log_request("test_webhook", webhook=webhook)
    return await _call("test_webhook", webhooks.test_webhook(webhook))


@mcp.tool()
async def csv_row_webhook_log(webhook: UUID, latest: Optional[bool] = None,
                              per_page: int = webhooks.DEFAULT_LOG_PAGE_SIZE) -> str:
    """Show the delivery log of a webhook.

    Args:
        webhook: The webhook UUID.
        latest: Only the most recent deliveries.
        per_page: Page size (default 25).
    """
    _log_request("csv_row_webhook_log", webhook=webhook, latest=latest, per_page=per_page)
    return await _call("csv_row_webhook_log",
                       webhooks.csv_row_webhook_log(webhook, latest, per_page))


# =============================================================================
# Server entry point
# =============================================================================
# Settings are loaded BEFORE the transport starts: without RESTCSV_API_KEY the
# process exits here and no tool is ever served.
# =============================================================================
def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except (MissingApiKeyError, ValueError) as exc:
        logger.error(f"{_RED}Startup aborted: {exc}{_RESET}")
        raise SystemExit(1) from exc

    configure_gateway(RestCsvGateway(settings))
    logger.info(f"RestCSV MCP server ready ({settings.base_url})")
    mcp.run()


if __name__ == "__main__":
    main()
