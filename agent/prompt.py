# =============================================================================
# agent/prompt.py  -  The assistant's system prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the instruction the LLM runs under.  It names the tool families,
#   spells out the id-first workflow (every RestCSV object is addressed by
#   UUID), and forbids destructive calls without confirmation.
# =============================================================================

from datetime import date

# Tool names as registered in tools/mcp_server.py, grouped for the prompt.
TOOL_GROUPS: dict[str, list[str]] = {
    "Actions": ["list_actions", "create_action", "show_action", "update_action",
                "delete_action", "execute_action"],
    "CSVs": ["list_csvs", "store_csv", "show_csv", "delete_csv"],
    "CSV rows": ["list_csv_rows", "store_csv_row", "show_csv_row", "update_csv_row",
                 "remove_csv_row", "bulk_store_csv_row"],
    "Search": ["search_single_csv"],
    "Webhooks": ["list_webhooks", "store_webhook", "show_webhook", "update_webhook",
                 "delete_webhook", "test_webhook", "csv_row_webhook_log"],
}

DESTRUCTIVE_TOOLS = ("delete_action", "delete_csv", "remove_csv_row", "delete_webhook")


def get_csv_assistant_prompt() -> str:
    """Build the system prompt with today's date injected."""
    today = date.today().isoformat()
    catalogue = "\n".join(
        f"  • {group}: {', '.join(names)}" for group, names in TOOL_GROUPS.items()
    )
    destructive = ", ".join(DESTRUCTIVE_TOOLS)

    return f"""You are a careful data assistant that manages CSV data stored in RestCSV.

TODAY'S DATE: {today}

═══════════════════════════════════════════════════════════════════════
AVAILABLE TOOLS
═══════════════════════════════════════════════════════════════════════
{catalogue}

═══════════════════════════════════════════════════════════════════════
HOW TO WORK
═══════════════════════════════════════════════════════════════════════
  1. Every CSV, row, action and webhook is addressed by its UUID.
     If the user refers to something by name, call the matching list_*
     tool first and pick the UUID from the result.
  2. To add many rows at once use bulk_store_csv_row (one call), not
     repeated store_csv_row calls.
  3. A tool reply starting with "Error:" means the RestCSV call failed.
     Report the message to the user; do not pretend it succeeded.

═══════════════════════════════════════════════════════════════════════
ANTI-PATTERNS (things you must NOT do)
═══════════════════════════════════════════════════════════════════════
  ❌ Do NOT call {destructive} without the user's explicit confirmation
  ❌ Do NOT invent UUIDs
  ❌ Do NOT dump raw JSON at the user; summarize it
"""
