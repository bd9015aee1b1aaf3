# =============================================================================
# core/actions.py  -  Action requests
# =============================================================================
#
# An Action is a natural-language instruction ("Split name field into first
# and last name") that RestCSV applies to CSVs or individual rows.  These
# builders only describe the HTTP call; tools/mcp_server.py performs it.
# =============================================================================

from typing import Optional
from uuid import UUID

from core.models import ApiRequest, make_request, segment


def list_actions() -> ApiRequest:
    return make_request("GET", "/actions")


def create_action(prompt: str, applies_to: list[str]) -> ApiRequest:
    return make_request("POST", "/actions", body={"prompt": prompt, "applies_to": applies_to})


def show_action(action: UUID) -> ApiRequest:
    return make_request("GET", f"/actions/{segment(action)}")


def update_action(action: UUID, prompt: str, applies_to: list[str]) -> ApiRequest:
    return make_request("PUT", f"/actions/{segment(action)}",
                        body={"prompt": prompt, "applies_to": applies_to})


def delete_action(action: UUID) -> ApiRequest:
    return make_request("DELETE", f"/actions/{segment(action)}")


def execute_action(action: UUID, csvs: Optional[list[str]] = None,
                   rows: Optional[list[str]] = None) -> ApiRequest:
    """Run an action now, optionally narrowed to specific CSVs or rows.

    Targets left as None are not sent, so the action runs against whatever
    it was created with.
    """
    return make_request("POST", f"/actions/{segment(action)}/execute",
                        body={"csvs": csvs, "rows": rows})
