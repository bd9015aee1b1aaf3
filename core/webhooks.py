# =============================================================================
# core/webhooks.py  -  Webhook requests
# =============================================================================
#
# A webhook tells RestCSV to call an external endpoint with row data.
# "mappings" maps CSV column names to fields in the outgoing payload;
# "headers" are extra HTTP headers for that outgoing call.  Both are passed
# through as the caller supplied them.
# =============================================================================

from typing import Any, Optional
from uuid import UUID

from core.models import ApiRequest, make_request, segment

DEFAULT_LOG_PAGE_SIZE = 25


def _webhook_body(verb: str, endpoint: str, headers: Optional[list[Any]],
                  mappings: list[Any]) -> dict[str, Any]:
    return {"verb": verb, "endpoint": endpoint, "headers": headers, "mappings": mappings}


def list_webhooks() -> ApiRequest:
    return make_request("GET", "/webhooks")


def store_webhook(verb: str, endpoint: str, mappings: list[Any],
                  headers: Optional[list[Any]] = None) -> ApiRequest:
    return make_request("POST", "/webhooks", body=_webhook_body(verb, endpoint, headers, mappings))


def show_webhook(webhook: UUID) -> ApiRequest:
    return make_request("GET", f"/webhooks/{segment(webhook)}")


def update_webhook(webhook: UUID, verb: str, endpoint: str, mappings: list[Any],
                   headers: Optional[list[Any]] = None) -> ApiRequest:
    return make_request("PUT", f"/webhooks/{segment(webhook)}",
                        body=_webhook_body(verb, endpoint, headers, mappings))


def delete_webhook(webhook: UUID) -> ApiRequest:
    return make_request("DELETE", f"/webhooks/{segment(webhook)}")


def test_webhook(webhook: UUID) -> ApiRequest:
    """Ask RestCSV to fire the webhook once with sample data."""
    return make_request("POST", f"/webhooks/{segment(webhook)}/test")


def csv_row_webhook_log(webhook: UUID, latest: Optional[bool] = None,
                        per_page: int = DEFAULT_LOG_PAGE_SIZE) -> ApiRequest:
    return make_request("GET", f"/webhooks/{segment(webhook)}/logs",
                        params={"latest": latest, "per_page": per_page})
