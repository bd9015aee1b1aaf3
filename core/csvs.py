# =============================================================================
# core/csvs.py  -  CSV, row and search requests
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Describes the HTTP calls for the CSV resource family and the rows nested
#   under it.  A row payload ("meta") is an open-ended list of entries,
#   usually key/value pairs, sometimes nested JSON.  We pass it through
#   untouched.
#
# NULLABLE ROW IDS:
#   show/update/remove accept row=None.  It is rendered as "null" in the
#   path (see core.models.segment) and RestCSV answers with its own error.
#
# BULK STORE:
#   bulk_store_csv_row sends every row payload in ONE request to the bulk
#   endpoint.  It never fans out into N single-row requests.
# =============================================================================

from typing import Any, Optional
from uuid import UUID

from core.models import ApiRequest, make_request, segment


# --- CSVs --------------------------------------------------------------------

def list_csvs() -> ApiRequest:
    return make_request("GET", "/csvs")


def store_csv(csv: str) -> ApiRequest:
    return make_request("POST", "/csvs", body={"csv": csv})


def show_csv(csv: UUID) -> ApiRequest:
    return make_request("GET", f"/csvs/{segment(csv)}")


def delete_csv(csv: UUID) -> ApiRequest:
    return make_request("DELETE", f"/csvs/{segment(csv)}")


# --- Rows --------------------------------------------------------------------

def _rows_path(csv: UUID) -> str:
    return f"/csvs/{segment(csv)}/rows"


def list_csv_rows(csv: UUID) -> ApiRequest:
    return make_request("GET", _rows_path(csv))


def store_csv_row(csv: UUID, meta: list[Any]) -> ApiRequest:
    return make_request("POST", _rows_path(csv), body={"meta": meta})


def show_csv_row(csv: UUID, row: Optional[UUID]) -> ApiRequest:
    return make_request("GET", f"{_rows_path(csv)}/{segment(row)}")


def update_csv_row(csv: UUID, row: Optional[UUID], meta: list[Any]) -> ApiRequest:
    return make_request("PUT", f"{_rows_path(csv)}/{segment(row)}", body={"meta": meta})


def remove_csv_row(csv: UUID, row: Optional[UUID]) -> ApiRequest:
    return make_request("DELETE", f"{_rows_path(csv)}/{segment(row)}")


def bulk_store_csv_row(csv: UUID, metas: list[list[Any]]) -> ApiRequest:
    return make_request("POST", f"{_rows_path(csv)}/bulk", body={"metas": metas})


# --- Search ------------------------------------------------------------------

def search_single_csv(csv: UUID, searchable: Optional[str] = None,
                      term: Optional[str] = None,
                      per_page: Optional[int] = None) -> ApiRequest:
    """Search one CSV.

    The API spells the page size "perPage" here (the webhook log endpoint
    uses "per_page").
    """
    return make_request("GET", f"/csvs/{segment(csv)}/search",
                        params={"searchable": searchable, "term": term, "perPage": per_page})
