# =============================================================================
# core/models.py  -  Data Models
# =============================================================================
#
# The adapter owns no domain data: Actions, CSVs, rows and webhooks all live
# on the RestCSV side.  The only thing this process models is the single HTTP
# call a tool invocation turns into.
#
# WHY A DATACLASS FOR THE REQUEST?
#   Request builders return an ApiRequest instead of calling httpx directly.
#   That keeps core/actions.py, core/csvs.py and core/webhooks.py pure and
#   lets the tests check method/path/body without any network.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ApiRequest:
    """One HTTP request against the RestCSV API.

    path is relative to the configured base URL (e.g. "/csvs/<uuid>/rows").
    params and json never contain None values: an omitted optional argument
    is simply not sent.
    """

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    json: Optional[dict[str, Any]] = None


def compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}


def segment(identifier: Any) -> str:
    """Render an identifier as a path segment.

    A None identifier becomes the literal "null".  Nullable row ids are sent
    as-is and the remote API decides whether the request is valid.
    """
    if identifier is None:
        return "null"
    return str(identifier)


def make_request(method: str, path: str, params: Optional[dict[str, Any]] = None,
                 body: Optional[dict[str, Any]] = None) -> ApiRequest:
    """Build an ApiRequest, dropping None-valued params and body fields."""
    return ApiRequest(
        method=method,
        path=path,
        params=compact(params or {}),
        json=compact(body) if body is not None else None,
    )
