# =============================================================================
# core/gateway.py  -  HTTP Gateway to the RestCSV API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the one pre-configured httpx.AsyncClient every tool goes through:
#   one base URL, one static bearer-token header.  send() performs exactly
#   one request for an ApiRequest and returns the decoded response body.
#
# ERRORS:
#   send() does NOT catch anything.  Non-2xx responses surface as
#   httpx.HTTPStatusError (via raise_for_status), network problems as other
#   httpx.HTTPError subclasses.  The tool layer turns those into
#   "Error: ..." text so the MCP client always gets a reply.
#
# NO RETRIES, NO CACHING:
#   One invocation, one request.  Timeouts are whatever Settings.timeout
#   says; httpx enforces them.  Redirects are followed, so a moved endpoint
#   still yields the final 2xx body.
# =============================================================================

import json
from typing import Any, Optional

import httpx

from core.config import Settings
from core.models import ApiRequest


class RestCsvGateway:
    """Thin async wrapper around a configured httpx.AsyncClient."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        # transport is only overridden in tests (httpx.MockTransport).
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Authorization": f"Bearer {settings.api_key}",
            },
            timeout=settings.timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def send(self, request: ApiRequest) -> Any:
        """Perform the request and return the decoded body.

        JSON bodies are decoded; any other body comes back as text, and an
        empty body as "".
        """
        response = await self._client.request(
            request.method,
            request.path,
            params=request.params or None,
            json=request.json,
        )
        response.raise_for_status()
        if not response.content:
            return ""
        try:
            return response.json()
        except ValueError:
            return response.text

    async def aclose(self) -> None:
        await self._client.aclose()


def format_body(data: Any) -> str:
    """Serialize a response body as compact JSON text."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def format_error(exc: Exception) -> str:
    """Render a failed call as the text reply the client sees."""
    if isinstance(exc, httpx.HTTPStatusError):
        body = exc.response.text[:500]
        message = f"Error: {exc}"
        if body:
            message += f" Response: {body}"
        return message
    return f"Error: {exc}" if str(exc) else f"Error: {type(exc).__name__}"
