"""Shared fixtures: a fake RestCSV backend and an in-memory MCP client."""

import json

import httpx
import pytest
import pytest_asyncio
from fastmcp import Client

from core.config import Settings
from core.gateway import RestCsvGateway
from tools import mcp_server

BASE_URL = "https://restcsv.test/api"
API_KEY = "test-key"

CSV_ID = "0b1c2d3e-4f50-4a6b-8c7d-9e0f1a2b3c4d"
ROW_ID = "11111111-2222-4333-8444-555555555555"
ACTION_ID = "aaaaaaaa-bbbb-4ccc-8ddd-eeeeeeeeeeee"
WEBHOOK_ID = "99999999-8888-4777-8666-555555555555"


class FakeRestCsv:
    """Records every request and answers with `responder` (200 + JSON by default)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responder = lambda request: httpx.Response(200, json={"ok": True})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def body(self, index: int = -1):
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, base_url=BASE_URL)


@pytest_asyncio.fixture
async def restcsv(settings):
    fake = FakeRestCsv()
    gateway = RestCsvGateway(settings, transport=httpx.MockTransport(fake.handler))
    mcp_server.configure_gateway(gateway)
    yield fake
    mcp_server.configure_gateway(None)
    await gateway.aclose()


@pytest.fixture
def call_tool():
    """Return an async helper that calls a tool and gives back its text reply."""

    async def _call(name: str, arguments=None) -> str:
        async with Client(mcp_server.mcp) as client:
            result = await client.call_tool(name, arguments or {})
        return result.content[0].text

    return _call
