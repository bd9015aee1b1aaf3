"""Tests for the HTTP gateway and reply formatting."""

import json

import httpx
import pytest

from core.config import Settings
from core.gateway import RestCsvGateway, format_body, format_error
from core.models import make_request



def _gateway(handler):
    settings = Settings(api_key="secret-token", base_url="https://restcsv.test/api")
    return RestCsvGateway(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_sends_bearer_token_and_json_headers():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    gateway = _gateway(handler)
    await gateway.send(make_request("GET", "/csvs"))
    await gateway.aclose()

    request = seen[0]
    assert str(request.url) == "https://restcsv.test/api/csvs"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_sends_params_and_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"id": "x"})

    gateway = _gateway(handler)
    data = await gateway.send(make_request("POST", "/csvs", params={"a": 1}, body={"csv": "a,b\n1,2"}))
    await gateway.aclose()

    assert data == {"id": "x"}
    assert seen[0].url.params["a"] == "1"
    assert json.loads(seen[0].content) == {"csv": "a,b\n1,2"}


@pytest.mark.asyncio
async def test_non_json_and_empty_bodies():
    bodies = iter([httpx.Response(200, text="plain text"), httpx.Response(204)])
    gateway = _gateway(lambda request: next(bodies))

    assert await gateway.send(make_request("GET", "/a")) == "plain text"
    assert await gateway.send(make_request("DELETE", "/b")) == ""
    await gateway.aclose()


@pytest.mark.asyncio
async def test_non_2xx_raises_status_error():
    gateway = _gateway(lambda request: httpx.Response(422, json={"message": "bad"}))

    with pytest.raises(httpx.HTTPStatusError):
        await gateway.send(make_request("POST", "/csvs", body={"csv": ""}))
    await gateway.aclose()


def test_format_body_is_compact_json():
    assert format_body({"name": "Zoë", "rows": [1, 2]}) == '{"name":"Zoë","rows":[1,2]}'
    assert format_body("") == '""'


def test_format_error_includes_status_and_body():
    request = httpx.Request("GET", "https://restcsv.test/api/csvs/x")
    response = httpx.Response(404, json={"message": "Not found"}, request=request)
    exc = httpx.HTTPStatusError("Client error '404 Not Found'", request=request, response=response)

    text = format_error(exc)
    assert text.startswith("Error: Client error '404 Not Found'")
    assert "Not found" in text


def test_format_error_for_transport_failure():
    assert format_error(httpx.ConnectError("connection refused")) == "Error: connection refused"
    assert format_error(httpx.ReadTimeout("")) == "Error: ReadTimeout"


@pytest.mark.asyncio
async def test_timeout_and_redirects_reach_the_client():
    settings = Settings(api_key="k", base_url="https://restcsv.test/api", timeout=5.0)
    gateway = RestCsvGateway(settings)

    assert gateway._client.timeout == httpx.Timeout(5.0)
    assert gateway._client.follow_redirects is True
    await gateway.aclose()
