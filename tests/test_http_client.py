import httpx
import pytest
from pet_dashboard.http_client import HttpClient

class FakeResponse:
    def __init__(self, status_code: int, json_data=None):
        self.status_code = status_code
        self._json = json_data or {}
        self.request = httpx.Request("GET", "http://where_the_animals_at/bow")

    def json(self):
        return self._json

    def raise_for_status(self):
        raise httpx.HTTPStatusError(f"status {self.status_code}", request=self.request, response=self)

class FakeAsyncClient:
    """Returns a sequence of responses for each call to request()."""
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    async def request(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        if not self._responses:
            raise RuntimeError("No more fake responses")
        return self._responses.pop(0)

    async def aclose(self):
        pass

@pytest.mark.asyncio
async def test_http_client_returns_success():
    hc = HttpClient(base_url="http://where_the_animals_at/", connect_timeout=1, read_timeout=1)
    fake = FakeAsyncClient([FakeResponse(200, {"ok": 1})])

    async with hc:
        hc._client = fake
        resp = await hc.request("GET", "/bow")
        assert resp.status_code == 200
        assert resp.json() == {"ok": 1}

    assert hc.base_url == "http://where_the_animals_at"
    _, _, kwargs = fake.calls[0]
    assert "X-Request-Id" in kwargs["headers"]

@pytest.mark.asyncio
async def test_http_client_does_not_retry_server_errors():
    hc = HttpClient(base_url="http://where_the_animals_at", connect_timeout=1, read_timeout=1)
    fake = FakeAsyncClient([FakeResponse(500), FakeResponse(200, {"ok": 1})])

    async with hc:
        hc._client = fake
        with pytest.raises(httpx.HTTPStatusError):
            await hc.request("GET", "/bow")
    assert len(fake.calls) == 1

@pytest.mark.asyncio
async def test_http_client_keeps_caller_request_id():
    hc = HttpClient(base_url="http://where_the_animals_at", connect_timeout=1, read_timeout=1)
    fake = FakeAsyncClient([FakeResponse(204)])

    async with hc:
        hc._client = fake
        await hc.request("GET", "/bow", req_id="abc")
    assert fake.calls[0][2]["headers"]["X-Request-Id"] == "abc"

@pytest.mark.asyncio
async def test_http_client_propagates_network_errors():
    def boom(request):
        raise httpx.ConnectError("refused", request=request)

    hc = HttpClient(base_url="http://where_the_animals_at", connect_timeout=1, read_timeout=1,
                    transport=httpx.MockTransport(boom))
    async with hc:
        with pytest.raises(httpx.ConnectError):
            await hc.request("GET", "/bow")
