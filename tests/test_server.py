import aiohttp
import pytest
from fastapi.testclient import TestClient

from stock_filter.api.server import create_app
from stock_filter.clients import stock_client
from stock_filter.config import Settings
from stock_filter.core.session import NO_RESULTS_MESSAGE


@pytest.fixture
def client():
    return TestClient(create_app(Settings(data_source="sample")))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_stocks_envelope(client):
    body = client.get("/api/stocks").json()
    assert body["success"] is True
    assert body["count"] == 5
    assert body["message"] == "API working - using sample data"
    assert body["data"][0] == {
        "symbol": "AAPL", "company": "Apple Inc.", "price": 175.23, "peRatio": "28.5", "rsi": "65.2",
        "pegRatio": "2.1", "dividendYield": "0.52", "paysDividends": True,
    }


def test_cors_preflight(client):
    resp = client.options(
        "/api/stocks",
        headers={"Origin": "http://example.test", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_search_with_form_values(client):
    form = {"priceMin": "100", "priceMax": "200", "paysDividends": "", "rsiMax": ""}
    body = client.post("/api/search", json=form).json()
    assert [r["symbol"] for r in body["results"]] == ["AAPL", "GOOGL", "JPM"]
    assert body["count"] == 3
    assert body["message"] is None
    assert body["constraints"]["priceMin"] == 100.0
    assert body["constraints"]["rsiMax"] == ""


def test_search_empty_body_returns_everything(client):
    body = client.post("/api/search", json={}).json()
    assert body["count"] == 5


def test_search_no_results_message(client):
    body = client.post("/api/search", json={"peRatioMax": 5}).json()
    assert body["results"] == []
    assert body["count"] == 0
    assert body["message"] == NO_RESULTS_MESSAGE


def test_search_dividend_filter(client):
    body = client.post("/api/search", json={"paysDividends": "no"}).json()
    assert [r["symbol"] for r in body["results"]] == ["GOOGL", "TSLA"]


def test_search_invalid_bound_is_422(client):
    assert client.post("/api/search", json={"priceMin": "cheap"}).status_code == 422


def test_search_nan_bound_is_422(client):
    assert client.post("/api/search", json={"priceMin": "nan"}).status_code == 422


def test_search_unreachable_remote_filters_fallback_rows(monkeypatch):
    class RefusingSession:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

        def get(self, url):
            raise aiohttp.ClientConnectionError("refused")

    monkeypatch.setattr(stock_client.aiohttp, "ClientSession", RefusingSession)
    client = TestClient(create_app(Settings(data_source="remote", api_url="http://unreachable.test")))
    body = client.post("/api/search", json={"paysDividends": "yes"}).json()
    assert [r["symbol"] for r in body["results"]] == ["AAPL", "MSFT"]
    assert body["count"] == 2


def test_unhandled_error_returns_500_envelope(monkeypatch):
    async def broken_source(settings):
        raise RuntimeError("source exploded")

    monkeypatch.setattr("stock_filter.api.server.load_stocks_async", broken_source)
    client = TestClient(create_app(Settings(data_source="sample")), raise_server_exceptions=False)
    resp = client.post("/api/search", json={})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "source exploded"}


def test_create_app_configures_logging(monkeypatch):
    levels = []
    monkeypatch.setattr("stock_filter.api.server.configure_logging", levels.append)
    create_app(Settings(data_source="sample", log_level="DEBUG"))
    assert levels == ["DEBUG"]
