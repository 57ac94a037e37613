"""
Pytest configuration and fixtures for the datadash tests
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from datadash.constants import WATCHLIST
from datadash.data.fallback import FALLBACK_TOKENS
from datadash.models import FetchResult


class FakeResponse:
    """Minimal stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int, payload, error: Optional[Exception] = None):
        self.status = status
        self._payload = payload
        self._error = error

    async def json(self):
        return self._payload

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    Routes /coins/markets and /coins/{id}/market_chart requests to canned replies.

    `charts` maps a coin id to (status, payload); ids without an entry answer 404.
    `errors` maps a coin id (or "markets") to an exception raised on request.
    """

    def __init__(self, markets: Tuple[int, object], charts: Dict[str, Tuple[int, object]], errors=None):
        self.markets = markets
        self.charts = charts
        self.errors = errors or {}
        self.calls: List[Tuple[str, dict]] = []

    def get(self, url, params=None, headers=None):
        self.calls.append((url, dict(params or {})))
        if url.endswith("/coins/markets"):
            status, payload = self.markets
            return FakeResponse(status, payload, self.errors.get("markets"))
        coin_id = url.split("/coins/")[1].split("/")[0]
        status, payload = self.charts.get(coin_id, (404, {"error": "coin not found"}))
        return FakeResponse(status, payload, self.errors.get(coin_id))


def market_row(coin_id: str, price: float, market_cap: float, volume: float, change: Optional[float]) -> dict:
    return {
        "id": coin_id,
        "current_price": price,
        "market_cap": market_cap,
        "total_volume": volume,
        "price_change_percentage_24h_in_currency": change,
    }


def chart_payload(prices: List[float], start_ts: int = 1_700_000_000_000) -> dict:
    return {"prices": [[start_ts + i * 3_600_000, p] for i, p in enumerate(prices)]}


@pytest.fixture
def watchlist():
    return WATCHLIST


@pytest.fixture
def market_rows():
    """One markets row per default watchlist coin."""
    return [
        market_row("dogecoin", 0.16, 6_200_000_000, 840_000_000, 2.5),
        market_row("shiba-inu", 0.000023, 5_100_000_000, 760_000_000, -1.1),
        market_row("pepe", 0.000012, 3_300_000_000, 690_000_000, 4.2),
        market_row("bonk", 0.000026, 1_500_000_000, 420_000_000, None),
        market_row("dogwifcoin", 2.3, 980_000_000, 270_000_000, -3.4),
        market_row("floki", 0.00019, 920_000_000, 220_000_000, 0.7),
    ]


@pytest.fixture
def charts():
    """Hourly price histories (7 days) for every default watchlist coin."""
    return {
        coin.id: (200, chart_payload([1.0 + 0.01 * i * (n + 1) for i in range(168)]))
        for n, coin in enumerate(WATCHLIST)
    }


@pytest.fixture
def fake_session_factory(market_rows, charts):
    def factory(markets=None, chart_overrides=None, errors=None):
        merged = dict(charts)
        merged.update(chart_overrides or {})
        return FakeSession(markets or (200, market_rows), merged, errors)
    return factory


@pytest.fixture
def fallback_tokens():
    return FALLBACK_TOKENS


@pytest.fixture
def failing_fetcher():
    async def fetch(coins, interval):
        return FetchResult.failure("upstream down")
    return fetch
