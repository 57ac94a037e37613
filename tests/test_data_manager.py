"""
Tests for dashboard assembly and the live/fallback decision
"""

import asyncio
from dataclasses import replace
from datetime import datetime

import pytest

from datadash.constants import WATCHLIST
from datadash.data.fallback import fallback_for
from datadash.data.fetcher import fetch_live_tokens
from datadash.data_manager import DataManager, build_dashboard, parse_ids, resolve_interval
from datadash.models import ArenaDashboardData, FetchResult


def live_fetcher(tokens):
    calls = []

    async def fetch(coins, interval):
        calls.append(([c.id for c in coins], interval))
        return FetchResult.success(tokens)

    fetch.calls = calls
    return fetch


class TestResolveInterval:

    @pytest.mark.parametrize("value", ["1h", "24h", "7d", "30d"])
    def test_supported(self, value):
        assert resolve_interval(value) == value

    @pytest.mark.parametrize("value", [None, "", "5m", "7D", "1y"])
    def test_unsupported_uses_default(self, value):
        assert resolve_interval(value) == "7d"


class TestParseIds:

    def test_splits_and_trims(self):
        assert parse_ids(" pepe, bonk ,floki ") == ["pepe", "bonk", "floki"]

    def test_empty_is_none(self):
        assert parse_ids(None) is None
        assert parse_ids("") is None
        assert parse_ids(" , ,") is None


class TestPickWatchCoins:

    def test_no_selection_returns_watchlist(self):
        assert DataManager().pick_watch_coins(None) == WATCHLIST

    def test_known_subset_kept_in_watchlist_order(self):
        coins = DataManager().pick_watch_coins(["floki", "pepe", "bonk"])
        assert [c.id for c in coins] == ["pepe", "bonk", "floki"]

    def test_too_few_known_ids_returns_watchlist(self):
        assert DataManager().pick_watch_coins(["pepe", "bitcoin", "ethereum"]) == WATCHLIST

    def test_uses_injected_watchlist(self):
        manager = DataManager(watchlist=WATCHLIST[:3])
        assert manager.pick_watch_coins(["floki", "bonk", "wif"]) == WATCHLIST[:3]


class TestBuildDashboard:

    def test_sorted_by_market_cap(self, fallback_tokens):
        shuffled = tuple(reversed(fallback_tokens))
        data = build_dashboard(shuffled, "fallback", "7d")
        caps = [t.market_cap for t in data.tokens]
        assert caps == sorted(caps, reverse=True)

    def test_last_updated_is_utc_iso(self, fallback_tokens):
        data = build_dashboard(fallback_tokens, "fallback", "7d")
        assert data.last_updated.endswith("Z")
        datetime.fromisoformat(data.last_updated.replace("Z", "+00:00"))

    def test_aggregates_derived_from_tokens(self, fallback_tokens):
        data = build_dashboard(fallback_tokens, "fallback", "30d")
        assert len(data.weekly_wars) == 7
        assert data.weekly_wars[-1].day == "Now"
        assert data.heat_map.cols == tuple(t.symbol for t in data.tokens)
        assert len(data.wallet_flows) == 4


class TestDataManagerLoad:

    def test_live_branch(self, fallback_tokens):
        live = tuple(replace(t, current_price=t.current_price * 2) for t in fallback_tokens[:4])
        fetcher = live_fetcher(live)
        data = DataManager(fetcher=fetcher).load("24h")

        assert data.source == "live"
        assert data.interval == "24h"
        assert [t.id for t in data.tokens] == ["dogecoin", "shiba-inu", "pepe", "bonk"]
        assert fetcher.calls == [([c.id for c in WATCHLIST], "24h")]

    def test_fallback_branch(self, failing_fetcher, fallback_tokens):
        data = DataManager(fetcher=failing_fetcher).load("1h")

        assert data.source == "fallback"
        assert data.interval == "1h"
        assert set(data.tokens) == set(fallback_tokens)

    def test_fallback_honours_selected_subset(self, failing_fetcher):
        data = DataManager(fetcher=failing_fetcher).load("7d", ["pepe", "bonk", "floki"])
        assert [t.symbol for t in data.tokens] == ["PEPE", "BONK", "FLOKI"]

    def test_fallback_small_subset_returns_full_dataset(self, failing_fetcher, fallback_tokens):
        data = DataManager(fetcher=failing_fetcher).load("7d", ["pepe", "bonk"])
        assert len(data.tokens) == len(fallback_tokens)

    def test_invalid_interval_resolved_before_fetch(self, fallback_tokens):
        fetcher = live_fetcher(fallback_tokens)
        data = DataManager(fetcher=fetcher).load("yearly")

        assert data.interval == "7d"
        assert fetcher.calls[0][1] == "7d"

    def test_payload_serializes_round_trip(self, failing_fetcher):
        data = DataManager(fetcher=failing_fetcher).load()
        payload = data.to_dict()

        assert payload["source"] == "fallback"
        assert set(payload) >= {"interval", "tokens", "weeklyWars", "heatMapRows", "heatMapCols",
                                "heatMap", "walletFlows", "lastUpdated", "source"}
        assert ArenaDashboardData.from_dict(payload) == data

    def test_live_fetch_with_fake_session(self, fake_session_factory):
        session = fake_session_factory()

        async def fetch(coins, interval):
            return await fetch_live_tokens(coins, interval, session=session)

        data = DataManager(fetcher=fetch).load("7d")
        assert data.source == "live"
        assert len(data.tokens) == 6

    def test_upstream_outage_falls_back(self, fake_session_factory, market_rows):
        session = fake_session_factory(markets=(503, market_rows))

        async def fetch(coins, interval):
            return await fetch_live_tokens(coins, interval, session=session)

        data = asyncio.run(DataManager(fetcher=fetch).load_async("30d"))
        assert data.source == "fallback"
        assert data.tokens == tuple(fallback_for(None))

    def test_too_few_market_rows_falls_back(self, fake_session_factory, market_rows):
        session = fake_session_factory(markets=(200, market_rows[:2]))

        async def fetch(coins, interval):
            return await fetch_live_tokens(coins, interval, session=session)

        data = DataManager(fetcher=fetch).load("7d")
        assert data.source == "fallback"
        assert len(data.tokens) == 6

    def test_raising_fetcher_falls_back(self):
        async def fetch(coins, interval):
            raise RuntimeError("boom")

        data = DataManager(fetcher=fetch).load("7d")
        assert data.source == "fallback"
        assert data.interval == "7d"

    def test_cancellation_propagates(self):
        async def fetch(coins, interval):
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(DataManager(fetcher=fetch).load_async("7d"))


class TestFallbackFor:

    def test_full_dataset_without_selection(self, fallback_tokens):
        assert fallback_for(None) == fallback_tokens
        assert fallback_for([]) == fallback_tokens

    def test_unknown_ids_ignored(self, fallback_tokens):
        chosen = fallback_for(["pepe", "bonk", "floki", "bitcoin"])
        assert [t.id for t in chosen] == ["pepe", "bonk", "floki"]
