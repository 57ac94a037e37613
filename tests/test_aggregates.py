"""
Tests for the cross-token aggregates and strategy-lab insights
"""

from dataclasses import replace

import pytest

from datadash.data import aggregates
from datadash.data.aggregates import build_heat_map, build_wallet_flows, build_weekly_wars, wallet_flow_values
from datadash.data.insights import (
    battle_index,
    correlation,
    metric_value,
    risk_temperature,
    rule_triggered,
    sentiment_floor,
)


@pytest.fixture
def ranked(fallback_tokens):
    return tuple(sorted(fallback_tokens, key=lambda t: t.market_cap, reverse=True))


class TestWeeklyWars:

    def test_reference_series(self, ranked):
        points = build_weekly_wars(ranked, "7d")

        assert [p.day for p in points] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert [p.alpha for p in points] == [26, 28, 30, 32, 31, 33, 34]
        assert [p.beta for p in points] == [22, 22, 25, 26, 27, 28, 29]
        assert [p.gamma for p in points] == [18, 19, 21, 23, 24, 25, 26]

    def test_labels_follow_interval(self, ranked):
        assert [p.day for p in build_weekly_wars(ranked, "24h")][0] == "-24h"
        assert [p.day for p in build_weekly_wars(ranked, "30d")][-1] == "Now"

    def test_missing_slots_use_defaults(self, ranked):
        points = build_weekly_wars(ranked[:1], "1h")
        # 28 / 2.3 -> 12, 26 / 2.5 -> 10
        assert all(p.beta == 12 and p.gamma == 10 for p in points)

    def test_series_clamped(self, ranked):
        loud = replace(ranked[0], socials=(99,) * 7)
        quiet = replace(ranked[1], socials=(1,) * 7)
        points = build_weekly_wars((loud, quiet, ranked[2]), "7d")
        assert all(p.alpha == 47 for p in points)
        assert all(p.beta == 8 for p in points)


class TestHeatMap:

    def test_shape(self, ranked):
        heat = build_heat_map(ranked)
        assert heat.rows == ("US", "EU", "Asia", "LATAM")
        assert heat.cols == ("DOGE", "SHIB", "PEPE", "BONK", "WIF", "FLOKI")
        assert len(heat.matrix) == 4
        assert all(len(row) == 6 for row in heat.matrix)

    def test_reference_rows(self, ranked):
        heat = build_heat_map(ranked)
        assert heat.matrix[0] == (91, 83, 80, 71, 63, 57)
        assert heat.matrix[3] == (76, 69, 66, 58, 51, 46)

    def test_cells_clamped(self, ranked):
        many = tuple(replace(ranked[-1], symbol=f"T{i}") for i in range(40))
        heat = build_heat_map(many)
        assert all(32 <= cell <= 99 for row in heat.matrix for cell in row)
        assert heat.matrix[0][-1] == 32


class TestWalletFlows:

    def test_smart_wallet_example(self):
        flows = {f.label: f.value for f in wallet_flow_values(450_000_000, 60)}
        assert flows["Smart Wallets"] == 94
        assert flows["New Wallets"] == 130
        assert flows["Dormant Wakeups"] == 66

    def test_bucket_order(self, ranked):
        labels = [f.label for f in build_wallet_flows(ranked)]
        assert labels == ["Smart Wallets", "New Wallets", "Dormant Wakeups", "Exits"]

    def test_from_tokens(self, ranked):
        three = (
            replace(ranked[0], volume_24h=150_000_000, sentiment=50),
            replace(ranked[1], volume_24h=200_000_000, sentiment=60),
            replace(ranked[2], volume_24h=100_000_000, sentiment=70),
        )
        flows = {f.label: f.value for f in build_wallet_flows(three)}
        assert flows["Smart Wallets"] == 94

    def test_upper_bounds(self):
        flows = {f.label: f.value for f in wallet_flow_values(1e15, 100)}
        assert flows == {"Smart Wallets": 900, "New Wallets": 1300, "Dormant Wakeups": 600, "Exits": 650}

    def test_bounds_follow_constants(self, monkeypatch):
        monkeypatch.setattr(aggregates, "WALLET_SMART_BOUNDS", (100, 120))
        flows = {f.label: f.value for f in aggregates.wallet_flow_values(1e15, 100)}
        assert flows["Smart Wallets"] == 120

    def test_lower_bounds(self):
        flows = {f.label: f.value for f in wallet_flow_values(0, 0)}
        assert flows["Smart Wallets"] == 90
        assert flows["New Wallets"] == 130
        assert flows["Dormant Wakeups"] == 60
        assert flows["Exits"] == 240


class TestInsights:

    def test_battle_index_and_risk(self, ranked):
        assert battle_index(ranked) == 72
        assert risk_temperature(ranked) == "Medium"
        assert sentiment_floor(ranked) == 61

    def test_risk_levels(self, ranked):
        assert risk_temperature([replace(t, whales=80) for t in ranked]) == "High"
        assert risk_temperature([replace(t, whales=20) for t in ranked]) == "Low"

    def test_battle_index_bounds(self, ranked):
        assert battle_index([replace(t, sentiment=10, whales=96) for t in ranked]) == 45
        assert battle_index([replace(t, sentiment=96, whales=0) for t in ranked]) == 95

    def test_correlation(self):
        assert correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)
        assert correlation([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)
        assert correlation([1, 1, 1], [1, 2, 3]) == 0.0
        assert correlation([1, 2], [1, 2, 3]) == 0.0
        assert correlation([1.0], [2.0]) == 0.0
        assert isinstance(correlation((0.5, 1.5, 1.0), (2.0, 1.0, 3.0)), float)

    def test_metric_value(self, ranked):
        doge = ranked[0]
        assert metric_value(doge, "sentiment") == 71
        assert metric_value(doge, "move") == 2.6
        assert metric_value(doge, "volume") == 840_000_000
        with pytest.raises(ValueError):
            metric_value(doge, "holders")

    def test_rule_triggered(self):
        assert rule_triggered(6, ">", 5)
        assert not rule_triggered(5, ">", 5)
        assert rule_triggered(4, "<", 5)
        with pytest.raises(ValueError):
            rule_triggered(4, ">=", 5)
