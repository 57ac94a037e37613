"""Data fetching, cleaning, analytics derivation and fallback modules."""
from datadash.data.aggregates import build_heat_map, build_wallet_flows, build_weekly_wars
from datadash.data.cleaner import clean_market_rows, clean_price_history
from datadash.data.fallback import FALLBACK_TOKENS, fallback_for
from datadash.data.fetcher import FetchError, fetch_coin_series, fetch_live_tokens, fetch_markets
from datadash.data.synthesizer import build_signal, clamp, signal_score, to_arena_token
from datadash.data.transformer import (
    interval_days,
    period_labels,
    sample_series,
    scope_series,
    series_to_pct_change,
)

__all__ = [
    "FALLBACK_TOKENS",
    "FetchError",
    "build_heat_map",
    "build_signal",
    "build_wallet_flows",
    "build_weekly_wars",
    "clamp",
    "clean_market_rows",
    "clean_price_history",
    "fallback_for",
    "fetch_coin_series",
    "fetch_live_tokens",
    "fetch_markets",
    "interval_days",
    "period_labels",
    "sample_series",
    "scope_series",
    "series_to_pct_change",
    "signal_score",
    "to_arena_token",
]
