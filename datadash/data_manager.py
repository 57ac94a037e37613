"""Dashboard assembly: live fetch with a full fallback substitution."""
import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from datadash.constants import DEFAULT_INTERVAL, INTERVALS, MIN_TOKENS, WATCHLIST
from datadash.data import (
    FALLBACK_TOKENS,
    build_heat_map,
    build_wallet_flows,
    build_weekly_wars,
    fallback_for,
    fetch_live_tokens,
)
from datadash.models import ArenaDashboardData, ArenaToken, FetchResult, WatchCoin
from datadash.utils import setup_logger, utc_timestamp

logger = setup_logger(__name__)

LiveFetch = Callable[[Sequence[WatchCoin], str], Awaitable[FetchResult]]


def resolve_interval(value: Optional[str]) -> str:
    """Return the interval if supported, the default otherwise."""
    return value if value in INTERVALS else DEFAULT_INTERVAL


def parse_ids(raw: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated id list; None when nothing usable was given."""
    ids = [part.strip() for part in (raw or "").split(",")]
    ids = [i for i in ids if i]
    return ids or None


def build_dashboard(tokens: Sequence[ArenaToken], source: str, interval: str) -> ArenaDashboardData:
    """
    Rank the tokens and derive every aggregate from them.

    Args:
        tokens: Live or fallback tokens in any order
        source: "live" or "fallback"
        interval: Resolved interval

    Returns:
        Immutable dashboard payload stamped with the current UTC time
    """
    ranked = tuple(sorted(tokens, key=lambda t: t.market_cap, reverse=True))
    return ArenaDashboardData(
        interval=interval,
        tokens=ranked,
        weekly_wars=build_weekly_wars(ranked, interval),
        heat_map=build_heat_map(ranked),
        wallet_flows=build_wallet_flows(ranked),
        last_updated=utc_timestamp(),
        source=source,
    )


class DataManager:
    """Resolves a dashboard request into one payload, live when possible."""

    def __init__(
        self,
        watchlist: Sequence[WatchCoin] = WATCHLIST,
        fallback: Sequence[ArenaToken] = FALLBACK_TOKENS,
        fetcher: Optional[LiveFetch] = None,
    ):
        self.watchlist: Tuple[WatchCoin, ...] = tuple(watchlist)
        self.fallback: Tuple[ArenaToken, ...] = tuple(fallback)
        self.fetcher: LiveFetch = fetcher or fetch_live_tokens

    def available_coins(self) -> Tuple[WatchCoin, ...]:
        return self.watchlist

    def pick_watch_coins(self, selected_ids: Optional[Sequence[str]] = None) -> Tuple[WatchCoin, ...]:
        """Watchlist subset for the requested ids, or the full watchlist if fewer than 3 are known."""
        if not selected_ids:
            return self.watchlist
        wanted = set(selected_ids)
        selected = tuple(coin for coin in self.watchlist if coin.id in wanted)
        return selected if len(selected) >= MIN_TOKENS else self.watchlist

    async def load_async(
        self, interval: Optional[str] = None, selected_ids: Optional[Sequence[str]] = None
    ) -> ArenaDashboardData:
        """
        Build the dashboard payload.

        Either the live fetch fully succeeds, or the fallback dataset fully
        replaces it; there is no partial state and no retry.
        """
        interval = resolve_interval(interval)
        coins = self.pick_watch_coins(selected_ids)

        try:
            result = await self.fetcher(coins, interval)
        except Exception as e:
            logger.error(f"Live fetcher raised: {e!r}")
            result = FetchResult.failure(str(e) or e.__class__.__name__)

        if result.ok:
            logger.info(f"Serving live dashboard ({len(result.tokens)} tokens, {interval})")
            return build_dashboard(result.tokens, "live", interval)

        logger.warning(f"Live data unavailable, serving fallback: {result.reason}")
        return build_dashboard(fallback_for(selected_ids, self.fallback), "fallback", interval)

    def load(
        self, interval: Optional[str] = None, selected_ids: Optional[Sequence[str]] = None
    ) -> ArenaDashboardData:
        """Synchronous entry point for Flask routes, Dash callbacks and scripts."""
        return asyncio.run(self.load_async(interval, selected_ids))
