"""Live data fetching from the CoinGecko API."""
import asyncio
from typing import Dict, List, Optional, Sequence

import aiohttp

from datadash.config import (
    COINGECKO_API_BASE,
    COINGECKO_API_KEY,
    REQUEST_TIMEOUT,
    VS_CURRENCY,
)
from datadash.constants import MIN_TOKENS, SERIES_POINTS
from datadash.data.cleaner import clean_market_rows, clean_price_history
from datadash.data.synthesizer import to_arena_token
from datadash.data.transformer import interval_days, sample_series, scope_series
from datadash.models import FetchResult, WatchCoin
from datadash.utils import setup_logger

logger = setup_logger(__name__)


class FetchError(RuntimeError):
    """Upstream call failed or returned an unusable payload."""


def _headers() -> Dict[str, str]:
    headers = {"accept": "application/json"}
    if COINGECKO_API_KEY:
        headers["x-cg-pro-api-key"] = COINGECKO_API_KEY
    return headers


async def fetch_markets(session: aiohttp.ClientSession, coins: Sequence[WatchCoin]) -> Dict[str, Dict]:
    """
    Fetch current market snapshots for all coins in one batched call.

    Args:
        session: Open aiohttp session
        coins: Watch coins to request

    Returns:
        Cleaned market rows keyed by coin id

    Raises:
        FetchError: On a non-2xx status or fewer than 3 rows
    """
    url = f"{COINGECKO_API_BASE}/coins/markets"
    params = {
        "vs_currency": VS_CURRENCY,
        "ids": ",".join(coin.id for coin in coins),
        "order": "market_cap_desc",
        "sparkline": "false",
        "price_change_percentage": "24h",
    }

    async with session.get(url, params=params, headers=_headers()) as r:
        logger.debug(f"markets: API request - Status: {r.status}")
        if r.status < 200 or r.status >= 300:
            raise FetchError(f"CoinGecko markets failed: {r.status}")
        payload = await r.json()

    if not isinstance(payload, list) or len(payload) < MIN_TOKENS:
        raise FetchError("CoinGecko markets payload insufficient")

    return clean_market_rows(payload)


async def fetch_coin_series(
    session: aiohttp.ClientSession, coin_id: str, interval: str
) -> Optional[List[float]]:
    """
    Fetch one coin's hourly price history and resample it to 7 points.

    Returns None when the history carries no prices, so the caller can drop
    the coin without failing the whole fetch.

    Raises:
        FetchError: On a non-2xx status
    """
    url = f"{COINGECKO_API_BASE}/coins/{coin_id}/market_chart"
    params = {"vs_currency": VS_CURRENCY, "days": interval_days(interval), "interval": "hourly"}

    async with session.get(url, params=params, headers=_headers()) as r:
        logger.debug(f"{coin_id}: API request - Status: {r.status}")
        if r.status < 200 or r.status >= 300:
            raise FetchError(f"Series fetch failed for {coin_id}: {r.status}")
        payload = await r.json()

    prices = clean_price_history(payload, coin_id)
    if not prices:
        logger.warning(f"{coin_id}: Series empty, dropping from live set")
        return None

    return sample_series(scope_series(prices, interval), SERIES_POINTS)


async def _gather_or_cancel(*coros):
    """Run coroutines concurrently; on the first failure abandon the rest."""
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def _fetch_with_session(
    session: aiohttp.ClientSession, coins: Sequence[WatchCoin], interval: str
) -> FetchResult:
    markets, *series = await _gather_or_cancel(
        fetch_markets(session, coins),
        *[fetch_coin_series(session, coin.id, interval) for coin in coins],
    )
    series_by_id: Dict[str, Optional[List[float]]] = {coin.id: s for coin, s in zip(coins, series)}

    mapped = []
    for coin in coins:
        market = markets.get(coin.id)
        sampled = series_by_id.get(coin.id)
        if market is None or sampled is None:
            logger.warning(f"{coin.symbol}: missing market row or series, skipped")
            continue
        mapped.append(to_arena_token(market, coin, sampled))

    if len(mapped) < MIN_TOKENS:
        raise FetchError(f"Mapped live rows are insufficient ({len(mapped)} < {MIN_TOKENS})")

    return FetchResult.success(mapped)


async def fetch_live_tokens(
    coins: Sequence[WatchCoin],
    interval: str,
    session: Optional[aiohttp.ClientSession] = None,
) -> FetchResult:
    """
    Fetch and synthesize live tokens for the given watch coins.

    The markets call and every history call run concurrently, each attempted
    exactly once. Any failure (transport, status, shape or too few tokens)
    is logged and returned as a failed FetchResult; cancellation is not
    swallowed.

    Args:
        coins: Watch coins to fetch
        interval: One of the supported intervals
        session: Optional open session (a new one is created otherwise)

    Returns:
        FetchResult with the synthesized tokens, or the failure reason
    """
    try:
        if session is not None:
            result = await _fetch_with_session(session, coins, interval)
        else:
            timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
            async with aiohttp.ClientSession(timeout=timeout) as own_session:
                result = await _fetch_with_session(own_session, coins, interval)
    except asyncio.TimeoutError as e:
        logger.error(f"Live fetch timed out after {REQUEST_TIMEOUT}s: {e!r}")
        return FetchResult.failure(f"timeout: {e!r}")
    except Exception as e:
        logger.error(f"Live fetch failed: {e}")
        return FetchResult.failure(str(e) or e.__class__.__name__)

    logger.info(f"Live fetch succeeded for {len(result.tokens)} token(s) ({interval})")
    return result
