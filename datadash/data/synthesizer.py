"""Derivation of per-token analytics from a market snapshot and a sampled price series."""
import math
from typing import Dict, Sequence

from datadash.constants import (
    HOLDER_STRENGTH_BOUNDS,
    HOLDER_STRENGTH_WEIGHT,
    HOLDERS_BOUNDS,
    HOLDERS_EXPONENT,
    HOLDERS_PRICE_FLOOR,
    MOMENTUM_BOUNDS,
    SENTIMENT_BASE,
    SENTIMENT_BOUNDS,
    SENTIMENT_CHANGE_WEIGHT,
    SENTIMENT_MOVE_WEIGHT,
    SENTIMENT_VELOCITY_WEIGHT,
    SIGNAL_SCORE_WEIGHTS,
    SOCIALS_BOUNDS,
    SOCIALS_MOVE_WEIGHT,
    SOCIALS_OFFSET,
    SOCIALS_STEP,
    VELOCITY_SCORE_BOUNDS,
    VELOCITY_SCORE_WEIGHT,
    VELOCITY_SIGNAL_BOUNDS,
    WHALE_PENALTY_BOUNDS,
    WHALES_BASE,
    WHALES_BOUNDS,
    WHALES_CHANGE_WEIGHT,
    WHALES_VELOCITY_WEIGHT,
)
from datadash.data.transformer import series_to_pct_change
from datadash.models import ArenaToken, SignalFactors, WatchCoin
from datadash.utils import round_half_up


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def build_signal(momentum: float, velocity: float, holders: float, whales: float) -> SignalFactors:
    """
    Decompose a token's composite score into its four bounded factors.

    Args:
        momentum: Sentiment plus latest percent move
        velocity: Velocity score (already clamped to its own range)
        holders: Estimated holder count
        whales: Whale pressure score

    Returns:
        SignalFactors with every field clamped to its bounds
    """
    # Bounds are integers, so clamping before rounding matches rounding first
    return SignalFactors(
        momentum=round_half_up(clamp(momentum, *MOMENTUM_BOUNDS)),
        velocity=round_half_up(clamp(velocity, *VELOCITY_SIGNAL_BOUNDS)),
        holder_strength=round_half_up(
            clamp(math.log10(max(holders, 1)) * HOLDER_STRENGTH_WEIGHT, *HOLDER_STRENGTH_BOUNDS)
        ),
        whale_penalty=round_half_up(clamp(whales, *WHALE_PENALTY_BOUNDS)),
    )


def estimate_holders(market_cap: float, current_price: float) -> int:
    """Sublinear holder proxy from the implied circulating supply."""
    implied_supply = max(market_cap, 0) / max(current_price, HOLDERS_PRICE_FLOOR)
    return round_half_up(clamp(implied_supply ** HOLDERS_EXPONENT, *HOLDERS_BOUNDS))


def to_arena_token(market: Dict, coin: WatchCoin, sampled_prices: Sequence[float]) -> ArenaToken:
    """
    Build the analytic record for one token.

    Args:
        market: One cleaned /coins/markets row
        coin: Watchlist identity of the token
        sampled_prices: 7-point resampled absolute price series

    Returns:
        ArenaToken whose scores all sit inside their clamp bounds
    """
    price_change = series_to_pct_change(sampled_prices)
    latest_move = price_change[-1] if price_change else 0
    change_24h = market.get("price_change_percentage_24h_in_currency") or 0
    market_cap = market["market_cap"]
    volume = market["total_volume"]
    current_price = market["current_price"]
    velocity_ratio = volume / market_cap if market_cap > 0 else 0

    sentiment = round_half_up(clamp(
        SENTIMENT_BASE
        + latest_move * SENTIMENT_MOVE_WEIGHT
        + change_24h * SENTIMENT_CHANGE_WEIGHT
        + velocity_ratio * SENTIMENT_VELOCITY_WEIGHT,
        *SENTIMENT_BOUNDS,
    ))
    whales = round_half_up(clamp(
        WHALES_BASE + velocity_ratio * WHALES_VELOCITY_WEIGHT + abs(change_24h) * WHALES_CHANGE_WEIGHT,
        *WHALES_BOUNDS,
    ))
    holders = estimate_holders(market_cap, current_price)

    # Engagement trends up with time index and with the price move at that point
    socials = tuple(
        round_half_up(clamp(sentiment - SOCIALS_OFFSET + idx * SOCIALS_STEP + pct * SOCIALS_MOVE_WEIGHT, *SOCIALS_BOUNDS))
        for idx, pct in enumerate(price_change)
    )

    velocity_score = round_half_up(clamp(velocity_ratio * VELOCITY_SCORE_WEIGHT, *VELOCITY_SCORE_BOUNDS))
    signal = build_signal(
        momentum=sentiment + latest_move,
        velocity=velocity_score,
        holders=holders,
        whales=whales,
    )

    return ArenaToken(
        id=coin.id,
        symbol=coin.symbol,
        name=coin.name,
        chain=coin.chain,
        current_price=current_price,
        market_cap=market_cap,
        volume_24h=volume,
        holders=holders,
        whales=whales,
        sentiment=sentiment,
        socials=socials,
        price_change=tuple(price_change),
        signal=signal,
    )


def signal_score(signal: SignalFactors) -> int:
    """Composite leaderboard score; whale pressure counts against the token."""
    w_momentum, w_velocity, w_holders, w_whales = SIGNAL_SCORE_WEIGHTS
    return round_half_up(
        signal.momentum * w_momentum
        + signal.velocity * w_velocity
        + signal.holder_strength * w_holders
        - signal.whale_penalty * w_whales
    )
