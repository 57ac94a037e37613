"""Cross-token aggregates: weekly comparative series, regional heat map and wallet flows."""
from typing import List, Sequence, Tuple

from datadash.constants import (
    HEAT_BASE_BOUNDS,
    HEAT_BASE_VELOCITY_WEIGHT,
    HEAT_CELL_BOUNDS,
    HEAT_DECAY_PER_COLUMN,
    HEAT_MAP_MULTIPLIERS,
    HEAT_MAP_ROWS,
    WALLET_EXITS,
    WALLET_EXITS_BOUNDS,
    WALLET_EXITS_SHORTFALL_WEIGHT,
    WALLET_EXITS_VOLUME_DIVISOR,
    WALLET_NEW,
    WALLET_NEW_BOUNDS,
    WALLET_NEW_SENTIMENT_WEIGHT,
    WALLET_NEW_VOLUME_DIVISOR,
    WALLET_SMART,
    WALLET_SMART_BOUNDS,
    WALLET_SMART_SENTIMENT_WEIGHT,
    WALLET_SMART_VOLUME_DIVISOR,
    WALLET_WAKEUPS,
    WALLET_WAKEUPS_BOUNDS,
    WALLET_WAKEUPS_VOLUME_DIVISOR,
    WEEKLY_SERIES,
)
from datadash.data.synthesizer import clamp
from datadash.data.transformer import period_labels
from datadash.models import ArenaToken, HeatMap, WalletFlow, WeeklyPoint
from datadash.utils import round_half_up


def build_weekly_wars(tokens: Sequence[ArenaToken], interval: str) -> Tuple[WeeklyPoint, ...]:
    """
    Build the three damped comparative series for the top-3 tokens.

    Each series divides the token's socials point by a fixed divisor and clamps
    it so all three lines stay positive and comparable on one chart. Missing
    top-3 slots use a fixed default value.

    Args:
        tokens: Tokens sorted by market cap, descending
        interval: Requested interval (selects the period labels)

    Returns:
        Seven WeeklyPoint records
    """
    top3 = list(tokens[:3])

    def point(slot: int, name: str, i: int) -> int:
        divisor, bounds, default = WEEKLY_SERIES[name]
        value = top3[slot].socials[i] if slot < len(top3) else default
        return round_half_up(clamp(value / divisor, *bounds))

    return tuple(
        WeeklyPoint(day=day, alpha=point(0, "alpha", i), beta=point(1, "beta", i), gamma=point(2, "gamma", i))
        for i, day in enumerate(period_labels(interval))
    )


def build_heat_map(tokens: Sequence[ArenaToken]) -> HeatMap:
    """Regional heat map: one row per region, one column per token in ranked order."""
    cols = tuple(token.symbol for token in tokens)
    cell_base: List[int] = [
        round_half_up(clamp(token.sentiment + token.signal.velocity * HEAT_BASE_VELOCITY_WEIGHT, *HEAT_BASE_BOUNDS))
        for token in tokens
    ]

    matrix = tuple(
        tuple(
            round_half_up(clamp(base * multiplier - i * HEAT_DECAY_PER_COLUMN, *HEAT_CELL_BOUNDS))
            for i, base in enumerate(cell_base)
        )
        for multiplier in HEAT_MAP_MULTIPLIERS
    )
    return HeatMap(rows=HEAT_MAP_ROWS, cols=cols, matrix=matrix)


def wallet_flow_values(total_volume: float, avg_sentiment: float) -> Tuple[WalletFlow, ...]:
    smart = round_half_up(clamp(
        total_volume / WALLET_SMART_VOLUME_DIVISOR + avg_sentiment * WALLET_SMART_SENTIMENT_WEIGHT,
        *WALLET_SMART_BOUNDS,
    ))
    fresh = round_half_up(clamp(
        total_volume / WALLET_NEW_VOLUME_DIVISOR + avg_sentiment * WALLET_NEW_SENTIMENT_WEIGHT,
        *WALLET_NEW_BOUNDS,
    ))
    wakeups = round_half_up(clamp(total_volume / WALLET_WAKEUPS_VOLUME_DIVISOR + avg_sentiment, *WALLET_WAKEUPS_BOUNDS))
    exits = round_half_up(clamp(
        (100 - avg_sentiment) * WALLET_EXITS_SHORTFALL_WEIGHT + total_volume / WALLET_EXITS_VOLUME_DIVISOR,
        *WALLET_EXITS_BOUNDS,
    ))

    return (
        WalletFlow(WALLET_SMART, smart),
        WalletFlow(WALLET_NEW, fresh),
        WalletFlow(WALLET_WAKEUPS, wakeups),
        WalletFlow(WALLET_EXITS, exits),
    )


def build_wallet_flows(tokens: Sequence[ArenaToken]) -> Tuple[WalletFlow, ...]:
    """Classify wallet activity into four buckets from total volume and average sentiment."""
    total_volume = sum(token.volume_24h for token in tokens)
    avg_sentiment = sum(token.sentiment for token in tokens) / len(tokens) if tokens else 0
    return wallet_flow_values(total_volume, avg_sentiment)
