"""Strategy-lab readouts, token comparison and alert rule evaluation."""
import math
from typing import Sequence

import pandas as pd

from datadash.constants import (
    ALERT_METRICS,
    ALERT_OPERATORS,
    BATTLE_INDEX_BOUNDS,
    RISK_HIGH_WHALES,
    RISK_MEDIUM_WHALES,
)
from datadash.data.synthesizer import clamp
from datadash.models import ArenaToken
from datadash.utils import round_half_up


def battle_index(tokens: Sequence[ArenaToken]) -> int:
    """
    Blend average sentiment, whale pressure and turnover into one edge score.

    Returns the lower bound for an empty token list.
    """
    if not tokens:
        return BATTLE_INDEX_BOUNDS[0]

    n = len(tokens)
    avg_sentiment = round_half_up(sum(t.sentiment for t in tokens) / n)
    avg_whales = round_half_up(sum(t.whales for t in tokens) / n)
    avg_velocity = sum(t.volume_24h / max(t.market_cap, 1) for t in tokens) / n

    raw = avg_sentiment + 14 - math.floor(avg_whales / 8) + round_half_up(avg_velocity * 20)
    return int(clamp(raw, *BATTLE_INDEX_BOUNDS))


def risk_temperature(tokens: Sequence[ArenaToken]) -> str:
    if not tokens:
        return "Low"
    avg_whales = round_half_up(sum(t.whales for t in tokens) / len(tokens))
    if avg_whales > RISK_HIGH_WHALES:
        return "High"
    if avg_whales > RISK_MEDIUM_WHALES:
        return "Medium"
    return "Low"


def sentiment_floor(tokens: Sequence[ArenaToken]) -> int:
    if not tokens:
        return 0
    return round_half_up(sum(t.sentiment for t in tokens) / len(tokens))


def correlation(a: Sequence[float], b: Sequence[float]) -> float:
    """Pearson correlation; 0 for mismatched, too short or flat series."""
    if len(a) != len(b) or len(a) < 2:
        return 0.0

    corr = pd.Series(list(a), dtype=float).corr(pd.Series(list(b), dtype=float))
    return 0.0 if pd.isna(corr) else float(corr)


def metric_value(token: ArenaToken, metric: str) -> float:
    """Current value of an alertable metric."""
    if metric not in ALERT_METRICS:
        raise ValueError(f"Unknown alert metric: {metric}")
    if metric == "sentiment":
        return token.sentiment
    if metric == "move":
        return token.price_change[-1] if token.price_change else 0
    return token.volume_24h


def rule_triggered(value: float, operator: str, threshold: float) -> bool:
    if operator not in ALERT_OPERATORS:
        raise ValueError(f"Unknown alert operator: {operator}")
    return value > threshold if operator == ">" else value < threshold
