"""Parsing and validation of raw CoinGecko payloads."""
from typing import Any, Dict, List

import pandas as pd

from datadash.utils import setup_logger

logger = setup_logger(__name__)

MARKET_FIELDS = ("id", "current_price", "market_cap", "total_volume")


def clean_price_history(api_response: Dict, coin_id: str = "") -> List[float]:
    """
    Extract the price column of a market_chart response.

    Points are ordered by timestamp and rows whose price is missing or not
    numeric are dropped.

    Args:
        api_response: JSON response from the market_chart endpoint
        coin_id: Coin identifier for logging

    Returns:
        List of prices, oldest first (empty when the response carries none)
    """
    if not isinstance(api_response, dict):
        raise ValueError(f"{coin_id}: invalid market_chart response (expected object)")

    raw = api_response.get("prices") or []
    if not raw:
        return []

    df = pd.DataFrame([point[:2] for point in raw], columns=["ts", "price"])
    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    dropped = int(df["price"].isna().sum())
    if dropped:
        logger.warning(f"{coin_id}: dropped {dropped} non-numeric price point(s)")

    df = df.dropna(subset=["price"]).sort_values("ts", kind="stable")
    return df["price"].astype(float).tolist()


def clean_market_rows(payload: Any) -> Dict[str, Dict[str, Any]]:
    """
    Index a /coins/markets response by coin id.

    Rows missing one of the required fields are skipped; a null 24h change is
    normalized to 0.
    """
    if not isinstance(payload, list):
        raise ValueError("Invalid markets response: expected a list")

    by_id: Dict[str, Dict[str, Any]] = {}
    for row in payload:
        if not isinstance(row, dict) or any(row.get(key) is None for key in MARKET_FIELDS):
            logger.warning(f"Skipping malformed market row: {row!r}")
            continue
        by_id[row["id"]] = {
            "id": row["id"],
            "current_price": float(row["current_price"]),
            "market_cap": float(row["market_cap"]),
            "total_volume": float(row["total_volume"]),
            "price_change_percentage_24h_in_currency": float(
                row.get("price_change_percentage_24h_in_currency") or 0
            ),
        }
    return by_id
