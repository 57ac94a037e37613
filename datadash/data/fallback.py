"""Hand-authored offline dataset served whenever live data is unavailable."""
from typing import Optional, Sequence, Tuple

from datadash.constants import MIN_TOKENS
from datadash.models import ArenaToken

_FALLBACK_ROWS = [
    {
        "id": "dogecoin", "symbol": "DOGE", "name": "Dogecoin", "chain": "Dogecoin",
        "currentPrice": 0.16, "marketCap": 6200000000, "volume24h": 840000000,
        "holders": 191200, "whales": 73, "sentiment": 71,
        "socials": [54, 58, 63, 67, 65, 70, 71],
        "priceChange": [-1.2, 0.8, 1.4, 2.1, 1.8, 3.2, 2.6],
        "signal": {"momentum": 69, "velocity": 66, "holderStrength": 74, "whalePenalty": 38},
    },
    {
        "id": "shiba-inu", "symbol": "SHIB", "name": "Shiba Inu", "chain": "Ethereum",
        "currentPrice": 0.000023, "marketCap": 5100000000, "volume24h": 760000000,
        "holders": 154800, "whales": 67, "sentiment": 66,
        "socials": [50, 51, 57, 60, 62, 64, 66],
        "priceChange": [-0.8, -0.2, 0.6, 1.9, 1.4, 2.1, 1.8],
        "signal": {"momentum": 62, "velocity": 63, "holderStrength": 70, "whalePenalty": 42},
    },
    {
        "id": "pepe", "symbol": "PEPE", "name": "Pepe", "chain": "Ethereum",
        "currentPrice": 0.000012, "marketCap": 3300000000, "volume24h": 690000000,
        "holders": 117200, "whales": 61, "sentiment": 64,
        "socials": [45, 48, 52, 58, 59, 63, 64],
        "priceChange": [-1.9, -1.1, 0.4, 1.2, 2.5, 1.9, 3.3],
        "signal": {"momentum": 64, "velocity": 68, "holderStrength": 65, "whalePenalty": 45},
    },
    {
        "id": "bonk", "symbol": "BONK", "name": "Bonk", "chain": "Solana",
        "currentPrice": 0.000026, "marketCap": 1500000000, "volume24h": 420000000,
        "holders": 81200, "whales": 53, "sentiment": 59,
        "socials": [39, 44, 47, 52, 55, 57, 59],
        "priceChange": [-2.3, -1.7, -0.2, 0.3, 1.1, 1.7, 1.2],
        "signal": {"momentum": 54, "velocity": 61, "holderStrength": 58, "whalePenalty": 51},
    },
    {
        "id": "dogwifcoin", "symbol": "WIF", "name": "dogwifhat", "chain": "Solana",
        "currentPrice": 2.3, "marketCap": 980000000, "volume24h": 270000000,
        "holders": 60700, "whales": 45, "sentiment": 55,
        "socials": [32, 36, 41, 46, 50, 53, 55],
        "priceChange": [-3.3, -2.6, -1.2, -0.4, 0.1, 0.9, 0.2],
        "signal": {"momentum": 48, "velocity": 56, "holderStrength": 53, "whalePenalty": 57},
    },
    {
        "id": "floki", "symbol": "FLOKI", "name": "Floki", "chain": "Ethereum",
        "currentPrice": 0.00019, "marketCap": 920000000, "volume24h": 220000000,
        "holders": 52400, "whales": 42, "sentiment": 52,
        "socials": [31, 34, 38, 41, 45, 50, 52],
        "priceChange": [-3.9, -3.2, -1.8, -0.9, 0.4, 0.6, 0.5],
        "signal": {"momentum": 46, "velocity": 49, "holderStrength": 51, "whalePenalty": 59},
    },
]

FALLBACK_TOKENS: Tuple[ArenaToken, ...] = tuple(ArenaToken.from_dict(row) for row in _FALLBACK_ROWS)


def fallback_for(
    selected_ids: Optional[Sequence[str]] = None,
    dataset: Sequence[ArenaToken] = FALLBACK_TOKENS,
) -> Tuple[ArenaToken, ...]:
    """
    Return the fallback tokens for a requested id subset.

    The subset is only honoured when at least three of its ids exist in the
    dataset; otherwise the whole dataset is returned.
    """
    if not selected_ids:
        return tuple(dataset)
    wanted = set(selected_ids)
    chosen = tuple(token for token in dataset if token.id in wanted)
    return chosen if len(chosen) >= MIN_TOKENS else tuple(dataset)
